"""Rectangle fitting and coordinate normalisation helpers for drawing panels."""

from __future__ import annotations

from dataclasses import dataclass

_U16_MAX = 0xFFFF
_I32_MAX = 2**31 - 1


@dataclass(frozen=True)
class Rect:
    """A terminal-cell rectangle."""

    x: int
    y: int
    width: int
    height: int


def _sat_sub(left: int, right: int) -> int:
    return max(0, left - right)


def fit_centered_aspect_rect(area: Rect, aspect_ratio: int) -> Rect | None:
    """Largest rectangle of the given width/height ratio centred in ``area``."""
    if area.width < 2 or area.height < 2:
        return None

    aspect_ratio = max(aspect_ratio, 1)
    height = min(area.height, area.width // aspect_ratio)
    width = min(height * aspect_ratio, _U16_MAX)
    if width < 2 or height < 2:
        return None

    x = area.x + _sat_sub(area.width, width) // 2
    y = area.y + _sat_sub(area.height, height) // 2
    return Rect(x, y, width, height)


def _gap_if_room(total_width: int, preferred_gap: int) -> int:
    return preferred_gap if total_width > min(preferred_gap * 2, _U16_MAX) else 0


def centered_pair(area: Rect, preferred_gap: int) -> tuple[Rect, Rect]:
    """Split ``area`` into two equal side-by-side halves, centred, with a gap if it fits."""
    gap = _gap_if_room(area.width, preferred_gap)
    width_each = _sat_sub(area.width, gap) // 2
    total = width_each * 2 + gap
    start_x = area.x + _sat_sub(area.width, total) // 2
    left = Rect(start_x, area.y, width_each, area.height)
    right = Rect(start_x + width_each + gap, area.y, width_each, area.height)
    return left, right


def inset_rect(rect: Rect, padding: int) -> Rect:
    """Shrink ``rect`` by ``padding`` on every side unless that would collapse it."""
    if rect.width <= padding * 2 or rect.height <= padding * 2:
        return rect
    return Rect(
        rect.x + padding,
        rect.y + padding,
        rect.width - padding * 2,
        rect.height - padding * 2,
    )


def _ordered_range(value_range: tuple[int, int]) -> tuple[int, int]:
    low, high = value_range
    return (high, low) if low > high else (low, high)


def clamp_i32(value: int, minimum: int, maximum: int) -> int:
    """Clamp ``value`` into ``[minimum, maximum]``."""
    if value < minimum:
        return minimum
    if value > maximum:
        return maximum
    return value


def normalize_ratio(value: int, minimum: int, maximum: int) -> float:
    """Position of ``value`` within the range as a fraction in ``[0, 1]``."""
    minimum, maximum = _ordered_range((minimum, maximum))
    span = maximum - minimum
    if span == 0:
        return 0.5
    ratio = (clamp_i32(value, minimum, maximum) - minimum) / span
    return min(max(ratio, 0.0), 1.0)


def signed_unit_point(x_ratio: float, y_ratio: float, invert_y: bool) -> tuple[float, float]:
    """Map ratios in ``[0, 1]`` onto ``[-1, 1]``, optionally flipping the y axis."""
    y = 1.0 - y_ratio * 2.0 if invert_y else y_ratio * 2.0 - 1.0
    return x_ratio * 2.0 - 1.0, y


def canvas_range(value_range: tuple[int, int]) -> tuple[int, int]:
    """Order a range and widen a zero-width one by one unit."""
    minimum, maximum = _ordered_range(value_range)
    if minimum == maximum:
        maximum = min(minimum + 1, _I32_MAX)
    return minimum, maximum


def invert_in_range(value: int, minimum: int, maximum: int) -> int:
    """Mirror ``value`` within ``[minimum, maximum]`` after clamping it."""
    return maximum - (clamp_i32(value, minimum, maximum) - minimum)


def coord_from_index(index: int, total: int) -> float:
    """Map a grid index onto the ``[-1, 1]`` canvas extent."""
    if total <= 1:
        return 0.0
    return -1.0 + index * 2.0 / (total - 1.0)