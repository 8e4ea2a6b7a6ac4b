"""Mapping of touch coordinates onto the touchpad canvas."""

from __future__ import annotations

from collections.abc import Iterable

from evtr.geometry import clamp_i32, invert_in_range


def normalize_points(
    points: Iterable[tuple[int, int]],
    min_x: int,
    max_x: int,
    min_y: int,
    max_y: int,
) -> list[tuple[float, float]]:
    """Clamp x into bounds and flip y so the origin is at the top of the canvas."""
    return [
        (float(clamp_i32(x, min_x, max_x)), float(invert_in_range(y, min_y, max_y)))
        for x, y in points
    ]