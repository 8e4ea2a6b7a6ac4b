"""Focus, popup and scroll state of the device monitor screen."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from enum import Enum


class Focus(Enum):
    """Which panel receives scroll commands."""

    AXES = "axes"
    BUTTONS = "buttons"


class ActivePopup(Enum):
    """Popup currently drawn over the monitor."""

    NONE = "none"
    INFO = "info"
    HELP = "help"


class StartupFocus(Enum):
    """Configured focus when the monitor opens."""

    AUTO = "auto"
    AXES = "axes"
    BUTTONS = "buttons"


@dataclass(frozen=True)
class Counts:
    """How many absolute axes, relative axes and buttons a device has."""

    absolute: int
    relative: int
    buttons: int

    def total_axes(self) -> int:
        """Absolute and relative axes together."""
        return self.absolute + self.relative

    def has_buttons(self) -> bool:
        return self.buttons > 0


@dataclass(frozen=True)
class ScrollLimits:
    """Furthest scroll positions and whether each panel overflows at all."""

    axes_max: int
    button_row_max_start: int
    axes_overflow: bool
    buttons_overflow: bool


def step_offset(current: int, direction: int, overflow: bool, maximum: int) -> int:
    """Move an offset one step in ``direction``, kept within ``[0, maximum]``."""
    if not overflow:
        return current
    if direction < 0:
        return max(current - 1, 0)
    if direction > 0:
        return min(current + 1, maximum)
    return current


@dataclass(frozen=True)
class ScrollCursor:
    """Scroll offsets of the axes panel and the button grid."""

    axis: int
    button_row: int

    def step(self, focus: Focus, direction: int, limits: ScrollLimits) -> ScrollCursor:
        """One scroll step on the focused panel."""
        if direction == 0:
            return self
        if focus is Focus.AXES:
            return dataclasses.replace(
                self,
                axis=step_offset(self.axis, direction, limits.axes_overflow, limits.axes_max),
            )
        return dataclasses.replace(
            self,
            button_row=step_offset(
                self.button_row,
                direction,
                limits.buttons_overflow,
                limits.button_row_max_start,
            ),
        )

    def home(self, focus: Focus) -> ScrollCursor:
        """Scroll the focused panel to its start."""
        if focus is Focus.AXES:
            return dataclasses.replace(self, axis=0)
        return dataclasses.replace(self, button_row=0)

    def end(self, focus: Focus, limits: ScrollLimits) -> ScrollCursor:
        """Scroll the focused panel to its end."""
        if focus is Focus.AXES:
            return dataclasses.replace(self, axis=limits.axes_max)
        return dataclasses.replace(self, button_row=limits.button_row_max_start)


def initial_focus(counts: Counts, startup_focus: StartupFocus) -> Focus:
    """Focus to start with; AUTO prefers axes when the device has any."""
    if startup_focus is StartupFocus.AXES:
        return Focus.AXES
    if startup_focus is StartupFocus.BUTTONS:
        return Focus.BUTTONS
    return Focus.AXES if counts.total_axes() > 0 else Focus.BUTTONS


def toggled_popup(current: ActivePopup, target: ActivePopup) -> ActivePopup:
    """Close ``target`` if it is open, otherwise open it in place of any other."""
    return ActivePopup.NONE if current is target else target


def next_focus(current: Focus, focusable: bool) -> Focus:
    """The other panel, when both panels can take focus."""
    if not focusable:
        return current
    return Focus.BUTTONS if current is Focus.AXES else Focus.AXES


@dataclass
class MonitorState:
    """Interactive state of the monitor: focus, popups, scrolling and y inversion."""

    counts: Counts
    info_lines: list[str]
    startup_focus: StartupFocus
    joystick_invert_y: bool
    focus: Focus = field(init=False)
    active_popup: ActivePopup = field(init=False, default=ActivePopup.NONE)
    axis_scroll: int = field(init=False, default=0)
    button_row_scroll: int = field(init=False, default=0)

    def __post_init__(self) -> None:
        self.info_lines = list(self.info_lines)
        self.focus = initial_focus(self.counts, self.startup_focus)

    def toggle_invert_y(self) -> None:
        self.joystick_invert_y = not self.joystick_invert_y

    def toggle_info(self) -> None:
        self.active_popup = toggled_popup(self.active_popup, ActivePopup.INFO)

    def toggle_help(self) -> None:
        self.active_popup = toggled_popup(self.active_popup, ActivePopup.HELP)

    def focus_next(self, focus: Focus, focusable: bool) -> None:
        """Move focus on from ``focus`` when both panels are focusable."""
        self.focus = next_focus(focus, focusable)

    def focus_prev(self, focus: Focus, focusable: bool) -> None:
        """With two panels, going back is the same as going forward."""
        self.focus_next(focus, focusable)

    def sync(self, focus: Focus, axis: int, button_row: int) -> None:
        """Adopt focus and scroll positions settled by layout."""
        self.focus = focus
        self._apply(ScrollCursor(axis, button_row))

    def scroll_by(self, direction: int, focus: Focus, limits: ScrollLimits) -> None:
        """Scroll the focused panel one step."""
        self._apply(self._cursor().step(focus, direction, limits))

    def scroll_page(
        self, direction: int, focus: Focus, limits: ScrollLimits, steps: int
    ) -> None:
        """Scroll the focused panel ``steps`` steps."""
        if direction == 0:
            return
        cursor = self._cursor()
        for _ in range(steps):
            cursor = cursor.step(focus, direction, limits)
        self._apply(cursor)

    def scroll_home(self, focus: Focus) -> None:
        self._apply(self._cursor().home(focus))

    def scroll_end(self, focus: Focus, limits: ScrollLimits) -> None:
        self._apply(self._cursor().end(focus, limits))

    def _cursor(self) -> ScrollCursor:
        return ScrollCursor(self.axis_scroll, self.button_row_scroll)

    def _apply(self, cursor: ScrollCursor) -> None:
        self.axis_scroll = cursor.axis
        self.button_row_scroll = cursor.button_row