import pytest

from evtr.monitor_state import (
    ActivePopup,
    Counts,
    Focus,
    MonitorState,
    ScrollCursor,
    ScrollLimits,
    StartupFocus,
    initial_focus,
    next_focus,
    step_offset,
    toggled_popup,
)

LIMITS = ScrollLimits(
    axes_max=7, button_row_max_start=5, axes_overflow=True, buttons_overflow=True
)


def make_state(counts=Counts(1, 0, 1), focus=StartupFocus.AUTO, invert=True):
    return MonitorState(counts, [], focus, invert)


def test_new_prefers_axes_focus_when_any_axes_exist():
    state = MonitorState(Counts(1, 0, 3), ["info"], StartupFocus.AUTO, True)
    assert state.focus is Focus.AXES


def test_new_falls_back_to_buttons_focus_when_no_axes_exist():
    state = MonitorState(Counts(0, 0, 3), ["info"], StartupFocus.AUTO, True)
    assert state.focus is Focus.BUTTONS


def test_new_preserves_info_lines_and_defaults():
    state = MonitorState(
        Counts(0, 1, 2),
        ["name: pad", "path: /dev/input/event3"],
        StartupFocus.AUTO,
        True,
    )
    assert state.info_lines == ["name: pad", "path: /dev/input/event3"]
    assert state.active_popup is ActivePopup.NONE
    assert state.axis_scroll == 0
    assert state.button_row_scroll == 0
    assert state.joystick_invert_y is True


def test_new_honors_explicit_button_focus():
    state = MonitorState(Counts(2, 0, 2), ["info"], StartupFocus.BUTTONS, False)
    assert state.focus is Focus.BUTTONS
    assert state.joystick_invert_y is False


def test_initial_focus_explicit_axes_without_axes():
    assert initial_focus(Counts(0, 0, 4), StartupFocus.AXES) is Focus.AXES


def test_counts_totals():
    counts = Counts(2, 3, 0)
    assert counts.total_axes() == 5
    assert counts.has_buttons() is False
    assert Counts(0, 0, 1).has_buttons() is True


def test_toggle_invert_y_flips():
    state = make_state(invert=True)
    state.toggle_invert_y()
    assert state.joystick_invert_y is False
    state.toggle_invert_y()
    assert state.joystick_invert_y is True


def test_toggled_popup_switches_between_help_and_info():
    assert toggled_popup(ActivePopup.NONE, ActivePopup.INFO) is ActivePopup.INFO
    assert toggled_popup(ActivePopup.INFO, ActivePopup.INFO) is ActivePopup.NONE
    assert toggled_popup(ActivePopup.HELP, ActivePopup.INFO) is ActivePopup.INFO


def test_next_focus_cycles_only_when_both_sections_are_focusable():
    assert next_focus(Focus.AXES, True) is Focus.BUTTONS
    assert next_focus(Focus.BUTTONS, True) is Focus.AXES
    assert next_focus(Focus.AXES, False) is Focus.AXES


def test_toggle_help_closes_when_called_twice():
    state = make_state()
    state.toggle_help()
    assert state.active_popup is ActivePopup.HELP
    state.toggle_help()
    assert state.active_popup is ActivePopup.NONE


def test_toggle_info_closes_when_called_twice():
    state = make_state()
    state.toggle_info()
    assert state.active_popup is ActivePopup.INFO
    state.toggle_info()
    assert state.active_popup is ActivePopup.NONE


def test_toggle_help_and_info_replace_each_other():
    state = make_state()
    state.toggle_help()
    assert state.active_popup is ActivePopup.HELP
    state.toggle_info()
    assert state.active_popup is ActivePopup.INFO
    state.toggle_help()
    assert state.active_popup is ActivePopup.HELP


def test_focus_prev_uses_the_same_cycle_behavior_as_focus_next():
    state = make_state()
    state.focus_prev(Focus.AXES, True)
    assert state.focus is Focus.BUTTONS
    state.focus_prev(Focus.BUTTONS, True)
    assert state.focus is Focus.AXES
    state.focus_prev(Focus.AXES, False)
    assert state.focus is Focus.AXES


@pytest.mark.parametrize(
    ("current", "direction", "overflow", "maximum", "expected"),
    [(2, 1, False, 10, 2), (2, 1, True, 10, 3), (0, -1, True, 10, 0), (10, 1, True, 10, 10)],
)
def test_step_offset_moves_only_when_overflow_is_enabled(
    current, direction, overflow, maximum, expected
):
    assert step_offset(current, direction, overflow, maximum) == expected


def test_scroll_cursor_end_only_updates_the_focused_target():
    cursor = ScrollCursor(axis=1, button_row=2)
    assert cursor.end(Focus.AXES, LIMITS) == ScrollCursor(axis=7, button_row=2)
    assert cursor.end(Focus.BUTTONS, LIMITS) == ScrollCursor(axis=1, button_row=5)


def test_scroll_cursor_home_only_updates_the_focused_target():
    cursor = ScrollCursor(axis=3, button_row=4)
    assert cursor.home(Focus.AXES) == ScrollCursor(axis=0, button_row=4)
    assert cursor.home(Focus.BUTTONS) == ScrollCursor(axis=3, button_row=0)


def test_scroll_cursor_step_only_updates_the_focused_target():
    cursor = ScrollCursor(axis=1, button_row=2)
    limits = ScrollLimits(
        axes_max=4, button_row_max_start=5, axes_overflow=True, buttons_overflow=True
    )
    assert cursor.step(Focus.AXES, 1, limits) == ScrollCursor(axis=2, button_row=2)
    assert cursor.step(Focus.BUTTONS, 1, limits) == ScrollCursor(axis=1, button_row=3)


def test_scroll_page_zero_is_a_no_op():
    state = make_state()
    state.axis_scroll = 2
    state.button_row_scroll = 3
    state.scroll_page(0, Focus.AXES, LIMITS, 10)
    assert state.axis_scroll == 2
    assert state.button_row_scroll == 3


def test_scroll_page_clamps_to_limit():
    state = make_state()
    state.scroll_page(1, Focus.AXES, LIMITS, 10)
    assert state.axis_scroll == 7
    assert state.button_row_scroll == 0


def test_sync_updates_focus_and_scroll_positions():
    state = make_state()
    state.sync(Focus.BUTTONS, 4, 2)
    assert state.focus is Focus.BUTTONS
    assert state.axis_scroll == 4
    assert state.button_row_scroll == 2


def test_scroll_by_home_and_end_on_buttons():
    state = make_state()
    state.scroll_by(1, Focus.BUTTONS, LIMITS)
    assert state.button_row_scroll == 1
    state.scroll_end(Focus.BUTTONS, LIMITS)
    assert state.button_row_scroll == 5
    state.scroll_home(Focus.BUTTONS)
    assert state.button_row_scroll == 0
    assert state.axis_scroll == 0