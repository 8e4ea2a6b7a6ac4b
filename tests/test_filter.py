from evtr.filter import (
    FilterState,
    filtered_indexes_by_query,
    fuzzy_score,
    selected_item_index,
)


def identity(item):
    return item


def test_filtered_indexes_by_query_returns_all_items_for_empty_query():
    assert filtered_indexes_by_query(["usb mouse", "gamepad"], "", identity) == [0, 1]


def test_filtered_indexes_by_query_returns_empty_when_nothing_matches():
    assert filtered_indexes_by_query(["usb mouse", "gamepad"], "keyboard", identity) == []


def test_filtered_indexes_by_query_keeps_only_matches():
    assert filtered_indexes_by_query(["alpha", "beta", "gamma"], "g", identity) == [2]


def test_filtered_indexes_by_query_uses_identifier_function():
    items = [("a", "usb mouse"), ("b", "gamepad")]
    assert filtered_indexes_by_query(items, "pad", lambda item: item[1]) == [1]


def test_selected_item_index_uses_selected_filtered_index():
    assert selected_item_index([2, 5, 7], 1) == 5
    assert selected_item_index([2, 5, 7], 4) is None


def test_move_selection_by_clamps_to_the_filtered_bounds():
    state = FilterState(3, 10)
    state.move_selection_by(10)
    assert state.selected_index == 2
    state.move_selection_by(-10)
    assert state.selected_index == 0


def test_select_last_uses_the_last_filtered_match():
    state = FilterState(4, 10)
    state.select_last()
    assert state.selected_item_index() == 3


def test_page_navigation_uses_the_shared_page_size():
    state = FilterState(25, 10)
    state.page_down()
    assert state.selected_index == 10
    state.page_down()
    assert state.selected_index == 20
    state.page_up()
    assert state.selected_index == 10


def test_home_and_end_move_to_the_extremes():
    state = FilterState(5, 2)
    state.end()
    assert state.selected_index == 4
    state.home()
    assert state.selected_index == 0


def test_move_on_empty_list_keeps_cursor_at_zero():
    state = FilterState(0, 10)
    state.move_down()
    state.end()
    assert state.selected_index == 0
    assert state.selected_item_index() is None


def test_query_editing_and_refresh():
    items = ["gamepad", "gyro pad", "mouse"]
    state = FilterState(3, 10)
    state.add_char("g")
    state.add_char("y")
    assert state.query == "gy"
    assert state.has_query()
    state.refresh(items, identity)
    assert state.indexes == [1]
    state.remove_char()
    state.refresh(items, identity)
    assert state.indexes == [0, 1]
    state.clear_search()
    assert not state.has_query()
    state.refresh(items, identity)
    assert state.indexes == [0, 1, 2]


def test_refresh_resets_selection():
    state = FilterState(3, 10)
    state.move_down()
    state.refresh(["a", "b", "c"], identity)
    assert state.selected_index == 0


def test_fuzzy_score_is_smart_case():
    assert fuzzy_score("gamepad", "G") is None
    lower = fuzzy_score("Gamepad", "g")
    assert lower is not None and lower > 0


def test_fuzzy_score_prefers_consecutive_matches():
    assert fuzzy_score("abc", "abc") > fuzzy_score("axbxc", "abc")


def test_fuzzy_score_rejects_out_of_order_characters():
    assert fuzzy_score("mouse", "esm") is None