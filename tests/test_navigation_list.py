from __future__ import annotations

import pytest

from dash_state.navigation import Direction, SelectableList, SelectionOutOfRangeError


def test_empty_list_has_no_selection() -> None:
    nav: SelectableList[str] = SelectableList.empty()

    assert nav.selected is None
    assert nav.selected_item() is None
    nav.scroll_down(1)
    nav.scroll_up(10)
    assert nav.selected is None


def test_with_items_selects_first_row() -> None:
    nav = SelectableList.with_items(["a", "b", "c"])

    assert nav.selected == 0
    assert nav.selected_item() == "a"
    assert nav.items == ("a", "b", "c")
    assert len(nav) == 3


@pytest.mark.parametrize(
    ("length", "start", "amount", "expected"),
    [
        (5, 0, 1, 1),
        (5, 3, 1, 4),
        (5, 4, 1, 0),
        (5, 3, 2, 0),
        (5, 2, 2, 4),
        (3, 0, 10, 0),
        (3, 2, 1, 0),
    ],
)
def test_scroll_down_wraps_past_end(length, start, amount, expected) -> None:
    nav = SelectableList(range(length))
    nav.select(start)

    nav.scroll_down(amount)

    assert nav.selected == expected


@pytest.mark.parametrize(
    ("length", "start", "amount", "expected"),
    [
        (5, 0, 1, 4),
        (5, 0, 3, 2),
        (3, 0, 10, 0),
        (5, 3, 1, 2),
        (5, 3, 10, 0),
    ],
)
def test_scroll_up_wraps_at_top(length, start, amount, expected) -> None:
    nav = SelectableList(range(length))
    nav.select(start)

    nav.scroll_up(amount)

    assert nav.selected == expected


def test_handle_step_scenario() -> None:
    nav = SelectableList.with_items(["a", "b", "c"])

    nav.handle_step(Direction.DOWN, True)
    assert nav.selected == 0

    nav.select(2)
    nav.handle_step(Direction.DOWN, False)
    assert nav.selected == 0

    nav.handle_step(Direction.UP, False)
    assert nav.selected == 2


def test_set_items_resets_selection() -> None:
    nav = SelectableList.with_items(["a", "b", "c"])
    nav.select(2)

    nav.set_items(["x", "y", "z", "w"])
    assert nav.selected == 0

    nav.set_items([])
    assert nav.selected is None


def test_select_out_of_range() -> None:
    nav = SelectableList.with_items(["a"])

    with pytest.raises(SelectionOutOfRangeError) as info:
        nav.select(1)

    assert info.value.index == 1
    assert info.value.length == 1
    assert nav.selected == 0


def test_selection_stays_in_bounds_across_commands() -> None:
    nav = SelectableList(range(7))
    for step in range(60):
        if step % 3:
            nav.scroll_down(step % 11 + 1)
        else:
            nav.scroll_up(step % 4 + 1)
        assert nav.selected is not None
        assert 0 <= nav.selected < len(nav)


@pytest.mark.parametrize("index", [None, "1", 1.0, True])
def test_select_rejects_non_int(index) -> None:
    nav = SelectableList.with_items(["a", "b"])

    with pytest.raises(SelectionOutOfRangeError) as info:
        nav.select(index)  # type: ignore[arg-type]

    assert info.value.index is index
    assert nav.selected == 0
