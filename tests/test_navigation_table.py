from __future__ import annotations

from typing import Dict, List

import pytest

from dash_state.navigation import Direction, SelectableTable, SelectionOutOfRangeError


def test_new_table_is_empty_and_unselected() -> None:
    table: SelectableTable[str] = SelectableTable()

    assert len(table) == 0
    assert table.selected is None
    assert table.current_selection_copy() is None


def test_replace_items_default_and_retained_selection() -> None:
    table: SelectableTable[str] = SelectableTable()

    table.replace_items(["a", "b"])
    assert table.selected == 0

    table.select(1)
    table.replace_items(["a", "b", "c"])
    assert table.selected == 1

    table.select(2)
    table.replace_items(["a", "b"])
    assert table.selected == 1


@pytest.mark.parametrize(
    ("new_length", "expected"),
    [(3, 1), (2, 1), (1, 0), (0, None), (8, 1)],
)
def test_replace_preserves_or_clamps(new_length, expected) -> None:
    table = SelectableTable.with_items(["a", "b", "c"])
    table.select(1)

    table.replace_items(list(range(new_length)))

    assert table.selected == expected


def test_replace_after_empty_reselects_first_row() -> None:
    table = SelectableTable.with_items(["a", "b", "c"])
    table.select(2)
    table.replace_items([])

    table.replace_items(["x", "y", "z"])

    assert table.selected == 0


def test_scroll_clamps_without_wrapping() -> None:
    table = SelectableTable.with_items(["a", "b"])

    table.scroll_down(1)
    assert table.selected == 1
    table.scroll_down(1)
    assert table.selected == 1
    table.scroll_up(1)
    assert table.selected == 0
    table.scroll_up(1)
    assert table.selected == 0
    table.scroll_down(10)
    assert table.selected == 1


def test_handle_step_line_and_page() -> None:
    table = SelectableTable.with_items(["A", "B", "C"])

    table.handle_step(Direction.DOWN, False)
    assert table.selected == 1
    table.handle_step(Direction.DOWN, False)
    assert table.selected == 2
    table.handle_step(Direction.DOWN, False)
    assert table.selected == 2
    table.handle_step(Direction.UP, False)
    assert table.selected == 1
    table.handle_step(Direction.DOWN, True)
    assert table.selected == 2
    table.handle_step(Direction.UP, True)
    assert table.selected == 0


def test_scroll_on_empty_table_is_noop() -> None:
    table: SelectableTable[int] = SelectableTable()

    table.scroll_down(1)
    table.scroll_up(1)

    assert table.selected is None


def test_current_selection_copy_is_detached() -> None:
    rows: List[Dict[str, str]] = [{"name": "pod-a"}, {"name": "pod-b"}]
    table = SelectableTable.with_items(rows)
    table.select(1)

    copied = table.current_selection_copy()
    assert copied == {"name": "pod-b"}
    assert copied is not rows[1]

    copied["name"] = "changed"
    table.replace_items([{"name": "pod-c"}])

    assert rows[1]["name"] == "pod-b"
    assert table.current_selection_copy() == {"name": "pod-c"}


def test_select_out_of_range() -> None:
    table = SelectableTable.with_items(["a", "b"])

    with pytest.raises(SelectionOutOfRangeError):
        table.select(-1)
    assert table.selected == 0


def test_selection_tracks_bounds_under_refresh_and_scroll() -> None:
    table: SelectableTable[int] = SelectableTable()
    lengths = [4, 0, 9, 2, 2, 15, 1, 0, 6]
    for round_, length in enumerate(lengths):
        table.replace_items(range(length))
        table.scroll_down(round_ * 3)
        table.scroll_up(round_)
        if length == 0:
            assert table.selected is None
        else:
            assert table.selected is not None
            assert 0 <= table.selected < length


def test_select_none_keeps_selection() -> None:
    table = SelectableTable.with_items(["a", "b"])
    table.select(1)

    with pytest.raises(SelectionOutOfRangeError) as info:
        table.select(None)  # type: ignore[arg-type]

    assert info.value.index is None
    assert info.value.length == 2
    assert table.selected == 1
