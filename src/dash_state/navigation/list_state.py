"""Cyclic single-selection list used for menus and append-only logs."""

from __future__ import annotations

from typing import Generic, Iterable, List, Optional, Sequence, TypeVar

from .errors import ensure_index
from .step import DirectionLike, handle_step, saturating_sub

T = TypeVar("T")


class SelectableList(Generic[T]):
    """Ordered items with an optional selection that wraps at both ends.

    Replacing the items resets the selection to the first row; callers that
    need to keep the operator's place across refreshes use
    :class:`~dash_state.navigation.table_state.SelectableTable`.
    """

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items: List[T] = list(items)
        self._selected: Optional[int] = 0 if self._items else None

    @classmethod
    def empty(cls) -> "SelectableList[T]":
        return cls()

    @classmethod
    def with_items(cls, items: Iterable[T]) -> "SelectableList[T]":
        return cls(items)

    @property
    def items(self) -> Sequence[T]:
        return tuple(self._items)

    @property
    def selected(self) -> Optional[int]:
        return self._selected

    def __len__(self) -> int:
        return len(self._items)

    def selected_item(self) -> Optional[T]:
        if self._selected is None:
            return None
        return self._items[self._selected]

    def select(self, index: int) -> None:
        self._selected = ensure_index(index, len(self._items))

    def set_items(self, items: Iterable[T]) -> None:
        self._items = list(items)
        self._selected = 0 if self._items else None

    def handle_step(self, direction: DirectionLike, is_page: bool = False) -> None:
        handle_step(self, direction, is_page)

    def scroll_down(self, amount: int) -> None:
        if not self._items:
            return
        if self._selected is None:
            self._selected = 0
            return
        # past the end loops back to the top
        if self._selected >= saturating_sub(len(self._items), amount):
            self._selected = 0
        else:
            self._selected += amount

    def scroll_up(self, amount: int) -> None:
        if not self._items:
            return
        if self._selected is None:
            self._selected = 0
            return
        if self._selected == 0:
            self._selected = saturating_sub(len(self._items), amount)
        else:
            self._selected = saturating_sub(self._selected, amount)

    def __repr__(self) -> str:
        return f"SelectableList(items={self._items!r}, selected={self._selected!r})"


__all__ = ["SelectableList"]
