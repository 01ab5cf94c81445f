"""Clamped single-selection table that keeps its place across refreshes."""

from __future__ import annotations

import copy
from typing import Generic, Iterable, List, Optional, Sequence, TypeVar

from .errors import ensure_index
from .step import DirectionLike, handle_step, saturating_sub

T = TypeVar("T")


class SelectableTable(Generic[T]):
    """Ordered rows with an optional selection that sticks at both ends."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items: List[T] = []
        self._selected: Optional[int] = None
        self.replace_items(items)

    @classmethod
    def with_items(cls, items: Iterable[T]) -> "SelectableTable[T]":
        return cls(items)

    @property
    def items(self) -> Sequence[T]:
        return tuple(self._items)

    @property
    def selected(self) -> Optional[int]:
        return self._selected

    def __len__(self) -> int:
        return len(self._items)

    def select(self, index: int) -> None:
        self._selected = ensure_index(index, len(self._items))

    def replace_items(self, items: Iterable[T]) -> None:
        """Install ``items`` and re-derive the selection.

        A previously selected row that still exists keeps its index; one
        that fell off the end is clamped to the new last row. An empty
        table has no selection and a fresh table selects the first row.
        """

        self._items = list(items)
        length = len(self._items)
        if not length:
            self._selected = None
        elif self._selected is None:
            self._selected = 0
        elif self._selected >= length:
            self._selected = length - 1

    def current_selection_copy(self) -> Optional[T]:
        """Return a detached copy of the selected row, if any."""

        if not self._items or self._selected is None:
            return None
        return copy.deepcopy(self._items[self._selected])

    def handle_step(self, direction: DirectionLike, is_page: bool = False) -> None:
        handle_step(self, direction, is_page)

    def scroll_down(self, amount: int) -> None:
        if self._selected is None:
            return
        if self._selected + amount < len(self._items):
            self._selected += amount
        else:
            self._selected = saturating_sub(len(self._items), 1)

    def scroll_up(self, amount: int) -> None:
        # the first row stays put; tables never wrap
        if not self._selected:
            return
        self._selected = saturating_sub(self._selected, amount)

    def __repr__(self) -> str:
        return f"SelectableTable(items={self._items!r}, selected={self._selected!r})"


__all__ = ["SelectableTable"]
