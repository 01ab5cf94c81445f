"""Errors raised when callers break a navigation precondition."""

from __future__ import annotations


class SelectionOutOfRangeError(IndexError):
    """Raised when an explicit selection falls outside the item bounds."""

    def __init__(self, index: object, *, length: int) -> None:
        super().__init__(f"Selection {index} out of range for {length} items")
        self.index = index
        self.length = length


class EmptyTabsError(ValueError):
    """Raised when a tab cycle is built without any tabs."""


def ensure_index(index: object, length: int) -> int:
    # bool is an int subclass but never a row index
    if not isinstance(index, int) or isinstance(index, bool):
        raise SelectionOutOfRangeError(index, length=length)
    if index < 0 or index >= length:
        raise SelectionOutOfRangeError(index, length=length)
    return index
