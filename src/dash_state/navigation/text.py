"""Read-only text pane with a vertical viewport offset."""

from __future__ import annotations

from typing import List, Sequence

from .step import DirectionLike, handle_step, saturating_sub

GUARD_BAND = 2


class ScrollableText:
    """Viewport over a static block of text split into lines.

    The offset never advances so far that fewer than ``GUARD_BAND`` lines
    remain below the advance point, so the tail of the document stays on
    screen instead of scrolling out of view.
    """

    __slots__ = ("_lines", "offset")

    def __init__(self, text: str = "") -> None:
        self._lines: List[str] = text.split("\n")
        self.offset = 0

    @classmethod
    def empty(cls) -> "ScrollableText":
        return cls("")

    @property
    def lines(self) -> Sequence[str]:
        return tuple(self._lines)

    @property
    def line_count(self) -> int:
        return len(self._lines)

    def get_text(self) -> str:
        return "\n".join(self._lines)

    def handle_step(self, direction: DirectionLike, is_page: bool = False) -> None:
        handle_step(self, direction, is_page)

    def scroll_down(self, amount: int) -> None:
        if self.offset < saturating_sub(len(self._lines), amount + GUARD_BAND):
            self.offset += amount

    def scroll_up(self, amount: int) -> None:
        if self.offset > 0:
            self.offset = saturating_sub(self.offset, amount)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ScrollableText):
            return NotImplemented
        return self._lines == other._lines and self.offset == other.offset

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"ScrollableText(lines={len(self._lines)}, offset={self.offset})"


__all__ = ["GUARD_BAND", "ScrollableText"]
