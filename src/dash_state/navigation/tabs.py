"""Tab bar state used to switch between dashboard screens."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Sequence

from .errors import EmptyTabsError


@dataclass(frozen=True, slots=True)
class Route:
    """Destination screen plus the block that receives input there."""

    id: str
    active_block: str


@dataclass(frozen=True, slots=True)
class TabRoute:
    title: str
    route: Route


class TabCycle:
    """Non-empty ring of tabs with a mandatory current index."""

    def __init__(self, tabs: Iterable[TabRoute]) -> None:
        self._tabs: List[TabRoute] = list(tabs)
        if not self._tabs:
            raise EmptyTabsError("TabCycle requires at least one tab")
        self.index = 0

    @property
    def tabs(self) -> Sequence[TabRoute]:
        return tuple(self._tabs)

    @property
    def titles(self) -> List[str]:
        return [tab.title for tab in self._tabs]

    def __len__(self) -> int:
        return len(self._tabs)

    def set_index(self, index: int) -> TabRoute:
        """Jump to ``index``; keeping it in range is the caller's job."""

        self.index = index
        return self._tabs[self.index]

    def current(self) -> TabRoute:
        return self._tabs[self.index]

    def current_route(self) -> Route:
        return self._tabs[self.index].route

    def next(self) -> None:
        self.index = (self.index + 1) % len(self._tabs)

    def previous(self) -> None:
        if self.index > 0:
            self.index -= 1
        else:
            self.index = len(self._tabs) - 1


__all__ = ["Route", "TabCycle", "TabRoute"]
