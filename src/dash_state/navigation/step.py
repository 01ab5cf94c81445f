"""Two-speed step model shared by every navigable collection."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Protocol, Union

LINE_STEP = 1
PAGE_STEP = 10


class Direction(str, Enum):
    UP = "up"
    DOWN = "down"


class StepSpeed(str, Enum):
    LINE = "line"
    PAGE = "page"


class Navigable(Protocol):
    """Anything that can move its selection/offset by a step magnitude."""

    def scroll_up(self, amount: int) -> None:
        ...

    def scroll_down(self, amount: int) -> None:
        ...


DirectionLike = Union[Direction, str, bool]


def step_magnitude(is_page: bool) -> int:
    return PAGE_STEP if is_page else LINE_STEP


def _is_up(direction: DirectionLike) -> bool:
    # a bare bool is an ``up`` flag
    if isinstance(direction, bool):
        return direction
    return Direction(direction) is Direction.UP


def handle_step(target: Navigable, direction: DirectionLike, is_page: bool) -> None:
    """Resolve the step magnitude and dispatch to ``target``'s primitive."""

    amount = step_magnitude(is_page)
    if _is_up(direction):
        target.scroll_up(amount)
    else:
        target.scroll_down(amount)


def saturating_sub(value: int, amount: int) -> int:
    return max(value - amount, 0)


@dataclass(frozen=True, slots=True)
class StepCommand:
    """A navigation request already decided by the input layer."""

    direction: Direction
    speed: StepSpeed = StepSpeed.LINE

    @property
    def is_page(self) -> bool:
        return self.speed is StepSpeed.PAGE

    @property
    def magnitude(self) -> int:
        return step_magnitude(self.is_page)

    def apply(self, target: Navigable) -> None:
        handle_step(target, self.direction, self.is_page)


__all__ = [
    "Direction",
    "DirectionLike",
    "LINE_STEP",
    "Navigable",
    "PAGE_STEP",
    "StepCommand",
    "StepSpeed",
    "handle_step",
    "saturating_sub",
    "step_magnitude",
]
