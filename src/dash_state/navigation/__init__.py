"""Selection and viewport state for lists, tables, tabs, and text panes."""

from .errors import EmptyTabsError, SelectionOutOfRangeError
from .list_state import SelectableList
from .step import (
    LINE_STEP,
    PAGE_STEP,
    Direction,
    Navigable,
    StepCommand,
    StepSpeed,
    handle_step,
    step_magnitude,
)
from .table_state import SelectableTable
from .tabs import Route, TabCycle, TabRoute
from .text import GUARD_BAND, ScrollableText

__all__ = [
    "Direction",
    "EmptyTabsError",
    "GUARD_BAND",
    "LINE_STEP",
    "Navigable",
    "PAGE_STEP",
    "Route",
    "ScrollableText",
    "SelectableList",
    "SelectableTable",
    "SelectionOutOfRangeError",
    "StepCommand",
    "StepSpeed",
    "TabCycle",
    "TabRoute",
    "handle_step",
    "step_magnitude",
]
