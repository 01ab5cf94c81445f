"""Routes decided key commands to the active navigation block."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Iterable, Mapping, Optional, Union

from dash_state.navigation import (
    Direction,
    Navigable,
    ScrollableText,
    SelectableList,
    SelectableTable,
    StepCommand,
    StepSpeed,
    TabCycle,
)
from dash_state.runtime import telemetry


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


class UnknownBlockError(KeyError):
    """Raised when the controller is asked about a block it does not own."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name


class TabCommand(str, Enum):
    NEXT = "next"
    PREVIOUS = "previous"


Command = Union[StepCommand, TabCommand]

_KEY_COMMANDS: Dict[str, Command] = {
    "up": StepCommand(Direction.UP),
    "k": StepCommand(Direction.UP),
    "down": StepCommand(Direction.DOWN),
    "j": StepCommand(Direction.DOWN),
    "pageup": StepCommand(Direction.UP, StepSpeed.PAGE),
    "pagedown": StepCommand(Direction.DOWN, StepSpeed.PAGE),
    "tab": TabCommand.NEXT,
    "right": TabCommand.NEXT,
    "shift+tab": TabCommand.PREVIOUS,
    "left": TabCommand.PREVIOUS,
}


def key_to_command(key: str) -> Optional[Command]:
    return _KEY_COMMANDS.get(key.strip().lower())


def describe_position(block: Navigable) -> str:
    if isinstance(block, ScrollableText):
        return f"offset={block.offset}"
    if isinstance(block, (SelectableList, SelectableTable)):
        return f"selected={block.selected}"
    return "?"


@dataclass(slots=True)
class DashboardUIHooks:
    """Callbacks the controller invokes so the host can repaint."""

    update_block: Callable[[str, Navigable], None]
    update_tab: Callable[[TabCycle], None] = _noop
    update_status: Callable[[str], None] = _noop
    log: Callable[[str], None] = _noop


class DashboardController:
    """Owns one navigation component per on-screen block plus the tab bar."""

    def __init__(
        self,
        tabs: TabCycle,
        blocks: Mapping[str, Navigable],
        hooks: DashboardUIHooks,
        *,
        active_block: Optional[str] = None,
    ) -> None:
        self.tabs = tabs
        self.hooks = hooks
        self._blocks: Dict[str, Navigable] = dict(blocks)
        self._active = active_block or tabs.current_route().active_block
        if self._active not in self._blocks:
            raise UnknownBlockError(self._active)
        self.logger = telemetry.get_logger("dash_state.controller")
        self.hooks.update_tab(self.tabs)
        for name, block in self._blocks.items():
            self.hooks.update_block(name, block)

    @property
    def active_block(self) -> str:
        return self._active

    @property
    def block_names(self) -> tuple[str, ...]:
        return tuple(self._blocks)

    def block(self, name: str) -> Navigable:
        try:
            return self._blocks[name]
        except KeyError:
            raise UnknownBlockError(name) from None

    def activate(self, name: str) -> None:
        self.block(name)
        self._active = name
        self.hooks.update_status(f"block::{name}")

    def handle_key(self, key: str) -> bool:
        """Apply the command bound to ``key``; return whether it was used."""

        command = key_to_command(key)
        self._log_state("key ->", key=key, command=command)
        if command is None:
            return False
        with telemetry.span(
            name="controller::key",
            component=True,
            metadata={"key": key, "block": self._active},
        ):
            if isinstance(command, TabCommand):
                if command is TabCommand.NEXT:
                    self.next_tab()
                else:
                    self.previous_tab()
            else:
                self.step(command)
        return True

    def step(self, command: StepCommand, *, block: Optional[str] = None) -> None:
        name = block or self._active
        target = self.block(name)
        command.apply(target)
        position = describe_position(target)
        telemetry.record_event(
            "nav.step",
            level="debug",
            data={
                "block": name,
                "direction": command.direction.value,
                "magnitude": command.magnitude,
                "position": position,
            },
        )
        self.hooks.update_block(name, target)
        self.hooks.update_status(f"{name} {position}")

    def next_tab(self) -> None:
        self.tabs.next()
        self._after_tab_change()

    def previous_tab(self) -> None:
        self.tabs.previous()
        self._after_tab_change()

    def select_tab(self, index: int) -> bool:
        # set_index trusts its caller, so the range check lives here
        if not 0 <= index < len(self.tabs):
            return False
        self.tabs.set_index(index)
        self._after_tab_change()
        return True

    def refresh_table(self, name: str, items: Iterable[object]) -> None:
        """Swap in fresh rows, keeping the operator's place when possible."""

        target = self.block(name)
        if not isinstance(target, SelectableTable):
            raise TypeError(f"Block '{name}' is not a table")
        before = target.selected
        target.replace_items(items)
        telemetry.record_event(
            "nav.refresh",
            level="debug",
            data={
                "block": name,
                "rows": len(target),
                "selected_before": before,
                "selected_after": target.selected,
            },
        )
        self.hooks.update_block(name, target)

    def set_text(self, name: str, text: str) -> ScrollableText:
        """Rebuild a text pane; the viewport starts again at the top."""

        current = self.block(name)
        if not isinstance(current, ScrollableText):
            raise TypeError(f"Block '{name}' is not a text pane")
        pane = ScrollableText(text)
        self._blocks[name] = pane
        self.hooks.update_block(name, pane)
        return pane

    def _after_tab_change(self) -> None:
        route = self.tabs.current_route()
        if route.active_block in self._blocks:
            self._active = route.active_block
        telemetry.record_event(
            "nav.tab",
            data={"index": self.tabs.index, "route": route.id, "block": self._active},
        )
        self.hooks.update_tab(self.tabs)
        self.hooks.update_status(f"tab::{self.tabs.current().title}")

    def _log_state(self, prefix: str, **fields: object) -> None:
        snapshot: Dict[str, object] = {
            "tab": self.tabs.index,
            "block": self._active,
            "position": describe_position(self._blocks[self._active]),
        }
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix] + [f"{key}={value!r}" for key, value in snapshot.items()]
        self.hooks.log(" ".join(parts))


__all__ = [
    "DashboardController",
    "DashboardUIHooks",
    "TabCommand",
    "UnknownBlockError",
    "describe_position",
    "key_to_command",
]
