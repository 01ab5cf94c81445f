"""Executable Textual demo that hosts the dashboard navigation state."""

from __future__ import annotations

import argparse
import random
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

try:  # pragma: no cover - imported only when demo is run
    from textual import events
    from textual.app import App, ComposeResult
    from textual.containers import Vertical
    from textual.widgets import Footer, Header, Static
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use dash_state.adapters.textual.app"
    ) from exc

from dash_state.navigation import (
    Navigable,
    Route,
    ScrollableText,
    SelectableList,
    SelectableTable,
    TabCycle,
    TabRoute,
)
from dash_state.runtime import telemetry

from .controller import DashboardController, DashboardUIHooks

Row = Tuple[str, str, int]

_STATUSES = ("Running", "Pending", "CrashLoopBackOff", "Completed")


def sample_rows(count: int, rng: Optional[random.Random] = None) -> List[Row]:
    """Fake pod rows; the row count drifts so refreshes shrink and grow."""

    rng = rng or random.Random()
    size = max(count + rng.randint(-3, 3), 0)
    return [
        (f"pod-{i:03d}", rng.choice(_STATUSES), rng.randint(0, 5))
        for i in range(size)
    ]


def default_tabs() -> TabCycle:
    return TabCycle(
        [
            TabRoute("Events", Route(id="events", active_block="events")),
            TabRoute("Pods", Route(id="pods", active_block="pods")),
            TabRoute("Describe", Route(id="describe", active_block="describe")),
        ]
    )


def render_rows(items: Sequence[object], selected: Optional[int]) -> str:
    lines = []
    for index, item in enumerate(items):
        marker = ">" if index == selected else " "
        if isinstance(item, tuple):
            item = "  ".join(str(part) for part in item)
        lines.append(f"{marker} {item}")
    return "\n".join(lines) or "(empty)"


def render_block(block: Navigable) -> str:
    if isinstance(block, ScrollableText):
        return "\n".join(block.lines[block.offset :])
    if isinstance(block, (SelectableList, SelectableTable)):
        return render_rows(block.items, block.selected)
    return ""


def render_tabs(tabs: TabCycle) -> str:
    return " | ".join(
        f"[reverse]{title}[/]" if index == tabs.index else title
        for index, title in enumerate(tabs.titles)
    )


@dataclass
class UIState:
    status_text: str = ""
    active_block: str = ""


def render_status(state: UIState) -> str:
    block = state.active_block or "-"
    return f"[b]{block}[/b]  {state.status_text}".rstrip()


class DashboardApp(App[None]):
    """Tab bar plus one pane per navigation block."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#tab-bar {
		height: 1;
		padding: 0 1;
	}

	.block {
		height: 1fr;
		border: round $accent;
		padding: 0 1;
		display: none;
	}

	.block.-active {
		display: block;
	}

	#status-line {
		height: 1;
		background: $surface-darken-1;
		padding: 0 1;
	}
	"""

    BINDINGS = [
        ("ctrl+c", "quit", "Quit"),
        ("q", "quit", "Quit"),
    ]

    def __init__(self, *, refresh_interval: float = 2.0, rows: int = 25) -> None:
        super().__init__()
        self._state = UIState()
        self._refresh_interval = refresh_interval
        self._rows = rows
        self.controller: DashboardController | None = None
        self._tab_widget: Static | None = None
        self._status_widget: Static | None = None
        self._block_widgets: Dict[str, Static] = {}

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        self._tab_widget = Static("", id="tab-bar")
        yield self._tab_widget
        with Vertical(id="blocks"):
            for name in ("events", "pods", "describe"):
                widget = Static("", id=f"block-{name}", classes="block")
                widget.border_title = name
                self._block_widgets[name] = widget
                yield widget
        self._status_widget = Static("", id="status-line")
        yield self._status_widget
        yield Footer()

    def on_mount(self) -> None:
        events_list = SelectableList.with_items(
            [f"event {i}: pod-{i:03d} scheduled" for i in range(12)]
        )
        pods = SelectableTable.with_items(sample_rows(self._rows))
        describe = ScrollableText(
            "\n".join(f"line {i:02d}: describe output" for i in range(40))
        )
        hooks = DashboardUIHooks(
            update_block=self._update_block,
            update_tab=self._update_tab,
            update_status=self._update_status,
            log=self._log_line,
        )
        self.controller = DashboardController(
            default_tabs(),
            {"events": events_list, "pods": pods, "describe": describe},
            hooks,
        )
        self._show_active()
        self.set_interval(self._refresh_interval, self._refresh_pods)

    def on_key(self, event: events.Key) -> None:
        if not self.controller:
            return
        if event.character and event.character.isdigit():
            consumed = self.controller.select_tab(int(event.character) - 1)
        else:
            consumed = self.controller.handle_key(event.key)
        if consumed:
            self._show_active()
            event.stop()

    def _refresh_pods(self) -> None:
        if self.controller:
            self.controller.refresh_table("pods", sample_rows(self._rows))

    def _show_active(self) -> None:
        if not self.controller:
            return
        active = self.controller.active_block
        for name, widget in self._block_widgets.items():
            widget.set_class(name == active, "-active")
        self._state.active_block = active
        self._render_status()

    def _update_block(self, name: str, block: Navigable) -> None:
        widget = self._block_widgets.get(name)
        if widget:
            widget.update(render_block(block))

    def _update_tab(self, tabs: TabCycle) -> None:
        if self._tab_widget:
            self._tab_widget.update(render_tabs(tabs))

    def _update_status(self, status: str) -> None:
        self._state.status_text = status
        self._render_status()

    def _render_status(self) -> None:
        if not self._status_widget:
            return
        self._status_widget.update(render_status(self._state))

    def _log_line(self, line: str) -> None:
        self.log(line)


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the dashboard navigation demo.")
    parser.add_argument(
        "--refresh-interval",
        type=float,
        default=telemetry.env_float("REFRESH_INTERVAL", 2.0),
        help="Seconds between pod table refreshes (default: 2.0)",
    )
    parser.add_argument(
        "--rows",
        type=int,
        default=telemetry.env_int("ROWS", 25),
        help="Approximate number of pod rows per refresh (default: 25)",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    telemetry.configure(preset="quiet")
    app = DashboardApp(refresh_interval=args.refresh_interval, rows=args.rows)
    app.run()


if __name__ == "__main__":  # pragma: no cover - manual demo
    main()
