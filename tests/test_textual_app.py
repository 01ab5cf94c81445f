from __future__ import annotations

from dash_state.adapters.textual.app import (
    UIState,
    default_tabs,
    render_status,
    render_tabs,
)


def test_render_status_reads_ui_state() -> None:
    state = UIState(status_text="pods selected=2", active_block="pods")

    assert render_status(state) == "[b]pods[/b]  pods selected=2"


def test_render_status_before_first_update() -> None:
    assert render_status(UIState()) == "[b]-[/b]"


def test_render_tabs_highlights_current() -> None:
    tabs = default_tabs()
    tabs.next()

    assert render_tabs(tabs) == "Events | [reverse]Pods[/] | Describe"
