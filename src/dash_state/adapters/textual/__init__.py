"""Textual host adapter for dashboard navigation."""

from .controller import (
    DashboardController,
    DashboardUIHooks,
    TabCommand,
    UnknownBlockError,
    key_to_command,
)

__all__ = [
    "DashboardController",
    "DashboardUIHooks",
    "TabCommand",
    "UnknownBlockError",
    "key_to_command",
]
