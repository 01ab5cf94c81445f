"""UI-agnostic navigation state for terminal dashboards."""

__all__ = [
    "adapters",
    "navigation",
    "runtime",
]

__version__ = "0.1.0"
