"""Minimal text editor built around a UI-agnostic document state tracker."""

__all__ = [
    "adapters",
    "config",
    "document",
    "i18n",
    "runtime",
]

__version__ = "0.1.0"
