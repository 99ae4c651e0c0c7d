"""Locale handling and UI label catalog."""

from .labels import LabelSet, format_status, labels_for
from .locales import Locale

__all__ = [
    "LabelSet",
    "Locale",
    "format_status",
    "labels_for",
]
