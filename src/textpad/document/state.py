"""Mutable document state owned by the tracker."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from textpad.i18n import Locale

DEFAULT_FONT_FAMILY = "Monospace"
DEFAULT_FONT_SIZE = 12


@dataclass(slots=True)
class DocumentState:
    """Text buffer, file binding, font selection and UI language."""

    text: str = ""
    bound_file: Optional[Path] = None
    font_family: str = DEFAULT_FONT_FAMILY
    font_size: int = DEFAULT_FONT_SIZE
    locale: Locale = Locale.PRIMARY

    def clear(self) -> None:
        self.text = ""
        self.bound_file = None

    def bind(self, path: Path) -> None:
        self.bound_file = path
