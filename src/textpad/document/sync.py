"""Boundary types for collaborators that drive or observe the tracker."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Optional, Protocol

from textpad.i18n import Locale

from .status import StatusSnapshot

StatusListener = Callable[[StatusSnapshot], None]
LocaleListener = Callable[[Locale], None]


class PathPicker(Protocol):
    """File-picker collaborator used when ``save`` has no bound file."""

    def __call__(self) -> Optional[Path]:
        """Return the chosen path, or ``None`` if the user cancelled."""
        ...


__all__ = ["LocaleListener", "PathPicker", "StatusListener"]
