"""Status-line metrics derived from a ``DocumentState``."""

from __future__ import annotations

import locale
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .state import DocumentState


@dataclass(frozen=True, slots=True)
class StatusSnapshot:
    line_count: int
    character_count: int
    encoding_name: str
    file_size_bytes: int
    font_family: str


def count_lines(text: str) -> int:
    """Number of segments produced by splitting ``text`` on ``"\\n"``.

    An empty buffer is one line and a trailing newline adds an empty segment.
    """

    return text.count("\n") + 1


def count_characters(text: str) -> int:
    """Length of ``text`` in UTF-16 code units, so astral characters count twice."""

    return len(text.encode("utf-16-le", "surrogatepass")) // 2


def platform_encoding() -> str:
    """Name of the encoding ``open()`` uses when none is given."""

    return locale.getpreferredencoding(False)


def file_size(path: Optional[Path]) -> int:
    """On-disk size of ``path``; ``0`` when unbound or unreadable."""

    if path is None:
        return 0
    try:
        return path.stat().st_size
    except OSError:
        return 0


def compute_snapshot(
    state: DocumentState, *, encoding: Optional[str] = None
) -> StatusSnapshot:
    # file size is read from disk, so it lags behind unsaved edits
    return StatusSnapshot(
        line_count=count_lines(state.text),
        character_count=count_characters(state.text),
        encoding_name=encoding or platform_encoding(),
        file_size_bytes=file_size(state.bound_file),
        font_family=state.font_family,
    )


__all__ = [
    "StatusSnapshot",
    "compute_snapshot",
    "count_characters",
    "count_lines",
    "file_size",
    "platform_encoding",
]
