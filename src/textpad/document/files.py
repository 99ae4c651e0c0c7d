"""Whole-file text I/O used by the tracker."""

from __future__ import annotations

from pathlib import Path

from .errors import DocumentIOError
from .status import platform_encoding


def read_document(path: Path) -> str:
    """Return the full contents of ``path`` without newline translation."""

    try:
        with open(path, "r", encoding=platform_encoding(), newline="") as handle:
            return handle.read()
    except (OSError, UnicodeError) as exc:
        raise DocumentIOError(
            f"Cannot read '{path}': {_describe(exc)}",
            path=path,
            operation="read",
            reason=_describe(exc),
        ) from exc


def write_document(path: Path, text: str) -> None:
    """Overwrite ``path`` with ``text``."""

    try:
        with open(path, "w", encoding=platform_encoding(), newline="") as handle:
            handle.write(text)
    except (OSError, UnicodeError) as exc:
        raise DocumentIOError(
            f"Cannot write '{path}': {_describe(exc)}",
            path=path,
            operation="write",
            reason=_describe(exc),
        ) from exc


def _describe(exc: BaseException) -> str:
    if isinstance(exc, OSError) and exc.strerror:
        return exc.strerror
    return str(exc) or type(exc).__name__


__all__ = ["read_document", "write_document"]
