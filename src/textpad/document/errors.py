"""Error types raised by the document core."""

from __future__ import annotations

from pathlib import Path
from typing import Optional


class DocumentIOError(OSError):
    """Raised when a document file cannot be read or written.

    Covers missing files, permission problems, full disks and bytes that do
    not decode with the platform encoding. The tracker leaves its state
    untouched whenever this is raised.
    """

    def __init__(
        self,
        message: str,
        *,
        path: Path,
        operation: str,
        reason: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.path = path
        self.operation = operation
        self.reason = reason or message
