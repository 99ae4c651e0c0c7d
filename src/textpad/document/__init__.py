"""Document state tracking and status-line metrics."""

from .errors import DocumentIOError
from .files import read_document, write_document
from .state import DEFAULT_FONT_FAMILY, DEFAULT_FONT_SIZE, DocumentState
from .status import (
    StatusSnapshot,
    compute_snapshot,
    count_characters,
    count_lines,
    file_size,
    platform_encoding,
)
from .sync import LocaleListener, PathPicker, StatusListener
from .tracker import DocumentTracker

__all__ = [
    "DEFAULT_FONT_FAMILY",
    "DEFAULT_FONT_SIZE",
    "DocumentIOError",
    "DocumentState",
    "DocumentTracker",
    "LocaleListener",
    "PathPicker",
    "StatusListener",
    "StatusSnapshot",
    "compute_snapshot",
    "count_characters",
    "count_lines",
    "file_size",
    "platform_encoding",
    "read_document",
    "write_document",
]
