"""Document state tracker: buffer, file binding, font and status metrics."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, List, Optional, Union

from textpad.i18n import Locale
from textpad.runtime import telemetry

from .files import read_document, write_document
from .state import DocumentState
from .status import StatusSnapshot, compute_snapshot
from .sync import LocaleListener, PathPicker, StatusListener

PathLike = Union[str, Path]


class DocumentTracker:
    """Owns a ``DocumentState`` and republishes its status after every change.

    Every mutating operation recomputes the snapshot synchronously and hands
    it to each subscribed listener before returning. Failed file operations
    raise ``DocumentIOError`` and leave the state exactly as it was.
    """

    def __init__(
        self,
        *,
        state: Optional[DocumentState] = None,
        picker: Optional[PathPicker] = None,
        encoding: Optional[str] = None,
        logger_name: str | None = None,
    ) -> None:
        self.state = state or DocumentState()
        self.picker = picker
        self._encoding = encoding
        self._listeners: List[StatusListener] = []
        self._locale_listeners: List[LocaleListener] = []
        self._logger_name = logger_name or "textpad.document"
        self.logger = telemetry.get_logger(self._logger_name)
        self._snapshot = self.compute_snapshot()

    @property
    def text(self) -> str:
        return self.state.text

    @property
    def bound_file(self) -> Optional[Path]:
        return self.state.bound_file

    @property
    def snapshot(self) -> StatusSnapshot:
        """Most recently published snapshot."""

        return self._snapshot

    def subscribe(self, listener: StatusListener) -> Callable[[], None]:
        self._listeners.append(listener)
        return lambda: self._remove(self._listeners, listener)

    def subscribe_locale(self, listener: LocaleListener) -> Callable[[], None]:
        self._locale_listeners.append(listener)
        return lambda: self._remove(self._locale_listeners, listener)

    def compute_snapshot(self) -> StatusSnapshot:
        return compute_snapshot(self.state, encoding=self._encoding)

    def new_document(self) -> StatusSnapshot:
        with self._span("new"):
            self.state.clear()
        return self._publish("new")

    def load(self, path: PathLike) -> StatusSnapshot:
        target = Path(path)
        with self._span("load", path=target):
            text = read_document(target)
            self.state.text = text
            self.state.bind(target)
        return self._publish("load")

    def save(self, *, picker: Optional[PathPicker] = None) -> Optional[StatusSnapshot]:
        """Overwrite the bound file, or ask the picker for a path first.

        Returns ``None`` when the picker is cancelled.
        """

        bound = self.state.bound_file
        if bound is not None:
            with self._span("save", path=bound):
                write_document(bound, self.state.text)
            return self._publish("save")

        chooser = picker or self.picker
        if chooser is None:
            raise RuntimeError("Document has no bound file and no path picker")
        chosen = chooser()
        if chosen is None:
            telemetry.record_event(
                "document.save_cancelled", logger_name=self._logger_name
            )
            return None
        return self.save_as(chosen)

    def save_as(self, path: PathLike) -> StatusSnapshot:
        target = Path(path)
        with self._span("save_as", path=target):
            write_document(target, self.state.text)
            self.state.bind(target)
        return self._publish("save_as")

    def set_font(self, family: str, size: int) -> StatusSnapshot:
        # no validation: unknown families render with the host's default font
        self.state.font_family = family
        self.state.font_size = size
        return self._publish("font", family=family, size=size)

    def on_text_changed(self, text: str) -> StatusSnapshot:
        """Change hook the presentation layer calls after every edit."""

        self.state.text = text
        return self._publish("edit", quiet=True)

    def set_locale(self, locale: Locale) -> None:
        if self.state.locale is locale:
            return
        self.state.locale = locale
        telemetry.record_event(
            "document.locale",
            data={"locale": locale.value},
            logger_name=self._logger_name,
        )
        for listener in list(self._locale_listeners):
            listener(locale)

    def _publish(
        self, reason: str, *, quiet: bool = False, **extra: object
    ) -> StatusSnapshot:
        snapshot = self.compute_snapshot()
        self._snapshot = snapshot
        if not quiet:
            telemetry.record_event(
                f"document.{reason}",
                data={
                    "bound_file": self.state.bound_file,
                    "lines": snapshot.line_count,
                    "characters": snapshot.character_count,
                    "size": snapshot.file_size_bytes,
                    **extra,
                },
                logger_name=self._logger_name,
            )
        for listener in list(self._listeners):
            listener(snapshot)
        return snapshot

    def _span(self, operation: str, *, path: Optional[Path] = None):
        metadata = {"operation": operation}
        if path is not None:
            metadata["path"] = str(path)
        return telemetry.span(
            name=f"document::{operation}",
            component=True,
            metadata=metadata,
            logger_name=self._logger_name,
        )

    @staticmethod
    def _remove(listeners: list, listener: object) -> None:
        if listener in listeners:
            listeners.remove(listener)


__all__ = ["DocumentTracker", "PathLike"]
