"""Controller wiring the document tracker into UI callbacks."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Dict, Optional

from textpad.document import (
    DocumentIOError,
    DocumentTracker,
    PathPicker,
    StatusSnapshot,
)
from textpad.i18n import LabelSet, Locale, format_status, labels_for
from textpad.runtime import telemetry


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class EditorUIHooks:
    """Callbacks invoked by the controller to update host widgets."""

    update_text: Callable[[str], None]
    update_status: Callable[[str], None] = _noop
    update_labels: Callable[[LabelSet], None] = _noop
    update_title: Callable[[str], None] = _noop
    show_error: Callable[[str], None] = _noop
    # Optional debug line sink
    log: Callable[[str], None] = _noop


class EditorController:
    """Owns the tracker and turns user actions into tracker calls.

    I/O failures never escape: they are logged and handed to
    ``hooks.show_error`` while the document stays as it was.
    """

    def __init__(self, tracker: DocumentTracker, hooks: EditorUIHooks) -> None:
        self.tracker = tracker
        self.hooks = hooks
        self.logger = telemetry.get_logger("textpad.controller")
        self.tracker.subscribe(self._render_status)
        self.tracker.subscribe_locale(self._relabel)
        self.hooks.update_text(self.tracker.text)
        self._relabel(self.tracker.state.locale)
        self._render_status(self.tracker.snapshot)

    @property
    def locale(self) -> Locale:
        return self.tracker.state.locale

    @property
    def labels(self) -> LabelSet:
        return labels_for(self.locale)

    def new_document(self) -> None:
        self._log_state("new ->")
        self.tracker.new_document()
        self.hooks.update_text(self.tracker.text)
        self._refresh_title()

    def open_file(self, path: str | Path) -> bool:
        self._log_state("open ->", path=path)
        try:
            self.tracker.load(path)
        except DocumentIOError as exc:
            self._report(exc)
            return False
        self.hooks.update_text(self.tracker.text)
        self._refresh_title()
        return True

    def save(self, *, picker: Optional[PathPicker] = None) -> bool:
        self._log_state("save ->")
        try:
            snapshot = self.tracker.save(picker=picker)
        except DocumentIOError as exc:
            self._report(exc)
            return False
        if snapshot is None:
            return False
        self._refresh_title()
        return True

    def save_as(self, path: str | Path) -> bool:
        self._log_state("save_as ->", path=path)
        try:
            self.tracker.save_as(path)
        except DocumentIOError as exc:
            self._report(exc)
            return False
        self._refresh_title()
        return True

    def set_font(self, family: str, size: Optional[int] = None) -> None:
        self._log_state("font ->", family=family, size=size)
        self.tracker.set_font(family, size or self.tracker.state.font_size)

    def set_locale(self, locale: Locale) -> None:
        self._log_state("locale ->", locale=locale.value)
        self.tracker.set_locale(locale)

    def text_changed(self, text: str) -> StatusSnapshot:
        return self.tracker.on_text_changed(text)

    def title(self) -> str:
        bound = self.tracker.bound_file
        name = bound.name if bound is not None else self.labels.untitled
        return f"{self.labels.title} - {name}"

    def _render_status(self, snapshot: StatusSnapshot) -> None:
        self.hooks.update_status(format_status(snapshot, self.locale))

    def _relabel(self, locale: Locale) -> None:
        self.hooks.update_labels(labels_for(locale))
        self._refresh_title()
        self._render_status(self.tracker.snapshot)

    def _refresh_title(self) -> None:
        self.hooks.update_title(self.title())

    def _report(self, exc: DocumentIOError) -> None:
        template = (
            self.labels.read_error
            if exc.operation == "read"
            else self.labels.write_error
        )
        message = template.format(path=exc.path, reason=exc.reason)
        telemetry.record_event(
            "controller.io_error",
            level="error",
            data={"operation": exc.operation, "path": exc.path, "reason": exc.reason},
            logger_name="textpad.controller",
        )
        self._log_state("error <-", operation=exc.operation, reason=exc.reason)
        self.hooks.show_error(message)

    def _log_state(self, prefix: str, **fields: object) -> None:
        snapshot = self._state_metadata()
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix]
        for key, value in snapshot.items():
            parts.append(f"{key}={value!r}")
        self.hooks.log(" ".join(parts))

    def _state_metadata(self) -> Dict[str, object]:
        state = self.tracker.state
        return {
            "file": str(state.bound_file) if state.bound_file else None,
            "chars": len(state.text),
            "font": state.font_family,
            "locale": state.locale.value,
        }


__all__ = ["EditorController", "EditorUIHooks"]
