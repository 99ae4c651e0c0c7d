"""Executable Textual app hosting the document tracker."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence

try:  # pragma: no cover - imported only when the app is run
    from textual import work
    from textual.app import App, ComposeResult
    from textual.binding import Binding
    from textual.containers import Horizontal
    from textual.widgets import Button, Header, Static, TextArea
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use textpad.adapters.textual.app"
    ) from exc

from textpad.config import EditorSettings, load_settings
from textpad.document import DocumentState, DocumentTracker
from textpad.i18n import LabelSet, Locale
from textpad.runtime import telemetry

from .controller import EditorController, EditorUIHooks
from .screens import DialogScreen, FontPrompt, LanguagePrompt, PathPrompt

# (button id, action name, label attribute, shortcut hint)
MENU_ITEMS = (
    ("menu-new", "new", "new", "^N"),
    ("menu-open", "open", "open", "^O"),
    ("menu-save", "save", "save", "^S"),
    ("menu-save-as", "save_as", "save_as", "F12"),
    ("menu-preferences", "preferences", "preferences", "F2"),
    ("menu-font", "font", "font", "^F"),
    ("menu-exit", "quit", "exit", "^Q"),
)


@dataclass
class UIState:
    status_text: str = ""
    title: str = ""


def create_tracker(settings: EditorSettings) -> DocumentTracker:
    """Build a tracker seeded with the startup font and locale."""

    state = DocumentState(
        font_family=settings.font_family,
        font_size=settings.font_size,
        locale=settings.locale,
    )
    return DocumentTracker(state=state)


class TextpadApp(App[None]):
    """Minimal Textual UI around ``EditorController``."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#menu-bar {
		height: 3;
		background: $surface-darken-1;
	}

	#menu-bar Button {
		min-width: 10;
		margin: 0 1 0 0;
	}

	#editor {
		height: 1fr;
		border: round $accent;
	}

	#status-line {
		height: 1;
		background: $surface-darken-1;
		padding: 0 1;
	}
	"""

    BINDINGS = [
        Binding("ctrl+n", "new", "New", show=False, priority=True),
        Binding("ctrl+o", "open", "Open", show=False, priority=True),
        Binding("ctrl+s", "save", "Save", show=False, priority=True),
        Binding("f12", "save_as", "Save As", show=False, priority=True),
        Binding("ctrl+f", "font", "Font", show=False, priority=True),
        Binding("f2", "preferences", "Preferences", show=False, priority=True),
        Binding("ctrl+q", "quit", "Exit", show=False, priority=True),
    ]

    def __init__(
        self,
        *,
        settings: Optional[EditorSettings] = None,
        initial_path: Optional[Path] = None,
    ) -> None:
        super().__init__()
        self.settings = settings or load_settings()
        self.ui_state = UIState()
        self.initial_path = initial_path
        self.controller: EditorController | None = None
        self._editor: TextArea | None = None
        self._status_widget: Static | None = None
        self.logger = telemetry.get_logger("textpad.app")

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal(id="menu-bar"):
            for button_id, _action, _label, _hint in MENU_ITEMS:
                yield Button("", id=button_id)
        self._editor = TextArea(id="editor")
        yield self._editor
        self._status_widget = Static("", id="status-line")
        yield self._status_widget

    def on_mount(self) -> None:
        hooks = EditorUIHooks(
            update_text=self._update_text,
            update_status=self._update_status,
            update_labels=self._update_labels,
            update_title=self._update_title,
            show_error=self._show_error,
            log=self._log_line,
        )
        self.controller = EditorController(create_tracker(self.settings), hooks)
        self._update_font_title()
        if self.initial_path is not None:
            self.controller.open_file(self.initial_path)
        if self._editor:
            self._editor.focus()

    def on_text_area_changed(self, event: TextArea.Changed) -> None:
        if self.controller:
            self.controller.text_changed(event.text_area.text)

    async def on_button_pressed(self, event: Button.Pressed) -> None:
        for button_id, action, _label, _hint in MENU_ITEMS:
            if event.button.id == button_id:
                event.stop()
                await self.run_action(action)
                return

    # --- actions -----------------------------------------------------------
    def action_new(self) -> None:
        if self.controller and not self._dialog_open():
            self.controller.new_document()

    def action_open(self) -> None:
        if not self.controller or self._dialog_open():
            return
        labels = self.controller.labels
        self.push_screen(PathPrompt(labels, labels.open_prompt), self._open_chosen)

    def _open_chosen(self, path: Optional[Path]) -> None:
        if self.controller and path is not None:
            self.controller.open_file(path)

    @work
    async def action_save(self) -> None:
        if not self.controller or self._dialog_open():
            return
        chosen: Optional[Path] = None
        if self.controller.tracker.bound_file is None:
            labels = self.controller.labels
            chosen = await self.push_screen_wait(
                PathPrompt(labels, labels.save_prompt)
            )
        self.controller.save(picker=lambda: chosen)

    def action_save_as(self) -> None:
        if not self.controller or self._dialog_open():
            return
        labels = self.controller.labels
        screen = PathPrompt(
            labels, labels.save_prompt, initial=self.controller.tracker.bound_file
        )
        self.push_screen(screen, self._save_as_chosen)

    def _save_as_chosen(self, path: Optional[Path]) -> None:
        if self.controller and path is not None:
            self.controller.save_as(path)

    def action_font(self) -> None:
        if not self.controller or self._dialog_open():
            return
        state = self.controller.tracker.state
        screen = FontPrompt(
            self.controller.labels,
            self.settings.font_families,
            family=state.font_family,
            size=state.font_size,
        )
        self.push_screen(screen, self._font_chosen)

    def _font_chosen(self, choice: Optional[tuple[str, int]]) -> None:
        if self.controller and choice is not None:
            family, size = choice
            self.controller.set_font(family, size)
            self._update_font_title()

    def action_preferences(self) -> None:
        if not self.controller or self._dialog_open():
            return
        screen = LanguagePrompt(self.controller.labels, current=self.controller.locale)
        self.push_screen(screen, self._locale_chosen)

    def _locale_chosen(self, locale: Optional[Locale]) -> None:
        if self.controller and locale is not None:
            self.controller.set_locale(locale)

    def _dialog_open(self) -> bool:
        # app bindings have priority, so they also fire over an open dialog
        return isinstance(self.screen, DialogScreen)

    # --- hooks -------------------------------------------------------------
    def _update_text(self, text: str) -> None:
        if self._editor and self._editor.text != text:
            self._editor.load_text(text)

    def _update_status(self, status: str) -> None:
        self.ui_state.status_text = status
        if self._status_widget:
            self._status_widget.update(status)

    def _update_labels(self, labels: LabelSet) -> None:
        for button_id, _action, attribute, hint in MENU_ITEMS:
            button = self.query_one(f"#{button_id}", Button)
            button.label = f"{getattr(labels, attribute)} {hint}"

    def _update_title(self, title: str) -> None:
        self.ui_state.title = title
        self.title = title

    def _update_font_title(self) -> None:
        if self._editor and self.controller:
            state = self.controller.tracker.state
            self._editor.border_title = f"{state.font_family} {state.font_size}"

    def _show_error(self, message: str) -> None:
        self.notify(message, severity="error")

    def _log_line(self, line: str) -> None:
        self.logger.debug(line)


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the textpad editor.")
    parser.add_argument("path", nargs="?", help="File to open at startup")
    parser.add_argument("--font", help="Initial font family")
    parser.add_argument("--font-size", type=int, help="Initial font size")
    parser.add_argument(
        "--locale", type=Locale.from_code, help="UI language: en or es"
    )
    parser.add_argument(
        "--log-preset",
        choices=telemetry.PRESETS,
        default="tui",
        help="telelog preset (default: tui, which never writes to the terminal)",
    )
    return parser.parse_args(argv)


def build_settings(args: argparse.Namespace) -> EditorSettings:
    return load_settings().override(
        font_family=args.font,
        font_size=args.font_size,
        locale=args.locale,
    )


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    telemetry.configure(preset=args.log_preset)
    initial = Path(args.path).expanduser() if args.path else None
    app = TextpadApp(settings=build_settings(args), initial_path=initial)
    app.run()


if __name__ == "__main__":  # pragma: no cover - manual run
    main()
