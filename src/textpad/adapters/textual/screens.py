"""Modal dialogs for paths, fonts and the UI language."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence, Tuple

from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, Input, Label, RadioButton, RadioSet, Select

from textpad.i18n import LabelSet, Locale

DIALOG_CSS = """
	.dialog {
		width: 64;
		height: auto;
		border: thick $accent;
		background: $surface;
		padding: 1 2;
	}

	.dialog-buttons {
		height: auto;
		align-horizontal: right;
		margin-top: 1;
	}

	.dialog-buttons Button {
		margin-left: 1;
	}
	"""


class DialogScreen(ModalScreen):
    DEFAULT_CSS = (
        """
	DialogScreen {
		align: center middle;
	}
	"""
        + DIALOG_CSS
    )

    BINDINGS = [("escape", "cancel", "Cancel")]

    def __init__(self, labels: LabelSet) -> None:
        super().__init__()
        self.labels = labels

    def _buttons(self) -> Horizontal:
        return Horizontal(
            Button(self.labels.confirm, variant="primary", id="confirm"),
            Button(self.labels.cancel, id="cancel"),
            classes="dialog-buttons",
        )

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        if event.button.id == "confirm":
            self.dismiss(self.result())
        else:
            self.dismiss(None)

    def action_cancel(self) -> None:
        self.dismiss(None)

    def result(self) -> object:  # pragma: no cover - abstract override
        raise NotImplementedError


class PathPrompt(DialogScreen):
    """Asks for a file path; dismisses with ``Path`` or ``None``."""

    def __init__(
        self, labels: LabelSet, prompt: str, *, initial: Optional[Path] = None
    ) -> None:
        super().__init__(labels)
        self.prompt = prompt
        self.initial_path = initial

    def compose(self) -> ComposeResult:
        with Vertical(classes="dialog"):
            yield Label(self.prompt)
            yield Input(
                value=str(self.initial_path) if self.initial_path else "",
                placeholder=str(Path.cwd()),
                id="path",
            )
            yield self._buttons()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        self.dismiss(self.result())

    def result(self) -> Optional[Path]:
        raw = self.query_one("#path", Input).value.strip()
        if not raw:
            return None
        return Path(raw).expanduser()


class FontPrompt(DialogScreen):
    """Font family and size picker; dismisses with ``(family, size)``."""

    def __init__(
        self,
        labels: LabelSet,
        families: Sequence[str],
        *,
        family: str,
        size: int,
    ) -> None:
        super().__init__(labels)
        # keep the current family selectable even if it is not a known one
        known = tuple(families)
        self.families = known if family in known else (family, *known)
        self.font_family = family
        self.font_size = size

    def compose(self) -> ComposeResult:
        with Vertical(classes="dialog"):
            yield Label(self.labels.font_prompt)
            yield Select(
                [(name, name) for name in self.families],
                value=self.font_family,
                allow_blank=False,
                id="family",
            )
            yield Label(self.labels.font_size_prompt)
            yield Input(value=str(self.font_size), type="integer", id="size")
            yield self._buttons()

    def result(self) -> Optional[Tuple[str, int]]:
        family = self.query_one("#family", Select).value
        raw_size = self.query_one("#size", Input).value.strip()
        try:
            size = int(raw_size)
        except ValueError:
            size = self.font_size
        if size <= 0:
            size = self.font_size
        return (str(family), size)


class LanguagePrompt(DialogScreen):
    """Two-option language chooser; dismisses with a ``Locale``."""

    def __init__(self, labels: LabelSet, *, current: Locale) -> None:
        super().__init__(labels)
        self.current = current
        self.choices = tuple(Locale)

    def compose(self) -> ComposeResult:
        with Vertical(classes="dialog"):
            yield Label(self.labels.language_header)
            yield Label(self.labels.language_prompt)
            with RadioSet(id="language"):
                for locale in self.choices:
                    yield RadioButton(
                        locale.display_name,
                        value=locale is self.current,
                        id=f"locale-{locale.value}",
                    )
            yield self._buttons()

    def result(self) -> Optional[Locale]:
        index = self.query_one("#language", RadioSet).pressed_index
        if index < 0:
            return None
        return self.choices[index]


__all__ = ["FontPrompt", "LanguagePrompt", "PathPrompt"]
