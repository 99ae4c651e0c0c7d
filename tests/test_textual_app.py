from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Awaitable, Callable

import pytest
from textual.widgets import Button, Input, Select, TextArea

from textpad.adapters.textual.app import (
    MENU_ITEMS,
    TextpadApp,
    _parse_args,
    build_settings,
    create_tracker,
)
from textpad.adapters.textual.screens import FontPrompt, LanguagePrompt, PathPrompt
from textpad.config import EditorSettings
from textpad.i18n import LabelSet, Locale

APP_SIZE = (140, 40)


def test_parse_args_reads_path_and_overrides() -> None:
    args = _parse_args(
        ["notes.txt", "--font", "Serif", "--font-size", "14", "--locale", "es"]
    )

    assert args.path == "notes.txt"
    assert args.font == "Serif"
    assert args.font_size == 14
    assert args.locale is Locale.SECONDARY


def test_parse_args_rejects_unknown_locale() -> None:
    with pytest.raises(SystemExit):
        _parse_args(["--locale", "fr"])


def test_build_settings_layers_cli_over_environment(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setenv("TEXTPAD_FONT_FAMILY", "Courier New")
    monkeypatch.setenv("TEXTPAD_FONT_SIZE", "11")

    settings = build_settings(_parse_args(["--font-size", "20"]))

    assert settings.font_family == "Courier New"
    assert settings.font_size == 20
    assert settings.locale is Locale.PRIMARY


def test_create_tracker_seeds_font_and_locale() -> None:
    tracker = create_tracker(
        EditorSettings(font_family="Serif", font_size=9, locale=Locale.SECONDARY)
    )

    assert tracker.snapshot.font_family == "Serif"
    assert tracker.state.font_size == 9
    assert tracker.state.locale is Locale.SECONDARY
    assert tracker.text == ""


def test_menu_items_map_to_app_actions_and_labels() -> None:
    label_names = set(LabelSet.__dataclass_fields__)
    for _button_id, action, attribute, _hint in MENU_ITEMS:
        assert attribute in label_names
        assert hasattr(TextpadApp, f"action_{action}")
    hints = {action: hint for _id, action, _attr, hint in MENU_ITEMS}
    assert hints["save_as"] == "F12"
    assert any(
        binding.key == "f12" and binding.action == "save_as"
        for binding in TextpadApp.BINDINGS
    )


def test_app_keeps_initial_path(tmp_path: Path) -> None:
    target = tmp_path / "start.txt"

    app = TextpadApp(settings=EditorSettings(), initial_path=target)

    assert app.initial_path == target
    assert app.controller is None


def make_app(**kwargs) -> TextpadApp:
    return TextpadApp(settings=EditorSettings(), **kwargs)


def run(scenario: Callable[[], Awaitable[None]]) -> None:
    asyncio.run(scenario())


def test_typing_updates_status_line() -> None:
    async def scenario() -> None:
        app = make_app()
        async with app.run_test(size=APP_SIZE) as pilot:
            await pilot.press("a", "enter", "b")
            await pilot.pause()

            assert app.controller is not None
            assert app.controller.tracker.text == "a\nb"
            assert app.ui_state.status_text.startswith("Lines: 2, Characters: 3")

    run(scenario)


def test_save_unbound_document_through_path_dialog(tmp_path: Path) -> None:
    target = tmp_path / "saved.txt"

    async def scenario() -> None:
        app = make_app()
        async with app.run_test(size=APP_SIZE) as pilot:
            await pilot.press("h", "i")
            await pilot.press("ctrl+s")
            await pilot.pause()

            assert isinstance(app.screen, PathPrompt)
            app.screen.query_one("#path", Input).value = str(target)
            await pilot.click("#confirm")
            await app.workers.wait_for_complete()
            await pilot.pause()

            assert app.controller is not None
            assert app.controller.tracker.bound_file == target
            assert app.ui_state.title.endswith("saved.txt")
            assert "File Size: 2 bytes" in app.ui_state.status_text

    run(scenario)
    assert target.read_text() == "hi"


def test_open_existing_file_through_path_dialog(tmp_path: Path) -> None:
    target = tmp_path / "notes.txt"
    target.write_text("one\ntwo\n")

    async def scenario() -> None:
        app = make_app()
        async with app.run_test(size=APP_SIZE) as pilot:
            await pilot.press("ctrl+o")
            await pilot.pause()
            app.screen.query_one("#path", Input).value = str(target)
            await pilot.click("#confirm")
            await pilot.pause()

            assert app.query_one("#editor", TextArea).text == "one\ntwo\n"
            assert app.ui_state.status_text.startswith("Lines: 3, Characters: 8")

    run(scenario)


def test_change_font_through_dialog() -> None:
    async def scenario() -> None:
        app = make_app()
        async with app.run_test(size=APP_SIZE) as pilot:
            await pilot.click("#menu-font")
            await pilot.pause()

            screen = app.screen
            assert isinstance(screen, FontPrompt)
            screen.query_one("#family", Select).value = "Serif"
            screen.query_one("#size", Input).value = "14"
            await pilot.click("#confirm")
            await pilot.pause()

            assert app.controller is not None
            state = app.controller.tracker.state
            assert (state.font_family, state.font_size) == ("Serif", 14)
            assert app.ui_state.status_text.endswith("Font: Serif")
            assert app.query_one("#editor", TextArea).border_title == "Serif 14"

    run(scenario)


def test_switch_language_through_preferences() -> None:
    async def scenario() -> None:
        app = make_app()
        async with app.run_test(size=APP_SIZE) as pilot:
            await pilot.press("f2")
            await pilot.pause()

            assert isinstance(app.screen, LanguagePrompt)
            await pilot.click("#locale-es")
            await pilot.pause()
            await pilot.click("#confirm")
            await pilot.pause()

            assert app.controller is not None
            assert app.controller.locale is Locale.SECONDARY
            assert app.ui_state.status_text.startswith("Líneas: 1, Caracteres: 0")
            assert app.ui_state.title.startswith("Editor de Texto Simple")
            label = app.query_one("#menu-new", Button).label
            assert str(label).startswith("Nuevo")

    run(scenario)


def test_shortcuts_are_ignored_while_a_dialog_is_open() -> None:
    async def scenario() -> None:
        app = make_app()
        async with app.run_test(size=APP_SIZE) as pilot:
            await pilot.press("ctrl+f")
            await pilot.pause()
            await pilot.press("ctrl+o", "f2", "ctrl+s")
            await pilot.pause()

            assert isinstance(app.screen, FontPrompt)
            assert len(app.screen_stack) == 2

            await pilot.click("#cancel")
            await pilot.pause()

            assert len(app.screen_stack) == 1
            assert app.controller is not None
            assert app.controller.tracker.bound_file is None

    run(scenario)
