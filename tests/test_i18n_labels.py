from __future__ import annotations

from dataclasses import fields

import pytest

from textpad.document import StatusSnapshot
from textpad.i18n import LabelSet, Locale, format_status, labels_for


def make_snapshot() -> StatusSnapshot:
    return StatusSnapshot(
        line_count=2,
        character_count=11,
        encoding_name="UTF-8",
        file_size_bytes=0,
        font_family="Monospace",
    )


def test_primary_status_line() -> None:
    rendered = format_status(make_snapshot(), Locale.PRIMARY)

    assert rendered == (
        "Lines: 2, Characters: 11, Encoding: UTF-8, "
        "File Size: 0 bytes, Font: Monospace"
    )


def test_secondary_status_line() -> None:
    rendered = format_status(make_snapshot(), Locale.SECONDARY)

    assert rendered == (
        "Líneas: 2, Caracteres: 11, Codificación: UTF-8, "
        "Tamaño de Archivo: 0 bytes, Fuente: Monospace"
    )


@pytest.mark.parametrize("locale", list(Locale))
def test_every_label_is_filled(locale: Locale) -> None:
    labels = labels_for(locale)

    for item in fields(LabelSet):
        assert getattr(labels, item.name), item.name


def test_locales_differ_in_menu_labels() -> None:
    assert labels_for(Locale.PRIMARY).save_as == "Save As"
    assert labels_for(Locale.SECONDARY).save_as == "Guardar Como"


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("en", Locale.PRIMARY),
        ("EN-us", Locale.PRIMARY),
        ("English", Locale.PRIMARY),
        ("primary", Locale.PRIMARY),
        ("es", Locale.SECONDARY),
        ("Español", Locale.SECONDARY),
        (" spanish ", Locale.SECONDARY),
    ],
)
def test_locale_from_code(raw: str, expected: Locale) -> None:
    assert Locale.from_code(raw) is expected


def test_locale_from_code_rejects_unknown() -> None:
    with pytest.raises(ValueError):
        Locale.from_code("fr")
