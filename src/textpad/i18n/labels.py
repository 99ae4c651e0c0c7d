"""Per-locale label catalog rendered by the presentation layer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Dict

from .locales import Locale

if TYPE_CHECKING:  # pragma: no cover
    from textpad.document.status import StatusSnapshot


@dataclass(frozen=True, slots=True)
class LabelSet:
    """Every user-facing string for one locale."""

    title: str
    menu_file: str
    menu_settings: str
    menu_font: str
    new: str
    open: str
    save: str
    save_as: str
    exit: str
    preferences: str
    font: str
    untitled: str
    language_title: str
    language_header: str
    language_prompt: str
    open_prompt: str
    save_prompt: str
    font_prompt: str
    font_size_prompt: str
    confirm: str
    cancel: str
    read_error: str
    write_error: str
    status_template: str


_CATALOG: Dict[Locale, LabelSet] = {
    Locale.PRIMARY: LabelSet(
        title="Simple Text Editor",
        menu_file="File",
        menu_settings="Settings",
        menu_font="Font",
        new="New",
        open="Open",
        save="Save",
        save_as="Save As",
        exit="Exit",
        preferences="Preferences",
        font="Font",
        untitled="Untitled",
        language_title="Preferences",
        language_header="Choose the language:",
        language_prompt="Language:",
        open_prompt="Path of the file to open:",
        save_prompt="Path to save the file as:",
        font_prompt="Font family:",
        font_size_prompt="Size:",
        confirm="OK",
        cancel="Cancel",
        read_error="Could not open {path}: {reason}",
        write_error="Could not save {path}: {reason}",
        status_template=(
            "Lines: {lines}, Characters: {characters}, Encoding: {encoding}, "
            "File Size: {size} bytes, Font: {font}"
        ),
    ),
    Locale.SECONDARY: LabelSet(
        title="Editor de Texto Simple",
        menu_file="Archivo",
        menu_settings="Configuración",
        menu_font="Fuente",
        new="Nuevo",
        open="Abrir",
        save="Guardar",
        save_as="Guardar Como",
        exit="Salir",
        preferences="Preferencias",
        font="Fuente",
        untitled="Sin título",
        language_title="Preferencias",
        language_header="Elija el Idioma:",
        language_prompt="Idioma:",
        open_prompt="Ruta del archivo a abrir:",
        save_prompt="Ruta donde guardar el archivo:",
        font_prompt="Familia de fuente:",
        font_size_prompt="Tamaño:",
        confirm="Aceptar",
        cancel="Cancelar",
        read_error="No se pudo abrir {path}: {reason}",
        write_error="No se pudo guardar {path}: {reason}",
        status_template=(
            "Líneas: {lines}, Caracteres: {characters}, Codificación: {encoding}, "
            "Tamaño de Archivo: {size} bytes, Fuente: {font}"
        ),
    ),
}


def labels_for(locale: Locale) -> LabelSet:
    return _CATALOG[locale]


def format_status(snapshot: "StatusSnapshot", locale: Locale) -> str:
    """Render a status snapshot with the locale's status-line template."""

    return labels_for(locale).status_template.format(
        lines=snapshot.line_count,
        characters=snapshot.character_count,
        encoding=snapshot.encoding_name,
        size=snapshot.file_size_bytes,
        font=snapshot.font_family,
    )


__all__ = ["LabelSet", "format_status", "labels_for"]
