"""Supported UI languages."""

from __future__ import annotations

from enum import Enum


class Locale(str, Enum):
    """The two languages the label catalog ships with."""

    PRIMARY = "en"
    SECONDARY = "es"

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]

    @classmethod
    def from_code(cls, raw: str) -> "Locale":
        """Parse ``en``/``es``, a member name, or an English/native language name."""

        key = raw.strip().lower().replace("-", "_")
        for locale in cls:
            aliases = {locale.value, locale.name.lower(), *_ALIASES[locale]}
            if key in aliases:
                return locale
        raise ValueError(f"Unknown locale '{raw}'")


_DISPLAY_NAMES = {
    Locale.PRIMARY: "English",
    Locale.SECONDARY: "Español",
}

_ALIASES = {
    Locale.PRIMARY: {"english", "inglés", "ingles", "en_us", "en_gb"},
    Locale.SECONDARY: {"spanish", "español", "espanol", "es_es"},
}


__all__ = ["Locale"]
