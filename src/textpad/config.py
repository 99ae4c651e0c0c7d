"""Startup settings resolved from ``TEXTPAD_*`` environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from typing import Mapping, Optional, Tuple

from textpad.document import DEFAULT_FONT_FAMILY, DEFAULT_FONT_SIZE
from textpad.i18n import Locale
from textpad.runtime import telemetry

ENV_PREFIX = "TEXTPAD_"

FONT_FAMILIES: Tuple[str, ...] = (
    "Monospace",
    "Serif",
    "Sans Serif",
    "Courier New",
    "DejaVu Sans Mono",
    "Fira Code",
    "Liberation Mono",
    "Ubuntu Mono",
)


@dataclass(frozen=True)
class EditorSettings:
    """Initial font, locale and font choices offered by the font dialog."""

    font_family: str = DEFAULT_FONT_FAMILY
    font_size: int = DEFAULT_FONT_SIZE
    locale: Locale = Locale.PRIMARY
    font_families: Tuple[str, ...] = field(default=FONT_FAMILIES)

    def override(
        self,
        *,
        font_family: Optional[str] = None,
        font_size: Optional[int] = None,
        locale: Optional[Locale] = None,
    ) -> "EditorSettings":
        """Return a copy with the non-``None`` values replaced."""

        changes = {
            key: value
            for key, value in (
                ("font_family", font_family),
                ("font_size", font_size),
                ("locale", locale),
            )
            if value is not None
        }
        return replace(self, **changes)


def _env_int(env: Mapping[str, str], key: str, fallback: int) -> int:
    value = env.get(key)
    if value is None:
        return fallback
    try:
        parsed = int(value)
    except ValueError:
        parsed = 0
    if parsed <= 0:
        telemetry.record_event(
            "config.invalid",
            level="warning",
            data={"key": key, "value": value},
        )
        return fallback
    return parsed


def _env_locale(env: Mapping[str, str], key: str, fallback: Locale) -> Locale:
    value = env.get(key)
    if value is None:
        return fallback
    try:
        return Locale.from_code(value)
    except ValueError:
        telemetry.record_event(
            "config.invalid",
            level="warning",
            data={"key": key, "value": value},
        )
        return fallback


def load_settings(env: Optional[Mapping[str, str]] = None) -> EditorSettings:
    source = os.environ if env is None else env
    defaults = EditorSettings()
    family = (source.get(f"{ENV_PREFIX}FONT_FAMILY") or "").strip()
    return EditorSettings(
        font_family=family or defaults.font_family,
        font_size=_env_int(source, f"{ENV_PREFIX}FONT_SIZE", defaults.font_size),
        locale=_env_locale(source, f"{ENV_PREFIX}LOCALE", defaults.locale),
    )


__all__ = ["ENV_PREFIX", "EditorSettings", "FONT_FAMILIES", "load_settings"]
