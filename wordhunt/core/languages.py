from __future__ import annotations

from enum import Enum
from typing import Any, Optional


class Language(str, Enum):
    """Locales the game ships word lists for."""

    EN = "en"
    DE = "de"

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]

    @classmethod
    def parse(cls, value: Any) -> Optional["Language"]:
        """Return the matching language, or None for anything unknown."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None


_DISPLAY_NAMES = {
    Language.EN: "English",
    Language.DE: "Deutsch",
}
