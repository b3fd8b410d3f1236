"""Morse languages supported by txtmorph.

Lives in the domain layer so config, adapters and CLI share one source of
truth for the valid tags.
"""

from __future__ import annotations

from enum import Enum


class MorseLanguage(str, Enum):
    """Language tags with a shipped `morse_<tag>.json` table."""

    ENGLISH = "en"

    @classmethod
    def default(cls) -> "MorseLanguage":
        """Return the table used when a tag is unknown and not strict."""

        return cls.ENGLISH

    @classmethod
    def tags(cls) -> list[str]:
        return [member.value for member in cls]

    @classmethod
    def parse(cls, tag: str | None) -> "MorseLanguage | None":
        """Match a user supplied tag (case/whitespace insensitive) or None."""

        if tag is None:
            return None
        cleaned = tag.strip().lower()
        for member in cls:
            if member.value == cleaned:
                return member
        return None

    @property
    def resource_name(self) -> str:
        return f"morse_{self.value}.json"

    def label(self) -> str:
        """Human readable label for tables and logging."""

        return "English"
