"""Modelo de validación para ficheros `morse_<tag>.json`.

Formato: objeto plano `{"A": ".-", "B": "-...", ...}`.
"""

from __future__ import annotations

import re

from pydantic import RootModel, field_validator

_CODE_RE = re.compile(r"[.\-]+")


class MorseTableFile(RootModel[dict[str, str]]):
    root: dict[str, str]

    @field_validator("root")
    @classmethod
    def _check_entries(cls, value: dict[str, str]) -> dict[str, str]:
        for key, code in value.items():
            if len(key) != 1:
                raise ValueError(f"key {key!r} must be a single character")
            if not _CODE_RE.fullmatch(code):
                raise ValueError(f"code for {key!r} must be a non-empty dot/dash string, got {code!r}")
        return value
