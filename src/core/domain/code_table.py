"""Tabla Morse inmutable.

- Se construye una vez por invocación (ver `adapters.code_tables`) y se pasa
  explícitamente a los pasos que la necesitan.
- Precalcula el índice inverso `code -> keys` para `from_morse`.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Iterator, Mapping

from core.domain.language import MorseLanguage


class CodeTable:
    """Bidirectional mapping between single characters and Morse codes."""

    __slots__ = ("_codes", "_inverse", "_language")

    def __init__(self, codes: Mapping[str, str], *, language: MorseLanguage = MorseLanguage.ENGLISH) -> None:
        frozen = dict(codes)
        inverse: dict[str, list[str]] = {}
        for key, code in frozen.items():
            inverse.setdefault(code, []).append(key)

        self._codes: Mapping[str, str] = MappingProxyType(frozen)
        self._inverse: Mapping[str, tuple[str, ...]] = MappingProxyType(
            {code: tuple(keys) for code, keys in inverse.items()}
        )
        self._language = language

    @property
    def language(self) -> MorseLanguage:
        return self._language

    @property
    def codes(self) -> Mapping[str, str]:
        return self._codes

    def encode_char(self, char: str) -> str | None:
        return self._codes.get(char)

    def decode_code(self, code: str) -> tuple[str, ...]:
        """Every key whose code equals `code`, in table order (may be empty)."""

        return self._inverse.get(code, ())

    def ambiguous_codes(self) -> dict[str, tuple[str, ...]]:
        return {code: keys for code, keys in self._inverse.items() if len(keys) > 1}

    def __contains__(self, char: object) -> bool:
        return char in self._codes

    def __iter__(self) -> Iterator[str]:
        return iter(self._codes)

    def __len__(self) -> int:
        return len(self._codes)

    def __repr__(self) -> str:
        return f"CodeTable(language={self._language.value!r}, size={len(self)})"
