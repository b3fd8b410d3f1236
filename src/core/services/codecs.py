"""Transformaciones de texto sin estado.

Cada función recibe el working string y devuelve uno nuevo. Las que
necesitan la tabla Morse la reciben explícitamente.
"""

from __future__ import annotations

import re

from core.domain.code_table import CodeTable
from core.domain.models import BinaryDecodeResult

WORD_SEPARATOR = "/"
UNKNOWN_TOKEN = "?"

# Unsigned base-2 with an optional '+', the same tokens a u8 radix-2 parse accepts.
_BINARY_TOKEN_RE = re.compile(r"\+?[01]+")


def capitalize(text: str) -> str:
    return text.upper()


def lowercase(text: str) -> str:
    return text.lower()


def reverse(text: str) -> str:
    """Reverse by code point: 'abc' -> 'cba'."""

    return text[::-1]


def to_binary(text: str) -> str:
    """UTF-8 bytes as space separated, zero padded 8-bit groups (MSB first)."""

    return " ".join(f"{byte:08b}" for byte in text.encode("utf-8"))


def parse_binary_token(token: str) -> int | None:
    if not _BINARY_TOKEN_RE.fullmatch(token):
        return None
    value = int(token, 2)
    if value > 0xFF:
        return None
    return value


def from_binary(text: str) -> BinaryDecodeResult:
    """Inverse of `to_binary`.

    Tokens that are not valid 8-bit binary are dropped and listed in
    `skipped`. Each surviving byte N becomes the character U+00NN, so ASCII
    round-trips exactly and no byte is ever lost.
    """

    decoded = bytearray()
    skipped: list[str] = []
    for token in text.split():
        value = parse_binary_token(token)
        if value is None:
            skipped.append(token)
            continue
        decoded.append(value)
    return BinaryDecodeResult(
        text=decoded.decode("latin-1"),
        skipped=skipped,
    )


def to_morse(text: str, table: CodeTable) -> str:
    """Uppercase, then map each character to its code.

    A literal space becomes '/', characters missing from the table become '?'.
    """

    tokens: list[str] = []
    for char in text.upper():
        if char == " ":
            tokens.append(WORD_SEPARATOR)
            continue
        code = table.encode_char(char)
        tokens.append(code if code is not None else UNKNOWN_TOKEN)
    return " ".join(tokens)


def from_morse(text: str, table: CodeTable) -> str:
    """Decode whitespace separated codes.

    Every key sharing a code is emitted, in table order. Tokens without a
    match (including '/') emit nothing. Keys are joined by single spaces.
    """

    keys: list[str] = []
    for code in text.split():
        keys.extend(table.decode_code(code))
    return " ".join(keys)
