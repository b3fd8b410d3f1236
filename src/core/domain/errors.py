"""Excepciones del dominio.

Todas heredan de `TxtmorphError` para que el host (CLI) pueda capturarlas
en un único punto y convertirlas en un mensaje + código de salida.
"""

from __future__ import annotations

from pathlib import Path


class TxtmorphError(Exception):
    """Base de los errores que aborta el pipeline."""


class TableLoadError(TxtmorphError):
    """The Morse table resource is missing or malformed."""

    def __init__(self, message: str, *, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path


class UnsupportedLanguageError(TxtmorphError):
    """Raised only in strict mode for an unknown Morse language tag."""

    def __init__(self, tag: str, supported: list[str]) -> None:
        super().__init__(
            f"Unsupported Morse language '{tag}' (supported: {', '.join(supported)})"
        )
        self.tag = tag
        self.supported = supported


class FileReadError(TxtmorphError):
    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Cannot read {path}: {reason}")
        self.path = path


class FileWriteError(TxtmorphError):
    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Cannot write {path}: {reason}")
        self.path = path
