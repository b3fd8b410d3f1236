"""Capacidades interactivas inyectadas en el Core.

- `Confirmer`: muestra un prompt y devuelve si el usuario confirmó.
- `Echo`: salida de texto lateral (p.ej. contenido leído de un fichero).

Los tests pasan lambdas; la CLI pasa implementaciones sobre Typer/Rich.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Confirmer(Protocol):
    def __call__(self, prompt: str) -> bool:
        """Show `prompt` and return True only on explicit confirmation."""

        ...


@runtime_checkable
class Echo(Protocol):
    def __call__(self, text: str) -> None:
        ...


def decline_all(prompt: str) -> bool:
    """Confirmer for non-interactive runs: never overwrite."""

    return False


def no_echo(text: str) -> None:
    return None
