"""Componentes de UI para CLI (Rich).

- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en múltiples comandos.
"""

from __future__ import annotations

import logging

from rich.align import Align
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.code_table import CodeTable


def configure_logging(level: str, *, console: Console | None = None) -> None:
    """Route stdlib logging through Rich on stderr.

    stdout stays reserved for the transformed text.
    """

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[handler],
        force=True,
    )


def print_banner(console: Console) -> None:
    """Imprime el banner (desactivado por defecto para no ensuciar pipes)."""

    title = Text("txtmorph", style="bold cyan")
    subtitle = Text("case • reverse • binary • morse • files", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def print_error(console: Console, message: str) -> None:
    console.print(f"[bold red]Error:[/bold red] {escape(message)}", highlight=False, soft_wrap=True)


def build_code_table_view(table: CodeTable) -> Table:
    """Tabla Rich con el contenido de una tabla Morse."""

    view = Table(title=f"Morse table ({table.language.value}, {table.language.label()})")
    view.add_column("Char", style="cyan", no_wrap=True)
    view.add_column("Code", style="white")
    view.add_column("Note", style="yellow")
    ambiguous = table.ambiguous_codes()
    for char, code in table.codes.items():
        note = ""
        if code in ambiguous:
            others = [k for k in ambiguous[code] if k != char]
            note = f"shared with {', '.join(others)}"
        view.add_row(char, code, note)
    return view
