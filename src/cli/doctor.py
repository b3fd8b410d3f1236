"""Doctor command for environment diagnostics."""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from adapters.code_tables import read_table_file
from core.config import AppSettings, write_user_env_vars
from core.domain.errors import TableLoadError
from core.domain.language import MorseLanguage
from core.resources_loader import find_table_path

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


def _check_table(language: MorseLanguage, settings: AppSettings) -> tuple[bool, str]:
    path = find_table_path(language.resource_name, settings)
    if path is None:
        return False, f"{language.resource_name} not found"
    try:
        table = read_table_file(path, language=language)
    except TableLoadError as exc:
        return False, str(exc)
    detail = f"{path} ({len(table)} entries)"
    ambiguous = table.ambiguous_codes()
    if ambiguous:
        detail += f", {len(ambiguous)} shared code(s)"
    return True, detail


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = AppSettings()

    table = Table(title="txtmorph Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    table.add_row("Tables dir", "OK" if settings.tables_dir else "DEFAULT", str(settings.tables_dir or "-"))
    table.add_row("Default language", "OK", settings.default_morse_language.value)
    table.add_row(
        "Language policy",
        "STRICT" if settings.strict_language else "LENIENT",
        "unknown tags fail" if settings.strict_language else "unknown tags fall back to default",
    )
    table.add_row("File encoding", "OK", settings.file_encoding)

    failures = 0
    for language in MorseLanguage:
        ok, detail = _check_table(language, settings)
        failures += 0 if ok else 1
        table.add_row(f"Table '{language.value}'", "OK" if ok else "FAIL", detail)

    _console.print(table)

    if failures:
        _console.print(
            "\n[yellow]Note:[/yellow] set TXTMORPH_TABLES_DIR to a directory holding morse_<tag>.json."
        )
        raise typer.Exit(code=1)


@app.command()
def setup() -> None:
    """Interactive setup (stores config in the user config .env)."""

    tables_dir = typer.prompt("Morse tables directory (empty for default)", default="", show_default=False).strip()
    language = typer.prompt(
        "Default Morse language",
        default=MorseLanguage.default().value,
        show_default=True,
    ).strip().lower()
    strict = typer.confirm("Fail on unknown Morse languages?", default=False)

    if MorseLanguage.parse(language) is None:
        raise typer.BadParameter(f"language must be one of: {', '.join(MorseLanguage.tags())}")
    if tables_dir and not Path(tables_dir).is_dir():
        raise typer.BadParameter(f"{tables_dir} is not a directory")

    env_path = write_user_env_vars(
        {
            "TXTMORPH_TABLES_DIR": tables_dir or None,
            "TXTMORPH_DEFAULT_MORSE_LANGUAGE": language,
            "TXTMORPH_STRICT_LANGUAGE": "true" if strict else "false",
        }
    )

    _console.print(f"[green]Saved config to:[/green] {env_path}")
