"""CLI principal (Typer).

La CLI solo recoge flags, valida combinaciones y cablea dependencias
(tabla Morse, FileSink, prompts). Toda la transformación vive en
`core.services.transform_pipeline`.
"""

from __future__ import annotations

import logging
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console

from adapters.code_tables import load_code_table
from adapters.file_sink import FileSink
from cli import doctor
from cli.ui_components import (
    build_code_table_view,
    configure_logging,
    print_banner,
    print_error,
)
from core.config import AppSettings
from core.domain.code_table import CodeTable
from core.domain.errors import TxtmorphError
from core.domain.models import StepFlags
from core.services.transform_pipeline import run_pipeline

app = typer.Typer(
    no_args_is_help=True,
    help="Composable text transforms: case, reverse, binary, Morse and files.",
    pretty_exceptions_show_locals=False,
)
app.add_typer(doctor.app, name="doctor")

_console = Console()
_err_console = Console(stderr=True)

logger = logging.getLogger(__name__)


def _package_version() -> str:
    try:
        return version("txtmorph")
    except PackageNotFoundError:
        return "0.0.0+dev"


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"txtmorph {_package_version()}")
        raise typer.Exit()


def _load_settings() -> AppSettings:
    try:
        return AppSettings()
    except ValidationError as exc:
        print_error(_err_console, f"Invalid configuration: {exc}")
        raise typer.Exit(code=1) from exc


def _terminal_confirmer(token: str):
    def confirm(prompt: str) -> bool:
        answer = typer.prompt(
            f"{prompt} Type {token} to confirm",
            default="",
            show_default=False,
            err=True,
        )
        return answer.strip() == token

    return confirm


@app.callback()
def main(
    version_: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    """txtmorph command line."""


@app.command()
def transform(
    text: str = typer.Option(..., "--text", "-t", help="Input text."),
    capitalize: bool = typer.Option(False, "--capitalize", "-c", help="Uppercase the text."),
    lowercase: bool = typer.Option(False, "--lowercase", "-l", help="Lowercase the text."),
    reverse: bool = typer.Option(False, "--reverse", "-r", help="Reverse the characters."),
    to_binary: bool = typer.Option(False, "--to-binary", "-b", help="Encode UTF-8 bytes as 8-bit groups."),
    from_binary: bool = typer.Option(False, "--from-binary", "-u", help="Decode 8-bit groups into text."),
    to_morse: bool = typer.Option(False, "--to-morse", help="Encode to Morse code."),
    from_morse: bool = typer.Option(False, "--from-morse", help="Decode Morse code."),
    from_file: bool = typer.Option(False, "--from-file", help="Replace the text with the file contents."),
    to_file: bool = typer.Option(False, "--to-file", help="Write the result to --filepath."),
    filepath: Optional[Path] = typer.Option(None, "--filepath", "-f", help="File used by --from-file/--to-file."),
    keep: bool = typer.Option(False, "--keep", "-k", help="Append to the file instead of overwriting."),
    morselanguage: Optional[str] = typer.Option(None, "--morselanguage", "-m", help="Morse table tag (e.g. en)."),
    strict_language: bool = typer.Option(False, "--strict-language", help="Fail on unknown Morse languages."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging on stderr."),
) -> None:
    """Apply the enabled transforms in fixed order and print the result."""

    settings = _load_settings()
    configure_logging("DEBUG" if verbose else settings.log_level, console=_err_console)
    if settings.show_banner:
        print_banner(_err_console)

    try:
        flags = StepFlags(
            capitalize=capitalize,
            lowercase=lowercase,
            reverse=reverse,
            to_binary=to_binary,
            from_binary=from_binary,
            to_morse=to_morse,
            from_morse=from_morse,
            from_file=from_file,
            to_file=to_file,
            filepath=filepath,
            keep_contents=keep,
            morse_language=morselanguage,
        )
    except ValidationError as exc:
        messages = "; ".join(err["msg"] for err in exc.errors())
        raise typer.BadParameter(messages) from exc

    try:
        table: CodeTable | None = None
        if flags.needs_code_table:
            table = load_code_table(
                flags.morse_language,
                settings=settings,
                strict=True if strict_language else None,
            )
        sink = FileSink(
            confirm=_terminal_confirmer(settings.confirm_token),
            echo=typer.echo,
            encoding=settings.file_encoding,
        )
        result = run_pipeline(text, flags, table=table, sink=sink)
    except TxtmorphError as exc:
        logger.debug("Pipeline aborted", exc_info=True)
        print_error(_err_console, str(exc))
        raise typer.Exit(code=1) from exc

    typer.echo(result.output)


@app.command()
def tables(
    language: Optional[str] = typer.Option(None, "--language", "-m", help="Morse table tag (e.g. en)."),
    strict_language: bool = typer.Option(False, "--strict-language", help="Fail on unknown Morse languages."),
) -> None:
    """Show the Morse table resolved for a language tag."""

    settings = _load_settings()
    configure_logging(settings.log_level, console=_err_console)
    try:
        table = load_code_table(language, settings=settings, strict=True if strict_language else None)
    except TxtmorphError as exc:
        print_error(_err_console, str(exc))
        raise typer.Exit(code=1) from exc
    _console.print(build_code_table_view(table))


def run() -> None:
    app()


if __name__ == "__main__":
    run()
