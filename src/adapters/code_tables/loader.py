"""Carga de tablas Morse (data-driven).

Resuelve el tag de idioma, localiza `morse_<tag>.json` y lo valida con
`MorseTableFile` antes de construir el `CodeTable` inmutable.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from adapters.code_tables.models import MorseTableFile
from core.config import AppSettings
from core.domain.code_table import CodeTable
from core.domain.errors import TableLoadError, UnsupportedLanguageError
from core.domain.language import MorseLanguage
from core.domain.models import TableSelection
from core.resources_loader import find_table_path, table_candidates

logger = logging.getLogger(__name__)


def select_language(
    tag: str | None,
    *,
    settings: AppSettings,
    strict: bool | None = None,
) -> TableSelection:
    """Map a requested tag onto a supported table.

    No tag means the configured default. An unknown tag falls back to the
    default unless strict mode is on, in which case it is an error.
    """

    strict = settings.strict_language if strict is None else strict
    default = settings.default_morse_language

    if tag is None or not tag.strip():
        return TableSelection(requested=tag, language=default)

    language = MorseLanguage.parse(tag)
    if language is not None:
        return TableSelection(requested=tag, language=language)

    if strict:
        raise UnsupportedLanguageError(tag, MorseLanguage.tags())

    logger.warning("Unknown Morse language %r, falling back to %r", tag, default.value)
    return TableSelection(requested=tag, language=default, fell_back=True)


def read_table_file(path: Path, *, language: MorseLanguage) -> CodeTable:
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise TableLoadError(f"Cannot read Morse table {path}: {exc}", path=path) from exc

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise TableLoadError(f"Morse table {path} is not valid JSON: {exc}", path=path) from exc

    try:
        parsed = MorseTableFile.model_validate(data)
    except ValidationError as exc:
        raise TableLoadError(
            f"Morse table {path} is not a flat character-to-code mapping: {exc}",
            path=path,
        ) from exc

    table = CodeTable(parsed.root, language=language)
    for code, keys in table.ambiguous_codes().items():
        logger.warning("Morse code %r maps to several keys %s in %s", code, list(keys), path.name)
    logger.debug("Loaded %s from %s", table, path)
    return table


def load_code_table(
    tag: str | None = None,
    *,
    settings: AppSettings | None = None,
    strict: bool | None = None,
) -> CodeTable:
    """Resolve `tag` and load its table.

    Raises `TableLoadError` when the resource is missing or malformed and
    `UnsupportedLanguageError` for unknown tags in strict mode.
    """

    settings = settings or AppSettings()
    selection = select_language(tag, settings=settings, strict=strict)
    filename = selection.language.resource_name

    path = find_table_path(filename, settings)
    if path is None:
        searched = ", ".join(str(p) for p in table_candidates(filename, settings))
        raise TableLoadError(f"Morse table {filename} not found (searched: {searched})")

    return read_table_file(path, language=selection.language)
