"""Localización de recursos (tablas Morse).

Este módulo vive en `core/` porque centraliza *dónde* buscamos los datos sin
acoplarse a la CLI ni al parser de tablas (`adapters.code_tables`).
"""

from __future__ import annotations

import os
import sys
from importlib.resources import files
from pathlib import Path

from core.config import AppSettings, get_user_config_dir

TABLES_PACKAGE = "adapters.code_tables"


def packaged_data_dir() -> Path:
    """`data/` shipped inside the `adapters.code_tables` package."""

    return Path(str(files(TABLES_PACKAGE) / "data"))


def data_dir() -> Path:
    """Directorio de datos empaquetado.

    Reglas:
    - Si TXTMORPH_DATA_DIR está definido, se usa tal cual.
    - Si estamos en modo "frozen" (PyInstaller), usar el directorio del usuario.
    - Si no, el `data/` empaquetado junto a `adapters.code_tables`.
    """

    override = (os.environ.get("TXTMORPH_DATA_DIR") or "").strip()
    if override:
        return Path(override)

    if getattr(sys, "frozen", False):
        return get_user_config_dir() / "data"

    return packaged_data_dir()


def table_candidates(filename: str, settings: AppSettings | None = None) -> list[Path]:
    """Ubicaciones donde se busca una tabla, en orden de prioridad.

    1) `settings.tables_dir`
    2) directorio de datos empaquetado
    3) <user config>/data
    4) ./<filename> (cwd)
    """

    settings = settings or AppSettings()
    candidates: list[Path] = []
    if settings.tables_dir is not None:
        candidates.append(settings.tables_dir / filename)
    candidates.extend(
        [
            data_dir() / filename,
            get_user_config_dir() / "data" / filename,
            Path.cwd() / filename,
        ]
    )
    return candidates


def find_table_path(filename: str, settings: AppSettings | None = None) -> Path | None:
    for path in table_candidates(filename, settings):
        if path.exists() and path.is_file():
            return path
    return None
