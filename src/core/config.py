"""Configuración del Core.

- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Adaptadores (tablas Morse, ficheros) leen la config de forma consistente.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.domain.language import MorseLanguage


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "txtmorph"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "txtmorph"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "txtmorph"
    return Path.home() / ".config" / "txtmorph"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def _parse_env_lines(text: str) -> dict[str, str]:
    data: dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        if key:
            data[key] = value.strip().strip('"').strip("'")
    return data


def write_user_env_vars(values: dict[str, str | None], *, env_path: Path | None = None) -> Path:
    """Escribe/actualiza variables en el .env global del usuario.

    Los valores `None` se ignoran; el resto reemplaza lo existente.
    """

    env_path = env_path or get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing: dict[str, str] = {}
    if env_path.exists():
        existing = _parse_env_lines(env_path.read_text(encoding="utf-8"))

    existing.update({k: v for k, v in values.items() if v is not None})

    lines = ["# txtmorph user config (.env)"]
    for key in sorted(existing):
        lines.append(f"{key}={existing[key]}")
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


class AppSettings(BaseSettings):
    """Configuración central de la aplicación."""

    model_config = SettingsConfigDict(
        env_prefix="TXTMORPH_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    tables_dir: Path | None = Field(
        default=None,
        description="Directory searched first for morse_<tag>.json tables.",
    )
    default_morse_language: MorseLanguage = Field(
        default=MorseLanguage.ENGLISH,
        description="Table used when no tag is given or the tag is unknown.",
    )
    strict_language: bool = Field(
        default=False,
        description="Fail on unknown Morse language tags instead of falling back.",
    )
    confirm_token: str = Field(
        default="YES",
        min_length=1,
        description="Literal answer that confirms overwriting a non-empty file.",
    )
    file_encoding: str = Field(
        default="utf-8",
        min_length=1,
        description="Encoding for --from-file / --to-file.",
    )
    log_level: str = Field(
        default="WARNING",
        description="Root log level for the CLI (DEBUG, INFO, WARNING, ERROR).",
    )
    show_banner: bool = Field(
        default=False,
        description="Print the banner before command output.",
    )

    @field_validator("log_level")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unknown log level: {value}")
        return level
