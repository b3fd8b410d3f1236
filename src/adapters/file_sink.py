"""Lectura/escritura del working string contra un fichero.

- La confirmación de sobrescritura es una capacidad inyectada (`Confirmer`),
  así la protección se puede testear sin terminal.
- Un fichero inexistente cuenta como vacío: se crea sin preguntar.
"""

from __future__ import annotations

import logging
from pathlib import Path

from core.domain.errors import FileReadError, FileWriteError
from core.domain.models import WriteOutcome, WriteStatus
from core.interfaces.prompts import Confirmer, Echo, decline_all, no_echo

logger = logging.getLogger(__name__)


def done_message(path: Path) -> str:
    return f"Done: {path}"


class FileSink:
    """Terminal read or write stage of the pipeline."""

    def __init__(
        self,
        *,
        confirm: Confirmer = decline_all,
        echo: Echo = no_echo,
        encoding: str = "utf-8",
    ) -> None:
        self._confirm = confirm
        self._echo = echo
        self._encoding = encoding

    def read(self, path: Path) -> str:
        """Return the whole file and echo it.

        Raises `FileReadError` if the file is missing or unreadable.
        """

        content = self._read_text(path)
        self._echo(content)
        return content

    def write(self, path: Path, text: str, *, keep: bool = False) -> WriteOutcome:
        existing = self._read_existing(path)

        if keep:
            self._write_text(path, existing + text)
            logger.debug("Appended %d chars to %s", len(text), path)
            return WriteOutcome(status=WriteStatus.APPENDED, path=path, message=done_message(path))

        if existing and not self._confirm(
            f"{path} is not empty. Overwrite its contents?"
        ):
            logger.info("Overwrite of %s declined, nothing written", path)
            return WriteOutcome(status=WriteStatus.DECLINED, path=path, message="")

        self._write_text(path, text)
        logger.debug("Wrote %d chars to %s", len(text), path)
        return WriteOutcome(status=WriteStatus.WRITTEN, path=path, message=done_message(path))

    def _read_existing(self, path: Path) -> str:
        if not path.exists():
            return ""
        return self._read_text(path)

    def _read_text(self, path: Path) -> str:
        try:
            return path.read_text(encoding=self._encoding)
        except FileNotFoundError as exc:
            raise FileReadError(path, "file does not exist") from exc
        except (OSError, UnicodeDecodeError) as exc:
            raise FileReadError(path, str(exc)) from exc

    def _write_text(self, path: Path, text: str) -> None:
        try:
            path.write_text(text, encoding=self._encoding)
        except OSError as exc:
            raise FileWriteError(path, str(exc)) from exc
