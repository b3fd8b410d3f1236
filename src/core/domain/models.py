"""Modelos del dominio (Pydantic v2).

Describen *qué* pide el usuario (flags) y *qué* produce cada etapa, no *cómo*
se ejecuta. Los tres "no-op silenciosos" del flujo (tokens binarios
descartados, fallback de idioma, sobrescritura rechazada) tienen aquí un
resultado tipado para que los llamadores puedan distinguirlos de un fallo.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field, model_validator
from pydantic.config import ConfigDict

from core.domain.language import MorseLanguage


class Step(str, Enum):
    """Pipeline steps, declared in execution order."""

    CAPITALIZE = "capitalize"
    LOWERCASE = "lowercase"
    REVERSE = "reverse"
    TO_BINARY = "to_binary"
    FROM_BINARY = "from_binary"
    TO_MORSE = "to_morse"
    FROM_MORSE = "from_morse"
    FROM_FILE = "from_file"
    TO_FILE = "to_file"


MORSE_STEPS: frozenset[Step] = frozenset({Step.TO_MORSE, Step.FROM_MORSE})
FILE_STEPS: frozenset[Step] = frozenset({Step.FROM_FILE, Step.TO_FILE})


class StepFlags(BaseModel):
    """Toggles and auxiliary parameters collected by the host.

    Both directions of a pair (binary or Morse) may be enabled together; they
    run in declared order and are not guaranteed to round-trip.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    capitalize: bool = False
    lowercase: bool = False
    reverse: bool = False
    to_binary: bool = False
    from_binary: bool = False
    to_morse: bool = False
    from_morse: bool = False
    from_file: bool = False
    to_file: bool = False

    filepath: Path | None = Field(
        default=None,
        description="Target for --from-file / --to-file.",
    )
    keep_contents: bool = Field(
        default=False,
        description="Append to the target instead of overwriting it.",
    )
    morse_language: str | None = Field(
        default=None,
        description="Morse table tag (e.g. 'en'). None means the configured default.",
    )

    @model_validator(mode="after")
    def _check_file_target(self) -> "StepFlags":
        if (self.to_file or self.from_file) and self.filepath is None:
            raise ValueError("filepath is required when a file step is enabled")
        return self

    def enabled(self, step: Step) -> bool:
        return bool(getattr(self, step.value))

    @property
    def needs_code_table(self) -> bool:
        return any(self.enabled(step) for step in MORSE_STEPS)


class BinaryDecodeResult(BaseModel):
    text: str
    skipped: list[str] = Field(
        default_factory=list,
        description="Tokens that were not valid 8-bit binary and got dropped.",
    )


class TableSelection(BaseModel):
    """Which table was chosen for a requested tag."""

    requested: str | None
    language: MorseLanguage
    fell_back: bool = False


class WriteStatus(str, Enum):
    WRITTEN = "written"
    APPENDED = "appended"
    DECLINED = "declined"


class WriteOutcome(BaseModel):
    status: WriteStatus
    path: Path
    message: str = Field(
        ...,
        description="'Done: <path>' on success, empty when the overwrite was declined.",
    )

    @property
    def declined(self) -> bool:
        return self.status is WriteStatus.DECLINED


class PipelineResult(BaseModel):
    """Output of a pipeline invocation."""

    output: str
    steps: list[Step] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)
    skipped_binary_tokens: list[str] = Field(default_factory=list)
    write_outcome: WriteOutcome | None = None
