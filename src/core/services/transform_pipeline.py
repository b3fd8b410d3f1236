"""Transform pipeline orchestration.

The CLI collects flags and delegates everything else here: planning the
ordered step list, threading the working string through each step and
collecting warnings. Side effects (printing, prompts) stay out of this module
and reach it only through the injected `FileSink` and `PipelineHooks`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

from adapters.file_sink import FileSink
from core.domain.code_table import CodeTable
from core.domain.errors import TableLoadError
from core.domain.models import FILE_STEPS, PipelineResult, Step, StepFlags, WriteOutcome
from core.services import codecs

logger = logging.getLogger(__name__)

_TEXT_STEPS: dict[Step, Callable[[str], str]] = {
    Step.CAPITALIZE: codecs.capitalize,
    Step.LOWERCASE: codecs.lowercase,
    Step.REVERSE: codecs.reverse,
    Step.TO_BINARY: codecs.to_binary,
}


@dataclass
class PipelineHooks:
    """Optional callbacks for UI layers."""

    warning: Callable[[str], None] | None = None
    step_done: Callable[[Step, str], None] | None = None


def plan_steps(flags: StepFlags) -> list[Step]:
    """Enabled steps in declared order, independent of how flags were given."""

    return [step for step in Step if flags.enabled(step)]


def run_pipeline(
    text: str,
    flags: StepFlags,
    *,
    table: CodeTable | None = None,
    sink: FileSink | None = None,
    hooks: PipelineHooks | None = None,
) -> PipelineResult:
    """Apply every enabled step to `text`.

    `table` must be supplied when a Morse step is enabled. Any error aborts
    the remaining steps and propagates to the caller.
    """

    hooks = hooks or PipelineHooks()
    warnings: list[str] = []
    skipped_tokens: list[str] = []
    write_outcome: WriteOutcome | None = None
    steps = plan_steps(flags)

    if flags.needs_code_table and table is None:
        raise TableLoadError("A Morse step is enabled but no code table was loaded")
    if any(step in FILE_STEPS for step in steps):
        sink = sink or FileSink()

    def warn(message: str) -> None:
        warnings.append(message)
        logger.warning(message)
        if hooks.warning:
            hooks.warning(message)

    working = text
    for step in steps:
        if step in _TEXT_STEPS:
            working = _TEXT_STEPS[step](working)
        elif step is Step.FROM_BINARY:
            decoded = codecs.from_binary(working)
            if decoded.skipped:
                skipped_tokens.extend(decoded.skipped)
                warn(f"Skipped {len(decoded.skipped)} invalid binary token(s): {' '.join(decoded.skipped)}")
            working = decoded.text
        elif step is Step.TO_MORSE:
            working = codecs.to_morse(working, table)  # type: ignore[arg-type]
        elif step is Step.FROM_MORSE:
            working = codecs.from_morse(working, table)  # type: ignore[arg-type]
        elif step is Step.FROM_FILE:
            working = sink.read(flags.filepath)  # type: ignore[union-attr,arg-type]
        elif step is Step.TO_FILE:
            write_outcome = sink.write(  # type: ignore[union-attr]
                flags.filepath,  # type: ignore[arg-type]
                working,
                keep=flags.keep_contents,
            )
            if write_outcome.declined:
                warn(f"Overwrite of {write_outcome.path} declined, file left unchanged")
            working = write_outcome.message

        logger.debug("Step %s -> %r", step.value, working)
        if hooks.step_done:
            hooks.step_done(step, working)

    return PipelineResult(
        output=working,
        steps=steps,
        warnings=warnings,
        skipped_binary_tokens=skipped_tokens,
        write_outcome=write_outcome,
    )
