import pytest

from adapters.file_sink import FileSink
from core.domain.errors import FileReadError, TableLoadError
from core.domain.models import Step, StepFlags, WriteStatus
from core.services.transform_pipeline import PipelineHooks, plan_steps, run_pipeline


def test_no_steps_returns_input():
    result = run_pipeline("Hello", StepFlags())

    assert result.output == "Hello"
    assert result.steps == []


def test_plan_steps_uses_declared_order():
    flags = StepFlags(to_file=True, filepath="x", from_morse=True, reverse=True, capitalize=True)

    assert plan_steps(flags) == [Step.CAPITALIZE, Step.REVERSE, Step.FROM_MORSE, Step.TO_FILE]


def test_capitalize_and_lowercase_lowercase_wins():
    result = run_pipeline("MiXeD", StepFlags(lowercase=True, capitalize=True))

    assert result.output == "mixed"
    assert result.steps == [Step.CAPITALIZE, Step.LOWERCASE]


def test_to_binary_scenario():
    assert run_pipeline("Hi", StepFlags(to_binary=True)).output == "01001000 01101001"


def test_binary_both_directions_round_trip():
    result = run_pipeline("Hi there", StepFlags(to_binary=True, from_binary=True))

    assert result.output == "Hi there"


def test_from_binary_skipped_tokens_become_warnings():
    warnings = []
    result = run_pipeline(
        "01001000 999 01101001",
        StepFlags(from_binary=True),
        hooks=PipelineHooks(warning=warnings.append),
    )

    assert result.output == "Hi"
    assert result.skipped_binary_tokens == ["999"]
    assert len(result.warnings) == 1
    assert warnings == result.warnings


def test_to_morse_scenario(sample_table):
    result = run_pipeline("sos", StepFlags(to_morse=True, morse_language="en"), table=sample_table)

    assert result.output == "... --- ..."


def test_reverse_then_morse(sample_table):
    result = run_pipeline("ab", StepFlags(reverse=True, to_morse=True), table=sample_table)

    assert result.output == "? .-"


def test_morse_without_table_fails():
    with pytest.raises(TableLoadError):
        run_pipeline("sos", StepFlags(to_morse=True))


def test_step_done_hook_sees_each_step():
    seen = []
    run_pipeline(
        "ab",
        StepFlags(capitalize=True, reverse=True),
        hooks=PipelineHooks(step_done=lambda step, text: seen.append((step, text))),
    )

    assert seen == [(Step.CAPITALIZE, "AB"), (Step.REVERSE, "BA")]


def test_to_file_empty_target_writes_and_reports_done(tmp_path):
    path = tmp_path / "out.txt"
    path.write_text("", encoding="utf-8")
    prompts = []
    sink = FileSink(confirm=lambda prompt: prompts.append(prompt) or False)

    result = run_pipeline("hey", StepFlags(capitalize=True, to_file=True, filepath=path), sink=sink)

    assert result.output == f"Done: {path}"
    assert result.write_outcome.status is WriteStatus.WRITTEN
    assert path.read_text(encoding="utf-8") == "HEY"
    assert prompts == []


def test_to_file_declined_returns_empty_output(tmp_path):
    path = tmp_path / "out.txt"
    path.write_text("keep me", encoding="utf-8")
    sink = FileSink(confirm=lambda prompt: False)

    result = run_pipeline("new", StepFlags(to_file=True, filepath=path), sink=sink)

    assert result.output == ""
    assert result.write_outcome.declined
    assert result.warnings
    assert path.read_text(encoding="utf-8") == "keep me"


def test_to_file_keep_appends(tmp_path):
    path = tmp_path / "out.txt"
    path.write_text("abc", encoding="utf-8")

    result = run_pipeline(
        "def",
        StepFlags(to_file=True, filepath=path, keep_contents=True),
        sink=FileSink(),
    )

    assert result.output == f"Done: {path}"
    assert path.read_text(encoding="utf-8") == "abcdef"


def test_from_file_replaces_working_string_and_echoes(tmp_path):
    path = tmp_path / "in.txt"
    path.write_text("from disk", encoding="utf-8")
    echoed = []

    result = run_pipeline(
        "ignored",
        StepFlags(capitalize=True, from_file=True, filepath=path),
        sink=FileSink(echo=echoed.append),
    )

    assert result.output == "from disk"
    assert echoed == ["from disk"]


def test_from_file_then_to_file_copies(tmp_path):
    path = tmp_path / "same.txt"
    path.write_text("abc", encoding="utf-8")

    result = run_pipeline(
        "x",
        StepFlags(from_file=True, to_file=True, keep_contents=True, filepath=path),
        sink=FileSink(),
    )

    assert result.steps == [Step.FROM_FILE, Step.TO_FILE]
    assert path.read_text(encoding="utf-8") == "abcabc"


def test_error_aborts_remaining_steps(tmp_path):
    missing = tmp_path / "missing.txt"

    with pytest.raises(FileReadError):
        run_pipeline("x", StepFlags(from_file=True, to_file=True, filepath=missing), sink=FileSink())

    assert not missing.exists()
