"""Output format selection for the CLI."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from modelprint.cli.main import _extract_global_options
from modelprint.cli.output import OutputConfig, emit, normalize_output_format
from modelprint.lib.config.settings import PrinterOptions


def test_normalize_output_format() -> None:
    assert normalize_output_format(requested=None, json_mode=False) == "text"
    assert normalize_output_format(requested=" JSON ", json_mode=False) == "json"
    assert normalize_output_format(requested="text", json_mode=True) == "json"
    with pytest.raises(SystemExit, match="--format must be one of"):
        normalize_output_format(requested="yaml", json_mode=False)


def test_global_options_are_removed_from_argv() -> None:
    cleaned, options = _extract_global_options(["-v", "render", "--format=json", "doc.json", "-v"])

    assert cleaned == ["render", "doc.json"]
    assert options.output.format == "json"
    assert options.verbosity == 2


def test_emit_text_prints_model_and_line_break(capsys: pytest.CaptureFixture[str]) -> None:
    emit({"a": [1]}, OutputConfig(format="text"), options=PrinterOptions(break_limit=0))

    assert capsys.readouterr().out == "{\n  a = [\n    1\n  ]\n}\n"


def test_emit_json_sorts_keys(capsys: pytest.CaptureFixture[str]) -> None:
    emit({"b": 1, "a": Path("x")}, OutputConfig(format="json"))

    assert capsys.readouterr().out == '{"a": "x", "b": 1}\n'


def test_format_flag_selects_json(run_modelprint, tmp_path: Path) -> None:
    document = tmp_path / "doc.json"
    document.write_text('{"a": 1}', encoding="utf-8")

    result = run_modelprint(["--format", "json", "render", str(document)], cwd=tmp_path)

    assert result.returncode == 0, result.stderr
    assert json.loads(result.stdout) == {"a": 1}
