"""Smoke tests for the modelprint command line."""

from __future__ import annotations

import json
from pathlib import Path

from modelprint import __version__


def _write_document(tmp_path: Path, payload: object, name: str = "doc.json") -> Path:
    path = tmp_path / name
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def test_version(run_modelprint) -> None:
    result = run_modelprint(["--version"])
    assert result.returncode == 0
    assert __version__ in result.stdout


def test_help_lists_commands(run_modelprint) -> None:
    result = run_modelprint(["--help"])
    assert result.returncode == 0
    assert "render" in result.stdout
    assert "config" in result.stdout


def test_render_json_document(run_modelprint, tmp_path: Path) -> None:
    document = _write_document(tmp_path, {"a": 1, "b": [1, 2]})

    result = run_modelprint(["render", str(document)], cwd=tmp_path)

    assert result.returncode == 0, result.stderr
    assert result.stdout == "{ a = 1; b = [1, 2]; }\n"


def test_render_with_zero_break_limit(run_modelprint, tmp_path: Path) -> None:
    document = _write_document(tmp_path, {"a": [1]})

    result = run_modelprint(["render", str(document), "--break-limit", "0"], cwd=tmp_path)

    assert result.returncode == 0, result.stderr
    assert result.stdout == "{\n  a = [\n    1\n  ]\n}\n"


def test_render_toml_document(run_modelprint, tmp_path: Path) -> None:
    document = tmp_path / "doc.toml"
    document.write_text('name = "x"\n', encoding="utf-8")

    result = run_modelprint(["render", str(document)], cwd=tmp_path)

    assert result.returncode == 0, result.stderr
    assert result.stdout == '{ name = "x"; }\n'


def test_render_reads_config_and_environment(run_modelprint, cli_env, tmp_path: Path) -> None:
    document = _write_document(tmp_path, {"a": 1})
    (tmp_path / "modelprint.toml").write_text("[printer]\nindent_size = 4\n", encoding="utf-8")
    cli_env["MODELPRINT_BREAK_LIMIT"] = "0"

    result = run_modelprint(["render", str(document)], cwd=tmp_path)

    assert result.returncode == 0, result.stderr
    assert result.stdout == "{\n    a = 1\n}\n"


def test_render_with_colors(run_modelprint, tmp_path: Path) -> None:
    document = _write_document(tmp_path, {"a": "x"})

    result = run_modelprint(["render", str(document), "--colors"], cwd=tmp_path)

    assert result.returncode == 0, result.stderr
    assert "\x1b[" in result.stdout


def test_render_json_mode_echoes_document(run_modelprint, tmp_path: Path) -> None:
    document = _write_document(tmp_path, {"b": [1], "a": None})

    result = run_modelprint(["--json", "render", str(document)], cwd=tmp_path)

    assert result.returncode == 0, result.stderr
    assert json.loads(result.stdout) == {"a": None, "b": [1]}


def test_config_command_shows_resolved_options(run_modelprint, tmp_path: Path) -> None:
    (tmp_path / "modelprint.toml").write_text("[printer]\nbreak_limit = 10\n", encoding="utf-8")

    result = run_modelprint(["--json", "config"], cwd=tmp_path)

    assert result.returncode == 0, result.stderr
    payload = json.loads(result.stdout)
    assert payload["break_limit"] == 10
    assert payload["indent_size"] == 2


def test_missing_document_reports_error(run_modelprint, tmp_path: Path) -> None:
    result = run_modelprint(["render", str(tmp_path / "missing.json")], cwd=tmp_path)

    assert result.returncode == 1
    assert "error:" in result.stderr


def test_invalid_config_reports_error(run_modelprint, tmp_path: Path) -> None:
    document = _write_document(tmp_path, {"a": 1})
    (tmp_path / "modelprint.toml").write_text("[printer]\nindent_size = 'x'\n", encoding="utf-8")

    result = run_modelprint(["render", str(document)], cwd=tmp_path)

    assert result.returncode == 1
    assert "Invalid value for 'printer.indent_size'" in result.stderr
