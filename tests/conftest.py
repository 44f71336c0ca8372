"""Shared pytest fixtures for printer and CLI checks."""

from __future__ import annotations

import os
import subprocess
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

import pytest

from modelprint.lib.printer import Printer
from modelprint.lib.sinks import StringSink
from modelprint.lib.styles import PLAIN_PALETTE

if TYPE_CHECKING:
    from collections.abc import Callable

    from modelprint.lib.registry import RendererRegistry

PACKAGE_ROOT = Path(__file__).resolve().parents[1]


@dataclass(frozen=True, slots=True)
class CliResult:
    args: tuple[str, ...]
    returncode: int
    stdout: str
    stderr: str


@dataclass(slots=True)
class PrinterHarness:
    printer: Printer
    sink: StringSink

    @property
    def output(self) -> str:
        return self.sink.getvalue()


@pytest.fixture
def package_root() -> Path:
    return PACKAGE_ROOT


@pytest.fixture
def make_printer() -> Callable[..., PrinterHarness]:
    """Build a printer writing into memory; keyword arguments become options."""

    def _make(registry: RendererRegistry | None = None, **options: object) -> PrinterHarness:
        sink = StringSink()
        palette = None if options.get("colors") else PLAIN_PALETTE
        printer = Printer(sink, options, registry=registry, palette=palette)
        return PrinterHarness(printer=printer, sink=sink)

    return _make


@pytest.fixture
def cli_env(package_root: Path) -> dict[str, str]:
    env = {key: value for key, value in os.environ.items() if not key.startswith("MODELPRINT_")}
    existing = env.get("PYTHONPATH", "")
    root = str(package_root / "src")
    env["PYTHONPATH"] = root if not existing else f"{root}:{existing}"
    return env


@pytest.fixture
def run_modelprint(package_root: Path, cli_env: dict[str, str]) -> Callable[..., CliResult]:
    def _run(args: list[str], timeout: float = 15.0, cwd: Path | None = None) -> CliResult:
        completed = subprocess.run(
            [sys.executable, "-m", "modelprint", *args],
            cwd=cwd or package_root,
            env=cli_env,
            capture_output=True,
            text=True,
            check=False,
            timeout=timeout,
        )
        return CliResult(
            args=tuple(args),
            returncode=completed.returncode,
            stdout=completed.stdout,
            stderr=completed.stderr,
        )

    return _run
