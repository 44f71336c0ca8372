"""CLI output formatting utilities."""

from __future__ import annotations

import json
import sys
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Literal, cast

from modelprint.lib.printer import Printer
from modelprint.lib.serialization import to_jsonable

if TYPE_CHECKING:
    from modelprint.lib.config.settings import PrinterOptions
    from modelprint.lib.registry import RendererRegistry

OutputFormat = Literal["text", "json"]


@dataclass(frozen=True, slots=True)
class OutputConfig:
    format: OutputFormat


def normalize_output_format(*, requested: str | None, json_mode: bool) -> OutputFormat:
    """Resolve final output format from flags; default is text."""

    if json_mode:
        return "json"
    if requested is None or requested == "":
        return "text"
    normalized = requested.strip().lower()
    if normalized in {"text", "json"}:
        return cast("OutputFormat", normalized)
    raise SystemExit("--format must be one of: text, json")


def emit(
    value: Any,
    config: OutputConfig,
    *,
    options: PrinterOptions | None = None,
    registry: RendererRegistry | None = None,
) -> None:
    """Emit one payload according to the configured output mode."""

    if config.format == "json":
        print(json.dumps(to_jsonable(value), sort_keys=True))
        return
    Printer(sys.stdout, options, registry=registry).model(value).br()
