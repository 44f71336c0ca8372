"""Cyclopts CLI entry point for modelprint."""

from __future__ import annotations

import logging
import sys
from contextvars import ContextVar
from dataclasses import dataclass, replace
from pathlib import Path
from typing import TYPE_CHECKING, Annotated

from cyclopts import App, Parameter

from modelprint import __version__
from modelprint.cli.output import OutputConfig, normalize_output_format
from modelprint.cli.output import emit as emit_output
from modelprint.lib.config.settings import PrinterOptions, load_config, normalize_options
from modelprint.lib.program import default_registry
from modelprint.lib.serialization import load_document

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class GlobalOptions:
    """Top-level options that apply to all commands."""

    output: OutputConfig
    verbosity: int = 0


_GLOBAL_OPTIONS: ContextVar[GlobalOptions | None] = ContextVar("_GLOBAL_OPTIONS", default=None)


def get_global_options() -> GlobalOptions:
    """Return parsed global options for current command."""

    default = GlobalOptions(output=OutputConfig(format="text"))
    return _GLOBAL_OPTIONS.get() or default


def _extract_global_options(argv: Sequence[str]) -> tuple[list[str], GlobalOptions]:
    json_mode = False
    output_format: str | None = None
    verbosity = 0
    cleaned: list[str] = []

    i = 0
    while i < len(argv):
        arg = argv[i]
        if arg == "--json":
            json_mode = True
            i += 1
            continue
        if arg == "--no-json":
            i += 1
            continue
        if arg == "--format":
            if i + 1 >= len(argv):
                raise SystemExit("--format requires a value")
            output_format = argv[i + 1]
            i += 2
            continue
        if arg.startswith("--format="):
            output_format = arg.partition("=")[2]
            i += 1
            continue
        if arg in {"--verbose", "-v"}:
            verbosity += 1
            i += 1
            continue

        cleaned.append(arg)
        i += 1

    resolved = normalize_output_format(requested=output_format, json_mode=json_mode)
    return cleaned, GlobalOptions(output=OutputConfig(format=resolved), verbosity=verbosity)


app = App(
    name="modelprint",
    help="Render data files as indented, line-wrapped models.",
    version=__version__,
    help_formatter="plain",
)


def _resolve_options(
    *,
    config: str | None,
    raw: bool,
    colors: bool,
    annotate: bool,
    break_limit: int | None,
    indent_size: int | None,
) -> PrinterOptions:
    options = load_config(Path(config) if config is not None else None)
    # Flags only ever switch features on; config and environment decide the rest.
    if raw:
        options = replace(options, raw=True)
    if colors:
        options = replace(options, colors=True)
    if annotate:
        options = replace(options, annotate=True)
    if break_limit is not None:
        options = replace(options, break_limit=break_limit)
    if indent_size is not None:
        options = replace(options, indent_size=indent_size)
    return normalize_options(options)


@app.command(name="render")
def render(
    path: Annotated[
        str,
        Parameter(help="JSON or TOML file to render; '-' reads JSON from stdin."),
    ],
    raw: Annotated[
        bool,
        Parameter(name="--raw", help="Skip custom renderers and print raw data."),
    ] = False,
    colors: Annotated[
        bool,
        Parameter(name="--colors", help="Highlight syntax with ANSI colors."),
    ] = False,
    annotate: Annotated[
        bool,
        Parameter(name="--annotate", help="Prefix structural renderings with tags."),
    ] = False,
    break_limit: Annotated[
        int | None,
        Parameter(name="--break-limit", help="Maximum line width; 0 puts every item on its own line."),
    ] = None,
    indent_size: Annotated[
        int | None,
        Parameter(name="--indent-size", help="Spaces per indentation level."),
    ] = None,
    config: Annotated[
        str | None,
        Parameter(name="--config", help="Path to a modelprint.toml file."),
    ] = None,
) -> None:
    """Render a data file as a model."""

    options = _resolve_options(
        config=config,
        raw=raw,
        colors=colors,
        annotate=annotate,
        break_limit=break_limit,
        indent_size=indent_size,
    )
    document = load_document(path)
    logger.debug("rendering %s with %s", path, options)
    emit_output(
        document,
        get_global_options().output,
        options=options,
        registry=default_registry(),
    )


@app.command(name="config")
def show_config(
    config: Annotated[
        str | None,
        Parameter(name="--config", help="Path to a modelprint.toml file."),
    ] = None,
) -> None:
    """Show the resolved printer options."""

    options = load_config(Path(config) if config is not None else None)
    emit_output(options, get_global_options().output)


def _operation_error_message(exc: Exception) -> str:
    if isinstance(exc, KeyError) and exc.args:
        return str(exc.args[0])
    message = str(exc).strip()
    if message:
        return message
    return exc.__class__.__name__


def main(argv: Sequence[str] | None = None) -> None:
    """CLI entry point used by `modelprint` and `python -m modelprint`."""

    from modelprint.lib.logging import configure_logging

    args = list(sys.argv[1:] if argv is None else argv)
    cleaned_args, options = _extract_global_options(args)

    # Configure logging early so warnings go to stderr, never into rendered output.
    configure_logging(
        json_mode=options.output.format == "json",
        verbosity=options.verbosity,
    )

    token = _GLOBAL_OPTIONS.set(options)
    try:
        try:
            app(cleaned_args)
        except (KeyError, ValueError, FileNotFoundError, OSError) as exc:
            print(f"error: {_operation_error_message(exc)}", file=sys.stderr)
            raise SystemExit(1) from None
    finally:
        _GLOBAL_OPTIONS.reset(token)
