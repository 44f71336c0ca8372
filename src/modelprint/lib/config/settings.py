"""Printer options and their TOML/environment loader."""

from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import TYPE_CHECKING, cast

if TYPE_CHECKING:
    from collections.abc import Mapping

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = "modelprint.toml"
CONFIG_ENV_VAR = "MODELPRINT_CONFIG"


@dataclass(frozen=True, slots=True)
class PrinterOptions:
    """Layout configuration, fixed for the lifetime of one printer."""

    indent_size: int = 2
    line_break: str = "\n"
    break_limit: int = 78  # 0 breaks at every breakable point
    raw: bool = False
    colors: bool = False
    annotate: bool = False


# Accepts both snake_case and the camelCase spellings used by option dicts.
_KEY_MAP: dict[str, str] = {
    "indent_size": "indent_size",
    "indentSize": "indent_size",
    "line_break": "line_break",
    "lineBreak": "line_break",
    "break_limit": "break_limit",
    "breakLimit": "break_limit",
    "break_length": "break_limit",
    "breakLength": "break_limit",
    "raw": "raw",
    "colors": "colors",
    "use_color": "colors",
    "useColor": "colors",
    "annotate": "annotate",
    "annotated": "annotate",
}

_ENV_OVERRIDE_MAP: dict[str, str] = {
    "MODELPRINT_INDENT_SIZE": "indent_size",
    "MODELPRINT_LINE_BREAK": "line_break",
    "MODELPRINT_BREAK_LIMIT": "break_limit",
    "MODELPRINT_RAW": "raw",
    "MODELPRINT_COLORS": "colors",
    "MODELPRINT_ANNOTATE": "annotate",
}

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off", ""})


def _expected_type_name(field_name: str) -> str:
    if field_name in {"indent_size", "break_limit"}:
        return "int"
    if field_name in {"raw", "colors", "annotate"}:
        return "bool"
    return "str"


def _coerce_value(*, field_name: str, raw_value: object, source: str) -> object:
    expected = _expected_type_name(field_name)
    if expected == "int":
        if isinstance(raw_value, bool) or not isinstance(raw_value, int):
            raise ValueError(
                f"Invalid value for '{source}': expected int, got "
                f"{type(raw_value).__name__} ({raw_value!r})."
            )
        return raw_value

    if expected == "bool":
        if not isinstance(raw_value, bool):
            raise ValueError(
                f"Invalid value for '{source}': expected bool, got "
                f"{type(raw_value).__name__} ({raw_value!r})."
            )
        return raw_value

    if not isinstance(raw_value, str):
        raise ValueError(
            f"Invalid value for '{source}': expected str, got "
            f"{type(raw_value).__name__} ({raw_value!r})."
        )
    return raw_value


def _coerce_env_value(*, field_name: str, raw_value: str, env_name: str) -> object:
    expected = _expected_type_name(field_name)
    if expected == "int":
        try:
            return int(raw_value.strip())
        except ValueError as error:
            raise ValueError(
                f"Invalid environment override '{env_name}': expected int, got {raw_value!r}."
            ) from error

    if expected == "bool":
        normalized = raw_value.strip().lower()
        if normalized in _TRUE_VALUES:
            return True
        if normalized in _FALSE_VALUES:
            return False
        raise ValueError(
            f"Invalid environment override '{env_name}': expected bool, got {raw_value!r}."
        )

    # Shell-friendly escapes: MODELPRINT_LINE_BREAK='\r\n'.
    return raw_value.replace("\\r", "\r").replace("\\n", "\n").replace("\\t", "\t")


def normalize_options(options: PrinterOptions) -> PrinterOptions:
    """Replace out-of-range values with safe ones; never raises."""

    defaults = PrinterOptions()
    changes: dict[str, object] = {}
    if options.indent_size < 0:
        logger.warning(
            "Negative indent_size %d; using default %d.", options.indent_size, defaults.indent_size
        )
        changes["indent_size"] = defaults.indent_size
    if not options.line_break:
        logger.warning("Empty line_break; using %r.", defaults.line_break)
        changes["line_break"] = defaults.line_break
    if options.break_limit < 0:
        logger.warning("Negative break_limit %d; clamping to 0.", options.break_limit)
        changes["break_limit"] = 0
    if not changes:
        return options
    return replace(options, **changes)


def _default_values() -> dict[str, object]:
    defaults = PrinterOptions()
    return {field.name: getattr(defaults, field.name) for field in fields(PrinterOptions)}


def _apply_mapping(values: dict[str, object], payload: Mapping[str, object], *, section: str) -> None:
    for key, raw_value in payload.items():
        field_name = _KEY_MAP.get(key)
        source = f"{section}.{key}" if section else key
        if field_name is None:
            logger.warning("Ignoring unknown modelprint option '%s'.", source)
            continue
        values[field_name] = _coerce_value(
            field_name=field_name,
            raw_value=raw_value,
            source=source,
        )


def _apply_env_overrides(values: dict[str, object]) -> None:
    for env_name, field_name in _ENV_OVERRIDE_MAP.items():
        raw_value = os.getenv(env_name)
        if raw_value is None:
            continue
        values[field_name] = _coerce_env_value(
            field_name=field_name,
            raw_value=raw_value,
            env_name=env_name,
        )


def _build_options(values: dict[str, object]) -> PrinterOptions:
    return normalize_options(
        PrinterOptions(
            indent_size=cast("int", values["indent_size"]),
            line_break=cast("str", values["line_break"]),
            break_limit=cast("int", values["break_limit"]),
            raw=cast("bool", values["raw"]),
            colors=cast("bool", values["colors"]),
            annotate=cast("bool", values["annotate"]),
        )
    )


def options_from_mapping(payload: Mapping[str, object]) -> PrinterOptions:
    """Build options from a plain dict such as `{"breakLimit": 0, "indentSize": 4}`."""

    values = _default_values()
    _apply_mapping(values, payload, section="")
    return _build_options(values)


def resolve_config_path(explicit: Path | None = None) -> Path | None:
    """Locate the config file.

    Precedence:
    1. Explicit function argument.
    2. `MODELPRINT_CONFIG` environment variable.
    3. `modelprint.toml` in the current working directory, when present.
    """

    if explicit is not None:
        return explicit.expanduser()

    env_path = os.getenv(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path).expanduser()

    candidate = Path.cwd() / CONFIG_FILE_NAME
    if candidate.is_file():
        return candidate
    return None


def load_config(path: Path | None = None) -> PrinterOptions:
    """Load the `[printer]` table of the config file and apply environment overrides."""

    values = _default_values()
    config_path = resolve_config_path(path)
    if config_path is not None:
        if not config_path.is_file():
            raise FileNotFoundError(f"Config file not found: {config_path}")
        payload = cast("dict[str, object]", tomllib.loads(config_path.read_text(encoding="utf-8")))
        for key, raw_value in payload.items():
            if key != "printer":
                logger.warning("Ignoring unknown modelprint config table '%s'.", key)
                continue
            if not isinstance(raw_value, dict):
                raise ValueError(f"Invalid value for 'printer' in '{config_path}': expected table.")
            _apply_mapping(values, cast("dict[str, object]", raw_value), section="printer")

    _apply_env_overrides(values)
    return _build_options(values)
