"""Document loading and JSON conversion for the CLI."""

from __future__ import annotations

import json
import sys
import tomllib
from collections.abc import Mapping
from dataclasses import fields, is_dataclass
from enum import Enum
from pathlib import Path
from typing import Any

STDIN_PATH = "-"


def to_jsonable(value: Any) -> Any:
    """Convert options, documents and program nodes to JSON-serializable payloads."""

    if is_dataclass(value) and not isinstance(value, type):
        return {field.name: to_jsonable(getattr(value, field.name)) for field in fields(value)}
    if isinstance(value, Path):
        return str(value)
    if isinstance(value, Enum):
        return value.name
    if isinstance(value, Mapping):
        return {str(key): to_jsonable(item) for key, item in value.items()}
    if isinstance(value, (list, tuple, set, frozenset)):
        return [to_jsonable(item) for item in value]
    return value


def load_document(path: str) -> object:
    """Load a JSON or TOML document; `-` reads JSON from stdin.

    Decoding errors surface as `ValueError` (both `json.JSONDecodeError` and
    `tomllib.TOMLDecodeError` subclass it).
    """

    if path == STDIN_PATH:
        return json.loads(sys.stdin.read())
    source = Path(path).expanduser()
    text = source.read_text(encoding="utf-8")
    if source.suffix.lower() == ".toml":
        return tomllib.loads(text)
    return json.loads(text)
