"""Program model nodes of a small object/expression language.

A program is a tree of these nodes mixed with plain Python values: numbers,
strings, lists and dicts appear as literals.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True)
class Wrapper:
    """Wraps an evaluated object; prints as the object itself."""

    obj: object


@dataclass(slots=True)
class Definition:
    key: object
    value: object


@dataclass(slots=True)
class Constructor:
    """An object literal built from a list of statements (usually definitions)."""

    stms: list[object] = field(default_factory=list)


@dataclass(slots=True)
class This:
    pass


@dataclass(slots=True)
class KeyReference:
    key: object


@dataclass(slots=True)
class PropertyReference:
    target: object
    key: object


@dataclass(slots=True)
class Parameter:
    name: str


@dataclass(slots=True)
class Function:
    params: list[Parameter]
    body: object


@dataclass(slots=True)
class Invocation:
    """Calls `func` with `args`; `target` is the receiver, None or `This` for none."""

    target: object
    func: object
    args: list[object] = field(default_factory=list)


@dataclass(slots=True)
class Closure:
    expr: object
    env: object = None
