"""Identity-keyed visited set used to stop recursion on shared or cyclic values."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import is_dataclass

ARRAY_PLACEHOLDER = "@circular[array]"
OBJECT_PLACEHOLDER = "@circular[object]"


def placeholder_for(value: object) -> str:
    if isinstance(value, (list, tuple)):
        return ARRAY_PLACEHOLDER
    return OBJECT_PLACEHOLDER


def is_composite(value: object) -> bool:
    if isinstance(value, (list, tuple, Mapping)):
        return True
    if isinstance(value, type) or callable(value):
        return False
    return hasattr(value, "__dict__") or is_dataclass(value)


class CycleTracker:
    """Remembers every composite entered during one top-level print.

    Entries are not dropped when a value has been fully printed, so a shared
    value that appears twice in one call renders as a placeholder the second
    time even when there is no actual cycle.
    """

    def __init__(self) -> None:
        # id -> (placeholder, value); holding the value keeps its id from being reused.
        self._visited: dict[int, tuple[str, object]] = {}

    def __len__(self) -> int:
        return len(self._visited)

    def __contains__(self, value: object) -> bool:
        return id(value) in self._visited

    def clear(self) -> None:
        self._visited.clear()

    def enter(self, value: object) -> bool:
        """Record `value`; return True when it was already visited."""

        if not is_composite(value):
            return False
        key = id(value)
        if key in self._visited:
            return True
        self._visited[key] = (placeholder_for(value), value)
        return False

    def placeholder(self, value: object) -> str:
        entry = self._visited.get(id(value))
        if entry is None:
            return placeholder_for(value)
        return entry[0]
