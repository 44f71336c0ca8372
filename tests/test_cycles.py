"""Cycle tracker identity semantics."""

from __future__ import annotations

from dataclasses import dataclass

from modelprint.lib.layout.cycles import ARRAY_PLACEHOLDER, OBJECT_PLACEHOLDER, CycleTracker


@dataclass(slots=True)
class _Point:
    x: int
    y: int


def test_enter_records_first_visit() -> None:
    tracker = CycleTracker()
    value = {"a": 1}

    assert tracker.enter(value) is False
    assert tracker.enter(value) is True
    assert value in tracker


def test_structurally_equal_values_are_distinct() -> None:
    tracker = CycleTracker()

    assert tracker.enter([1, 2]) is False
    assert tracker.enter([1, 2]) is False
    assert len(tracker) == 2


def test_primitives_and_callables_are_not_tracked() -> None:
    tracker = CycleTracker()

    for value in (1, "text", None, 2.5, len, _Point):
        assert tracker.enter(value) is False
        assert tracker.enter(value) is False
    assert len(tracker) == 0


def test_records_are_tracked() -> None:
    tracker = CycleTracker()
    point = _Point(1, 2)

    assert tracker.enter(point) is False
    assert tracker.enter(point) is True


def test_placeholder_depends_on_kind() -> None:
    tracker = CycleTracker()
    items: list[object] = []
    mapping: dict[str, object] = {}
    tracker.enter(items)
    tracker.enter(mapping)

    assert tracker.placeholder(items) == ARRAY_PLACEHOLDER
    assert tracker.placeholder(mapping) == OBJECT_PLACEHOLDER
    assert tracker.placeholder((1,)) == ARRAY_PLACEHOLDER


def test_clear_forgets_visits() -> None:
    tracker = CycleTracker()
    value: list[object] = []
    tracker.enter(value)

    tracker.clear()

    assert tracker.enter(value) is False
