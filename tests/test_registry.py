from __future__ import annotations

import pytest

from modelprint.lib.registry import RendererRegistry


class Money:
    def __init__(self, amount: int) -> None:
        self.amount = amount


class Euro(Money):
    pass


def _render_money(printer, value: Money) -> None:
    printer.text(f"${value.amount}")


def test_lookup_follows_mro() -> None:
    registry = RendererRegistry({Money: _render_money})

    assert registry.lookup(Euro(1)) is _render_money
    assert registry.lookup(1) is None


def test_register_rejects_duplicates_and_object() -> None:
    registry = RendererRegistry({Money: _render_money})

    with pytest.raises(ValueError, match="Duplicate renderer for 'Money'"):
        registry.register(Money, _render_money)
    with pytest.raises(ValueError, match="'object'"):
        registry.register(object, _render_money)

    registry.register(Money, print, replace=True)
    assert registry.lookup(Money(1)) is print


def test_renders_decorator() -> None:
    registry = RendererRegistry()

    @registry.renders(Money)
    def render(printer, value) -> None:
        printer.text("money")

    assert Money in registry
    assert list(registry) == [Money]
    assert len(registry) == 1


def test_copy_is_independent() -> None:
    registry = RendererRegistry({Money: _render_money})
    clone = registry.copy()
    clone.unregister(Money)

    assert Money in registry
    assert Money not in clone


def test_printer_uses_registered_renderer(make_printer) -> None:
    registry = RendererRegistry({Money: _render_money})
    harness = make_printer(registry=registry)
    harness.printer.model([Money(5), Euro(2)])
    assert harness.output == "[$5, $2]"

    harness = make_printer(registry=registry, raw=True)
    harness.printer.model([Money(5)])
    assert harness.output == "[Money { amount = 5; }]"
