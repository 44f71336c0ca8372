"""Renderer registry: maps a value's type to a custom rendering callback."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import structlog

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator, Mapping

    from modelprint.lib.printer import Printer

    type Renderer = Callable[[Printer, Any], None]

logger = structlog.get_logger(__name__)


class RendererRegistry:
    """Lookup table from a stable kind (a Python type) to a renderer.

    Lookup follows the value's MRO, so a renderer registered for a base class
    also handles its subclasses. Unregistered kinds return None and the printer
    falls back to its generic rendering.
    """

    def __init__(self, renderers: Mapping[type, Renderer] | None = None) -> None:
        self._renderers: dict[type, Renderer] = {}
        for kind, renderer in (renderers or {}).items():
            self.register(kind, renderer)

    def __contains__(self, kind: object) -> bool:
        return kind in self._renderers

    def __len__(self) -> int:
        return len(self._renderers)

    def __iter__(self) -> Iterator[type]:
        return iter(self._renderers)

    def register(self, kind: type, renderer: Renderer, *, replace: bool = False) -> Renderer:
        """Register a renderer and guard against accidental duplicates."""

        if kind is object:
            raise ValueError("Cannot register a renderer for 'object'; it would shadow every value")
        if kind in self._renderers and not replace:
            raise ValueError(
                f"Duplicate renderer for '{kind.__name__}': already registered as "
                f"{self._renderers[kind]}"
            )
        self._renderers[kind] = renderer
        logger.debug("renderer registered", kind=kind.__name__)
        return renderer

    def renders(self, kind: type) -> Callable[[Renderer], Renderer]:
        """Decorator form of `register`."""

        def decorate(renderer: Renderer) -> Renderer:
            return self.register(kind, renderer)

        return decorate

    def unregister(self, kind: type) -> None:
        self._renderers.pop(kind, None)

    def lookup(self, value: object) -> Renderer | None:
        for kind in type(value).__mro__:
            renderer = self._renderers.get(kind)
            if renderer is not None:
                return renderer
        return None

    def copy(self) -> RendererRegistry:
        return RendererRegistry(self._renderers)
