"""Fluent printer: the public API and the recursive model dispatcher."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import fields, is_dataclass
from enum import Enum
from typing import TYPE_CHECKING, Final, Self

import structlog

from modelprint.lib.config.settings import PrinterOptions, normalize_options, options_from_mapping
from modelprint.lib.formatting import print_formatted
from modelprint.lib.layout.blocks import (
    ARRAY,
    INDENT,
    OBJECT,
    PAREN,
    BlockDescriptor,
    BlockStack,
    resolve_descriptor,
)
from modelprint.lib.layout.cycles import CycleTracker, is_composite
from modelprint.lib.layout.emitter import TokenEmitter
from modelprint.lib.registry import RendererRegistry
from modelprint.lib.styles import Palette, default_palette

if TYPE_CHECKING:
    from collections.abc import Iterable

    from modelprint.lib.layout.tokens import Token
    from modelprint.lib.sinks import Sink
    from modelprint.lib.styles import StyleFn

logger = structlog.get_logger(__name__)

ANONYMOUS_FUNCTION = "<anonymous-function>"
RULE_MIN_WIDTH = 8


class _Undefined:
    """Marks a value that is absent rather than null."""

    _instance: _Undefined | None = None

    def __new__(cls) -> _Undefined:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False


UNDEFINED: Final = _Undefined()


class Printer:
    """Prints program models and plain data in a human readable form.

    Output is written to `out` as it is produced. Every public method returns
    the printer so calls can be chained::

        Printer(sys.stdout).text("model: ").model(value).br()

    The printer holds mutable layout state (current line, open blocks, visited
    values); use one instance per concurrent caller.
    """

    def __init__(
        self,
        out: Sink,
        options: PrinterOptions | Mapping[str, object] | None = None,
        *,
        registry: RendererRegistry | None = None,
        palette: Palette | None = None,
    ) -> None:
        if options is None:
            options = PrinterOptions()
        elif isinstance(options, Mapping):
            options = options_from_mapping(options)
        self.out = out
        self.options = normalize_options(options)
        self.registry = registry if registry is not None else RendererRegistry()
        self.palette = palette if palette is not None else default_palette()
        self.blocks = BlockStack()
        self.cycles = CycleTracker()
        self.emitter = TokenEmitter(
            out,
            self.blocks,
            break_limit=self.options.break_limit,
            indent_size=self.options.indent_size,
            line_break=self.options.line_break,
            colors=self.options.colors,
        )

    @property
    def depth(self) -> int:
        return self.blocks.depth

    # Client API

    def text(self, value: object) -> Self:
        """Print plain text; embedded line breaks are written but not indented."""

        self.emitter.write_text(str(value))
        return self

    def print(self, *args: object) -> Self:
        """Print formatted text.

        When the first argument is a string it is a format string (see
        `modelprint.lib.formatting`). Remaining arguments are printed after it
        separated by spaces: strings as they are, everything else as models.
        """

        if not args:
            return self
        first, rest = args[0], list(args[1:])
        needs_space = False
        if isinstance(first, str):
            rest = print_formatted(self, first, rest)
            needs_space = first != ""
        else:
            rest.insert(0, first)
        for value in rest:
            if needs_space:
                self.text(" ")
            if isinstance(value, str):
                self.text(value)
            else:
                self.model(value)
            needs_space = True
        return self

    def println(self, *args: object) -> Self:
        """Print a standalone line with optional formatted text."""

        if args:
            self.br().print(*args)
        self.emitter.newline()
        return self

    def model(self, value: object) -> Self:
        """Print a model with automatic layout; shared and cyclic values become placeholders."""

        self.cycles.clear()
        self.visit(value)
        self.emitter.flush()
        return self

    def br(self) -> Self:
        """Soft line break: consecutive calls print a single line break."""

        self.emitter.soft_break()
        return self

    def rule(self, pattern: str = "-") -> Self:
        """Fill the rest of the line with `pattern` and end the line."""

        self.emitter.fill(pattern, RULE_MIN_WIDTH)
        self.emitter.newline()
        return self

    def indent(self) -> Self:
        """Increase indentation; it applies from the next printed character on a new line."""

        return self.open(INDENT)

    def unindent(self) -> Self:
        if self.blocks.at_root:
            return self
        if self.blocks.current.descriptor is not INDENT:
            logger.warning(
                "unindent ignored inside open block",
                block=self.blocks.current.descriptor.name,
            )
            return self
        return self.close()

    def flush(self) -> Self:
        """Write out held-back tokens; a trailing break token takes its line-end form."""

        self.emitter.flush()
        return self

    # Extension API, used by registered renderers

    def visit(self, value: object) -> Self:
        """Print a nested model without resetting the visited set."""

        if value is UNDEFINED:
            return self.keyword("undefined")
        if value is None:
            return self.keyword("null")
        if isinstance(value, (list, tuple)):
            return self._array(value)
        if not self.options.raw:
            renderer = self.registry.lookup(value)
            if renderer is not None:
                if self.cycles.enter(value):
                    return self._circular(value)
                renderer(self, value)
                return self
        if isinstance(value, Mapping):
            label = None if type(value) is dict else type(value).__name__
            return self._object(value, value.items(), label)
        if callable(value):
            name = getattr(value, "__name__", "")
            if not name or name == "<lambda>":
                name = ANONYMOUS_FUNCTION
            return self.key_ref(name)
        if isinstance(value, str):
            return self.emit(json.dumps(value, ensure_ascii=False), self.palette.string)
        if isinstance(value, bool):
            return self.keyword("true" if value else "false")
        if isinstance(value, int | float):
            return self.emit(str(value), self.palette.number)
        if isinstance(value, Enum):
            return self.key_ref(f"{type(value).__name__}.{value.name}")
        if is_composite(value):
            return self._object(value, _record_items(value), type(value).__name__)
        return self.emit(str(value))

    def emit(self, token: Token, style: StyleFn | None = None) -> Self:
        self.emitter.emit(token, style)
        return self

    def keyword(self, word: str) -> Self:
        return self.emit(word, self.palette.keyword)

    def key(self, key: object, *, ref: bool = False) -> Self:
        """Print a property key: bare when it is an identifier, else `[<model>]`."""

        if is_identifier(key):
            return self.emit(str(key), self.palette.key_ref if ref else self.palette.key_def)
        return self.emit("[").visit(key).emit("]")

    def key_ref(self, name: object) -> Self:
        return self.emit(str(name), self.palette.key_ref)

    def open(self, block: BlockDescriptor | str) -> Self:
        """Open a nested block: `object`, `array`, `paren`, `indent` or a custom descriptor."""

        descriptor = resolve_descriptor(block)
        self.emitter.emit(descriptor.open)
        self.blocks.push(descriptor)
        return self

    def close(self) -> Self:
        if self.blocks.at_root:
            return self
        descriptor = self.blocks.current.descriptor
        after_last = self.blocks.after_last()
        if after_last is not None:
            self.emitter.emit(after_last)
        self.blocks.pop()
        # The closing token lands on the parent's indentation.
        self.emitter.emit(descriptor.close)
        return self

    def start_item(self) -> Self:
        token = self.blocks.start_item()
        if token is not None:
            self.emitter.emit(token)
        return self

    def end_item(self) -> Self:
        """Mark the current item as finished; its terminator is written with the next separator."""

        self.blocks.end_item()
        return self

    def paren_list(self, items: Iterable[object]) -> Self:
        """Print `(a, b, c)`, breakable like an array."""

        return self._items(PAREN, list(items))

    def _array(self, value: list[object] | tuple[object, ...]) -> Self:
        if self.cycles.enter(value):
            return self._circular(value)
        return self._items(ARRAY, value)

    def _items(self, descriptor: BlockDescriptor, items: list[object] | tuple[object, ...]) -> Self:
        if not items:
            return self.emit(descriptor.empty)
        self.open(descriptor)
        for item in items:
            self.start_item().visit(item).end_item()
        return self.close()

    def _object(self, value: object, items: Iterable[tuple[object, object]], label: str | None) -> Self:
        if self.cycles.enter(value):
            return self._circular(value)
        if label:
            self.key_ref(label).emit(" ")
        entries = list(items)
        if not entries:
            return self.emit(OBJECT.empty)
        self.open(OBJECT)
        for key, item in entries:
            self.start_item().key(key).emit(" = ").visit(item).end_item()
        return self.close()

    def _circular(self, value: object) -> Self:
        return self.emit(self.cycles.placeholder(value), self.palette.circular)


def is_identifier(key: object) -> bool:
    return isinstance(key, str) and key.isidentifier()


def _record_items(value: object) -> list[tuple[object, object]]:
    if is_dataclass(value):
        return [(field.name, getattr(value, field.name)) for field in fields(value)]
    return list(vars(value).items())
