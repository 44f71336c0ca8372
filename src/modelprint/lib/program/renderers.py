"""Renderers that print program model nodes like source code."""

from __future__ import annotations

from typing import TYPE_CHECKING

from modelprint.lib.layout.blocks import OBJECT
from modelprint.lib.printer import is_identifier
from modelprint.lib.program.nodes import (
    Closure,
    Constructor,
    Definition,
    Function,
    Invocation,
    KeyReference,
    Parameter,
    PropertyReference,
    This,
    Wrapper,
)
from modelprint.lib.registry import RendererRegistry

if TYPE_CHECKING:
    from modelprint.lib.printer import Printer


def render_wrapper(printer: Printer, node: Wrapper) -> None:
    printer.visit(node.obj)


def render_definition(printer: Printer, node: Definition) -> None:
    printer.key(node.key).emit(" = ").visit(node.value)


def render_constructor(printer: Printer, node: Constructor) -> None:
    if printer.options.annotate:
        printer.keyword("@constructor ")
    if not node.stms:
        printer.emit(OBJECT.empty)
        return
    printer.open(OBJECT)
    for stm in node.stms:
        printer.start_item().visit(stm).end_item()
    printer.close()


def render_this(printer: Printer, node: This) -> None:
    printer.keyword("this")


def render_key_reference(printer: Printer, node: KeyReference) -> None:
    printer.key(node.key, ref=True)


def render_property_reference(printer: Printer, node: PropertyReference) -> None:
    printer.visit(node.target)
    if is_identifier(node.key):
        printer.emit(".")
    printer.key(node.key, ref=True)


def render_function(printer: Printer, node: Function) -> None:
    printer.paren_list(node.params).emit(" => ").visit(node.body)


def render_parameter(printer: Printer, node: Parameter) -> None:
    printer.key(node.name)


def render_invocation(printer: Printer, node: Invocation) -> None:
    if node.target is not None and not isinstance(node.target, This):
        printer.visit(node.target)
        # A key reference is a method of the target; anything else binds to it.
        printer.emit("." if isinstance(node.func, KeyReference) else "::")
    printer.visit(node.func).paren_list(node.args)


def render_closure(printer: Printer, node: Closure) -> None:
    if printer.options.annotate:
        printer.keyword("@closure").emit("(").visit(node.expr).emit(")")
    else:
        printer.visit(node.expr)


PROGRAM_RENDERERS = {
    Wrapper: render_wrapper,
    Definition: render_definition,
    Constructor: render_constructor,
    This: render_this,
    KeyReference: render_key_reference,
    PropertyReference: render_property_reference,
    Function: render_function,
    Parameter: render_parameter,
    Invocation: render_invocation,
    Closure: render_closure,
}


def default_registry() -> RendererRegistry:
    """Return a fresh registry with the program model renderers."""

    return RendererRegistry(PROGRAM_RENDERERS)
