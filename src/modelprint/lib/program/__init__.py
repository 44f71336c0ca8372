"""Program model nodes and their source-like renderers."""

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
from modelprint.lib.program.renderers import PROGRAM_RENDERERS, default_registry

__all__ = [
    "PROGRAM_RENDERERS",
    "Closure",
    "Constructor",
    "Definition",
    "Function",
    "Invocation",
    "KeyReference",
    "Parameter",
    "PropertyReference",
    "This",
    "Wrapper",
    "default_registry",
]
