"""Layout primitives: line buffer, block stack, cycle tracker and token emitter."""

from modelprint.lib.layout.blocks import (
    ARRAY,
    BLOCKS,
    INDENT,
    OBJECT,
    PAREN,
    Block,
    BlockDescriptor,
    BlockStack,
)
from modelprint.lib.layout.cycles import ARRAY_PLACEHOLDER, OBJECT_PLACEHOLDER, CycleTracker
from modelprint.lib.layout.emitter import TokenEmitter
from modelprint.lib.layout.line_buffer import LineBuffer
from modelprint.lib.layout.tokens import BreakToken, Token

__all__ = [
    "ARRAY",
    "ARRAY_PLACEHOLDER",
    "BLOCKS",
    "INDENT",
    "OBJECT",
    "OBJECT_PLACEHOLDER",
    "PAREN",
    "Block",
    "BlockDescriptor",
    "BlockStack",
    "BreakToken",
    "CycleTracker",
    "LineBuffer",
    "Token",
    "TokenEmitter",
]
