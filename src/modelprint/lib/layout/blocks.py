"""Open-block bookkeeping: delimiters, separators and nesting depth."""

from __future__ import annotations

from dataclasses import dataclass

from modelprint.lib.layout.tokens import BreakToken, Token, join_breaks


@dataclass(frozen=True, slots=True)
class BlockDescriptor:
    """Tokens that shape one kind of nested structure."""

    name: str
    open: Token = ""
    close: str = ""
    empty: str = ""
    separator: str | None = None
    terminator: BreakToken | None = None
    after_last: BreakToken | None = None

    def separator_token(self) -> BreakToken:
        """Token written between two items: separator plus a space, or only the separator at a break."""

        mark = self.separator or ""
        return BreakToken(mark + " ", mark)


OBJECT = BlockDescriptor(
    name="object",
    open=BreakToken("{ ", "{"),
    close="}",
    empty="{}",
    terminator=BreakToken(";", ""),
    after_last=BreakToken(" ", ""),
)
ARRAY = BlockDescriptor(
    name="array",
    open=BreakToken("[", "["),
    close="]",
    empty="[]",
    separator=",",
    after_last=BreakToken("", ""),
)
PAREN = BlockDescriptor(
    name="paren",
    open=BreakToken("(", "("),
    close=")",
    empty="()",
    separator=",",
    after_last=BreakToken("", ""),
)
INDENT = BlockDescriptor(name="indent")

BLOCKS: dict[str, BlockDescriptor] = {
    block.name: block for block in (OBJECT, ARRAY, PAREN, INDENT)
}


def resolve_descriptor(block: BlockDescriptor | str) -> BlockDescriptor:
    if isinstance(block, BlockDescriptor):
        return block
    try:
        return BLOCKS[block]
    except KeyError:
        raise KeyError(f"Unknown block '{block}'. Expected one of: {sorted(BLOCKS)}.") from None


@dataclass(slots=True)
class Block:
    descriptor: BlockDescriptor
    parent: Block | None = None
    depth: int = 0
    empty: bool = True
    terminated: bool = False


_ROOT = BlockDescriptor(name="root")


class BlockStack:
    """Singly linked stack of open blocks rooted at a depth-0 sentinel.

    The stack only does bookkeeping; callers write the tokens it hands back.
    A terminator recorded by `end_item` is joined with whatever follows it
    (the next separator or the after-last token), so `;` and ` ` break as one.
    """

    def __init__(self) -> None:
        self.root = Block(descriptor=_ROOT)
        self.current = self.root

    @property
    def depth(self) -> int:
        return self.current.depth

    @property
    def at_root(self) -> bool:
        return self.current is self.root

    def push(self, descriptor: BlockDescriptor) -> Block:
        block = Block(descriptor=descriptor, parent=self.current, depth=self.current.depth + 1)
        self.current = block
        return block

    def pop(self) -> Block | None:
        """Pop the innermost block; the root sentinel is never popped."""

        block = self.current
        if block.parent is None:
            return None
        self.current = block.parent
        return block

    def start_item(self) -> BreakToken | None:
        block = self.current
        if block.empty:
            block.empty = False
            block.terminated = False
            return None
        return join_breaks(self._take_terminator(), block.descriptor.separator_token())

    def end_item(self) -> None:
        self.current.terminated = self.current.descriptor.terminator is not None

    def after_last(self) -> BreakToken | None:
        """Token written before the closing delimiter of the current block."""

        return join_breaks(self._take_terminator(), self.current.descriptor.after_last)

    def reset(self) -> None:
        self.root.empty = True
        self.root.terminated = False
        self.current = self.root

    def _take_terminator(self) -> BreakToken | None:
        block = self.current
        if not block.terminated:
            return None
        block.terminated = False
        return block.descriptor.terminator
