"""The single write primitive every printing operation funnels through."""

from __future__ import annotations

from typing import TYPE_CHECKING

from modelprint.lib.layout.line_buffer import LineBuffer
from modelprint.lib.layout.tokens import BreakToken, Token, token_width

if TYPE_CHECKING:
    from modelprint.lib.layout.blocks import BlockStack
    from modelprint.lib.sinks import Sink
    from modelprint.lib.styles import StyleFn

type _Chunk = tuple[str, int, StyleFn | None]


class TokenEmitter:
    """Writes tokens to the sink, deciding where lines break.

    At most one break token is held back, together with the run of plain
    tokens that follows it. Plain tokens are never break points, so the run
    is the smallest piece that must stay on one line. When the next break
    point arrives the held token is settled against the width of the whole
    run: its normal text is written when the run still fits on the line,
    otherwise its line-end form is written and the line is broken before the
    run. Leading spaces right after such a break are dropped.
    """

    def __init__(
        self,
        sink: Sink,
        blocks: BlockStack,
        *,
        break_limit: int,
        indent_size: int,
        line_break: str = "\n",
        colors: bool = False,
    ) -> None:
        self.sink = sink
        self.line = LineBuffer(break_limit=break_limit, indent_size=indent_size)
        self.line_break = line_break
        self.colors = colors
        self._blocks = blocks
        self._pending: tuple[BreakToken, int] | None = None
        self._run: list[_Chunk] = []
        self._run_width = 0
        self._trim = False

    @property
    def depth(self) -> int:
        return self._blocks.depth

    @property
    def pending(self) -> BreakToken | None:
        return self._pending[0] if self._pending is not None else None

    def emit(self, token: Token, style: StyleFn | None = None) -> None:
        if isinstance(token, BreakToken):
            # Two break points in a row: the second one's text is what follows the first.
            self._settle(0 if self._run else token_width(token))
            # Remember the depth now: the block may be pushed or popped before settling.
            self._pending = (token, self.depth)
            return
        if not token:
            return
        if self._pending is not None:
            self._run.append((token, self.depth, style))
            self._run_width += token_width(token)
            return
        self._write(token, self.depth, style)

    def write_text(self, text: str, style: StyleFn | None = None) -> None:
        """Write free text; embedded line breaks are kept but not indented."""

        if not text:
            return
        head, sep, _ = text.partition("\n")
        self._settle(len(head))
        self._write(text, self.depth, style)
        if sep:
            tail = text.rpartition("\n")[2]
            self.line.reset()
            if tail:
                self.line.fresh = False
                self.line.commit(len(tail))

    def fill(self, pattern: str, minimum: int) -> None:
        """Repeat `pattern` up to the break limit, at least `minimum` characters."""

        if not pattern:
            return
        self._settle(minimum)
        width = max(self.line.remaining(self.depth), minimum)
        self._write((pattern * width)[:width], self.depth)

    def soft_break(self) -> None:
        self._settle_at_line_end()
        if self.line.has_content:
            self._line_break()

    def newline(self) -> None:
        self._settle_at_line_end()
        self._line_break()

    def flush(self) -> None:
        """Write out everything held back as if the line ended here."""

        self._settle_at_line_end()

    def reset(self) -> None:
        self._pending = None
        self._run = []
        self._run_width = 0
        self._trim = False
        self.line.reset()

    def _settle(self, following: int = 0) -> None:
        """Resolve the held break token against the run after it, then write the run."""

        if self._pending is not None:
            token, depth = self._pending
            self._pending = None
            if self.line.fits(len(token.text) + self._run_width + following, depth):
                self._write(token.text, depth)
            else:
                self._write(token.line_end.rstrip(" "), depth)
                if self.line.has_content:
                    self._line_break()
                self._trim = True
        run, self._run, self._run_width = self._run, [], 0
        for text, depth, style in run:
            self._write(text, depth, style)

    def _settle_at_line_end(self) -> None:
        if self._run:
            self._settle()
            return
        if self._pending is None:
            return
        token, depth = self._pending
        self._pending = None
        self._write(token.line_end.rstrip(" "), depth)

    def _write(self, text: str, depth: int, style: StyleFn | None = None) -> None:
        if self._trim and self.line.fresh:
            text = text.lstrip(" ")
        if not text:
            return
        self._trim = False
        indent = self.line.charge_indent(depth)
        self.line.commit(len(text))
        # Styling happens after the width was counted; escape codes take no columns.
        if self.colors and style is not None:
            text = style(text)
        self.sink.write(" " * indent + text if indent else text)

    def _line_break(self) -> None:
        self.sink.write(self.line_break)
        self.line.reset()
        self._trim = False
