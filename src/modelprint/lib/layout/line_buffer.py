"""Width accounting for the line currently being written."""

from __future__ import annotations


class LineBuffer:
    """Tracks the current line length and lazily charged indentation.

    Nothing is buffered here: the emitter asks whether text fits, writes it,
    then commits its length. Indentation is only charged once the first
    non-empty token lands on a fresh line, so blank lines stay unindented.
    """

    def __init__(self, break_limit: int, indent_size: int) -> None:
        self.break_limit = break_limit
        self.indent_size = indent_size
        self.line_length = 0
        self.fresh = True

    def indent_width(self, depth: int) -> int:
        return self.indent_size * depth

    def column(self, depth: int) -> int:
        """Column the next character would land on, pending indentation included."""

        if self.fresh:
            return self.indent_width(depth)
        return self.line_length

    def fits(self, width: int, depth: int) -> bool:
        # Strict comparison keeps one column free for a line-end mark such as "," or ";".
        return self.column(depth) + width < self.break_limit

    def remaining(self, depth: int) -> int:
        return self.break_limit - self.column(depth)

    def charge_indent(self, depth: int) -> int:
        """Start a fresh line; return how many indentation columns to write."""

        width = self.indent_width(depth) if self.fresh else 0
        self.fresh = False
        self.line_length += width
        return width

    def commit(self, width: int) -> None:
        self.line_length += width

    def reset(self) -> None:
        self.line_length = 0
        self.fresh = True

    @property
    def has_content(self) -> bool:
        return not self.fresh
