"""Token types accepted by the emitter."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class BreakToken:
    """A break opportunity.

    `text` is written when the following token still fits on the line;
    otherwise `line_end` is written (trailing spaces trimmed) and the line is
    broken right after it.
    """

    text: str
    line_end: str = ""


type Token = str | BreakToken


def token_width(token: Token) -> int:
    if isinstance(token, BreakToken):
        return len(token.text)
    return len(token)


def join_breaks(first: BreakToken | None, second: BreakToken | None) -> BreakToken | None:
    """Merge two adjacent break opportunities into one, e.g. `;` then ` ` into `; `."""

    if first is None:
        return second
    if second is None:
        return first
    return BreakToken(first.text + second.text, first.line_end + second.line_end)
