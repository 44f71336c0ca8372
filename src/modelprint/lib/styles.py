"""Syntax-highlight palette built from rich styles."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from rich.color import ColorSystem
from rich.style import Style

type StyleFn = Callable[[str], str]


def rich_style(definition: str, color_system: ColorSystem = ColorSystem.STANDARD) -> StyleFn:
    """Return a function wrapping text in the ANSI codes of a rich style definition."""

    style = Style.parse(definition)

    def apply(text: str) -> str:
        return style.render(text, color_system=color_system)

    return apply


def plain(text: str) -> str:
    return text


@dataclass(frozen=True, slots=True)
class Palette:
    keyword: StyleFn = plain
    key_def: StyleFn = plain
    key_ref: StyleFn = plain
    string: StyleFn = plain
    number: StyleFn = plain
    circular: StyleFn = plain


def default_palette() -> Palette:
    return Palette(
        keyword=rich_style("magenta"),
        key_def=rich_style("green"),
        key_ref=rich_style("cyan"),
        string=rich_style("yellow"),
        number=rich_style("yellow"),
        circular=rich_style("red"),
    )


PLAIN_PALETTE = Palette()
