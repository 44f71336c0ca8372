"""printf-style substitution for `Printer.print()`.

Supported placeholders:

* `%s` - the argument converted with `str()`
* `%d` - the argument as a number
* `%m` - the argument printed as a model (full layout, cycle safe)
* `%%` - a literal percent sign

A placeholder without a matching argument is printed literally. Arguments
left over after the format string are returned to the caller.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from modelprint.lib.printer import Printer

_PLACEHOLDER = re.compile(r"%[sdm%]")


def format_number(value: object) -> str:
    """Render `value` the way `%d` does; non-numeric input becomes `NaN`.

    >>> format_number(3), format_number("2.5"), format_number("abc")
    ('3', '2.5', 'NaN')
    """
    if isinstance(value, bool):
        return str(int(value))
    if isinstance(value, int | float):
        return str(value)
    try:
        number = float(str(value).strip())
    except ValueError:
        return "NaN"
    return str(int(number)) if number.is_integer() else str(number)


def print_formatted(printer: Printer, fmt: str, args: Sequence[object]) -> list[object]:
    """Print `fmt` with placeholders substituted; return the unused arguments."""

    remaining = list(args)
    position = 0
    for match in _PLACEHOLDER.finditer(fmt):
        printer.text(fmt[position : match.start()])
        position = match.end()
        placeholder = match.group()
        if placeholder == "%%":
            printer.text("%")
            continue
        if not remaining:
            printer.text(placeholder)
            continue
        value = remaining.pop(0)
        if placeholder == "%s":
            printer.text(str(value))
        elif placeholder == "%d":
            printer.text(format_number(value))
        else:
            printer.model(value)
    printer.text(fmt[position:])
    return remaining
