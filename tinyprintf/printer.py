"""A small printf supporting the c, s, p, d, i, u, x, X and % conversions."""

from __future__ import annotations

import sys
from functools import partial
from typing import Callable, Iterator, TextIO

from tinyprintf.conversions import (
    format_char,
    format_decimal,
    format_hex,
    format_pointer,
    format_string,
    format_unsigned,
)

_CONVERSIONS: dict[str, Callable[[object], str]] = {
    "c": format_char,
    "s": format_string,
    "p": format_pointer,
    "d": format_decimal,
    "i": format_decimal,
    "u": format_unsigned,
    "x": partial(format_hex, upper=False),
    "X": partial(format_hex, upper=True),
}


class FormatArgumentError(TypeError):
    """Raised when the template asks for more arguments than were given."""


def _render(template: str, args: tuple) -> Iterator[str]:
    values = iter(args)
    chars = iter(template)
    for char in chars:
        if char != "%":
            yield char
            continue
        spec = next(chars, None)
        if spec == "%":
            yield "%"
            continue
        if spec is None or spec not in _CONVERSIONS:
            # An unknown or missing specifier ends the output.
            return
        try:
            value = next(values)
        except StopIteration:
            raise FormatArgumentError(
                f"not enough arguments for conversion '%{spec}'"
            ) from None
        yield _CONVERSIONS[spec](value)


def format_message(template: str, *args: object) -> str:
    """Return the template with its conversions replaced by the arguments."""
    return "".join(_render(template, args))


def printf(template: str, *args: object, file: TextIO | None = None) -> int:
    """Write the formatted template and return the number of characters written."""
    text = format_message(template, *args)
    stream = sys.stdout if file is None else file
    stream.write(text)
    return len(text)