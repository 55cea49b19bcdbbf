"""Renderers for the individual conversion specifiers."""

from __future__ import annotations

import operator

_INT_BITS = 32
_INT_MASK = (1 << _INT_BITS) - 1
_INT_SIGN = 1 << (_INT_BITS - 1)
_POINTER_MASK = (1 << 64) - 1

NULL_STRING = "(null)"
NULL_POINTER = "(nil)"


def _as_int(value: object) -> int:
    try:
        return operator.index(value)
    except TypeError:
        raise TypeError(
            f"expected an integer, got {type(value).__name__}"
        ) from None


def _to_uint32(value: object) -> int:
    return _as_int(value) & _INT_MASK


def _to_int32(value: object) -> int:
    number = _to_uint32(value)
    return number - (1 << _INT_BITS) if number & _INT_SIGN else number


def format_char(value: int | str) -> str:
    """Render a single character; integers are truncated to one byte."""
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError("a character conversion takes exactly one character")
        return value
    return chr(_as_int(value) & 0xFF)


def format_string(value: str | None) -> str:
    """Render a string, or ``(null)`` for a missing one."""
    if value is None:
        return NULL_STRING
    if not isinstance(value, str):
        raise TypeError(f"expected a string, got {type(value).__name__}")
    return value


def format_pointer(value: int | None) -> str:
    """Render an address as ``0x`` followed by lowercase hex, or ``(nil)``."""
    if value is None:
        return NULL_POINTER
    address = _as_int(value) & _POINTER_MASK
    if address == 0:
        return NULL_POINTER
    return f"0x{address:x}"


def format_decimal(value: int) -> str:
    """Render a signed 32-bit decimal integer."""
    return str(_to_int32(value))


def format_unsigned(value: int) -> str:
    """Render an unsigned 32-bit decimal integer."""
    return str(_to_uint32(value))


def format_hex(value: int, upper: bool = False) -> str:
    """Render an unsigned 32-bit integer in hexadecimal."""
    return format(_to_uint32(value), "X" if upper else "x")