"""Formatted output with the conversions c, s, p, d, i, u, x, X and %.

Integer arguments behave like the C types they stand for: %d and %i take
a 32-bit signed int, %u, %x and %X its unsigned 32-bit reading, and %p a
64-bit address written as "0x" followed by lower-case hex digits.
"""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import Any, TextIO

CONVERSIONS = frozenset("cs%dipxXu")
DECIMAL = "0123456789"
HEX_LOWER = "0123456789abcdef"
HEX_UPPER = "0123456789ABCDEF"
NULL_TEXT = "(null)"

_INT_BITS = 32
_POINTER_BITS = 64


def is_conversion(char: str) -> bool:
    """True when char is a supported conversion letter (or '%')."""
    return isinstance(char, str) and len(char) == 1 and char in CONVERSIONS


def to_base(number: int, digits: str) -> str:
    """Write a non-negative integer using digits as the symbols of the base."""
    if len(digits) < 2:
        raise ValueError("to_base: a base needs at least two digits")
    if number < 0:
        raise ValueError(f"to_base: negative number {number}")
    base = len(digits)
    out = [digits[number % base]]
    number //= base
    while number:
        number, digit = divmod(number, base)
        out.append(digits[digit])
    return "".join(reversed(out))


def _as_int(value: Any, conversion: str) -> int:
    if not isinstance(value, int):
        raise TypeError(f"%{conversion} needs an int, got {type(value).__name__}")
    return value


def _unsigned(value: int, bits: int) -> int:
    return value & ((1 << bits) - 1)


def _signed(value: int, bits: int) -> int:
    value = _unsigned(value, bits)
    if value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError(f"%c needs a single character, got {value!r}")
        return value
    return chr(_as_int(value, "c") & 0xFF)


def _next_arg(args: Iterator[Any]) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None


def _convert(conversion: str, args: Iterator[Any]) -> str:
    if conversion == "%":
        return "%"
    value = _next_arg(args)
    if conversion in ("d", "i"):
        number = _signed(_as_int(value, conversion), _INT_BITS)
        if number < 0:
            return "-" + to_base(-number, DECIMAL)
        return to_base(number, DECIMAL)
    if conversion == "u":
        return to_base(_unsigned(_as_int(value, conversion), _INT_BITS), DECIMAL)
    if conversion == "x":
        return to_base(_unsigned(_as_int(value, conversion), _INT_BITS), HEX_LOWER)
    if conversion == "X":
        return to_base(_unsigned(_as_int(value, conversion), _INT_BITS), HEX_UPPER)
    if conversion == "s":
        return NULL_TEXT if value is None else str(value)
    if conversion == "c":
        return _char(value)
    # conversion == "p"
    address = 0 if value is None else _as_int(value, conversion)
    return "0x" + to_base(_unsigned(address, _POINTER_BITS), HEX_LOWER)


def format_string(template: str, *args: Any) -> str:
    """Expand the conversions in template with args and return the text.

    A '%' followed by a character that is not a conversion is dropped and
    the character kept; a lone '%' at the end is dropped. Surplus
    arguments are ignored; missing ones raise TypeError.
    """
    pieces: list[str] = []
    values = iter(args)
    chars = iter(template)
    for char in chars:
        if char != "%":
            pieces.append(char)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        if is_conversion(spec):
            pieces.append(_convert(spec, values))
        else:
            pieces.append(spec)
    return "".join(pieces)


def printf(template: str, *args: Any, stream: TextIO | None = None) -> int:
    """Write the formatted text to stream (standard output by default).

    Returns the number of characters written.
    """
    text = format_string(template, *args)
    (sys.stdout if stream is None else stream).write(text)
    return len(text)