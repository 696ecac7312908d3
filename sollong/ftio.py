"""Writing characters, strings and numbers to a text stream."""

from __future__ import annotations

import sys
from typing import TextIO

from sollong.ftchar import itoa


def _target(stream: TextIO | None) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(char: str, stream: TextIO | None = None) -> None:
    """Write one character to stream (standard output by default)."""
    if not isinstance(char, str) or len(char) != 1:
        raise ValueError(f"put_char: expected a single character, got {char!r}")
    _target(stream).write(char)


def put_str(text: str | None, stream: TextIO | None = None) -> None:
    """Write text to stream; a missing text writes nothing."""
    if text is None:
        return
    _target(stream).write(text)


def put_endl(text: str | None, stream: TextIO | None = None) -> None:
    """Write text followed by a newline; a missing text writes nothing."""
    if text is None:
        return
    out = _target(stream)
    out.write(text)
    out.write("\n")


def put_nbr(number: int, stream: TextIO | None = None) -> None:
    """Write an integer in decimal to stream."""
    _target(stream).write(itoa(number))