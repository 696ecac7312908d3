"""String helpers: searching, comparing, slicing, joining, trimming and splitting.

Positions are returned as indices (or None when nothing is found), and
functions that would fill a caller's buffer return the new string instead.
"""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from typing import Any

_NUL = "\0"


def _single_char(name: str, char: str) -> str:
    if not isinstance(char, str) or len(char) != 1:
        raise ValueError(f"{name}: expected a single character, got {char!r}")
    return char


def _non_negative(name: str, value: int) -> int:
    if value < 0:
        raise ValueError(f"{name}: negative size {value}")
    return value


def strchr(text: str, char: str) -> int | None:
    """Index of the first occurrence of char in text, or None.

    Searching for the NUL character yields the index just past the end.
    """
    if _single_char("strchr", char) == _NUL:
        return len(text)
    index = text.find(char)
    return None if index < 0 else index


def strrchr(text: str, char: str) -> int | None:
    """Index of the last occurrence of char in text, or None.

    Searching for the NUL character yields the index just past the end.
    """
    if _single_char("strrchr", char) == _NUL:
        return len(text)
    index = text.rfind(char)
    return None if index < 0 else index


def _code_at(text: str, index: int) -> int:
    return ord(text[index]) if index < len(text) else 0


def strncmp(first: str, second: str, length: int) -> int:
    """Compare at most length characters.

    Returns the difference of the character codes where the strings first
    differ, 0 if they agree over the compared span. The end of a string
    counts as code 0.
    """
    _non_negative("strncmp", length)
    for index in range(length):
        a = _code_at(first, index)
        b = _code_at(second, index)
        if a != b or a == 0 or index == length - 1:
            return a - b
    return 0


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Index of needle in the first length characters of haystack, or None.

    An empty needle is found at index 0.
    """
    _non_negative("strnstr", length)
    if not needle:
        return 0
    for index in range(len(haystack)):
        if index + len(needle) > length:
            break
        if haystack.startswith(needle, index):
            return index
    return None


def strjoin(first: str, second: str) -> str:
    """Return the concatenation of first and second."""
    return first + second


def substr(text: str, start: int, length: int) -> str:
    """Up to length characters of text beginning at start.

    A start beyond the end of text gives an empty string.
    """
    _non_negative("substr", start)
    _non_negative("substr", length)
    if start > len(text):
        return ""
    return text[start:start + length]


def strtrim(text: str, charset: str) -> str:
    """Remove characters found in charset from both ends of text."""
    if not charset:
        return text
    return text.strip(charset)


def split(text: str, delimiter: str) -> list[str]:
    """Split text on delimiter, dropping empty pieces."""
    _single_char("split", delimiter)
    return [piece for piece in text.split(delimiter) if piece]


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from func(index, char) applied to each character."""
    return "".join(func(index, char) for index, char in enumerate(text))


def striteri(text: MutableSequence[Any], func: Callable[[int, Any], Any]) -> None:
    """Replace each element of text in place with func(index, element)."""
    for index, item in enumerate(list(text)):
        text[index] = func(index, item)


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy src into a buffer of size characters, terminator included.

    Returns the (possibly truncated) copy and the full length of src.
    """
    _non_negative("strlcpy", size)
    if size == 0:
        return "", len(src)
    return src[:size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append src to dst within a buffer of size characters, terminator included.

    Returns the resulting string and the length the full result would have
    needed. When dst already fills the buffer it comes back unchanged and
    the reported length is size plus the length of src.
    """
    _non_negative("strlcat", size)
    dst_len = min(len(dst), size)
    if dst_len < size:
        room = size - 1 - dst_len
        return dst + src[:room], dst_len + len(src)
    return dst, dst_len + len(src)