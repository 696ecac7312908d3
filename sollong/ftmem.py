"""Byte-buffer operations over bytes and bytearray objects."""

from __future__ import annotations

INT_MAX = 2**31 - 1


def _check_span(name: str, data: bytes | bytearray, length: int, offset: int = 0) -> None:
    if length < 0 or offset < 0:
        raise ValueError(f"{name}: negative length or offset")
    if offset + length > len(data):
        raise ValueError(
            f"{name}: span of {length} bytes at {offset} exceeds buffer of {len(data)}"
        )


def bzero(buffer: bytearray, length: int) -> None:
    """Set the first length bytes of buffer to zero in place."""
    _check_span("bzero", buffer, length)
    buffer[:length] = bytes(length)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of count * size bytes.

    Raises ValueError when a dimension is out of range, where an
    allocation of that shape is refused.
    """
    if (
        (count < 0 and size != 0)
        or (count != 0 and size < 0)
        or count >= INT_MAX
        or size >= INT_MAX
    ):
        raise ValueError(f"cannot allocate {count} x {size} bytes")
    return bytearray(max(count * size, 0))


def memset(buffer: bytearray, value: int, length: int) -> bytearray:
    """Fill the first length bytes with the low byte of value; return buffer."""
    _check_span("memset", buffer, length)
    buffer[:length] = bytes([value & 0xFF]) * length
    return buffer


def memcpy(
    dst: bytearray | None, src: bytes | bytearray | None, length: int
) -> bytearray | None:
    """Copy length bytes from src to the start of dst; return dst."""
    if dst is None and src is None:
        return None
    if dst is None or src is None:
        raise ValueError("memcpy: missing buffer")
    _check_span("memcpy", dst, length)
    _check_span("memcpy", src, length)
    dst[:length] = src[:length]
    return dst


def memmove(buffer: bytearray, dst_offset: int, src_offset: int, length: int) -> bytearray:
    """Copy length bytes within buffer, correct for overlapping spans; return buffer."""
    _check_span("memmove", buffer, length, dst_offset)
    _check_span("memmove", buffer, length, src_offset)
    chunk = bytes(buffer[src_offset:src_offset + length])
    buffer[dst_offset:dst_offset + length] = chunk
    return buffer


def memchr(data: bytes | bytearray, value: int, length: int) -> int | None:
    """Index of the first byte equal to the low byte of value, or None."""
    _check_span("memchr", data, length)
    index = bytes(data[:length]).find(bytes([value & 0xFF]))
    return None if index < 0 else index


def memcmp(first: bytes | bytearray, second: bytes | bytearray, length: int) -> int:
    """Difference of the first differing bytes within length, or 0 if equal."""
    _check_span("memcmp", first, length)
    _check_span("memcmp", second, length)
    for a, b in zip(first[:length], second[:length]):
        if a != b:
            return a - b
    return 0