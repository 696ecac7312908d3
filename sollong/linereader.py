"""Reading a stream one line at a time in fixed-size chunks."""

from __future__ import annotations

from collections.abc import Iterator
from typing import IO, AnyStr, Generic

BUFFER_SIZE = 42


def _newline(sample: AnyStr) -> AnyStr:
    return "\n" if isinstance(sample, str) else b"\n"  # type: ignore[return-value]


class LineReader(Generic[AnyStr]):
    """Return the lines of a text or binary stream, newline included.

    The stream is read buffer_size characters (or bytes) at a time and
    never further than the end of the line being returned requires.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size < 1:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: AnyStr | None = None

    def _read(self) -> AnyStr:
        return self._stream.read(self._buffer_size)

    def _fill(self, data: AnyStr) -> AnyStr:
        newline = _newline(data)
        parts = [data]
        while newline not in parts[-1]:
            chunk = self._read()
            if not chunk:
                break
            parts.append(chunk)
        return data[:0].join(parts)

    def next_line(self) -> AnyStr | None:
        """The next line, or None once the stream is exhausted."""
        if self._pending is None:
            data = self._read()
            if not data:
                return None
        else:
            cut = self._pending.find(_newline(self._pending))
            if cut < 0:
                self._pending = None
                return None
            data = self._pending[cut + 1:]
        data = self._fill(data)
        if not data:
            self._pending = None
            return None
        self._pending = data
        cut = data.find(_newline(data))
        return data if cut < 0 else data[:cut + 1]

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.next_line()) is not None:
            yield line


def read_lines(stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> Iterator[AnyStr]:
    """Yield every line of stream, each with its newline if it has one."""
    yield from LineReader(stream, buffer_size)