import io

import pytest

from sollong.linereader import LineReader, read_lines

SAMPLES = [
    "",
    "1111\n1PCE1\n1111\n",
    "no newline at end",
    "first\nsecond",
    "\n\n\n",
    "a much longer line than any small buffer would hold in one go\nshort\n",
]


@pytest.mark.parametrize("text", SAMPLES)
@pytest.mark.parametrize("size", [1, 2, 3, 7, 42, 1000])
def test_text_lines_round_trip(text, size):
    lines = list(read_lines(io.StringIO(text), size))
    assert "".join(lines) == text
    assert lines == text.splitlines(keepends=True)


@pytest.mark.parametrize("text", SAMPLES)
@pytest.mark.parametrize("size", [1, 5, 42])
def test_bytes_lines_round_trip(text, size):
    data = text.encode()
    lines = list(read_lines(io.BytesIO(data), size))
    assert b"".join(lines) == data
    assert lines == data.splitlines(keepends=True)


def test_empty_stream_gives_none():
    reader = LineReader(io.StringIO(""))
    assert reader.next_line() is None


def test_none_after_last_line_without_newline():
    reader = LineReader(io.StringIO("only"), 2)
    assert reader.next_line() == "only"
    assert reader.next_line() is None
    assert reader.next_line() is None


def test_none_after_last_line_with_newline():
    reader = LineReader(io.StringIO("x\n"), 4)
    assert reader.next_line() == "x\n"
    assert reader.next_line() is None


def test_iteration_matches_next_line():
    text = "one\ntwo\nthree"
    by_iter = list(LineReader(io.StringIO(text), 3))
    reader = LineReader(io.StringIO(text), 3)
    by_call = []
    while (line := reader.next_line()) is not None:
        by_call.append(line)
    assert by_iter == by_call


def test_reads_no_further_than_needed_with_unit_buffer():
    stream = io.BytesIO(b"ab\ncd\n")
    reader = LineReader(stream, 1)
    first = reader.next_line()
    assert stream.tell() == len(first)


class _RecordingStream(io.StringIO):
    def __init__(self, text):
        super().__init__(text)
        self.sizes = []

    def read(self, size=-1):
        self.sizes.append(size)
        return super().read(size)


def test_reads_in_buffer_sized_chunks():
    stream = _RecordingStream("line one\nline two\n")
    list(read_lines(stream, 5))
    assert stream.sizes
    assert set(stream.sizes) == {5}


@pytest.mark.parametrize("size", [0, -3])
def test_bad_buffer_size_raises(size):
    with pytest.raises(ValueError):
        LineReader(io.StringIO("x"), size)


def test_read_lines_bad_buffer_size_raises_on_iteration():
    with pytest.raises(ValueError):
        list(read_lines(io.StringIO("x"), 0))