import io
import sys

import pytest

from sollong.ftchar import atoi
from sollong.ftio import put_char, put_endl, put_nbr, put_str


def test_put_char_writes_one_character():
    out = io.StringIO()
    put_char("Z", out)
    assert out.getvalue() == "Z"


def test_put_char_rejects_long_text():
    with pytest.raises(ValueError):
        put_char("ab", io.StringIO())


def test_put_str_writes_text():
    out = io.StringIO()
    put_str("Error\nInvalid input\n", out)
    assert out.getvalue() == "Error\nInvalid input\n"


def test_put_str_none_writes_nothing():
    out = io.StringIO()
    put_str(None, out)
    assert out.getvalue() == ""


def test_put_endl_appends_newline():
    out = io.StringIO()
    put_endl("aper ekar ste", out)
    assert out.getvalue() == "aper ekar ste\n"


def test_put_endl_none_writes_nothing():
    out = io.StringIO()
    put_endl(None, out)
    assert out.getvalue() == ""


def test_put_nbr_int_min():
    out = io.StringIO()
    put_nbr(-2147483648, out)
    assert out.getvalue() == "-2147483648"


@pytest.mark.parametrize("number", [0, 7, -7, 1234567, -987654, 2147483647])
def test_put_nbr_round_trips(number):
    out = io.StringIO()
    put_nbr(number, out)
    assert atoi(out.getvalue()) == number
    assert out.getvalue().startswith("-") == (number < 0)


def test_default_stream_is_stdout(monkeypatch):
    out = io.StringIO()
    monkeypatch.setattr(sys, "stdout", out)
    put_str("Moves: ")
    put_nbr(3)
    put_char("!")
    assert out.getvalue() == "Moves: 3!"


def test_writes_accumulate():
    out = io.StringIO()
    put_str("ab", out)
    put_endl("cd", out)
    put_char("e", out)
    assert out.getvalue() == "ab" + "cd\n" + "e"