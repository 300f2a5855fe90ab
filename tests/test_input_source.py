import io
from datetime import date

import pytest

from hotel_client.cli.input_source import InputSource


def make_source(text):
    out = io.StringIO()
    return InputSource(io.StringIO(text), out), out


def test_read_line_strips_terminator():
    source, out = make_source("hello world\r\n")
    assert source.read_line("Name: ") == "hello world"
    assert out.getvalue() == "Name: "


def test_read_line_at_end_of_input():
    source, _ = make_source("")
    with pytest.raises(EOFError):
        source.read_line()


def test_read_optional_line():
    source, _ = make_source("  \nvalue\n")
    assert source.read_optional_line() is None
    assert source.read_optional_line() == "value"


def test_read_choice_asks_again_on_invalid_input():
    source, out = make_source("abc\n\n7\n")
    assert source.read_choice() == 7
    assert out.getvalue().count("Your input is invalid!") == 2
    assert out.getvalue().count("Please make your choice: ") == 3


def test_read_float():
    source, _ = make_source("x\n10.5\n")
    assert source.read_float() == 10.5


@pytest.mark.parametrize("text", ["2030-01-02\n", "2030/01/02\n", "01/02/2030\n", "tomorrow\n2030-01-02\n"])
def test_read_date(text):
    source, _ = make_source(text)
    assert source.read_date() == date(2030, 1, 2)


def test_invalid_input_then_end_of_input():
    source, _ = make_source("abc\n")
    with pytest.raises(EOFError):
        source.read_int()
