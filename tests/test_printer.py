import io

import pytest
from hypothesis import given
from hypothesis import strategies as st

from tinyprintf.printer import FormatArgumentError, format_message, printf


@given(st.text(alphabet=st.characters(blacklist_characters="%")))
def test_plain_text_unchanged(text):
    assert format_message(text) == text


def test_double_percent():
    assert format_message("100%%") == "100%"


def test_decimal_and_integer():
    assert format_message("%d|%i", 42, -7) == str(42) + "|" + str(-7)


def test_string_and_null():
    assert format_message("[%s]", None) == "[(null)]"
    assert format_message("[%s]", "abc") == "[abc]"


def test_pointer_nil():
    assert format_message("%p", None) == "(nil)"


@given(st.integers(min_value=1, max_value=2**64 - 1))
def test_pointer_prefix(address):
    text = format_message("%p", address)
    assert text.startswith("0x")
    assert int(text, 16) == address


@given(st.integers(min_value=0, max_value=2**32 - 1))
def test_hex_cases(number):
    lower = format_message("%x", number)
    upper = format_message("%X", number)
    assert int(lower, 16) == number
    assert upper == lower.upper()


@given(st.integers(min_value=0, max_value=2**32 - 1))
def test_unsigned(number):
    assert format_message("%u", number) == str(number)


def test_char():
    assert format_message("%c%c", "o", "k") == "ok"


def test_unknown_specifier_stops_output():
    assert format_message("ab%qcd", 1) == "ab"


def test_trailing_percent_stops_output():
    assert format_message("ab%") == "ab"


def test_missing_argument():
    with pytest.raises(FormatArgumentError):
        format_message("%d %d", 1)


def test_missing_argument_is_type_error():
    with pytest.raises(TypeError):
        format_message("%s")


def test_extra_arguments_ignored():
    assert format_message("%s", "one", "two") == "one"


def test_printf_to_file_returns_count():
    buffer = io.StringIO()
    count = printf("x=%d %s", 5, "done", file=buffer)
    assert buffer.getvalue() == "x=5 done"
    assert count == len(buffer.getvalue())


def test_printf_default_stdout(capsys):
    count = printf("%s!", "hi")
    captured = capsys.readouterr()
    assert captured.out == "hi!"
    assert count == len(captured.out)


def test_printf_writes_nothing_on_error():
    buffer = io.StringIO()
    with pytest.raises(FormatArgumentError):
        printf("head %u", file=buffer)
    assert buffer.getvalue() == ""