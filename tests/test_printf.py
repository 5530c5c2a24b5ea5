import pytest

from sigtalk.printf import (
    digit_count,
    format_string,
    hex_length,
    pointer_length,
    printf,
)

INT32_VALUES = [0, 7, -7, 42, 2**31 - 1, -(2**31)]


def test_plain_text_unchanged():
    assert format_string("hello world") == "hello world"


def test_string_conversion():
    assert format_string("<%s>", "abc") == "<" + "abc" + ">"


def test_null_string():
    assert format_string("%s", None) == "(null)"


def test_char_from_str_and_int():
    assert format_string("%c", "Z") == "Z"
    assert format_string("%c", ord("Z")) == "Z"


@pytest.mark.parametrize("n", INT32_VALUES)
def test_decimal_round_trip(n):
    assert int(format_string("%d", n)) == n
    assert format_string("%i", n) == format_string("%d", n)


def test_decimal_wraps_to_32_bits():
    assert format_string("%d", 2**31) == format_string("%d", -(2**31))
    assert int(format_string("%d", 2**32 + 5)) == 5


def test_unsigned_of_minus_one():
    assert format_string("%u", -1) == "4294967295"


@pytest.mark.parametrize("n", [0, 1, 15, 16, 255, 4096, 2**32 - 1])
def test_hex_round_trip(n):
    lower = format_string("%x", n)
    upper = format_string("%X", n)
    assert int(lower, 16) == n
    assert upper == lower.upper()


def test_hex_zero():
    assert format_string("%x", 0) == "0"


def test_pointer_null():
    assert format_string("%p", None) == "0x0"
    assert format_string("%p", 0) == format_string("%p", None)


@pytest.mark.parametrize("p", [1, 255, 0xDEADBEEF, 2**48])
def test_pointer_round_trip(p):
    text = format_string("%p", p)
    assert text.startswith("0x")
    assert int(text[2:], 16) == p


def test_double_percent_prints_percent():
    assert format_string("100%%") == "100%"


def test_double_percent_consumes_an_argument():
    assert format_string("%%%d", 1, 2) == format_string("%%") + format_string("%d", 2)


def test_unknown_conversion_prints_nothing():
    assert format_string("a%qb", 9) == "a" + "b"


def test_lone_percent_raises():
    with pytest.raises(ValueError):
        format_string("oops %")


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        format_string("%d")


def test_wrong_type_for_string_raises():
    with pytest.raises(TypeError):
        format_string("%s", 5)


def test_printf_writes_and_counts(capfd):
    count = printf("%s=%d\n", "x", 5)
    out = capfd.readouterr().out
    assert out == format_string("%s=%d\n", "x", 5)
    assert count == len(out.encode())


@pytest.mark.parametrize("n", INT32_VALUES)
def test_digit_count_matches_output(n):
    assert digit_count(n) == len(format_string("%d", n))


@pytest.mark.parametrize("n", [0, 9, 16, 255, 256, 2**32 - 1, -1])
def test_hex_length_matches_output(n):
    assert hex_length(n) == len(format_string("%x", n))


@pytest.mark.parametrize("p", [None, 0, 1, 255, 0xDEADBEEF, 2**63])
def test_pointer_length_matches_output(p):
    assert pointer_length(p) == len(format_string("%p", p))