import pytest

from sigtalk.parsing import parse_float, parse_int


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        ("-42", -42),
        ("+42", 42),
        (" \t\n\v\f\r123", 123),
        ("  -7xyz", -7),
        ("0099", 99),
    ],
)
def test_parse_int_reads_leading_number(text, expected):
    assert parse_int(text) == expected


@pytest.mark.parametrize("text", ["", "abc", "+-5", "-+5", "- 5", "   ", "x12"])
def test_parse_int_without_digits_is_zero(text):
    assert parse_int(text) == 0


def test_parse_int_stops_at_first_non_digit():
    assert parse_int("12 34") == 12
    assert parse_int("56.78") == 56


def test_parse_int_stops_at_nul():
    assert parse_int("31\x0099") == 31


def test_parse_int_wraps_like_a_32_bit_int():
    assert parse_int("2147483647") == 2147483647
    assert parse_int("-2147483648") == -2147483648
    assert parse_int("2147483648") == -2147483648


def test_parse_int_sign_is_symmetric():
    for text in ["1", "17", "123456", "2147483647"]:
        assert parse_int("-" + text) == -parse_int(text)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("3.5", 3.5),
        ("-3.5", -3.5),
        ("+2.25", 2.25),
        ("10", 10.0),
        ("-.5", -0.5),
        ("7.", 7.0),
    ],
)
def test_parse_float_reads_leading_number(text, expected):
    assert parse_float(text) == pytest.approx(expected)


def test_parse_float_does_not_skip_whitespace():
    assert parse_float(" 12.5") == 0.0


def test_parse_float_stops_at_garbage():
    assert parse_float("1.5abc") == pytest.approx(1.5)
    assert parse_float("2.5.7") == pytest.approx(2.5)


def test_parse_float_empty_is_zero():
    assert parse_float("") == 0.0
    assert parse_float("abc") == 0.0


def test_parse_float_agrees_with_parse_int_on_integers():
    for text in ["0", "5", "-5", "123", "+99"]:
        assert parse_float(text) == float(parse_int(text))


def test_parse_float_sign_is_symmetric():
    for text in ["0.125", "3.75", "42.5"]:
        assert parse_float("-" + text) == -parse_float(text)