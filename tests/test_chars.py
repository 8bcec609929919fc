import string

import pytest

from sigtalk.chars import (
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    to_lower,
    to_upper,
)

CODES = range(-5, 300)


def test_is_alpha_matches_ascii_letters():
    for code in CODES:
        expected = 0 <= code < 0x110000 and chr(code) in string.ascii_letters
        assert is_alpha(code) == expected


def test_is_digit_matches_ascii_digits():
    for code in CODES:
        expected = 0 <= code < 0x110000 and chr(code) in string.digits
        assert is_digit(code) == expected


def test_is_alnum_is_alpha_or_digit():
    for code in CODES:
        assert is_alnum(code) == (is_alpha(code) or is_digit(code))


def test_is_ascii_matches_str_isascii():
    for code in range(0, 300):
        assert is_ascii(code) == chr(code).isascii()
    assert not is_ascii(-1)


def test_is_print_matches_isprintable_in_ascii():
    for code in range(0, 128):
        assert is_print(code) == chr(code).isprintable()
    assert not is_print(200)


def test_predicates_accept_strings():
    assert is_alpha("q")
    assert not is_alpha("5")
    assert is_digit("5")
    assert is_alnum("Z")
    assert not is_alnum("-")
    assert is_print(" ")
    assert not is_print("\t")


def test_multi_char_string_is_rejected():
    with pytest.raises(ValueError):
        is_alpha("ab")
    with pytest.raises(ValueError):
        to_upper("")


def test_to_upper_matches_str_upper_for_ascii():
    for letter in string.ascii_lowercase:
        assert to_upper(letter) == letter.upper()
    for other in string.ascii_uppercase + string.digits + string.punctuation:
        assert to_upper(other) == other


def test_to_lower_matches_str_lower_for_ascii():
    for letter in string.ascii_uppercase:
        assert to_lower(letter) == letter.lower()
    for other in string.ascii_lowercase + string.digits + string.punctuation:
        assert to_lower(other) == other


def test_case_conversion_on_codes_keeps_type():
    assert to_upper(ord("a")) == ord("A")
    assert to_lower(ord("A")) == ord("a")
    assert to_upper(200) == 200
    assert to_lower(-1) == -1


def test_case_round_trip():
    for letter in string.ascii_letters:
        assert to_lower(to_upper(letter)) == letter.lower()
        assert to_upper(to_lower(letter)) == letter.upper()