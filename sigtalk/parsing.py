"""Lenient numeric parsing of text, in the manner of atoi and atof."""

from __future__ import annotations

import re

_WHITESPACE = " \n\t\v\f\r"
_INT_PATTERN = re.compile(r"([+-]?)([0-9]+)")
_FLOAT_PATTERN = re.compile(r"([+-]?)([0-9]*)(?:\.([0-9]*))?")

_INT_BITS = 32


def _wrap_int32(value: int) -> int:
    """Reduce ``value`` to a signed 32-bit integer, wrapping on overflow."""
    half = 1 << (_INT_BITS - 1)
    return ((value + half) % (1 << _INT_BITS)) - half


def parse_int(text: str) -> int:
    """Parse a leading decimal integer from ``text``.

    Leading whitespace is skipped and one optional sign is accepted. If no
    digit follows, the result is 0. Parsing stops at the first non-digit.
    The result wraps like a 32-bit signed integer.
    """
    match = _INT_PATTERN.match(text.lstrip(_WHITESPACE))
    if match is None:
        return 0
    sign, digits = match.groups()
    value = int(digits)
    if sign == "-":
        value = -value
    return _wrap_int32(value)


def parse_float(text: str) -> float:
    """Parse a leading decimal number from ``text``.

    No whitespace is skipped. One optional sign is accepted, then integer
    digits, then an optional fractional part after a dot. Anything that does
    not fit this shape ends the number; an empty number is 0.0.
    """
    match = _FLOAT_PATTERN.match(text)
    sign, integer_digits, fraction_digits = match.groups()

    result = 0.0
    for digit in integer_digits:
        result = result * 10.0 + (ord(digit) - ord("0"))

    decimal = 0.0
    factor = 0.1
    for digit in fraction_digits or "":
        decimal += (ord(digit) - ord("0")) * factor
        factor *= 0.1

    result += decimal
    return result * (-1 if sign == "-" else 1)