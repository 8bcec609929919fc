"""ASCII character classification and case conversion.

Each function takes either a one-character string or an integer code.
Case conversions return the same kind of value they were given.
"""

from __future__ import annotations

from typing import Union

CharLike = Union[str, int]


def _code(c: CharLike) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return c


def is_alpha(c: CharLike) -> bool:
    """Whether ``c`` is an ASCII letter."""
    code = _code(c)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def is_digit(c: CharLike) -> bool:
    """Whether ``c`` is an ASCII decimal digit."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: CharLike) -> bool:
    """Whether ``c`` is an ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: CharLike) -> bool:
    """Whether ``c`` lies in the 7-bit ASCII range."""
    return 0 <= _code(c) <= 127


def is_print(c: CharLike) -> bool:
    """Whether ``c`` is a printable ASCII character, space included."""
    return 32 <= _code(c) <= 126


def _convert(c: CharLike, low: int, high: int, shift: int) -> CharLike:
    code = _code(c)
    if low <= code <= high:
        code += shift
    return chr(code) if isinstance(c, str) else code


def to_upper(c: CharLike) -> CharLike:
    """Upper-case an ASCII lower-case letter; leave anything else alone."""
    return _convert(c, ord("a"), ord("z"), -32)


def to_lower(c: CharLike) -> CharLike:
    """Lower-case an ASCII upper-case letter; leave anything else alone."""
    return _convert(c, ord("A"), ord("Z"), 32)