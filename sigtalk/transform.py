"""Building new strings: number formatting, splitting, joining, trimming, mapping."""

from __future__ import annotations

from typing import Callable, MutableSequence, Optional

_INT_MIN = -(1 << 31)
_INT_MAX = (1 << 31) - 1


def int_to_text(n: int) -> str:
    """Decimal text for a 32-bit signed integer."""
    if not _INT_MIN <= n <= _INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed integer")
    return str(n)


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on the character ``sep``, dropping empty pieces."""
    if not isinstance(sep, str) or len(sep) != 1:
        raise ValueError(f"expected a single separator character, got {sep!r}")
    return [word for word in text.split(sep) if word]


def apply_indexed(
    chars: MutableSequence[str], func: Callable[[int, str], Optional[str]]
) -> None:
    """Call ``func(index, char)`` for each character, in place.

    When ``func`` returns a character it replaces the one at that index;
    returning None leaves it as it was.
    """
    for index, char in enumerate(chars):
        replacement = func(index, char)
        if replacement is not None:
            chars[index] = replacement


def join(s1: str, s2: str) -> str:
    """Concatenate two strings."""
    return s1 + s2


def map_indexed(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for each character."""
    return "".join(func(index, char) for index, char in enumerate(text))


def trim(text: str, charset: str) -> str:
    """Remove characters in ``charset`` from both ends of ``text``."""
    return text.strip(charset)


def substring(text: str, start: int, length: int) -> str:
    """Up to ``length`` characters of ``text`` from ``start``.

    A start at or past the end gives the empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text):
        return ""
    return text[start : start + length]