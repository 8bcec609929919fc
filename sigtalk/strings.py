"""Searching, comparing and bounded copying of text.

Positions are returned as indices rather than pointers. The end of a
string behaves like a terminating NUL character: searching for ``"\\0"``
finds the end, and comparisons treat a string that has ended as
holding code 0.
"""

from __future__ import annotations

from typing import NamedTuple, Optional

NUL = "\0"


class BoundedResult(NamedTuple):
    """Outcome of a bounded copy or concatenation.

    ``text`` is what ends up in the destination and ``length`` is the
    length the full result would have had, so truncation happened
    exactly when ``length >= size``.
    """

    text: str
    length: int


def _single_char(c: str) -> str:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return c


def _code_at(text: str, index: int) -> int:
    return ord(text[index]) if index < len(text) else 0


def find_char(text: str, c: str) -> Optional[int]:
    """Index of the first ``c`` in ``text``; NUL matches the end of the text."""
    c = _single_char(c)
    if c == NUL:
        index = text.find(NUL)
        return len(text) if index < 0 else index
    index = text.find(c)
    return None if index < 0 else index


def rfind_char(text: str, c: str) -> Optional[int]:
    """Index of the last ``c`` in ``text``; NUL matches the end of the text."""
    c = _single_char(c)
    if c == NUL:
        return len(text)
    index = text.rfind(c)
    return None if index < 0 else index


def compare_n(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters of two strings.

    Returns the difference between the codes of the first differing
    characters, or 0 if the strings agree over the compared span. A
    string that has ended counts as holding code 0 and ends the
    comparison.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    for index in range(n):
        left = _code_at(s1, index)
        right = _code_at(s2, index)
        if left != right or left == 0:
            return left - right
    return 0


def find_within(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of the first ``needle`` lying wholly in the first ``length`` characters.

    An empty needle is found at index 0.
    """
    if length < 0:
        raise ValueError("length must not be negative")
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def bounded_copy(src: str, size: int) -> BoundedResult:
    """Copy ``src`` into a destination that holds ``size`` characters.

    One slot is kept for the terminator, so at most ``size - 1``
    characters are copied. A size of 0 copies nothing.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    text = src[: size - 1] if size > 0 else ""
    return BoundedResult(text, len(src))


def bounded_concat(dest: str, src: str, size: int) -> BoundedResult:
    """Append ``src`` to ``dest`` within a destination of ``size`` characters.

    If ``size`` is not larger than ``dest``, nothing is appended and the
    reported length is ``size + len(src)``. Otherwise as much of ``src``
    is appended as fits beside a terminator.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    if size <= len(dest):
        return BoundedResult(dest, size + len(src))
    room = size - 1 - len(dest)
    return BoundedResult(dest + src[:room], len(dest) + len(src))


def duplicate(text: str) -> str:
    """Return an independent copy of ``text``."""
    if not isinstance(text, str):
        raise TypeError(f"expected a string, got {type(text).__name__}")
    return "".join(text)