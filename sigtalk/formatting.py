"""A small printf supporting the %c %s %p %d %i %u %x %X and %% conversions."""

from __future__ import annotations

import operator
import sys
from typing import Any, Iterator, Optional, TextIO

_UINT32_MASK = (1 << 32) - 1
_UINT64_MASK = (1 << 64) - 1
_INT32_HALF = 1 << 31


class FormatError(ValueError):
    """Raised for an unknown conversion or an unusable argument."""


def _as_int(value: Any, spec: str) -> int:
    try:
        return operator.index(value)
    except TypeError as exc:
        raise FormatError(
            f"%{spec} expects an integer, got {type(value).__name__}"
        ) from exc


def _signed32(value: int) -> int:
    return ((value + _INT32_HALF) & _UINT32_MASK) - _INT32_HALF


def _format_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise FormatError(f"%c expects a single character, got {value!r}")
        return value
    return chr(_as_int(value, "c") & 0xFF)


def _format_string(value: Any) -> str:
    if value is None:
        return "(null)"
    if not isinstance(value, str):
        raise FormatError(f"%s expects a string, got {type(value).__name__}")
    return value


def _format_pointer(value: Any) -> str:
    address = 0 if value is None else _as_int(value, "p") & _UINT64_MASK
    return f"0x{address:x}"


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    if spec not in "cspdiuxX":
        raise FormatError(f"unknown conversion %{spec}")
    try:
        value = next(args)
    except StopIteration:
        raise FormatError(f"missing argument for %{spec}") from None

    if spec == "c":
        return _format_char(value)
    if spec == "s":
        return _format_string(value)
    if spec == "p":
        return _format_pointer(value)
    number = _as_int(value, spec)
    if spec in "di":
        return str(_signed32(number))
    unsigned = number & _UINT32_MASK
    if spec == "u":
        return str(unsigned)
    if spec == "x":
        return f"{unsigned:x}"
    return f"{unsigned:X}"


def format_message(fmt: Optional[str], *args: Any) -> str:
    """Expand the conversions in ``fmt`` with ``args`` and return the text.

    A ``%`` at the very end of ``fmt`` is kept literally. A None format
    yields the empty string. Extra arguments are ignored.
    """
    if fmt is None:
        return ""
    parts = []
    arguments = iter(args)
    chars = iter(fmt)
    for char in chars:
        if char != "%":
            parts.append(char)
            continue
        spec = next(chars, None)
        if spec is None:
            parts.append("%")
            break
        parts.append(_convert(spec, arguments))
    return "".join(parts)


def printf(fmt: Optional[str], *args: Any, stream: Optional[TextIO] = None) -> int:
    """Write the expanded ``fmt`` to ``stream`` and return the number of characters.

    Nothing is written if the format is invalid; FormatError is raised instead.
    """
    text = format_message(fmt, *args)
    target = sys.stdout if stream is None else stream
    target.write(text)
    return len(text)