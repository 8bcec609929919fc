"""Byte-buffer helpers: fill, allocate, copy, move, search and compare."""

from __future__ import annotations

from typing import Optional, Union

Buffer = Union[bytearray, memoryview]
ReadableBuffer = Union[bytes, bytearray, memoryview]


def _check_span(data: ReadableBuffer, start: int, count: int, name: str) -> None:
    if count < 0 or start < 0:
        raise ValueError(f"negative offset or count for {name}")
    if start + count > len(data):
        raise IndexError(
            f"{name} holds {len(data)} bytes; {count} from offset {start} is out of range"
        )


def fill(buffer: Buffer, value: int, count: int) -> Buffer:
    """Set the first ``count`` bytes of ``buffer`` to ``value`` (taken mod 256)."""
    _check_span(buffer, 0, count, "buffer")
    buffer[:count] = bytes([value & 0xFF]) * count
    return buffer


def zero(buffer: Buffer, count: int) -> Buffer:
    """Set the first ``count`` bytes of ``buffer`` to zero."""
    return fill(buffer, 0, count)


def allocate(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer for ``count`` elements of ``size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def copy(
    dest: Optional[Buffer], src: Optional[ReadableBuffer], count: int
) -> Optional[Buffer]:
    """Copy ``count`` bytes from ``src`` to the start of ``dest``.

    If both are None, None is returned.
    """
    if dest is None and src is None:
        return None
    if dest is None or src is None:
        raise TypeError("dest and src must both be buffers")
    _check_span(dest, 0, count, "dest")
    _check_span(src, 0, count, "src")
    dest[:count] = bytes(src[:count])
    return dest


def move(buffer: Buffer, dest_offset: int, src_offset: int, count: int) -> Buffer:
    """Copy ``count`` bytes within ``buffer``; overlapping ranges are safe."""
    _check_span(buffer, src_offset, count, "source range")
    _check_span(buffer, dest_offset, count, "destination range")
    chunk = bytes(buffer[src_offset : src_offset + count])
    buffer[dest_offset : dest_offset + count] = chunk
    return buffer


def find_byte(data: ReadableBuffer, value: int, count: int) -> Optional[int]:
    """Return the index of the first ``value`` byte in the first ``count`` bytes."""
    _check_span(data, 0, count, "data")
    index = bytes(data[:count]).find(value & 0xFF)
    return None if index < 0 else index


def compare(a: ReadableBuffer, b: ReadableBuffer, count: int) -> int:
    """Compare the first ``count`` bytes of ``a`` and ``b``.

    Returns the difference of the first unequal pair of bytes, or 0.
    """
    _check_span(a, 0, count, "a")
    _check_span(b, 0, count, "b")
    for left, right in zip(bytes(a[:count]), bytes(b[:count])):
        if left != right:
            return left - right
    return 0