"""Bit-level framing of messages sent one signal per bit.

Each byte travels as eight bits, most significant first. A zero byte ends
the message.
"""

from __future__ import annotations

from typing import Iterator, Optional, Union

MESSAGE_CAPACITY = 262144
BITS_PER_BYTE = 8

ByteData = Union[bytes, bytearray, memoryview, str]


class MessageTooLongError(ValueError):
    """Raised when a message does not fit in the decoder's capacity."""


def _as_bytes(data: ByteData) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


def encode_bits(data: ByteData) -> Iterator[int]:
    """Yield the bits of ``data``, byte by byte, most significant bit first.

    Text is encoded as UTF-8. No terminator is added.
    """
    for value in _as_bytes(data):
        for shift in range(BITS_PER_BYTE - 1, -1, -1):
            yield (value >> shift) & 1


class MessageDecoder:
    """Collects bits into bytes and bytes into NUL-terminated messages."""

    def __init__(self, capacity: int = MESSAGE_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self.reset()

    def reset(self) -> None:
        """Forget any partly received byte and message."""
        self._byte = 0
        self._count = 0
        self._buffer = bytearray()

    @property
    def pending(self) -> bytes:
        """The bytes of the message received so far."""
        return bytes(self._buffer)

    def feed(self, bit: int) -> Optional[bytes]:
        """Take one bit; return the whole message once its terminator arrives.

        The capacity counts the terminator, so a message may hold at most
        ``capacity - 1`` bytes. A longer one resets the decoder and raises
        MessageTooLongError.
        """
        if bit not in (0, 1):
            raise ValueError(f"a bit must be 0 or 1, got {bit!r}")
        self._byte = (self._byte << 1) | int(bit)
        self._count += 1
        if self._count < BITS_PER_BYTE:
            return None

        value = self._byte
        self._byte = 0
        self._count = 0
        if value == 0:
            message = bytes(self._buffer)
            self._buffer.clear()
            return message
        if len(self._buffer) >= self.capacity - 1:
            self.reset()
            raise MessageTooLongError(
                f"message exceeds {self.capacity - 1} bytes"
            )
        self._buffer.append(value)
        return None