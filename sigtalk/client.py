"""Sends a message to a server process one bit per signal."""

from __future__ import annotations

import os
import signal
import sys
import time
from typing import Callable, Optional, Union

from sigtalk.formatting import printf
from sigtalk.parsing import parse_int
from sigtalk.protocol import encode_bits

DEFAULT_DELAY = 0.0002

Message = Union[bytes, bytearray, str]
Killer = Callable[[int, int], None]


class UsageError(Exception):
    """Raised when the command line is not ``[server_pid] [message]``."""


def _as_bytes(message: Message) -> bytes:
    data = message.encode("utf-8") if isinstance(message, str) else bytes(message)
    if b"\x00" in data:
        raise ValueError("a message must not contain a NUL byte")
    return data


def signals_for(message: Message) -> list[int]:
    """The signals that carry ``message`` and its terminator.

    SIGUSR2 stands for a 1 bit and SIGUSR1 for a 0 bit.
    """
    data = _as_bytes(message) + b"\x00"
    return [signal.SIGUSR2 if bit else signal.SIGUSR1 for bit in encode_bits(data)]


def send_message(
    server_pid: int,
    message: Message,
    delay: float = DEFAULT_DELAY,
    kill: Optional[Killer] = None,
) -> None:
    """Send ``message`` to ``server_pid``, pausing ``delay`` seconds after each bit."""
    if server_pid <= 0:
        raise ValueError("Invalid PID")
    send = os.kill if kill is None else kill
    for signum in signals_for(message):
        send(server_pid, signum)
        if delay > 0:
            time.sleep(delay)


def _send_and_wait(server_pid: int, message: bytes) -> int:
    ack = {signal.SIGUSR1}
    signal.pthread_sigmask(signal.SIG_BLOCK, ack)
    try:
        send_message(server_pid, message)
        signal.sigwait(ack)
    finally:
        signal.pthread_sigmask(signal.SIG_UNBLOCK, ack)
    printf("Server received message\n")
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    """Send a message given on the command line.

    Usage: ``[--wait-ack] server_pid message``. With ``--wait-ack`` the
    client waits for the server to confirm receipt.
    """
    args = sys.argv[1:] if argv is None else list(argv)
    wait = bool(args) and args[0] in ("-a", "--wait-ack")
    if wait:
        args = args[1:]
    try:
        if len(args) != 2:
            raise UsageError("Usage: client [server_pid] [message]")
        server_pid = parse_int(args[0])
        if server_pid <= 0:
            printf("Invalid PID\n")
            return 1
        message = os.fsencode(args[1])
        if wait:
            return _send_and_wait(server_pid, message)
        send_message(server_pid, message)
    except UsageError as exc:
        printf("%s\n", str(exc))
        return 1
    except OSError as exc:
        print(f"cannot signal process: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())