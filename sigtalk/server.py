"""Receives messages one bit per signal and prints each one on its own line."""

from __future__ import annotations

import argparse
import os
import signal
import sys
from typing import BinaryIO, Callable, Optional

from sigtalk.formatting import printf
from sigtalk.protocol import MessageDecoder, MessageTooLongError

_BIT_FOR_SIGNAL = {signal.SIGUSR1: 0, signal.SIGUSR2: 1}
_SIGNALS = set(_BIT_FOR_SIGNAL)

Acknowledger = Callable[[int], None]


def _send_acknowledgement(pid: int) -> None:
    os.kill(pid, signal.SIGUSR1)


class Server:
    """Decodes SIGUSR1 (bit 0) and SIGUSR2 (bit 1) into messages.

    Each completed message is written to ``output`` followed by a newline.
    If ``acknowledge`` is given, it is called with the sender's pid once
    the sender's message has been written.
    """

    def __init__(
        self,
        output: Optional[BinaryIO] = None,
        acknowledge: Optional[Acknowledger] = None,
    ) -> None:
        self._output = output if output is not None else sys.stdout.buffer
        self._acknowledge = acknowledge
        self._decoder = MessageDecoder()

    def handle_signal(self, signum: int, sender_pid: Optional[int] = None) -> Optional[bytes]:
        """Take one signal as one bit; return the message it completes, if any."""
        try:
            bit = _BIT_FOR_SIGNAL[signum]
        except KeyError:
            raise ValueError(f"signal {signum} carries no bit") from None
        message = self._decoder.feed(bit)
        if message is None:
            return None
        self._output.write(message + b"\n")
        self._output.flush()
        if self._acknowledge is not None and sender_pid:
            self._acknowledge(sender_pid)
        return message

    def _dispatch(self, signum: int, sender_pid: Optional[int]) -> None:
        try:
            self.handle_signal(signum, sender_pid)
        except MessageTooLongError as exc:
            print(f"message dropped: {exc}", file=sys.stderr)

    def serve_forever(self) -> None:
        """Receive signals until interrupted."""
        if hasattr(signal, "sigwaitinfo"):
            signal.pthread_sigmask(signal.SIG_BLOCK, _SIGNALS)
            try:
                while True:
                    info = signal.sigwaitinfo(_SIGNALS)
                    self._dispatch(info.si_signo, info.si_pid)
            finally:
                signal.pthread_sigmask(signal.SIG_UNBLOCK, _SIGNALS)

        if self._acknowledge is not None:
            raise OSError("this platform does not report the sender of a signal")
        for signum in _SIGNALS:
            signal.signal(signum, lambda num, _frame: self._dispatch(num, None))
        while True:
            signal.pause()


def main(argv: Optional[list[str]] = None) -> int:
    """Print this process's pid, then print every message received."""
    parser = argparse.ArgumentParser(
        prog="sigtalk-server",
        description="Receive messages sent bit by bit with SIGUSR1 and SIGUSR2.",
    )
    parser.add_argument(
        "--acknowledge",
        action="store_true",
        help="answer each sender with SIGUSR1 once its message is printed",
    )
    args = parser.parse_args(argv)

    printf("PID: %d\n", os.getpid())
    sys.stdout.flush()
    server = Server(acknowledge=_send_acknowledgement if args.acknowledge else None)
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        return 0
    except OSError:
        printf("ERROR with Signal")
        sys.stdout.flush()
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())