# sigtalk

sigtalk sends a text message from one process to another using only two
POSIX signals. Each byte is sent as eight bits, most significant bit
first. `SIGUSR1` carries a 0 and `SIGUSR2` carries a 1. A NUL byte ends
the message.

It runs only on POSIX systems, because it needs `SIGUSR1` and `SIGUSR2`.

## Installation

```
pip install .
```

## Usage

Start the server. It prints its process id and then waits for messages:

```
sigtalk-server
PID: 12345
```

From another terminal, send a message to that process id:

```
sigtalk-client 12345 "hello there"
```

The server writes each complete message to standard output, followed by
a newline. A message can hold at most 262143 bytes. If a message is
longer, the server drops it and reports this on standard error. Press
Ctrl-C to stop the server.

### Acknowledgements

Start the server with `--acknowledge` to make it send `SIGUSR1` back to
the sender after it prints that sender's message:

```
sigtalk-server --acknowledge
```

Start the client with `--wait-ack` (or `-a`) to make it wait for that
reply. When the reply arrives, the client prints `Server received message`:

```
sigtalk-client --wait-ack 12345 "hello there"
```

If the client waits but the server was started without `--acknowledge`,
no reply comes and the client keeps waiting.

A server needs the sender's process id to send an acknowledgement. On a
platform that cannot report the sender of a signal, the server prints
`ERROR with Signal` and exits with status 1.

### Errors

The client takes exactly two arguments: the server's process id and the
message. If the number of arguments is wrong, it prints a usage line and
exits with status 1. If the process id is not a positive number, it
prints `Invalid PID` and exits with status 1. If the process cannot be
signalled, it reports this on standard error and exits with status 1.

## Library use

The encoding and decoding work without signals:

```python
from sigtalk.protocol import MessageDecoder, encode_bits

decoder = MessageDecoder(capacity=262144)
for bit in encode_bits(b"hi\x00"):
    message = decoder.feed(bit)
    if message is not None:
        print(message)  # b'hi'
```

`encode_bits` does not add the terminating NUL byte, so the example
above includes it. `MessageDecoder.feed` raises `MessageTooLongError` if
a message does not fit in the capacity. The capacity counts the
terminator.

- `sigtalk.client.signals_for(message)` returns the list of signals that
  carry a message and its terminator.
- `sigtalk.client.send_message(server_pid, message, delay, kill)` sends
  those signals to a process, pausing `delay` seconds after each one. You
  can pass your own `kill(pid, signum)` function, for example to record
  the signals instead of sending them.
- `sigtalk.server.Server(output, acknowledge)` turns signals passed to
  `handle_signal(signum, sender_pid)` back into messages. It writes each
  message and a newline to a binary stream and, if `acknowledge` is
  given, calls it with the sender's pid. `serve_forever()` receives real
  signals until interrupted.

The package also has some small text and byte helpers:

- `sigtalk.parsing`: `parse_int` and `parse_float`.
- `sigtalk.chars`: ASCII classification and case conversion.
- `sigtalk.strings`: searching, comparing and bounded copying.
- `sigtalk.transform`: splitting, joining, trimming, mapping and
  substrings.
- `sigtalk.memory`: byte-buffer operations.
- `sigtalk.output`: writing characters, strings and integers to a stream.
- `sigtalk.formatting`: `format_message` and `printf`. Both support
  `%c %s %p %d %i %u %x %X %%` and raise `FormatError` for anything
  else.

## Running the tests

```
pip install ".[test]"
pytest
```