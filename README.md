# sigtalk

sigtalk passes text from one process to another using only two POSIX
signals. The client sends each byte of the message as eight signals, most
significant bit first. `SIGUSR1` stands for a 1 bit and `SIGUSR2` for a 0 bit.
After the message it sends a NUL byte. The server rebuilds each byte and
collects the bytes into a message. When the NUL byte arrives it prints the
message and sends `SIGUSR2` back to the sender to confirm that the message
arrived.

This needs a POSIX system. The server waits with `signal.sigwaitinfo`, which
is available on Linux but not on every POSIX platform.

## Installation

```
pip install .
```

## Usage

To start the server, run:

```
sigtalk-server
```

The server prints a banner that shows its process id, then waits for
messages and prints each one as it completes. Press Ctrl-C to stop it.

In another terminal, run the client with that process id and the message:

```
sigtalk-client <pid> "hello there"
```

The client sends the message with a short pause after each signal. If the
server's confirmation arrives, the client prints a success line and exits
with status 0. The client prints an error and exits with status 1 when:

- the number of arguments is not two;
- the pid does not start with a non-zero number;
- a signal cannot be delivered.

## Library use

The bit-level protocol lives in `sigtalk.codec`:

- `encode_byte(value)` turns a byte into eight bits, most significant first.
- `frame_message(data)` returns the message bytes (text is encoded as UTF-8)
  followed by the NUL byte; a message that already holds a NUL byte is
  refused with `ValueError`.
- `encode_message(data)` returns every bit of the framed message.
- `decode_byte(bits)` turns eight bits back into a byte.
- `MessageAssembler.feed(bit)` takes one bit and returns the message (without
  its terminator) once it is complete; `feed_all(bits)` returns every message
  a run of bits completes.

`sigtalk.client` offers `parse_pid`, `send_byte` and `send_message`;
`send_byte` raises `SendError` when a signal cannot be delivered.
`sigtalk.server` offers `render_header(pid)` and the `Server` class, whose
`handle(signum, sender_pid)` treats one signal as one bit and whose
`serve_forever()` waits for signals until interrupted.

The package also has a few small helpers:

- `sigtalk.chars`: ASCII character tests, case conversion, `atoi` and `itoa`.
- `sigtalk.strings`: string helpers such as `strchr`, `strlcpy`, `substr`,
  `split` and `strtrim`; searches return an index or `None`.
- `sigtalk.memory`: helpers over `bytes` and `bytearray` such as `memset`,
  `memcpy`, `memmove` and `calloc`.
- `sigtalk.output`: writing characters, strings and numbers to a file
  descriptor.
- `sigtalk.linkedlist`: a singly linked `LinkedList` of `Node` objects.
- `sigtalk.printf`: `format_string` and `printf`, handling
  `%c %s %d %i %u %x %X %p %%`. Every `%` consumes one argument, `%%`
  included; integers wrap to 32 bits.