"""Bit-level framing of messages sent one signal at a time.

Each byte travels as eight bits, most significant first. A message is the
bytes of its text followed by a single zero byte that marks its end.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

BITS_PER_BYTE = 8
TERMINATOR = 0


def encode_byte(value: int) -> tuple[int, ...]:
    """Return the eight bits of value, most significant first."""
    if not 0 <= value <= 0xFF:
        raise ValueError(f"byte value out of range: {value}")
    return tuple((value >> shift) & 1 for shift in range(BITS_PER_BYTE - 1, -1, -1))


def frame_message(data: str | bytes) -> bytes:
    """Return the bytes of data followed by the terminating zero byte.

    Text is encoded as UTF-8. Data that already holds a zero byte cannot be
    framed, since the receiver would take it for the end of the message.
    """
    payload = data.encode("utf-8") if isinstance(data, str) else bytes(data)
    if TERMINATOR in payload:
        raise ValueError("message must not contain a NUL byte")
    return payload + bytes([TERMINATOR])


def encode_message(data: str | bytes) -> list[int]:
    """Return every bit of the framed message, in sending order."""
    return [bit for value in frame_message(data) for bit in encode_byte(value)]


def decode_byte(bits: Sequence[int | bool]) -> int:
    """Rebuild a byte from eight bits, most significant first."""
    if len(bits) != BITS_PER_BYTE:
        raise ValueError(f"expected {BITS_PER_BYTE} bits, got {len(bits)}")
    value = 0
    for bit in bits:
        value = (value << 1) | (1 if bit else 0)
    return value


class MessageAssembler:
    """Collects bits one at a time and yields each message once it ends."""

    def __init__(self) -> None:
        self._bits: list[int] = []
        self._buffer = bytearray()

    def feed(self, bit: int | bool) -> bytes | None:
        """Take one bit; return the message (without terminator) when complete."""
        self._bits.append(1 if bit else 0)
        if len(self._bits) < BITS_PER_BYTE:
            return None
        value = decode_byte(self._bits)
        self._bits.clear()
        if value == TERMINATOR:
            message = bytes(self._buffer)
            self._buffer.clear()
            return message
        self._buffer.append(value)
        return None

    def feed_all(self, bits: Iterable[int | bool]) -> list[bytes]:
        """Feed many bits and return every message they complete."""
        return [message for message in map(self.feed, bits) if message is not None]