"""Byte-buffer operations over bytes and bytearray objects."""

from __future__ import annotations

C_UINT_MAX = 4294967295


def _check_length(name: str, buf: bytes | bytearray, n: int) -> None:
    if n < 0:
        raise ValueError(f"negative length {n}")
    if n > len(buf):
        raise ValueError(f"{name} holds {len(buf)} bytes, {n} requested")


def bzero(buf: bytearray, n: int) -> bytearray:
    """Zero the first n bytes of buf in place and return it."""
    return memset(buf, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of count * size bytes.

    Raises MemoryError when the product would exceed the 32-bit unsigned range.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must be non-negative")
    if count and size and count > C_UINT_MAX // size:
        raise MemoryError(f"{count} * {size} bytes is too large")
    return bytearray(count * size)


def memchr(data: bytes | bytearray, c: int, n: int) -> int | None:
    """Return the offset of the first byte equal to c in data[:n], or None."""
    _check_length("data", data, n)
    offset = data.find(bytes([c & 0xFF]), 0, n)
    return None if offset < 0 else offset


def memcmp(a: bytes | bytearray, b: bytes | bytearray, n: int) -> int:
    """Compare the first n bytes; return the difference of the first mismatch."""
    _check_length("a", a, n)
    _check_length("b", b, n)
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0


def memcpy(dst: bytearray, src: bytes | bytearray, n: int) -> bytearray:
    """Copy the first n bytes of src into dst and return dst."""
    _check_length("dst", dst, n)
    _check_length("src", src, n)
    dst[:n] = src[:n]
    return dst


def memmove(buf: bytearray, dst: int, src: int, n: int) -> bytearray:
    """Copy n bytes within buf from offset src to offset dst; overlap is safe."""
    if min(dst, src) < 0:
        raise ValueError("offsets must be non-negative")
    _check_length("buf", buf, max(dst, src) + n)
    buf[dst:dst + n] = bytes(buf[src:src + n])
    return buf


def memset(buf: bytearray, c: int, n: int) -> bytearray:
    """Fill the first n bytes of buf with the low byte of c and return buf."""
    _check_length("buf", buf, n)
    buf[:n] = bytes([c & 0xFF]) * n
    return buf