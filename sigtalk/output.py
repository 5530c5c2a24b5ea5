"""Writing characters, strings and numbers to file descriptors."""

from __future__ import annotations

import os


def _write_all(fd: int, data: bytes) -> None:
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]


def put_char_fd(c: str | int, fd: int) -> None:
    """Write one character (or one byte value) to fd."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        data = c.encode()
    else:
        data = bytes([c & 0xFF])
    _write_all(fd, data)


def put_str_fd(s: str, fd: int) -> None:
    """Write a string to fd."""
    _write_all(fd, s.encode())


def put_endl_fd(s: str, fd: int) -> None:
    """Write a string followed by a newline to fd."""
    _write_all(fd, s.encode() + b"\n")


def put_nbr_fd(n: int, fd: int) -> None:
    """Write an integer in decimal to fd."""
    _write_all(fd, f"{n:d}".encode())