"""A small printf: %c %s %d %i %u %x %X %p and %%."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from sigtalk.output import put_str_fd

HEXA_LOWER = "0123456789abcdef"
HEXA_CAP = "0123456789ABCDEF"

_UINT_MASK = 0xFFFFFFFF
_POINTER_MASK = 0xFFFFFFFFFFFFFFFF
_MISSING = object()


def _integer(value: Any) -> int:
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError(f"expected an integer, got {value!r}")
        return ord(value)
    if isinstance(value, int):
        return value
    raise TypeError(f"expected an integer, got {type(value).__name__}")


def _as_int32(value: Any) -> int:
    n = _integer(value) & _UINT_MASK
    return n - (1 << 32) if n & 0x80000000 else n


def _as_uint32(value: Any) -> int:
    return _integer(value) & _UINT_MASK


def _address(value: Any) -> int:
    if value is None:
        return 0
    if isinstance(value, int):
        return value & _POINTER_MASK
    return id(value) & _POINTER_MASK


def _hex(n: int, digits: str) -> str:
    if n == 0:
        return digits[0]
    out = []
    while n:
        n, rem = divmod(n, 16)
        out.append(digits[rem])
    return "".join(reversed(out))


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError(f"expected a single character, got {value!r}")
        return value
    return chr(_integer(value) & 0xFF)


def _string(value: Any) -> str:
    if value is None:
        return "(null)"
    if not isinstance(value, str):
        raise TypeError(f"expected a string, got {type(value).__name__}")
    return value


_CONVERTERS: dict[str, Callable[[Any], str]] = {
    "c": _char,
    "s": _string,
    "d": lambda value: str(_as_int32(value)),
    "i": lambda value: str(_as_int32(value)),
    "u": lambda value: str(_as_uint32(value)),
    "x": lambda value: _hex(_as_uint32(value), HEXA_LOWER),
    "X": lambda value: _hex(_as_uint32(value), HEXA_CAP),
    "p": lambda value: "0x" + _hex(_address(value), HEXA_LOWER),
}


def format_string(fmt: str, *args: Any) -> str:
    """Expand the conversions in fmt with args and return the text.

    Every '%' takes the next argument, including '%%' and unknown
    conversions, which print '%' and nothing respectively. Integers wrap
    to 32 bits as in C; %p of None prints 0x0.
    """
    out: list[str] = []
    chars = iter(fmt)
    values = iter(args)
    for ch in chars:
        if ch != "%":
            out.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            raise ValueError("format ends with a lone '%'")
        converter = _CONVERTERS.get(spec)
        if converter is None:
            next(values, None)
            if spec == "%":
                out.append("%")
            continue
        value = next(values, _MISSING)
        if value is _MISSING:
            raise TypeError(f"not enough arguments for %{spec}")
        out.append(converter(value))
    return "".join(out)


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output; return the bytes written."""
    text = format_string(fmt, *args)
    put_str_fd(text, 1)
    return len(text.encode())


def digit_count(n: int) -> int:
    """Number of characters in the decimal form of n, minus sign included."""
    count = 1
    if n < 0:
        n = -n
        count += 1
    while n > 9:
        n //= 10
        count += 1
    return count


def hex_length(n: int) -> int:
    """Number of hex digits in n taken as a 32-bit unsigned value."""
    n &= _UINT_MASK
    length = 1 if n == 0 else 0
    while n > 0:
        n //= 16
        length += 1
    return length


def pointer_length(p: Any) -> int:
    """Number of characters %p prints for p, the 0x prefix included."""
    d = _address(p)
    length = 3 if d == 0 else 2
    while d > 0:
        d //= 16
        length += 1
    return length