"""String searching, comparison, slicing, joining, trimming and splitting."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence

_NUL = "\0"


def _char(c: int | str) -> str:
    """Return c as a one-character string, narrowing integers to a byte."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(int(c) & 0xFF)


def strlen(s: str) -> int:
    """Return the number of characters in s."""
    return len(s)


def strchr(s: str, c: int | str) -> int | None:
    """Return the index of the first c in s, or None.

    Searching for the NUL character finds the end of the string.
    """
    ch = _char(c)
    if ch == _NUL:
        return len(s)
    index = s.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: int | str) -> int | None:
    """Return the index of the last c in s, or None.

    Searching for the NUL character finds the end of the string.
    """
    ch = _char(c)
    if ch == _NUL:
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most n characters.

    Returns the code-point difference at the first mismatch, 0 when equal.
    A string that ends early compares as if followed by NUL.
    """
    if n < 0:
        raise ValueError(f"negative length {n}")
    for a, b in zip(s1[:n].ljust(n, _NUL), s2[:n].ljust(n, _NUL)):
        if a != b:
            return ord(a) - ord(b)
        if a == _NUL:
            break
    return 0


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Return the index of needle within the first length characters, or None.

    An empty needle matches at index 0.
    """
    if not needle:
        return 0
    if length <= 0:
        return None
    index = haystack.find(needle, 0, length)
    return None if index < 0 else index


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy src into a buffer of size characters, terminator included.

    Returns the copied text and the full length of src, so truncation shows
    as a length greater than or equal to size.
    """
    if size < 0:
        raise ValueError(f"negative size {size}")
    copied = src[: size - 1] if size > 0 else ""
    return copied, len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append src to dst within a buffer of size characters.

    Returns the resulting text and the length the result would have had
    with unlimited room (or len(src) + size when dst already fills it).
    """
    if size < 0:
        raise ValueError(f"negative size {size}")
    len_dst, len_src = len(dst), len(src)
    if size > 0 and len_dst < size - 1:
        return dst + src[: size - len_dst - 1], len_dst + len_src
    if size >= len_dst:
        return dst, len_dst + len_src
    return dst, len_src + size


def strdup(s: str) -> str:
    """Return a copy of s."""
    return "".join(s)


def substr(s: str, start: int, length: int) -> str:
    """Return at most length characters of s starting at start.

    A start at or past the end gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must be non-negative")
    if start >= len(s):
        return ""
    return s[start:start + length]


def strjoin(s1: str, s2: str) -> str:
    """Return s1 followed by s2."""
    if s1 is None or s2 is None:
        raise TypeError("strjoin needs two strings")
    return s1 + s2


def strtrim(s: str, charset: str) -> str:
    """Remove characters found in charset from both ends of s."""
    if s is None or charset is None:
        raise TypeError("strtrim needs two strings")
    return s.strip(charset) if charset else s


def split(s: str, sep: int | str) -> list[str]:
    """Split s on the separator character, dropping empty words."""
    if s is None:
        raise TypeError("split needs a string")
    ch = _char(sep)
    return [word for word in s.split(ch) if word]


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Build a string from f(index, character) for each character of s."""
    return "".join(f(index, ch) for index, ch in enumerate(s))


def striteri(s: MutableSequence[str], f: Callable[[int, str], str | None]) -> None:
    """Call f(index, character) for each character of s, in order.

    When f returns a character it replaces the one at that index in place;
    returning None leaves it unchanged.
    """
    for index, ch in enumerate(s):
        replacement = f(index, ch)
        if replacement is not None:
            s[index] = replacement