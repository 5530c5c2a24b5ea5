import pytest

from sigtalk.memory import (
    C_UINT_MAX,
    bzero,
    calloc,
    memchr,
    memcmp,
    memcpy,
    memmove,
    memset,
)


def test_bzero_clears_prefix_only():
    buf = bytearray(b"abcdef")
    result = bzero(buf, 3)
    assert result is buf
    assert buf[:3] == bytes(3)
    assert buf[3:] == b"def"


def test_bzero_too_long_rejected():
    with pytest.raises(ValueError):
        bzero(bytearray(2), 3)


def test_calloc_zero_filled():
    buf = calloc(3, 4)
    assert len(buf) == 12
    assert not any(buf)


def test_calloc_zero_count():
    assert len(calloc(0, 5)) == 0


def test_calloc_overflow():
    with pytest.raises(MemoryError):
        calloc(C_UINT_MAX + 1, 1)


def test_memchr_finds_first():
    data = b"hello"
    assert memchr(data, ord("l"), 5) == data.index(b"l")


def test_memchr_respects_limit():
    assert memchr(b"hello", ord("o"), 4) is None


def test_memchr_uses_low_byte():
    assert memchr(b"hello", 256 + ord("h"), 5) == 0


def test_memcmp_sign_and_limit():
    assert memcmp(b"abc", b"abd", 3) < 0
    assert memcmp(b"abd", b"abc", 3) > 0
    assert memcmp(b"abc", b"abd", 2) == 0
    assert memcmp(b"", b"", 0) == 0


def test_memcmp_is_antisymmetric():
    a, b = b"\x00\xff", b"\x00\x01"
    assert memcmp(a, b, 2) == -memcmp(b, a, 2)


def test_memcmp_unsigned_bytes():
    assert memcmp(b"\x80", b"\x01", 1) > 0


def test_memcpy_copies_prefix():
    dst = bytearray(b"xxxxx")
    assert memcpy(dst, b"abc", 3) is dst
    assert dst == bytearray(b"abcxx")


def test_memcpy_short_source_rejected():
    with pytest.raises(ValueError):
        memcpy(bytearray(4), b"ab", 3)


def test_memmove_overlap_forward():
    buf = bytearray(b"abcdef")
    assert memmove(buf, 2, 0, 4) == bytearray(b"ababcd")


def test_memmove_overlap_backward():
    buf = bytearray(b"abcdef")
    assert memmove(buf, 0, 2, 4) == bytearray(b"cdefef")


def test_memmove_out_of_range():
    with pytest.raises(ValueError):
        memmove(bytearray(4), 2, 0, 3)


def test_memset_low_byte():
    buf = bytearray(4)
    memset(buf, 0x141, 2)
    assert buf[:2] == bytes([0x41, 0x41])
    assert buf[2:] == bytes(2)