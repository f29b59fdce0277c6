import pytest

from basekit.memory import (
    SIZE_MAX,
    bzero,
    calloc,
    memchr,
    memcmp,
    memcpy,
    memmove,
    memset,
)


def test_memset_fills_prefix_only():
    buf = bytearray(b"hello")
    result = memset(buf, ord("x"), 3)
    assert result is buf
    assert buf[:3] == b"x" * 3
    assert buf[3:] == b"lo"


def test_memset_uses_low_byte():
    buf = bytearray(4)
    memset(buf, 0x141, 4)
    assert buf == bytes([0x41]) * 4


def test_memset_zero_count_leaves_buffer():
    buf = bytearray(b"abc")
    memset(buf, 0, 0)
    assert buf == b"abc"


def test_memset_too_long_raises():
    with pytest.raises(IndexError):
        memset(bytearray(2), 1, 3)


def test_memset_negative_raises():
    with pytest.raises(ValueError):
        memset(bytearray(2), 1, -1)


def test_bzero_clears_prefix():
    buf = bytearray(b"abcdef")
    bzero(buf, 4)
    assert buf[:4] == bytes(4)
    assert buf[4:] == b"ef"


def test_calloc_returns_zeroed_buffer():
    buf = calloc(3, 4)
    assert buf == bytearray(12)
    assert len(buf) == 12


@pytest.mark.parametrize("nmemb,size", [(0, 4), (4, 0), (0, 0)])
def test_calloc_zero_gives_none(nmemb, size):
    assert calloc(nmemb, size) is None


def test_calloc_overflow_raises():
    with pytest.raises(OverflowError):
        calloc(2, SIZE_MAX // 2 + 1)


def test_calloc_negative_raises():
    with pytest.raises(ValueError):
        calloc(-1, 2)


def test_memchr_finds_first():
    data = b"abcabc"
    assert memchr(data, ord("c"), 6) == data.index(b"c")


def test_memchr_respects_count():
    assert memchr(b"abcdef", ord("e"), 3) is None


def test_memchr_compares_low_byte():
    assert memchr(b"\x00A", 0x141, 2) == 1


def test_memchr_not_found():
    assert memchr(b"abc", ord("z"), 3) is None


def test_memcmp_equal():
    assert memcmp(b"abcdef", b"abcxyz", 3) == 0


def test_memcmp_difference_of_bytes():
    assert memcmp(b"abc", b"abd", 3) == ord("c") - ord("d")
    assert memcmp(b"\xff", b"\x01", 1) == 0xFF - 0x01


def test_memcmp_sign_is_antisymmetric():
    assert memcmp(b"hello", b"help!", 5) == -memcmp(b"help!", b"hello", 5)


def test_memcmp_count_too_large_raises():
    with pytest.raises(IndexError):
        memcmp(b"ab", b"abc", 3)


def test_memcpy_copies_prefix():
    dest = bytearray(b"......")
    result = memcpy(dest, b"abcdef", 4)
    assert result is dest
    assert dest == b"abcd.."


def test_memcpy_count_too_large_raises():
    with pytest.raises(IndexError):
        memcpy(bytearray(2), b"abc", 3)


def test_memmove_forward_overlap():
    buf = bytearray(b"abcdef")
    memmove(buf, 2, 0, 4)
    assert buf == b"ab" + b"abcd"


def test_memmove_backward_overlap():
    buf = bytearray(b"abcdef")
    memmove(buf, 0, 2, 4)
    assert buf == b"cdef" + b"ef"


def test_memmove_out_of_range_raises():
    with pytest.raises(IndexError):
        memmove(bytearray(4), 2, 0, 3)


def test_memmove_negative_offset_raises():
    with pytest.raises(ValueError):
        memmove(bytearray(4), -1, 0, 1)