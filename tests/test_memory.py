import pytest

from ftselect.libft.memory import (
    bzero,
    memalloc,
    memccpy,
    memchr,
    memcmp,
    memcpy,
    memmove,
    memset,
)


def test_bzero_clears_prefix_only():
    buf = bytearray(b"abcdef")
    bzero(buf, 3)
    assert buf == bytes(3) + b"def"


def test_bzero_zero_length_leaves_buffer():
    buf = bytearray(b"xyz")
    bzero(buf, 0)
    assert buf == b"xyz"


def test_bzero_past_end_raises():
    with pytest.raises(IndexError):
        bzero(bytearray(2), 3)


def test_memalloc_is_zeroed():
    assert memalloc(5) == bytes(5)
    assert len(memalloc(0)) == 0


def test_memalloc_negative_raises():
    with pytest.raises(ValueError):
        memalloc(-1)


def test_memset_fills_and_returns_buffer():
    buf = bytearray(b"hello")
    out = memset(buf, ord("z"), 3)
    assert out is buf
    assert buf == b"zzzlo"


def test_memset_uses_low_byte():
    buf = bytearray(2)
    memset(buf, 0x141, 2)
    assert buf == bytes([0x41, 0x41])


def test_memcpy_copies_prefix():
    dest = bytearray(b"......")
    out = memcpy(dest, b"abcd", 4)
    assert out is dest
    assert dest == b"abcd.."


def test_memcpy_both_missing_gives_none():
    assert memcpy(None, None, 3) is None


def test_memcpy_one_missing_raises():
    with pytest.raises(TypeError):
        memcpy(bytearray(2), None, 1)


def test_memcpy_source_too_short_raises():
    with pytest.raises(IndexError):
        memcpy(bytearray(8), b"ab", 3)


def test_memccpy_stops_after_byte():
    src = b"hello world"
    dest = bytearray(len(src))
    stop = memccpy(dest, src, ord("o"), len(src))
    assert dest[stop - 1] == ord("o")
    assert dest[:stop] == src[:stop]
    assert ord("o") not in dest[:stop - 1]
    assert dest[stop:] == bytes(len(src) - stop)


def test_memccpy_without_byte_copies_n():
    src = b"abcdef"
    dest = bytearray(6)
    assert memccpy(dest, src, ord("z"), 4) is None
    assert dest == src[:4] + bytes(2)


def test_memmove_overlapping_forward():
    buf = bytearray(b"abcdef")
    memmove(buf, 2, 0, 4)
    assert buf == b"ababcd"


def test_memmove_overlapping_backward():
    buf = bytearray(b"abcdef")
    memmove(buf, 0, 2, 4)
    assert buf == b"cdefef"


def test_memmove_out_of_range_raises():
    with pytest.raises(IndexError):
        memmove(bytearray(4), 2, 0, 3)


def test_memchr_finds_first():
    data = b"banana"
    idx = memchr(data, ord("n"), len(data))
    assert data[idx] == ord("n")
    assert ord("n") not in data[:idx]


def test_memchr_respects_limit():
    data = b"banana"
    assert memchr(data, ord("n"), 2) is None
    assert memchr(data, ord("q"), len(data)) is None


def test_memcmp_equal_is_zero():
    assert memcmp(b"abc", b"abc", 3) == 0
    assert memcmp(b"abX", b"abY", 2) == 0


def test_memcmp_difference_of_bytes():
    assert memcmp(b"abc", b"abd", 3) == ord("c") - ord("d")
    assert memcmp(b"\xff", b"\x00", 1) > 0


def test_negative_count_raises():
    with pytest.raises(ValueError):
        memcmp(b"a", b"a", -1)