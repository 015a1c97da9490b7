"""Byte-buffer operations on bytearrays and other bytes-like objects."""

from __future__ import annotations

from typing import Optional, Union

Buffer = Union[bytearray, bytes, memoryview]


def _span(buffer: Buffer, n: int, offset: int = 0) -> None:
    if n < 0:
        raise ValueError("byte count cannot be negative")
    if offset < 0 or offset + n > len(buffer):
        raise IndexError("range reaches past the end of the buffer")


def bzero(buffer: bytearray, n: int) -> None:
    """Set the first ``n`` bytes of ``buffer`` to zero."""
    _span(buffer, n)
    buffer[:n] = bytes(n)


def memalloc(size: int) -> bytearray:
    """A new buffer of ``size`` zero bytes."""
    if size < 0:
        raise ValueError("size cannot be negative")
    return bytearray(size)


def memset(buffer: bytearray, c: int, n: int) -> bytearray:
    """Fill the first ``n`` bytes with the low byte of ``c``; returns ``buffer``."""
    _span(buffer, n)
    buffer[:n] = bytes([c & 0xFF]) * n
    return buffer


def memcpy(dest: Optional[bytearray], src: Optional[Buffer], n: int) -> Optional[bytearray]:
    """Copy ``n`` bytes of ``src`` to the start of ``dest``; returns ``dest``.

    With neither buffer given nothing is copied and None comes back.
    """
    if dest is None and src is None:
        return None
    if dest is None or src is None:
        raise TypeError("both buffers are needed")
    _span(src, n)
    _span(dest, n)
    dest[:n] = bytes(src[:n])
    return dest


def memccpy(dest: bytearray, src: Buffer, c: int, n: int) -> Optional[int]:
    """Copy up to ``n`` bytes, stopping after the first byte equal to ``c``.

    Returns the offset in ``dest`` just past the copied ``c``, or None when
    ``c`` was not among the ``n`` bytes.
    """
    if n < 0:
        raise ValueError("byte count cannot be negative")
    found = bytes(src[:n]).find(c & 0xFF)
    stop = n if found == -1 else found + 1
    _span(src, stop)
    _span(dest, stop)
    dest[:stop] = bytes(src[:stop])
    return None if found == -1 else stop


def memmove(buffer: bytearray, dest_offset: int, src_offset: int, n: int) -> bytearray:
    """Copy ``n`` bytes inside ``buffer``; the two ranges may overlap."""
    _span(buffer, n, src_offset)
    _span(buffer, n, dest_offset)
    buffer[dest_offset:dest_offset + n] = bytes(buffer[src_offset:src_offset + n])
    return buffer


def memchr(data: Buffer, c: int, n: int) -> Optional[int]:
    """Offset of the first byte equal to ``c`` among the first ``n``, or None."""
    _span(data, n)
    found = bytes(data[:n]).find(c & 0xFF)
    return None if found == -1 else found


def memcmp(a: Buffer, b: Buffer, n: int) -> int:
    """Difference of the first unequal bytes among the first ``n``, or 0."""
    _span(a, n)
    _span(b, n)
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0