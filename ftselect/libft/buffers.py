"""NUL-terminated strings held in bytearrays: copying, appending, padding.

Each function that fills a destination writes into the bytearray it is
given. It raises IndexError where the text would not fit. If the
destination holds no terminating NUL where one is needed, it raises
ValueError.
"""

from __future__ import annotations

from typing import Optional, Union

Source = Union[bytes, bytearray, memoryview, str]

_SIZE_MAX = 2**64 - 1


def _cstr(data: Source) -> bytes:
    """The bytes of ``data`` before its first NUL."""
    raw = data.encode() if isinstance(data, str) else bytes(data)
    return raw.split(b"\0", 1)[0]


def _end(buffer: bytearray) -> int:
    """Offset of the terminating NUL of ``buffer``."""
    found = buffer.find(0)
    if found == -1:
        raise ValueError("buffer holds no terminating NUL")
    return found


def _put(buffer: bytearray, offset: int, data: bytes) -> None:
    if offset + len(data) > len(buffer):
        raise IndexError("text does not fit in the buffer")
    buffer[offset:offset + len(data)] = data


def strcpy(dest: bytearray, src: Source) -> bytearray:
    """Copy ``src`` and its terminator to the start of ``dest``; returns ``dest``."""
    _put(dest, 0, _cstr(src) + b"\0")
    return dest


def strncpy(dest: bytearray, src: Source, n: int) -> bytearray:
    """Copy at most ``n`` bytes of ``src``, padding with NULs up to ``n``.

    No terminator is added when ``src`` is ``n`` bytes or longer.
    """
    if n < 0:
        raise ValueError("byte count cannot be negative")
    text = _cstr(src)[:n]
    _put(dest, 0, text + bytes(n - len(text)))
    return dest


def strcat(dest: bytearray, src: Source) -> bytearray:
    """Append ``src`` to the string in ``dest``; returns ``dest``."""
    _put(dest, _end(dest), _cstr(src) + b"\0")
    return dest


def strncat(dest: bytearray, src: Source, n: int) -> bytearray:
    """Append at most ``n`` bytes of ``src`` and a terminator; returns ``dest``."""
    if n < 0:
        raise ValueError("byte count cannot be negative")
    _put(dest, _end(dest), _cstr(src)[:n] + b"\0")
    return dest


def strlcat(dest: bytearray, src: Source, size: int) -> int:
    """Append ``src`` so that the result, terminator included, fits in ``size`` bytes.

    Returns the length the whole string would have had: the length of the
    string in ``dest`` (``size`` if no NUL lies within it) plus that of ``src``.
    """
    if size < 0:
        raise ValueError("size cannot be negative")
    if size > len(dest):
        raise IndexError("size reaches past the end of the buffer")
    text = _cstr(src)
    found = dest.find(0, 0, size)
    dlen = size if found == -1 else found
    room = size - dlen
    if room == 0:
        return dlen + len(text)
    _put(dest, dlen, text[:room - 1] + b"\0")
    return dlen + len(text)


def stroffcat(dest: bytearray, src: Source, n: int, mode: bool) -> bytearray:
    """Append ``src`` in a field of exactly ``n`` bytes padded with spaces.

    A true ``mode`` aligns the text to the left, a false one to the right;
    text longer than the field is cut to its first ``n`` bytes.
    """
    if n < 0:
        raise ValueError("field width cannot be negative")
    text = _cstr(src)
    field = text.ljust(n) if mode else text.rjust(n)
    _put(dest, _end(dest), field[:n] + b"\0")
    return dest


def strclr(buffer: Optional[bytearray]) -> None:
    """Zero every byte of the string in ``buffer``; None does nothing."""
    if buffer is None:
        return
    found = buffer.find(0)
    stop = len(buffer) if found == -1 else found
    buffer[:stop] = bytes(stop)


def strnew(size: int) -> bytearray:
    """A zeroed buffer with room for ``size`` bytes and a terminator."""
    if size < 0:
        raise ValueError("size cannot be negative")
    if size >= _SIZE_MAX:
        raise OverflowError("size leaves no room for a terminator")
    return bytearray(size + 1)


def strdup(s: str) -> str:
    """A copy of the text of ``s`` before its first NUL."""
    return s.split("\0", 1)[0]


def strsub(s: Optional[str], start: int, length: int) -> Optional[str]:
    """The ``length`` characters of ``s`` from ``start``; None for no string."""
    if s is None:
        return None
    if start < 0 or length < 0:
        raise ValueError("start and length cannot be negative")
    if start + length > len(s):
        raise IndexError("substring reaches past the end of the string")
    return s[start:start + length]


def strjoin(a: Optional[str], b: Optional[str]) -> Optional[str]:
    """``a`` followed by ``b``; a missing ``a`` gives ``b``, a missing ``b`` None."""
    if b is None:
        return None
    if a is None:
        return strdup(b)
    return strdup(a) + strdup(b)