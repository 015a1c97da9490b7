"""Mapping, iterating, trimming and splitting text."""

from __future__ import annotations

from itertools import count, groupby
from typing import Callable, Optional

from .chars import is_blank

_TRIMMED = " \t\n"


def _text(s: str) -> str:
    return s.split("\0", 1)[0]


def strmap(s: Optional[str], f: Optional[Callable[[str], str]]) -> Optional[str]:
    """A new string made of ``f`` applied to each character; None if either is missing."""
    if s is None or f is None:
        return None
    return "".join(f(ch) for ch in _text(s))


def strmapi(
    s: Optional[str], f: Optional[Callable[[int, str], str]]
) -> Optional[str]:
    """Like strmap, but ``f`` also receives the index of the character."""
    if s is None or f is None:
        return None
    return "".join(f(index, ch) for index, ch in enumerate(_text(s)))


def _visit(buffer: bytearray, visit: Callable[[int, memoryview], None]) -> None:
    view = memoryview(buffer)
    for index in count():
        if index >= len(buffer) or buffer[index] == 0:
            break
        visit(index, view[index:index + 1])


def striter(
    buffer: Optional[bytearray], f: Optional[Callable[[memoryview], None]]
) -> None:
    """Call ``f`` on each byte of the string in ``buffer``.

    ``f`` receives a one-byte view into ``buffer`` and may write through it.
    Iteration stops at the first NUL.
    """
    if buffer is None or f is None:
        return
    _visit(buffer, lambda _index, cell: f(cell))


def striteri(
    buffer: Optional[bytearray], f: Optional[Callable[[int, memoryview], None]]
) -> None:
    """Like striter, but ``f`` also receives the index of the byte."""
    if buffer is None or f is None:
        return
    _visit(buffer, f)


def strtrim(s: Optional[str]) -> Optional[str]:
    """``s`` without leading and trailing spaces, tabs and newlines."""
    if s is None:
        return None
    return _text(s).strip(_TRIMMED)


def _words(text: str, is_separator: Callable[[str], bool]) -> list[str]:
    return [
        "".join(group)
        for separator, group in groupby(text, key=is_separator)
        if not separator
    ]


def strsplit(s: Optional[str], c: str) -> Optional[list[str]]:
    """The non-empty pieces of ``s`` between occurrences of ``c``."""
    if s is None:
        return None
    if len(c) != 1:
        raise ValueError("expected a single separator character")
    return _words(_text(s), lambda ch: ch == c)


def splitspctab(s: Optional[str]) -> Optional[list[str]]:
    """The words of ``s`` separated by runs of spaces and tabs."""
    if s is None:
        return None
    return _words(_text(s), is_blank)