"""Searching and comparing text; a NUL character ends a string."""

from __future__ import annotations

from itertools import zip_longest
from typing import Optional, Union

CharLike = Union[str, int]


def _text(s: str) -> str:
    return s.split("\0", 1)[0]


def _char(c: CharLike) -> str:
    if isinstance(c, int):
        return chr(c)
    if len(c) != 1:
        raise ValueError("expected a single character")
    return c


def strlen(s: str) -> int:
    """Number of characters before the first NUL."""
    return len(_text(s))


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Offset of the first ``c``; NUL finds the end of the string; None if absent."""
    text, ch = _text(s), _char(c)
    if ch == "\0":
        return len(text)
    found = text.find(ch)
    return None if found == -1 else found


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Offset of the last ``c``; NUL finds the end of the string; None if absent."""
    text, ch = _text(s), _char(c)
    if ch == "\0":
        return len(text)
    found = text.rfind(ch)
    return None if found == -1 else found


def strstr(haystack: str, needle: str) -> Optional[int]:
    """Offset of the first occurrence of ``needle``; an empty needle is found at 0."""
    found = _text(haystack).find(_text(needle))
    return None if found == -1 else found


def strnstr(haystack: str, needle: str, n: int) -> Optional[int]:
    """Like strstr, but the match must lie wholly within the first ``n`` characters."""
    needle = _text(needle)
    if not needle:
        return 0
    found = _text(haystack)[:max(n, 0)].find(needle)
    return None if found == -1 else found


def strcmp(a: str, b: str) -> int:
    """Difference of the first unequal character codes, or 0 when equal."""
    for x, y in zip_longest(_text(a), _text(b), fillvalue="\0"):
        if x != y:
            return ord(x) - ord(y)
    return 0


def strncmp(a: str, b: str, n: int) -> int:
    """strcmp over at most the first ``n`` characters."""
    if n <= 0:
        return 0
    return strcmp(_text(a)[:n], _text(b)[:n])


def strequ(a: Optional[str], b: Optional[str]) -> bool:
    """Whether both strings are given and equal."""
    if a is None or b is None:
        return False
    return _text(a) == _text(b)


def strnequ(a: Optional[str], b: Optional[str], n: int) -> bool:
    """Whether both strings are given and agree in their first ``n`` characters."""
    if a is None or b is None:
        return False
    if n <= 0:
        return True
    return _text(a)[:n] == _text(b)[:n]