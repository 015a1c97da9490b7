"""Writing characters, strings and numbers to a text stream."""

from __future__ import annotations

import sys
from typing import Optional, TextIO


def _target(file: Optional[TextIO]) -> TextIO:
    return sys.stdout if file is None else file


def putchar(c: str, file: Optional[TextIO] = None) -> None:
    """Write one character; standard output by default."""
    if len(c) != 1:
        raise ValueError("expected a single character")
    _target(file).write(c)


def putstr(s: Optional[str], file: Optional[TextIO] = None) -> None:
    """Write a string; None writes nothing."""
    if s is None:
        return
    _target(file).write(s)


def putendl(s: Optional[str], file: Optional[TextIO] = None) -> None:
    """Write a string and a newline; None writes nothing."""
    if s is None:
        return
    _target(file).write(s + "\n")


def putnbr(n: int, file: Optional[TextIO] = None) -> None:
    """Write an integer in decimal."""
    _target(file).write(str(int(n)))