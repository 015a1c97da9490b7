"""Conversions between integers and their decimal text."""

from __future__ import annotations

_WHITESPACE = " \n\t\v\f\r"
_LONG_MIN = -(2**63)
_LONG_MAX = 2**63 - 1
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_SIZE_MAX = 2**64 - 1


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 2**32 if value > _INT_MAX else value


def atoi(text: str) -> int:
    """Read a leading decimal number, as a C int.

    Leading whitespace and one sign are skipped; reading stops at the first
    non-digit. A value beyond the 64-bit range gives -1 when positive and 0
    when negative; otherwise the value wraps to 32 bits.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] == "-":
        sign = -1
        rest = rest[1:]
    elif rest[:1] == "+":
        rest = rest[1:]
    result = 0
    for ch in rest:
        if not "0" <= ch <= "9":
            break
        result = result * 10 + sign * (ord(ch) - ord("0"))
        if not _LONG_MIN <= result <= _LONG_MAX:
            return -1 if sign == 1 else 0
    return _to_int32(result)


def itoa(n: int) -> str:
    """Decimal text of a C int."""
    if not _INT_MIN <= n <= _INT_MAX:
        raise OverflowError("value does not fit in an int")
    return str(n)


def stoa(n: int) -> str:
    """Decimal text of an unsigned size."""
    if n < 0:
        raise ValueError("size cannot be negative")
    if n > _SIZE_MAX:
        raise OverflowError("value does not fit in a size")
    return str(n)