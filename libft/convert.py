"""Conversion between decimal text and 32-bit integers."""

from __future__ import annotations

INT_MIN = -2147483648
INT_MAX = 2147483647

_WHITESPACE = frozenset("\t\n\v\f\r ")
_DIGITS = frozenset("0123456789")


def _wrap_int32(value: int) -> int:
    return (value - INT_MIN) % (1 << 32) + INT_MIN


def atoi(s: str) -> int:
    """Parse a leading decimal integer from *s*.

    Leading ASCII whitespace is skipped. One '+' or '-' is accepted only
    when a digit follows it directly; otherwise the result is 0. Parsing
    stops at the first non-digit. The result wraps to a 32-bit signed int.
    """
    pos = 0
    while pos < len(s) and s[pos] in _WHITESPACE:
        pos += 1
    sign = 1
    if pos < len(s) and s[pos] in "+-":
        if pos + 1 >= len(s) or s[pos + 1] not in _DIGITS:
            return 0
        if s[pos] == "-":
            sign = -1
        pos += 1
    end = pos
    while end < len(s) and s[end] in _DIGITS:
        end += 1
    if end == pos:
        return 0
    return _wrap_int32(int(s[pos:end]) * sign)


def itoa(n: int) -> str:
    """Return the decimal text of a 32-bit signed integer."""
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed int")
    return f"{n:d}"