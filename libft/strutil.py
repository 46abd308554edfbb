"""Higher-level string helpers: slicing, joining, trimming, splitting
and per-character mapping."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from typing import Any


def substr(s: str, start: int, length: int) -> str:
    """Return up to *length* characters of *s* beginning at *start*.

    A start at or past the end of *s* gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(s):
        return ""
    return s[start:start + length]


def strjoin(s1: str, s2: str) -> str:
    """Return the concatenation of *s1* and *s2*."""
    return s1 + s2


def strtrim(s: str, charset: str) -> str:
    """Remove every character found in *charset* from both ends of *s*."""
    return s.strip(charset)


def split(s: str, sep: str) -> list[str]:
    """Split *s* on the character *sep*, dropping empty pieces."""
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    return [word for word in s.split(sep) if word]


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Build a new string from ``f(index, char)`` for every character of *s*."""
    return "".join(f(index, char) for index, char in enumerate(s))


def striteri(s: MutableSequence[Any], f: Callable[[int, Any], Any]) -> None:
    """Call ``f(index, item)`` on every item of *s*, in order.

    When *f* returns something other than None, that value replaces the
    item in place.
    """
    for index, item in enumerate(s):
        replacement = f(index, item)
        if replacement is not None:
            s[index] = replacement