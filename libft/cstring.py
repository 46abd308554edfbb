"""C-style string routines over Python text.

A string is read up to its first NUL character, as a C string would be.
Positions are returned as indices instead of pointers, and None stands
for a failed search.
"""

from __future__ import annotations

import operator

_NUL = "\0"


def _terminated(s: str) -> str:
    """Return *s* cut at its first NUL character."""
    end = s.find(_NUL)
    return s if end < 0 else s[:end]


def _char(c: int | str) -> str:
    """Return *c* as a one-character string; an int is truncated to a byte."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(operator.index(c) & 0xFF)


def _check_size(size: int, name: str = "size") -> None:
    if size < 0:
        raise ValueError(f"{name} must not be negative, got {size}")


def strlen(s: str) -> int:
    """Return the number of characters before the first NUL."""
    return len(_terminated(s))


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy at most ``size - 1`` characters of *src*.

    Returns the copied text and the full length of *src*, so that a
    length not below *size* signals truncation.
    """
    _check_size(size)
    text = _terminated(src)
    copied = text[: size - 1] if size else ""
    return copied, len(text)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append *src* to *dst* so that the result, plus its terminator,
    fits in *size* characters.

    Returns the resulting text and the length it would have had without
    the limit. When *size* is not larger than *dst*, *dst* is returned
    unchanged with ``size + len(src)``.
    """
    _check_size(size)
    head = _terminated(dst)
    tail = _terminated(src)
    if size <= len(head):
        return head, size + len(tail)
    room = size - 1 - len(head)
    return head + tail[:room], len(head) + len(tail)


def strchr(s: str, c: int | str) -> int | None:
    """Return the index of the first *c* in *s*, or None.

    Searching for NUL finds the terminator, at index ``strlen(s)``.
    """
    text = _terminated(s)
    target = _char(c)
    if target == _NUL:
        return len(text)
    index = text.find(target)
    return None if index < 0 else index


def strrchr(s: str, c: int | str) -> int | None:
    """Return the index of the last *c* in *s*, or None.

    Searching for NUL finds the terminator, at index ``strlen(s)``.
    """
    text = _terminated(s)
    target = _char(c)
    if target == _NUL:
        return len(text)
    index = text.rfind(target)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most *n* characters of two strings.

    Returns the difference of the first pair of differing character
    codes, counting the end of a string as code 0, or 0 when they match.
    """
    _check_size(n, "n")
    a = _terminated(s1)[:n]
    b = _terminated(s2)[:n]
    for x, y in zip(a + _NUL, b + _NUL):
        if x != y or x == _NUL:
            return ord(x) - ord(y)
    return 0


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Return the index of the first *needle* lying wholly within the
    first *length* characters of *haystack*, or None.

    An empty needle is found at index 0.
    """
    _check_size(length, "length")
    pattern = _terminated(needle)
    if not pattern:
        return 0
    index = _terminated(haystack)[:length].find(pattern)
    return None if index < 0 else index


def strdup(s: str) -> str:
    """Return a copy of *s* up to its first NUL."""
    return _terminated(s)