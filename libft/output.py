"""Writing characters, strings and numbers to file descriptors."""

from __future__ import annotations

import operator
import os

from libft.convert import itoa
from libft.cstring import strdup


def _write_all(fd: int, data: bytes) -> None:
    """Write every byte of *data* to *fd*, retrying after partial writes."""
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]


def putchar_fd(c: int | str, fd: int) -> None:
    """Write one character to *fd*.

    An int is written as a single byte (truncated to 8 bits); a
    one-character string is written in UTF-8.
    """
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        _write_all(fd, c.encode("utf-8"))
    else:
        _write_all(fd, bytes([operator.index(c) & 0xFF]))


def putstr_fd(s: str, fd: int) -> None:
    """Write *s* to *fd* in UTF-8, up to its first NUL character."""
    _write_all(fd, strdup(s).encode("utf-8"))


def putendl_fd(s: str, fd: int) -> None:
    """Write *s* to *fd* followed by a newline."""
    putstr_fd(s, fd)
    putchar_fd("\n", fd)


def putnbr_fd(n: int, fd: int) -> None:
    """Write the decimal text of the 32-bit signed integer *n* to *fd*."""
    putstr_fd(itoa(n), fd)