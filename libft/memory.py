"""Byte-buffer operations: fill, copy, move, search and compare."""

from __future__ import annotations

from typing import Union

Buffer = Union[bytearray, memoryview]
ReadableBuffer = Union[bytes, bytearray, memoryview]


def _check_length(n: int, *buffers: ReadableBuffer) -> None:
    if n < 0:
        raise ValueError(f"length must not be negative, got {n}")
    for buf in buffers:
        if n > len(buf):
            raise IndexError(f"length {n} exceeds buffer of size {len(buf)}")


def memset(buf: Buffer, value: int, length: int) -> Buffer:
    """Fill the first *length* bytes of *buf* with ``value & 0xFF``; return *buf*."""
    _check_length(length, buf)
    buf[:length] = bytes([value & 0xFF]) * length
    return buf


def bzero(buf: Buffer, length: int) -> None:
    """Set the first *length* bytes of *buf* to zero."""
    memset(buf, 0, length)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def memcpy(dst: Buffer, src: ReadableBuffer, n: int) -> Buffer:
    """Copy the first *n* bytes of *src* into *dst*; return *dst*."""
    if dst is src:
        _check_length(n, dst)
        return dst
    _check_length(n, dst, src)
    dst[:n] = bytes(src[:n])
    return dst


def memmove(buffer: Buffer, dst_offset: int, src_offset: int, n: int) -> Buffer:
    """Copy *n* bytes within *buffer* from *src_offset* to *dst_offset*.

    The regions may overlap; the result is as if the source bytes were
    first copied aside. Returns *buffer*.
    """
    if dst_offset < 0 or src_offset < 0:
        raise ValueError("offsets must not be negative")
    _check_length(n, buffer[dst_offset:], buffer[src_offset:])
    buffer[dst_offset:dst_offset + n] = bytes(buffer[src_offset:src_offset + n])
    return buffer


def memchr(data: ReadableBuffer, c: int, n: int) -> int | None:
    """Return the index of the first byte equal to ``c & 0xFF`` among the
    first *n* bytes of *data*, or None if there is none."""
    _check_length(n, data)
    index = bytes(data[:n]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(a: ReadableBuffer, b: ReadableBuffer, n: int) -> int:
    """Compare the first *n* bytes of *a* and *b* as unsigned values.

    Returns the difference of the first pair of differing bytes, or 0.
    """
    _check_length(n, a, b)
    return next(
        (x - y for x, y in zip(bytes(a[:n]), bytes(b[:n])) if x != y),
        0,
    )