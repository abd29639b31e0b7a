"""Byte-buffer helpers with C library semantics: fill, copy, search, compare."""

from __future__ import annotations

import sys
from collections.abc import MutableSequence, Sequence

Buffer = MutableSequence[int]


def _check_span(name: str, buf: Sequence[int], offset: int, n: int) -> None:
    if n < 0 or offset < 0:
        raise ValueError(f"{name}: offset and count must not be negative")
    if offset + n > len(buf):
        raise IndexError(
            f"{name}: span of {n} at offset {offset} exceeds buffer of {len(buf)}"
        )


def memset(buf: Buffer, value: int, n: int) -> Buffer:
    """Set the first ``n`` bytes of ``buf`` to ``value`` truncated to a byte."""
    _check_span("memset", buf, 0, n)
    buf[:n] = bytes([value & 0xFF]) * n
    return buf


def bzero(buf: Buffer, n: int) -> Buffer:
    """Set the first ``n`` bytes of ``buf`` to zero."""
    return memset(buf, 0, n)


def memcpy(dest: Buffer, src: Sequence[int], n: int) -> Buffer:
    """Copy ``n`` bytes from the start of ``src`` to the start of ``dest``."""
    _check_span("memcpy", dest, 0, n)
    _check_span("memcpy", src, 0, n)
    dest[:n] = bytes(src[:n])
    return dest


def memmove(buf: Buffer, dst: int, src: int, n: int) -> Buffer:
    """Move ``n`` bytes inside ``buf`` from offset ``src`` to offset ``dst``.

    Overlapping regions are handled correctly.
    """
    _check_span("memmove", buf, dst, n)
    _check_span("memmove", buf, src, n)
    buf[dst:dst + n] = bytes(buf[src:src + n])
    return buf


def memchr(buf: Sequence[int], value: int, n: int) -> int | None:
    """Index of the first byte equal to ``value`` in the first ``n``, or None."""
    _check_span("memchr", buf, 0, n)
    target = value & 0xFF
    return next((i for i, byte in enumerate(buf[:n]) if byte == target), None)


def memcmp(first: Sequence[int], second: Sequence[int], n: int) -> int:
    """Compare ``n`` bytes; return the difference at the first mismatch or 0."""
    _check_span("memcmp", first, 0, n)
    _check_span("memcmp", second, 0, n)
    for a, b in zip(first[:n], second[:n]):
        if a != b:
            return a - b
    return 0


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes.

    Raises OverflowError when the total size cannot be represented.
    """
    if count < 0 or size < 0:
        raise ValueError("calloc: count and size must not be negative")
    if count != 0 and size > sys.maxsize // count:
        raise OverflowError("calloc: requested size overflows")
    return bytearray(count * size)