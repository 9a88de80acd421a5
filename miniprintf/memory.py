"""Byte-buffer helpers: fill, copy, search, compare and zeroed allocation.

Buffers are mutable bytes-like objects (``bytearray`` or a writable
``memoryview``). Lengths that run past the end of a buffer raise
``IndexError``.
"""

from __future__ import annotations

from typing import Optional, Union

Buffer = Union[bytearray, memoryview]
ReadableBuffer = Union[bytes, bytearray, memoryview]

SIZE_MAX = 2**64 - 1


def _check_length(buffer: ReadableBuffer, n: int, name: str) -> None:
    if n < 0:
        raise ValueError(f"{name}: length must not be negative")
    if n > len(buffer):
        raise IndexError(f"{name}: length {n} exceeds buffer of size {len(buffer)}")


def memset(buffer: Buffer, value: int, n: int) -> Buffer:
    """Fill the first ``n`` bytes with ``value`` (taken modulo 256)."""
    _check_length(buffer, n, "memset")
    buffer[:n] = bytes([value & 0xFF]) * n
    return buffer


def bzero(buffer: Buffer, n: int) -> None:
    """Set the first ``n`` bytes to zero."""
    _check_length(buffer, n, "bzero")
    buffer[:n] = bytes(n)


def memcpy(
    dest: Optional[Buffer], src: Optional[ReadableBuffer], n: int
) -> Optional[Buffer]:
    """Copy ``n`` bytes from ``src`` into ``dest``; return ``dest``.

    When both buffers are ``None`` nothing is copied and ``None`` is returned.
    """
    if dest is None and src is None:
        return None
    if dest is None or src is None:
        raise TypeError("memcpy: both dest and src must be buffers")
    _check_length(dest, n, "memcpy")
    _check_length(src, n, "memcpy")
    dest[:n] = bytes(src[:n])
    return dest


def memmove(dest: Buffer, src: ReadableBuffer, n: int) -> Buffer:
    """Copy ``n`` bytes from ``src`` into ``dest``, safe for overlapping views."""
    _check_length(dest, n, "memmove")
    _check_length(src, n, "memmove")
    if n:
        dest[:n] = bytes(src[:n])
    return dest


def memchr(data: ReadableBuffer, value: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to ``value`` within ``n`` bytes."""
    _check_length(data, n, "memchr")
    index = bytes(data[:n]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(first: ReadableBuffer, second: ReadableBuffer, n: int) -> int:
    """Compare ``n`` bytes; return the difference of the first unequal pair or 0."""
    _check_length(first, n, "memcmp")
    _check_length(second, n, "memcmp")
    for a, b in zip(bytes(first[:n]), bytes(second[:n])):
        if a != b:
            return a - b
    return 0


def calloc(count: int, size: int) -> bytearray:
    """Allocate ``count * size`` zeroed bytes.

    Raises ``MemoryError`` when the product would not fit in a 64-bit size.
    """
    if count < 0 or size < 0:
        raise ValueError("calloc: count and size must not be negative")
    if size != 0 and count >= SIZE_MAX // size:
        raise MemoryError(f"calloc: {count} * {size} bytes overflows the size limit")
    return bytearray(count * size)