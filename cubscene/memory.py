"""Byte-buffer helpers working on bytearray and other bytes-like objects."""

from __future__ import annotations

import sys
from typing import Optional

_SIZE_MAX = sys.maxsize * 2 + 1


def _check_count(count: int, *lengths: int) -> None:
    if count < 0:
        raise ValueError(f"count must not be negative, got {count}")
    for length in lengths:
        if count > length:
            raise ValueError(f"count {count} exceeds buffer length {length}")


def memset(buffer: bytearray, value: int, count: int) -> bytearray:
    """Set the first ``count`` bytes of ``buffer`` to ``value`` (low 8 bits) and return it."""
    _check_count(count, len(buffer))
    buffer[:count] = bytes([value & 0xFF]) * count
    return buffer


def bzero(buffer: bytearray, count: int) -> None:
    """Zero the first ``count`` bytes of ``buffer``."""
    memset(buffer, 0, count)


def memcpy(dest: bytearray, src: bytes, count: int) -> bytearray:
    """Copy ``count`` bytes from ``src`` to the start of ``dest`` and return ``dest``."""
    _check_count(count, len(dest), len(src))
    dest[:count] = bytes(src[:count])
    return dest


def memmove(buffer: bytearray, dest: int, src: int, count: int) -> bytearray:
    """Move ``count`` bytes inside ``buffer`` from offset ``src`` to offset ``dest``.

    The regions may overlap; the result is as if the source were copied first.
    """
    if dest < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    _check_count(count, len(buffer) - dest, len(buffer) - src)
    buffer[dest:dest + count] = bytes(buffer[src:src + count])
    return buffer


def memchr(data: bytes, value: int, count: int) -> Optional[int]:
    """Return the index of the first byte equal to ``value`` among the first ``count``, or None."""
    _check_count(count, len(data))
    index = bytes(data[:count]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(first: bytes, second: bytes, count: int) -> int:
    """Compare ``count`` bytes; return the difference of the first unequal pair, or 0."""
    _check_count(count, len(first), len(second))
    for a, b in zip(first[:count], second[:count]):
        if a != b:
            return a - b
    return 0


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if count and _SIZE_MAX // count < size:
        raise OverflowError(f"{count} * {size} bytes exceeds the addressable size")
    return bytearray(count * size)


def realloc(data: Optional[bytes], new_size: int) -> Optional[bytearray]:
    """Return a new buffer of ``new_size`` bytes holding as much of ``data`` as fits.

    A size of zero releases the data and returns None. Bytes beyond the old
    contents are zero.
    """
    if new_size < 0:
        raise ValueError("new_size must not be negative")
    if new_size == 0:
        return None
    result = bytearray(new_size)
    if data is not None:
        keep = min(len(data), new_size)
        result[:keep] = bytes(data[:keep])
    return result