"""Search, compare and bounded copy on NUL-terminated text.

A ``"\\0"`` inside a Python string ends the text, as it would in a C string.
Positions are returned as indices, with None where nothing is found.
"""

from __future__ import annotations

from itertools import zip_longest
from typing import Optional, Tuple, Union

CharLike = Union[str, int]


def _terminated(text: str) -> str:
    return text.split("\0", 1)[0]


def _char(ch: CharLike) -> str:
    if isinstance(ch, bool):
        raise TypeError("expected a character or an integer code, not bool")
    if isinstance(ch, int):
        return chr(ch)
    if isinstance(ch, str) and len(ch) == 1:
        return ch
    raise ValueError(f"expected a single character, got {ch!r}")


def _check_size(size: int) -> None:
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")


def strlen(text: str) -> int:
    """Return the length of the text up to its terminator."""
    return len(_terminated(text))


def strchr(text: str, ch: CharLike) -> Optional[int]:
    """Return the index of the first ``ch``; searching for NUL finds the terminator."""
    body = _terminated(text)
    target = _char(ch)
    if target == "\0":
        return len(body)
    index = body.find(target)
    return None if index < 0 else index


def strrchr(text: str, ch: CharLike) -> Optional[int]:
    """Return the index of the last ``ch``; searching for NUL finds the terminator."""
    body = _terminated(text)
    target = _char(ch)
    if target == "\0":
        return len(body)
    index = body.rfind(target)
    return None if index < 0 else index


def strncmp(first: str, second: str, count: int) -> int:
    """Compare at most ``count`` characters.

    Returns the code difference of the first unequal pair, or 0 when the
    compared prefixes are equal.
    """
    _check_size(count)
    pairs = zip_longest(
        _terminated(first)[:count], _terminated(second)[:count], fillvalue="\0"
    )
    for a, b in pairs:
        if a != b:
            return ord(a) - ord(b)
    return 0


def strnstr(big: str, little: str, length: int) -> Optional[int]:
    """Find ``little`` wholly inside the first ``length`` characters of ``big``.

    An empty ``little`` is found at index 0.
    """
    _check_size(length)
    needle = _terminated(little)
    if not needle:
        return 0
    index = _terminated(big)[:length].find(needle)
    return None if index < 0 else index


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters, terminator included.

    Returns the copied text and the full length of ``src``; a size of zero
    copies nothing.
    """
    _check_size(size)
    body = _terminated(src)
    copied = body[: size - 1] if size else ""
    return copied, len(body)


def strlcat(dest: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dest`` within a buffer of ``size`` characters.

    Returns the resulting text and the length the full result would have.
    When ``dest`` already fills the buffer it is returned unchanged, with
    ``size`` plus the length of ``src`` as the length.
    """
    _check_size(size)
    head = _terminated(dest)
    tail = _terminated(src)
    if size <= len(head):
        return head, size + len(tail)
    return (head + tail)[: size - 1], len(head) + len(tail)