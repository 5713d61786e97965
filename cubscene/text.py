"""Building new text from NUL-terminated strings: copy, slice, join, trim, split, map.

A ``"\\0"`` inside a Python string ends the text, as it would in a C string.
"""

from __future__ import annotations

from typing import Callable, List, MutableSequence, Optional, Union

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


def _check_non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def strdup(text: str) -> str:
    """Return a copy of the text up to its terminator."""
    return _terminated(text)


def strndup(text: str, count: int) -> str:
    """Return a copy of at most ``count`` characters of the text."""
    _check_non_negative("count", count)
    return _terminated(text)[:count]


def substr(text: str, start: int, length: int) -> str:
    """Return up to ``length`` characters starting at ``start``.

    A start at or past the end of the text gives an empty string.
    """
    _check_non_negative("start", start)
    _check_non_negative("length", length)
    body = _terminated(text)
    if start >= len(body):
        return ""
    return body[start:start + length]


def strjoin(first: str, second: str) -> str:
    """Return the two texts joined end to end."""
    return _terminated(first) + _terminated(second)


def strtrim(text: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of the text."""
    return _terminated(text).strip(_terminated(charset))


def _fields(text: str, sep: CharLike) -> List[str]:
    return [field for field in _terminated(text).split(_char(sep)) if field]


def count_words(text: str, sep: CharLike) -> int:
    """Return the number of non-empty runs of characters between separators."""
    return len(_fields(text, sep))


def split(text: str, sep: CharLike) -> List[str]:
    """Split the text on ``sep``, dropping empty fields."""
    return _fields(text, sep)


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Return the text with each character replaced by ``func(index, ch)``.

    A NUL returned by ``func`` ends the result there.
    """
    mapped = "".join(func(index, ch) for index, ch in enumerate(_terminated(text)))
    return _terminated(mapped)


def striteri(
    text: MutableSequence[CharLike], func: Callable[[int, CharLike], Optional[CharLike]]
) -> None:
    """Call ``func(index, ch)`` on each element of a mutable character sequence.

    A value returned by ``func`` replaces the element in place; None keeps it.
    Iteration stops at the first NUL element.
    """
    if isinstance(text, (str, bytes)):
        raise TypeError("striteri needs a mutable sequence such as a list or bytearray")
    for index, ch in enumerate(list(text)):
        if ch in ("\0", 0):
            break
        replacement = func(index, ch)
        if replacement is not None:
            text[index] = replacement