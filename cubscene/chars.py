"""ASCII character classification and case conversion.

Every function accepts either a one-character string or an integer code.
The case converters return a value of the same kind they were given.
"""

from __future__ import annotations

from typing import Union

CharLike = Union[str, int]

_SPACE_CODES = frozenset(map(ord, " \t\v\f\r\n"))


def _code(ch: CharLike) -> int:
    if isinstance(ch, bool):
        raise TypeError("expected a character or an integer code, not bool")
    if isinstance(ch, int):
        return ch
    if isinstance(ch, str):
        if len(ch) != 1:
            raise ValueError(f"expected a single character, got {ch!r}")
        return ord(ch)
    raise TypeError(f"expected a character or an integer code, got {type(ch).__name__}")


def is_alpha(ch: CharLike) -> bool:
    """Return True for an ASCII letter."""
    code = _code(ch)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def is_digit(ch: CharLike) -> bool:
    """Return True for an ASCII decimal digit."""
    return ord("0") <= _code(ch) <= ord("9")


def is_alnum(ch: CharLike) -> bool:
    """Return True for an ASCII letter or digit."""
    return is_alpha(ch) or is_digit(ch)


def is_ascii(ch: CharLike) -> bool:
    """Return True for a code in the 7-bit ASCII range."""
    return 0 <= _code(ch) <= 127


def is_print(ch: CharLike) -> bool:
    """Return True for a printable ASCII character, space included."""
    return 32 <= _code(ch) <= 126


def is_space(ch: CharLike) -> bool:
    """Return True for space, tab, newline, vertical tab, form feed or carriage return."""
    return _code(ch) in _SPACE_CODES


def _convert(ch: CharLike, low: int, high: int, shift: int) -> CharLike:
    code = _code(ch)
    if low <= code <= high:
        code += shift
    return chr(code) if isinstance(ch, str) else code


def to_lower(ch: CharLike) -> CharLike:
    """Map an ASCII upper-case letter to lower case; leave anything else alone."""
    return _convert(ch, ord("A"), ord("Z"), 32)


def to_upper(ch: CharLike) -> CharLike:
    """Map an ASCII lower-case letter to upper case; leave anything else alone."""
    return _convert(ch, ord("a"), ord("z"), -32)