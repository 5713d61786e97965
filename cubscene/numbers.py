"""Conversions between integers and their decimal or hexadecimal text."""

from __future__ import annotations

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_UINT_MODULUS = 2**32
_ULLONG_MODULUS = 2**64

_LEADING_SPACE = " \t\n\v\f\r"
_DIGITS = "0123456789"


def atoi(text: str) -> int:
    """Parse a decimal integer.

    Leading whitespace and a single ``+`` or ``-`` sign are accepted. Every
    character after the sign must be a digit; anything else raises
    ValueError. Text with no digits at all parses as 0.
    """
    body = text.lstrip(_LEADING_SPACE)
    sign = 1
    if body.startswith("+"):
        body = body[1:]
    elif body.startswith("-"):
        sign = -1
        body = body[1:]
    digit_count = len(body) - len(body.lstrip(_DIGITS))
    if digit_count < len(body):
        raise ValueError(f"invalid decimal integer: {text!r}")
    return sign * int(body) if body else 0


def int_len(number: int) -> int:
    """Return the number of characters in the decimal text of ``number``, sign included."""
    return len(str(int(number)))


def itoa(number: int) -> str:
    """Return the decimal text of a signed 32-bit integer."""
    if not _INT_MIN <= number <= _INT_MAX:
        raise OverflowError(f"{number} does not fit in a signed 32-bit integer")
    return str(number)


def utoa(number: int) -> str:
    """Return the decimal text of ``number`` taken as an unsigned 32-bit integer."""
    return str(number % _UINT_MODULUS)


def hex_text(number: int, uppercase: bool = False) -> str:
    """Return the hexadecimal digits of ``number`` taken as an unsigned 32-bit integer."""
    return format(number % _UINT_MODULUS, "X" if uppercase else "x")


def pointer_text(address: int) -> str:
    """Return an address as ``0x`` followed by lower-case hex, or ``(nil)`` for zero."""
    value = address % _ULLONG_MODULUS
    if value == 0:
        return "(nil)"
    return f"0x{value:x}"