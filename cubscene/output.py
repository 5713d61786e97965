"""Writing characters, text and numbers to streams, with a small printf."""

from __future__ import annotations

import sys
from typing import Any, Iterator, Optional, TextIO, Union

from .numbers import hex_text, itoa, pointer_text, utoa

CharLike = Union[str, int]

_ERROR_PREFIX = "\033[1;31m[ERROR]: "
_OK_PREFIX = "\033[1;32m[OK]: "
_RESET = "\033[0m"


def _out(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def _err(stream: Optional[TextIO]) -> TextIO:
    return sys.stderr if stream is None else stream


def _char_text(ch: CharLike) -> str:
    if isinstance(ch, bool):
        raise TypeError("expected a character or an integer code, not bool")
    if isinstance(ch, int):
        return chr(ch & 0xFF)
    if isinstance(ch, str) and len(ch) == 1:
        return ch
    raise ValueError(f"expected a single character, got {ch!r}")


def putchar(ch: CharLike, stream: Optional[TextIO] = None) -> None:
    """Write one character (or the character for an integer code) to ``stream``."""
    _out(stream).write(_char_text(ch))


def putstr(text: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write ``text`` to ``stream``; None writes nothing."""
    if text is None:
        return
    _out(stream).write(text)


def putendl(text: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write ``text`` followed by a newline; None writes nothing at all."""
    if text is None:
        return
    _out(stream).write(text + "\n")


def putnbr(number: int, stream: Optional[TextIO] = None) -> None:
    """Write the decimal text of ``number``."""
    _out(stream).write(str(int(number)))


def fperror(message: Optional[str], stream: Optional[TextIO] = None, flush: bool = True) -> None:
    """Write ``Error:`` on its own line and then ``message``.

    A newline follows the message when ``flush`` is true. A None message
    writes nothing.
    """
    if message is None:
        return
    target = _err(stream)
    target.write("Error:\n")
    target.write(message)
    if flush:
        target.write("\n")


def error(message: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write a red ``[ERROR]:`` line to ``stream`` (standard error by default)."""
    target = _err(stream)
    putstr(_ERROR_PREFIX, target)
    putstr(message, target)
    putendl(_RESET, target)


def success(message: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write a green ``[OK]:`` line to ``stream`` (standard output by default)."""
    target = _out(stream)
    putstr(_OK_PREFIX, target)
    putstr(message, target)
    putendl(_RESET, target)


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    if spec not in "csidupxX":
        return ""
    try:
        value = next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for format specifier %{spec}") from None
    if spec == "c":
        return _char_text(value)
    if spec == "s":
        return "(null)" if value is None else str(value)
    if spec in "id":
        return itoa(int(value))
    if spec == "u":
        return utoa(int(value))
    if spec == "p":
        return pointer_text(0 if value is None else int(value))
    return hex_text(int(value), spec == "X")


def format_text(fmt: str, *args: Any) -> str:
    """Expand ``%c %s %d %i %u %p %x %X %%`` in ``fmt`` with ``args``.

    An unknown specifier is dropped together with its ``%``; a ``%`` at the
    very end is kept as it is. Extra arguments are ignored.
    """
    values = iter(args)
    parts = []
    index = 0
    while index < len(fmt):
        ch = fmt[index]
        if ch == "%" and index + 1 < len(fmt):
            index += 1
            parts.append(_convert(fmt[index], values))
        else:
            parts.append(ch)
        index += 1
    return "".join(parts)


def printf(fmt: str, *args: Any, stream: Optional[TextIO] = None) -> int:
    """Format like :func:`format_text`, write the result and return its length."""
    text = format_text(fmt, *args)
    _out(stream).write(text)
    return len(text)