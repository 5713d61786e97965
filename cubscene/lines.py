"""Reading a stream one line at a time."""

from __future__ import annotations

from typing import IO, AnyStr, Generic, Iterator, Optional


def _newline(chunk: AnyStr) -> AnyStr:
    return "\n" if isinstance(chunk, str) else b"\n"  # type: ignore[return-value]


class LineReader(Generic[AnyStr]):
    """Return the lines of a text or binary stream one at a time.

    Each line keeps its trailing newline; the last line may lack one. The
    stream is read ``chunk_size`` units at a time, so with the default of 1
    nothing past the returned line is consumed from it.
    """

    def __init__(self, stream: IO[AnyStr], chunk_size: int = 1) -> None:
        if chunk_size <= 0:
            raise ValueError(f"chunk_size must be positive, got {chunk_size}")
        self._stream = stream
        self._chunk_size = chunk_size
        self._pending: Optional[AnyStr] = None

    def read_line(self) -> Optional[AnyStr]:
        """Return the next line, or None once the stream holds no more text."""
        while True:
            if self._pending:
                index = self._pending.find(_newline(self._pending))
                if index >= 0:
                    line = self._pending[: index + 1]
                    self._pending = self._pending[index + 1:]
                    return line
            chunk = self._stream.read(self._chunk_size)
            if not chunk:
                line, self._pending = self._pending, None
                return line or None
            self._pending = chunk if self._pending is None else self._pending + chunk

    def __iter__(self) -> Iterator[AnyStr]:
        return iter(self.read_line, None)


def iter_lines(stream: IO[AnyStr]) -> Iterator[AnyStr]:
    """Yield the lines of ``stream`` in order, newlines kept."""
    yield from LineReader(stream)