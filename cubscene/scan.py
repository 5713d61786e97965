"""Scanning the raw lines of a scene file."""

from __future__ import annotations

import os
from typing import Optional, Sequence, Tuple

from .chars import is_space
from .lines import LineReader
from .model import PLAYER_DIRECTIONS, CubError

_MAP_CELLS = frozenset("01")


def is_player(ch: str) -> bool:
    """Return True for a player start marker: N, S, W or E."""
    return ch in PLAYER_DIRECTIONS


def path_exists(path: str) -> bool:
    """Return True if ``path`` can be opened for reading."""
    try:
        descriptor = os.open(path, os.O_RDONLY)
    except OSError:
        return False
    os.close(descriptor)
    return True


def is_map_line(line: str) -> bool:
    """Return True if every character is whitespace, a wall, a floor or a player marker."""
    return all(is_space(ch) or ch in _MAP_CELLS or is_player(ch) for ch in line)


def find_directive(
    lines: Sequence[Optional[str]], key: str
) -> Optional[Tuple[int, str]]:
    """Find the first line holding ``key`` and collect what follows it.

    Returns the index of that line and the non-whitespace characters after
    the key, or None when no line holds the key. The key may appear anywhere
    in the line. Two characters are skipped at a match: for a one-letter key
    that is the key and the character after it. Lines that are None are
    passed over.
    """
    if not 1 <= len(key) <= 2:
        raise ValueError(f"key must be one or two characters, got {key!r}")
    for index, line in enumerate(lines):
        if line is None:
            continue
        found = False
        token = []
        pos = 0
        while pos < len(line):
            ch = line[pos]
            if found and not is_space(ch):
                token.append(ch)
            if line.startswith(key, pos):
                found = True
                pos += 2
            else:
                pos += 1
        if found:
            return index, "".join(token)
    return None


def count_map_rows(lines: Sequence[Optional[str]]) -> int:
    """Count the map rows among ``lines``.

    Lines from index 1 on are examined; None entries and lines of at most two
    characters (newline included) are passed over. Any other line must be a
    map line, or CubError is raised.
    """
    count = 0
    for number, line in enumerate(lines[1:], start=1):
        if line is None or len(line) <= 2:
            continue
        if not is_map_line(line):
            raise CubError(f"line {number + 1} is not a map line: {line.rstrip()!r}")
        count += 1
    return count


def count_lines(path: str) -> int:
    """Return the number of lines in the file at ``path``, or 0 if it cannot be read."""
    try:
        with open(path, "rb") as stream:
            return sum(1 for _ in LineReader(stream, chunk_size=4096))
    except OSError:
        return 0