"""Checking the scene file name and reading its lines."""

from __future__ import annotations

from typing import List

from .lines import LineReader
from .model import CubError
from .output import error, success

_EXTENSION = ".cub"


def validate_name(name: str) -> str:
    """Check that ``name`` ends in ``.cub`` and return it.

    A name no longer than the extension itself draws a warning on standard
    error; a name without the extension raises CubError.
    """
    if not len(name) > len(_EXTENSION):
        error("Map name size should be greater")
    if not name.endswith(_EXTENSION):
        raise CubError("Map name contains no .cub!")
    return name


def read_lines(path: str) -> List[str]:
    """Read the scene file at ``path`` into a list of lines, newlines kept.

    Progress is reported on standard output. CubError is raised when the
    file cannot be opened or holds no lines.
    """
    try:
        stream = open(path, encoding="utf-8", errors="surrogateescape", newline="")
    except IsADirectoryError:
        success("Map path found!")
        raise CubError("Failed to load the map struct!") from None
    except OSError as exc:
        raise CubError("Map path not found!") from exc
    success("Map path found!")
    with stream:
        lines = list(LineReader(stream, chunk_size=4096))
    if not lines:
        raise CubError("Failed to load the map struct!")
    success("Succesfully loaded the map struct!")
    return lines