"""Parsing a whole scene file, and the command that checks one."""

from __future__ import annotations

import sys
from contextlib import contextmanager
from typing import Iterator, List, Optional, Sequence

from .elements import extract_colors, extract_textures
from .loader import read_lines, validate_name
from .mapgrid import build_grid, is_closed
from .model import CubError, Scene
from .output import error, success


@contextmanager
def _stage(accepted: str, rejected: str) -> Iterator[None]:
    try:
        yield
    except CubError as exc:
        raise CubError(rejected) from exc
    success(accepted)


def parse_scene(path: str) -> Scene:
    """Read and check the scene file at ``path``.

    Each passed stage is reported on standard output. CubError is raised at
    the first stage that fails, naming that stage.
    """
    validate_name(path)
    lines = read_lines(path)
    with _stage("The path format was accepted!", "The path format was not accepted!"):
        textures, texture_rows = extract_textures(lines)
    with _stage("The colors format was accepted!", "The colors format was not accepted!"):
        floor, ceiling, color_rows = extract_colors(lines)
    with _stage("The global format was accepted!", "The global format was not accepted!"):
        grid, player = build_grid(lines, texture_rows + color_rows)
    with _stage("The map format was accepted!", "The map format was not accepted!"):
        if not is_closed(grid, player):
            raise CubError("the map is not enclosed by walls")
    return Scene(
        name=path,
        lines=list(lines),
        textures=textures,
        floor=floor,
        ceiling=ceiling,
        grid=grid,
        player=player,
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Check the one scene file named on the command line; return the exit status."""
    args: List[str] = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        error("Expected 1 argument (*.cub)!")
        return 1
    try:
        parse_scene(args[0])
    except CubError as exc:
        error(str(exc))
        error("Parsing failed, exiting!")
        return 1
    success("Parsing succeeded, starting!")
    return 0


if __name__ == "__main__":
    sys.exit(main())