"""Building the map grid from the scene lines and checking that it is closed."""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence, Tuple

from .chars import is_space
from .model import CubError, Player
from .scan import count_map_rows, is_player

_CELLS = frozenset("01")


def build_grid(
    lines: Sequence[Optional[str]], skip: Iterable[int]
) -> Tuple[List[str], Optional[Player]]:
    """Collect the map rows, leaving out the lines at the indices in ``skip``.

    Every remaining non-blank line becomes a row with its newline removed.
    Returns the rows and the player start, or None when the map holds no
    player marker. CubError is raised for a foreign character, a second
    player, an empty map, or rows the map-row count does not account for.
    """
    remaining = list(lines)
    for index in skip:
        remaining[index] = None
    height = count_map_rows(remaining)
    if height == 0:
        raise CubError("the scene holds no map rows")
    grid: List[str] = []
    player: Optional[Player] = None
    for line in remaining:
        if line is None or line in ("", "\n"):
            continue
        row = line.replace("\n", "")
        for column, ch in enumerate(row):
            if is_space(ch) or ch in _CELLS:
                continue
            if not is_player(ch):
                raise CubError(f"unexpected character {ch!r} in map row {row!r}")
            if player is not None:
                raise CubError("the map holds more than one player start")
            player = Player(len(grid), column, ch)
        grid.append(row)
    if len(grid) > height:
        raise CubError("the map holds rows outside the map block")
    return grid, player


def is_closed(grid: Sequence[str], player: Optional[Player]) -> bool:
    """Return True if the floor reachable from the start is enclosed.

    The fill starts at the player, or at the top-left cell when there is
    none. It spreads over ``0`` cells and the start marker; reaching a space
    or leaving the grid means the map is open. Any other character stops it.
    """
    if player is None:
        start = (0, 0)
        fillable = {"0"}
    else:
        start = (player.row, player.column)
        fillable = {"0", player.direction}
    seen = set()
    stack = [start]
    while stack:
        row, column = stack.pop()
        if not 0 <= row < len(grid) or not 0 <= column < len(grid[row]):
            return False
        cell = grid[row][column]
        if cell == " ":
            return False
        if (row, column) in seen or cell not in fillable:
            continue
        seen.add((row, column))
        stack.extend(
            [(row - 1, column), (row, column - 1), (row + 1, column), (row, column + 1)]
        )
    return True