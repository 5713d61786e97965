import pytest

from cubscene.mapgrid import build_grid, is_closed
from cubscene.model import CubError, Player

HEADER = [
    "NO ./north.xpm\n",
    "SO ./south.xpm\n",
    "WE ./west.xpm\n",
    "EA ./east.xpm\n",
    "F 1,2,3\n",
    "C 4,5,6\n",
]
SKIP = tuple(range(len(HEADER)))


def scene(map_lines):
    return HEADER + ["\n"] + map_lines


def test_build_grid_rows_and_player():
    map_lines = ["111\n", "1N1\n", "111\n"]
    grid, player = build_grid(scene(map_lines), SKIP)
    assert grid == [line.rstrip("\n") for line in map_lines]
    assert player == Player(1, 1, "N")


def test_build_grid_does_not_modify_input():
    lines = scene(["111\n", "1N1\n", "111\n"])
    before = list(lines)
    build_grid(lines, SKIP)
    assert lines == before


def test_build_grid_last_line_without_newline():
    grid, player = build_grid(scene(["111\n", "1W1\n", "111"]), SKIP)
    assert grid[-1] == "111"
    assert player.direction == "W"


def test_build_grid_without_player():
    grid, player = build_grid(scene(["111\n", "101\n", "111\n"]), SKIP)
    assert player is None
    assert len(grid) == 3


def test_build_grid_two_players():
    with pytest.raises(CubError):
        build_grid(scene(["111\n", "1NS1\n", "111\n"]), SKIP)


def test_build_grid_foreign_character():
    with pytest.raises(CubError):
        build_grid(scene(["111\n", "1X1\n", "111\n"]), SKIP)


def test_build_grid_no_rows():
    with pytest.raises(CubError):
        build_grid(HEADER + ["\n"], SKIP)


def test_build_grid_unskipped_directive():
    with pytest.raises(CubError):
        build_grid(scene(["111\n", "1N1\n", "111\n"]), SKIP[:-1])


def test_build_grid_row_outside_map_block():
    with pytest.raises(CubError):
        build_grid(["111\n", "111\n", "1N1\n", "111\n"], ())


def test_build_grid_short_trailing_row():
    with pytest.raises(CubError):
        build_grid(scene(["111\n", "1N1\n", "111\n", "1\n"]), SKIP)


def test_closed_map_from_build_grid():
    grid, player = build_grid(scene(["1111\n", "1N01\n", "1111\n"]), SKIP)
    assert is_closed(grid, player) is True


@pytest.mark.parametrize(
    "grid",
    [
        ["111", "1N0", "111"],
        ["1 1", "1N1", "111"],
        ["11", "1N01", "1111"],
        ["1N1", "111"],
    ],
)
def test_open_maps(grid):
    row = next(index for index, text in enumerate(grid) if "N" in text)
    player = Player(row, grid[row].index("N"), "N")
    assert is_closed(grid, player) is False


def test_unreachable_gap_is_ignored():
    grid = ["111 ", "1N1 ", "111 "]
    assert is_closed(grid, Player(1, 1, "N")) is True


def test_other_whitespace_stops_fill():
    grid = ["111", "1N\t", "111"]
    assert is_closed(grid, Player(1, 1, "N")) is True


def test_no_player_starts_top_left():
    assert is_closed(["111", "101", "111"], None) is True
    assert is_closed(["0"], None) is False