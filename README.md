# cubscene

`cubscene` reads and validates `.cub` scene files: the small text format used
to describe a ray-casting game level. A scene file names four wall textures,
a floor and a ceiling colour, and holds a map grid drawn with `1` (wall),
`0` (floor) and a player start letter (`N`, `S`, `E` or `W`).

```
NO ./textures/north.xpm
SO ./textures/south.xpm
WE ./textures/west.xpm
EA ./textures/east.xpm

F 220,100,0
C 225,30,0

111111
100001
10N001
111111
```

A file is accepted when:

- its name ends in `.cub` (a name no longer than `.cub` itself also draws a
  warning);
- the file can be opened and holds at least one line;
- each texture directive (`NO`, `SO`, `WE`, `EA`) gives a path to a file that
  can be opened;
- `F` and `C` each hold exactly three comma-separated values from 0 to 255
  (whitespace between them is ignored);
- every other non-blank line is a map row made only of `0`, `1`, whitespace
  and player letters, with at most one player letter in the whole map;
- the floor reachable from the player start (or from the top-left cell when
  there is no player letter) is closed in: the fill never reaches a space or
  the edge of the grid.

Directives are looked up by key: the first line that contains the key
anywhere is used, and the non-whitespace characters after the key form its
value. Their order in the file does not matter.

## Installing

```
pip install .
```

Python 3.10 or later is needed; there are no other dependencies.

## Command line

```
cubscene path/to/level.cub
```

Each stage that passes is reported on standard output in green; the reason
for a rejection and `Parsing failed, exiting!` go to standard error in red.
The exit status is 0 when the scene is accepted and 1 otherwise, including
when not exactly one argument is given.

## Library use

```python
from cubscene.parser import parse_scene
from cubscene.model import CubError

try:
    scene = parse_scene("maps/level.cub")
except CubError as exc:
    print("rejected:", exc)
else:
    print(scene.textures, scene.floor, scene.ceiling, scene.player)
```

`parse_scene` prints its progress messages as it goes and returns a `Scene`
with:

- `name`, `lines` (the raw lines, newlines kept) and `line_count`;
- `textures`: a `Textures` with `north`, `south`, `west`, `east`;
- `floor` and `ceiling`: `Color` values with `red`, `green`, `blue`
  (iterable as a triple);
- `grid` (the map rows without newlines) and `height`;
- `player`: a `Player` with `row`, `column` and `direction`, or `None` when
  the map has no start letter.

It raises `CubError` (a `ValueError`) naming the stage that failed; the
underlying reason is available as the exception's `__cause__`.

The building blocks can be used on their own:

- `cubscene.loader`: `validate_name`, `read_lines`;
- `cubscene.elements`: `extract_textures`, `parse_color`, `extract_colors`;
- `cubscene.mapgrid`: `build_grid`, `is_closed`;
- `cubscene.scan`: `find_directive`, `is_map_line`, `count_map_rows`,
  `count_lines`, `is_player`, `path_exists`;
- `cubscene.lines`: `LineReader` and `iter_lines`, reading a text or binary
  stream one line at a time.

The package also carries small general helpers: `cubscene.chars` (ASCII
classification and case conversion), `cubscene.strings` and `cubscene.text`
(C-style string search, comparison, copying, splitting and trimming),
`cubscene.numbers` (decimal and hexadecimal conversions), `cubscene.memory`
(bytearray fill, copy, search and compare) and `cubscene.output` (writing to
streams, the coloured `error`/`success` messages and a small `printf`).

## What it does not do

`cubscene` only checks scene files. It does not load the texture images,
check their format, or render or run a level.

## Running the tests

```
pip install ".[test]"
pytest
```