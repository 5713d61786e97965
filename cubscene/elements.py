"""Extracting the texture and colour directives of a scene file."""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from .chars import is_digit, is_space
from .model import Color, CubError, Textures
from .scan import find_directive, path_exists

_TEXTURE_KEYS = (
    ("NO", "north"),
    ("SO", "south"),
    ("WE", "west"),
    ("EA", "east"),
)


def extract_textures(lines: Sequence[Optional[str]]) -> Tuple[Textures, Tuple[int, ...]]:
    """Read the NO, SO, WE and EA directives.

    Returns the texture paths and the indices of the lines they came from,
    in the order north, south, west, east. CubError is raised when a
    directive is missing, gives an empty path, or names a file that cannot
    be opened.
    """
    paths = {}
    rows: List[int] = []
    for key, attribute in _TEXTURE_KEYS:
        hit = find_directive(lines, key)
        if hit is None or not hit[1]:
            raise CubError(f"no texture path given for {key}")
        index, path = hit
        if not path_exists(path):
            raise CubError(f"texture file for {key} cannot be opened: {path}")
        paths[attribute] = path
        rows.append(index)
    return Textures(**paths), tuple(rows)


def parse_color(token: str) -> Color:
    """Parse ``R,G,B`` with each channel a decimal number in 0..255.

    Whitespace is ignored. Exactly two commas and three non-empty channels
    are required; anything else raises CubError.
    """
    channels: List[Optional[int]] = [None, None, None]
    commas = 0
    slot = 0
    for ch in token.split("\0", 1)[0]:
        if is_space(ch):
            continue
        if ch == ",":
            commas += 1
            slot += 1
            if commas > 2:
                raise CubError(f"too many channels in colour {token!r}")
        elif is_digit(ch):
            value = (channels[slot] or 0) * 10 + int(ch)
            if value > 255:
                raise CubError(f"colour channel above 255 in {token!r}")
            channels[slot] = value
        else:
            raise CubError(f"unexpected character {ch!r} in colour {token!r}")
    if commas != 2 or None in channels:
        raise CubError(f"colour needs three channels: {token!r}")
    red, green, blue = channels
    return Color(red, green, blue)  # type: ignore[arg-type]


def _read_color(lines: Sequence[Optional[str]], key: str) -> Tuple[Color, int]:
    hit = find_directive(lines, key)
    if hit is None or not hit[1]:
        raise CubError(f"no colour given for {key}")
    index, token = hit
    return parse_color(token), index


def extract_colors(
    lines: Sequence[Optional[str]],
) -> Tuple[Color, Color, Tuple[int, int]]:
    """Read the F (floor) and C (ceiling) colours.

    Returns the floor colour, the ceiling colour and the indices of the lines
    they came from. CubError is raised for a missing or malformed colour.
    """
    floor, floor_row = _read_color(lines, "F")
    ceiling, ceiling_row = _read_color(lines, "C")
    return floor, ceiling, (floor_row, ceiling_row)