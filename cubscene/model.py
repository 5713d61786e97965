"""Data types describing a parsed scene description."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Optional

PLAYER_DIRECTIONS = frozenset("NSWE")


class CubError(ValueError):
    """A scene description, or a part of one, was rejected."""


@dataclass(frozen=True)
class Color:
    """An RGB colour with each channel in 0..255."""

    red: int
    green: int
    blue: int

    def __post_init__(self) -> None:
        for name in ("red", "green", "blue"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise CubError(f"{name} channel must be an integer, got {value!r}")
            if not 0 <= value <= 255:
                raise CubError(f"{name} channel out of range 0..255: {value}")

    def __iter__(self) -> Iterator[int]:
        return iter((self.red, self.green, self.blue))


@dataclass(frozen=True)
class Textures:
    """Paths of the wall textures for the four compass directions."""

    north: str
    south: str
    west: str
    east: str


@dataclass(frozen=True)
class Player:
    """Starting position (row and column in the map grid) and facing direction."""

    row: int
    column: int
    direction: str

    def __post_init__(self) -> None:
        if self.row < 0 or self.column < 0:
            raise CubError(f"player position must not be negative: ({self.row}, {self.column})")
        if self.direction not in PLAYER_DIRECTIONS:
            raise CubError(f"invalid player direction: {self.direction!r}")


@dataclass
class Scene:
    """Everything read from a scene file: raw lines and what was parsed from them."""

    name: str
    lines: List[Optional[str]] = field(default_factory=list)
    textures: Optional[Textures] = None
    floor: Optional[Color] = None
    ceiling: Optional[Color] = None
    grid: List[str] = field(default_factory=list)
    player: Optional[Player] = None

    @property
    def line_count(self) -> int:
        """Number of raw lines read from the file."""
        return len(self.lines)

    @property
    def height(self) -> int:
        """Number of rows in the map grid."""
        return len(self.grid)