"""Tile classification for the arrow/rocket/hole grid.

Only full arrows diminish to their half counterpart; half arrows diminish
to Empty. Empty, Rocket and Hole are fixed points of ``diminish``.
"""

from __future__ import annotations

from enum import IntEnum

from shoko_rocket.domain.direction import Direction


class TileType(IntEnum):
    """Contents of one grid cell. Integer values are the numpy grid codes."""

    EMPTY = 0
    ROCKET = 1
    HOLE = 2
    UP = 3
    UP_HALF = 4
    DOWN = 5
    DOWN_HALF = 6
    LEFT = 7
    LEFT_HALF = 8
    RIGHT = 9
    RIGHT_HALF = 10

    @classmethod
    def arrow(cls, direction: Direction) -> TileType:
        """Full arrow pointing in ``direction``."""
        return _FULL_ARROWS[direction]

    @property
    def direction(self) -> Direction | None:
        """Arrow direction, or None for Empty/Rocket/Hole."""
        return _ARROW_DIRECTIONS.get(self)

    @property
    def is_arrow(self) -> bool:
        return self in _ARROW_DIRECTIONS

    def diminish(self) -> TileType:
        if self in _HALF_OF:
            return _HALF_OF[self]
        if self.is_arrow:
            return TileType.EMPTY
        return self


_FULL_ARROWS = {
    Direction.UP: TileType.UP,
    Direction.DOWN: TileType.DOWN,
    Direction.LEFT: TileType.LEFT,
    Direction.RIGHT: TileType.RIGHT,
}
_HALF_OF = {
    TileType.UP: TileType.UP_HALF,
    TileType.DOWN: TileType.DOWN_HALF,
    TileType.LEFT: TileType.LEFT_HALF,
    TileType.RIGHT: TileType.RIGHT_HALF,
}
_ARROW_DIRECTIONS = {
    TileType.UP: Direction.UP,
    TileType.UP_HALF: Direction.UP,
    TileType.DOWN: Direction.DOWN,
    TileType.DOWN_HALF: Direction.DOWN,
    TileType.LEFT: Direction.LEFT,
    TileType.LEFT_HALF: Direction.LEFT,
    TileType.RIGHT: Direction.RIGHT,
    TileType.RIGHT_HALF: Direction.RIGHT,
}
