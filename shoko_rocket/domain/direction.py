"""The four ordinal directions and their rotations."""

from __future__ import annotations

from enum import Enum


class Direction(Enum):
    """Heading of a walker or arrow. Values are the packed two-bit codes."""

    UP = 0
    DOWN = 1
    LEFT = 2
    RIGHT = 3

    @property
    def code(self) -> int:
        return self.value

    @classmethod
    def from_code(cls, code: int) -> Direction:
        return cls(code & 0x03)

    def turn_right(self) -> Direction:
        return _TURN_RIGHT[self]

    def turn_left(self) -> Direction:
        return _TURN_LEFT[self]

    def turn_around(self) -> Direction:
        return _TURN_AROUND[self]


_TURN_RIGHT = {
    Direction.UP: Direction.RIGHT,
    Direction.RIGHT: Direction.DOWN,
    Direction.DOWN: Direction.LEFT,
    Direction.LEFT: Direction.UP,
}
_TURN_LEFT = {after: before for before, after in _TURN_RIGHT.items()}
_TURN_AROUND = {d: _TURN_RIGHT[_TURN_RIGHT[d]] for d in Direction}
