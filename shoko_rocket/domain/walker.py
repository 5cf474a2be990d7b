"""A single mouse or cat moving across the grid."""

from __future__ import annotations

from enum import Enum

from shoko_rocket.config.constants import CAT_SPEED, MOUSE_SPEED
from shoko_rocket.domain.direction import Direction
from shoko_rocket.domain.fixed_point import FixedPoint


class WalkerType(Enum):
    """Kind of walker. Determines speed and how arrows and rockets treat it."""

    MOUSE = "mouse"
    CAT = "cat"


class WalkerState(Enum):
    """Life state of a walker."""

    ALIVE = "alive"
    DEAD = "dead"
    RESCUED = "rescued"


class WalkResult(Enum):
    """Outcome of one ``walk`` step."""

    NONE = "none"
    NEW_SQUARE = "new_square"


_SPEEDS = {
    WalkerType.MOUSE: FixedPoint(0, MOUSE_SPEED),
    WalkerType.CAT: FixedPoint(0, CAT_SPEED),
}


class Walker:
    """A mouse or cat with a fixed-point position and a heading.

    Position only changes in ``walk``; direction and state only change when
    the walker has just reached a new cell.
    """

    def __init__(
        self,
        x: int,
        y: int,
        direction: Direction,
        walker_type: WalkerType,
        walker_id: int = 0,
    ) -> None:
        self.walker_id = walker_id
        self._x = FixedPoint(x, 0)
        self._y = FixedPoint(y, 0)
        self._direction = direction
        self._walker_type = walker_type
        self._state = WalkerState.ALIVE

    def __repr__(self) -> str:
        return (
            f"Walker(id={self.walker_id}, {self._walker_type.value}, "
            f"cell={self.cell}, {self._direction.name}, {self._state.value})"
        )

    @property
    def x(self) -> FixedPoint:
        return self._x

    @property
    def y(self) -> FixedPoint:
        return self._y

    @property
    def cell(self) -> tuple[int, int]:
        """Integer grid cell currently occupied."""
        return self._x.integer_part(), self._y.integer_part()

    def walk(self) -> WalkResult:
        """Advance one tick and report whether a new cell was reached."""
        speed = _SPEEDS[self._walker_type]
        direction = self._direction
        if direction in (Direction.UP, Direction.DOWN):
            start = self._y
            self._y = start - speed if direction is Direction.UP else start + speed
            crossed = self._y.did_overflow(start)
        else:
            start = self._x
            self._x = start - speed if direction is Direction.LEFT else start + speed
            crossed = self._x.did_overflow(start)
        return WalkResult.NEW_SQUARE if crossed else WalkResult.NONE

    def get_type(self) -> WalkerType:
        return self._walker_type

    def get_direction(self) -> Direction:
        return self._direction

    def set_direction(self, direction: Direction) -> None:
        self._direction = direction

    def get_state(self) -> WalkerState:
        return self._state

    @property
    def is_alive(self) -> bool:
        return self._state is WalkerState.ALIVE

    def kill(self) -> None:
        self._leave_alive(WalkerState.DEAD)

    def rescue(self) -> None:
        self._leave_alive(WalkerState.RESCUED)

    def _leave_alive(self, new_state: WalkerState) -> None:
        if self._state is not WalkerState.ALIVE:
            raise RuntimeError(
                f"cannot mark {self!r} {new_state.value}: walker already left play"
            )
        self._state = new_state
