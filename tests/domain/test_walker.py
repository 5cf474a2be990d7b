"""Tests for shoko_rocket.domain.walker."""

from __future__ import annotations

import pytest

from shoko_rocket.domain.direction import Direction
from shoko_rocket.domain.walker import Walker, WalkerState, WalkerType, WalkResult


def _new_square_ticks(walker: Walker, ticks: int) -> list[int]:
    return [tick for tick in range(1, ticks + 1) if walker.walk() is WalkResult.NEW_SQUARE]


class TestWalk:
    def test_mouse_reaches_new_square_every_60_ticks(self) -> None:
        mouse = Walker(0, 4, Direction.RIGHT, WalkerType.MOUSE)
        assert _new_square_ticks(mouse, 180) == [60, 120, 180]
        assert mouse.cell == (3, 4)

    def test_cat_reaches_new_square_every_90_ticks(self) -> None:
        cat = Walker(0, 4, Direction.RIGHT, WalkerType.CAT)
        assert _new_square_ticks(cat, 180) == [90, 180]
        assert cat.cell == (2, 4)

    @pytest.mark.parametrize(
        ("direction", "expected"),
        [
            (Direction.UP, (5, 3)),
            (Direction.DOWN, (5, 5)),
            (Direction.LEFT, (4, 4)),
            (Direction.RIGHT, (6, 4)),
        ],
    )
    def test_moves_one_cell_in_heading(
        self, direction: Direction, expected: tuple[int, int]
    ) -> None:
        mouse = Walker(5, 4, direction, WalkerType.MOUSE)
        for _ in range(60):
            mouse.walk()
        assert mouse.cell == expected

    def test_cell_unchanged_before_boundary(self) -> None:
        mouse = Walker(5, 4, Direction.UP, WalkerType.MOUSE)
        for _ in range(59):
            assert mouse.walk() is WalkResult.NONE
        assert mouse.cell == (5, 4)


class TestState:
    def test_new_walker_is_alive(self) -> None:
        walker = Walker(0, 0, Direction.UP, WalkerType.CAT)
        assert walker.get_state() is WalkerState.ALIVE
        assert walker.get_type() is WalkerType.CAT
        assert walker.is_alive

    def test_kill_and_rescue(self) -> None:
        dead = Walker(0, 0, Direction.UP, WalkerType.MOUSE)
        dead.kill()
        rescued = Walker(0, 0, Direction.UP, WalkerType.MOUSE)
        rescued.rescue()
        assert dead.get_state() is WalkerState.DEAD
        assert rescued.get_state() is WalkerState.RESCUED

    def test_second_kill_raises(self) -> None:
        walker = Walker(0, 0, Direction.UP, WalkerType.MOUSE)
        walker.kill()
        with pytest.raises(RuntimeError):
            walker.kill()

    def test_rescue_after_kill_raises(self) -> None:
        walker = Walker(0, 0, Direction.UP, WalkerType.CAT)
        walker.kill()
        with pytest.raises(RuntimeError):
            walker.rescue()

    def test_set_direction(self) -> None:
        walker = Walker(0, 0, Direction.UP, WalkerType.CAT)
        walker.set_direction(Direction.LEFT)
        assert walker.get_direction() is Direction.LEFT
