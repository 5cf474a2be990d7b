"""Tests for the bundled E1M1 level."""

from __future__ import annotations

from shoko_rocket.config.constants import MAP_SIZE
from shoko_rocket.domain.direction import Direction
from shoko_rocket.domain.tile_type import TileType
from shoko_rocket.domain.world import World
from shoko_rocket.levels import E1M1, LEVELS


def test_registry_exposes_e1m1() -> None:
    assert LEVELS["e1m1"] is E1M1
    assert len(E1M1) == MAP_SIZE


def test_world_loads_level() -> None:
    world = World.load(E1M1)
    assert world.name == "Where to go?"
    assert len(world.mice) == 35
    assert world.cats == ()
    assert [x for x in range(12) if world.get_tile(x, 0) is TileType.ROCKET] == [1, 3, 5, 7, 9, 11]
    assert world.arrow_stock[Direction.UP] == 1
    assert world.get_tile(6, 4) is TileType.EMPTY


def test_solution_places_arrow() -> None:
    world = World.load(E1M1)
    world.apply_solution()
    assert world.get_tile(6, 4) is TileType.UP
    assert world.arrow_stock.total == 0
