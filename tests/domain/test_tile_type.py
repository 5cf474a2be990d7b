from __future__ import annotations

import pytest

from shoko_rocket.domain.direction import Direction
from shoko_rocket.domain.tile_type import TileType


class TestDiminish:
    @pytest.mark.parametrize(
        ("full", "half"),
        [
            (TileType.UP, TileType.UP_HALF),
            (TileType.DOWN, TileType.DOWN_HALF),
            (TileType.LEFT, TileType.LEFT_HALF),
            (TileType.RIGHT, TileType.RIGHT_HALF),
        ],
    )
    def test_full_to_half_to_empty(self, full: TileType, half: TileType) -> None:
        assert full.diminish() is half
        assert half.diminish() is TileType.EMPTY

    @pytest.mark.parametrize("tile", [TileType.EMPTY, TileType.ROCKET, TileType.HOLE])
    def test_non_arrows_are_invariant(self, tile: TileType) -> None:
        assert tile.diminish() is tile


class TestArrowDirection:
    def test_half_arrows_keep_direction(self) -> None:
        assert TileType.LEFT_HALF.direction is Direction.LEFT
        assert TileType.DOWN.direction is Direction.DOWN

    def test_non_arrows_have_no_direction(self) -> None:
        for tile in (TileType.EMPTY, TileType.ROCKET, TileType.HOLE):
            assert tile.direction is None
            assert not tile.is_arrow

    def test_arrow_builds_full_arrow(self) -> None:
        for direction in Direction:
            tile = TileType.arrow(direction)
            assert tile.is_arrow
            assert tile.direction is direction
            assert tile.diminish() is not TileType.EMPTY
