import pytest

from shoko_rocket.config.constants import (
    CAT_SPEED,
    CELL_COUNT,
    FLUSH_THRESHOLD,
    FRACTIONAL_SCALE,
    HEADER_SIZE,
    MAP_SIZE,
    MAX_WALKERS,
    MOUSE_SPEED,
    TILE_BLOCK_OFFSET,
    WALL_BLOCK_OFFSET,
    WALL_BLOCK_SIZE,
    WORLD_HEIGHT,
    WORLD_WIDTH,
)
from shoko_rocket.config.types import LevelResult, RunConfig


def test_grid_is_twelve_by_nine() -> None:
    assert (WORLD_WIDTH, WORLD_HEIGHT) == (12, 9)
    assert CELL_COUNT == 108
    assert MAX_WALKERS == CELL_COUNT


def test_speeds_divide_fractional_scale() -> None:
    assert FRACTIONAL_SCALE % MOUSE_SPEED == 0
    assert FRACTIONAL_SCALE % CAT_SPEED == 0
    assert FRACTIONAL_SCALE // MOUSE_SPEED == 60
    assert FRACTIONAL_SCALE // CAT_SPEED == 90


def test_packed_map_layout_offsets() -> None:
    assert HEADER_SIZE == 64
    assert WALL_BLOCK_OFFSET == 64
    assert WALL_BLOCK_SIZE == 27
    assert TILE_BLOCK_OFFSET == 91
    assert MAP_SIZE == 199


def test_flush_threshold_is_large() -> None:
    assert isinstance(FLUSH_THRESHOLD, int) and FLUSH_THRESHOLD >= 1024


class TestRunConfig:
    def test_defaults_are_valid(self) -> None:
        config = RunConfig()
        assert config.max_ticks > 0
        assert config.snapshot_interval > 0
        assert config.apply_solution is True

    def test_rejects_non_positive_max_ticks(self) -> None:
        with pytest.raises(ValueError, match="max_ticks"):
            RunConfig(max_ticks=0)

    def test_rejects_non_positive_snapshot_interval(self) -> None:
        with pytest.raises(ValueError, match="snapshot_interval"):
            RunConfig(snapshot_interval=0)


def test_level_result_solved_only_on_success() -> None:
    won = LevelResult("a", "b", "success", 120, 0, 0)
    lost = LevelResult("a", "b", "defeat", 60, 1, 0)
    assert won.solved
    assert not lost.solved
