"""Configuration layer: constants and typed config dataclasses."""

from shoko_rocket.config.constants import (
    CAT_SPEED,
    CELL_COUNT,
    DEFAULT_MAP_COUNT,
    DEFAULT_MAX_TICKS,
    FLUSH_THRESHOLD,
    FRACTIONAL_SCALE,
    INTRO_TIMEOUT_FRAMES,
    MAP_SIZE,
    MAX_WALKERS,
    MOUSE_SPEED,
    SNAPSHOT_INTERVAL,
    TICK_RATE_HZ,
    TRANSITION_FRAMES,
    WORLD_HEIGHT,
    WORLD_WIDTH,
)
from shoko_rocket.config.types import LevelResult, RunConfig

__all__ = [
    "CAT_SPEED",
    "CELL_COUNT",
    "DEFAULT_MAP_COUNT",
    "DEFAULT_MAX_TICKS",
    "FLUSH_THRESHOLD",
    "FRACTIONAL_SCALE",
    "INTRO_TIMEOUT_FRAMES",
    "LevelResult",
    "MAP_SIZE",
    "MAX_WALKERS",
    "MOUSE_SPEED",
    "RunConfig",
    "SNAPSHOT_INTERVAL",
    "TICK_RATE_HZ",
    "TRANSITION_FRAMES",
    "WORLD_HEIGHT",
    "WORLD_WIDTH",
]
