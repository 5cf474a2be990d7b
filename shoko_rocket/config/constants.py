"""Centralized domain constants for the simulation engine.

All magic numbers that appear across multiple modules are defined here.
Consuming modules should import from this module rather than defining
their own inline literals.
"""

from __future__ import annotations

WORLD_WIDTH = 12
"""Grid width in cells."""

WORLD_HEIGHT = 9
"""Grid height in cells."""

CELL_COUNT = WORLD_WIDTH * WORLD_HEIGHT
"""Number of cells in the grid."""

MAX_WALKERS = CELL_COUNT
"""Capacity of each walker registry (one walker per cell at most)."""

FRACTIONAL_SCALE = 360
"""Fixed-point fractional units per whole grid unit."""

MOUSE_SPEED = 6
"""Mouse advance per tick, in fractional units (60 ticks per cell)."""

CAT_SPEED = 4
"""Cat advance per tick, in fractional units (90 ticks per cell)."""

TICK_RATE_HZ = 60
"""Fixed simulation rate in frames per second."""

TRANSITION_FRAMES = 45
"""Grace frames between a state transition request and the switch."""

INTRO_TIMEOUT_FRAMES = 120
"""Frames after which the intro moves on to the menu without input."""

DEFAULT_MAP_COUNT = 10
"""Number of selectable maps in the menu."""

# ---------------------------------------------------------------------------
# Packed map layout
# ---------------------------------------------------------------------------

MAP_NAME_OFFSET = 0
MAP_NAME_SIZE = 32
"""Map name field width in bytes (not null-terminated when full)."""

MAP_AUTHOR_OFFSET = MAP_NAME_OFFSET + MAP_NAME_SIZE
MAP_AUTHOR_SIZE = 32
"""Author field width in bytes."""

HEADER_SIZE = MAP_NAME_SIZE + MAP_AUTHOR_SIZE
"""Opaque name/author header preceding the wall block."""

WALL_BLOCK_OFFSET = HEADER_SIZE
WALL_BLOCK_SIZE = CELL_COUNT // 4
"""Wall block size: two wall bits per cell, four cells per byte."""

TILE_BLOCK_OFFSET = WALL_BLOCK_OFFSET + WALL_BLOCK_SIZE
TILE_BLOCK_SIZE = CELL_COUNT
"""Entity/arrow block size: one byte per cell."""

MAP_SIZE = TILE_BLOCK_OFFSET + TILE_BLOCK_SIZE
"""Total packed map size in bytes (199)."""

# ---------------------------------------------------------------------------
# Headless runner
# ---------------------------------------------------------------------------

DEFAULT_MAX_TICKS = 60 * TICK_RATE_HZ
"""Default tick cap for a headless level run (one minute of play)."""

SNAPSHOT_INTERVAL = 60
"""Sample walker positions every K ticks for the tick log."""

FLUSH_THRESHOLD = 8_192
"""Flush tick log rows to Parquet once this in-memory row count is reached."""
