"""Wall edge addressing on the toroidal grid.

Each cell physically stores only its Up and Left edge. A Down wall at
``(x, y)`` is the Up wall of ``(x, (y + 1) % H)`` and a Right wall at
``(x, y)`` is the Left wall of ``((x + 1) % W, y)``, so all four query
directions for a shared edge resolve to the same bit. Four cells are packed
per byte of the wall block: bit ``2*(x % 4)`` is the top wall and bit
``2*(x % 4) + 1`` the left wall.
"""

from __future__ import annotations

from shoko_rocket.config.constants import WORLD_HEIGHT, WORLD_WIDTH
from shoko_rocket.domain.direction import Direction

TOP_WALL_MASK = (0b00000001, 0b00000100, 0b00010000, 0b01000000)
"""Top-wall bit for cells in column ``x % 4``."""

LEFT_WALL_MASK = (0b00000010, 0b00001000, 0b00100000, 0b10000000)
"""Left-wall bit for cells in column ``x % 4``."""


def check_cell(x: int, y: int) -> None:
    """Raise ValueError unless ``(x, y)`` lies on the grid."""
    if not (0 <= x < WORLD_WIDTH and 0 <= y < WORLD_HEIGHT):
        raise ValueError(
            f"cell ({x}, {y}) outside {WORLD_WIDTH}x{WORLD_HEIGHT} grid"
        )


def canonical_edge(x: int, y: int, direction: Direction) -> tuple[int, int, Direction]:
    """Return the owning cell and stored edge (UP or LEFT) for a wall query."""
    check_cell(x, y)
    if direction is Direction.DOWN:
        return x, (y + 1) % WORLD_HEIGHT, Direction.UP
    if direction is Direction.RIGHT:
        return (x + 1) % WORLD_WIDTH, y, Direction.LEFT
    return x, y, direction


def wall_slot(x: int, y: int, direction: Direction) -> tuple[int, int]:
    """Return ``(byte_index, mask)`` of a wall within the packed wall block."""
    cx, cy, edge = canonical_edge(x, y, direction)
    masks = TOP_WALL_MASK if edge is Direction.UP else LEFT_WALL_MASK
    return (cy * WORLD_WIDTH + cx) // 4, masks[cx & 0x03]
