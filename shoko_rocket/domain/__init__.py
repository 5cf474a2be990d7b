"""Domain layer: fixed-point positions, walkers, tiles, walls and the world."""

from shoko_rocket.domain.arrow_stock import ArrowStock
from shoko_rocket.domain.cell_entry import CellEntry, EntityType
from shoko_rocket.domain.direction import Direction
from shoko_rocket.domain.fixed_point import FixedPoint
from shoko_rocket.domain.input_state import ButtonState, InputState
from shoko_rocket.domain.tile_type import TileType
from shoko_rocket.domain.walker import Walker, WalkerState, WalkerType, WalkResult
from shoko_rocket.domain.walls import canonical_edge, wall_slot
from shoko_rocket.domain.world import World
from shoko_rocket.domain.world_state import WorldState, WorldStateChange

__all__ = [
    "ArrowStock",
    "ButtonState",
    "CellEntry",
    "Direction",
    "EntityType",
    "FixedPoint",
    "InputState",
    "TileType",
    "WalkResult",
    "Walker",
    "WalkerState",
    "WalkerType",
    "World",
    "WorldState",
    "WorldStateChange",
    "canonical_edge",
    "wall_slot",
]
