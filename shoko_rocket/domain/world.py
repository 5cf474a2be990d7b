"""Grid world: packed wall storage, tile grid, walker registries and the tick.

The world keeps a 199-byte buffer in the packed map layout (see
``shoko_rocket.io.map_format``) for its header, walls and entity bytes, and a
numpy tile grid for rockets, holes and arrows. The outer boundary is always
walled, which closes the toroidal wrap into a bounded arena.

Tick resolution order, per walker reaching a new cell (mice first, then cats,
each in creation order):

1. hole kills / rocket rescues (any kind)
2. arrow turns the walker; a cat walking against the arrow diminishes it
3. walls: keep heading, else turn right, else left, else around

Then the outcome is computed (Lose before Win) and walkers that are no longer
alive are pruned.
"""

from __future__ import annotations

import itertools
import logging

import numpy as np

from shoko_rocket.config.constants import (
    CELL_COUNT,
    MAP_AUTHOR_OFFSET,
    MAP_AUTHOR_SIZE,
    MAP_NAME_SIZE,
    MAP_SIZE,
    MAX_WALKERS,
    TILE_BLOCK_OFFSET,
    WALL_BLOCK_OFFSET,
    WORLD_HEIGHT,
    WORLD_WIDTH,
)
from shoko_rocket.domain.arrow_stock import ArrowStock
from shoko_rocket.domain.cell_entry import (
    ARROW_BITS_MASK,
    ARROW_PRESENT_MASK,
    ENTITY_TYPE_MASK,
    CellEntry,
    EntityType,
)
from shoko_rocket.domain.direction import Direction
from shoko_rocket.domain.tile_type import TileType
from shoko_rocket.domain.walker import Walker, WalkerState, WalkerType, WalkResult
from shoko_rocket.domain.walls import check_cell, wall_slot
from shoko_rocket.domain.world_state import WorldStateChange

logger = logging.getLogger(__name__)

_ENTITY_FOR_WALKER = {
    WalkerType.MOUSE: EntityType.MOUSE,
    WalkerType.CAT: EntityType.CAT,
}
_WALKER_FOR_ENTITY = {entity: kind for kind, entity in _ENTITY_FOR_WALKER.items()}
_TILE_FOR_ENTITY = {
    EntityType.ROCKET: TileType.ROCKET,
    EntityType.HOLE: TileType.HOLE,
}


class World:
    """The 12x9 puzzle grid and everything on it."""

    def __init__(self) -> None:
        self._source: bytes | None = None
        self._clear()

    @classmethod
    def load(cls, buffer: bytes) -> World:
        """Create a world from a packed map buffer."""
        world = cls()
        world._source = bytes(buffer)
        world._populate(world._source)
        return world

    def reset(self) -> None:
        """Restore the initial state of the loaded map (empty grid if none)."""
        self._clear()
        if self._source is not None:
            self._populate(self._source)

    def _clear(self) -> None:
        self._data = bytearray(MAP_SIZE)
        self._tiles = np.zeros(CELL_COUNT, dtype=np.uint8)
        self._mice: list[Walker] = []
        self._cats: list[Walker] = []
        self._departed: tuple[Walker, ...] = ()
        self._next_walker_id = 0
        self.arrow_stock = ArrowStock()
        self._close_border()

    def _close_border(self) -> None:
        # Top and left walls of the outer cells also give the bottom/right walls via wrap
        for x in range(WORLD_WIDTH):
            self.set_wall(x, 0, Direction.UP, True)
        for y in range(WORLD_HEIGHT):
            self.set_wall(0, y, Direction.LEFT, True)

    def _populate(self, buffer: bytes) -> None:
        if len(buffer) != MAP_SIZE:
            raise ValueError(f"map buffer must be {MAP_SIZE} bytes, got {len(buffer)}")
        cells = [CellEntry.unpack(byte) for byte in buffer[TILE_BLOCK_OFFSET:]]
        self._data[:TILE_BLOCK_OFFSET] = buffer[:TILE_BLOCK_OFFSET]
        self._data[TILE_BLOCK_OFFSET:] = bytes(
            byte & ARROW_BITS_MASK for byte in buffer[TILE_BLOCK_OFFSET:]
        )
        self._close_border()

        for index, entry in enumerate(cells):
            x, y = index % WORLD_WIDTH, index // WORLD_WIDTH
            if entry.entity in _WALKER_FOR_ENTITY:
                self.create_walker(x, y, entry.entity_direction, _WALKER_FOR_ENTITY[entry.entity])
            elif entry.entity in _TILE_FOR_ENTITY:
                self.set_tile(x, y, _TILE_FOR_ENTITY[entry.entity])
                self._mark_entity(x, y, CellEntry(entity=entry.entity))

        self.arrow_stock = ArrowStock.from_directions(
            entry.arrow for entry in cells if entry.arrow is not None
        )
        logger.debug(
            "Loaded map %r by %r: %d mice, %d cats, %d arrows in stock",
            self.name,
            self.author,
            len(self._mice),
            len(self._cats),
            self.arrow_stock.total,
        )

    # ------------------------------------------------------------------
    # Header
    # ------------------------------------------------------------------

    @property
    def name(self) -> str:
        return bytes(self._data[:MAP_NAME_SIZE]).rstrip(b"\x00").decode("utf-8", "replace")

    @property
    def author(self) -> str:
        raw = bytes(self._data[MAP_AUTHOR_OFFSET : MAP_AUTHOR_OFFSET + MAP_AUTHOR_SIZE])
        return raw.rstrip(b"\x00").decode("utf-8", "replace")

    def to_bytes(self) -> bytes:
        """Current packed buffer (header, walls, entity bytes)."""
        return bytes(self._data)

    # ------------------------------------------------------------------
    # Walls
    # ------------------------------------------------------------------

    def get_wall(self, x: int, y: int, direction: Direction) -> bool:
        index, mask = wall_slot(x, y, direction)
        return self._data[WALL_BLOCK_OFFSET + index] & mask == mask

    def set_wall(self, x: int, y: int, direction: Direction, present: bool) -> None:
        index, mask = wall_slot(x, y, direction)
        if present:
            self._data[WALL_BLOCK_OFFSET + index] |= mask
        else:
            self._data[WALL_BLOCK_OFFSET + index] &= ~mask & 0xFF

    # ------------------------------------------------------------------
    # Tiles and arrows
    # ------------------------------------------------------------------

    def get_tile(self, x: int, y: int) -> TileType:
        check_cell(x, y)
        return TileType(int(self._tiles[y * WORLD_WIDTH + x]))

    def set_tile(self, x: int, y: int, tile_type: TileType) -> None:
        """Set a tile without any checks. Use ``place_arrow`` for player moves."""
        check_cell(x, y)
        self._tiles[y * WORLD_WIDTH + x] = int(tile_type)

    def get_arrow(self, x: int, y: int) -> TileType:
        return self.get_tile(x, y)

    def set_arrow(self, x: int, y: int, tile_type: TileType) -> None:
        if tile_type is not TileType.EMPTY and not tile_type.is_arrow:
            raise ValueError(f"{tile_type.name} is not an arrow")
        self.set_tile(x, y, tile_type)

    def place_arrow(self, x: int, y: int, direction: Direction) -> bool:
        """Place a full arrow from the stock.

        Rejected on rocket/hole cells or when no arrow of that direction is
        left. An arrow already on the cell goes back to the stock.
        """
        current = self.get_tile(x, y)
        if current in (TileType.ROCKET, TileType.HOLE):
            return False
        if not self.arrow_stock.take(direction):
            return False
        if current.direction is not None:
            self.arrow_stock.give(current.direction)
        self.set_tile(x, y, TileType.arrow(direction))
        return True

    def remove_arrow(self, x: int, y: int) -> bool:
        """Pick up an arrow and return it to the stock."""
        current = self.get_tile(x, y)
        if current.direction is None:
            return False
        self.arrow_stock.give(current.direction)
        self.set_tile(x, y, TileType.EMPTY)
        return True

    def apply_solution(self) -> None:
        """Lay down the map's solution arrows. The stock is used up."""
        for index, byte in enumerate(self._data[TILE_BLOCK_OFFSET:]):
            if byte & ARROW_PRESENT_MASK:
                direction = Direction.from_code(byte)
                self.set_tile(index % WORLD_WIDTH, index // WORLD_WIDTH, TileType.arrow(direction))
        self.arrow_stock = ArrowStock()

    def tile_grid(self) -> np.ndarray:
        """Copy of the tile codes as a ``(WORLD_HEIGHT, WORLD_WIDTH)`` array."""
        return self._tiles.reshape(WORLD_HEIGHT, WORLD_WIDTH).copy()

    # ------------------------------------------------------------------
    # Walkers
    # ------------------------------------------------------------------

    @property
    def mice(self) -> tuple[Walker, ...]:
        return tuple(self._mice)

    @property
    def cats(self) -> tuple[Walker, ...]:
        return tuple(self._cats)

    @property
    def departed(self) -> tuple[Walker, ...]:
        """Walkers that died or were rescued during the last tick."""
        return self._departed

    def _mark_entity(self, x: int, y: int, entry: CellEntry) -> None:
        index = TILE_BLOCK_OFFSET + y * WORLD_WIDTH + x
        arrow_bits = self._data[index] & ARROW_BITS_MASK
        self._data[index] = arrow_bits | entry.pack()

    def create_walker(
        self, x: int, y: int, direction: Direction, walker_type: WalkerType
    ) -> bool:
        """Add a walker at a cell. Returns False if the cell already holds an entity.

        Walls are only checked when a walker enters a new cell, so a walker
        created facing a wall walks through it. At the outer border that takes
        it off the grid and the next ``tick`` raises ValueError.
        """
        check_cell(x, y)
        if self._data[TILE_BLOCK_OFFSET + y * WORLD_WIDTH + x] & ENTITY_TYPE_MASK:
            logger.debug("Rejected %s at occupied cell (%d, %d)", walker_type.value, x, y)
            return False

        registry = self._mice if walker_type is WalkerType.MOUSE else self._cats
        if len(registry) >= MAX_WALKERS:
            raise RuntimeError(f"{walker_type.value} registry is full ({MAX_WALKERS})")
        registry.append(Walker(x, y, direction, walker_type, walker_id=self._next_walker_id))
        self._next_walker_id += 1
        self._mark_entity(
            x, y, CellEntry(entity=_ENTITY_FOR_WALKER[walker_type], entity_direction=direction)
        )
        return True

    # ------------------------------------------------------------------
    # Simulation
    # ------------------------------------------------------------------

    def tick(self) -> WorldStateChange:
        """Advance the world by one frame and report the outcome."""
        for walker in itertools.chain(self._mice, self._cats):
            if walker.walk() is WalkResult.NEW_SQUARE:
                self._check_rockets_and_holes(walker)
                self._check_arrows(walker)
                # Runs even for walkers that just left play; they are pruned below
                self.check_walls(walker)

        change = self._outcome()

        self._departed = tuple(
            walker for walker in itertools.chain(self._mice, self._cats) if not walker.is_alive
        )
        self._mice = [walker for walker in self._mice if walker.is_alive]
        self._cats = [walker for walker in self._cats if walker.is_alive]

        if change is not WorldStateChange.NO_CHANGE:
            logger.info("World %r: %s", self.name, change.value)
        return change

    def _outcome(self) -> WorldStateChange:
        if any(m.get_state() is WalkerState.DEAD for m in self._mice) or any(
            c.get_state() is WalkerState.RESCUED for c in self._cats
        ):
            return WorldStateChange.LOSE
        if self._mice and all(m.get_state() is WalkerState.RESCUED for m in self._mice):
            return WorldStateChange.WIN
        return WorldStateChange.NO_CHANGE

    def _check_rockets_and_holes(self, walker: Walker) -> None:
        tile = self.get_tile(*walker.cell)
        if tile is TileType.HOLE:
            walker.kill()
        elif tile is TileType.ROCKET:
            walker.rescue()

    def _check_arrows(self, walker: Walker) -> None:
        x, y = walker.cell
        arrow = self.get_tile(x, y)
        direction = arrow.direction
        if direction is None:
            return
        if (
            walker.get_type() is WalkerType.CAT
            and walker.get_direction().turn_around() is direction
        ):
            self.set_tile(x, y, arrow.diminish())
        walker.set_direction(direction)

    def check_walls(self, walker: Walker) -> None:
        """Turn ``walker`` away from walls: ahead, else right, else left, else around."""
        x, y = walker.cell
        direction = walker.get_direction()
        candidates = (
            direction,
            direction.turn_right(),
            direction.turn_left(),
            direction.turn_around(),
        )
        for candidate in candidates:
            if not self.get_wall(x, y, candidate):
                walker.set_direction(candidate)
                return
