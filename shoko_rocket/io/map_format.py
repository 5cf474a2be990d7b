"""Packed 199-byte map format.

Layout (offsets in bytes)::

    0    32  map name, raw bytes, NUL padded (not terminated when full)
    32   32  author name
    64   27  wall block, four cells per byte, (top, left) bit pairs
    91  108  entity/arrow block, one byte per cell, row-major

The per-cell byte is described in ``shoko_rocket.domain.cell_entry``. This is
the only persisted format the engine reads and must stay bit-for-bit
compatible with maps produced by the authoring tool.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from shoko_rocket.config.constants import (
    CELL_COUNT,
    MAP_AUTHOR_OFFSET,
    MAP_AUTHOR_SIZE,
    MAP_NAME_OFFSET,
    MAP_NAME_SIZE,
    MAP_SIZE,
    TILE_BLOCK_OFFSET,
    WALL_BLOCK_OFFSET,
    WALL_BLOCK_SIZE,
    WORLD_WIDTH,
)
from shoko_rocket.domain.cell_entry import CellEntry, EntityType
from shoko_rocket.domain.direction import Direction
from shoko_rocket.domain.walls import wall_slot

__all__ = ["CellEntry", "EntityType", "MapData", "decode_map", "encode_map"]


def _empty_cells() -> tuple[CellEntry, ...]:
    return tuple(CellEntry() for _ in range(CELL_COUNT))


@dataclass(frozen=True)
class MapData:
    """Decoded contents of a packed map."""

    name: str
    author: str
    wall_block: bytes = bytes(WALL_BLOCK_SIZE)
    cells: tuple[CellEntry, ...] = field(default_factory=_empty_cells)

    def __post_init__(self) -> None:
        if len(self.wall_block) != WALL_BLOCK_SIZE:
            raise ValueError(f"wall_block must be {WALL_BLOCK_SIZE} bytes")
        if len(self.cells) != CELL_COUNT:
            raise ValueError(f"cells must contain {CELL_COUNT} entries")

    def cell(self, x: int, y: int) -> CellEntry:
        return self.cells[y * WORLD_WIDTH + x]

    def has_wall(self, x: int, y: int, direction: Direction) -> bool:
        index, mask = wall_slot(x, y, direction)
        return self.wall_block[index] & mask == mask

    def iter_cells(self) -> Iterator[tuple[int, int, CellEntry]]:
        """Yield ``(x, y, CellEntry)`` in row-major order."""
        for index, entry in enumerate(self.cells):
            yield index % WORLD_WIDTH, index // WORLD_WIDTH, entry

    def count(self, entity: EntityType) -> int:
        return sum(1 for entry in self.cells if entry.entity is entity)

    def solution_arrows(self) -> list[tuple[int, int, Direction]]:
        return [(x, y, entry.arrow) for x, y, entry in self.iter_cells() if entry.arrow is not None]


def _encode_text(text: str, size: int, label: str) -> bytes:
    raw = text.encode("utf-8")
    if len(raw) > size:
        raise ValueError(f"{label} must be at most {size} bytes")
    return raw.ljust(size, b"\x00")


def decode_text(raw: bytes) -> str:
    """Decode a NUL padded header field."""
    return bytes(raw).rstrip(b"\x00").decode("utf-8", errors="replace")


def encode_map(data: MapData) -> bytes:
    """Pack ``data`` into the 199-byte map format."""
    out = bytearray(MAP_SIZE)
    out[MAP_NAME_OFFSET : MAP_NAME_OFFSET + MAP_NAME_SIZE] = _encode_text(
        data.name, MAP_NAME_SIZE, "name"
    )
    out[MAP_AUTHOR_OFFSET : MAP_AUTHOR_OFFSET + MAP_AUTHOR_SIZE] = _encode_text(
        data.author, MAP_AUTHOR_SIZE, "author"
    )
    out[WALL_BLOCK_OFFSET : WALL_BLOCK_OFFSET + WALL_BLOCK_SIZE] = data.wall_block
    out[TILE_BLOCK_OFFSET:] = bytes(entry.pack() for entry in data.cells)
    return bytes(out)


def decode_map(buffer: bytes) -> MapData:
    """Unpack a 199-byte map. Raises ValueError on a malformed buffer."""
    if len(buffer) != MAP_SIZE:
        raise ValueError(f"map buffer must be {MAP_SIZE} bytes, got {len(buffer)}")
    buffer = bytes(buffer)
    return MapData(
        name=decode_text(buffer[MAP_NAME_OFFSET : MAP_NAME_OFFSET + MAP_NAME_SIZE]),
        author=decode_text(buffer[MAP_AUTHOR_OFFSET : MAP_AUTHOR_OFFSET + MAP_AUTHOR_SIZE]),
        wall_block=buffer[WALL_BLOCK_OFFSET : WALL_BLOCK_OFFSET + WALL_BLOCK_SIZE],
        cells=tuple(CellEntry.unpack(byte) for byte in buffer[TILE_BLOCK_OFFSET:]),
    )
