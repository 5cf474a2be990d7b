"""Entity/arrow byte stored for each cell of a packed map.

Bit layout::

    bits 7-5  entity: 000 empty, 001 mouse, 010 cat, 011 rocket, 100 hole
    bits 4-3  entity direction: 00 up, 01 down, 10 left, 11 right
    bit  2    solution arrow present
    bits 1-0  arrow direction (same encoding)
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from shoko_rocket.domain.direction import Direction

ENTITY_TYPE_MASK = 0b11100000
ENTITY_DIRECTION_MASK = 0b00011000
ARROW_PRESENT_MASK = 0b00000100
ARROW_DIRECTION_MASK = 0b00000011
ARROW_BITS_MASK = ARROW_PRESENT_MASK | ARROW_DIRECTION_MASK

ENTITY_TYPE_SHIFT = 5
ENTITY_DIRECTION_SHIFT = 3


class EntityType(Enum):
    """Entity stored in the top three bits of a cell byte."""

    EMPTY = 0
    MOUSE = 1
    CAT = 2
    ROCKET = 3
    HOLE = 4


@dataclass(frozen=True)
class CellEntry:
    """Decoded entity/arrow byte for one cell."""

    entity: EntityType = EntityType.EMPTY
    entity_direction: Direction = Direction.UP
    arrow: Direction | None = None

    def pack(self) -> int:
        byte = self.entity.value << ENTITY_TYPE_SHIFT
        byte |= self.entity_direction.code << ENTITY_DIRECTION_SHIFT
        if self.arrow is not None:
            byte |= ARROW_PRESENT_MASK | self.arrow.code
        return byte

    @classmethod
    def unpack(cls, byte: int) -> CellEntry:
        entity_code = (byte & ENTITY_TYPE_MASK) >> ENTITY_TYPE_SHIFT
        try:
            entity = EntityType(entity_code)
        except ValueError as exc:
            raise ValueError(f"unknown entity code {entity_code} in byte {byte:#04x}") from exc
        entity_direction = (byte & ENTITY_DIRECTION_MASK) >> ENTITY_DIRECTION_SHIFT
        arrow = Direction.from_code(byte) if byte & ARROW_PRESENT_MASK else None
        return cls(
            entity=entity,
            entity_direction=Direction.from_code(entity_direction),
            arrow=arrow,
        )
