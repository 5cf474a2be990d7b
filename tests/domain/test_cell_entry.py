from __future__ import annotations

import pytest

from shoko_rocket.domain.cell_entry import CellEntry, EntityType
from shoko_rocket.domain.direction import Direction


def test_pack_bit_layout() -> None:
    mouse_down = CellEntry(entity=EntityType.MOUSE, entity_direction=Direction.DOWN)
    assert mouse_down.pack() == 0b00101000
    hole_with_arrow = CellEntry(entity=EntityType.HOLE, arrow=Direction.RIGHT)
    assert hole_with_arrow.pack() == 0b10000111
    assert CellEntry(arrow=Direction.UP).pack() == 0b00000100


def test_unpack_inverts_pack() -> None:
    entry = CellEntry(entity=EntityType.CAT, entity_direction=Direction.LEFT, arrow=Direction.DOWN)
    assert CellEntry.unpack(entry.pack()) == entry


def test_unpack_without_arrow_bit_has_no_arrow() -> None:
    assert CellEntry.unpack(0b01100011).arrow is None


@pytest.mark.parametrize("code", [5, 6, 7])
def test_unknown_entity_code_rejected(code: int) -> None:
    with pytest.raises(ValueError, match="unknown entity code"):
        CellEntry.unpack(code << 5)
