"""Build packed maps from box-drawing ASCII art.

A puzzle is 19 rows of 61 characters. Even rows carry the top walls of a
grid row, odd rows carry the left walls and the cell contents; the last row
only closes the drawing. Each cell is five characters wide: a wall column
followed by a walker slot (two characters) and an arrow slot (two
characters)::

    ┌────┬────┐...
    │M>  A^   │...

Walker slot: ``M`` or ``C`` plus one of ``<>^v``, or ``R``/``H`` plus a
blank. Arrow slot: ``A`` plus one of ``<>^v``. Only the top and left walls
of a cell are read; right and bottom walls come from the neighbouring cells
through the wraparound, so the outer frame has to agree on both sides.
"""

from __future__ import annotations

from collections.abc import Sequence

from shoko_rocket.config.constants import (
    MAP_AUTHOR_SIZE,
    MAP_NAME_SIZE,
    WALL_BLOCK_SIZE,
    WORLD_HEIGHT,
    WORLD_WIDTH,
)
from shoko_rocket.domain.cell_entry import CellEntry, EntityType
from shoko_rocket.domain.direction import Direction
from shoko_rocket.domain.walls import wall_slot
from shoko_rocket.io.map_format import MapData, encode_map

PUZZLE_ROWS = 2 * WORLD_HEIGHT + 1
PUZZLE_COLUMNS = 5 * WORLD_WIDTH + 1

TOP_WALL_GLYPH = "─"
LEFT_WALL_GLYPH = "│"

_DIRECTION_GLYPHS = {
    "^": Direction.UP,
    "v": Direction.DOWN,
    "<": Direction.LEFT,
    ">": Direction.RIGHT,
}
_WALKER_GLYPHS = {"M": EntityType.MOUSE, "C": EntityType.CAT}
_FIXTURE_GLYPHS = {"R": EntityType.ROCKET, "H": EntityType.HOLE}


class MapFormatError(ValueError):
    """Raised when an ASCII puzzle cannot be turned into a packed map."""


def _char(row: str, index: int) -> str | None:
    return row[index] if index < len(row) else None


def _check_text(value: str, max_size: int) -> None:
    raw = value.encode("utf-8")
    if not raw:
        raise MapFormatError("String cannot be empty")
    if len(raw) > max_size:
        raise MapFormatError("String is too long")


def _check_top_bottom_consistency(top: str, bottom: str) -> None:
    for col in range(WORLD_WIDTH):
        if _char(top, col * 5 + 1) != _char(bottom, col * 5 + 1):
            raise MapFormatError("Top and bottom walls must be consistent")


def _check_cell_consistency(even_rows: Sequence[str]) -> None:
    for row in even_rows:
        for col in range(WORLD_WIDTH):
            first = _char(row, col * 5 + 1)
            for offset in range(1, 5):
                if _char(row, col * 5 + offset) != first:
                    raise MapFormatError("All top walls within a cell must be the same")


def _check_line_lengths(rows: Sequence[str]) -> None:
    for row in rows:
        if len(row) != PUZZLE_COLUMNS:
            raise MapFormatError(f"Line must be {PUZZLE_COLUMNS} characters long")


def _check_left_right_consistency(odd_rows: Sequence[str]) -> None:
    for row in odd_rows:
        if row[0] != row[-1]:
            raise MapFormatError("Left and right walls must be consistent")


def _extract_top_walls(even_rows: Sequence[str], walls: bytearray) -> None:
    for y, row in enumerate(even_rows):
        for x in range(WORLD_WIDTH):
            glyph = row[x * 5 + 1]
            if glyph == TOP_WALL_GLYPH:
                index, mask = wall_slot(x, y, Direction.UP)
                walls[index] |= mask
            elif glyph == "-":
                raise MapFormatError(
                    "Unexpected top wall - must be ' ' or '─'. Found '-' - look closely!"
                )
            elif glyph != " ":
                raise MapFormatError("Unexpected top wall - must be ' ' or '─'")


def _extract_left_walls(odd_rows: Sequence[str], walls: bytearray) -> None:
    for y, row in enumerate(odd_rows):
        for x in range(WORLD_WIDTH):
            glyph = row[x * 5]
            if glyph == LEFT_WALL_GLYPH:
                index, mask = wall_slot(x, y, Direction.LEFT)
                walls[index] |= mask
            elif glyph == "|":
                raise MapFormatError(
                    "Unexpected left wall - must be ' ' or '│'. Found '|' - look closely!"
                )
            elif glyph != " ":
                raise MapFormatError("Unexpected left wall - must be ' ' or '│'")


def _parse_arrow(marker: str, glyph: str) -> Direction | None:
    if marker == "A":
        if glyph not in _DIRECTION_GLYPHS:
            raise MapFormatError(
                "If an arrow is specified with 'A' then it must be followed by one of <>^v"
            )
        return _DIRECTION_GLYPHS[glyph]
    if (marker, glyph) != (" ", " "):
        raise MapFormatError("Unexpected characters in arrow cell")
    return None


def _parse_entity(marker: str, glyph: str) -> tuple[EntityType, Direction]:
    if marker in _WALKER_GLYPHS:
        if glyph not in _DIRECTION_GLYPHS:
            raise MapFormatError(
                "If a mouse or cat is specified then it must be followed by one of <>^v"
            )
        return _WALKER_GLYPHS[marker], _DIRECTION_GLYPHS[glyph]
    if marker in _FIXTURE_GLYPHS:
        if glyph != " ":
            raise MapFormatError(
                "If a rocket or hole is specified then it must be followed by a blank space"
            )
        return _FIXTURE_GLYPHS[marker], Direction.UP
    if (marker, glyph) != (" ", " "):
        raise MapFormatError("Unexpected characters in tile cell")
    return EntityType.EMPTY, Direction.UP


def _extract_cells(odd_rows: Sequence[str]) -> list[CellEntry]:
    arrows: list[Direction | None] = []
    for row in odd_rows:
        for x in range(WORLD_WIDTH):
            arrows.append(_parse_arrow(row[x * 5 + 3], row[x * 5 + 4]))

    cells = []
    for y, row in enumerate(odd_rows):
        for x in range(WORLD_WIDTH):
            entity, direction = _parse_entity(row[x * 5 + 1], row[x * 5 + 2])
            cells.append(
                CellEntry(
                    entity=entity,
                    entity_direction=direction,
                    arrow=arrows[y * WORLD_WIDTH + x],
                )
            )
    return cells


def parse_puzzle_data(name: str, author: str, rows: Sequence[str]) -> MapData:
    """Validate an ASCII puzzle and return its decoded map.

    Checks run in a fixed order and the first failure is reported as a
    ``MapFormatError``.
    """
    rows = list(rows)
    if len(rows) != PUZZLE_ROWS:
        raise MapFormatError(f"Puzzle must have {PUZZLE_ROWS} rows, got {len(rows)}")

    # The closing row is only drawn for looks
    even_rows = rows[0:-1:2]
    odd_rows = rows[1::2]

    _check_text(name, MAP_NAME_SIZE)
    _check_text(author, MAP_AUTHOR_SIZE)
    _check_top_bottom_consistency(rows[0], rows[-1])
    _check_cell_consistency(even_rows)
    _check_line_lengths(rows)
    _check_left_right_consistency(odd_rows)

    walls = bytearray(WALL_BLOCK_SIZE)
    _extract_top_walls(even_rows, walls)
    _extract_left_walls(odd_rows, walls)
    cells = _extract_cells(odd_rows)

    return MapData(name=name, author=author, wall_block=bytes(walls), cells=tuple(cells))


def parse_puzzle(name: str, author: str, rows: Sequence[str]) -> bytes:
    """Validate an ASCII puzzle and pack it into the 199-byte map format."""
    return encode_map(parse_puzzle_data(name, author, rows))
