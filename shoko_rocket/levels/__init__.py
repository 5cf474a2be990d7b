"""Built-in levels, packed at import time from their ASCII sources."""

from shoko_rocket.levels.e1m1 import E1M1

LEVELS: dict[str, bytes] = {
    "e1m1": E1M1,
}
"""Packed maps addressable by short name from the CLI."""

__all__ = [
    "E1M1",
    "LEVELS",
]
