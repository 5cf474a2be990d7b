"""Per-direction stock of arrows the player has not yet placed."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from shoko_rocket.domain.direction import Direction


@dataclass
class ArrowStock:
    """Unused arrow counts, indexable by Direction."""

    up: int = 0
    down: int = 0
    left: int = 0
    right: int = 0

    @classmethod
    def from_directions(cls, directions: Iterable[Direction]) -> ArrowStock:
        stock = cls()
        for direction in directions:
            stock[direction] += 1
        return stock

    def __getitem__(self, direction: Direction) -> int:
        return getattr(self, direction.name.lower())

    def __setitem__(self, direction: Direction, count: int) -> None:
        if count < 0:
            raise ValueError("arrow stock cannot go negative")
        setattr(self, direction.name.lower(), count)

    @property
    def total(self) -> int:
        return self.up + self.down + self.left + self.right

    def take(self, direction: Direction) -> bool:
        """Remove one arrow from the stock; False if none are left."""
        if self[direction] == 0:
            return False
        self[direction] -= 1
        return True

    def give(self, direction: Direction) -> None:
        self[direction] += 1
