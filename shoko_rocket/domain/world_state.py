"""Per-tick outcome signal and coarse play state of a world."""

from __future__ import annotations

from enum import Enum


class WorldState(Enum):
    """Play state of a loaded level, as tracked by the caller."""

    STOPPED = "stopped"
    RUNNING = "running"
    RUNNING_FAST = "running_fast"
    SUCCESS = "success"
    DEFEAT = "defeat"


class WorldStateChange(Enum):
    """Ways a single tick can change the state of the world."""

    WIN = "win"
    LOSE = "lose"
    NO_CHANGE = "no_change"
