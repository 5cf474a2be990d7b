"""Configuration dataclasses for headless level runs.

Frozen dataclasses that parameterise the runner and carry its results
live here.
"""

from __future__ import annotations

from dataclasses import dataclass

from shoko_rocket.config.constants import DEFAULT_MAX_TICKS, SNAPSHOT_INTERVAL

__all__ = [
    "LevelResult",
    "RunConfig",
]

# ---------------------------------------------------------------------------
# Result container
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class LevelResult:
    """Top-level result for one headless level run."""

    level: str
    author: str
    outcome: str
    ticks: int
    mice_remaining: int
    cats_remaining: int

    @property
    def solved(self) -> bool:
        return self.outcome == "success"


# ---------------------------------------------------------------------------
# Config dataclasses
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class RunConfig:
    """Runtime knobs for a headless level run."""

    max_ticks: int = DEFAULT_MAX_TICKS
    snapshot_interval: int = SNAPSHOT_INTERVAL
    apply_solution: bool = True

    def __post_init__(self) -> None:
        if self.max_ticks < 1:
            raise ValueError("max_ticks must be >= 1")
        if self.snapshot_interval < 1:
            raise ValueError("snapshot_interval must be >= 1")
