"""Headless runner: tick a level to its outcome and persist the walker log."""

from shoko_rocket.simulation.engine import run_level
from shoko_rocket.simulation.persistence import flush_tick_columns

__all__ = [
    "flush_tick_columns",
    "run_level",
]
