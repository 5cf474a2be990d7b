"""Headless level runner: tick a loaded map to its outcome and persist the run."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from pathlib import Path

import pyarrow.parquet as pq

from shoko_rocket.config.constants import FLUSH_THRESHOLD
from shoko_rocket.config.types import LevelResult, RunConfig
from shoko_rocket.domain.walker import Walker
from shoko_rocket.domain.world import World
from shoko_rocket.domain.world_state import WorldState, WorldStateChange
from shoko_rocket.io.paths import level_result_path, logs_dir, results_dir, tick_log_path
from shoko_rocket.io.schemas import RESULT_PAYLOAD_SCHEMA_VERSION, TICK_LOG_SCHEMA
from shoko_rocket.simulation.persistence import flush_tick_columns, new_tick_columns

logger = logging.getLogger(__name__)

_FINAL_STATES = {
    WorldStateChange.WIN: WorldState.SUCCESS,
    WorldStateChange.LOSE: WorldState.DEFEAT,
}


def _append_walkers(
    tick_columns: dict[str, list[int | str]], walkers: Iterable[Walker], level: str, tick: int
) -> None:
    for walker in walkers:
        x, y = walker.cell
        tick_columns["level"].append(level)
        tick_columns["tick"].append(tick)
        tick_columns["walker_id"].append(walker.walker_id)
        tick_columns["kind"].append(walker.get_type().value)
        tick_columns["x"].append(x)
        tick_columns["y"].append(y)
        tick_columns["direction"].append(walker.get_direction().name.lower())
        tick_columns["state"].append(walker.get_state().name.lower())


def run_level(
    map_bytes: bytes,
    out_dir: Path | None = None,
    config: RunConfig | None = None,
) -> LevelResult:
    """Load a packed map and tick it until Win, Lose or ``max_ticks``.

    With ``out_dir`` set, live walkers are logged every ``snapshot_interval``
    ticks (tick 0 being the loaded layout) and on the final tick, and every
    walker is logged once more on the tick it dies or is rescued. The log goes
    to ``logs/tick_log.parquet`` and the result to ``results/<level>.json``.
    """
    run_config = config or RunConfig()
    world = World.load(map_bytes)
    if run_config.apply_solution:
        world.apply_solution()
    level = world.name

    tick_writer: pq.ParquetWriter | None = None
    tick_columns = new_tick_columns()
    log_path: Path | None = None
    if out_dir is not None:
        out_dir = Path(out_dir)
        logs_dir(out_dir).mkdir(parents=True, exist_ok=True)
        results_dir(out_dir).mkdir(parents=True, exist_ok=True)
        log_path = tick_log_path(out_dir)
        _append_walkers(tick_columns, (*world.mice, *world.cats), level, 0)

    state = WorldState.RUNNING
    tick = 0
    logger.info("Running %r for at most %d ticks", level, run_config.max_ticks)
    try:
        while state is WorldState.RUNNING and tick < run_config.max_ticks:
            tick += 1
            change = world.tick()
            state = _FINAL_STATES.get(change, WorldState.RUNNING)

            if log_path is None:
                continue
            finished = state is not WorldState.RUNNING or tick == run_config.max_ticks
            if finished or tick % run_config.snapshot_interval == 0:
                _append_walkers(tick_columns, (*world.mice, *world.cats), level, tick)
            _append_walkers(tick_columns, world.departed, level, tick)
            if len(tick_columns["level"]) >= FLUSH_THRESHOLD:
                tick_writer = flush_tick_columns(tick_columns, log_path, tick_writer)

        if log_path is not None:
            tick_writer = flush_tick_columns(tick_columns, log_path, tick_writer)
            if tick_writer is None:
                pq.write_table(TICK_LOG_SCHEMA.empty_table(), log_path)
    finally:
        if tick_writer is not None:
            tick_writer.close()

    if state is WorldState.RUNNING:
        state = WorldState.STOPPED

    result = LevelResult(
        level=level,
        author=world.author,
        outcome=state.value,
        ticks=tick,
        mice_remaining=len(world.mice),
        cats_remaining=len(world.cats),
    )
    logger.info("Level %r finished: %s after %d ticks", level, result.outcome, tick)

    if out_dir is not None:
        payload = {
            "level": result.level,
            "author": result.author,
            "outcome": result.outcome,
            "solved": result.solved,
            "ticks": result.ticks,
            "mice_remaining": result.mice_remaining,
            "cats_remaining": result.cats_remaining,
            "metadata": {
                "max_ticks": run_config.max_ticks,
                "snapshot_interval": run_config.snapshot_interval,
                "apply_solution": run_config.apply_solution,
                "schema_version": RESULT_PAYLOAD_SCHEMA_VERSION,
            },
        }
        level_result_path(out_dir, level).write_text(
            json.dumps(payload, ensure_ascii=False, indent=2)
        )
    return result
