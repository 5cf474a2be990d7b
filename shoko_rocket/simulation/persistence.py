"""Parquet persistence helpers for the walker tick log."""

from __future__ import annotations

from pathlib import Path

import pyarrow as pa
import pyarrow.parquet as pq

from shoko_rocket.io.schemas import TICK_LOG_COLUMNS, TICK_LOG_SCHEMA


def new_tick_columns() -> dict[str, list[int | str]]:
    """Empty column buffers in ``TICK_LOG_SCHEMA`` order."""
    return {name: [] for name in TICK_LOG_COLUMNS}


def flush_tick_columns(
    tick_columns: dict[str, list[int | str]],
    tick_log_path: Path,
    tick_writer: pq.ParquetWriter | None,
) -> pq.ParquetWriter | None:
    """Write accumulated tick rows to Parquet and clear in-memory buffers."""
    if not tick_columns["level"]:
        return tick_writer
    tick_table = pa.Table.from_pydict(tick_columns, schema=TICK_LOG_SCHEMA)
    if tick_writer is None:
        tick_writer = pq.ParquetWriter(tick_log_path, TICK_LOG_SCHEMA)
    tick_writer.write_table(tick_table)
    for values in tick_columns.values():
        values.clear()
    return tick_writer
