"""Tests for tick log buffering and Parquet flushing."""

from __future__ import annotations

from pathlib import Path

import pyarrow.parquet as pq

from shoko_rocket.io.schemas import TICK_LOG_COLUMNS
from shoko_rocket.simulation.persistence import flush_tick_columns, new_tick_columns


def _append_row(columns: dict[str, list[int | str]], tick: int) -> None:
    row: dict[str, int | str] = {
        "level": "Test",
        "tick": tick,
        "walker_id": 0,
        "kind": "mouse",
        "x": 1,
        "y": 2,
        "direction": "up",
        "state": "alive",
    }
    for name, value in row.items():
        columns[name].append(value)


class TestFlushTickColumns:
    def test_new_columns_follow_schema_order(self) -> None:
        assert list(new_tick_columns()) == TICK_LOG_COLUMNS

    def test_empty_buffer_does_not_open_writer(self, tmp_path: Path) -> None:
        path = tmp_path / "log.parquet"
        assert flush_tick_columns(new_tick_columns(), path, None) is None
        assert not path.exists()

    def test_flushes_append_and_clear(self, tmp_path: Path) -> None:
        path = tmp_path / "log.parquet"
        columns = new_tick_columns()
        _append_row(columns, 0)
        writer = flush_tick_columns(columns, path, None)
        assert writer is not None
        assert all(not values for values in columns.values())

        _append_row(columns, 1)
        _append_row(columns, 2)
        assert flush_tick_columns(columns, path, writer) is writer
        writer.close()

        assert pq.read_table(path).column("tick").to_pylist() == [0, 1, 2]
