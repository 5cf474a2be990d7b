import json
from pathlib import Path

import pyarrow.parquet as pq
import pytest

from shoko_rocket.domain.direction import Direction
from shoko_rocket.io.map_format import CellEntry, EntityType, MapData, encode_map
from shoko_rocket.levels import E1M1
from shoko_rocket.run_level import main


def _summary(capsys: pytest.CaptureFixture[str]) -> dict[str, object]:
    return json.loads(capsys.readouterr().out)


def _write_win_map(tmp_path: Path) -> Path:
    cells = [CellEntry()] * 108
    cells[0] = CellEntry(entity=EntityType.MOUSE, entity_direction=Direction.RIGHT)
    cells[1] = CellEntry(entity=EntityType.ROCKET)
    path = tmp_path / "win.map"
    path.write_bytes(encode_map(MapData(name="Short", author="Tests", cells=tuple(cells))))
    return path


def test_builtin_level_runs_with_tick_cap(capsys: pytest.CaptureFixture[str]) -> None:
    main(["--level", "e1m1", "--max-ticks", "10"])
    summary = _summary(capsys)
    assert summary["level"] == "Where to go?"
    assert summary["author"] == "Sega"
    assert summary["outcome"] == "stopped"
    assert summary["ticks"] == 10
    assert summary["mice_remaining"] == 35


def test_default_level_is_e1m1(capsys: pytest.CaptureFixture[str]) -> None:
    main(["--max-ticks", "1"])
    assert _summary(capsys)["level"] == "Where to go?"


def test_map_file_with_out_dir(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    map_path = _write_win_map(tmp_path)
    out_dir = tmp_path / "out"
    main(["--map", str(map_path), "--out-dir", str(out_dir)])

    summary = _summary(capsys)
    assert summary["outcome"] == "success"
    assert summary["solved"] is True
    assert summary["ticks"] == 60
    assert (out_dir / "results" / "short.json").exists()
    assert pq.read_table(out_dir / "logs" / "tick_log.parquet").num_rows > 0


def test_config_file_values_and_cli_override(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    config_path = tmp_path / "config.json"
    config_path.write_text(json.dumps({"level": "e1m1", "max_ticks": 7, "apply_solution": "no"}))

    main(["--config", str(config_path)])
    assert _summary(capsys)["ticks"] == 7

    main(["--config", str(config_path), "--max-ticks", "3"])
    assert _summary(capsys)["ticks"] == 3


def test_cli_map_replaces_config_level(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    config_path = tmp_path / "config.json"
    config_path.write_text(json.dumps({"level": "e1m1"}))
    main(["--config", str(config_path), "--map", str(_write_win_map(tmp_path))])
    assert _summary(capsys)["level"] == "Short"


@pytest.mark.parametrize(
    "config",
    [
        {"max_ticks": 0},
        {"max_ticks": 1.5},
        {"apply_solution": "maybe"},
        {"level": "e9m9"},
        {"level": "e1m1", "map": "somewhere.map"},
    ],
)
def test_invalid_config_exits(tmp_path: Path, config: dict[str, object]) -> None:
    config_path = tmp_path / "config.json"
    config_path.write_text(json.dumps(config))
    with pytest.raises(SystemExit):
        main(["--config", str(config_path)])


def test_missing_config_file_exits(tmp_path: Path) -> None:
    with pytest.raises(SystemExit):
        main(["--config", str(tmp_path / "absent.json")])


def test_missing_map_file_exits(tmp_path: Path) -> None:
    with pytest.raises(SystemExit):
        main(["--map", str(tmp_path / "absent.map")])


def test_truncated_map_file_exits(tmp_path: Path) -> None:
    map_path = tmp_path / "short.map"
    map_path.write_bytes(E1M1[:100])
    with pytest.raises(SystemExit):
        main(["--map", str(map_path)])
