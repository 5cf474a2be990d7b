"""CLI entrypoint for headless level runs.

Loads a packed map (a 199-byte file or a built-in level), ticks it to its
outcome with ``shoko_rocket.simulation.engine.run_level`` and prints a JSON
summary. CLI arguments override config-file values; config-file values
override built-in defaults.
"""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

from shoko_rocket.config.constants import DEFAULT_MAX_TICKS, SNAPSHOT_INTERVAL
from shoko_rocket.config.types import RunConfig
from shoko_rocket.levels import LEVELS
from shoko_rocket.simulation.engine import run_level

# ---------------------------------------------------------------------------
# CLI parsing helpers
# ---------------------------------------------------------------------------


def _coerce_bool(raw: object, key: str) -> bool:
    """Coerce raw value to bool with strict string-check."""
    if isinstance(raw, bool):
        return raw
    if isinstance(raw, str):
        normalized = raw.strip().lower()
        if normalized in {"1", "true", "yes", "on"}:
            return True
        if normalized in {"0", "false", "no", "off"}:
            return False
    raise ValueError(f"{key} must be a boolean value")


def _coerce_int(raw: object, key: str) -> int:
    """Coerce raw value to int; rejects booleans and non-integer floats."""
    if isinstance(raw, bool):
        raise ValueError(f"{key} must be an integer value")
    if isinstance(raw, float):
        if raw != int(raw):
            raise ValueError(f"{key} must be an integer value, got {raw!r}")
        return int(raw)
    if isinstance(raw, (int, str)):
        return int(raw)
    raise ValueError(f"{key} must be an integer value")


def _get_val(cli_val: object, key: str, file_cfg: dict[str, object], default: object) -> object:
    """CLI > file > default resolution."""
    if cli_val is not None:
        return cli_val
    return file_cfg.get(key, default)


def _get_int(cli_val: int | None, key: str, file_cfg: dict[str, object], default: int) -> int:
    return _coerce_int(_get_val(cli_val, key, file_cfg, default), key)


def _get_bool(cli_val: bool | None, key: str, file_cfg: dict[str, object], default: bool) -> bool:
    return _coerce_bool(_get_val(cli_val, key, file_cfg, default), key)


def _build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(description="Run a puzzle level headlessly")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="JSON config file (CLI args override file values)",
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--map", type=Path, default=None, help="Packed 199-byte map file")
    source.add_argument(
        "--level",
        type=str,
        choices=sorted(LEVELS),
        default=None,
        help="Built-in level name",
    )
    parser.add_argument("--max-ticks", type=int, default=None)
    parser.add_argument("--snapshot-interval", type=int, default=None)
    parser.add_argument(
        "--apply-solution",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Place the map's solution arrows before running (default: on)",
    )
    parser.add_argument("--out-dir", type=Path, default=None)
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
    )
    return parser


# ---------------------------------------------------------------------------
# Main CLI
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for headless level runs."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    file_cfg: dict[str, object] = {}
    if args.config is not None:
        try:
            file_cfg = json.loads(Path(args.config).read_text())
        except FileNotFoundError:
            parser.error(f"Config file not found: {args.config}")
        except json.JSONDecodeError as exc:
            parser.error(f"Config file is not valid JSON: {args.config}: {exc}")

    # A source given on the command line replaces both file keys
    if args.map is not None or args.level is not None:
        map_path, level_name = args.map, args.level
    else:
        map_path, level_name = file_cfg.get("map"), file_cfg.get("level")

    if map_path is not None and level_name is not None:
        parser.error("Specify either map or level, not both")
    if map_path is not None:
        try:
            map_bytes = Path(str(map_path)).read_bytes()
        except FileNotFoundError:
            parser.error(f"Map file not found: {map_path}")
    else:
        level_key = str(level_name or "e1m1").lower()
        if level_key not in LEVELS:
            parser.error(f"Unknown level: {level_key}")
        map_bytes = LEVELS[level_key]

    try:
        run_config = RunConfig(
            max_ticks=_get_int(args.max_ticks, "max_ticks", file_cfg, DEFAULT_MAX_TICKS),
            snapshot_interval=_get_int(
                args.snapshot_interval, "snapshot_interval", file_cfg, SNAPSHOT_INTERVAL
            ),
            apply_solution=_get_bool(args.apply_solution, "apply_solution", file_cfg, True),
        )
    except ValueError as exc:
        parser.error(str(exc))

    out_dir_raw = _get_val(args.out_dir, "out_dir", file_cfg, None)
    out_dir = Path(str(out_dir_raw)) if out_dir_raw is not None else None

    try:
        result = run_level(map_bytes, out_dir=out_dir, config=run_config)
    except ValueError as exc:
        parser.error(f"Invalid map: {exc}")

    summary = {
        "level": result.level,
        "author": result.author,
        "outcome": result.outcome,
        "solved": result.solved,
        "ticks": result.ticks,
        "mice_remaining": result.mice_remaining,
        "cats_remaining": result.cats_remaining,
    }
    print(json.dumps(summary, ensure_ascii=False, indent=2))


if __name__ == "__main__":
    main()
