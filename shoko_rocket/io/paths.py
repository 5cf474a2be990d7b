"""Path construction helpers for headless run output directories."""

from __future__ import annotations

import re
from pathlib import Path


def logs_dir(out_dir: Path) -> Path:
    """Return path to the logs subdirectory within an output directory."""
    return out_dir / "logs"


def results_dir(out_dir: Path) -> Path:
    """Return path to the results subdirectory within an output directory."""
    return out_dir / "results"


def tick_log_path(out_dir: Path) -> Path:
    """Return path to the walker tick log Parquet file."""
    return logs_dir(out_dir) / "tick_log.parquet"


def level_slug(level_name: str) -> str:
    """Turn a level name into a file-name safe slug (``"Where to go?"`` -> ``"where_to_go"``)."""
    slug = re.sub(r"[^a-z0-9]+", "_", level_name.lower()).strip("_")
    return slug or "level"


def level_result_path(out_dir: Path, level_name: str) -> Path:
    """Return path to the JSON result file of one level."""
    return results_dir(out_dir) / f"{level_slug(level_name)}.json"
