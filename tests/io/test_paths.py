"""Tests for output path helpers."""

from __future__ import annotations

from pathlib import Path

import pytest

from shoko_rocket.io.paths import level_result_path, level_slug, tick_log_path


@pytest.mark.parametrize(
    ("name", "slug"),
    [
        ("Where to go?", "where_to_go"),
        ("  E1M1  ", "e1m1"),
        ("Cats & Mice -- 2", "cats_mice_2"),
        ("???", "level"),
    ],
)
def test_level_slug(name: str, slug: str) -> None:
    assert level_slug(name) == slug


def test_layout_under_out_dir(tmp_path: Path) -> None:
    assert tick_log_path(tmp_path) == tmp_path / "logs" / "tick_log.parquet"
    assert level_result_path(tmp_path, "Where to go?") == tmp_path / "results" / "where_to_go.json"
