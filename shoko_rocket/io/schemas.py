"""Parquet schema definitions for headless run artifacts.

Every column contract used when persisting walker logs lives here so the
runner and any downstream reader work against the same layout.
"""

from __future__ import annotations

import pyarrow as pa

# ---------------------------------------------------------------------------
# Schema version constants
# ---------------------------------------------------------------------------

RESULT_PAYLOAD_SCHEMA_VERSION = 1

# ---------------------------------------------------------------------------
# Walker tick log
# ---------------------------------------------------------------------------

TICK_LOG_SCHEMA = pa.schema(
    [
        ("level", pa.string()),
        ("tick", pa.int64()),
        ("walker_id", pa.int64()),
        ("kind", pa.string()),
        ("x", pa.int64()),
        ("y", pa.int64()),
        ("direction", pa.string()),
        ("state", pa.string()),
    ]
)

TICK_LOG_COLUMNS = [field.name for field in TICK_LOG_SCHEMA]
"""Column order of ``TICK_LOG_SCHEMA``; used to build in-memory buffers."""
