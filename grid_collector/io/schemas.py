"""Parquet schema definitions for search and game artifacts.

Every module that writes or reads a run log works against these column
contracts.
"""

from __future__ import annotations

import pyarrow as pa

RUN_PAYLOAD_SCHEMA_VERSION = 1

ANNEALING_LOG_SCHEMA = pa.schema(
    [
        ("iteration", pa.int64()),
        ("temperature", pa.float64()),
        ("candidate_score", pa.int64()),
        ("best_score", pa.int64()),
        ("accepted", pa.bool_()),
        ("improved", pa.bool_()),
        ("columns", pa.list_(pa.int64())),
        ("rows", pa.list_(pa.int64())),
    ]
)

GAME_LOG_SCHEMA = pa.schema(
    [
        ("turn", pa.int64()),
        ("character_id", pa.int64()),
        ("direction", pa.string()),
        ("column", pa.int64()),
        ("row", pa.int64()),
        ("gained", pa.int64()),
        ("score", pa.int64()),
    ]
)
