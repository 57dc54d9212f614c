"""Parquet and JSON writers for placement searches and headless games."""

from __future__ import annotations

import json
from collections.abc import Sequence
from pathlib import Path

import pyarrow as pa
import pyarrow.parquet as pq

from grid_collector.config.types import AnnealingConfig, GameConfig
from grid_collector.io.paths import (
    annealing_log_path,
    game_log_path,
    game_summary_path,
    logs_dir,
    placement_path,
)
from grid_collector.io.schemas import (
    ANNEALING_LOG_SCHEMA,
    GAME_LOG_SCHEMA,
    RUN_PAYLOAD_SCHEMA_VERSION,
)
from grid_collector.placement.annealing import AnnealingStep, PlacementResult
from grid_collector.session import GameResult, MoveRecord


def write_annealing_log(history: Sequence[AnnealingStep], out_dir: Path) -> Path:
    """Write one row per evaluated candidate and return the file path."""
    columns: dict[str, list[object]] = {name: [] for name in ANNEALING_LOG_SCHEMA.names}
    for step in history:
        columns["iteration"].append(step.iteration)
        columns["temperature"].append(step.temperature)
        columns["candidate_score"].append(step.candidate_score)
        columns["best_score"].append(step.best_score)
        columns["accepted"].append(step.accepted)
        columns["improved"].append(step.improved)
        columns["columns"].append([coord.column for coord in step.coords])
        columns["rows"].append([coord.row for coord in step.coords])
    path = annealing_log_path(out_dir)
    logs_dir(out_dir).mkdir(parents=True, exist_ok=True)
    pq.write_table(pa.Table.from_pydict(columns, schema=ANNEALING_LOG_SCHEMA), path)
    return path


def write_game_log(moves: Sequence[MoveRecord], out_dir: Path) -> Path:
    """Write one row per committed live move and return the file path."""
    columns: dict[str, list[object]] = {name: [] for name in GAME_LOG_SCHEMA.names}
    for move in moves:
        columns["turn"].append(move.turn)
        columns["character_id"].append(move.character_id)
        columns["direction"].append(move.direction.name)
        columns["column"].append(move.coord.column)
        columns["row"].append(move.coord.row)
        columns["gained"].append(move.gained)
        columns["score"].append(move.score)
    path = game_log_path(out_dir)
    logs_dir(out_dir).mkdir(parents=True, exist_ok=True)
    pq.write_table(pa.Table.from_pydict(columns, schema=GAME_LOG_SCHEMA), path)
    return path


def _config_payload(config: GameConfig) -> dict[str, int]:
    return {
        "columns": config.columns,
        "rows": config.rows,
        "end_turn": config.end_turn,
        "num_characters": config.num_characters,
        "min_point": config.min_point,
        "max_point": config.max_point,
    }


def write_placement(
    result: PlacementResult,
    config: GameConfig,
    annealing: AnnealingConfig,
    out_dir: Path,
) -> Path:
    """Write the best placement and the search settings as JSON."""
    payload = {
        "schema_version": RUN_PAYLOAD_SCHEMA_VERSION,
        "game": _config_payload(config),
        "annealing": {
            "repeat": annealing.repeat,
            "cooling_horizon": annealing.cooling_horizon,
            "start_temp": annealing.start_temp,
            "end_temp": annealing.end_temp,
        },
        "best_score": result.best_score,
        "coords": [[coord.column, coord.row] for coord in result.coords],
    }
    path = placement_path(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload, ensure_ascii=False, indent=2))
    return path


def write_game_summary(result: GameResult, config: GameConfig, out_dir: Path) -> Path:
    """Write final scores and termination state of a headless game as JSON."""
    payload = {
        "schema_version": RUN_PAYLOAD_SCHEMA_VERSION,
        "game": _config_payload(config),
        "scores": list(result.scores),
        "total_score": result.total_score,
        "turn": result.turn,
        "remaining_points": result.remaining_points,
        "stalled": result.stalled,
    }
    path = game_summary_path(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload, ensure_ascii=False, indent=2))
    return path
