"""Path construction helpers for run output directories."""

from __future__ import annotations

from pathlib import Path


def logs_dir(out_dir: Path) -> Path:
    """Return path to the logs subdirectory within an output directory."""
    return out_dir / "logs"


def annealing_log_path(out_dir: Path) -> Path:
    """Return path to the annealing history Parquet file."""
    return logs_dir(out_dir) / "annealing_log.parquet"


def game_log_path(out_dir: Path) -> Path:
    """Return path to the live-game move log Parquet file."""
    return logs_dir(out_dir) / "game_log.parquet"


def placement_path(out_dir: Path) -> Path:
    """Return path to the chosen placement JSON file."""
    return out_dir / "placement.json"


def game_summary_path(out_dir: Path) -> Path:
    """Return path to the game summary JSON file."""
    return out_dir / "game_summary.json"
