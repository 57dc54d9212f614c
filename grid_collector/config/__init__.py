"""Configuration layer: constants and typed config dataclasses."""

from grid_collector.config.constants import (
    ANNEALING_COOLING_HORIZON,
    ANNEALING_END_TEMP,
    ANNEALING_REPEAT,
    ANNEALING_START_TEMP,
    BEAM_DEPTH,
    BEAM_WIDTH,
    END_TURN,
    GRID_COLUMNS,
    GRID_ROWS,
    MAX_POINT,
    MIN_POINT,
    NUM_CHARACTERS,
)
from grid_collector.config.types import (
    AnnealingConfig,
    GameConfig,
    PlacementKind,
    SelectorKind,
)

__all__ = [
    "ANNEALING_COOLING_HORIZON",
    "ANNEALING_END_TEMP",
    "ANNEALING_REPEAT",
    "ANNEALING_START_TEMP",
    "AnnealingConfig",
    "BEAM_DEPTH",
    "BEAM_WIDTH",
    "END_TURN",
    "GRID_COLUMNS",
    "GRID_ROWS",
    "GameConfig",
    "MAX_POINT",
    "MIN_POINT",
    "NUM_CHARACTERS",
    "PlacementKind",
    "SelectorKind",
]
