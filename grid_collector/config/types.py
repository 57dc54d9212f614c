"""Configuration dataclasses for games and placement searches.

Both dataclasses are frozen and validate themselves on construction, so an
invalid configuration fails before any simulation starts.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from grid_collector.config.constants import (
    ANNEALING_COOLING_HORIZON,
    ANNEALING_END_TEMP,
    ANNEALING_REPEAT,
    ANNEALING_START_TEMP,
    END_TURN,
    GRID_COLUMNS,
    GRID_ROWS,
    MAX_POINT,
    MIN_POINT,
    NUM_CHARACTERS,
)

__all__ = [
    "AnnealingConfig",
    "GameConfig",
    "PlacementKind",
    "SelectorKind",
]


class SelectorKind(Enum):
    """Move selection strategy for a character."""

    MANUAL = "manual"
    RANDOM = "random"
    GREEDY = "greedy"
    BEAM_SEARCH = "beam_search"


class PlacementKind(Enum):
    """Initial placement strategy for a set of characters."""

    RANDOM = "random"
    ANNEALING = "annealing"


@dataclass(frozen=True)
class GameConfig:
    """Grid dimensions, turn budget and point range of one game."""

    columns: int = GRID_COLUMNS
    rows: int = GRID_ROWS
    end_turn: int = END_TURN
    num_characters: int = NUM_CHARACTERS
    min_point: int = MIN_POINT
    max_point: int = MAX_POINT

    def __post_init__(self) -> None:
        if self.columns < 1 or self.rows < 1:
            raise ValueError("grid dimensions must be >= 1")
        if self.end_turn < 1:
            raise ValueError("end_turn must be >= 1")
        if self.num_characters < 1:
            raise ValueError("num_characters must be >= 1")
        # Placement search redraws colliding coordinates until a free cell
        # turns up, so at least one cell must stay free.
        if self.num_characters >= self.cell_count:
            raise ValueError("num_characters must be less than grid cells")
        if self.min_point < 0:
            raise ValueError("min_point must be >= 0")
        if self.max_point < self.min_point:
            raise ValueError("max_point must be >= min_point")

    @property
    def cell_count(self) -> int:
        return self.columns * self.rows


@dataclass(frozen=True)
class AnnealingConfig:
    """Simulated-annealing schedule for the placement search.

    Temperature at iteration ``i`` is
    ``start_temp + (end_temp - start_temp) * (i / cooling_horizon)``.
    ``cooling_horizon`` is independent of ``repeat``: with the defaults the
    search stops a tenth of the way along the schedule.
    """

    repeat: int = ANNEALING_REPEAT
    cooling_horizon: int = ANNEALING_COOLING_HORIZON
    start_temp: float = ANNEALING_START_TEMP
    end_temp: float = ANNEALING_END_TEMP

    def __post_init__(self) -> None:
        if self.repeat < 1:
            raise ValueError("repeat must be >= 1")
        if self.cooling_horizon < 1:
            raise ValueError("cooling_horizon must be >= 1")
        if self.start_temp <= 0:
            raise ValueError("start_temp must be > 0")
        if self.temperature_at(self.repeat - 1) <= 0:
            raise ValueError("temperature must stay > 0 for every iteration")

    def temperature_at(self, iteration: int) -> float:
        """Return the annealing temperature for ``iteration``."""
        return self.start_temp + (self.end_temp - self.start_temp) * (
            iteration / self.cooling_horizon
        )
