"""Mutable record of uncollected cell values and the turn counter.

Collection invariant: once a cell is collected its value stays zero for the
lifetime of the MapState. ``clone`` copies the value grid, so a rollout can
collect cells on its copy without touching the state it came from.
"""

from __future__ import annotations

from dataclasses import dataclass
from random import Random
from typing import TYPE_CHECKING

import numpy as np

from grid_collector.domain.coord import Coord

if TYPE_CHECKING:
    from grid_collector.config.types import GameConfig
    from grid_collector.domain.character import Character


@dataclass(eq=False)
class MapState:
    """Point grid indexed as ``points[row, column]``."""

    points: np.ndarray
    end_turn: int
    turn: int = 0

    def __post_init__(self) -> None:
        self.points = np.array(self.points, dtype=np.int64)
        if self.points.ndim != 2:
            raise ValueError("points must be a 2-D grid")
        if (self.points < 0).any():
            raise ValueError("points must be >= 0")
        if self.end_turn < 1:
            raise ValueError("end_turn must be >= 1")

    @classmethod
    def create(cls, config: GameConfig, rng: Random) -> MapState:
        """Initialize a map with uniformly drawn point values."""
        values = [
            [rng.randint(config.min_point, config.max_point) for _ in range(config.columns)]
            for _ in range(config.rows)
        ]
        return cls(points=np.array(values, dtype=np.int64), end_turn=config.end_turn)

    @classmethod
    def uniform(cls, config: GameConfig, value: int) -> MapState:
        """Initialize a map where every cell holds ``value``."""
        points = np.full((config.rows, config.columns), value, dtype=np.int64)
        return cls(points=points, end_turn=config.end_turn)

    @property
    def rows(self) -> int:
        return int(self.points.shape[0])

    @property
    def columns(self) -> int:
        return int(self.points.shape[1])

    def point_at(self, coord: Coord) -> int:
        return int(self.points[coord.row, coord.column])

    def remaining_points(self) -> int:
        return int(self.points.sum())

    def place(self, character: Character) -> None:
        """Claim the cell under a newly placed character.

        The start cell is zeroed without scoring or counting a turn.
        """
        self.points[character.coord.row, character.coord.column] = 0

    def advance(self, character: Character, coord: Coord) -> None:
        """Commit ``character``'s move onto ``coord`` and collect the cell.

        The caller has already bounds-checked ``coord``.
        """
        character.coord = coord
        character.score += self.point_at(coord)
        character.turns += 1
        self.points[coord.row, coord.column] = 0
        self.turn += 1

    def is_done(self) -> bool:
        return self.turn >= self.end_turn or self.remaining_points() == 0

    def clone(self) -> MapState:
        return MapState(points=self.points.copy(), end_turn=self.end_turn, turn=self.turn)
