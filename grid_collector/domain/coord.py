"""Immutable grid coordinate."""

from __future__ import annotations

from dataclasses import dataclass
from random import Random
from typing import TYPE_CHECKING

from grid_collector.domain.direction import DirectionType

if TYPE_CHECKING:
    from grid_collector.config.types import GameConfig


@dataclass(frozen=True)
class Coord:
    """A cell position as ``(column, row)``."""

    column: int
    row: int

    def in_bounds(self, config: GameConfig) -> bool:
        return 0 <= self.column < config.columns and 0 <= self.row < config.rows

    def move_to(self, direction: DirectionType, config: GameConfig) -> Coord | None:
        """Return the adjacent coordinate in ``direction``.

        Returns ``None`` when the target leaves the grid. NONE is not a move
        and also yields ``None``.
        """
        if direction is DirectionType.NONE:
            return None
        d_column, d_row = direction.offset
        target = Coord(self.column + d_column, self.row + d_row)
        if not target.in_bounds(config):
            return None
        return target

    @classmethod
    def random(cls, config: GameConfig, rng: Random) -> Coord:
        return cls(rng.randrange(config.columns), rng.randrange(config.rows))

    @classmethod
    def all(cls, config: GameConfig) -> list[Coord]:
        """Return every cell of the grid in row-major order."""
        return [cls(column, row) for row in range(config.rows) for column in range(config.columns)]
