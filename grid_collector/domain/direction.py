"""Move vocabulary and unit offsets."""

from __future__ import annotations

from enum import Enum


class DirectionType(Enum):
    """Closed set of move directions.

    Each value carries its ``(d_column, d_row)`` unit offset; rows grow
    downward, so UP decreases the row index.
    """

    NONE = (0, 0)
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def offset(self) -> tuple[int, int]:
        return self.value

    @classmethod
    def moves(cls) -> tuple[DirectionType, ...]:
        """Return the four movement directions in tie-break priority order."""
        return (cls.UP, cls.DOWN, cls.LEFT, cls.RIGHT)
