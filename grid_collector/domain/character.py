"""Agent state: position, heading and collected score."""

from __future__ import annotations

from dataclasses import dataclass, replace

from grid_collector.domain.coord import Coord
from grid_collector.domain.direction import DirectionType


@dataclass
class Character:
    """A grid agent.

    ``coord`` is the committed position. ``start_walk`` only records the
    intended ``target``; the position changes when the move is committed
    through :meth:`MapState.advance`, which lets an animator run between
    intent and commit.
    """

    coord: Coord
    character_id: int = 0
    score: int = 0
    turns: int = 0
    direction: DirectionType = DirectionType.NONE
    walking: bool = False
    target: Coord | None = None

    def start_walk(self, target: Coord, direction: DirectionType) -> None:
        self.target = target
        self.direction = direction
        self.walking = True

    def stop_walk(self) -> None:
        self.walking = False
        self.target = None

    def get_score(self) -> int:
        return self.score

    def clone(self) -> Character:
        # Every field is immutable (ints, frozen Coord, enum), so a field
        # copy is already a deep copy.
        return replace(self)
