"""Two-agent rollout used to score one character's moves against another.

Construction clones both characters and the map, so advancing a rollout never
touches the state it was derived from.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from grid_collector.domain.character import Character
from grid_collector.domain.direction import DirectionType
from grid_collector.domain.map_state import MapState

if TYPE_CHECKING:
    from grid_collector.engine.move_engine import MoveEngine


class DirectionRollout:
    """Isolated branch holding a primary character, an opponent and a map."""

    def __init__(
        self,
        character: Character,
        opponent: Character,
        map_state: MapState,
        engine: MoveEngine,
        evaluated_score: int = 0,
        first_direction: DirectionType = DirectionType.NONE,
    ) -> None:
        self.character = character.clone()
        self.opponent = opponent.clone()
        self.map_state = map_state.clone()
        self.engine = engine
        self.evaluated_score = evaluated_score
        self.first_direction = first_direction

    def advance_one(self, direction: DirectionType) -> bool:
        """Move the primary character only; the opponent is driven by callers."""
        moved = self.engine.simulate_one(self.character, self.map_state, direction)
        if moved and self.first_direction is DirectionType.NONE:
            self.first_direction = direction
        return moved

    def advance_opponent(self, direction: DirectionType) -> bool:
        return self.engine.simulate_one(self.opponent, self.map_state, direction)

    def is_done(self) -> bool:
        return self.map_state.is_done()

    def evaluate(self) -> int:
        self.evaluated_score = self.character.get_score() - self.opponent.get_score()
        return self.evaluated_score

    def clone(self) -> DirectionRollout:
        return DirectionRollout(
            self.character,
            self.opponent,
            self.map_state,
            self.engine,
            evaluated_score=self.evaluated_score,
            first_direction=self.first_direction,
        )
