"""One-step lookahead: take the most valuable adjacent cell."""

from __future__ import annotations

from typing import TYPE_CHECKING

from grid_collector.domain.character import Character
from grid_collector.domain.direction import DirectionType
from grid_collector.domain.map_state import MapState

if TYPE_CHECKING:
    from grid_collector.engine.move_engine import MoveEngine


class GreedySelector:
    """Pick the legal direction whose target cell holds the most points.

    Ties resolve to the earliest of UP, DOWN, LEFT, RIGHT, so the choice is
    a pure function of the character position and the map.
    """

    def __init__(self, engine: MoveEngine) -> None:
        self.engine = engine

    def get_direction(self, character: Character, map_state: MapState) -> DirectionType:
        legal = self.engine.legal_directions(character)
        if not legal:
            return DirectionType.NONE
        # max() keeps the first maximal element, which preserves priority order.
        return max(legal, key=lambda d: self.engine.peek_point(character, map_state, d))
