"""Uniformly random legal move."""

from __future__ import annotations

from random import Random
from typing import TYPE_CHECKING

from grid_collector.domain.character import Character
from grid_collector.domain.direction import DirectionType
from grid_collector.domain.map_state import MapState

if TYPE_CHECKING:
    from grid_collector.engine.move_engine import MoveEngine


class RandomSelector:
    def __init__(self, engine: MoveEngine, rng: Random) -> None:
        self.engine = engine
        self.rng = rng

    def get_direction(self, character: Character, map_state: MapState) -> DirectionType:
        legal = self.engine.legal_directions(character)
        if not legal:
            return DirectionType.NONE
        return self.rng.choice(legal)
