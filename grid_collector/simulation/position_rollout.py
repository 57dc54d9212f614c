"""Multi-agent rollout scoring a set of starting positions.

Every ``init`` starts from a fresh clone of the origin map, so candidates
evaluated one after another never see each other's collected cells.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from grid_collector.domain.character import Character
from grid_collector.domain.coord import Coord
from grid_collector.domain.map_state import MapState

if TYPE_CHECKING:
    from grid_collector.engine.move_engine import MoveEngine


class PositionRollout:
    """Greedy simultaneous play of all characters until the map is done."""

    def __init__(
        self,
        engine: MoveEngine,
        origin: MapState,
        characters: Sequence[Character] = (),
    ) -> None:
        self.engine = engine
        self.origin = origin
        self.characters: list[Character] = []
        self.first_coords: tuple[Coord, ...] = ()
        self.map_state = origin.clone()
        self.evaluated_score: int | None = None
        if characters:
            self.init(characters)

    def init(self, characters: Sequence[Character]) -> None:
        """Load a new candidate on a fresh copy of the origin map.

        Each character claims its start cell on that copy.
        """
        self.characters = [character.clone() for character in characters]
        self.first_coords = tuple(character.coord for character in self.characters)
        self.map_state = self.origin.clone()
        for character in self.characters:
            self.map_state.place(character)
        self.evaluated_score = None

    def delete_all_characters(self) -> None:
        self.characters = []
        self.first_coords = ()
        self.evaluated_score = None

    def is_done(self) -> bool:
        return self.map_state.is_done()

    def tick(self) -> int:
        return self.engine.simulate_all(self.characters, self.map_state)

    def run(self) -> int:
        """Tick until the map is done and return the evaluated score."""
        while not self.is_done():
            if self.tick() == 0:
                # No character has a legal move; the turn counter would never advance.
                break
        return self.evaluate()

    def evaluate(self) -> int:
        """Store and return the total score collected by all characters."""
        self.evaluated_score = sum(character.get_score() for character in self.characters)
        return self.evaluated_score
