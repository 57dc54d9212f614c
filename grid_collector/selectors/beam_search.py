"""Beam search over direction-pair rollouts.

Each beam node is a :class:`DirectionRollout`. Expanding a node clones it
once per legal direction and advances the clone; the ``width`` best children
by differential score survive to the next depth level.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from grid_collector.config.constants import BEAM_DEPTH, BEAM_WIDTH
from grid_collector.domain.character import Character
from grid_collector.domain.direction import DirectionType
from grid_collector.domain.map_state import MapState
from grid_collector.simulation.rollout import DirectionRollout

if TYPE_CHECKING:
    from grid_collector.engine.move_engine import MoveEngine


class BeamSearchSelector:
    """Choose the first move of the best rollout found by beam search.

    Without an explicit ``opponent`` the differential is measured against a
    zero-score stand-in, i.e. the character's own collected score.
    """

    def __init__(
        self,
        engine: MoveEngine,
        opponent: Character | None = None,
        width: int = BEAM_WIDTH,
        depth: int = BEAM_DEPTH,
    ) -> None:
        if width < 1:
            raise ValueError("beam width must be >= 1")
        if depth < 1:
            raise ValueError("beam depth must be >= 1")
        self.engine = engine
        self.opponent = opponent
        self.width = width
        self.depth = depth

    def get_direction(self, character: Character, map_state: MapState) -> DirectionType:
        opponent = self.opponent or Character(coord=character.coord, character_id=-1)
        root = DirectionRollout(character, opponent, map_state, self.engine)
        beam = [root]
        for _ in range(self.depth):
            children: list[DirectionRollout] = []
            for node in beam:
                if node.is_done():
                    children.append(node)
                    continue
                for direction in self.engine.legal_directions(node.character):
                    child = node.clone()
                    child.advance_one(direction)
                    child.evaluate()
                    children.append(child)
            if not children:
                break
            # sorted() is stable, so equal scores keep priority order.
            beam = sorted(children, key=lambda n: n.evaluated_score, reverse=True)[: self.width]
            if all(node.is_done() for node in beam):
                break

        best = beam[0]
        return best.first_direction
