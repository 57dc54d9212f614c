"""Move orchestration for live play and simulation.

Illegal moves are ignored: a direction whose target leaves the grid leaves
both the character and the map unchanged. Callers that need legality ask
:meth:`MoveEngine.legal_directions` or :meth:`MoveEngine.peek_point`.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from grid_collector.config.types import GameConfig
from grid_collector.domain.character import Character
from grid_collector.domain.coord import Coord
from grid_collector.domain.direction import DirectionType
from grid_collector.domain.map_state import MapState
from grid_collector.engine.animation import Animator, ImmediateAnimator

if TYPE_CHECKING:
    from grid_collector.selectors.base import MoveSelector

logger = logging.getLogger(__name__)


class MoveEngine:
    """Applies moves to characters on a map under one game configuration."""

    def __init__(self, config: GameConfig, animator: Animator | None = None) -> None:
        self.config = config
        self.animator: Animator = animator if animator is not None else ImmediateAnimator()

    def target_of(self, character: Character, direction: DirectionType) -> Coord | None:
        return character.coord.move_to(direction, self.config)

    def move(self, character: Character, map_state: MapState, direction: DirectionType) -> bool:
        """Start a live move; the animator's completion commits it.

        Returns True when a walk was started. Requests for a character that
        is still walking, and requests without an in-bounds target, are
        ignored.
        """
        if character.walking:
            logger.debug(
                "Ignoring %s for busy character %d", direction.name, character.character_id
            )
            return False
        target = self.target_of(character, direction)
        if target is None:
            logger.debug(
                "Ignoring illegal %s for character %d at %s",
                direction.name,
                character.character_id,
                character.coord,
            )
            return False

        start = character.coord
        character.start_walk(target, direction)

        def on_complete() -> None:
            character.stop_walk()
            map_state.advance(character, target)

        self.animator.walk(character, start, target, on_complete)
        return True

    def simulate_one(
        self, character: Character, map_state: MapState, direction: DirectionType
    ) -> bool:
        """Move and commit synchronously; return whether a move was committed."""
        target = self.target_of(character, direction)
        if target is None:
            return False
        character.start_walk(target, direction)
        map_state.advance(character, target)
        character.stop_walk()
        return True

    def simulate_all(
        self,
        characters: Sequence[Character],
        map_state: MapState,
        selector: MoveSelector | None = None,
    ) -> int:
        """Advance every character by one move from the same pre-tick state.

        All directions and targets are chosen before anything is committed.
        Characters aiming at the same cell commit independently: the first
        collects the value, later ones collect what is left. Returns the
        number of committed moves.
        """
        if selector is None:
            from grid_collector.selectors.greedy import GreedySelector

            selector = GreedySelector(self)

        planned: list[tuple[Character, Coord, DirectionType]] = []
        for character in characters:
            direction = selector.get_direction(character, map_state)
            target = self.target_of(character, direction)
            if target is not None:
                planned.append((character, target, direction))

        for character, target, direction in planned:
            character.start_walk(target, direction)
            map_state.advance(character, target)
            character.stop_walk()
        return len(planned)

    def legal_directions(self, character: Character) -> list[DirectionType]:
        """Return in-bounds movement directions in priority order.

        Occupancy by other characters is not considered.
        """
        return [d for d in DirectionType.moves() if self.target_of(character, d) is not None]

    def peek_point(
        self, character: Character, map_state: MapState, direction: DirectionType
    ) -> int:
        """Return the value one step in ``direction``, or 0 when illegal."""
        target = self.target_of(character, direction)
        if target is None:
            return 0
        return map_state.point_at(target)

    get_point_by_direction = peek_point
