"""Headless live game: selectors drive characters through the move engine."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from grid_collector.domain.character import Character
from grid_collector.domain.coord import Coord
from grid_collector.domain.direction import DirectionType
from grid_collector.domain.map_state import MapState
from grid_collector.engine.move_engine import MoveEngine
from grid_collector.selectors.base import MoveSelector

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MoveRecord:
    """One committed live move."""

    turn: int
    character_id: int
    direction: DirectionType
    coord: Coord
    gained: int
    score: int


@dataclass(frozen=True)
class GameResult:
    scores: tuple[int, ...]
    turn: int
    remaining_points: int
    stalled: bool
    moves: tuple[MoveRecord, ...]

    @property
    def total_score(self) -> int:
        return sum(self.scores)


class GameSession:
    """Owns the live map and characters of one game.

    ``selectors[i]`` chooses moves for ``characters[i]``. A presentation
    layer calls :meth:`step` once per frame; headless callers use
    :meth:`play`. Characters that have not moved yet claim their start
    cells on construction.
    """

    def __init__(
        self,
        engine: MoveEngine,
        map_state: MapState,
        characters: Sequence[Character],
        selectors: Sequence[MoveSelector],
    ) -> None:
        if len(characters) != len(selectors):
            raise ValueError("characters and selectors must have the same length")
        self.engine = engine
        self.map_state = map_state
        self.characters = list(characters)
        self.selectors = list(selectors)
        self.moves: list[MoveRecord] = []
        for character in self.characters:
            if character.turns == 0:
                map_state.place(character)

    def step(self) -> int:
        """Offer every idle character one move; return how many were committed.

        Moves are committed in character order, so a later character sees the
        cells collected earlier in the same round.
        """
        committed = 0
        for character, selector in zip(self.characters, self.selectors, strict=True):
            if self.map_state.is_done():
                break
            if character.walking:
                continue
            turns_before = character.turns
            score_before = character.score
            direction = selector.get_direction(character, self.map_state)
            self.engine.move(character, self.map_state, direction)
            if character.turns > turns_before:
                committed += 1
                self.moves.append(
                    MoveRecord(
                        turn=self.map_state.turn,
                        character_id=character.character_id,
                        direction=direction,
                        coord=character.coord,
                        gained=character.score - score_before,
                        score=character.score,
                    )
                )
        return committed

    def play(self) -> GameResult:
        """Step until the map is done or a round commits nothing."""
        stalled = False
        while not self.map_state.is_done():
            if self.step() == 0:
                stalled = True
                logger.warning("Game stalled at turn %d: no move committed", self.map_state.turn)
                break
        result = self.result(stalled=stalled)
        logger.info(
            "Game finished at turn %d with scores %s", result.turn, list(result.scores)
        )
        return result

    def result(self, stalled: bool = False) -> GameResult:
        return GameResult(
            scores=tuple(character.score for character in self.characters),
            turn=self.map_state.turn,
            remaining_points=self.map_state.remaining_points(),
            stalled=stalled,
            moves=tuple(self.moves),
        )
