"""Simulated-annealing search over initial character placements.

The objective of a candidate placement is the total score its characters
collect when every character plays greedily on a fresh copy of the map.
Each iteration perturbs exactly one character's start cell, cycling through
the characters in index order.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from random import Random

from grid_collector.config.types import AnnealingConfig, GameConfig
from grid_collector.domain.character import Character
from grid_collector.domain.coord import Coord
from grid_collector.domain.map_state import MapState
from grid_collector.engine.move_engine import MoveEngine
from grid_collector.placement.base import RandomPlacement, characters_at
from grid_collector.simulation.position_rollout import PositionRollout

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AnnealingStep:
    """Record of one evaluated candidate."""

    iteration: int
    temperature: float
    candidate_score: int
    best_score: int
    accepted: bool
    improved: bool
    coords: tuple[Coord, ...]


@dataclass(frozen=True)
class PlacementResult:
    """Best placement found and the full search history."""

    coords: tuple[Coord, ...]
    best_score: int
    history: tuple[AnnealingStep, ...]


def should_accept(
    candidate_score: float, best_score: float, temperature: float, draw: float
) -> bool:
    """Metropolis acceptance test with ``draw`` uniform in [0, 1).

    A candidate at least as good as the best has probability >= 1 and is
    always accepted; that branch skips ``exp`` so large gains cannot overflow.
    """
    delta = candidate_score - best_score
    if delta >= 0:
        return True
    return math.exp(delta / temperature) > draw


class PlacementOptimizer:
    """Annealing placement strategy.

    ``rng`` drives the initial placement, the acceptance draws and the
    coordinate perturbations, so a fixed seed reproduces the search.
    """

    def __init__(
        self,
        config: GameConfig,
        engine: MoveEngine,
        rng: Random,
        annealing: AnnealingConfig | None = None,
    ) -> None:
        self.config = config
        self.engine = engine
        self.rng = rng
        self.annealing = annealing or AnnealingConfig()
        self.random_placement = RandomPlacement(config, rng)

    def get_characters(self, map_state: MapState) -> list[Character]:
        return characters_at(self.search(map_state).coords)

    def search(self, map_state: MapState) -> PlacementResult:
        """Run the full annealing schedule against ``map_state``.

        ``map_state`` is only ever cloned; the live map is left untouched.
        """
        rollout = PositionRollout(self.engine, map_state)
        rollout.init(self.random_placement.get_characters(map_state))

        best_score = -1
        best_coords: tuple[Coord, ...] = ()
        history: list[AnnealingStep] = []

        for i in range(self.annealing.repeat):
            score = rollout.run()
            candidate_coords = rollout.first_coords

            temperature = self.annealing.temperature_at(i)
            accepted = should_accept(score, best_score, temperature, self.rng.random())
            improved = score > best_score

            if improved:
                logger.debug("iteration %d: best score %d -> %d", i, best_score, score)
                best_score = score
                best_coords = candidate_coords
                coords = best_coords
            else:
                coords = candidate_coords if accepted else best_coords

            history.append(
                AnnealingStep(
                    iteration=i,
                    temperature=temperature,
                    candidate_score=score,
                    best_score=best_score,
                    accepted=accepted,
                    improved=improved,
                    coords=candidate_coords,
                )
            )

            next_coords = self.perturb(coords, i % self.config.num_characters)
            rollout.delete_all_characters()
            rollout.init(characters_at(next_coords))
        rollout.delete_all_characters()

        logger.info(
            "Placement search finished: best score %d after %d iterations",
            best_score,
            self.annealing.repeat,
        )
        return PlacementResult(coords=best_coords, best_score=best_score, history=tuple(history))

    def perturb(self, coords: tuple[Coord, ...], target_index: int) -> tuple[Coord, ...]:
        """Replace ``coords[target_index]`` with a random cell not in ``coords``."""
        next_coords = list(coords)
        candidate = Coord.random(self.config, self.rng)
        while candidate in next_coords:
            candidate = Coord.random(self.config, self.rng)
        next_coords[target_index] = candidate
        return tuple(next_coords)
