"""Placement strategies: random and simulated-annealing start positions."""

from __future__ import annotations

from random import Random

from grid_collector.config.types import AnnealingConfig, GameConfig, PlacementKind
from grid_collector.engine.move_engine import MoveEngine
from grid_collector.placement.annealing import (
    AnnealingStep,
    PlacementOptimizer,
    PlacementResult,
    should_accept,
)
from grid_collector.placement.base import PlacementStrategy, RandomPlacement, characters_at


def create_placement(
    kind: PlacementKind,
    config: GameConfig,
    engine: MoveEngine,
    rng: Random,
    annealing: AnnealingConfig | None = None,
) -> PlacementStrategy:
    """Build the placement strategy for ``kind``."""
    if kind is PlacementKind.RANDOM:
        return RandomPlacement(config, rng)
    if kind is PlacementKind.ANNEALING:
        return PlacementOptimizer(config, engine, rng, annealing=annealing)
    raise ValueError(f"unsupported placement kind: {kind!r}")


__all__ = [
    "AnnealingStep",
    "PlacementOptimizer",
    "PlacementResult",
    "PlacementStrategy",
    "RandomPlacement",
    "characters_at",
    "create_placement",
    "should_accept",
]
