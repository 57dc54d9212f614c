"""Turn-based grid collection game: state model, rollouts and placement search."""

from grid_collector.config.types import AnnealingConfig, GameConfig, PlacementKind, SelectorKind
from grid_collector.domain import Character, Coord, DirectionType, MapState
from grid_collector.engine import MoveEngine
from grid_collector.placement import PlacementOptimizer, RandomPlacement
from grid_collector.session import GameResult, GameSession
from grid_collector.simulation import DirectionRollout, PositionRollout

__all__ = [
    "AnnealingConfig",
    "Character",
    "Coord",
    "DirectionRollout",
    "DirectionType",
    "GameConfig",
    "GameResult",
    "GameSession",
    "MapState",
    "MoveEngine",
    "PlacementKind",
    "PlacementOptimizer",
    "PositionRollout",
    "RandomPlacement",
    "SelectorKind",
]
