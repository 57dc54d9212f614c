"""Rollouts: isolated simulation branches cloned from live state."""

from grid_collector.simulation.position_rollout import PositionRollout
from grid_collector.simulation.rollout import DirectionRollout

__all__ = [
    "DirectionRollout",
    "PositionRollout",
]
