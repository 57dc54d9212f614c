"""Engine layer: move orchestration and the animator boundary."""

from grid_collector.engine.animation import Animator, DeferredAnimator, ImmediateAnimator
from grid_collector.engine.move_engine import MoveEngine

__all__ = [
    "Animator",
    "DeferredAnimator",
    "ImmediateAnimator",
    "MoveEngine",
]
