"""Move selectors: manual, random, greedy and beam-search strategies."""

from __future__ import annotations

from random import Random
from typing import TYPE_CHECKING

from grid_collector.config.types import SelectorKind
from grid_collector.selectors.base import MoveSelector
from grid_collector.selectors.beam_search import BeamSearchSelector
from grid_collector.selectors.greedy import GreedySelector
from grid_collector.selectors.manual import InputProvider, KeyState, ManualSelector
from grid_collector.selectors.random_selector import RandomSelector

if TYPE_CHECKING:
    from grid_collector.engine.move_engine import MoveEngine


def create_selector(
    kind: SelectorKind,
    engine: MoveEngine,
    rng: Random | None = None,
    input_provider: InputProvider | None = None,
) -> MoveSelector:
    """Build the selector for ``kind``."""
    if kind is SelectorKind.MANUAL:
        return ManualSelector(input_provider)
    if kind is SelectorKind.RANDOM:
        return RandomSelector(engine, rng if rng is not None else Random())
    if kind is SelectorKind.GREEDY:
        return GreedySelector(engine)
    if kind is SelectorKind.BEAM_SEARCH:
        return BeamSearchSelector(engine)
    raise ValueError(f"unsupported selector kind: {kind!r}")


__all__ = [
    "BeamSearchSelector",
    "GreedySelector",
    "InputProvider",
    "KeyState",
    "ManualSelector",
    "MoveSelector",
    "RandomSelector",
    "create_selector",
]
