"""Placement strategy protocol and random placement."""

from __future__ import annotations

from collections.abc import Sequence
from random import Random
from typing import Protocol

from grid_collector.config.types import GameConfig
from grid_collector.domain.character import Character
from grid_collector.domain.coord import Coord
from grid_collector.domain.map_state import MapState


class PlacementStrategy(Protocol):
    def get_characters(self, map_state: MapState) -> list[Character]: ...


def characters_at(coords: Sequence[Coord]) -> list[Character]:
    """Create fresh characters numbered in ``coords`` order."""
    return [Character(coord=coord, character_id=i) for i, coord in enumerate(coords)]


class RandomPlacement:
    """Places ``config.num_characters`` characters on distinct random cells."""

    def __init__(self, config: GameConfig, rng: Random) -> None:
        self.config = config
        self.rng = rng

    def random_coords(self) -> list[Coord]:
        return self.rng.sample(Coord.all(self.config), self.config.num_characters)

    def get_characters(self, map_state: MapState) -> list[Character]:
        return characters_at(self.random_coords())
