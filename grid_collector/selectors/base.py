"""Shared capability of all move selectors."""

from __future__ import annotations

from typing import Protocol

from grid_collector.domain.character import Character
from grid_collector.domain.direction import DirectionType
from grid_collector.domain.map_state import MapState


class MoveSelector(Protocol):
    def get_direction(self, character: Character, map_state: MapState) -> DirectionType: ...
