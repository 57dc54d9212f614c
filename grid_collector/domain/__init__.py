"""Domain layer: coordinates, directions, characters and the map state."""

from grid_collector.domain.character import Character
from grid_collector.domain.coord import Coord
from grid_collector.domain.direction import DirectionType
from grid_collector.domain.map_state import MapState

__all__ = [
    "Character",
    "Coord",
    "DirectionType",
    "MapState",
]
