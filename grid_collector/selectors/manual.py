"""Direction selection from external key state."""

from __future__ import annotations

from typing import Protocol

from grid_collector.domain.character import Character
from grid_collector.domain.direction import DirectionType
from grid_collector.domain.map_state import MapState

# Order in which held keys are checked; the first pressed one wins.
KEY_PRIORITY = (
    DirectionType.RIGHT,
    DirectionType.LEFT,
    DirectionType.DOWN,
    DirectionType.UP,
)


class InputProvider(Protocol):
    def is_down(self, direction: DirectionType) -> bool: ...


class KeyState:
    """In-process key state a presentation layer updates from device events."""

    def __init__(self) -> None:
        self._pressed: set[DirectionType] = set()

    def press(self, direction: DirectionType) -> None:
        if direction is not DirectionType.NONE:
            self._pressed.add(direction)

    def release(self, direction: DirectionType) -> None:
        self._pressed.discard(direction)

    def release_all(self) -> None:
        self._pressed.clear()

    def is_down(self, direction: DirectionType) -> bool:
        return direction in self._pressed


class ManualSelector:
    """Polls an input provider; returns NONE when no key is held."""

    def __init__(self, input_provider: InputProvider | None) -> None:
        if input_provider is None:
            raise ValueError("manual selection requires an input provider")
        self.input_provider = input_provider

    def get_direction(self, character: Character, map_state: MapState) -> DirectionType:
        for direction in KEY_PRIORITY:
            if self.input_provider.is_down(direction):
                return direction
        return DirectionType.NONE
