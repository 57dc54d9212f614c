"""Animator collaborator boundary for live moves.

The engine hands a committed intent to an animator together with a
completion callback. The animator must invoke the callback exactly once;
state is only committed inside it.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Callable
from typing import Protocol

from grid_collector.domain.character import Character
from grid_collector.domain.coord import Coord

Completion = Callable[[], None]


class Animator(Protocol):
    def walk(
        self, character: Character, start: Coord, target: Coord, on_complete: Completion
    ) -> None: ...


class ImmediateAnimator:
    """Completes every walk synchronously (headless play)."""

    def walk(
        self, character: Character, start: Coord, target: Coord, on_complete: Completion
    ) -> None:
        on_complete()


class DeferredAnimator:
    """Queues completions until a presentation loop flushes them."""

    def __init__(self) -> None:
        self._pending: deque[Completion] = deque()

    def walk(
        self, character: Character, start: Coord, target: Coord, on_complete: Completion
    ) -> None:
        self._pending.append(on_complete)

    @property
    def pending(self) -> int:
        return len(self._pending)

    def complete_next(self) -> bool:
        """Run the oldest queued completion; return False when none is queued."""
        if not self._pending:
            return False
        self._pending.popleft()()
        return True

    def complete_all(self) -> int:
        """Run every queued completion and return how many ran."""
        completed = 0
        while self.complete_next():
            completed += 1
        return completed
