"""Tests for grid_collector.session headless play."""

from __future__ import annotations

import pytest

from grid_collector.config.types import GameConfig
from grid_collector.domain.character import Character
from grid_collector.domain.coord import Coord
from grid_collector.domain.direction import DirectionType
from grid_collector.domain.map_state import MapState
from grid_collector.engine.animation import DeferredAnimator
from grid_collector.engine.move_engine import MoveEngine
from grid_collector.selectors import GreedySelector, KeyState, ManualSelector
from grid_collector.session import GameSession

CONFIG = GameConfig(num_characters=1)


class TestGreedyScenario:
    def test_single_greedy_agent_on_uniform_map(self) -> None:
        engine = MoveEngine(CONFIG)
        map_state = MapState.uniform(CONFIG, 1)
        character = Character(coord=Coord(0, 0))
        session = GameSession(engine, map_state, [character], [GreedySelector(engine)])
        result = session.play()

        assert result.moves[0].coord == Coord(0, 1)
        assert result.moves[0].direction is DirectionType.DOWN
        assert all(move.gained == 1 for move in result.moves)
        scores = [move.score for move in result.moves]
        assert scores == sorted(set(scores))
        assert result.turn == 15
        assert result.scores == (15,)
        assert not result.stalled

    def test_start_cell_claimed(self) -> None:
        engine = MoveEngine(CONFIG)
        map_state = MapState.uniform(CONFIG, 1)
        GameSession(engine, map_state, [Character(coord=Coord(2, 2))], [GreedySelector(engine)])
        assert map_state.point_at(Coord(2, 2)) == 0
        assert map_state.turn == 0


class TestManualSession:
    def test_no_input_stalls(self) -> None:
        engine = MoveEngine(CONFIG)
        map_state = MapState.uniform(CONFIG, 1)
        session = GameSession(
            engine, map_state, [Character(coord=Coord(0, 0))], [ManualSelector(KeyState())]
        )
        result = session.play()
        assert result.stalled
        assert result.turn == 0
        assert result.moves == ()

    def test_held_key_walks_until_wall(self) -> None:
        engine = MoveEngine(CONFIG)
        map_state = MapState.uniform(CONFIG, 1)
        keys = KeyState()
        keys.press(DirectionType.DOWN)
        character = Character(coord=Coord(0, 0))
        session = GameSession(engine, map_state, [character], [ManualSelector(keys)])
        result = session.play()
        assert character.coord == Coord(0, 4)
        assert result.turn == 4
        assert result.scores == (4,)
        assert result.stalled


class TestSessionStep:
    def test_deferred_animator_commits_later(self) -> None:
        animator = DeferredAnimator()
        engine = MoveEngine(CONFIG, animator=animator)
        map_state = MapState.uniform(CONFIG, 1)
        character = Character(coord=Coord(0, 0))
        session = GameSession(engine, map_state, [character], [GreedySelector(engine)])
        assert session.step() == 0
        assert character.walking
        assert session.step() == 0
        assert animator.pending == 1
        animator.complete_all()
        assert character.coord == Coord(0, 1)
        assert map_state.turn == 1

    def test_characters_move_in_order(self) -> None:
        # B sees the cell A collected earlier in the round and turns away.
        config = GameConfig(columns=4, rows=1, num_characters=2)
        engine = MoveEngine(config)
        map_state = MapState(points=[[0, 5, 0, 3]], end_turn=10)
        a = Character(coord=Coord(0, 0), character_id=0)
        b = Character(coord=Coord(2, 0), character_id=1)
        session = GameSession(
            engine, map_state, [a, b], [GreedySelector(engine), GreedySelector(engine)]
        )
        assert session.step() == 2
        assert (a.score, b.score) == (5, 3)
        assert b.coord == Coord(3, 0)
        assert map_state.is_done()

    def test_mismatched_selectors_rejected(self) -> None:
        engine = MoveEngine(CONFIG)
        with pytest.raises(ValueError, match="same length"):
            GameSession(engine, MapState.uniform(CONFIG, 1), [Character(coord=Coord(0, 0))], [])
