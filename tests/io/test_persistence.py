"""Tests for grid_collector.io Parquet and JSON writers."""

from __future__ import annotations

import json
from pathlib import Path
from random import Random

import pyarrow.parquet as pq

from grid_collector.config.types import AnnealingConfig, GameConfig
from grid_collector.domain.character import Character
from grid_collector.domain.coord import Coord
from grid_collector.domain.map_state import MapState
from grid_collector.engine.move_engine import MoveEngine
from grid_collector.io.persistence import (
    write_annealing_log,
    write_game_log,
    write_game_summary,
    write_placement,
)
from grid_collector.io.schemas import ANNEALING_LOG_SCHEMA, GAME_LOG_SCHEMA
from grid_collector.placement import PlacementOptimizer
from grid_collector.selectors import GreedySelector
from grid_collector.session import GameSession

CONFIG = GameConfig()
ANNEALING = AnnealingConfig(repeat=25)


def _search():
    optimizer = PlacementOptimizer(CONFIG, MoveEngine(CONFIG), Random(0), annealing=ANNEALING)
    return optimizer.search(MapState.create(CONFIG, Random(0)))


class TestAnnealingArtifacts:
    def test_annealing_log_columns_and_rows(self, tmp_path: Path) -> None:
        result = _search()
        path = write_annealing_log(result.history, tmp_path)
        assert path == tmp_path / "logs" / "annealing_log.parquet"
        table = pq.read_table(path)
        assert set(table.column_names) == set(ANNEALING_LOG_SCHEMA.names)
        assert table.num_rows == ANNEALING.repeat
        assert table.column("iteration").to_pylist() == list(range(ANNEALING.repeat))
        for cols, rows in zip(
            table.column("columns").to_pylist(), table.column("rows").to_pylist()
        ):
            assert len(cols) == len(rows) == CONFIG.num_characters

    def test_placement_json(self, tmp_path: Path) -> None:
        result = _search()
        path = write_placement(result, CONFIG, ANNEALING, tmp_path)
        payload = json.loads(path.read_text())
        assert payload["best_score"] == result.best_score
        assert payload["coords"] == [[c.column, c.row] for c in result.coords]
        assert payload["annealing"]["repeat"] == 25
        assert payload["game"]["end_turn"] == 15


class TestGameArtifacts:
    def test_game_log_and_summary(self, tmp_path: Path) -> None:
        engine = MoveEngine(CONFIG)
        characters = [
            Character(coord=Coord(0, 0), character_id=0),
            Character(coord=Coord(4, 4), character_id=1),
        ]
        session = GameSession(
            engine,
            MapState.uniform(CONFIG, 1),
            characters,
            [GreedySelector(engine), GreedySelector(engine)],
        )
        game = session.play()

        table = pq.read_table(write_game_log(game.moves, tmp_path))
        assert set(table.column_names) == set(GAME_LOG_SCHEMA.names)
        assert table.num_rows == len(game.moves) == 15
        assert set(table.column("direction").to_pylist()) <= {"UP", "DOWN", "LEFT", "RIGHT"}

        summary = json.loads(write_game_summary(game, CONFIG, tmp_path).read_text())
        assert summary["scores"] == list(game.scores)
        assert summary["total_score"] == game.total_score
        assert summary["turn"] == 15
        assert summary["stalled"] is False
