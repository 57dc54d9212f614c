"""Tests for grid_collector.config.types validation."""

from __future__ import annotations

import pytest

from grid_collector.config.types import AnnealingConfig, GameConfig


class TestGameConfig:
    def test_default_config(self) -> None:
        config = GameConfig()
        assert (config.columns, config.rows) == (5, 5)
        assert config.end_turn == 15
        assert config.num_characters == 3
        assert config.cell_count == 25

    def test_config_is_frozen(self) -> None:
        config = GameConfig()
        with pytest.raises(AttributeError):
            config.columns = 6  # type: ignore[misc]

    def test_invalid_grid_dimensions(self) -> None:
        with pytest.raises(ValueError, match="grid dimensions must be >= 1"):
            GameConfig(columns=0)

    def test_invalid_end_turn(self) -> None:
        with pytest.raises(ValueError, match="end_turn must be >= 1"):
            GameConfig(end_turn=0)

    def test_characters_must_leave_a_free_cell(self) -> None:
        with pytest.raises(ValueError, match="num_characters must be less than grid cells"):
            GameConfig(columns=2, rows=2, num_characters=4)

    def test_invalid_point_range(self) -> None:
        with pytest.raises(ValueError, match="max_point must be >= min_point"):
            GameConfig(min_point=5, max_point=4)


class TestAnnealingConfig:
    def test_default_schedule(self) -> None:
        config = AnnealingConfig()
        assert config.temperature_at(0) == 500.0
        assert config.temperature_at(10_000) == pytest.approx(10.0)

    def test_default_search_stops_early_on_schedule(self) -> None:
        config = AnnealingConfig()
        # repeat < cooling_horizon: the last iteration is still far from end_temp
        assert config.temperature_at(config.repeat - 1) == pytest.approx(500.0 - 490.0 * 0.0999)

    def test_temperature_overshoots_past_end_temp(self) -> None:
        config = AnnealingConfig(repeat=15, cooling_horizon=10, start_temp=20.0, end_temp=10.0)
        assert config.temperature_at(14) == pytest.approx(6.0)
        assert config.temperature_at(14) < config.end_temp

    def test_non_positive_final_temperature_rejected(self) -> None:
        with pytest.raises(ValueError, match="temperature must stay > 0"):
            AnnealingConfig(repeat=100, cooling_horizon=10, start_temp=500.0, end_temp=10.0)

    def test_invalid_repeat(self) -> None:
        with pytest.raises(ValueError, match="repeat must be >= 1"):
            AnnealingConfig(repeat=0)
