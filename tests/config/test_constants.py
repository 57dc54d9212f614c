from grid_collector.config.constants import (
    ANNEALING_COOLING_HORIZON,
    ANNEALING_END_TEMP,
    ANNEALING_REPEAT,
    ANNEALING_START_TEMP,
    BEAM_DEPTH,
    BEAM_WIDTH,
    END_TURN,
    GRID_COLUMNS,
    GRID_ROWS,
    MAX_POINT,
    MIN_POINT,
    NUM_CHARACTERS,
)


def test_grid_dimensions_are_positive_ints() -> None:
    assert isinstance(GRID_COLUMNS, int) and GRID_COLUMNS > 0
    assert isinstance(GRID_ROWS, int) and GRID_ROWS > 0


def test_num_characters_fits_in_grid() -> None:
    assert isinstance(NUM_CHARACTERS, int) and NUM_CHARACTERS > 0
    assert NUM_CHARACTERS < GRID_COLUMNS * GRID_ROWS


def test_end_turn_is_positive() -> None:
    assert isinstance(END_TURN, int) and END_TURN > 0


def test_point_range_is_ordered() -> None:
    assert 0 <= MIN_POINT <= MAX_POINT


def test_annealing_defaults() -> None:
    assert ANNEALING_REPEAT == 1000
    assert ANNEALING_COOLING_HORIZON == 10_000
    assert ANNEALING_START_TEMP == 500.0
    assert ANNEALING_END_TEMP == 10.0


def test_beam_parameters_are_positive() -> None:
    assert BEAM_WIDTH >= 1
    assert BEAM_DEPTH >= 1
