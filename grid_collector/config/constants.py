"""Centralized game constants.

All magic numbers shared across modules are defined here. Consuming modules
should import from this module rather than defining their own inline literals.
"""

from __future__ import annotations

GRID_COLUMNS = 5
"""Default grid width in cells."""

GRID_ROWS = 5
"""Default grid height in cells."""

END_TURN = 15
"""Map turn count at which a game ends."""

NUM_CHARACTERS = 3
"""Number of characters placed by the placement search."""

MIN_POINT = 1
"""Smallest point value drawn for a randomly generated cell."""

MAX_POINT = 9
"""Largest point value drawn for a randomly generated cell."""

ANNEALING_REPEAT = 1000
"""Number of candidate placements evaluated by the annealing search."""

ANNEALING_COOLING_HORIZON = 10_000
"""Iteration count over which temperature interpolates from start to end."""

ANNEALING_START_TEMP = 500.0
"""Initial annealing temperature; higher accepts more regressions early."""

ANNEALING_END_TEMP = 10.0
"""Temperature reached at the cooling horizon."""

BEAM_WIDTH = 3
"""Rollouts kept per depth level by the beam-search selector."""

BEAM_DEPTH = 4
"""Number of moves looked ahead by the beam-search selector."""
