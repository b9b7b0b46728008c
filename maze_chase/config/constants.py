"""Centralized game constants.

Grid dimensions and adversary count are fixed at startup. Consuming modules
should import from this module rather than defining their own literals.
"""

from __future__ import annotations

GRID_WIDTH = 15
"""Default grid width in cells."""

GRID_HEIGHT = 10
"""Default grid height in cells."""

NUM_ADVERSARIES = 4
"""Default number of adversaries per game."""

PLAYER_START: tuple[int, int] = (1, 1)
"""Player start cell (x, y)."""

PILLAR_X_PERIOD = 4
"""Internal pillars sit on columns where x is a multiple of this value..."""

PILLAR_Y_PERIOD = 3
"""...and rows where y is a multiple of this value."""

ADVERSARY_COLORS: tuple[str, ...] = ("red", "green", "blue", "magenta")
"""Adversary display palette; ids beyond its length wrap around."""

WIN_MESSAGE = "Congratulations! You cleared all dots and win!"
LOSS_MESSAGE = "Game Over! You were caught by a ghost."
