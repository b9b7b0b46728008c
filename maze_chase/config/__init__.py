"""Configuration layer: constants and the typed game config."""

from maze_chase.config.constants import (
    ADVERSARY_COLORS,
    GRID_HEIGHT,
    GRID_WIDTH,
    LOSS_MESSAGE,
    NUM_ADVERSARIES,
    PILLAR_X_PERIOD,
    PILLAR_Y_PERIOD,
    PLAYER_START,
    WIN_MESSAGE,
)
from maze_chase.config.types import MIN_GRID_DIMENSION, GameConfig

__all__ = [
    "ADVERSARY_COLORS",
    "GRID_HEIGHT",
    "GRID_WIDTH",
    "GameConfig",
    "LOSS_MESSAGE",
    "MIN_GRID_DIMENSION",
    "NUM_ADVERSARIES",
    "PILLAR_X_PERIOD",
    "PILLAR_Y_PERIOD",
    "PLAYER_START",
    "WIN_MESSAGE",
]
