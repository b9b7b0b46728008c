"""Configuration dataclass for a single game."""

from __future__ import annotations

from dataclasses import dataclass

from maze_chase.config.constants import (
    ADVERSARY_COLORS,
    GRID_HEIGHT,
    GRID_WIDTH,
    NUM_ADVERSARIES,
    PLAYER_START,
)

__all__ = ["GameConfig", "MIN_GRID_DIMENSION"]

MIN_GRID_DIMENSION = 3
"""Smallest width/height that leaves an interior inside the border walls."""


@dataclass(frozen=True)
class GameConfig:
    """Startup parameters for one game."""

    grid_width: int = GRID_WIDTH
    grid_height: int = GRID_HEIGHT
    n_adversaries: int = NUM_ADVERSARIES
    player_start: tuple[int, int] = PLAYER_START
    colors: tuple[str, ...] = ADVERSARY_COLORS
    """Adversary palette, indexed by ``(agent_id - 1) % len(colors)``."""

    def __post_init__(self) -> None:
        if self.grid_width < MIN_GRID_DIMENSION or self.grid_height < MIN_GRID_DIMENSION:
            raise ValueError(f"grid dimensions must be >= {MIN_GRID_DIMENSION}")
        if self.n_adversaries < 0:
            raise ValueError("n_adversaries must be >= 0")
        if not self.colors:
            raise ValueError("colors must not be empty")
        px, py = self.player_start
        if not (0 <= px < self.grid_width and 0 <= py < self.grid_height):
            raise ValueError("player_start must lie inside the grid")

    def adversary_start(self, index: int) -> tuple[int, int]:
        """Start cell for the adversary at 0-based ``index``."""
        return 2 + index * 2, 3 + (index % 2) * 2

    def adversary_color(self, agent_id: int) -> str:
        """Palette entry for a 1-based adversary id, wrapping past the palette end."""
        return self.colors[(agent_id - 1) % len(self.colors)]
