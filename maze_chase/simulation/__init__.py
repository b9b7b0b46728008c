"""Simulation layer: tick controller, game states, and read-only snapshots."""

from maze_chase.simulation.engine import MazeChaseGame
from maze_chase.simulation.snapshot import AdversaryView, GameSnapshot, capture_cells
from maze_chase.simulation.state import GameState, PlayerCommand, TickOutcome

__all__ = [
    "AdversaryView",
    "GameSnapshot",
    "GameState",
    "MazeChaseGame",
    "PlayerCommand",
    "TickOutcome",
    "capture_cells",
]
