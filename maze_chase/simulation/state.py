"""Game lifecycle states, player commands, and per-tick outcomes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from maze_chase.domain.grid import Direction


class GameState(Enum):
    """Lifecycle of one game; every state except RUNNING is terminal."""

    RUNNING = "running"
    WON = "won"
    LOST = "lost"
    QUIT = "quit"

    @property
    def is_terminal(self) -> bool:
        return self is not GameState.RUNNING


class PlayerCommand(Enum):
    """One accepted input from the presentation layer."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    QUIT = "quit"

    @property
    def direction(self) -> Direction | None:
        return _COMMAND_DIRECTIONS.get(self)


_COMMAND_DIRECTIONS: dict[PlayerCommand, Direction] = {
    PlayerCommand.UP: Direction.UP,
    PlayerCommand.DOWN: Direction.DOWN,
    PlayerCommand.LEFT: Direction.LEFT,
    PlayerCommand.RIGHT: Direction.RIGHT,
}


@dataclass(frozen=True)
class TickOutcome:
    """What happened during one tick."""

    state: GameState
    moved: bool = False
    consumed: bool = False
    caught_by: int | None = None
