"""Read-only game views handed to presentation code."""

from __future__ import annotations

from dataclasses import dataclass

from maze_chase.domain.adversary import Prediction
from maze_chase.domain.grid import Cell, Grid
from maze_chase.simulation.state import GameState


@dataclass(frozen=True)
class AdversaryView:
    agent_id: int
    x: int
    y: int
    color: str
    predictions: tuple[Prediction, ...]


@dataclass(frozen=True)
class GameSnapshot:
    """Immutable copy of everything a renderer needs for one frame."""

    width: int
    height: int
    cells: tuple[tuple[Cell, ...], ...]  # indexed [y][x]
    player: tuple[int, int]
    adversaries: tuple[AdversaryView, ...]
    remaining_collectibles: int
    state: GameState
    tick: int

    def cell(self, x: int, y: int) -> Cell:
        return self.cells[y][x]


def capture_cells(grid: Grid) -> tuple[tuple[Cell, ...], ...]:
    """Row-major copy of the visible grid contents."""
    return tuple(
        tuple(grid.cell_at(x, y) for x in range(grid.width)) for y in range(grid.height)
    )
