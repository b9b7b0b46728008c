"""Adversary movement policy and next-move prediction.

Movement is a uniform choice among legal neighbours drawn from an injected
``random.Random``. Prediction is a separate, purely informational heuristic
that weights each legal neighbour by its closeness to the player; it never
influences the actual move.
"""

from __future__ import annotations

from dataclasses import dataclass
from fractions import Fraction
from random import Random

from maze_chase.domain.grid import DIRECTION_ORDER, Direction, Grid, MarkerKind

# Raw prediction weight numerator: weight = PREDICTION_SCALE / (distance + 1).
PREDICTION_SCALE = 100


@dataclass(frozen=True)
class Prediction:
    """Estimated chance (truncated percent) that an adversary steps in ``direction``."""

    direction: Direction
    percentage: int


def manhattan(ax: int, ay: int, bx: int, by: int) -> int:
    return abs(ax - bx) + abs(ay - by)


@dataclass
class Adversary:
    """A single pursuing agent."""

    agent_id: int
    x: int
    y: int
    color: str

    @property
    def position(self) -> tuple[int, int]:
        return self.x, self.y

    def legal_moves(self, grid: Grid) -> list[tuple[Direction, int, int]]:
        """Walkable neighbours not held by another adversary, in ``DIRECTION_ORDER``.

        The player's cell counts as legal.
        """
        moves: list[tuple[Direction, int, int]] = []
        for direction in DIRECTION_ORDER:
            nx_, ny_ = self.x + direction.dx, self.y + direction.dy
            if not grid.is_walkable(nx_, ny_):
                continue
            occupant = grid.adversary_at(nx_, ny_)
            if occupant is not None and occupant != self.agent_id:
                continue
            moves.append((direction, nx_, ny_))
        return moves

    def move(self, grid: Grid, rng: Random) -> Direction | None:
        """Step to a uniformly chosen legal neighbour; stay put when boxed in."""
        moves = self.legal_moves(grid)
        if not moves:
            return None
        direction, nx_, ny_ = rng.choice(moves)
        grid.clear_marker(self.x, self.y)
        self.x = nx_
        self.y = ny_
        grid.place_marker(MarkerKind.ADVERSARY, nx_, ny_, agent_id=self.agent_id)
        return direction

    def predict(self, grid: Grid, player_x: int, player_y: int) -> list[Prediction]:
        """Distance-weighted guess at the next move over legal directions only.

        Percentages are truncated, so they may sum to less than 100.
        """
        weights: list[tuple[Direction, Fraction]] = []
        for direction, nx_, ny_ in self.legal_moves(grid):
            distance = manhattan(player_x, player_y, nx_, ny_)
            weights.append((direction, Fraction(PREDICTION_SCALE, distance + 1)))
        total = sum((w for _, w in weights), Fraction(0))
        return [
            Prediction(direction=direction, percentage=int(100 * weight / total))
            for direction, weight in weights
        ]


def format_predictions(predictions: list[Prediction]) -> str:
    """Render predictions as ``"42% Right, 28% Down"``."""
    return ", ".join(f"{p.percentage}% {p.direction.label}" for p in predictions)
