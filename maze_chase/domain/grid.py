"""Grid model: wall terrain, collectible flags, and cell occupants.

Each cell carries two independent layers. The terrain/marker layer says what
is visibly standing on the cell; the collectible layer records whether a dot
is still present underneath. Markers never touch the collectible layer, so a
vacated cell is restored purely from the persisted flag.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

import numpy as np

from maze_chase.config.constants import PILLAR_X_PERIOD, PILLAR_Y_PERIOD


class Direction(Enum):
    """Orthogonal move with its (dx, dy) delta."""

    RIGHT = (1, 0)
    LEFT = (-1, 0)
    DOWN = (0, 1)
    UP = (0, -1)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    @property
    def label(self) -> str:
        return self.name.capitalize()


# Neighbour enumeration order; prediction output follows it.
DIRECTION_ORDER: tuple[Direction, ...] = (
    Direction.RIGHT,
    Direction.LEFT,
    Direction.DOWN,
    Direction.UP,
)


class MarkerKind(Enum):
    PLAYER = "player"
    ADVERSARY = "adversary"


class CellKind(Enum):
    """Visible content of a cell."""

    WALL = "wall"
    EMPTY = "empty"
    COLLECTIBLE = "collectible"
    PLAYER = "player"
    ADVERSARY = "adversary"


@dataclass(frozen=True)
class Marker:
    """Transient occupant of a cell."""

    kind: MarkerKind
    agent_id: int | None = None


@dataclass(frozen=True)
class Cell:
    """Derived view of one cell; ``agent_id`` is set only for adversaries."""

    kind: CellKind
    agent_id: int | None = None


def is_generated_wall(x: int, y: int, width: int, height: int) -> bool:
    """Wall rule: outer border plus a regular lattice of internal pillars."""
    if x == 0 or y == 0 or x == width - 1 or y == height - 1:
        return True
    return x % PILLAR_X_PERIOD == 0 and y % PILLAR_Y_PERIOD == 0


@dataclass
class Grid:
    """Fixed-size rectangular maze indexed by (x, y)."""

    width: int
    height: int
    walls: np.ndarray  # bool, shape (width, height)
    collectibles: np.ndarray  # bool, shape (width, height)
    markers: dict[tuple[int, int], Marker]

    @classmethod
    def generate(cls, width: int, height: int) -> Grid:
        """Build the maze: walls from the generation rule, a collectible everywhere else."""
        walls = np.zeros((width, height), dtype=bool)
        for x in range(width):
            for y in range(height):
                walls[x, y] = is_generated_wall(x, y, width, height)
        return cls(
            width=width,
            height=height,
            walls=walls,
            collectibles=~walls,
            markers={},
        )

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def _require_in_bounds(self, x: int, y: int) -> None:
        if not self.in_bounds(x, y):
            raise ValueError(f"({x}, {y}) is outside the {self.width}x{self.height} grid")

    def is_wall(self, x: int, y: int) -> bool:
        self._require_in_bounds(x, y)
        return bool(self.walls[x, y])

    def is_walkable(self, x: int, y: int) -> bool:
        """True iff (x, y) is in bounds and not a wall."""
        return self.in_bounds(x, y) and not self.is_wall(x, y)

    def has_collectible(self, x: int, y: int) -> bool:
        self._require_in_bounds(x, y)
        return bool(self.collectibles[x, y])

    def marker_at(self, x: int, y: int) -> Marker | None:
        return self.markers.get((x, y))

    def adversary_at(self, x: int, y: int) -> int | None:
        """Id of the adversary marker on (x, y), if any."""
        marker = self.marker_at(x, y)
        if marker is not None and marker.kind is MarkerKind.ADVERSARY:
            return marker.agent_id
        return None

    def place_marker(
        self, kind: MarkerKind, x: int, y: int, agent_id: int | None = None
    ) -> None:
        """Overwrite the visible occupant of (x, y); the collectible flag is untouched."""
        if not self.is_walkable(x, y):
            raise ValueError(f"cannot place {kind.value} marker on ({x}, {y})")
        if kind is MarkerKind.ADVERSARY and agent_id is None:
            raise ValueError("adversary markers require an agent_id")
        self.markers[(x, y)] = Marker(kind=kind, agent_id=agent_id)

    def clear_marker(self, x: int, y: int) -> None:
        """Remove the occupant so the cell reads from its persisted collectible flag."""
        self.markers.pop((x, y), None)

    def remove_collectible(self, x: int, y: int) -> None:
        self._require_in_bounds(x, y)
        self.collectibles[x, y] = False

    def consume_if_collectible(self, x: int, y: int) -> bool:
        """Clear the collectible flag; True only on the call that actually removed it."""
        self._require_in_bounds(x, y)
        if not self.collectibles[x, y]:
            return False
        self.collectibles[x, y] = False
        return True

    def cell_at(self, x: int, y: int) -> Cell:
        self._require_in_bounds(x, y)
        if self.walls[x, y]:
            return Cell(CellKind.WALL)
        marker = self.marker_at(x, y)
        if marker is not None:
            if marker.kind is MarkerKind.PLAYER:
                return Cell(CellKind.PLAYER)
            return Cell(CellKind.ADVERSARY, marker.agent_id)
        if self.collectibles[x, y]:
            return Cell(CellKind.COLLECTIBLE)
        return Cell(CellKind.EMPTY)

    def collectible_count(self) -> int:
        return int(np.count_nonzero(self.collectibles))

    def walkable_cells(self) -> list[tuple[int, int]]:
        """All non-wall cells in column-major (x, then y) order."""
        return [(int(x), int(y)) for x, y in np.argwhere(~self.walls)]
