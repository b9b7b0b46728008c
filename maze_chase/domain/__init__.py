"""Domain layer: grid model, adversaries, and maze topology."""

from maze_chase.domain.adversary import (
    Adversary,
    Prediction,
    format_predictions,
    manhattan,
)
from maze_chase.domain.grid import (
    DIRECTION_ORDER,
    Cell,
    CellKind,
    Direction,
    Grid,
    Marker,
    MarkerKind,
    is_generated_wall,
)
from maze_chase.domain.topology import (
    reachable_cells,
    unreachable_collectibles,
    walkable_graph,
)

__all__ = [
    "Adversary",
    "Cell",
    "CellKind",
    "DIRECTION_ORDER",
    "Direction",
    "Grid",
    "Marker",
    "MarkerKind",
    "Prediction",
    "format_predictions",
    "is_generated_wall",
    "manhattan",
    "reachable_cells",
    "unreachable_collectibles",
    "walkable_graph",
]
