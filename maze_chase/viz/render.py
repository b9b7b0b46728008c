"""Matplotlib rendering of a game snapshot to a static image."""

from __future__ import annotations

from pathlib import Path

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import numpy as np  # noqa: E402
from matplotlib.colors import BoundaryNorm, ListedColormap  # noqa: E402

from maze_chase.domain.adversary import format_predictions  # noqa: E402
from maze_chase.domain.grid import CellKind  # noqa: E402
from maze_chase.simulation.snapshot import GameSnapshot  # noqa: E402
from maze_chase.viz.theme import DEFAULT_THEME, Theme  # noqa: E402

FLOOR_CODE = 0
WALL_CODE = 1
COLLECTIBLE_CODE = 2
PLAYER_CODE = 3
FIRST_ADVERSARY_CODE = 4


def build_board_array(snapshot: GameSnapshot) -> np.ndarray:
    """Return (H, W) int array of cell codes; adversaries get one code each, in id order."""
    adversary_codes = {
        a.agent_id: FIRST_ADVERSARY_CODE + i for i, a in enumerate(snapshot.adversaries)
    }
    board = np.full((snapshot.height, snapshot.width), FLOOR_CODE, dtype=int)
    for y, row in enumerate(snapshot.cells):
        for x, cell in enumerate(row):
            if cell.kind is CellKind.WALL:
                board[y, x] = WALL_CODE
            elif cell.kind is CellKind.COLLECTIBLE:
                board[y, x] = COLLECTIBLE_CODE
            elif cell.kind is CellKind.PLAYER:
                board[y, x] = PLAYER_CODE
            elif cell.kind is CellKind.ADVERSARY and cell.agent_id in adversary_codes:
                board[y, x] = adversary_codes[cell.agent_id]
    return board


def _board_cmap(
    snapshot: GameSnapshot, theme: Theme = DEFAULT_THEME
) -> tuple[ListedColormap, BoundaryNorm]:
    """Discrete colormap: floor, wall, collectible, player, then one entry per adversary."""
    colors = [theme.floor_fill, theme.wall_fill, theme.collectible_fill, theme.player_fill]
    colors += [theme.hex_for(a.color) for a in snapshot.adversaries]
    cmap = ListedColormap(colors)
    norm = BoundaryNorm([i - 0.5 for i in range(len(colors) + 1)], cmap.N)
    return cmap, norm


def render_board(
    snapshot: GameSnapshot,
    output_path: Path,
    theme: Theme = DEFAULT_THEME,
    title: str | None = None,
) -> Path:
    """Draw the snapshot and save it; the format follows the file suffix."""
    board = build_board_array(snapshot)
    cmap, norm = _board_cmap(snapshot, theme)

    fig, ax = plt.subplots(figsize=(snapshot.width * 0.45, snapshot.height * 0.45 + 1.2))
    ax.imshow(board, cmap=cmap, norm=norm, origin="upper", aspect="equal")
    for x in range(snapshot.width + 1):
        ax.axvline(x - 0.5, color=theme.grid_line_color, linewidth=0.5)
    for y in range(snapshot.height + 1):
        ax.axhline(y - 0.5, color=theme.grid_line_color, linewidth=0.5)
    px, py = snapshot.player
    ax.text(px, py, "P", ha="center", va="center", fontsize=7, color="black")
    for adversary in snapshot.adversaries:
        ax.text(
            adversary.x,
            adversary.y,
            f"G{adversary.agent_id}",
            ha="center",
            va="center",
            fontsize=6,
            color="white",
        )
    ax.set_xticks([])
    ax.set_yticks([])

    caption = [f"tick {snapshot.tick} | dots left {snapshot.remaining_collectibles}"]
    caption += [
        f"G{a.agent_id}: {format_predictions(list(a.predictions)) or 'no legal move'}"
        for a in snapshot.adversaries
    ]
    ax.set_xlabel("\n".join(caption), fontsize=7, loc="left")
    if title:
        ax.set_title(title, fontsize=9)

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(output_path, bbox_inches="tight")
    plt.close(fig)
    return output_path
