"""Presentation layer: themes, curses front end, image renderer, and CLI."""

from maze_chase.viz.cli import main
from maze_chase.viz.render import build_board_array, render_board
from maze_chase.viz.terminal import (
    board_rows,
    cell_glyph,
    command_for_key,
    end_message,
    play,
    run_interactive,
    status_lines,
)
from maze_chase.viz.theme import (
    DEFAULT_THEME,
    HIGH_CONTRAST_THEME,
    REGISTERED_THEMES,
    Theme,
    get_theme,
)

__all__ = [
    "DEFAULT_THEME",
    "HIGH_CONTRAST_THEME",
    "REGISTERED_THEMES",
    "Theme",
    "board_rows",
    "build_board_array",
    "cell_glyph",
    "command_for_key",
    "end_message",
    "get_theme",
    "main",
    "play",
    "render_board",
    "run_interactive",
    "status_lines",
]
