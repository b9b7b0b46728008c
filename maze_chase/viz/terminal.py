"""curses front end: draws snapshots and turns key presses into commands.

Everything that decides *what* to draw or *which* command a key means is a
plain function over snapshots and key codes; only ``TerminalSession`` touches
the curses screen.
"""

from __future__ import annotations

import curses
import logging

from maze_chase.config.constants import LOSS_MESSAGE, WIN_MESSAGE
from maze_chase.domain.adversary import format_predictions
from maze_chase.domain.grid import Cell, CellKind
from maze_chase.simulation.engine import MazeChaseGame
from maze_chase.simulation.snapshot import GameSnapshot
from maze_chase.simulation.state import GameState, PlayerCommand
from maze_chase.viz.theme import DEFAULT_THEME, TERMINAL_COLOR_NAMES, Theme

logger = logging.getLogger(__name__)

ESCAPE_KEY = 27
CELL_WIDTH = 3

KEY_COMMANDS: dict[int, PlayerCommand] = {
    curses.KEY_UP: PlayerCommand.UP,
    curses.KEY_DOWN: PlayerCommand.DOWN,
    curses.KEY_LEFT: PlayerCommand.LEFT,
    curses.KEY_RIGHT: PlayerCommand.RIGHT,
    ord("w"): PlayerCommand.UP,
    ord("s"): PlayerCommand.DOWN,
    ord("a"): PlayerCommand.LEFT,
    ord("d"): PlayerCommand.RIGHT,
    ord("q"): PlayerCommand.QUIT,
    ESCAPE_KEY: PlayerCommand.QUIT,
}

HELP_LINE = "arrows/WASD: move | q/Esc: quit"


def command_for_key(key: int) -> PlayerCommand | None:
    """Map a curses key code to a command; unknown keys map to None."""
    return KEY_COMMANDS.get(key)


def cell_glyph(cell: Cell) -> str:
    if cell.kind is CellKind.WALL:
        return "#"
    if cell.kind is CellKind.COLLECTIBLE:
        return "."
    if cell.kind is CellKind.PLAYER:
        return "P"
    if cell.kind is CellKind.ADVERSARY:
        return f"G{cell.agent_id}"
    return " "


def board_rows(snapshot: GameSnapshot, theme: Theme = DEFAULT_THEME) -> list[list[tuple[str, str]]]:
    """Per-row ``(glyph, color_name)`` pairs for every cell."""
    adversary_colors = {a.agent_id: a.color for a in snapshot.adversaries}
    rows: list[list[tuple[str, str]]] = []
    for row in snapshot.cells:
        styled: list[tuple[str, str]] = []
        for cell in row:
            if cell.kind is CellKind.PLAYER:
                color = theme.player_color
            elif cell.kind is CellKind.ADVERSARY:
                color = adversary_colors.get(cell.agent_id or 0, theme.player_color)
            elif cell.kind is CellKind.WALL:
                color = theme.wall_color
            else:
                color = theme.collectible_color
            styled.append((cell_glyph(cell), color))
        rows.append(styled)
    return rows


def status_lines(snapshot: GameSnapshot, theme: Theme = DEFAULT_THEME) -> list[tuple[str, str]]:
    """Player coordinates, dots left, and one prediction line per adversary."""
    px, py = snapshot.player
    lines = [
        (f"Player ({px};{py})  Dots left: {snapshot.remaining_collectibles}", theme.status_color)
    ]
    for adversary in snapshot.adversaries:
        text = (
            f"G{adversary.agent_id} ({adversary.x};{adversary.y}) -> Next Move: "
            f"{format_predictions(list(adversary.predictions))}"
        )
        lines.append((text, adversary.color))
    return lines


def end_message(state: GameState, theme: Theme = DEFAULT_THEME) -> tuple[str, str] | None:
    """Final ``(message, color_name)`` for a finished game; quitting shows nothing."""
    if state is GameState.WON:
        return WIN_MESSAGE, theme.win_color
    if state is GameState.LOST:
        return LOSS_MESSAGE, theme.loss_color
    return None


class TerminalSession:
    """Thin wrapper over a curses window."""

    def __init__(self, stdscr: curses.window, theme: Theme = DEFAULT_THEME) -> None:
        self.stdscr = stdscr
        self.theme = theme
        self._pairs: dict[str, int] = {}
        curses.curs_set(0)
        stdscr.keypad(True)
        stdscr.nodelay(False)
        if curses.has_colors():
            curses.start_color()
            for pair_id, name in enumerate(TERMINAL_COLOR_NAMES, start=1):
                curses.init_pair(pair_id, getattr(curses, f"COLOR_{name.upper()}"), curses.COLOR_BLACK)
                self._pairs[name] = pair_id

    def _attr(self, color_name: str) -> int:
        pair_id = self._pairs.get(color_name)
        return curses.color_pair(pair_id) if pair_id is not None else curses.A_NORMAL

    def _put(self, row: int, col: int, text: str, color_name: str) -> None:
        max_y, max_x = self.stdscr.getmaxyx()
        if row >= max_y - 1 or col >= max_x - 1:
            return
        self.stdscr.addstr(row, col, text[: max_x - 1 - col], self._attr(color_name))

    def draw(self, snapshot: GameSnapshot) -> None:
        self.stdscr.clear()
        for y, row in enumerate(board_rows(snapshot, self.theme)):
            for x, (glyph, color) in enumerate(row):
                self._put(y, x * CELL_WIDTH, glyph.ljust(CELL_WIDTH), color)
        offset = snapshot.height + 1
        for i, (text, color) in enumerate(status_lines(snapshot, self.theme)):
            self._put(offset + i, 0, text, color)
        self._put(offset + len(snapshot.adversaries) + 2, 0, HELP_LINE, self.theme.status_color)
        self.stdscr.refresh()

    def show_ending(self, snapshot: GameSnapshot, message: str, color_name: str) -> None:
        """Draw the final frame with the end message and wait for any key."""
        self.draw(snapshot)
        self._put(snapshot.height + len(snapshot.adversaries) + 4, 0, message, color_name)
        self.stdscr.refresh()
        self.stdscr.getch()

    def read_command(self) -> PlayerCommand:
        """Block until a recognised key is pressed."""
        while True:
            command = command_for_key(self.stdscr.getch())
            if command is not None:
                return command


def play(stdscr: curses.window, game: MazeChaseGame, theme: Theme = DEFAULT_THEME) -> GameState:
    """Run the render/input/tick loop until the game reaches a terminal state."""
    session = TerminalSession(stdscr, theme)
    while not game.state.is_terminal:
        session.draw(game.snapshot())
        game.step(session.read_command())
    ending = end_message(game.state, theme)
    if ending is not None:
        session.show_ending(game.snapshot(), *ending)
    logger.info("game finished: %s after %d ticks", game.state.value, game.tick)
    return game.state


def run_interactive(game: MazeChaseGame, theme: Theme = DEFAULT_THEME) -> GameState:
    """Play inside ``curses.wrapper`` so the terminal is restored on exit."""
    return curses.wrapper(play, game, theme)
