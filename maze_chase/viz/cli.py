from __future__ import annotations

import argparse
import logging
from pathlib import Path
from random import Random

from maze_chase.config.types import GameConfig
from maze_chase.simulation.engine import MazeChaseGame
from maze_chase.simulation.state import PlayerCommand
from maze_chase.viz.render import render_board
from maze_chase.viz.terminal import end_message, run_interactive
from maze_chase.viz.theme import get_theme

logger = logging.getLogger(__name__)

_MOVE_COMMANDS = (
    PlayerCommand.UP,
    PlayerCommand.DOWN,
    PlayerCommand.LEFT,
    PlayerCommand.RIGHT,
)


def _build_play_parser(sub: argparse._SubParsersAction) -> None:
    p = sub.add_parser("play", help="Play interactively in the terminal")
    p.set_defaults(func=_handle_play)
    p.add_argument("--seed", type=int, default=None)


def _build_render_parser(sub: argparse._SubParsersAction) -> None:
    p = sub.add_parser("render", help="Advance a headless game and save the board as an image")
    p.set_defaults(func=_handle_render)
    p.add_argument("--output", type=Path, required=True)
    p.add_argument("--seed", type=int, default=0)
    p.add_argument("--ticks", type=_non_negative_int, default=0)


def _non_negative_int(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"expected an integer, got {raw!r}") from exc
    if value < 0:
        raise argparse.ArgumentTypeError("ticks must be >= 0")
    return value


def advance_randomly(game: MazeChaseGame, ticks: int, rng: Random) -> int:
    """Feed up to ``ticks`` random move commands; stops early on a terminal state."""
    played = 0
    while played < ticks and not game.state.is_terminal:
        game.step(rng.choice(_MOVE_COMMANDS))
        played += 1
    return played


def _handle_play(args: argparse.Namespace) -> None:
    game = MazeChaseGame.create(GameConfig(), Random(args.seed))
    final_state = run_interactive(game, get_theme(args.theme))
    ending = end_message(final_state)
    if ending is not None:
        print(ending[0])


def _handle_render(args: argparse.Namespace) -> None:
    # Separate streams so the player's commands do not shift adversary choices.
    game = MazeChaseGame.create(GameConfig(), Random(args.seed))
    played = advance_randomly(game, args.ticks, Random(args.seed + 1))
    output = render_board(
        game.snapshot(),
        args.output,
        theme=get_theme(args.theme),
        title=f"seed {args.seed} | {game.state.value}",
    )
    logger.info("rendered %d tick(s) to %s", played, output)


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint with subcommands."""
    parser = argparse.ArgumentParser(description="Terminal maze-chase game")
    parser.add_argument(
        "--theme",
        type=str,
        default="default",
        help="Theme preset name (default, high-contrast)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    sub = parser.add_subparsers(dest="command", required=True)
    _build_play_parser(sub)
    _build_render_parser(sub)
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")
    args.func(args)


if __name__ == "__main__":
    main()
