"""Command-line driver that plays a scripted snake game."""

from __future__ import annotations

import argparse
import logging
import sys

from snake_controller.errors import ConfigurationError
from snake_controller.messages import Direction

logger = logging.getLogger(__name__)

# A move letter turns, then ticks; "." only ticks.
_KEEP_HEADING = "."


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="snake-controller",
        description="Drive the snake controller from a configuration string.",
    )
    sub = parser.add_subparsers(dest="command", help="Available commands.")

    play_p = sub.add_parser("play", help="Play a scripted game.")
    play_p.add_argument(
        "config",
        help='Configuration string, e.g. "W 10 10 F 5 5 S U 3 1 1 1 2 1 3".',
    )
    play_p.add_argument(
        "--moves", type=str, default="",
        help="Space-separated moves: U, D, L, R or '.' for a plain tick.",
    )
    play_p.add_argument("--seed", type=int, default=None)
    play_p.add_argument(
        "--max-food-retries", type=int, default=100,
    )
    return parser


def parse_moves(text: str) -> list[Direction | None]:
    """Turn a move script into directions, ``None`` meaning keep heading."""
    moves: list[Direction | None] = []
    for token in text.split():
        if token == _KEEP_HEADING:
            moves.append(None)
            continue
        try:
            moves.append(Direction.from_char(token.upper()))
        except KeyError:
            raise ValueError(f"Unknown move {token!r}.") from None
    return moves


def _run_play(args: argparse.Namespace) -> int:
    from snake_controller.session import GameSession, SessionConfig

    try:
        moves = parse_moves(args.moves)
    except ValueError as exc:
        logger.error("%s", exc)
        return 2

    try:
        session = GameSession(
            args.config,
            SessionConfig(
                seed=args.seed, max_food_retries=args.max_food_retries,
            ),
        )
    except (ConfigurationError, ValueError) as exc:
        logger.error("%s", exc)
        return 2

    state = session.run(moves)
    print(session.board.render())  # noqa: T201
    print(  # noqa: T201
        f"ticks={state['tick']} score={state['score']} "
        f"game_over={state['game_over']}"
    )
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``snake-controller`` CLI."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    handlers = {
        "play": _run_play,
    }
    return handlers[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
