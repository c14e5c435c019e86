"""
Command-line entry point.

Usage:
    minesweeper [ROWS COLS MINES] [--text] [--seed N] [-v]
"""
import argparse
import logging
import random
import sys
from typing import List, Optional, Sequence, TextIO

from .board import DEFAULT, BoardConfig
from .game import Game


def parse_board_config(
    values: Sequence[str], stderr: Optional[TextIO] = None
) -> BoardConfig:
    """
    Turn the optional positional arguments into a board configuration.

    Anything other than three valid integers prints a diagnostic and
    falls back to the defaults instead of aborting.

    Args:
        values: Raw positional arguments (expected: rows, cols, mines).
        stderr: Stream for diagnostics (default: sys.stderr).

    Returns:
        The requested configuration, or DEFAULT.
    """
    stderr = stderr or sys.stderr
    if not values:
        return DEFAULT
    if len(values) != 3:
        print("Usage: minesweeper [rows cols mines]", file=stderr)
        print("Using default values.", file=stderr)
        return DEFAULT

    try:
        rows, cols, mines = (int(value) for value in values)
    except ValueError as e:
        print(f"Invalid argument type (not an integer): {e}", file=stderr)
        print("Using default values.", file=stderr)
        return DEFAULT

    try:
        return BoardConfig(rows, cols, mines)
    except ValueError as e:
        print(f"Invalid argument values: {e}. Using defaults.", file=stderr)
        print("Rows/Cols > 0, Mines >= 0 and < Rows*Cols.", file=stderr)
        return DEFAULT


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="minesweeper",
        description="Play Minesweeper in a window or in the terminal",
    )
    parser.add_argument(
        "board",
        nargs="*",
        metavar="N",
        help="Board shape as: rows cols mines (default: 10 10 15)",
    )
    parser.add_argument(
        "--text", action="store_true", help="Play in the terminal"
    )
    parser.add_argument(
        "--seed", type=int, default=None, help="Seed for mine placement"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Parse arguments and run the chosen front end."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    config = parse_board_config(args.board)
    game = Game.from_config(config, rng=random.Random(args.seed))

    if args.text:
        from .text import TextFrontend

        TextFrontend(game).run()
        return

    from .gui import MinesweeperWindow

    try:
        MinesweeperWindow(game).run()
    except KeyboardInterrupt:
        print("\nGame interrupted by user")


if __name__ == "__main__":
    main()
