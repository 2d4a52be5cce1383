"""Letter Boxed Puzzle Solver.

Finds the shortest chain of dictionary words that uses every letter of a Letter Boxed grid.
Consecutive letters of a word must come from different sides of the grid, and each word
must start with the last letter of the word before it.  Uses breadth-first search over
word chains, so the first solution found has the fewest words.
"""

import argparse
import sys

from .errors import MalformedGridError
from .puzzle_config import PuzzleConfig, parse_grid
from .solver import solver
from .solver.config import config as solver_config
from .wordlist import load_word_list

INVALID_GRID_MSG = "Invalid grid formation. Use `--help` to see the correct format."


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line argument parser."""
    parser = argparse.ArgumentParser(
        prog="letterboxed",
        description="Find the shortest chain of words that solves a Letter Boxed puzzle.",
    )
    parser.add_argument(
        "-g",
        "--grid",
        type=str,
        required=True,
        help='The box of letters, one group per side, separated by commas (e.g. "abc,def,ghi,jkl")',
    )
    parser.add_argument(
        "-m",
        "--max-guesses",
        type=int,
        default=None,
        help=f"The maximum number of words to use (default: {solver_config.max_guesses})",
    )
    parser.add_argument(
        "-w",
        "--word-list",
        type=str,
        default=None,
        help=f"Dictionary file, one word per line (default: {solver_config.word_list_path})",
    )
    parser.add_argument(
        "--time-limit",
        type=float,
        default=None,
        help="Give up after this many seconds of searching",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the Letter Boxed solver.

    Returns:
        0 if a solution was found, 2 if not, 1 on invalid input.
    """
    args = build_parser().parse_args(argv)

    max_guesses = solver_config.max_guesses if args.max_guesses is None else args.max_guesses
    try:
        grid = parse_grid(args.grid)
        config = PuzzleConfig(grid=grid, max_guesses=max_guesses, time_limit=args.time_limit)
    except MalformedGridError:
        print(INVALID_GRID_MSG)
        return 1
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    try:
        words = load_word_list(args.word_list)
    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    try:
        solution = solver.run(config, words=words)
    except KeyboardInterrupt:
        print("Solver interrupted by user.")
        return 1
    return 0 if solution is not None else 2
