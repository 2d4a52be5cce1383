"""Utility functions for the Letter Boxed solver."""

from collections.abc import Sequence
from itertools import pairwise

from letterboxed.grid import Grid
from letterboxed.wordlist import is_legal_word

TIMESTAMP_FMT = "%Y-%m-%d %H:%M:%S.%f %Z%z"


def time_str(seconds: float) -> str:
    """Convert a time duration in seconds to a human-readable string.

    Args:
        seconds: Time duration in seconds.

    Returns:
        A string formatted as "HH:MM:SS.ss".
    """
    hours, rem = divmod(seconds, 3600)
    minutes, secs = divmod(rem, 60)
    return f"{int(hours):02}:{int(minutes):02}:{secs:05.2f}"


def int_comma(n: int) -> str:
    """Format an integer with commas as thousands separators."""
    return f"{n:,}"


def covered_letters(chain: Sequence[str]) -> set[str]:
    """Return the distinct letters used by the words of a chain."""
    return {ch for word in chain for ch in word}


def is_linked(chain: Sequence[str]) -> bool:
    """Returns whether each word starts with the last letter of the word before it."""
    return all(prev[-1] == word[0] for prev, word in pairwise(chain))


def is_solution(chain: Sequence[str], grid: Grid, max_guesses: int | None = None) -> bool:
    """Returns whether the chain solves the puzzle.

    Args:
        chain (Sequence[str]): The words of the chain, in order.
        grid (Grid): The puzzle grid.
        max_guesses (int | None): If given, the maximum allowed number of words.
    """
    if not chain or not all(chain):
        return False
    if max_guesses is not None and len(chain) > max_guesses:
        return False
    if not all(is_legal_word(word, grid, min_len=1) for word in chain):
        return False
    return is_linked(chain) and covered_letters(chain) == grid.all_letters()
