"""Module for word list management in Letter Boxed."""

from collections.abc import Iterable
from os import PathLike
from pathlib import Path

import numpy as np

from letterboxed.grid import Grid
from letterboxed.solver.config import config as solver_config


def load_word_list(path: str | PathLike | None = None) -> list[str]:
    """Load the word list from a dictionary file, one word per line.

    Args:
        path: Path to the dictionary file.  Defaults to the configured `word_list_path`.

    Returns:
        The words in file order, stripped and lowercased, with blank lines skipped.
    """
    word_list_path = Path(solver_config.word_list_path if path is None else path)
    if not word_list_path.is_file():
        raise FileNotFoundError(f"Word list file not found: {word_list_path}")

    with word_list_path.open("r", encoding="utf-8") as f:
        return [stripped.lower() for line in f if (stripped := line.strip())]


def is_legal_word(word: str, grid: Grid, *, min_len: int = 3) -> bool:
    """Return whether a (lowercase) word can be played on the grid.

    A word is legal if it is long enough, uses only grid letters, and never places two
    letters from the same side next to each other.
    """
    if len(word) < min_len:
        return False
    if not (word.isascii() and word.isalpha()):
        return False
    if not grid.all_letters().issuperset(word):
        return False
    sides = grid.side_indices(word)
    return not np.any(sides[1:] == sides[:-1])


def filter_words(
    words: Iterable[str], grid: Grid, *, min_len: int | None = None
) -> list[str]:
    """Reduce a raw word list to the words that are legal for the grid.

    Args:
        words: Raw words, in any case and order, possibly with duplicates.
        grid: The puzzle grid.
        min_len: Minimum word length.  Defaults to the configured `min_word_length`.

    Returns:
        The legal words, lowercased, without duplicates, in first-seen order.
    """
    if min_len is None:
        min_len = solver_config.min_word_length

    legal: dict[str, None] = {}
    for raw in words:
        word = raw.strip().lower()
        if word not in legal and is_legal_word(word, grid, min_len=min_len):
            legal[word] = None
    return list(legal)
