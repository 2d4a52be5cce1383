"""Classes and functions for representing the puzzle grid."""

from collections.abc import Iterable, Sequence

import numpy as np
from bitarray import frozenbitarray
from bitarray.util import ones, zeros

from letterboxed.errors import MalformedGridError, UnknownLetterError

N_SIDES = 4
"""Number of sides of the (square) grid."""

LetterMask = frozenbitarray
"""Fixed-width bitset with one bit per grid letter, in grid order."""


class Grid:
    """The letters of a Letter Boxed puzzle, grouped by side.

    Each letter is assigned a side index (0-3, in the order the sides were given) and a
    bit index (its position when the sides are read in order), used for coverage masks.
    """

    def __init__(self, sides: Sequence[str | Iterable[str]]) -> None:
        sides = [tuple(str(ch).lower() for ch in side) for side in sides]

        # Check input validity
        if len(sides) != N_SIDES:
            raise MalformedGridError(f"Grid must have {N_SIDES} sides, got {len(sides)}.")
        side_lengths = {len(side) for side in sides}
        if len(side_lengths) != 1:
            raise MalformedGridError(
                f"All sides must have the same length, got {sorted(side_lengths)}."
            )
        if side_lengths == {0}:
            raise MalformedGridError("Sides must not be empty.")

        self.sides: tuple[tuple[str, ...], ...] = tuple(sides)
        """The letters of each side, in input order."""

        self.letters: tuple[str, ...] = ()
        """All grid letters, side by side.  A letter's position is its bit index."""

        self._side_of: dict[str, int] = {}
        self._bit_of: dict[str, int] = {}
        for side_idx, side in enumerate(self.sides):
            for ch in side:
                if len(ch) != 1 or not (ch.isascii() and ch.isalpha()):
                    raise MalformedGridError(f"Invalid grid letter: {ch!r}")
                if ch in self._side_of:
                    raise MalformedGridError(f"Letter '{ch}' appears more than once.")
                self._side_of[ch] = side_idx
                self._bit_of[ch] = len(self.letters)
                self.letters += (ch,)

        # Lookup table from ASCII code to side index (-1 for letters not on the grid)
        self._side_table = np.full(128, -1, dtype=np.int8)
        for ch, side_idx in self._side_of.items():
            self._side_table[ord(ch)] = side_idx

        self._all_letters = frozenset(self.letters)

    def __str__(self) -> str:
        """Returns the grid in its side-grouped textual form, e.g. `abc,def,ghi,jkl`."""
        return ",".join("".join(side) for side in self.sides)

    def __repr__(self) -> str:
        return f"Grid('{self}')"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self.sides == other.sides

    def __hash__(self) -> int:
        return hash(self.sides)

    @property
    def side_length(self) -> int:
        """Number of letters on each side."""
        return len(self.sides[0])

    def __len__(self) -> int:
        """Total number of letters on the grid."""
        return len(self.letters)

    def __contains__(self, letter: object) -> bool:
        return letter in self._all_letters

    def all_letters(self) -> frozenset[str]:
        """The set of letters a solution must cover."""
        return self._all_letters

    def side_index_of(self, letter: str) -> int:
        """Return the index of the side holding `letter`.

        Raises:
            UnknownLetterError: If the letter is not on the grid.
        """
        try:
            return self._side_of[letter]
        except KeyError:
            raise UnknownLetterError(letter) from None

    def is_adjacency_legal(self, a: str, b: str) -> bool:
        """Whether `b` may directly follow `a` inside a word (they lie on different sides)."""
        return self.side_index_of(a) != self.side_index_of(b)

    def side_indices(self, word: str) -> np.ndarray:
        """Return the side index of every letter of `word`, as an int8 array.

        Raises:
            UnknownLetterError: If any letter of the word is not on the grid.
        """
        if not word.isascii():
            raise UnknownLetterError(next(ch for ch in word if not ch.isascii()))
        codes = np.frombuffer(word.encode("ascii"), dtype=np.uint8)
        sides = self._side_table[codes]
        missing = sides < 0
        if missing.any():
            raise UnknownLetterError(word[int(np.argmax(missing))])
        return sides

    def bit_index_of(self, letter: str) -> int:
        """Return the bit index of `letter` in coverage masks."""
        try:
            return self._bit_of[letter]
        except KeyError:
            raise UnknownLetterError(letter) from None

    def empty_mask(self) -> LetterMask:
        """A mask covering no letters."""
        return frozenbitarray(zeros(len(self.letters)))

    def full_mask(self) -> LetterMask:
        """A mask covering every grid letter."""
        return frozenbitarray(ones(len(self.letters)))

    def letter_mask(self, word: str) -> LetterMask:
        """Return the mask of grid letters used by `word`."""
        bits = zeros(len(self.letters))
        for ch in word:
            bits[self.bit_index_of(ch)] = 1
        return frozenbitarray(bits)

    def letters_of_mask(self, mask: LetterMask) -> set[str]:
        """Return the letters whose bits are set in `mask`."""
        return {ch for ch, bit in zip(self.letters, mask) if bit}
