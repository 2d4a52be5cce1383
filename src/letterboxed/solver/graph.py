"""Chain graph: legal words as edges from their first letter to their last letter."""

from collections import defaultdict
from collections.abc import Iterable, Iterator
from typing import NamedTuple

from sortedcontainers import SortedList

from letterboxed.grid import Grid, LetterMask


class WordEdge(NamedTuple):
    """A legal word, seen as an edge of the chain graph."""

    word: str
    first: str
    """First letter of the word (edge source)."""
    last: str
    """Last letter of the word (edge target)."""
    mask: LetterMask
    """Grid letters covered by the word."""


class ChainGraph:
    """Directed multigraph over grid letters.

    Every word contributes one edge from its first letter to its last letter.  Edges leaving
    a letter are kept in lexicographic order of their words, so iteration never depends on
    the order in which the words were supplied.

    Words are assumed to be legal for the grid (see `letterboxed.wordlist.filter_words`).
    """

    def __init__(self, words: Iterable[str], grid: Grid) -> None:
        self.grid = grid

        buckets: defaultdict[str, SortedList] = defaultdict(SortedList)
        self._edges: dict[str, WordEdge] = {}
        for word in words:
            if word in self._edges:
                continue
            edge = WordEdge(word, word[0], word[-1], grid.letter_mask(word))
            self._edges[word] = edge
            buckets[edge.first].add(edge)

        self._out_edges: dict[str, SortedList] = dict(buckets)

    def __len__(self) -> int:
        """Number of edges (words) in the graph."""
        return len(self._edges)

    def __contains__(self, word: object) -> bool:
        return word in self._edges

    def letters(self) -> list[str]:
        """Letters with at least one outgoing edge, in alphabetical order."""
        return sorted(self._out_edges)

    def edge(self, word: str) -> WordEdge:
        """Return the edge for `word`."""
        return self._edges[word]

    def edges(self) -> Iterator[WordEdge]:
        """Iterate over every edge, ordered by word."""
        for letter in self.letters():
            yield from self._out_edges[letter]

    def edges_from(self, letter: str) -> Iterator[WordEdge]:
        """Iterate over the edges leaving `letter`, ordered by word."""
        return iter(self._out_edges.get(letter, ()))

    def words_starting_with(self, letter: str) -> Iterator[str]:
        """Iterate over the words beginning with `letter`, in lexicographic order."""
        return (edge.word for edge in self.edges_from(letter))
