"""Breadth-first search for a shortest chain of words covering the grid."""

from dataclasses import dataclass, field
from time import time
from typing import NamedTuple

from letterboxed.errors import NoSolutionWithinLimitError, SearchTimeoutError
from letterboxed.grid import Grid, LetterMask
from letterboxed.solver.graph import ChainGraph


class _State(NamedTuple):
    """A partial chain in the search frontier."""

    last: str
    """Last letter of the chain; the next word must start with it."""
    covered: LetterMask
    """Grid letters covered so far."""
    chain: tuple[str, ...]
    """Words of the chain, in order."""


@dataclass
class SearchStats:
    """Statistics collected during a search."""

    states_generated: int = 0
    """Number of chains built, including those pruned as duplicates."""

    states_expanded: int = 0
    """Number of chains extended by one more word."""

    states_pruned: int = 0
    """Number of chains dropped because their (last letter, coverage) was already seen."""

    max_depth_reached: int = 0
    """Largest chain length (number of words) examined."""

    start_time: float = field(default_factory=time)
    """Timestamp when the search started."""

    end_time: float | None = None
    """Timestamp when the search finished, if it has."""

    @property
    def elapsed(self) -> float:
        """Seconds spent searching (so far, if the search is still running)."""
        return (self.end_time if self.end_time is not None else time()) - self.start_time


def solve_bfs(
    graph: ChainGraph,
    grid: Grid,
    max_guesses: int,
    *,
    time_limit: float | None = None,
    stats: SearchStats | None = None,
) -> list[str]:
    """Find a chain with the fewest words that covers every grid letter.

    Chains are explored level by level (one level per word count), and at each level in the
    graph's stable word order, so the first covering chain found is both minimal and
    deterministic.  A chain is not extended if another chain with the same last letter and
    the same coverage was already seen at the same or a shallower level.

    Args:
        graph (ChainGraph): Legal words for the grid.
        grid (Grid): The puzzle grid.
        max_guesses (int): Maximum number of words in the chain.
        time_limit (float | None): Optional wall-clock limit, in seconds.
        stats (SearchStats | None): If given, filled in with search statistics.

    Returns:
        The words of the chain, in order.

    Raises:
        NoSolutionWithinLimitError: If no chain of at most `max_guesses` words covers the
            grid.
        SearchTimeoutError: If `time_limit` passes before the search finishes.
    """
    if stats is None:
        stats = SearchStats()
    stats.start_time = time()
    deadline = None if time_limit is None else stats.start_time + time_limit

    try:
        if max_guesses <= 0 or len(graph) == 0:
            raise NoSolutionWithinLimitError(max_guesses)

        full = grid.full_mask()
        visited: set[tuple[str, LetterMask]] = set()

        # Level 1: every legal word on its own
        stats.max_depth_reached = 1
        frontier: list[_State] = []
        for edge in graph.edges():
            stats.states_generated += 1
            key = (edge.last, edge.mask)
            if key in visited:
                stats.states_pruned += 1
                continue
            visited.add(key)
            if edge.mask == full:
                return [edge.word]
            frontier.append(_State(edge.last, edge.mask, (edge.word,)))

        depth = 1
        while frontier and depth < max_guesses:
            depth += 1
            stats.max_depth_reached = depth
            next_frontier: list[_State] = []
            for state in frontier:
                if deadline is not None and time() > deadline:
                    raise SearchTimeoutError(max_guesses, time_limit)
                stats.states_expanded += 1
                for edge in graph.edges_from(state.last):
                    stats.states_generated += 1
                    covered = state.covered | edge.mask
                    key = (edge.last, covered)
                    if key in visited:
                        stats.states_pruned += 1
                        continue
                    visited.add(key)
                    chain = state.chain + (edge.word,)
                    if covered == full:
                        return list(chain)
                    next_frontier.append(_State(edge.last, covered, chain))
            frontier = next_frontier

        raise NoSolutionWithinLimitError(max_guesses)
    finally:
        stats.end_time = time()
