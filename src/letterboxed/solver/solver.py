"""Main solver module for Letter Boxed puzzles."""

from collections.abc import Iterable
from datetime import datetime
from io import StringIO
from pathlib import Path
from pprint import pprint
from typing import TextIO

from letterboxed.errors import NoSolutionWithinLimitError, SearchTimeoutError
from letterboxed.grid import Grid
from letterboxed.puzzle_config import PuzzleConfig
from letterboxed.solver.config import config as solver_config
from letterboxed.solver.graph import ChainGraph
from letterboxed.solver.search import SearchStats, solve_bfs
from letterboxed.solver.utils import TIMESTAMP_FMT, int_comma, is_solution, time_str
from letterboxed.wordlist import filter_words, load_word_list


def solve(
    grid: Grid,
    words: Iterable[str],
    *,
    max_guesses: int | None = None,
    time_limit: float | None = None,
    stats: SearchStats | None = None,
) -> list[str]:
    """Find a shortest chain of words from `words` that covers every letter of `grid`.

    Args:
        grid (Grid): The puzzle grid.
        words (Iterable[str]): Raw candidate words, in any case and order.
        max_guesses (int | None): Maximum number of words in the solution.  Defaults to the
            configured `max_guesses`.
        time_limit (float | None): Wall-clock limit in seconds.  Defaults to the configured
            `time_limit`.
        stats (SearchStats | None): If given, filled in with search statistics.

    Raises:
        NoSolutionWithinLimitError: If no chain of at most `max_guesses` words exists.
    """
    if max_guesses is None:
        max_guesses = solver_config.max_guesses
    if time_limit is None:
        time_limit = solver_config.time_limit

    graph = ChainGraph(filter_words(words, grid), grid)
    solution = solve_bfs(graph, grid, max_guesses, time_limit=time_limit, stats=stats)

    if not is_solution(solution, grid, max_guesses):
        raise RuntimeError(f"Search returned an invalid solution: {solution}")
    return solution


def solve_with_retry(
    grid: Grid,
    words: Iterable[str],
    *,
    max_guesses: int | None = None,
    ceiling: int | None = None,
    time_limit: float | None = None,
) -> list[str]:
    """Like `solve`, but retry with one more guess each time no solution is found.

    Retries stop once `ceiling` (default: the configured `max_guesses_ceiling`) has been
    tried, or on a timeout.
    """
    if max_guesses is None:
        max_guesses = solver_config.max_guesses
    if ceiling is None:
        ceiling = solver_config.max_guesses_ceiling

    words = list(words)
    while True:
        try:
            return solve(grid, words, max_guesses=max_guesses, time_limit=time_limit)
        except SearchTimeoutError:
            raise
        except NoSolutionWithinLimitError:
            if max_guesses >= ceiling:
                raise
            max_guesses += 1


def run(config: PuzzleConfig, *, words: Iterable[str] | None = None) -> list[str] | None:
    """Run the solver on the given configuration and report the result.

    Progress is written to a log file under the configured `log_dir` (unless `write_log` is
    off); the solution, or a failure message, is printed to stdout.

    Args:
        config (PuzzleConfig): The puzzle to solve.
        words (Iterable[str] | None): Candidate words.  If None, the configured word list
            file is loaded.

    Returns:
        The solution, or None if there is none within the guess budget.
    """
    if words is None:
        words = load_word_list()

    if solver_config.write_log:
        grid_str = str(config.grid).replace(",", "-")
        logfile = Path(solver_config.log_dir) / f"{grid_str}-{config.max_guesses}.log"
        logfile.parent.mkdir(parents=True, exist_ok=True)
        with open(logfile, "w", encoding="utf-8") as logf:
            solution = solve_one(config, words, logf=logf)
    else:
        solution = solve_one(config, words, logf=StringIO())

    if solution is None:
        print("No solution found.")
    else:
        print(f"Solution found: {solution}")
    return solution


def solve_one(
    puzzle_config: PuzzleConfig, words: Iterable[str], *, logf: TextIO
) -> list[str] | None:
    """Attempt to solve a puzzle, logging the process.

    Args:
        puzzle_config (PuzzleConfig): The puzzle to solve.
        words (Iterable[str]): Candidate words.
        logf: File object to log the solving process.
    """
    grid = puzzle_config.grid
    print(f"Grid: {grid}", file=logf, flush=True)
    for i, side in enumerate(grid.sides):
        print(f"  side {i}: {' '.join(side)}", file=logf, flush=True)
    print("Puzzle config:", file=logf, flush=True)
    pprint(puzzle_config.to_dict(), stream=logf, width=120)
    print("Solver config:", file=logf, flush=True)
    pprint(solver_config.model_dump(), stream=logf, width=120)
    print("", file=logf, flush=True)

    words = list(words)
    legal_words = filter_words(words, grid)
    print(
        f"Words: {int_comma(len(words))} loaded, {int_comma(len(legal_words))} legal",
        file=logf,
        flush=True,
    )
    graph = ChainGraph(legal_words, grid)

    time_limit = puzzle_config.time_limit
    if time_limit is None:
        time_limit = solver_config.time_limit

    stats = SearchStats()
    solution: list[str] | None = None
    try:
        solution = solve_bfs(
            graph,
            grid,
            puzzle_config.max_guesses,
            time_limit=time_limit,
            stats=stats,
        )
    except NoSolutionWithinLimitError as e:
        print(f"No solution found: {e}", file=logf, flush=True)

    start_time_str = datetime.fromtimestamp(stats.start_time).astimezone().strftime(TIMESTAMP_FMT)
    print(f"Start time: {start_time_str}", file=logf, flush=True)
    print(f"Depth reached: {stats.max_depth_reached}", file=logf, flush=True)
    print(f"States generated: {int_comma(stats.states_generated)}", file=logf, flush=True)
    print(f"States expanded: {int_comma(stats.states_expanded)}", file=logf, flush=True)
    print(f"States pruned: {int_comma(stats.states_pruned)}", file=logf, flush=True)
    print(f"Time taken: {time_str(stats.elapsed)}", file=logf, flush=True)

    if solution is not None:
        if not is_solution(solution, grid, puzzle_config.max_guesses):
            raise RuntimeError(f"Search returned an invalid solution: {solution}")
        print(f"Solution found: {' '.join(solution)}", file=logf, flush=True)
    return solution
