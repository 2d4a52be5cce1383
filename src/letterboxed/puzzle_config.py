"""Parsing of puzzle grids and run configurations."""

from dataclasses import dataclass

from letterboxed.errors import MalformedGridError
from letterboxed.grid import N_SIDES, Grid


@dataclass
class PuzzleConfig:
    """A puzzle configuration."""

    grid: Grid
    """The puzzle grid."""

    max_guesses: int
    """Maximum number of words allowed in a solution."""

    time_limit: float | None = None
    """Wall-clock limit for the search, in seconds. If None, the solver default applies."""

    def __post_init__(self) -> None:
        """Validate the guess budget and time limit."""
        if self.max_guesses < 0:
            raise ValueError(f"max_guesses must be non-negative, got {self.max_guesses}.")
        if self.time_limit is not None and self.time_limit <= 0:
            raise ValueError(f"time_limit must be positive, got {self.time_limit}.")

    def __str__(self) -> str:
        """Return a string representation of the PuzzleConfig."""
        return f"{self.grid} (at most {self.max_guesses} words)"

    def to_dict(self) -> dict:
        """Return a dictionary representation of the PuzzleConfig, for logging."""
        return {
            "grid": str(self.grid),
            "sides": ["".join(side) for side in self.grid.sides],
            "max_guesses": self.max_guesses,
            "time_limit": self.time_limit,
        }


def clean(grid_str: str) -> str:
    """Clean the grid string by removing whitespace and converting all letters to lowercase."""
    return "".join(grid_str.split()).lower()


def parse_grid(grid_str: str) -> Grid:
    """Parse a side-grouped grid string such as `"abc,def,ghi,jkl"`.

    Args:
        grid_str (str): Four comma-separated groups of letters, one group per side.

    Raises:
        MalformedGridError: If the string does not describe a valid grid.
    """
    groups = clean(grid_str).split(",")
    if len(groups) != N_SIDES:
        raise MalformedGridError(
            f"Invalid grid formation: expected {N_SIDES} comma-separated sides, "
            f"got {len(groups)}."
        )
    return Grid(groups)
