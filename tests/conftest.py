"""Shared fixtures for the Letter Boxed tests."""

import pytest

from letterboxed.grid import Grid
from letterboxed.solver.config import config as solver_config

# Three legal words that chain into the only covering solution: adgj -> jbehk -> kcfil
SCENARIO_WORDS = [
    "adgj",
    "jbehk",
    "kcfil",
    "jak",
    "beg",
    "bad",  # b, a on the same side
    "dog",  # o is not on the grid
    "fig",  # i, g on the same side
    "ace",  # a, c on the same side
    "xyz",
]


@pytest.fixture
def grid() -> Grid:
    """The grid abc,def,ghi,jkl."""
    return Grid(["abc", "def", "ghi", "jkl"])


@pytest.fixture
def scenario_words() -> list[str]:
    """Word list with a known three-word minimal solution on the abc,def,ghi,jkl grid."""
    return list(SCENARIO_WORDS)


@pytest.fixture(autouse=True)
def log_to_tmp(tmp_path, monkeypatch):
    """Keep solver log files out of the working directory."""
    monkeypatch.setattr(solver_config, "log_dir", str(tmp_path / "logs"))
    monkeypatch.setattr(solver_config, "time_limit", None)
