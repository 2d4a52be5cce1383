"""Letter Boxed solver configuration."""

from dotenv import find_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Determine the environment file path, or None if not found
ENV_FILE = find_dotenv() or None


class SolverConfig(BaseSettings):
    """Configuration settings for the Letter Boxed solver.

    Every field can be overridden with an environment variable prefixed by `LETTERBOXED_`
    (e.g. `LETTERBOXED_MAX_GUESSES=4`), or in a `.env` file.
    """

    max_guesses: int = Field(default=6, ge=0)
    """Default maximum number of words in a solution. Default: 6."""

    max_guesses_ceiling: int = Field(default=12, ge=0)
    """Largest guess budget `solve_with_retry` will try. Default: 12."""

    min_word_length: int = Field(default=3, ge=1)
    """Shorter words are never legal. Default: 3."""

    word_list_path: str = "words.txt"

    time_limit: float | None = Field(default=None, gt=0)
    """Wall-clock limit for one search, in seconds. If None (default), no limit."""

    log_dir: str = "logs"
    """Directory in which `run` writes its log files. Default: "logs"."""

    write_log: bool = True
    """Whether `run` writes a log file at all. Default: True."""

    model_config = SettingsConfigDict(
        env_prefix="LETTERBOXED_",
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        extra="forbid",
    )


config = SolverConfig()
