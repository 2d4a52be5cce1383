"""Exception types raised by the Letter Boxed solver."""


class LetterBoxedError(Exception):
    """Base class for all solver errors."""


class MalformedGridError(LetterBoxedError, ValueError):
    """The grid is structurally invalid.

    Raised for a wrong number of sides, sides of unequal length, empty sides, repeated
    letters or non-alphabetic characters.
    """


class UnknownLetterError(LetterBoxedError, KeyError):
    """A letter that is not on any side of the grid was looked up."""

    def __init__(self, letter: str) -> None:
        super().__init__(letter)
        self.letter = letter
        """The offending letter."""

    def __str__(self) -> str:
        return f"Letter '{self.letter}' is not on any side of the grid."


class NoSolutionWithinLimitError(LetterBoxedError):
    """No chain of at most `max_guesses` words covers the grid."""

    def __init__(self, max_guesses: int, message: str | None = None) -> None:
        if message is None:
            message = f"No chain of {max_guesses} word(s) or fewer covers every letter."
        super().__init__(message)
        self.max_guesses = max_guesses
        """The guess budget that was exhausted."""


class SearchTimeoutError(NoSolutionWithinLimitError):
    """The wall-clock limit passed before the search finished."""

    def __init__(self, max_guesses: int, time_limit: float | None) -> None:
        super().__init__(
            max_guesses,
            f"Search stopped after {time_limit} s without finding a chain of "
            f"{max_guesses} word(s) or fewer.",
        )
        self.time_limit = time_limit
        """The time limit in seconds, if known."""
