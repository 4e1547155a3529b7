"""
Game Errors

Exception types raised by the core and its collaborators.
"""


class WordleError(Exception):
    """Base class for all game errors."""


class InvalidGuessLength(WordleError, ValueError):
    """Guess does not have the board's word length."""

    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(f"Guess must be exactly {expected} letters (got {actual})")


class InvalidGuessCharacters(WordleError, ValueError):
    """Guess contains something other than letters."""

    def __init__(self, guess: str):
        self.guess = guess
        super().__init__("Guess must contain only letters")


class UnknownWord(WordleError, ValueError):
    """Guess is well-formed but not in the accepted word list."""

    def __init__(self, guess: str):
        self.guess = guess
        super().__init__("Word not in word list")


class RoundAlreadyComplete(WordleError, RuntimeError):
    """A guess was submitted after the round was won or lost."""

    def __init__(self):
        super().__init__("Round is already over")


class RoundNotStarted(WordleError, RuntimeError):
    """A guess was submitted before a secret was set."""

    def __init__(self):
        super().__init__("Call start() before submitting guesses")


class StatsPersistenceFailure(WordleError, OSError):
    """Statistics could not be read from or written to their store."""


class MalformedStats(WordleError, ValueError):
    """Persisted statistics could not be parsed."""
