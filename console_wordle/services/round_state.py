"""
Round State

Tracks the guesses of one round against a fixed secret and enforces the
attempt limit.
"""

from typing import List, Optional, Tuple

from ..config.game_settings import BOARD_COLS, MAX_ATTEMPTS
from ..models.errors import (
    InvalidGuessCharacters, InvalidGuessLength, RoundAlreadyComplete, RoundNotStarted,
)
from ..models.game import GuessRecord, LetterStatus, RoundStatus
from .evaluator import evaluate, is_solved


def normalize_word(word: str) -> str:
    return word.strip().upper()


def check_word_shape(word: str, word_length: int = BOARD_COLS) -> None:
    """
    Raises InvalidGuessLength or InvalidGuessCharacters for a malformed word.

    The word is expected to be normalized already.
    """
    if len(word) != word_length:
        raise InvalidGuessLength(word_length, len(word))
    if not (word.isalpha() and word.isascii()):
        raise InvalidGuessCharacters(word)


class RoundState:
    """
    One round: a secret, the guesses made against it, and the outcome.

    The round is WON as soon as a guess evaluates to all CORRECT and LOST
    when the last allowed attempt misses.
    """

    def __init__(self, secret: Optional[str] = None,
                 max_attempts: int = MAX_ATTEMPTS, word_length: int = BOARD_COLS):
        self.max_attempts = max_attempts
        self.word_length = word_length
        self._secret: Optional[str] = None
        self._history: List[GuessRecord] = []
        self._status = RoundStatus.IN_PROGRESS
        if secret is not None:
            self.start(secret)

    def start(self, secret: str) -> None:
        """Begin a round against secret with an empty guess history."""
        secret = normalize_word(secret)
        check_word_shape(secret, self.word_length)
        self._secret = secret
        self._history = []
        self._status = RoundStatus.IN_PROGRESS

    def submit_guess(self, guess: str) -> Tuple[List[LetterStatus], RoundStatus]:
        """
        Evaluates a guess and records it.

        Returns:
            Tuple of (evaluation, round status after this guess)

        Raises:
            RoundNotStarted: If start() has not been called
            RoundAlreadyComplete: If the round was already won or lost
            InvalidGuessLength: If the guess has the wrong number of letters
            InvalidGuessCharacters: If the guess contains non-letters
        """
        if self._secret is None:
            raise RoundNotStarted()
        if self._status.is_terminal:
            raise RoundAlreadyComplete()

        guess = normalize_word(guess)
        check_word_shape(guess, self.word_length)

        evaluation = evaluate(self._secret, guess)
        self._history.append(GuessRecord(guess, tuple(evaluation)))

        if is_solved(evaluation):
            self._status = RoundStatus.WON
        elif len(self._history) >= self.max_attempts:
            self._status = RoundStatus.LOST

        return evaluation, self._status

    @property
    def secret(self) -> Optional[str]:
        return self._secret

    @property
    def status(self) -> RoundStatus:
        return self._status

    @property
    def history(self) -> List[GuessRecord]:
        return list(self._history)

    @property
    def guesses_taken(self) -> int:
        return len(self._history)

    @property
    def remaining_attempts(self) -> int:
        return self.max_attempts - len(self._history)

    @property
    def is_complete(self) -> bool:
        return self._status.is_terminal

    @property
    def won(self) -> bool:
        return self._status is RoundStatus.WON
