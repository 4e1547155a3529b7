"""
Word Source

Supplies secret words and decides which guesses are accepted.
"""

import random
from typing import Iterable, List, Optional, Tuple

from ..config.game_settings import (
    BOARD_COLS, DEFAULT_ANSWERS_PATH, DEFAULT_EXTRAS_PATH, load_word_list,
)
from ..models.errors import UnknownWord, WordleError
from .round_state import check_word_shape, normalize_word


class WordSource:
    """
    Answers list plus extras list.

    Secrets are drawn uniformly from the answers; guesses are accepted if
    they appear in either list.
    """

    def __init__(self, answers: Iterable[str], extras: Iterable[str] = ()):
        self.answers: List[str] = [normalize_word(word) for word in answers]
        if not self.answers:
            raise ValueError("Answers list cannot be empty")
        self.extras: List[str] = [normalize_word(word) for word in extras]
        self._accepted = frozenset(self.answers) | frozenset(self.extras)

    @classmethod
    def from_files(cls, answers_path: str = DEFAULT_ANSWERS_PATH,
                   extras_path: Optional[str] = DEFAULT_EXTRAS_PATH) -> "WordSource":
        """
        Loads both lists from JSON array files.

        Raises:
            FileNotFoundError: If a list file is missing
            ValueError: If a list file is malformed
        """
        answers = load_word_list(answers_path)
        extras = load_word_list(extras_path, allow_empty=True) if extras_path else []
        return cls(answers, extras)

    def pick_secret(self, rng: Optional[random.Random] = None) -> str:
        """Random word from the answers list."""
        return (rng or random).choice(self.answers)

    def is_accepted_guess(self, candidate: str) -> bool:
        if not candidate or not isinstance(candidate, str):
            return False
        return normalize_word(candidate) in self._accepted

    def validate(self, candidate: str) -> str:
        """
        Normalizes a candidate guess and checks it.

        Returns:
            str: The normalized guess

        Raises:
            InvalidGuessLength: Wrong number of letters
            InvalidGuessCharacters: Non-letter characters
            UnknownWord: Not in either word list
        """
        guess = normalize_word(candidate)
        check_word_shape(guess, BOARD_COLS)
        if guess not in self._accepted:
            raise UnknownWord(guess)
        return guess

    def check(self, candidate: str) -> Tuple[bool, str]:
        """Validation result as (is_valid, error_message)."""
        if not candidate or not isinstance(candidate, str):
            return False, "Guess must be a valid string"
        try:
            self.validate(candidate)
        except WordleError as e:
            return False, str(e)
        return True, ""

    def __len__(self) -> int:
        return len(self._accepted)
