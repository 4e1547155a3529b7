"""
Alphabet Tracker

Keeps the best-known status of every letter across the guesses of a round.
"""

from typing import Dict, Sequence

from ..config.game_settings import ALPHABET
from ..models.game import LetterStatus


class AlphabetTracker:
    """
    Letter status board for on-screen hinting.

    A letter's status only moves up the order
    UNUSED < ABSENT < PRESENT < CORRECT; a later guess that places a
    CORRECT letter in the wrong slot does not demote it.
    """

    def __init__(self):
        self._status: Dict[str, LetterStatus] = {}
        self.reset()

    def reset(self) -> None:
        """Mark every letter UNUSED (start of a round)."""
        self._status = {letter: LetterStatus.UNUSED for letter in ALPHABET}

    def update(self, letter: str, status: LetterStatus) -> None:
        key = self._key(letter)
        if status.priority > self._status[key].priority:
            self._status[key] = status

    def update_from_guess(self, guess: Sequence[str], evaluation: Sequence[LetterStatus]) -> None:
        for letter, status in zip(guess, evaluation):
            self.update(letter, status)

    def status_of(self, letter: str) -> LetterStatus:
        return self._status[self._key(letter)]

    def snapshot(self) -> Dict[str, str]:
        """Letter -> status value, in alphabet order."""
        return {letter: status.value for letter, status in self._status.items()}

    def _key(self, letter: str) -> str:
        key = letter.upper() if isinstance(letter, str) else letter
        if key not in self._status:
            raise ValueError(f"Not a letter of the alphabet: {letter!r}")
        return key
