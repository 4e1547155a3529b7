"""
Game Data Models

Contains all game-related data structures and enums.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Tuple


class LetterStatus(Enum):
    """Per-letter feedback, plus the UNUSED sentinel for the alphabet tracker."""
    CORRECT = "CORRECT"
    PRESENT = "PRESENT"
    ABSENT = "ABSENT"
    UNUSED = "UNUSED"

    @property
    def priority(self) -> int:
        """Rank used by the alphabet tracker: UNUSED < ABSENT < PRESENT < CORRECT."""
        return _LETTER_PRIORITY[self]


_LETTER_PRIORITY: Dict[LetterStatus, int] = {
    LetterStatus.UNUSED: 0,
    LetterStatus.ABSENT: 1,
    LetterStatus.PRESENT: 2,
    LetterStatus.CORRECT: 3,
}


class RoundStatus(Enum):
    """Lifecycle of a single round."""
    IN_PROGRESS = "IN_PROGRESS"
    WON = "WON"
    LOST = "LOST"

    @property
    def is_terminal(self) -> bool:
        return self is not RoundStatus.IN_PROGRESS


@dataclass(frozen=True)
class GuessRecord:
    """A recorded guess and its evaluation."""
    guess: str
    evaluation: Tuple[LetterStatus, ...]

    def as_pairs(self) -> List[Tuple[str, str]]:
        """Letter/status pairs with the status as a string for JSON serialization."""
        return [(letter, status.value) for letter, status in zip(self.guess, self.evaluation)]


@dataclass
class GameState:
    """Snapshot of a session's current round, safe to hand to a client."""
    game_id: Optional[str]
    current_round: int
    max_rounds: int
    game_over: bool
    won: bool
    status: str
    guesses: List[str]
    guess_results: List[List[Tuple[str, str]]]  # Letter status as string for JSON serialization
    letter_status: Dict[str, str]
    answer: Optional[str] = None  # Only included when the round is over
