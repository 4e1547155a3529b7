"""
Statistics Data Models

Contains the cumulative player statistics updated after every round.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List

from ..config.game_settings import BOARD_ROWS


def _empty_distribution() -> List[int]:
    return [0] * BOARD_ROWS


@dataclass
class StatsLedger:
    """
    Cumulative statistics across rounds.

    guess_distribution[i] counts the rounds won on guess number i + 1.
    """
    games_played: int = 0
    games_won: int = 0
    current_streak: int = 0
    max_streak: int = 0
    guess_distribution: List[int] = field(default_factory=_empty_distribution)

    def record_round(self, won: bool, guesses_taken: int) -> None:
        """
        Fold a completed round into the statistics.

        Args:
            won: Whether the round was won
            guesses_taken: Number of guesses used; indexes the distribution on a win

        Raises:
            ValueError: If a win reports a guess count outside 1..len(guess_distribution)
        """
        if won and not 1 <= guesses_taken <= len(self.guess_distribution):
            raise ValueError(
                f"guesses_taken must be between 1 and {len(self.guess_distribution)}, got {guesses_taken}"
            )

        self.games_played += 1
        if won:
            self.games_won += 1
            self.current_streak += 1
            self.max_streak = max(self.max_streak, self.current_streak)
            self.guess_distribution[guesses_taken - 1] += 1
        else:
            self.current_streak = 0

    def win_percentage(self) -> float:
        """Percentage of rounds won, rounded to 2 places; 0.0 before any round is played."""
        if self.games_played == 0:
            return 0.0
        return round(self.games_won / self.games_played * 100, 2)

    def reset(self) -> None:
        self.games_played = 0
        self.games_won = 0
        self.current_streak = 0
        self.max_streak = 0
        self.guess_distribution = [0] * len(self.guess_distribution)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'games_played': self.games_played,
            'games_won': self.games_won,
            'current_streak': self.current_streak,
            'max_streak': self.max_streak,
            'guess_distribution': list(self.guess_distribution),
            'win_percentage': self.win_percentage(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "StatsLedger":
        return cls(
            games_played=int(data.get('games_played', 0)),
            games_won=int(data.get('games_won', 0)),
            current_streak=int(data.get('current_streak', 0)),
            max_streak=int(data.get('max_streak', 0)),
            guess_distribution=[int(n) for n in data.get('guess_distribution', _empty_distribution())],
        )
