"""
Game Service

Wires the core together. A GameSession owns one round, one alphabet tracker
and one statistics ledger; the GameService hosts many isolated sessions for
the HTTP API.
"""

import random
import uuid
from typing import Dict, List, Optional, Tuple

from ..config.game_settings import MAX_ATTEMPTS
from ..models.errors import RoundAlreadyComplete
from ..models.game import GameState, LetterStatus, RoundStatus
from ..models.stats import StatsLedger
from ..utils.game_logger import CONSOLE_IDENTITY, game_logger
from .alphabet_tracker import AlphabetTracker
from .round_state import RoundState
from .stats_store import StatsStore
from .word_source import WordSource


class GameSession:
    """
    One player's game context.

    This class handles:
    - Secret selection at the start of every round
    - Guess validation against the word lists
    - Alphabet hinting across the round
    - Statistics updates (and persistence, when a store is attached)
    """

    def __init__(self,
                 word_source: WordSource,
                 ledger: Optional[StatsLedger] = None,
                 store: Optional[StatsStore] = None,
                 rng: Optional[random.Random] = None,
                 game_id: Optional[str] = None,
                 user_ip: str = CONSOLE_IDENTITY,
                 max_attempts: int = MAX_ATTEMPTS):
        self.word_source = word_source
        self.ledger = ledger if ledger is not None else StatsLedger()
        self.store = store
        self.rng = rng
        self.game_id = game_id
        self.user_ip = user_ip
        self.round = RoundState(max_attempts=max_attempts)
        self.tracker = AlphabetTracker()
        self.rounds_started = 0

        if self.store is not None:
            self.store.load_into(self.ledger)

    @property
    def stats_enabled(self) -> bool:
        """False when statistics live only in memory because the store failed."""
        return self.store is None or self.store.enabled

    @property
    def stats_error(self) -> Optional[str]:
        return self.store.error_message if self.store is not None else None

    def new_round(self, secret: Optional[str] = None) -> None:
        """Starts a round with a random secret (or the one given)."""
        if secret is None:
            secret = self.word_source.pick_secret(self.rng)
        self.round.start(secret)
        self.tracker.reset()
        self.rounds_started += 1

        game_logger.log_game_event(
            self.game_id, 'round_started', self.user_ip,
            round_number=self.rounds_started, max_attempts=self.round.max_attempts
        )

    def submit_guess(self, raw_guess: str) -> Tuple[List[LetterStatus], RoundStatus]:
        """
        Validates and plays a guess.

        Raises:
            InvalidGuessLength, InvalidGuessCharacters, UnknownWord: Rejected guess
            RoundAlreadyComplete: The round is over
            RoundNotStarted: new_round() has not been called
        """
        if self.round.is_complete:
            raise RoundAlreadyComplete()
        guess = self.word_source.validate(raw_guess)

        evaluation, status = self.round.submit_guess(guess)
        self.tracker.update_from_guess(guess, evaluation)

        game_logger.log_game_event(
            self.game_id, 'guess_submitted', self.user_ip,
            guess=guess, attempt=self.round.guesses_taken,
            evaluation=[mark.value for mark in evaluation]
        )

        if status.is_terminal:
            self._finish_round()

        return evaluation, status

    def _finish_round(self) -> None:
        self.ledger.record_round(self.round.won, self.round.guesses_taken)
        saved = self.store.persist(self.ledger) if self.store is not None else False

        game_logger.log_game_event(
            self.game_id, 'game_won' if self.round.won else 'game_lost', self.user_ip,
            rounds_used=self.round.guesses_taken, target_word=self.round.secret,
            stats_saved=saved
        )

    def reset_stats(self) -> None:
        self.ledger.reset()
        if self.store is not None:
            self.store.persist(self.ledger)
        game_logger.log_game_event(self.game_id, 'stats_reset', self.user_ip)

    def get_state(self) -> GameState:
        """
        Returns the current round state (without revealing the answer).

        The answer is only included once the round is over.
        """
        history = self.round.history
        return GameState(
            game_id=self.game_id,
            current_round=self.round.guesses_taken,
            max_rounds=self.round.max_attempts,
            game_over=self.round.is_complete,
            won=self.round.won,
            status=self.round.status.value,
            guesses=[record.guess for record in history],
            guess_results=[record.as_pairs() for record in history],
            letter_status=self.tracker.snapshot(),
            answer=self.round.secret if self.round.is_complete else None,
        )


class GameService:
    """
    Hosts isolated game sessions keyed by a unique game ID.

    Sessions share only the read-only word source. Statistics are
    session-local and are not persisted.
    """

    def __init__(self, word_source: WordSource, rng: Optional[random.Random] = None):
        self.word_source = word_source
        self.rng = rng
        self.games: Dict[str, GameSession] = {}

    def create_new_game(self, user_ip: str = 'unknown') -> str:
        """
        Creates a new session and starts its first round.

        Returns:
            str: Unique game ID for this session
        """
        game_id = str(uuid.uuid4())
        session = GameSession(self.word_source, rng=self.rng, game_id=game_id, user_ip=user_ip)
        session.new_round()
        self.games[game_id] = session
        return game_id

    def get_session(self, game_id: str) -> Optional[GameSession]:
        return self.games.get(game_id)

    def get_game_state(self, game_id: str) -> Optional[GameState]:
        session = self.games.get(game_id)
        if session is None:
            return None
        return session.get_state()

    def start_next_round(self, game_id: str) -> Tuple[bool, str]:
        """
        Starts the next round of an existing session.

        Returns:
            Tuple of (started, error_message)
        """
        session = self.games.get(game_id)
        if session is None:
            return False, "Game not found"
        if not session.round.is_complete:
            return False, "Current round is still in progress"
        session.new_round()
        return True, ""

    def is_valid_guess(self, game_id: str, guess: str) -> Tuple[bool, str]:
        """
        Validates a guess for a specific game session.

        Returns:
            Tuple of (is_valid, error_message)
        """
        session = self.games.get(game_id)
        if session is None:
            return False, "Game not found"

        if session.round.is_complete:
            return False, "Game is already over"

        return self.word_source.check(guess)

    def make_guess(self, game_id: str, guess: str) -> Optional[GameState]:
        """
        Processes a guess and returns the updated state, or None if the guess is invalid.
        """
        is_valid, _ = self.is_valid_guess(game_id, guess)
        if not is_valid:
            return None

        session = self.games[game_id]
        session.submit_guess(guess)
        return session.get_state()

    def get_stats(self, game_id: str) -> Optional[Dict]:
        session = self.games.get(game_id)
        if session is None:
            return None
        return session.ledger.to_dict()

    def reset_stats(self, game_id: str) -> bool:
        session = self.games.get(game_id)
        if session is None:
            return False
        session.reset_stats()
        return True

    def delete_game(self, game_id: str) -> bool:
        """
        Removes a game session from memory.

        Returns:
            bool: True if game was deleted, False if not found
        """
        if game_id in self.games:
            del self.games[game_id]
            return True
        return False


# Global service instance
_game_service = None


def get_game_service() -> Optional[GameService]:
    """Get the global game service instance."""
    return _game_service


def initialize_game_service(word_source: Optional[WordSource] = None,
                            rng: Optional[random.Random] = None) -> GameService:
    """Initialize the global game service instance."""
    global _game_service
    if word_source is None:
        from ..config.app_config import Config
        word_source = WordSource.from_files(Config.ANSWERS_PATH, Config.EXTRAS_PATH)
    _game_service = GameService(word_source, rng=rng)
    return _game_service
