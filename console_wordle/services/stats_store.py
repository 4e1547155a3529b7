"""
Statistics Store

Reads and writes a StatsLedger as plain text. The layout is four lines
(games played, games won, current streak, max streak) followed by one line
with the guess distribution as space-separated counters.

When the file cannot be read or written the store disables itself for the
rest of the session; the ledger keeps working in memory.
"""

from pathlib import Path
from typing import Optional, Union

from ..config.game_settings import BOARD_ROWS
from ..models.errors import MalformedStats, StatsPersistenceFailure
from ..models.stats import StatsLedger
from ..utils.game_logger import game_logger


def dump_stats(ledger: StatsLedger) -> str:
    lines = [
        str(ledger.games_played),
        str(ledger.games_won),
        str(ledger.current_streak),
        str(ledger.max_streak),
        " ".join(str(count) for count in ledger.guess_distribution) + " ",
    ]
    return "\n".join(lines) + "\n"


def parse_stats(text: str, rows: int = BOARD_ROWS) -> StatsLedger:
    """
    Parses the text layout written by dump_stats.

    Raises:
        MalformedStats: Missing lines, non-integer or negative values, or a short histogram
    """
    lines = text.splitlines()
    if len(lines) < 5:
        raise MalformedStats(f"Expected 5 lines of statistics, found {len(lines)}")

    try:
        counters = [int(line.strip()) for line in lines[:4]]
        distribution = [int(part) for part in lines[4].split()]
    except ValueError as e:
        raise MalformedStats(f"Statistics contain a non-integer value: {e}") from e

    if len(distribution) < rows:
        raise MalformedStats(f"Guess distribution needs {rows} entries, found {len(distribution)}")
    distribution = distribution[:rows]

    if any(value < 0 for value in counters + distribution):
        raise MalformedStats("Statistics cannot be negative")

    games_played, games_won, current_streak, max_streak = counters
    return StatsLedger(
        games_played=games_played,
        games_won=games_won,
        current_streak=current_streak,
        max_streak=max_streak,
        guess_distribution=distribution,
    )


class StatsStore:
    """
    File-backed persistence for a StatsLedger.

    Attributes:
        enabled: False once a read or write has failed
        error_message: The failure that disabled the store, if any
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        self.enabled = True
        self.error_message: Optional[str] = None

    def read(self) -> StatsLedger:
        """
        Raises:
            FileNotFoundError: If there is no statistics file yet
            MalformedStats: If the file content cannot be parsed
            StatsPersistenceFailure: On any other I/O error
        """
        try:
            text = self.path.read_text(encoding='utf-8')
        except FileNotFoundError:
            raise
        except (OSError, UnicodeDecodeError) as e:
            raise StatsPersistenceFailure(f"Could not read {self.path}: {e}") from e
        return parse_stats(text)

    def write(self, ledger: StatsLedger) -> None:
        """
        Raises:
            StatsPersistenceFailure: If the file cannot be written
        """
        try:
            self.path.write_text(dump_stats(ledger), encoding='utf-8')
        except OSError as e:
            raise StatsPersistenceFailure(f"Could not write {self.path}: {e}") from e

    def load_into(self, ledger: StatsLedger) -> StatsLedger:
        """
        Replaces the ledger's fields with the stored statistics.

        A missing file is created from the ledger as it stands and malformed
        content resets the ledger; an unreadable store disables persistence.
        """
        try:
            stored = self.read()
        except FileNotFoundError:
            self.persist(ledger)
            return ledger
        except MalformedStats as e:
            game_logger.logger.warning(f"Statistics file {self.path} is malformed, resetting: {e}")
            ledger.reset()
            self.persist(ledger)
            return ledger
        except StatsPersistenceFailure as e:
            self._disable(e)
            return ledger

        ledger.games_played = stored.games_played
        ledger.games_won = stored.games_won
        ledger.current_streak = stored.current_streak
        ledger.max_streak = stored.max_streak
        ledger.guess_distribution = stored.guess_distribution
        return ledger

    def persist(self, ledger: StatsLedger) -> bool:
        """Writes the ledger if the store is enabled; returns whether it was saved."""
        if not self.enabled:
            return False
        try:
            self.write(ledger)
        except StatsPersistenceFailure as e:
            self._disable(e)
            return False
        return True

    def _disable(self, error: Exception) -> None:
        self.enabled = False
        self.error_message = str(error)
        game_logger.log_game_event(
            None, 'stats_disabled', 'console',
            stats_path=str(self.path), error_type=type(error).__name__, error_message=str(error)
        )
        game_logger.logger.warning(f"Statistics disabled for this session: {error}")
