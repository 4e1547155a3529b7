"""
Data Models Package

Contains all data models, enums and error types used throughout the application.
"""

from .errors import (
    WordleError, InvalidGuessLength, InvalidGuessCharacters, UnknownWord,
    RoundAlreadyComplete, RoundNotStarted, StatsPersistenceFailure, MalformedStats,
)
from .game import GameState, GuessRecord, LetterStatus, RoundStatus
from .stats import StatsLedger

__all__ = [
    'GameState', 'GuessRecord', 'LetterStatus', 'RoundStatus', 'StatsLedger',
    'WordleError', 'InvalidGuessLength', 'InvalidGuessCharacters', 'UnknownWord',
    'RoundAlreadyComplete', 'RoundNotStarted', 'StatsPersistenceFailure', 'MalformedStats',
]
