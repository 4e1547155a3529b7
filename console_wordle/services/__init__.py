"""
Services Package

Contains the game core and the collaborators that feed it.
"""

from .alphabet_tracker import AlphabetTracker
from .evaluator import evaluate, is_solved
from .game_service import GameService, GameSession, get_game_service, initialize_game_service
from .round_state import RoundState
from .stats_store import StatsStore, dump_stats, parse_stats
from .word_source import WordSource

__all__ = [
    'evaluate', 'is_solved',
    'AlphabetTracker', 'RoundState', 'WordSource',
    'StatsStore', 'dump_stats', 'parse_stats',
    'GameService', 'GameSession', 'get_game_service', 'initialize_game_service',
]
