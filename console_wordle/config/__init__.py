"""
Configuration Package

Contains all configuration-related files and settings.

This package separates two types of configuration:
- app_config.py: environment-based settings (paths, server, logging)
- game_settings.py: game rules and constants (board size, word lists)
"""

from .app_config import Config, DevelopmentConfig, ProductionConfig, TestingConfig, config, get_config
from .game_settings import (
    ALPHABET, ALPHABET_LENGTH, BOARD_COLS, BOARD_ROWS, MAX_ATTEMPTS,
    DEFAULT_ANSWERS_PATH, DEFAULT_EXTRAS_PATH,
    load_word_list, validate_word_list_integrity, get_word_statistics,
)

__all__ = [
    # App configuration
    'Config', 'DevelopmentConfig', 'ProductionConfig', 'TestingConfig', 'config',
    'get_config',
    # Game rules
    'ALPHABET', 'ALPHABET_LENGTH', 'BOARD_COLS', 'BOARD_ROWS', 'MAX_ATTEMPTS',
    'DEFAULT_ANSWERS_PATH', 'DEFAULT_EXTRAS_PATH',
    'load_word_list', 'validate_word_list_integrity', 'get_word_statistics',
]
