"""
Configuration Management Module

Centralized configuration management following the 12-factor app methodology.
All configuration is loaded from environment variables with sensible defaults.
"""

import os
from dotenv import load_dotenv

from .game_settings import DEFAULT_ANSWERS_PATH, DEFAULT_EXTRAS_PATH

# Load environment variables from config.env next to this module
load_dotenv(os.path.join(os.path.dirname(os.path.abspath(__file__)), 'config.env'))


class Config:
    """Base configuration class with all settings."""

    # Flask Settings
    DEBUG = os.getenv('DEBUG', 'False').lower() == 'true'

    # Server Settings
    HOST = os.getenv('HOST', '127.0.0.1')
    PORT = int(os.getenv('PORT', 5000))

    # Word Lists
    ANSWERS_PATH = os.getenv('ANSWERS_PATH', DEFAULT_ANSWERS_PATH)
    EXTRAS_PATH = os.getenv('EXTRAS_PATH', DEFAULT_EXTRAS_PATH)

    # Statistics Settings
    STATS_PATH = os.getenv('STATS_PATH', 'stats.txt')

    # Console Settings
    USE_COLOR = os.getenv('USE_COLOR', 'True').lower() == 'true'

    # Logging Settings
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
    LOG_DIR = os.getenv('LOG_DIR', 'logs')


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    DEBUG = True
    USE_COLOR = False


# Configuration mapping
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': Config
}


def get_config(name=None):
    """Return the configuration class named by `name` or the APP_ENV variable."""
    name = (name or os.getenv('APP_ENV', 'default')).lower()
    return config.get(name, Config)
