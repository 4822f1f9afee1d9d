"""
Configuration Package

Contains all configuration-related files and settings.

This package separates two types of configuration:
- app_config.py: Flask application configuration (environment-based)
- game_settings.py: Board dimensions and the local word list (game rules)
"""

from .app_config import Config, DevelopmentConfig, ProductionConfig, TestingConfig, config
from .game_settings import ROWS, COLUMNS, FALLBACK_WORDS, validate_word_list_integrity

__all__ = [
    # App configuration
    'Config', 'DevelopmentConfig', 'ProductionConfig', 'TestingConfig', 'config',
    # Game rules
    'ROWS', 'COLUMNS', 'FALLBACK_WORDS', 'validate_word_list_integrity'
]
