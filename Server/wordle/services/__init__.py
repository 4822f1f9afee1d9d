"""
Services Package

Contains all business logic and service classes.
"""

from .evaluator import evaluate_guess
from .word_source import WordSource
from .game_service import GameService, GameNotFoundError, get_game_service, initialize_game_service

__all__ = [
    'evaluate_guess',
    'WordSource',
    'GameService', 'GameNotFoundError', 'get_game_service', 'initialize_game_service'
]
