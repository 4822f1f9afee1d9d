"""
Data Models Package

Contains all data models and schemas used throughout the application.
"""

from .game import GameConfig, GuessOutcome, LetterStatus, SessionPhase, SessionState, SubmissionResult

__all__ = ['GameConfig', 'GuessOutcome', 'LetterStatus', 'SessionPhase', 'SessionState', 'SubmissionResult']
