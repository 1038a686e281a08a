"""
Data Models Package

Contains all data models and schemas used throughout the application.
"""

from .events import EventType, GameEvent
from .game import (
    GameRules, GameSession, GameState, GameStatus, GameSummary,
    GuessError, GuessResult, KeyboardHints, LetterOutcome, SubmitResult,
)
from .stats import PlayerStats

__all__ = [
    'EventType', 'GameEvent',
    'GameRules', 'GameSession', 'GameState', 'GameStatus', 'GameSummary',
    'GuessError', 'GuessResult', 'KeyboardHints', 'LetterOutcome', 'SubmitResult',
    'PlayerStats'
]
