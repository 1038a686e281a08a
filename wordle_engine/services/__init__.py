"""
Services Package

Contains all business logic and service classes.
"""

from .game_engine import GameStateMachine
from .game_service import GameNotFoundError, GameService, get_game_service, initialize_game_service
from .input_validator import KeyKind, accepts, classify_key
from .keyboard import keyboard_state, merge_hints
from .scoring import score
from .word_repository import WordRepository

__all__ = [
    'GameStateMachine',
    'GameNotFoundError', 'GameService', 'get_game_service', 'initialize_game_service',
    'KeyKind', 'accepts', 'classify_key',
    'keyboard_state', 'merge_hints',
    'score',
    'WordRepository'
]
