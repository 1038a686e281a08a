"""
Input Validation

Decides which key presses a game accepts in its current state. Used by the
key dispatcher and as the guard of every engine operation.
"""

from enum import Enum

from ..config.game_settings import ALPHABET_PATTERN, WORD_LENGTH
from ..models.game import GameStatus

SUBMIT_KEYS = frozenset({'ENTER'})
DELETE_KEYS = frozenset({'BACKSPACE', 'DELETE'})


class KeyKind(Enum):
    LETTER = "letter"
    SUBMIT = "submit"
    DELETE = "delete"
    OTHER = "other"


def classify_key(key) -> KeyKind:
    if not isinstance(key, str):
        return KeyKind.OTHER
    if ALPHABET_PATTERN.fullmatch(key):
        return KeyKind.LETTER
    normalized = key.upper()
    if normalized in SUBMIT_KEYS:
        return KeyKind.SUBMIT
    if normalized in DELETE_KEYS:
        return KeyKind.DELETE
    return KeyKind.OTHER


def accepts(key, buffer: str, status: GameStatus, word_length: int = WORD_LENGTH) -> bool:
    if status is not GameStatus.IN_PROGRESS:
        return False

    kind = classify_key(key)
    if kind is KeyKind.LETTER:
        return len(buffer) < word_length
    if kind is KeyKind.SUBMIT:
        return len(buffer) == word_length
    if kind is KeyKind.DELETE:
        return len(buffer) > 0
    return False
