"""
Game Events

Pure data events emitted by the game state machine. A presentation layer
(HTTP responses, Socket.IO rooms, a terminal UI) subscribes to them and does
the rendering.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict


class EventType:
    LETTER_ADDED = 'letter_added'
    LETTER_REMOVED = 'letter_removed'
    GUESS_SCORED = 'guess_scored'
    KEYBOARD_UPDATED = 'keyboard_updated'
    INVALID_WORD = 'invalid_word'
    INCOMPLETE_GUESS = 'incomplete_guess'
    GAME_OVER = 'game_over'
    STATS_UPDATE = 'stats_update'
    GAME_RESET = 'game_reset'


@dataclass(frozen=True)
class GameEvent:
    name: str
    payload: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {'event': self.name, **self.payload}


EventListener = Callable[[GameEvent], None]
