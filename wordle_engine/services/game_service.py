"""
Game Service

Manages many isolated game sessions for the server. Each session has its own
state machine and lock; sessions share only the read-only word repository.
"""

import threading
import uuid
from contextlib import contextmanager
from typing import Dict, Iterator, List, Optional, Tuple

from ..models.events import EventType, GameEvent
from ..models.game import GameRules, GameState, GameStatus, GameSummary, GuessError
from ..models.stats import PlayerStats
from ..utils.game_logger import game_logger
from .game_engine import GameStateMachine
from .input_validator import KeyKind, classify_key
from .keyboard import keyboard_state
from .word_repository import WordRepository


class GameNotFoundError(KeyError):
    """Raised when a game id does not refer to a live session."""


class GameService:
    """
    Core game service managing multiple game sessions.

    This class handles:
    - Game session management with unique game IDs
    - Word selection and secure answer storage
    - Relaying engine events and keeping player statistics
    """

    def __init__(self, word_repository: WordRepository, rules: Optional[GameRules] = None):
        self.word_repository = word_repository
        self.rules = rules or GameRules(word_length=word_repository.word_length)
        self.games: Dict[str, GameStateMachine] = {}
        self._locks: Dict[str, threading.Lock] = {}
        self._registry_lock = threading.Lock()
        # One record per game id; it survives reset_game so streaks carry over
        self.stats: Dict[str, PlayerStats] = {}

    @contextmanager
    def _session(self, game_id: str) -> Iterator[GameStateMachine]:
        with self._registry_lock:
            machine = self.games.get(game_id)
            lock = self._locks.get(game_id)
        if machine is None or lock is None:
            raise GameNotFoundError(game_id)
        with lock:
            yield machine

    def create_new_game(self) -> str:
        """
        Creates a new game session with a randomly selected word.

        Returns:
            str: Unique game ID for this session
        """
        game_id = str(uuid.uuid4())

        # Select random word (server keeps this secret)
        target_word = self.word_repository.get_random_word()
        machine = GameStateMachine(target_word, self.word_repository.is_valid_word, self.rules)
        machine.subscribe(lambda event: self._on_event(game_id, event))

        with self._registry_lock:
            self.games[game_id] = machine
            self._locks[game_id] = threading.Lock()
            self.stats[game_id] = PlayerStats()
        return game_id

    def get_game_state(self, game_id: str) -> Optional[GameState]:
        """
        Returns the current game state for a session (without revealing the answer).

        Returns:
            GameState object or None if game not found
        """
        try:
            with self._session(game_id) as machine:
                return self._build_state(game_id, machine)
        except GameNotFoundError:
            return None

    def press_key(self, game_id: str, key) -> Tuple[GameState, List[GameEvent]]:
        """
        Applies one key press to a session.

        Raises:
            GameNotFoundError: If the game does not exist
        """
        with self._session(game_id) as machine:
            events = machine.handle_key(key)
            return self._build_state(game_id, machine), events

    def make_guess(self, game_id: str, guess: str) -> Tuple[GameState, List[GameEvent], Optional[GuessError]]:
        """
        Types a whole word into the current row and submits it.

        Returns:
            Tuple of (state, events, error). ``error`` is None on success.

        Raises:
            GameNotFoundError: If the game does not exist
        """
        with self._session(game_id) as machine:
            if machine.status.is_terminal:
                return self._build_state(game_id, machine), [], GuessError.GAME_OVER

            word = guess.strip() if isinstance(guess, str) else ''
            if not word or not all(classify_key(char) is KeyKind.LETTER for char in word):
                return self._build_state(game_id, machine), [], GuessError.INVALID_INPUT
            if len(word) < machine.session.rules.word_length:
                return self._build_state(game_id, machine), [], GuessError.INCOMPLETE_GUESS
            if len(word) > machine.session.rules.word_length:
                return self._build_state(game_id, machine), [], GuessError.INVALID_WORD

            before = machine.session
            while machine.remove_letter():
                pass
            for letter in word:
                machine.add_letter(letter)

            events: List[GameEvent] = []
            collect = events.append
            machine.subscribe(collect)
            try:
                result = machine.submit()
            finally:
                machine.unsubscribe(collect)
            if not result.success:
                # A rejected whole-word guess leaves what the player had typed
                machine.session = before
            return self._build_state(game_id, machine), events, result.error

    def reset_game(self, game_id: str) -> GameState:
        """Starts a fresh game with a new target word in an existing session."""
        with self._session(game_id) as machine:
            machine.reset(self.word_repository.get_random_word())
            return self._build_state(game_id, machine)

    def delete_game(self, game_id: str) -> bool:
        """
        Removes a game session from memory.

        Returns:
            bool: True if game was deleted, False if not found
        """
        with self._registry_lock:
            if game_id in self.games:
                del self.games[game_id]
                del self._locks[game_id]
                self.stats.pop(game_id, None)
                return True
        return False

    def get_stats(self, game_id: str) -> Dict:
        """
        Statistics of the games finished in one session.

        Raises:
            GameNotFoundError: If the game does not exist
        """
        with self._session(game_id):
            return self.stats[game_id].to_dict()

    def _on_event(self, game_id: str, event: GameEvent) -> None:
        if event.name == EventType.STATS_UPDATE:
            # Runs under the session lock held by the caller
            stats = self.stats.get(game_id)
            if stats is not None:
                stats.record_game(GameSummary(**event.payload))
        elif event.name == EventType.GAME_OVER:
            game_logger.log_game_event(
                game_id, 'game_won' if event.payload['won'] else 'game_lost', 'system',
                target_word=event.payload['target_word'],
                attempts_used=event.payload['attempts_used']
            )
        elif event.name == EventType.GAME_RESET:
            game_logger.log_game_event(game_id, 'game_reset', 'system')

    def _build_state(self, game_id: str, machine: GameStateMachine) -> GameState:
        session = machine.session
        game_over = session.status.is_terminal
        return GameState(
            game_id=game_id,
            status=session.status.value,
            current_round=session.attempt_index,
            max_rounds=session.rules.max_guesses,
            word_length=session.rules.word_length,
            current_guess=session.attempt_buffer,
            game_over=game_over,
            won=session.status is GameStatus.WON,
            guesses=list(session.guesses),
            guess_results=[
                [(letter, outcome.label) for letter, outcome in result.pairs()]
                for result in session.guess_results
            ],
            letter_status=keyboard_state(session.keyboard_hints),
            answer=session.target_word if game_over else None
        )


# Global service instance
_game_service = None


def get_game_service() -> Optional[GameService]:
    """Get the global game service instance."""
    return _game_service


def initialize_game_service(word_repository: Optional[WordRepository] = None,
                            rules: Optional[GameRules] = None) -> GameService:
    """Initialize the global game service instance."""
    global _game_service
    _game_service = GameService(word_repository or WordRepository.from_json(), rules)
    return _game_service
