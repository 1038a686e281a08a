"""
Game Engine

The game state machine. The module-level functions are the functional core:
each takes a GameSession and returns a new one, never mutating its input.
GameStateMachine wraps one session for a single player, dispatches key
presses and emits GameEvents to its subscribers.
"""

from dataclasses import replace
from typing import Callable, List, Optional, Tuple

from ..models.events import EventListener, EventType, GameEvent
from ..models.game import (
    GameRules, GameSession, GameStatus, GameSummary, GuessError, SubmitResult,
)
from .input_validator import KeyKind, accepts, classify_key
from .keyboard import merge_hints
from .scoring import score

WordValidator = Callable[[str], bool]


def new_session(target_word: str, rules: Optional[GameRules] = None) -> GameSession:
    rules = rules or GameRules()
    target_word = target_word.upper()
    if len(target_word) != rules.word_length:
        raise ValueError(f"Target word must be {rules.word_length} letters long")
    return GameSession(target_word=target_word, rules=rules)


# A fresh session: new target, empty buffer, no hints
reset = new_session


def add_letter(session: GameSession, letter: str) -> GameSession:
    if classify_key(letter) is not KeyKind.LETTER:
        return session
    if not accepts(letter, session.attempt_buffer, session.status, session.rules.word_length):
        return session
    return replace(session, attempt_buffer=session.attempt_buffer + letter.upper())


def remove_letter(session: GameSession) -> GameSession:
    if not accepts('BACKSPACE', session.attempt_buffer, session.status, session.rules.word_length):
        return session
    return replace(session, attempt_buffer=session.attempt_buffer[:-1])


def submit(session: GameSession, word_validator: WordValidator) -> Tuple[GameSession, SubmitResult]:
    """
    Submit the buffered word.

    Failures (game over, incomplete guess, word not in the dictionary) return
    the session unchanged together with the failure kind; the attempt is not
    consumed. A successful submit scores the guess, upgrades the keyboard
    hints and either ends the game or moves on to the next attempt. A correct
    guess wins even on the last attempt.
    """
    if session.status.is_terminal:
        return session, SubmitResult(success=False, error=GuessError.GAME_OVER)

    if not accepts('ENTER', session.attempt_buffer, session.status, session.rules.word_length):
        return session, SubmitResult(success=False, error=GuessError.INCOMPLETE_GUESS)

    guess = session.attempt_buffer
    if not word_validator(guess):
        return session, SubmitResult(success=False, error=GuessError.INVALID_WORD)

    result = score(guess, session.target_word)
    hints = merge_hints(session.keyboard_hints, guess, result)
    updated = replace(
        session,
        keyboard_hints=hints,
        guesses=session.guesses + (guess,),
        guess_results=session.guess_results + (result,),
    )

    if guess == session.target_word:
        updated = replace(updated, status=GameStatus.WON)
    elif session.attempt_index == session.rules.max_guesses - 1:
        updated = replace(updated, status=GameStatus.LOST)
    else:
        return (
            replace(updated, attempt_index=session.attempt_index + 1, attempt_buffer=""),
            SubmitResult(success=True, guess_result=result, keyboard_hints=dict(hints)),
        )

    summary = GameSummary(
        won=updated.status is GameStatus.WON,
        target_word=session.target_word,
        attempts_used=updated.attempts_used,
    )
    return updated, SubmitResult(success=True, guess_result=result, keyboard_hints=dict(hints), summary=summary)


class GameStateMachine:
    """
    Stateful shell around one GameSession.

    Listeners receive every emitted GameEvent; each operation also returns
    what it produced so callers without a subscription can relay it.
    """

    def __init__(self,
                 target_word: str,
                 word_validator: WordValidator,
                 rules: Optional[GameRules] = None):
        self.session = new_session(target_word, rules)
        self.word_validator = word_validator
        self._listeners: List[EventListener] = []

    @property
    def status(self) -> GameStatus:
        return self.session.status

    def subscribe(self, listener: EventListener) -> None:
        self._listeners.append(listener)

    def unsubscribe(self, listener: EventListener) -> None:
        self._listeners.remove(listener)

    def _emit(self, events: List[GameEvent]) -> List[GameEvent]:
        for event in events:
            for listener in list(self._listeners):
                listener(event)
        return events

    def add_letter(self, letter: str) -> bool:
        return bool(self._emit(self._add_letter(letter)))

    def remove_letter(self) -> bool:
        return bool(self._emit(self._remove_letter()))

    def submit(self) -> SubmitResult:
        result, events = self._submit()
        self._emit(events)
        return result

    def reset(self, target_word: str) -> GameSession:
        self.session = reset(target_word, self.session.rules)
        self._emit([GameEvent(EventType.GAME_RESET, {'word_length': self.session.rules.word_length,
                                                     'max_guesses': self.session.rules.max_guesses})])
        return self.session

    def handle_key(self, key) -> List[GameEvent]:
        """
        Dispatch one key press. ENTER with an incomplete guess is reported;
        any other rejected key is ignored.
        """
        kind = classify_key(key)
        session = self.session
        if not accepts(key, session.attempt_buffer, session.status, session.rules.word_length):
            if kind is KeyKind.SUBMIT and session.status is GameStatus.IN_PROGRESS:
                return self._emit([self._failure_event(GuessError.INCOMPLETE_GUESS)])
            return []

        if kind is KeyKind.LETTER:
            return self._emit(self._add_letter(key))
        if kind is KeyKind.DELETE:
            return self._emit(self._remove_letter())
        _, events = self._submit()
        return self._emit(events)

    def _add_letter(self, letter: str) -> List[GameEvent]:
        before = self.session
        self.session = add_letter(before, letter)
        if self.session is before:
            return []
        return [GameEvent(EventType.LETTER_ADDED, {
            'letter': self.session.attempt_buffer[-1],
            'row': self.session.attempt_index,
            'position': len(self.session.attempt_buffer) - 1
        })]

    def _remove_letter(self) -> List[GameEvent]:
        before = self.session
        self.session = remove_letter(before)
        if self.session is before:
            return []
        return [GameEvent(EventType.LETTER_REMOVED, {
            'row': self.session.attempt_index,
            'position': len(self.session.attempt_buffer)
        })]

    def _submit(self) -> Tuple[SubmitResult, List[GameEvent]]:
        row = self.session.attempt_index
        self.session, result = submit(self.session, self.word_validator)
        if not result.success:
            if result.error is GuessError.GAME_OVER:
                return result, []
            return result, [self._failure_event(result.error)]

        events = [
            GameEvent(EventType.GUESS_SCORED, {'row': row, **result.guess_result.to_dict()}),
            GameEvent(EventType.KEYBOARD_UPDATED, {
                'keyboard_hints': {letter: outcome.label for letter, outcome in result.keyboard_hints.items()}
            }),
        ]
        if result.summary is not None:
            events.append(GameEvent(EventType.GAME_OVER, result.summary.to_dict()))
            events.append(GameEvent(EventType.STATS_UPDATE, result.summary.to_dict()))
        return result, events

    def _failure_event(self, error: GuessError) -> GameEvent:
        name = EventType.INVALID_WORD if error is GuessError.INVALID_WORD else EventType.INCOMPLETE_GUESS
        return GameEvent(name, {'row': self.session.attempt_index, 'error': error.message})
