"""
Game Data Models

Contains all game-related data structures and enums.
"""

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Dict, List, Optional, Tuple

from ..config.game_settings import MAX_GUESSES, WORD_LENGTH


class LetterOutcome(IntEnum):
    """Per-letter feedback, ordered by strength: CORRECT > PRESENT > ABSENT."""
    ABSENT = 0
    PRESENT = 1
    CORRECT = 2

    @property
    def label(self) -> str:
        return self.name.lower()


class GameStatus(Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    LOST = "lost"

    @property
    def is_terminal(self) -> bool:
        return self is not GameStatus.IN_PROGRESS


class GuessError(Enum):
    """Recoverable failures reported back to the player."""
    INVALID_WORD = "Not a valid word"
    INCOMPLETE_GUESS = "Not enough letters"
    INVALID_INPUT = "Invalid input"
    GAME_OVER = "Game is already over"

    @property
    def message(self) -> str:
        return self.value


# Letter -> best outcome seen so far in the session
KeyboardHints = Dict[str, LetterOutcome]


@dataclass(frozen=True)
class GameRules:
    word_length: int = WORD_LENGTH
    max_guesses: int = MAX_GUESSES


@dataclass(frozen=True)
class GuessResult:
    """Outcome of one submitted guess, index-aligned with its letters."""
    word: str
    outcomes: Tuple[LetterOutcome, ...]

    @property
    def is_win(self) -> bool:
        return all(outcome is LetterOutcome.CORRECT for outcome in self.outcomes)

    def pairs(self) -> List[Tuple[str, LetterOutcome]]:
        return list(zip(self.word, self.outcomes))

    def to_dict(self) -> Dict:
        return {
            'word': self.word,
            'outcomes': [outcome.label for outcome in self.outcomes]
        }


@dataclass(frozen=True)
class GameSummary:
    """Terminal summary handed to the presentation layer."""
    won: bool
    target_word: str
    attempts_used: int

    def to_dict(self) -> Dict:
        return {
            'won': self.won,
            'target_word': self.target_word,
            'attempts_used': self.attempts_used
        }


@dataclass(frozen=True)
class GameSession:
    """
    One player's game. Operations in services.game_engine never mutate a
    session; they return a new one.
    """
    target_word: str
    attempt_buffer: str = ""
    attempt_index: int = 0
    status: GameStatus = GameStatus.IN_PROGRESS
    keyboard_hints: KeyboardHints = field(default_factory=dict)
    guesses: Tuple[str, ...] = ()
    guess_results: Tuple[GuessResult, ...] = ()
    rules: GameRules = field(default_factory=GameRules)

    @property
    def attempts_used(self) -> int:
        return len(self.guess_results)


@dataclass(frozen=True)
class SubmitResult:
    """Discriminated result of a submit: success, or a failure kind."""
    success: bool
    error: Optional[GuessError] = None
    guess_result: Optional[GuessResult] = None
    keyboard_hints: Optional[KeyboardHints] = None
    summary: Optional[GameSummary] = None

    def to_dict(self) -> Dict:
        data: Dict = {'success': self.success}
        if self.error is not None:
            data['error'] = self.error.message
            data['error_kind'] = self.error.name
        if self.guess_result is not None:
            data['guess_result'] = self.guess_result.to_dict()
        if self.keyboard_hints is not None:
            data['keyboard_hints'] = {letter: outcome.label for letter, outcome in self.keyboard_hints.items()}
        if self.summary is not None:
            data['summary'] = self.summary.to_dict()
        return data


@dataclass
class GameState:
    """Serializable game view. The answer is only included when the game is over."""
    game_id: str
    status: str
    current_round: int
    max_rounds: int
    word_length: int
    current_guess: str
    game_over: bool
    won: bool
    guesses: List[str]
    guess_results: List[List[Tuple[str, str]]]  # Outcome labels for JSON serialization
    letter_status: Dict[str, str]
    answer: Optional[str] = None
