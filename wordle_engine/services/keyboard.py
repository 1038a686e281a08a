"""
Keyboard Hints

Folds guess results into the best-known outcome per letter.
"""

from typing import Dict, Iterable, Optional, Tuple

from ..config.game_settings import ALPHABET
from ..models.game import GuessResult, KeyboardHints, LetterOutcome

UNUSED = "unused"


def merge_hints(current: KeyboardHints, guess: str, result: GuessResult) -> KeyboardHints:
    """
    Return new hints with each guessed letter upgraded to the stronger of its
    stored and new outcome. Hints are never downgraded.
    """
    return upgrade_hints(current, zip(guess.upper(), result.outcomes))


def upgrade_hints(current: KeyboardHints,
                  evaluations: Iterable[Tuple[str, LetterOutcome]]) -> KeyboardHints:
    hints = dict(current)
    for letter, new_outcome in evaluations:
        stored: Optional[LetterOutcome] = hints.get(letter)
        hints[letter] = new_outcome if stored is None else max(stored, new_outcome)
    return hints


def keyboard_state(hints: KeyboardHints) -> Dict[str, str]:
    """Status label for every key of the alphabet, for rendering."""
    return {
        letter: hints[letter].label if letter in hints else UNUSED
        for letter in ALPHABET
    }
