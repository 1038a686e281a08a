"""
Letter Scoring

Implements the Wordle letter evaluation algorithm, including duplicate
letter resolution.
"""

from typing import Dict, List, Optional

from ..models.game import GuessResult, LetterOutcome


def score(guess: str, target: str) -> GuessResult:
    """
    Score a guess against the target word.

    Exact position matches are marked CORRECT first. Remaining letters are
    then checked left to right against the target letters not consumed by
    exact matches: while supply lasts a letter is PRESENT, after that ABSENT.
    When the guess repeats a letter more often than the target holds it, the
    left-most occurrences get the PRESENT marks.

    Args:
        guess: The guessed word (any case)
        target: The target word (any case)

    Returns:
        GuessResult index-aligned with the upper-cased guess

    Raises:
        ValueError: If the words differ in length
    """
    guess = guess.upper()
    target = target.upper()
    if len(guess) != len(target):
        raise ValueError(f"Guess '{guess}' and target have different lengths")

    outcomes: List[Optional[LetterOutcome]] = []
    # Target letters left over after exact matches
    remaining: Dict[str, int] = {}

    # First pass: exact position matches
    for guess_letter, target_letter in zip(guess, target):
        if guess_letter == target_letter:
            outcomes.append(LetterOutcome.CORRECT)
        else:
            outcomes.append(None)
            remaining[target_letter] = remaining.get(target_letter, 0) + 1

    # Second pass: present or absent, left-most first
    for i, letter in enumerate(guess):
        if outcomes[i] is not None:
            continue
        if remaining.get(letter, 0) > 0:
            outcomes[i] = LetterOutcome.PRESENT
            remaining[letter] -= 1
        else:
            outcomes[i] = LetterOutcome.ABSENT

    return GuessResult(word=guess, outcomes=tuple(outcomes))  # type: ignore[arg-type]
