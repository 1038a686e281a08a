from wordle_engine.models.game import GuessResult, LetterOutcome
from wordle_engine.services.keyboard import keyboard_state, merge_hints
from wordle_engine.services.scoring import score

C, P, A = LetterOutcome.CORRECT, LetterOutcome.PRESENT, LetterOutcome.ABSENT


def test_merge_into_empty_hints():
    hints = merge_hints({}, "SLATE", score("SLATE", "CRANE"))
    assert hints == {'S': A, 'L': A, 'A': C, 'T': A, 'E': C}


def test_never_downgrades():
    hints = merge_hints({}, "ABXYZ", GuessResult("ABXYZ", (C, P, A, A, A)))
    hints = merge_hints(hints, "BAXYZ", GuessResult("BAXYZ", (A, P, A, A, A)))
    assert hints['A'] is C
    assert hints['B'] is P


def test_upgrades_absent_and_present():
    hints = {'A': A, 'B': P}
    hints = merge_hints(hints, "ABXYZ", GuessResult("ABXYZ", (P, C, A, A, A)))
    assert hints['A'] is P
    assert hints['B'] is C


def test_repeated_letter_keeps_strongest_outcome():
    hints = merge_hints({}, "EERIE", score("EERIE", "CRANE"))
    assert hints['E'] is C
    assert hints['R'] is P
    assert hints['I'] is A


def test_idempotent():
    result = score("SPEED", "ERASE")
    once = merge_hints({}, "SPEED", result)
    assert merge_hints(once, "SPEED", result) == once


def test_does_not_mutate_current_hints():
    current = {'A': A}
    merge_hints(current, "ABXYZ", GuessResult("ABXYZ", (C, C, C, C, C)))
    assert current == {'A': A}


def test_keyboard_state_covers_alphabet():
    state = keyboard_state({'A': C, 'Q': A})
    assert len(state) == 26
    assert state['A'] == 'correct'
    assert state['Q'] == 'absent'
    assert state['Z'] == 'unused'
