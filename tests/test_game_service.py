import pytest

from wordle_engine.models.events import EventType
from wordle_engine.models.game import GuessError, GameSummary
from wordle_engine.models.stats import PlayerStats
from wordle_engine.services.game_service import GameNotFoundError, get_game_service


def press(service, game_id, keys):
    events = []
    for key in keys:
        _, new_events = service.press_key(game_id, key)
        events.extend(new_events)
    return events


def test_initialize_sets_global_service(game_service):
    assert get_game_service() is game_service


def test_new_game_hides_answer(game_service):
    game_id = game_service.create_new_game()
    state = game_service.get_game_state(game_id)
    assert state.status == 'in_progress'
    assert state.answer is None
    assert state.max_rounds == 6
    assert state.word_length == 5
    assert set(state.letter_status.values()) == {'unused'}


def test_unknown_game(game_service):
    assert game_service.get_game_state('nope') is None
    with pytest.raises(GameNotFoundError):
        game_service.press_key('nope', 'A')
    with pytest.raises(GameNotFoundError):
        game_service.reset_game('nope')
    assert game_service.delete_game('nope') is False


def test_sessions_are_isolated(game_service):
    first = game_service.create_new_game()
    second = game_service.create_new_game()
    press(game_service, first, "SLA")
    assert game_service.get_game_state(first).current_guess == "SLA"
    assert game_service.get_game_state(second).current_guess == ""


def test_key_presses_win_and_reveal_answer(game_service):
    game_id = game_service.create_new_game()
    events = press(game_service, game_id, list("CRANE") + ["ENTER"])
    assert EventType.GAME_OVER in [event.name for event in events]

    state = game_service.get_game_state(game_id)
    assert state.won
    assert state.game_over
    assert state.answer == "CRANE"
    assert state.guess_results == [[(letter, 'correct') for letter in "CRANE"]]
    assert state.letter_status['C'] == 'correct'


def test_make_guess(game_service):
    game_id = game_service.create_new_game()
    press(game_service, game_id, "XY")

    state, events, error = game_service.make_guess(game_id, "slate")
    assert error is None
    assert [event.name for event in events] == [EventType.GUESS_SCORED, EventType.KEYBOARD_UPDATED]
    assert state.guesses == ["SLATE"]
    assert state.current_round == 1
    assert state.current_guess == ""


@pytest.mark.parametrize('guess,expected', [
    ("SLA", GuessError.INCOMPLETE_GUESS),
    ("SLATES", GuessError.INVALID_WORD),
    ("ZZZZZ", GuessError.INVALID_WORD),
    ("SL4TE", GuessError.INVALID_INPUT),
    ("", GuessError.INVALID_INPUT),
    (None, GuessError.INVALID_INPUT),
])
def test_make_guess_failures_keep_round(game_service, guess, expected):
    game_id = game_service.create_new_game()
    state, _, error = game_service.make_guess(game_id, guess)
    assert error is expected
    assert state.current_round == 0
    assert state.guesses == []


def test_make_guess_after_game_over(game_service):
    game_id = game_service.create_new_game()
    game_service.make_guess(game_id, "CRANE")
    _, events, error = game_service.make_guess(game_id, "SLATE")
    assert error is GuessError.GAME_OVER
    assert events == []


def test_stats_are_kept_per_session(game_service):
    won = game_service.create_new_game()
    game_service.make_guess(won, "SLATE")
    game_service.make_guess(won, "CRANE")

    lost = game_service.create_new_game()
    for _ in range(6):
        game_service.make_guess(lost, "SLATE")

    won_stats = game_service.get_stats(won)
    assert won_stats['games_played'] == 1
    assert won_stats['games_won'] == 1
    assert won_stats['win_percentage'] == 100
    assert won_stats['current_streak'] == 1
    assert won_stats['guess_distribution'] == {'2': 1}
    assert won_stats['average_guesses'] == 2

    lost_stats = game_service.get_stats(lost)
    assert lost_stats['games_played'] == 1
    assert lost_stats['games_won'] == 0
    assert lost_stats['current_streak'] == 0
    assert lost_stats['guess_distribution'] == {}


def test_stats_carry_over_reset_and_go_with_delete(game_service):
    game_id = game_service.create_new_game()
    game_service.make_guess(game_id, "CRANE")
    game_service.reset_game(game_id)
    game_service.make_guess(game_id, "CRANE")
    stats = game_service.get_stats(game_id)
    assert stats['games_played'] == 2
    assert stats['max_streak'] == 2

    game_service.delete_game(game_id)
    with pytest.raises(GameNotFoundError):
        game_service.get_stats(game_id)


def test_rejected_whole_word_keeps_typed_letters(game_service):
    game_id = game_service.create_new_game()
    press(game_service, game_id, "TRA")

    state, events, error = game_service.make_guess(game_id, "ZZZZZ")
    assert error is GuessError.INVALID_WORD
    assert [event.name for event in events] == [EventType.INVALID_WORD]
    assert state.current_guess == "TRA"
    assert game_service.get_game_state(game_id).current_guess == "TRA"


def test_reset_game(game_service):
    game_id = game_service.create_new_game()
    game_service.make_guess(game_id, "CRANE")
    state = game_service.reset_game(game_id)
    assert state.status == 'in_progress'
    assert state.guesses == []
    assert state.answer is None
    assert set(state.letter_status.values()) == {'unused'}


def test_delete_game(game_service):
    game_id = game_service.create_new_game()
    assert game_service.delete_game(game_id)
    assert game_service.get_game_state(game_id) is None


def test_player_stats_streaks():
    stats = PlayerStats()
    for attempts in (3, 4):
        stats.record_game(GameSummary(won=True, target_word="CRANE", attempts_used=attempts))
    assert stats.current_streak == 2
    assert stats.average_guesses == 3.5
    stats.record_game(GameSummary(won=False, target_word="CRANE", attempts_used=6))
    assert stats.current_streak == 0
    assert stats.max_streak == 2
    assert stats.win_percentage == 67
