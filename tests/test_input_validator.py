import pytest

from wordle_engine.models.game import GameStatus
from wordle_engine.services.input_validator import KeyKind, accepts, classify_key

IN_PROGRESS = GameStatus.IN_PROGRESS


@pytest.mark.parametrize('key,kind', [
    ('A', KeyKind.LETTER),
    ('z', KeyKind.LETTER),
    ('ENTER', KeyKind.SUBMIT),
    ('Enter', KeyKind.SUBMIT),
    ('BACKSPACE', KeyKind.DELETE),
    ('Delete', KeyKind.DELETE),
    ('AB', KeyKind.OTHER),
    ('1', KeyKind.OTHER),
    ('', KeyKind.OTHER),
    ('A\n', KeyKind.OTHER),
    ('SHIFT', KeyKind.OTHER),
    (None, KeyKind.OTHER),
    ('\u212a', KeyKind.OTHER),
    ('\u017f', KeyKind.OTHER),
])
def test_classify_key(key, kind):
    assert classify_key(key) is kind


@pytest.mark.parametrize('key,buffer,expected', [
    ('A', '', True),
    ('a', 'CRAN', True),
    ('A', 'CRANE', False),
    ('ENTER', 'CRANE', True),
    ('ENTER', 'CRAN', False),
    ('ENTER', '', False),
    ('BACKSPACE', 'C', True),
    ('BACKSPACE', '', False),
    ('TAB', 'CR', False),
    ('7', '', False),
])
def test_accepts_while_in_progress(key, buffer, expected):
    assert accepts(key, buffer, IN_PROGRESS) is expected


@pytest.mark.parametrize('status', [GameStatus.WON, GameStatus.LOST])
@pytest.mark.parametrize('key,buffer', [('A', ''), ('ENTER', 'CRANE'), ('BACKSPACE', 'CR')])
def test_rejects_everything_once_finished(status, key, buffer):
    assert accepts(key, buffer, status) is False


def test_word_length_is_configurable():
    assert accepts('ENTER', 'ABCDEF', IN_PROGRESS, word_length=6)
    assert accepts('A', 'ABCDE', IN_PROGRESS, word_length=6)
    assert not accepts('ENTER', 'ABCDE', IN_PROGRESS, word_length=6)
