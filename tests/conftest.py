import os
import sys
import tempfile

import pytest

# Ensure the project root (containing the `wordle_engine` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
PROJECT_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

# Keep test logs out of the working tree; must be set before the logger is imported
os.environ.setdefault('LOG_DIR', tempfile.mkdtemp(prefix='wordle-engine-logs-'))

from wordle_engine import create_app  # noqa: E402
from wordle_engine.config import TestingConfig  # noqa: E402
from wordle_engine.services.game_service import initialize_game_service  # noqa: E402
from wordle_engine.services.word_repository import WordRepository  # noqa: E402

TARGET = "CRANE"
ALLOWED_WORDS = ["SLATE", "SPEED", "ERASE", "LEVEL", "APPLE", "PAPER", "GEESE", "EERIE", "TRACE"]


@pytest.fixture()
def repository():
    # A single answer keeps the target predictable
    return WordRepository([TARGET], allowed_words=ALLOWED_WORDS)


@pytest.fixture()
def game_service(repository):
    return initialize_game_service(repository)


@pytest.fixture()
def flask_app(game_service):
    application, _ = create_app(TestingConfig)
    yield application


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def sio_client(flask_app):
    test_client = flask_app.socketio.test_client(
        flask_app,
        flask_test_client=flask_app.test_client()
    )
    yield test_client
    if test_client.is_connected():
        test_client.disconnect()
