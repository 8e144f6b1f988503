"""
Pytest configuration for the Wordle server tests.

Game logs are written to a temporary directory instead of ./logs.
"""

import os
import tempfile

os.environ.setdefault('LOG_DIR', tempfile.mkdtemp(prefix='wordle-test-logs-'))

import pytest

from wordle_app import create_app
from wordle_app.config import TestingConfig
from wordle_app.services.game_session import GameSession
from wordle_app.services.presentation import RecordingSink
from wordle_app.services.word_source import ListWordSource, index_selector

TEST_DICTIONARY = [
    "crane", "trace", "knoll", "allow", "troll", "adieu", "stare",
    "plant", "mourn", "ghost", "pound", "light", "speed", "abide",
]


def make_word_source(secret, dictionary=TEST_DICTIONARY):
    return ListWordSource(dictionary=dictionary, target_words=[secret], selector=index_selector(0))


def type_word(session, word):
    """Type every letter of word, returning the events of the last key."""
    from wordle_app.services.input_adapter import letter
    events = []
    for ch in word:
        events = session.handle(letter(ch))
    return events


@pytest.fixture
def sink():
    return RecordingSink()


@pytest.fixture
def session_factory(sink):
    """Build started sessions for a given secret word."""
    def factory(secret="crane", **kwargs):
        return GameSession(make_word_source(secret), sink=sink, **kwargs).start()
    return factory


@pytest.fixture
def app():
    flask_app, socketio = create_app(TestingConfig)
    flask_app.config['TESTING'] = True
    return flask_app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def socket_client(app):
    return app.socketio.test_client(app)
