"""
Pytest configuration for the Wordle server.

Points the game log at a scratch directory before the package is imported
and blocks real network access to the random-word API.
"""

import os
import random
import tempfile

import pytest
import requests

os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="wordle-test-logs-"))

from wordle import create_app  # noqa: E402
from wordle.config import TestingConfig  # noqa: E402
from wordle.services.game_service import initialize_game_service  # noqa: E402
from wordle.services.word_source import WordSource  # noqa: E402


class FixedWordSource(WordSource):
    """Word source whose target is always the same word."""

    def __init__(self, target="crane", **kwargs):
        kwargs.setdefault("api_url", None)
        super().__init__(**kwargs)
        self.target = target

    def select_target_word(self):
        self.last_origin = "fixed"
        return self.target


@pytest.fixture(autouse=True)
def no_network(monkeypatch):
    """Fail any request that a test did not explicitly fake."""
    def refuse(*args, **kwargs):
        raise requests.ConnectionError("network disabled in tests")

    monkeypatch.setattr(requests, "get", refuse)


@pytest.fixture
def offline_word_source():
    return WordSource(api_url=None, rng=random.Random(7))


@pytest.fixture
def fixed_word_source():
    return FixedWordSource("crane")


@pytest.fixture
def game_service(fixed_word_source):
    return initialize_game_service(fixed_word_source)


@pytest.fixture
def app(game_service):
    app, socketio = create_app(TestingConfig)
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def socket_client(app):
    client = app.socketio.test_client(app)
    yield client
    if client.is_connected():
        client.disconnect()
