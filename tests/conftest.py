"""
- Fresh in-memory store per test for the reference server
- A client fixture (TestClient(app)) that already uses that store
- Canned HTTP sessions for the remote client (no network in tests)
- Scripted stdin for the command loop
"""
import logging

import pytest

from fastapi.testclient import TestClient

import mastermind.server as server
from mastermind.store import GameStore


class FakeResponse:
    def __init__(self, text: str = "", status_code: int = 200):
        self.text = text
        self.status_code = status_code


class FakeSession:
    """Stands in for requests.Session: replays responses (or raises exceptions) in order."""

    def __init__(self, *replies):
        self.replies = list(replies)
        self.calls = []

    def request(self, method, url, **kwargs):
        self.calls.append({"method": method, "url": url, **kwargs})
        reply = self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return reply


class ScriptedInput:
    """Feeds lines to the loop; raises EOFError when the script runs out."""

    def __init__(self, *lines):
        self.lines = list(lines)
        self.prompts = []

    def __call__(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.lines:
            raise EOFError
        return self.lines.pop(0)


@pytest.fixture
def make_session():
    def _make(*replies):
        return FakeSession(*[FakeResponse(r) if isinstance(r, str) else r for r in replies])
    return _make


@pytest.fixture
def make_response():
    return FakeResponse


@pytest.fixture
def scripted():
    return ScriptedInput


@pytest.fixture
def output():
    """Collects everything the loop echoes."""
    return []


@pytest.fixture
def game_store():
    return GameStore()


@pytest.fixture(autouse=True)
def override_store(game_store):
    """Force the server to use a clean store for every test."""
    server.app.dependency_overrides[server.get_store] = lambda: game_store
    yield
    server.app.dependency_overrides.clear()


@pytest.fixture(autouse=True)
def reset_package_logger():
    """The CLI installs a handler on the package logger; drop it after each test."""
    yield
    logger = logging.getLogger("mastermind")
    logger.handlers = []
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def client():
    return TestClient(server.app)
