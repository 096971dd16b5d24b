"""
Testing game sessions and the in-memory store
- Make guesses and check attempts/status, etc.
"""

from dataclasses import fields

from mastermind.engine import Feedback
from mastermind.store import GameSession, GameStore


def test_session_counts_every_guess():
    session = GameSession(secret=[1, 2, 3, 4])
    assert session.attempts == 0

    fb = session.submit_guess([4, 3, 2, 1])
    assert fb == Feedback(exact=0, partial=4)
    assert session.attempts == 1

    session.submit_guess([1, 2, 3, 4])
    assert session.attempts == 2


def test_session_new_with_seed_is_reproducible():
    a = GameSession.new(seed=99)
    b = GameSession.new(seed=99)
    assert a.secret == b.secret
    assert a.attempts == 0


def test_store_create_and_guess_basic():
    store = GameStore()

    # Secret is hardcoded so we know what outcome should be
    game = store.create([1, 2, 3, 4])
    assert game.status == "in_progress"
    assert game.session.attempts == 0

    # Wrong guess -> attempts go up, still in progress
    store.guess(game.id, [5, 6, 1, 2])
    after = store.get(game.id)
    assert after.session.attempts == 1
    assert after.last == Feedback(exact=0, partial=2)
    assert after.status == "in_progress"

    # Winning guess ends the game
    store.guess(game.id, [1, 2, 3, 4])
    assert store.get(game.id).status == "won"

    # Guessing after the win changes nothing
    store.guess(game.id, [6, 5, 4, 3])
    final = store.get(game.id)
    assert final.session.attempts == 2
    assert final.last == Feedback(exact=4, partial=0)


def test_store_unknown_and_delete():
    store = GameStore()
    assert store.guess("missing", [1, 2, 3, 4]) is None

    game = store.create([1, 2, 3, 4])
    assert store.delete(game.id) is True
    assert store.get(game.id) is None
    assert store.delete(game.id) is False


def test_stored_game_fields():
    store = GameStore()
    game = store.create([1, 2, 3, 4])
    assert [f.name for f in fields(game)] == ["id", "session", "status", "last"]
