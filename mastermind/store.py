"""
Game sessions.
- GameSession: one game, its secret and attempt counter (local mode uses this directly)
- GameStore: in-memory sessions keyed by id, for the reference server
"""

from dataclasses import dataclass
from threading import RLock
from typing import Dict, Optional
from uuid import uuid4

from .engine import Feedback, score, is_win
from .secret import generate
from .types import Code, DigitRange, GameStatus, CODE_LENGTH, DIGIT_RANGE


@dataclass
class GameSession:
    secret: Code
    attempts: int = 0
    code_length: int = CODE_LENGTH
    digit_range: DigitRange = DIGIT_RANGE

    @classmethod
    def new(
        cls,
        seed: Optional[int] = None,
        code_length: int = CODE_LENGTH,
        digit_range: DigitRange = DIGIT_RANGE,
    ) -> "GameSession":
        secret = generate(code_length, digit_range, seed=seed)
        return cls(secret=secret, code_length=code_length, digit_range=digit_range)

    def submit_guess(self, guess: Code) -> Feedback:
        # guess is already validated by the caller
        self.attempts += 1
        return score(guess, self.secret)


@dataclass
class StoredGame:
    id: str
    session: GameSession
    status: GameStatus = "in_progress"
    last: Optional[Feedback] = None


class GameStore:
    def __init__(self) -> None:
        self._games: Dict[str, StoredGame] = {}
        self._lock = RLock()

    def create(self, secret: Code) -> StoredGame:
        new_id = str(uuid4())
        game = StoredGame(id=new_id, session=GameSession(secret=list(secret), code_length=len(secret)))
        with self._lock:
            self._games[new_id] = game
        return game

    def get(self, game_id: str) -> Optional[StoredGame]:
        with self._lock:
            return self._games.get(game_id)

    def guess(self, game_id: str, attempt: Code) -> Optional[StoredGame]:
        with self._lock:
            game = self._games.get(game_id)
            if game is None:
                return None

            if game.status != "in_progress":
                # If game already ended, just return it (ignore extra guesses)
                return game

            if len(game.session.secret) != len(attempt):
                raise ValueError(f"Guess must have exactly {len(game.session.secret)} digits for this game.")

            feedback = game.session.submit_guess(attempt)
            game.last = feedback
            if is_win(feedback, game.session.code_length):
                game.status = "won"
            return game

    def delete(self, game_id: str) -> bool:
        with self._lock:
            return self._games.pop(game_id, None) is not None
