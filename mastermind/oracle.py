"""
The loop talks to a "guess evaluator": anything that takes a validated guess
and returns a Verdict. LocalOracle answers from an in-process GameSession;
remote.RemoteOracle answers from the game server.
"""

from dataclasses import dataclass
from typing import Optional, Protocol

from .engine import Feedback, is_win
from .store import GameSession
from .types import Code, DigitRange

WIN_STATUSES = ("win", "won")


@dataclass(frozen=True)
class Verdict:
    feedback: Feedback
    status: Optional[str] = None

    def is_win(self, code_length: int) -> bool:
        if is_win(self.feedback, code_length):
            return True
        return self.status is not None and self.status.lower() in WIN_STATUSES


class GuessEvaluator(Protocol):
    code_length: int
    digit_range: DigitRange
    unique_digits: bool

    def submit_guess(self, guess: Code) -> Verdict:
        ...


class LocalOracle:
    unique_digits = False

    def __init__(self, session: GameSession):
        self.session = session
        self.code_length = session.code_length
        self.digit_range = session.digit_range

    def submit_guess(self, guess: Code) -> Verdict:
        return Verdict(self.session.submit_guess(guess))
