"""
Pure game logic (no HTTP, no storage).
For each guess we compute two feedback numbers:
- exact:   digits right in value and position (shown as B)
- partial: remaining digits right in value but in the wrong position (shown as W)

Duplicates are allowed, so partial matches are counted by consuming
the unmatched secret digits one at a time.
"""

from collections import Counter
from dataclasses import dataclass
from typing import List

from .types import Code, CODE_LENGTH


@dataclass(frozen=True)
class Feedback:
    exact: int
    partial: int

    def pegs(self) -> str:
        return feedback_string(self.exact, self.partial)


def score(guess: Code, secret: Code) -> Feedback:
    """
    Example:
      secret = [1, 2, 3, 4]
      guess  = [1, 3, 2, 5]
      exact   = 1  (the first 1 matches)
      partial = 2  (3 and 2 are in the secret, elsewhere)
    """
    if len(guess) != len(secret):
        raise ValueError("Secret and guess must be the same length.")

    # 1. Exact pass; keep what did not match, in order
    exact = 0
    unused_secret: List[int] = []
    unused_guess: List[int] = []
    for g, s in zip(guess, secret):
        if g == s:
            exact += 1
        else:
            unused_secret.append(s)
            unused_guess.append(g)

    # 2. Each leftover secret digit can satisfy one leftover guess digit
    remaining = Counter(unused_secret)
    partial = 0
    for g in unused_guess:
        if remaining[g] > 0:
            partial += 1
            remaining[g] -= 1

    return Feedback(exact=exact, partial=partial)


def is_win(feedback: Feedback, code_length: int = CODE_LENGTH) -> bool:
    return feedback.exact == code_length


def feedback_string(exact: int, partial: int) -> str:
    """'B' per exact match, then 'W' per partial match; '-' when nothing matched."""
    pegs = "B" * exact + "W" * partial
    return pegs or "-"
