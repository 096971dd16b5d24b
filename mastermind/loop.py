"""
Command loop shared by local and API mode.

One prompt per turn:
- "exit" ends the run before anything is sent anywhere
- bad input is reported and does not use up an attempt
- a valid guess goes to the oracle and its feedback is printed
The loop stops on a win, when the attempt limit is reached, or on exit.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

import typer

from .oracle import GuessEvaluator
from .remote import OracleError
from .validation import GuessError, has_repeats, parse_guess

logger = logging.getLogger(__name__)

EXIT_WORD = "exit"


class LoopState(str, Enum):
    ACTIVE = "active"
    WON = "won"
    ATTEMPT_LIMIT_REACHED = "attempt_limit_reached"
    USER_EXITED = "user_exited"
    ABORTED = "aborted"


@dataclass
class CommandLoop:
    oracle: GuessEvaluator
    max_attempts: Optional[int] = None
    read_line: Optional[Callable[[str], str]] = None
    echo: Callable[[str], None] = typer.echo
    attempts: int = 0
    state: LoopState = LoopState.ACTIVE

    def __post_init__(self):
        if self.read_line is None:
            self.read_line = input

    @property
    def prompt(self) -> str:
        low, high = self.oracle.digit_range
        return f"\nEnter your guess ({self.oracle.code_length} digits, {low}-{high}) > "

    def run(self) -> LoopState:
        while self.state is LoopState.ACTIVE:
            self.step()
        return self.state

    def step(self) -> LoopState:
        if self.max_attempts is not None and self.attempts >= self.max_attempts:
            self.echo(" You have reached the maximum number of attempts.")
            self.state = LoopState.ATTEMPT_LIMIT_REACHED
            return self.state

        try:
            line = self.read_line(self.prompt)
        except EOFError:
            self.echo("\nExiting the game. Goodbye!")
            self.state = LoopState.USER_EXITED
            return self.state

        if line.strip().lower() == EXIT_WORD:
            self.echo("Exiting the game. Goodbye!")
            self.state = LoopState.USER_EXITED
            return self.state

        try:
            guess = parse_guess(line, self.oracle.code_length, self.oracle.digit_range)
        except GuessError as err:
            self.echo(f" Error: {err} (Type '{EXIT_WORD}' to quit)")
            return self.state

        if self.oracle.unique_digits and has_repeats(guess):
            self.echo(" This API requires unique digits (duplicates are not allowed). "
                      "Please enter a different guess.")
            return self.state

        self.attempts += 1
        try:
            verdict = self.oracle.submit_guess(guess)
        except OracleError as err:
            logger.info("guess %s failed: %r", guess, err)
            self.echo(f" API Error: {err}")
            return self.state

        fb = verdict.feedback
        self.echo(f"Result: {fb.pegs()}   [B={fb.exact}, W={fb.partial}]   Attempt #{self.attempts}")
        if verdict.is_win(self.oracle.code_length):
            self.echo(" Congratulations! You found the code.")
            self.state = LoopState.WON
        return self.state
