"""
Turns raw guess text into a Code.

Checks run in this order:
1. not empty, and exactly `code_length` digits once spaces are removed
2. only decimal digits
3. every digit inside the allowed range

Each failure raises a GuessError (a ValueError), so callers can report it
and ask again without consuming an attempt.
"""

from typing import Sequence

from .types import Code, DigitRange


class GuessError(ValueError):
    """Raw guess text could not be turned into a code."""


class InvalidLength(GuessError):
    def __init__(self, expected: int):
        self.expected = expected
        super().__init__(f"Input length must be exactly {expected} digits.")


class InvalidCharacters(GuessError):
    def __init__(self):
        super().__init__("Input must only contain digits (e.g., 1234).")


class OutOfRange(GuessError):
    def __init__(self, allowed: DigitRange):
        self.allowed = allowed
        low, high = allowed
        super().__init__(f"Each digit must be between {low} and {high}.")


def parse_guess(raw: str, code_length: int, digit_range: DigitRange) -> Code:
    trimmed = raw.strip()
    if not trimmed:
        raise InvalidLength(code_length)

    digits_only = trimmed.replace(" ", "")
    if len(digits_only) != code_length:
        raise InvalidLength(code_length)

    # str.isdigit() also accepts things like superscripts; keep to 0-9
    if any(ch not in "0123456789" for ch in digits_only):
        raise InvalidCharacters()

    low, high = digit_range
    guess = [int(ch) for ch in digits_only]
    for digit in guess:
        if digit < low or digit > high:
            raise OutOfRange(digit_range)
    return guess


def has_repeats(code: Sequence[int]) -> bool:
    return len(set(code)) != len(code)


def code_to_str(code: Sequence[int]) -> str:
    return "".join(str(d) for d in code)
