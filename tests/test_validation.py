"""
Testing guess parsing.
"""

import pytest

from mastermind.validation import (
    GuessError,
    InvalidCharacters,
    InvalidLength,
    OutOfRange,
    has_repeats,
    parse_guess,
)

RANGE = (1, 6)


def test_plain_guess():
    assert parse_guess("1234", 4, RANGE) == [1, 2, 3, 4]


def test_spaces_are_ignored():
    assert parse_guess("1 2 3 4", 4, RANGE) == [1, 2, 3, 4]
    assert parse_guess("  6543\n", 4, RANGE) == [6, 5, 4, 3]


@pytest.mark.parametrize("raw", ["", "   ", "123", "12345", "1 2 3"])
def test_wrong_length(raw):
    with pytest.raises(InvalidLength):
        parse_guess(raw, 4, RANGE)


def test_bad_characters():
    with pytest.raises(InvalidCharacters):
        parse_guess("12a4", 4, RANGE)


def test_length_checked_before_characters():
    with pytest.raises(InvalidLength):
        parse_guess("abc", 4, RANGE)


def test_out_of_range():
    with pytest.raises(OutOfRange) as exc:
        parse_guess("1279", 4, RANGE)
    assert str(exc.value) == "Each digit must be between 1 and 6."


def test_errors_are_value_errors():
    assert issubclass(GuessError, ValueError)
    with pytest.raises(ValueError):
        parse_guess("0000", 4, RANGE)


def test_has_repeats():
    assert has_repeats([1, 1, 2, 3]) is True
    assert has_repeats([1, 2, 3, 4]) is False
