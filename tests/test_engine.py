"""
Testing pure game logic.
"""

import itertools

import pytest

from mastermind.engine import Feedback, feedback_string, is_win, score
from mastermind.secret import generate


def test_score_no_matches():
    secret = [1, 2, 3, 4]
    guess = [5, 6, 5, 6]

    assert score(guess, secret) == Feedback(exact=0, partial=0)


def test_score_exact_and_partial():
    # 1 is in place; 3 and 2 are in the secret but swapped
    assert score([1, 3, 2, 5], [1, 2, 3, 4]) == Feedback(exact=1, partial=2)


def test_score_exact_matches_use_up_duplicates():
    # both 1s in the secret are consumed by exact matches
    assert score([1, 1, 1, 1], [1, 1, 2, 3]) == Feedback(exact=2, partial=0)


def test_score_with_duplicates():
    secret = [2, 2, 5, 5]
    guess = [2, 5, 2, 5]

    fb = score(guess, secret)
    # first and last positions are exact; the middle 5 and 2 swap
    assert fb.exact == 2
    assert fb.partial == 2


def test_score_guess_digit_counted_once():
    # only one 6 in the secret, so only one W for the three 6s
    assert score([6, 6, 6, 1], [1, 2, 3, 6]) == Feedback(exact=0, partial=2)


def test_score_length_mismatch_is_an_error():
    with pytest.raises(ValueError):
        score([1, 2, 3], [1, 2, 3, 4])


def test_score_properties_over_sampled_codes():
    codes = [generate(4, (1, 6), seed=n) for n in range(1, 60)]
    for g, s in itertools.product(codes, repeat=2):
        forward = score(g, s)
        backward = score(s, g)
        assert forward.exact == backward.exact
        assert forward.partial == backward.partial
        assert forward.exact + forward.partial <= 4
        if g == s:
            assert forward == Feedback(exact=4, partial=0)


def test_is_win_true_and_false():
    assert is_win(score([1, 2, 3, 4], [1, 2, 3, 4])) is True
    assert is_win(score([1, 2, 3, 5], [1, 2, 3, 4])) is False


def test_feedback_string():
    assert feedback_string(1, 2) == "BWW"
    assert feedback_string(0, 0) == "-"
    assert Feedback(exact=4, partial=0).pegs() == "BBBB"
