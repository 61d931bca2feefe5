import pytest

from courtplan.exceptions import CourtPlanException, InvalidScoreException
from courtplan.validation.score_checker import (
    ScoreCheckResult,
    check_score,
    check_score_strict,
)


@pytest.mark.parametrize(
    "score1, score2, valid",
    [
        (15, 0, True),
        (0, 15, True),
        (14, 10, False),
        (16, 15, False),
        (17, 15, True),
        (15, 17, True),
        (30, 28, True),
        (35, 33, False),
        (15, 15, True),
        (15, 14, True),
    ],
)
def test_first_to_15_boundaries(score1, score2, valid):
    assert check_score(score1, score2, "first_to_15").valid is valid


def test_default_mode_is_first_to_15():
    assert check_score(15, 3) == check_score(15, 3, "first_to_15")
    assert check_score(20, 3)
    assert check_score(14, 3) == check_score(14, 3, "first_to_15")
    assert not check_score(14, 3)


def test_negative_scores_rejected():
    result = check_score(-1, 15)
    assert not result
    assert result.error == "Scores cannot be negative"


def test_zero_zero_rejected():
    assert check_score(0, 0).error == "At least one team must score"


def test_target_not_reached_message():
    result = check_score(14, 10, "first_to_15")
    assert result.error == "Winning team must reach at least 15 points (first to 15)"


def test_win_by_two_message_uses_target():
    result = check_score(22, 21, "first_to_21")
    assert result.error == (
        "Must win by 2 points after reaching 21 (e.g., 23-21, 24-22)"
    )


def test_too_high_message():
    result = check_score(35, 33, "first_to_15")
    assert result.error == "Score seems too high. Please verify the score is correct."


def test_first_to_21_boundaries():
    assert check_score(21, 0, "first_to_21")
    assert check_score(42, 40, "first_to_21")
    assert not check_score(44, 42, "first_to_21")
    assert not check_score(20, 18, "first_to_21")


def test_unknown_mode_only_checks_sign_and_zero():
    assert check_score(3, 2, "best_of_3")
    assert check_score(100, 99, "timed")
    assert not check_score(0, 0, "timed")
    assert not check_score(-2, 1, "timed")


def test_result_truthiness_and_repr():
    assert bool(ScoreCheckResult(True)) is True
    assert bool(ScoreCheckResult(False, "nope")) is False
    assert "INVALID" in repr(ScoreCheckResult(False, "nope"))


def test_strict_check_raises_with_message():
    check_score_strict(17, 15)
    with pytest.raises(InvalidScoreException, match="Must win by 2"):
        check_score_strict(16, 15)


def test_strict_check_error_is_library_exception():
    with pytest.raises(CourtPlanException):
        check_score_strict(0, 0)
