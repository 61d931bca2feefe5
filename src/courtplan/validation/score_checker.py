"""Recorded match score checks for first-to-N point games."""

# Court Plan
# Copyright (C) 2025  Court Plan developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

from typing import Optional

from courtplan.constants import DEFAULT_SCORE_MODE, SCORE_TARGETS, WIN_BY
from courtplan.exceptions import InvalidScoreException
from courtplan.utils import setup_logger

logger = setup_logger(__name__)


class ScoreCheckResult:
    """Outcome of checking one recorded score.

    Attributes:
        valid: Whether the score can be recorded
        error: Message for the player entering the score, if invalid
    """

    def __init__(self, valid: bool, error: Optional[str] = None):
        self.valid = valid
        self.error = error

    def __bool__(self) -> bool:
        return self.valid

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ScoreCheckResult):
            return NotImplemented
        return self.valid == other.valid and self.error == other.error

    def __repr__(self) -> str:
        if self.valid:
            return "ScoreCheckResult(VALID)"
        return f"ScoreCheckResult(INVALID, {self.error!r})"


_VALID = ScoreCheckResult(True)


def _reject(score1: int, score2: int, message: str) -> ScoreCheckResult:
    logger.debug("Rejected score %s-%s: %s", score1, score2, message)
    return ScoreCheckResult(False, message)


def check_score(
    score1: int, score2: int, mode: str = DEFAULT_SCORE_MODE
) -> ScoreCheckResult:
    """Check that a final score is reachable under first-to-N rules.

    The winner must reach the target; past the target the winner must lead
    by two. A side reaching exactly the target is always accepted. Modes
    other than ``first_to_15`` and ``first_to_21`` are not checked.

    Args:
        score1: Points of the first team
        score2: Points of the second team
        mode: Scoring mode tag

    Returns:
        ScoreCheckResult, truthy when the score is valid

    Example:
        >>> check_score(16, 15).error
        'Must win by 2 points after reaching 15 (e.g., 17-15, 18-16)'
    """
    if score1 < 0 or score2 < 0:
        return _reject(score1, score2, "Scores cannot be negative")

    if score1 == 0 and score2 == 0:
        return _reject(score1, score2, "At least one team must score")

    target = SCORE_TARGETS.get(mode)
    if target is None:
        return _VALID

    high = max(score1, score2)
    low = min(score1, score2)

    if high < target:
        return _reject(
            score1,
            score2,
            f"Winning team must reach at least {target} points (first to {target})",
        )

    # Reaching the target exactly ends the game, whatever the other side has
    if high == target:
        return _VALID

    if high - low < WIN_BY:
        return _reject(
            score1,
            score2,
            f"Must win by {WIN_BY} points after reaching {target} "
            f"(e.g., {target + 2}-{target}, {target + 3}-{target + 1})",
        )

    if high > target * 2:
        return _reject(
            score1, score2, "Score seems too high. Please verify the score is correct."
        )

    return _VALID


def check_score_strict(score1: int, score2: int, mode: str = DEFAULT_SCORE_MODE) -> None:
    """Like :func:`check_score` but raise on an invalid score.

    Raises:
        InvalidScoreException: With the rejection message
    """
    result = check_score(score1, score2, mode)
    if not result:
        raise InvalidScoreException(result.error)
