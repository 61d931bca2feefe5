"""Input validation and coercion utilities for Court Plan.

This module provides reusable helpers for cleaning values that arrive from
forms and imported player lists, with consistent result objects.
"""

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

import re
from typing import Any, Iterable, Optional

from courtplan.constants import (
    MAX_RECORDED_SCORE,
    PLAYER_NAME_MAX_LENGTH,
    PLAYER_NAME_MIN_LENGTH,
    PLAYER_NAME_SANITIZE_LENGTH,
)
from courtplan.models.enums import GameFormat, Gender

_INVALID_NAME_CHARS = re.compile(r"[^A-Za-z0-9\s\-']")


class FieldValidation:
    """Result of validating a single input field.

    Attributes:
        is_valid: Whether the validation passed
        error_message: Human-readable error message if invalid
        sanitized_value: Cleaned/normalized value if valid
    """

    def __init__(
        self,
        is_valid: bool,
        error_message: Optional[str] = None,
        sanitized_value: Any = None,
    ):
        self.is_valid = is_valid
        self.error_message = error_message
        self.sanitized_value = sanitized_value

    def __bool__(self) -> bool:
        """Allow using result in boolean context: if result: ..."""
        return self.is_valid

    def __repr__(self) -> str:
        if self.is_valid:
            return f"FieldValidation(VALID, {self.sanitized_value!r})"
        return f"FieldValidation(INVALID, {self.error_message!r})"


# ========== Safe converters ==========


def to_gender(value: Any) -> Gender:
    """Convert ``value`` to a :class:`Gender`, falling back to unspecified.

    Example:
        >>> to_gender("female")
        <Gender.FEMALE: 'female'>
        >>> to_gender("f")
        <Gender.UNSPECIFIED: 'unspecified'>
    """
    if isinstance(value, Gender):
        return value
    try:
        return Gender(value)
    except ValueError:
        return Gender.UNSPECIFIED


def to_game_format(value: Any) -> GameFormat:
    """Convert ``value`` to a :class:`GameFormat`, falling back to Mexicano."""
    if isinstance(value, GameFormat):
        return value
    try:
        return GameFormat(value)
    except ValueError:
        return GameFormat.MEXICANO


def sanitize_player_name(name: Any) -> str:
    """Trim a player name, cap its length and drop unusual characters.

    Letters, digits, whitespace, hyphens and apostrophes are kept. Anything
    that is not a string becomes an empty name.
    """
    if not isinstance(name, str):
        return ""
    trimmed = name.strip()[:PLAYER_NAME_SANITIZE_LENGTH]
    return _INVALID_NAME_CHARS.sub("", trimmed)


def clamp_score(score: Any) -> Optional[int]:
    """Coerce a typed-in score to an integer in [0, 999].

    Returns:
        The rounded, clamped score, or None if ``score`` is empty or not a number
    """
    if score is None or isinstance(score, bool):
        return None
    try:
        number = float(score)
    except (TypeError, ValueError):
        return None
    if number != number:  # NaN
        return None
    if number < 0:
        return 0
    if number > MAX_RECORDED_SCORE:
        return MAX_RECORDED_SCORE
    return int(round(number))


# ========== Field validation ==========


def validate_player_name(
    name: Optional[str], existing_names: Iterable[str] = ()
) -> FieldValidation:
    """Validate a player name typed into the roster form.

    Args:
        name: Name to validate
        existing_names: Names already on the roster

    Returns:
        FieldValidation whose sanitized value is the trimmed name

    Example:
        >>> validate_player_name("ana", ["Ana"]).error_message
        '"ana" has already been added'
    """
    if not name or not name.strip():
        return FieldValidation(is_valid=False, error_message="Player name is required")

    trimmed = name.strip()

    if len(trimmed) < PLAYER_NAME_MIN_LENGTH:
        return FieldValidation(
            is_valid=False,
            error_message=f"Player name must be at least {PLAYER_NAME_MIN_LENGTH} characters",
        )

    if len(trimmed) > PLAYER_NAME_MAX_LENGTH:
        return FieldValidation(
            is_valid=False,
            error_message=f"Player name must be {PLAYER_NAME_MAX_LENGTH} characters or less",
        )

    key = trimmed.lower()
    if any(existing.lower() == key for existing in existing_names):
        return FieldValidation(
            is_valid=False,
            error_message=f'"{trimmed}" has already been added',
        )

    return FieldValidation(is_valid=True, sanitized_value=trimmed)


def validate_number_range(
    value: float, min_value: float, max_value: float, field_name: str = "Value"
) -> FieldValidation:
    """Validate that ``value`` lies in ``[min_value, max_value]``."""
    if value < min_value:
        return FieldValidation(
            is_valid=False,
            error_message=f"{field_name} must be at least {min_value}",
        )

    if value > max_value:
        return FieldValidation(
            is_valid=False,
            error_message=f"{field_name} must be {max_value} or less",
        )

    return FieldValidation(is_valid=True, sanitized_value=value)
