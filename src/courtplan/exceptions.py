"""Exceptions for use in Court Plan"""

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

# ========== Base Application Exception ==========


class CourtPlanException(Exception):
    """Base exception for all Court Plan errors.

    All custom exceptions in the library should inherit from this class.
    This enables catching all library-specific errors with a single except clause.
    """

    pass


# ========== Roster Exceptions ==========


class RosterException(CourtPlanException):
    """Base exception for roster editing errors."""

    pass


class MissingNameError(RosterException):
    """Raised when a pair is added and one of the two names is blank."""

    def __init__(self, message: str = "Both player names are required"):
        super().__init__(message)


class DuplicateNameError(RosterException):
    """Raised when a player name collides (case-insensitively) with another.

    Attributes:
        name: The trimmed name that caused the collision
    """

    def __init__(self, name: str, message: Optional[str] = None):
        self.name = name
        super().__init__(message or f'Player "{name}" already exists')


# ========== Configuration Exceptions ==========


class ConfigurationException(CourtPlanException):
    """Base exception for session configuration errors."""

    pass


class InvalidConfigurationException(ConfigurationException):
    """Raised when configuration data is structurally invalid.

    Out-of-range values are not errors at this level; they are reported by
    the session validator. This is raised for unknown enum values, unknown
    field names and dictionaries missing required keys.
    """

    pass


# ========== Score Exceptions ==========


class ScoreException(CourtPlanException):
    """Base exception for recorded score errors."""

    pass


class InvalidScoreException(ScoreException):
    """Raised by the strict score check when a score is not legal."""

    pass
