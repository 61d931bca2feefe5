"""Session setup and recorded score validation."""

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

from courtplan.validation.score_checker import (
    ScoreCheckResult,
    check_score,
    check_score_strict,
)
from courtplan.validation.session_rules import (
    SESSION_RULES,
    SessionValidator,
    ValidationContext,
    ValidationResult,
    create_session_validator,
    get_validation_errors,
    get_validation_warnings,
    group_validations_by_category,
    is_session_valid,
    validate_session,
)

__all__ = [
    "SESSION_RULES",
    "ScoreCheckResult",
    "SessionValidator",
    "ValidationContext",
    "ValidationResult",
    "check_score",
    "check_score_strict",
    "create_session_validator",
    "get_validation_errors",
    "get_validation_warnings",
    "group_validations_by_category",
    "is_session_valid",
    "validate_session",
]
