"""Enumerations for sessions, players and validation findings."""

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

from enum import Enum
from typing import Type, TypeVar, Union

from courtplan.exceptions import InvalidConfigurationException

E = TypeVar("E", bound=Enum)


class Sport(Enum):
    """Racket sport played in a session."""

    PADEL = "padel"
    TENNIS = "tennis"


class GameFormat(Enum):
    """Tournament format, which decides the shape the roster must have."""

    MEXICANO = "mexicano"
    AMERICANO = "americano"
    FIXED_PARTNER = "fixed_partner"
    MIXED_MEXICANO = "mixed_mexicano"


class PlayMode(Enum):
    """Whether courts play one after another or at the same time."""

    SEQUENTIAL = "sequential"
    PARALLEL = "parallel"


class ScoringMode(Enum):
    """How a match is scored."""

    POINTS = "points"
    FIRST_TO = "first_to"
    TOTAL_GAMES = "total_games"


class MatchupPreference(Enum):
    """How teams are mixed by gender when matches are drawn."""

    ANY = "any"
    MIXED_ONLY = "mixed_only"
    RANDOMIZED_MODES = "randomized_modes"


class Gender(Enum):
    MALE = "male"
    FEMALE = "female"
    UNSPECIFIED = "unspecified"


class Severity(Enum):
    """Severity of a validation finding. Only errors block a session."""

    ERROR = "error"
    WARNING = "warning"


class Category(Enum):
    """Area of the session setup a validation finding belongs to."""

    SESSION_INFO = "session_info"
    PLAYERS = "players"
    COURTS = "courts"
    SCORING = "scoring"
    GAME_TYPE = "game_type"


def coerce_enum(enum_cls: Type[E], value: Union[E, str], field_name: str) -> E:
    """Convert ``value`` to a member of ``enum_cls``.

    Args:
        enum_cls: Target enumeration
        value: A member of ``enum_cls`` or its string value
        field_name: Field being converted, used in the error message

    Returns:
        The enumeration member

    Raises:
        InvalidConfigurationException: If ``value`` is not a known value
    """
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(member.value for member in enum_cls)
        raise InvalidConfigurationException(
            f"Invalid {field_name}: {value!r} (expected one of: {allowed})"
        ) from None
