"""SessionConfig data class."""

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

from dataclasses import dataclass, fields, replace
from datetime import date, time
from typing import Any, Dict, Optional, Tuple

from courtplan.constants import (
    DEFAULT_COURTS,
    DEFAULT_DURATION_HOURS,
    PLAYERS_PER_COURT,
    SCORING_MODE_DEFAULTS,
)
from courtplan.exceptions import InvalidConfigurationException
from courtplan.models.enums import (
    GameFormat,
    MatchupPreference,
    PlayMode,
    ScoringMode,
    Sport,
    coerce_enum,
)
from courtplan.models.session.scoring import (
    FirstToScoring,
    PointsScoring,
    ScoringConfig,
    TotalGamesScoring,
)
from courtplan.type_hints import DateInput, TimeInput

_ENUM_FIELDS = {
    "sport": Sport,
    "game_format": GameFormat,
    "mode": PlayMode,
    "scoring_mode": ScoringMode,
    "matchup_preference": MatchupPreference,
}

_NUMBER = (int, float)
_OPTIONAL_NUMBER = (int, float, type(None))

# Accepted types for non-enum fields read from stored data
_FIELD_TYPES: Dict[str, Tuple[type, ...]] = {
    "name": (str,),
    "courts": _NUMBER,
    "points_per_match": _NUMBER,
    "game_date": (str, date, type(None)),
    "game_time": (str, time, type(None)),
    "duration_hours": _NUMBER,
    "games_to_win": _OPTIONAL_NUMBER,
    "total_games": _OPTIONAL_NUMBER,
    "points_per_game": _OPTIONAL_NUMBER,
    "win_margin": _OPTIONAL_NUMBER,
    "enable_tiebreak": (bool, type(None)),
    "tiebreak_points": _OPTIONAL_NUMBER,
    "club_name": (str,),
    "club_id": (str, type(None)),
}


@dataclass(frozen=True)
class SessionConfig:
    """Settings describing one tournament session.

    A ``SessionConfig`` is an immutable snapshot. Values are stored as given,
    even when out of range: reporting bad values is the session validator's
    job, not the constructor's. Only enum fields are checked here, and they
    accept either the member or its string value.

    Attributes
    ----------
    name : str
        Session name shown to players.
    sport : Sport
        Padel or tennis.
    game_format : GameFormat
        Mexicano, Americano, fixed partner or mixed Mexicano.
    mode : PlayMode
        Sequential or parallel court play.
    scoring_mode : ScoringMode
        Points, first to X games, or total games.
    courts : int
        Number of courts in use.
    points_per_match : int
        Target points (or games, for game-based modes) per match.
    game_date : date or str or None
        Day of the session. Strings are ISO ``YYYY-MM-DD``.
    game_time : time or str or None
        Start time. Strings are ``HH:MM``.
    duration_hours : float
        Planned length of the session.
    matchup_preference : MatchupPreference
        Gender mixing preference for drawn matches.
    games_to_win, total_games, points_per_game : int or None
        Extended scoring settings. ``None`` and ``0`` both mean "unset".
    win_margin, enable_tiebreak, tiebreak_points
        Extended scoring settings carried through without validation.
    club_name, club_id
        Hosting club, carried through without validation.
    """

    name: str = ""
    sport: Sport = Sport.PADEL
    game_format: GameFormat = GameFormat.MEXICANO
    mode: PlayMode = PlayMode.SEQUENTIAL
    scoring_mode: ScoringMode = ScoringMode.POINTS
    courts: int = DEFAULT_COURTS
    points_per_match: int = SCORING_MODE_DEFAULTS["points"]
    game_date: DateInput = None
    game_time: TimeInput = None
    duration_hours: float = DEFAULT_DURATION_HOURS
    matchup_preference: MatchupPreference = MatchupPreference.ANY
    # Extended scoring configuration
    games_to_win: Optional[int] = None
    total_games: Optional[int] = None
    points_per_game: Optional[int] = None
    win_margin: Optional[int] = None
    enable_tiebreak: Optional[bool] = None
    tiebreak_points: Optional[int] = None
    club_name: str = ""
    club_id: Optional[str] = None

    def __post_init__(self):
        for field_name, enum_cls in _ENUM_FIELDS.items():
            value = coerce_enum(enum_cls, getattr(self, field_name), field_name)
            object.__setattr__(self, field_name, value)

    @property
    def scoring(self) -> ScoringConfig:
        """Scoring settings relevant to :attr:`scoring_mode`."""
        if self.scoring_mode is ScoringMode.POINTS:
            return PointsScoring(
                target=self.points_per_match,
                win_margin=self.win_margin,
            )
        if self.scoring_mode is ScoringMode.FIRST_TO:
            return FirstToScoring(
                target=self.points_per_match,
                games_to_win=self.games_to_win,
                points_per_game=self.points_per_game,
                enable_tiebreak=self.enable_tiebreak,
                tiebreak_points=self.tiebreak_points,
            )
        if self.scoring_mode is ScoringMode.TOTAL_GAMES:
            return TotalGamesScoring(
                target=self.points_per_match,
                total_games=self.total_games,
                points_per_game=self.points_per_game,
            )
        raise AssertionError(f"Unhandled scoring mode: {self.scoring_mode}")

    @property
    def player_slots(self) -> int:
        """Players on court at once when every court is in use."""
        return self.courts * PLAYERS_PER_COURT

    def with_changes(self, **changes: Any) -> "SessionConfig":
        """Return a copy with ``changes`` applied.

        Raises:
            InvalidConfigurationException: For unknown field names or enum values
        """
        unknown = sorted(set(changes) - _field_names())
        if unknown:
            raise InvalidConfigurationException(
                f"Unknown session field(s): {', '.join(unknown)}"
            )
        return replace(self, **changes)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize configuration to dictionary."""
        data: Dict[str, Any] = {}
        for field_name in _field_names_ordered():
            value = getattr(self, field_name)
            if field_name in _ENUM_FIELDS:
                value = value.value
            elif isinstance(value, time):
                value = value.strftime("%H:%M")
            elif isinstance(value, date):
                value = value.isoformat()
            data[field_name] = value
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SessionConfig":
        """Deserialize configuration from dictionary.

        Missing keys take their defaults. ``type``, the column name used by
        stored session rows, is accepted as an alias of ``game_format``.

        Raises:
            InvalidConfigurationException: For a non-mapping, unknown keys or
                values of the wrong type
        """
        if not isinstance(data, dict):
            raise InvalidConfigurationException(
                f"Session settings must be an object, not {type(data).__name__}"
            )
        values = dict(data)
        if "type" in values and "game_format" not in values:
            values["game_format"] = values.pop("type")
        unknown = sorted(set(values) - _field_names())
        if unknown:
            raise InvalidConfigurationException(
                f"Unknown session field(s): {', '.join(unknown)}"
            )
        for field_name, value in values.items():
            _check_field_type(field_name, value)
        return cls(**values)


def _check_field_type(field_name: str, value: Any) -> None:
    if field_name in _ENUM_FIELDS:
        allowed: Tuple[type, ...] = (str, _ENUM_FIELDS[field_name])
    else:
        allowed = _FIELD_TYPES[field_name]
    # bool is an int subclass; only enable_tiebreak takes it
    if isinstance(value, allowed) and not (isinstance(value, bool) and bool not in allowed):
        return
    expected = " or ".join("null" if t is type(None) else t.__name__ for t in allowed)
    raise InvalidConfigurationException(
        f"Invalid {field_name}: {value!r} (expected {expected})"
    )


def _field_names_ordered():
    return [f.name for f in fields(SessionConfig)]


def _field_names():
    return set(_field_names_ordered())
