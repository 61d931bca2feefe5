"""Working state of the session setup form.

This module holds the session settings while they are being edited and keeps
dependent settings consistent, e.g. switching the sport also switches to a
scoring mode that suits it.
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

from datetime import date, datetime
from typing import Any, Dict, List, Optional

from courtplan.constants import (
    DEFAULT_GAME_TIME,
    DEFAULT_GAMES_TO_WIN,
    DEFAULT_POINTS_PER_GAME,
    DEFAULT_TIEBREAK_POINTS,
    DEFAULT_TOTAL_GAMES,
    DEFAULT_WIN_MARGIN,
    MAX_PARALLEL_COURTS,
    MIN_PARALLEL_COURTS,
    SCORING_MODE_DEFAULTS,
)
from courtplan.models.enums import (
    GameFormat,
    MatchupPreference,
    PlayMode,
    ScoringMode,
    Sport,
)
from courtplan.models.player import PlayerRoster
from courtplan.models.session import SessionConfig
from courtplan.utils import setup_logger
from courtplan.validation import SessionValidator, ValidationResult, create_session_validator

logger = setup_logger(__name__)

# Stored session rows call the format column "type"
_FIELD_ALIASES = {"type": "game_format"}


def default_session_config(today: Optional[date] = None) -> SessionConfig:
    """Settings a new session form starts with."""
    return SessionConfig(
        game_date=today if today is not None else date.today(),
        game_time=DEFAULT_GAME_TIME,
        win_margin=DEFAULT_WIN_MARGIN,
        games_to_win=DEFAULT_GAMES_TO_WIN,
        total_games=DEFAULT_TOTAL_GAMES,
        points_per_game=DEFAULT_POINTS_PER_GAME,
        enable_tiebreak=False,
        tiebreak_points=DEFAULT_TIEBREAK_POINTS,
    )


def scoring_mode_defaults(scoring_mode: ScoringMode) -> Dict[str, Any]:
    """Field values a scoring mode starts from when it is selected."""
    changes: Dict[str, Any] = {
        "points_per_match": SCORING_MODE_DEFAULTS[scoring_mode.value],
    }
    if scoring_mode is ScoringMode.POINTS:
        changes["win_margin"] = DEFAULT_WIN_MARGIN
    elif scoring_mode is ScoringMode.FIRST_TO:
        changes.update(
            games_to_win=DEFAULT_GAMES_TO_WIN,
            points_per_game=DEFAULT_POINTS_PER_GAME,
            enable_tiebreak=False,
            tiebreak_points=DEFAULT_TIEBREAK_POINTS,
        )
    elif scoring_mode is ScoringMode.TOTAL_GAMES:
        changes.update(
            total_games=DEFAULT_TOTAL_GAMES,
            points_per_game=DEFAULT_POINTS_PER_GAME,
        )
    return changes


class SessionForm:
    """Editable session settings with dependent-field adjustment.

    The settings themselves are an immutable :class:`SessionConfig`; every
    update replaces it. :meth:`update_field` mirrors what the setup form does
    when the user changes one control, while :meth:`update_fields` applies
    values exactly as given.
    """

    def __init__(
        self,
        config: Optional[SessionConfig] = None,
        validator: Optional[SessionValidator] = None,
    ):
        self._config = config if config is not None else default_session_config()
        self._validator = validator if validator is not None else create_session_validator()

    @property
    def config(self) -> SessionConfig:
        return self._config

    def update_field(self, field_name: str, value: Any) -> SessionConfig:
        """Set one field and adjust the fields that depend on it.

        Args:
            field_name: Field to change; ``type`` is accepted for ``game_format``
            value: New value

        Returns:
            The updated configuration

        Raises:
            InvalidConfigurationException: For an unknown field or enum value
        """
        field_name = _FIELD_ALIASES.get(field_name, field_name)
        updated = self._config.with_changes(**{field_name: value})
        adjustments = self._dependent_changes(field_name, updated)
        if adjustments:
            logger.info(
                "Changing %s also set %s",
                field_name,
                ", ".join(sorted(adjustments)),
            )
            updated = updated.with_changes(**adjustments)
        self._config = updated
        return updated

    def update_fields(self, **changes: Any) -> SessionConfig:
        """Set several fields at once, without dependent adjustment."""
        changes = {_FIELD_ALIASES.get(name, name): value for name, value in changes.items()}
        self._config = self._config.with_changes(**changes)
        return self._config

    def reset(self, today: Optional[date] = None) -> SessionConfig:
        self._config = default_session_config(today)
        return self._config

    def validate(
        self, roster: PlayerRoster, now: Optional[datetime] = None
    ) -> List[ValidationResult]:
        """Validate the current settings against ``roster``."""
        return self._validator.validate(self._config, roster, now)

    def is_valid(self, roster: PlayerRoster, now: Optional[datetime] = None) -> bool:
        return self._validator.is_valid(self._config, roster, now)

    @staticmethod
    def _dependent_changes(field_name: str, config: SessionConfig) -> Dict[str, Any]:
        changes: Dict[str, Any] = {}

        if field_name == "sport":
            if config.sport is Sport.TENNIS and config.scoring_mode is ScoringMode.POINTS:
                changes["scoring_mode"] = ScoringMode.FIRST_TO
                changes["points_per_match"] = SCORING_MODE_DEFAULTS["first_to"]
            elif config.sport is Sport.PADEL and config.scoring_mode in (
                ScoringMode.FIRST_TO,
                ScoringMode.TOTAL_GAMES,
            ):
                changes["scoring_mode"] = ScoringMode.POINTS
                changes["points_per_match"] = SCORING_MODE_DEFAULTS["points"]

        elif field_name == "mode":
            if config.mode is PlayMode.PARALLEL and config.courts < MIN_PARALLEL_COURTS:
                changes["courts"] = MIN_PARALLEL_COURTS

        elif field_name == "courts":
            out_of_range = (
                config.courts < MIN_PARALLEL_COURTS or config.courts > MAX_PARALLEL_COURTS
            )
            if out_of_range and config.mode is PlayMode.PARALLEL:
                changes["mode"] = PlayMode.SEQUENTIAL

        elif field_name == "game_format":
            if config.game_format is GameFormat.MIXED_MEXICANO:
                changes["matchup_preference"] = MatchupPreference.MIXED_ONLY

        elif field_name == "scoring_mode":
            changes.update(scoring_mode_defaults(config.scoring_mode))

        return changes
