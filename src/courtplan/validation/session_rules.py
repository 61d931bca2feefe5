"""Session setup validation.

This module checks that a proposed session (sport, format, courts, scoring
and roster) is internally consistent before the session is created. Every
rule in :data:`SESSION_RULES` is independent and reports at most one finding;
all rules always run so a form can show every problem at once.
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
from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple

from dateutil import parser as date_parser

from courtplan.constants import (
    MAX_COURTS,
    MAX_DURATION_HOURS,
    MAX_GAMES_TO_WIN,
    MAX_PARALLEL_COURTS,
    MAX_POINTS_PER_GAME,
    MAX_POINTS_PER_MATCH,
    MAX_TOTAL_GAMES,
    MIN_COURTS,
    MIN_DURATION_HOURS,
    MIN_GAMES_TO_WIN,
    MIN_PARALLEL_COURTS,
    MIN_PLAYERS,
    MIN_POINTS_PER_GAME,
    MIN_POINTS_PER_MATCH,
    MIN_TOTAL_GAMES,
    SESSION_NAME_MAX_LENGTH,
    SESSION_NAME_MIN_LENGTH,
)
from courtplan.models.enums import (
    Category,
    GameFormat,
    MatchupPreference,
    PlayMode,
    ScoringMode,
    Severity,
    Sport,
)
from courtplan.models.player import PlayerRoster
from courtplan.models.session import SessionConfig
from courtplan.type_hints import DateInput, TimeInput
from courtplan.utils import setup_logger

logger = setup_logger(__name__)

_TIME_PARSER = date_parser.isoparser()
_DATE_FIELDS = re.compile(r"^(\d{4})-(\d{1,2})-(\d{1,2})$")
_TIME_FIELDS = re.compile(r"^(\d{1,2}):(\d{1,2})(?::(\d{1,2}))?$")


@dataclass(frozen=True)
class ValidationResult:
    """A single problem found in a session setup.

    Attributes:
        severity: Errors block the session; warnings do not
        message: Text shown to the user, with live counts filled in
        category: Area of the setup the problem belongs to
        field: Form field the problem is attached to, if any
    """

    severity: Severity
    message: str
    category: Category
    field: Optional[str] = None

    @property
    def is_error(self) -> bool:
        return self.severity is Severity.ERROR

    @property
    def is_warning(self) -> bool:
        return self.severity is Severity.WARNING

    def to_dict(self) -> Dict[str, Any]:
        """Serialize finding to dictionary."""
        return {
            "severity": self.severity.value,
            "message": self.message,
            "category": self.category.value,
            "field": self.field,
        }


@dataclass(frozen=True)
class ValidationContext:
    """Precomputed view of the config and roster shared by all rules."""

    config: SessionConfig
    roster: PlayerRoster
    now: datetime
    player_count: int
    male_count: int
    female_count: int


SessionRule = Callable[[ValidationContext], Optional[ValidationResult]]


def build_context(
    config: SessionConfig, roster: PlayerRoster, now: Optional[datetime] = None
) -> ValidationContext:
    male_count, female_count = roster.gender_counts()
    return ValidationContext(
        config=config,
        roster=roster,
        now=now if now is not None else datetime.now(),
        player_count=len(roster),
        male_count=male_count,
        female_count=female_count,
    )


def _error(message: str, category: Category, field: Optional[str] = None) -> ValidationResult:
    return ValidationResult(Severity.ERROR, message, category, field)


def _warning(message: str, category: Category, field: Optional[str] = None) -> ValidationResult:
    return ValidationResult(Severity.WARNING, message, category, field)


def _pad_fields(text: str, pattern: "re.Pattern[str]", separator: str) -> str:
    """Zero-pad one-digit fields such as ``2025-1-5`` or ``9:30`` for ISO parsing."""
    match = pattern.match(text)
    if match is None:
        return text
    return separator.join(part.zfill(2) for part in match.groups() if part is not None)


def _session_start(game_date: DateInput, game_time: TimeInput) -> Optional[datetime]:
    """Combine the date and time fields, or None if either does not parse."""
    try:
        if isinstance(game_date, date):
            day = game_date
        else:
            text = _pad_fields(str(game_date).strip(), _DATE_FIELDS, "-")
            day = date_parser.isoparse(text).date()
        if isinstance(game_time, time):
            start = game_time
        else:
            text = _pad_fields(str(game_time).strip(), _TIME_FIELDS, ":")
            start = _TIME_PARSER.parse_isotime(text)
    except (ValueError, OverflowError):
        return None
    if isinstance(day, datetime):
        day = day.date()
    return datetime.combine(day, start.replace(tzinfo=None))


def _local_naive(moment: datetime) -> datetime:
    if moment.tzinfo is None:
        return moment
    return moment.astimezone().replace(tzinfo=None)


# ========== Session info ==========


def check_name_required(ctx: ValidationContext) -> Optional[ValidationResult]:
    """Session name must not be blank."""
    if not ctx.config.name.strip():
        return _error("Session name is required", Category.SESSION_INFO, "name")
    return None


def check_name_min_length(ctx: ValidationContext) -> Optional[ValidationResult]:
    if len(ctx.config.name.strip()) < SESSION_NAME_MIN_LENGTH:
        return _error(
            f"Session name must be at least {SESSION_NAME_MIN_LENGTH} characters",
            Category.SESSION_INFO,
            "name",
        )
    return None


def check_name_max_length(ctx: ValidationContext) -> Optional[ValidationResult]:
    if len(ctx.config.name.strip()) > SESSION_NAME_MAX_LENGTH:
        return _error(
            f"Session name must be at most {SESSION_NAME_MAX_LENGTH} characters",
            Category.SESSION_INFO,
            "name",
        )
    return None


def check_date_required(ctx: ValidationContext) -> Optional[ValidationResult]:
    if not ctx.config.game_date:
        return _error("Game date is required", Category.SESSION_INFO, "game_date")
    return None


def check_date_in_future(ctx: ValidationContext) -> Optional[ValidationResult]:
    """Session must start in the future.

    Dates or times that cannot be parsed are left to the other rules, so this
    rule stays silent for them.
    """
    config = ctx.config
    if not config.game_date or not config.game_time:
        return None

    start = _session_start(config.game_date, config.game_time)
    if start is None:
        logger.debug(
            "Skipping future-date check for unparsable %r %r",
            config.game_date,
            config.game_time,
        )
        return None

    if start < _local_naive(ctx.now):
        return _error(
            "Session date and time must be in the future",
            Category.SESSION_INFO,
            "game_date",
        )
    return None


def check_duration(ctx: ValidationContext) -> Optional[ValidationResult]:
    hours = ctx.config.duration_hours
    if hours < MIN_DURATION_HOURS or hours > MAX_DURATION_HOURS:
        return _error(
            f"Duration must be between {MIN_DURATION_HOURS} and {MAX_DURATION_HOURS} hours",
            Category.SESSION_INFO,
            "duration_hours",
        )
    return None


# ========== Players ==========


def check_min_players(ctx: ValidationContext) -> Optional[ValidationResult]:
    if ctx.player_count < MIN_PLAYERS:
        return _error(f"At least {MIN_PLAYERS} players are required", Category.PLAYERS)
    return None


# ========== Game type ==========


def check_mixed_mexicano_balance(ctx: ValidationContext) -> Optional[ValidationResult]:
    """Mixed Mexicano needs equal, and at least two of each, men and women."""
    if ctx.config.game_format is not GameFormat.MIXED_MEXICANO:
        return None

    males, females = ctx.male_count, ctx.female_count
    if males != females:
        return _error(
            "Mixed Mexicano requires equal number of male and female players. "
            f"Current: {males} males, {females} females",
            Category.GAME_TYPE,
            "type",
        )
    if males < 2 or females < 2:
        return _error(
            "Mixed Mexicano requires at least 2 males and 2 females",
            Category.GAME_TYPE,
            "type",
        )
    return None


def check_fixed_partners(ctx: ValidationContext) -> Optional[ValidationResult]:
    """Fixed partner play needs an even roster made entirely of mutual pairs."""
    if ctx.config.game_format is not GameFormat.FIXED_PARTNER:
        return None

    if ctx.player_count % 2 != 0:
        return _error(
            "Fixed Partner mode requires an even number of players",
            Category.GAME_TYPE,
            "type",
        )

    missing = len(ctx.roster.unpaired())
    if missing > 0:
        return _error(
            "All players must have partners in Fixed Partner mode. "
            f"{missing} player(s) missing partners",
            Category.GAME_TYPE,
            "type",
        )

    # RosterManager keeps partnerships mutual; rosters built elsewhere may not be.
    if not all(ctx.roster.is_mutual(player) for player in ctx.roster):
        return _error("All partnerships must be mutual", Category.GAME_TYPE, "type")
    return None


def check_mixed_matchups(ctx: ValidationContext) -> Optional[ValidationResult]:
    if ctx.config.matchup_preference is not MatchupPreference.MIXED_ONLY:
        return None

    males, females = ctx.male_count, ctx.female_count
    if males == 0 or females == 0:
        return _error(
            "Mixed matchups require both male and female players",
            Category.GAME_TYPE,
            "matchup_preference",
        )
    if males < 2 or females < 2:
        return _error(
            "Mixed matchups require at least 2 males and 2 females",
            Category.GAME_TYPE,
            "matchup_preference",
        )
    return None


# ========== Courts ==========


def check_court_count(ctx: ValidationContext) -> Optional[ValidationResult]:
    courts = ctx.config.courts
    if courts < MIN_COURTS or courts > MAX_COURTS:
        return _error(
            f"Courts must be between {MIN_COURTS} and {MAX_COURTS}",
            Category.COURTS,
            "courts",
        )
    return None


def check_parallel_mode(ctx: ValidationContext) -> Optional[ValidationResult]:
    """Parallel play needs 2-4 courts and more players than court slots."""
    config = ctx.config
    if config.mode is not PlayMode.PARALLEL:
        return None

    courts = config.courts
    if courts < MIN_PARALLEL_COURTS or courts > MAX_PARALLEL_COURTS:
        return _error(
            f"Parallel mode requires {MIN_PARALLEL_COURTS}-{MAX_PARALLEL_COURTS} courts",
            Category.COURTS,
            "mode",
        )

    players = ctx.player_count
    slots = config.player_slots

    # An exact fit leaves nobody to rotate in
    if players == slots:
        return _error(
            f"Cannot use parallel mode with exactly {players} players on {courts} court(s). "
            "Players won't rotate between courts. Please use Sequential mode instead, "
            "or add more players for rotation.",
            Category.COURTS,
            "mode",
        )

    if players < slots:
        return _error(
            f"Parallel mode with {courts} courts requires at least {slots} players. "
            f"Current: {players} players",
            Category.COURTS,
            "mode",
        )
    return None


def check_parallel_mixed_mexicano(ctx: ValidationContext) -> Optional[ValidationResult]:
    config = ctx.config
    if config.mode is not PlayMode.PARALLEL or config.game_format is not GameFormat.MIXED_MEXICANO:
        return None

    courts = config.courts
    needed = config.player_slots // 2
    males, females = ctx.male_count, ctx.female_count
    if males < needed or females < needed:
        return _error(
            f"Mixed Mexicano with {courts} court(s) in parallel mode needs at least "
            f"{needed} males and {needed} females. Current: {males} males, {females} females",
            Category.COURTS,
            "mode",
        )
    return None


# ========== Scoring ==========


def check_tennis_scoring(ctx: ValidationContext) -> Optional[ValidationResult]:
    if ctx.config.sport is Sport.TENNIS and ctx.config.scoring_mode is ScoringMode.POINTS:
        return _error(
            'Tennis uses game-based scoring. Please select "First to X Games" or "Total Games"',
            Category.SCORING,
            "scoring_mode",
        )
    return None


def check_padel_scoring(ctx: ValidationContext) -> Optional[ValidationResult]:
    """Game-based scoring for padel is allowed, so this is only a warning."""
    if ctx.config.sport is Sport.PADEL and ctx.config.scoring_mode in (
        ScoringMode.FIRST_TO,
        ScoringMode.TOTAL_GAMES,
    ):
        return _warning(
            "Padel typically uses points scoring. Game-based scoring is allowed but unusual.",
            Category.SCORING,
            "scoring_mode",
        )
    return None


def check_points_per_match(ctx: ValidationContext) -> Optional[ValidationResult]:
    points = ctx.config.points_per_match
    if points < MIN_POINTS_PER_MATCH or points > MAX_POINTS_PER_MATCH:
        return _error(
            f"Points/Games per match must be between {MIN_POINTS_PER_MATCH} "
            f"and {MAX_POINTS_PER_MATCH}",
            Category.SCORING,
            "points_per_match",
        )
    return None


# For the optional settings below, 0 means "not set" just like None.


def check_games_to_win(ctx: ValidationContext) -> Optional[ValidationResult]:
    games = ctx.config.games_to_win
    if games and (games < MIN_GAMES_TO_WIN or games > MAX_GAMES_TO_WIN):
        return _error(
            f"Games to win must be between {MIN_GAMES_TO_WIN} and {MAX_GAMES_TO_WIN}",
            Category.SCORING,
            "games_to_win",
        )
    return None


def check_total_games(ctx: ValidationContext) -> Optional[ValidationResult]:
    games = ctx.config.total_games
    if games and (games < MIN_TOTAL_GAMES or games > MAX_TOTAL_GAMES):
        return _error(
            f"Total games must be between {MIN_TOTAL_GAMES} and {MAX_TOTAL_GAMES}",
            Category.SCORING,
            "total_games",
        )
    return None


def check_points_per_game(ctx: ValidationContext) -> Optional[ValidationResult]:
    points = ctx.config.points_per_game
    if points and (points < MIN_POINTS_PER_GAME or points > MAX_POINTS_PER_GAME):
        return _error(
            f"Points per game must be between {MIN_POINTS_PER_GAME} and {MAX_POINTS_PER_GAME}",
            Category.SCORING,
            "points_per_game",
        )
    return None


# Evaluation order is part of the contract: results come back in this order.
SESSION_RULES: Tuple[SessionRule, ...] = (
    check_name_required,
    check_name_min_length,
    check_name_max_length,
    check_date_required,
    check_date_in_future,
    check_duration,
    check_min_players,
    check_mixed_mexicano_balance,
    check_fixed_partners,
    check_mixed_matchups,
    check_court_count,
    check_parallel_mode,
    check_parallel_mixed_mexicano,
    check_tennis_scoring,
    check_padel_scoring,
    check_points_per_match,
    check_games_to_win,
    check_total_games,
    check_points_per_game,
)


class SessionValidator:
    """Runs the session rule catalog over a config and roster."""

    def __init__(self, rules: Iterable[SessionRule] = SESSION_RULES):
        self.rules: Tuple[SessionRule, ...] = tuple(rules)

    def validate(
        self,
        config: SessionConfig,
        roster: PlayerRoster,
        now: Optional[datetime] = None,
    ) -> List[ValidationResult]:
        """Run every rule and collect the findings.

        Args:
            config: Session settings to check
            roster: Players registered for the session
            now: Reference time for the future-date rule; defaults to now

        Returns:
            Findings in rule order; empty when the setup is fully valid
        """
        context = build_context(config, roster, now)
        results: List[ValidationResult] = []
        for rule in self.rules:
            result = rule(context)
            if result is not None:
                results.append(result)

        logger.debug(
            "Validated session %r: %s error(s), %s warning(s)",
            config.name,
            sum(1 for r in results if r.is_error),
            sum(1 for r in results if r.is_warning),
        )
        return results

    def errors(
        self,
        config: SessionConfig,
        roster: PlayerRoster,
        now: Optional[datetime] = None,
    ) -> List[ValidationResult]:
        """Only the error-level findings."""
        return [r for r in self.validate(config, roster, now) if r.is_error]

    def warnings(
        self,
        config: SessionConfig,
        roster: PlayerRoster,
        now: Optional[datetime] = None,
    ) -> List[ValidationResult]:
        """Only the warning-level findings."""
        return [r for r in self.validate(config, roster, now) if r.is_warning]

    def is_valid(
        self,
        config: SessionConfig,
        roster: PlayerRoster,
        now: Optional[datetime] = None,
    ) -> bool:
        """True when there are no errors. Warnings never block a session."""
        return not self.errors(config, roster, now)

    @staticmethod
    def group_by_category(
        results: Iterable[ValidationResult],
    ) -> Dict[Category, List[ValidationResult]]:
        return group_validations_by_category(results)


def group_validations_by_category(
    results: Iterable[ValidationResult],
) -> Dict[Category, List[ValidationResult]]:
    """Group findings by category.

    Every category is present in the result, with an empty list when it has
    no findings. Findings keep their relative order.
    """
    grouped: Dict[Category, List[ValidationResult]] = {
        category: [] for category in Category
    }
    for result in results:
        grouped[result.category].append(result)
    return grouped


def create_session_validator() -> SessionValidator:
    """Create a validator running the standard rule catalog."""
    return SessionValidator()


def validate_session(
    config: SessionConfig, roster: PlayerRoster, now: Optional[datetime] = None
) -> List[ValidationResult]:
    """Convenience function to validate a session with the standard rules."""
    return create_session_validator().validate(config, roster, now)


def get_validation_errors(
    config: SessionConfig, roster: PlayerRoster, now: Optional[datetime] = None
) -> List[ValidationResult]:
    return create_session_validator().errors(config, roster, now)


def get_validation_warnings(
    config: SessionConfig, roster: PlayerRoster, now: Optional[datetime] = None
) -> List[ValidationResult]:
    return create_session_validator().warnings(config, roster, now)


def is_session_valid(
    config: SessionConfig, roster: PlayerRoster, now: Optional[datetime] = None
) -> bool:
    return create_session_validator().is_valid(config, roster, now)
