"""Mode-specific views of a session's scoring settings."""

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

from dataclasses import dataclass
from typing import ClassVar, Optional, Tuple, Union

from courtplan.constants import GAME_PRESETS, POINT_PRESETS
from courtplan.models.enums import ScoringMode


@dataclass(frozen=True)
class PointsScoring:
    """First team to ``target`` points wins the match."""

    target: int
    win_margin: Optional[int] = None

    mode: ClassVar[ScoringMode] = ScoringMode.POINTS
    presets: ClassVar[Tuple[int, ...]] = POINT_PRESETS

    @property
    def is_custom(self) -> bool:
        return self.target not in self.presets


@dataclass(frozen=True)
class FirstToScoring:
    """First team to win ``target`` games wins the match."""

    target: int
    games_to_win: Optional[int] = None
    points_per_game: Optional[int] = None
    enable_tiebreak: Optional[bool] = None
    tiebreak_points: Optional[int] = None

    mode: ClassVar[ScoringMode] = ScoringMode.FIRST_TO
    presets: ClassVar[Tuple[int, ...]] = GAME_PRESETS

    @property
    def is_custom(self) -> bool:
        return self.target not in self.presets


@dataclass(frozen=True)
class TotalGamesScoring:
    """A fixed number of games is played; games won decide the match."""

    target: int
    total_games: Optional[int] = None
    points_per_game: Optional[int] = None

    mode: ClassVar[ScoringMode] = ScoringMode.TOTAL_GAMES
    presets: ClassVar[Tuple[int, ...]] = GAME_PRESETS

    @property
    def is_custom(self) -> bool:
        return self.target not in self.presets


ScoringConfig = Union[PointsScoring, FirstToScoring, TotalGamesScoring]
