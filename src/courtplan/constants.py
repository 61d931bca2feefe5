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

# --- Logging ---
LOG_LEVEL_ENV_VAR = "COURTPLAN_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Session name limits (applied to the trimmed name)
SESSION_NAME_MIN_LENGTH = 3
SESSION_NAME_MAX_LENGTH = 60

# Session duration in hours
MIN_DURATION_HOURS = 0.5
MAX_DURATION_HOURS = 24

# Roster
MIN_PLAYERS = 4
PLAYERS_PER_COURT = 4
PLAYER_NAME_MIN_LENGTH = 2
PLAYER_NAME_MAX_LENGTH = 30
PLAYER_NAME_SANITIZE_LENGTH = 100

# Courts
MIN_COURTS = 1
MAX_COURTS = 10
MIN_PARALLEL_COURTS = 2
MAX_PARALLEL_COURTS = 4

# Scoring configuration ranges
MIN_POINTS_PER_MATCH = 1
MAX_POINTS_PER_MATCH = 100
MIN_GAMES_TO_WIN = 1
MAX_GAMES_TO_WIN = 10
MIN_TOTAL_GAMES = 1
MAX_TOTAL_GAMES = 15
MIN_POINTS_PER_GAME = 4
MAX_POINTS_PER_GAME = 32

# Recorded match scores
SCORE_MODE_FIRST_TO_15 = "first_to_15"
SCORE_MODE_FIRST_TO_21 = "first_to_21"
DEFAULT_SCORE_MODE = SCORE_MODE_FIRST_TO_15
SCORE_TARGETS = {
    SCORE_MODE_FIRST_TO_15: 15,
    SCORE_MODE_FIRST_TO_21: 21,
}
WIN_BY = 2
MAX_RECORDED_SCORE = 999

# Values offered by the scoring preset pickers
POINT_PRESETS = (4, 11, 16, 21, 24, 32)
GAME_PRESETS = (3, 4, 5, 6, 8, 10)

# Default points_per_match for each session scoring mode
SCORING_MODE_DEFAULTS = {
    "points": 21,  # first to 21 points
    "first_to": 6,  # first to 6 games (1 set)
    "total_games": 6,  # play 6 games
}

# Session form defaults
DEFAULT_GAME_TIME = "19:00"
DEFAULT_DURATION_HOURS = 2
DEFAULT_COURTS = 1
DEFAULT_WIN_MARGIN = 0
DEFAULT_GAMES_TO_WIN = 6
DEFAULT_TOTAL_GAMES = 6
DEFAULT_POINTS_PER_GAME = 11
DEFAULT_TIEBREAK_POINTS = 7
