from courtplan.models.enums import (
    Category,
    GameFormat,
    Gender,
    MatchupPreference,
    PlayMode,
    ScoringMode,
    Severity,
    Sport,
)
from courtplan.models.player import Player, PlayerRoster
from courtplan.models.session import SessionConfig

__all__ = [
    "Category",
    "GameFormat",
    "Gender",
    "MatchupPreference",
    "PlayMode",
    "Player",
    "PlayerRoster",
    "ScoringMode",
    "SessionConfig",
    "Severity",
    "Sport",
]
