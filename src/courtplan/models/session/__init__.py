from courtplan.models.session.scoring import (
    FirstToScoring,
    PointsScoring,
    ScoringConfig,
    TotalGamesScoring,
)
from courtplan.models.session.session_config import SessionConfig

__all__ = [
    "SessionConfig",
    "ScoringConfig",
    "PointsScoring",
    "FirstToScoring",
    "TotalGamesScoring",
]
