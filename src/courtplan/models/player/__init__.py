from courtplan.models.player.player import Player
from courtplan.models.player.roster import PlayerRoster

__all__ = [
    "Player",
    "PlayerRoster",
]
