"""Immutable player roster snapshot."""

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

from typing import Any, Dict, Iterable, Iterator, List, Optional, Set, Tuple

from courtplan.exceptions import InvalidConfigurationException
from courtplan.models.enums import Gender
from courtplan.models.player.player import Player
from courtplan.type_hints import Partnership, PlayerId


class PlayerRoster:
    """Ordered, immutable collection of players for one session.

    Players are kept in a tuple (insertion order is display order) with an
    ``id -> position`` index beside it. Partnerships are stored as ids on the
    players themselves, so a roster never holds references between player
    objects and removing a player cannot leave a dangling link to it.

    A roster does not enforce the partnership and name invariants on
    construction: the session validator must be able to inspect any roster a
    caller hands it. :class:`~courtplan.controllers.roster_manager.RosterManager`
    is what keeps them, and :meth:`invariant_violations` reports on them.

    Example:
        >>> roster = PlayerRoster([Player(id="p1", name="Ana")])
        >>> roster.get("p1").name
        'Ana'
    """

    __slots__ = ("_players", "_index")

    def __init__(self, players: Iterable[Player] = ()):
        self._players: Tuple[Player, ...] = tuple(players)
        self._index: Dict[PlayerId, int] = {
            player.id: position for position, player in enumerate(self._players)
        }

    @property
    def players(self) -> Tuple[Player, ...]:
        return self._players

    def __len__(self) -> int:
        return len(self._players)

    def __iter__(self) -> Iterator[Player]:
        return iter(self._players)

    def __getitem__(self, position: int) -> Player:
        return self._players[position]

    def __contains__(self, player_id: object) -> bool:
        return player_id in self._index

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PlayerRoster):
            return NotImplemented
        return self._players == other._players

    def __hash__(self) -> int:
        return hash(self._players)

    def __repr__(self) -> str:
        return f"PlayerRoster({len(self._players)} players)"

    # ========== Lookup ==========

    def get(self, player_id: Optional[PlayerId]) -> Optional[Player]:
        """Return the player with ``player_id``, or None if there is none."""
        position = self._index.get(player_id) if player_id is not None else None
        if position is None:
            return None
        return self._players[position]

    def index_of(self, player_id: PlayerId) -> Optional[int]:
        return self._index.get(player_id)

    def find_by_name(self, name: str) -> Optional[Player]:
        """Find a player by name, ignoring case and surrounding whitespace."""
        key = name.strip().lower()
        for player in self._players:
            if player.name_key == key:
                return player
        return None

    def has_name(self, name: str) -> bool:
        return self.find_by_name(name) is not None

    @property
    def names(self) -> List[str]:
        return [player.name for player in self._players]

    # ========== Gender ==========

    def count_gender(self, gender: Gender) -> int:
        return sum(1 for player in self._players if player.gender == gender)

    def gender_counts(self) -> Tuple[int, int]:
        """Return ``(males, females)``."""
        return self.count_gender(Gender.MALE), self.count_gender(Gender.FEMALE)

    # ========== Partnerships ==========

    def is_mutual(self, player: Player) -> bool:
        """Whether ``player``'s partner exists and points back at ``player``.

        A player without a partner is trivially mutual.
        """
        if player.partner_id is None:
            return True
        partner = self.get(player.partner_id)
        return partner is not None and partner.partner_id == player.id

    def partnerships(self) -> List[Partnership]:
        """Mutual partnerships in roster order, each pair listed once."""
        pairs: List[Partnership] = []
        seen: Set[PlayerId] = set()
        for player in self._players:
            if player.partner_id is None or player.id in seen:
                continue
            if player.partner_id == player.id or not self.is_mutual(player):
                continue
            pairs.append((player.id, player.partner_id))
            seen.update((player.id, player.partner_id))
        return pairs

    def unpaired(self) -> List[Player]:
        return [player for player in self._players if player.partner_id is None]

    def invariant_violations(self) -> List[str]:
        """Describe every broken roster invariant.

        Checks that ids are unique, that names are unique ignoring case and
        that every partnership is mutual and not with oneself.

        Returns:
            Human-readable problems; empty when the roster is consistent
        """
        problems: List[str] = []

        if len(self._index) != len(self._players):
            problems.append("Duplicate player ids")

        seen_names: Dict[str, str] = {}
        for player in self._players:
            if player.name_key in seen_names:
                problems.append(
                    f"Duplicate name: {seen_names[player.name_key]!r} and {player.name!r}"
                )
            else:
                seen_names[player.name_key] = player.name

        for player in self._players:
            if player.partner_id is None:
                continue
            if player.partner_id == player.id:
                problems.append(f"{player.name} is partnered with themselves")
            elif player.partner_id not in self._index:
                problems.append(f"{player.name} has a partner that is not on the roster")
            elif not self.is_mutual(player):
                problems.append(f"{player.name} has a one-sided partnership")

        return problems

    # ========== Serialization ==========

    def to_list(self) -> List[Dict[str, Any]]:
        """Serialize roster to a list of player dictionaries."""
        return [player.to_dict() for player in self._players]

    @classmethod
    def from_list(cls, data: List[Dict[str, Any]]) -> "PlayerRoster":
        """Deserialize roster from a list of player dictionaries.

        Raises:
            InvalidConfigurationException: If ``data`` is not a list or an
                entry is not valid player data
        """
        if not isinstance(data, (list, tuple)):
            raise InvalidConfigurationException(
                f"Player list must be an array, not {type(data).__name__}"
            )
        return cls(Player.from_dict(item) for item in data)
