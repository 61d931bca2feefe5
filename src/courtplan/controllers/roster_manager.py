"""Roster editing for session setup.

This module owns the player list being built for a session and keeps the
partnership relation mutual while players are added, removed and re-paired.
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

from typing import Iterable, List, Optional, Tuple, Union

from courtplan.exceptions import DuplicateNameError, MissingNameError
from courtplan.models.enums import Gender, coerce_enum
from courtplan.models.player import Player, PlayerRoster
from courtplan.type_hints import ImportRecords, MaybePlayerId, PlayerId
from courtplan.utils import generate_id, setup_logger
from courtplan.utils.validation import to_gender

logger = setup_logger(__name__)

GenderArg = Union[Gender, str]


class RosterManager:
    """Manages the roster of players for a session being set up.

    This class is responsible for:
    - Adding single players and fixed pairs with unique names
    - Removing players and freeing their partners
    - Pairing and unpairing players so partnerships stay mutual
    - Replacing the roster from an imported player list

    The current roster is an immutable :class:`PlayerRoster`. Every operation
    builds a complete new roster and swaps it in with one assignment, so a
    reader holding :attr:`roster` never sees a half-applied change, and an
    operation that raises leaves the roster untouched.

    Operations on an id that is not on the roster do nothing.
    """

    def __init__(self, roster: Optional[PlayerRoster] = None):
        """Initialize the roster manager.

        Args:
            roster: Starting roster, empty if not given
        """
        self._roster = roster if roster is not None else PlayerRoster()

    @property
    def roster(self) -> PlayerRoster:
        """Current roster snapshot."""
        return self._roster

    @property
    def players(self) -> Tuple[Player, ...]:
        return self._roster.players

    def _commit(self, players: Iterable[Player]) -> PlayerRoster:
        self._roster = PlayerRoster(players)
        return self._roster

    def _check_name_available(self, name: str) -> None:
        existing = self._roster.find_by_name(name)
        if existing is not None:
            logger.warning(f"Player name {name!r} collides with {existing.name!r}")
            raise DuplicateNameError(name)

    # ========== Adding players ==========

    def add_player(
        self, name: str, gender: GenderArg = Gender.UNSPECIFIED
    ) -> Optional[Player]:
        """Add a single player without a partner.

        Args:
            name: Player name; surrounding whitespace is removed
            gender: Player gender

        Returns:
            The new player, or None if ``name`` was blank

        Raises:
            DuplicateNameError: If the name is already on the roster, ignoring case
        """
        trimmed = name.strip()
        if not trimmed:
            logger.debug("Ignoring blank player name")
            return None

        self._check_name_available(trimmed)

        player = Player(
            id=generate_id(Player.__name__),
            name=trimmed,
            gender=coerce_enum(Gender, gender, "gender"),
        )
        self._commit(self._roster.players + (player,))
        logger.info("Added player %s", player.name)
        return player

    def add_pair(
        self,
        name1: str,
        name2: str,
        gender1: GenderArg = Gender.UNSPECIFIED,
        gender2: GenderArg = Gender.UNSPECIFIED,
    ) -> Tuple[Player, Player]:
        """Add two new players partnered with each other.

        Args:
            name1: First player's name
            name2: Second player's name
            gender1: First player's gender
            gender2: Second player's gender

        Returns:
            The two new players, in the order given

        Raises:
            MissingNameError: If either name is blank
            DuplicateNameError: If the names match each other or an existing player
        """
        trimmed1 = name1.strip()
        trimmed2 = name2.strip()

        if not trimmed1 or not trimmed2:
            logger.warning("Cannot add pair: both player names are required")
            raise MissingNameError()

        if trimmed1.lower() == trimmed2.lower():
            logger.warning(f"Cannot add pair: {trimmed1!r} and {trimmed2!r} are the same name")
            raise DuplicateNameError(trimmed2, "Duplicate player names")

        self._check_name_available(trimmed1)
        self._check_name_available(trimmed2)

        first_id = generate_id(Player.__name__)
        second_id = generate_id(Player.__name__)
        first = Player(
            id=first_id,
            name=trimmed1,
            gender=coerce_enum(Gender, gender1, "gender"),
            partner_id=second_id,
        )
        second = Player(
            id=second_id,
            name=trimmed2,
            gender=coerce_enum(Gender, gender2, "gender"),
            partner_id=first_id,
        )
        self._commit(self._roster.players + (first, second))
        logger.info("Added pair %s / %s", first.name, second.name)
        return first, second

    # ========== Editing players ==========

    def remove_player(self, player_id: PlayerId) -> Optional[Player]:
        """Remove a player. Their partner, if any, becomes unpaired.

        Args:
            player_id: Id of the player to remove

        Returns:
            The removed player, or None if the id is not on the roster
        """
        removed = self._roster.get(player_id)
        if removed is None:
            logger.debug("remove_player: no player with id %s", player_id)
            return None

        remaining: List[Player] = []
        for player in self._roster:
            if player.id == player_id:
                continue
            if player.partner_id == player_id:
                player = player.without_partner()
            remaining.append(player)

        self._commit(remaining)
        logger.info("Removed player %s", removed.name)
        return removed

    def update_gender(self, player_id: PlayerId, gender: GenderArg) -> Optional[Player]:
        """Change a player's gender. Partnerships are not touched.

        Returns:
            The updated player, or None if the id is not on the roster
        """
        current = self._roster.get(player_id)
        if current is None:
            logger.debug("update_gender: no player with id %s", player_id)
            return None

        updated = current.with_gender(coerce_enum(Gender, gender, "gender"))
        self._commit(updated if p.id == player_id else p for p in self._roster)
        return updated

    def set_partner(self, player_id: PlayerId, partner_id: MaybePlayerId) -> None:
        """Partner two players, or unpair one.

        A player has at most one partner. Pairing ``player_id`` with
        ``partner_id`` first frees any previous partner of either player.
        Passing ``None`` as ``partner_id`` unpairs ``player_id`` and its
        partner.

        Nothing changes when ``player_id`` is unknown, when ``partner_id`` is
        unknown, or when a player would be partnered with themselves.

        Args:
            player_id: Player to update
            partner_id: New partner's id, or None to unpair
        """
        player = self._roster.get(player_id)
        if player is None:
            logger.debug("set_partner: no player with id %s", player_id)
            return

        if partner_id is None:
            if player.partner_id is None:
                return
            self._commit(self._relink(player, None))
            logger.info("Unpaired %s", player.name)
            return

        if partner_id == player_id:
            logger.warning(f"Rejected partnering {player.name} with themselves")
            return

        partner = self._roster.get(partner_id)
        if partner is None:
            logger.debug("set_partner: no partner with id %s", partner_id)
            return

        self._commit(self._relink(player, partner))
        logger.info("Partnered %s with %s", player.name, partner.name)

    def _relink(self, player: Player, partner: Optional[Player]) -> List[Player]:
        """Build the player list with ``player`` paired to ``partner``.

        Every other player whose partnership touched either of the two is
        freed.
        """
        linked = {player.id} if partner is None else {player.id, partner.id}
        freed = {player.partner_id}
        if partner is not None:
            freed.add(partner.partner_id)
        freed.discard(None)

        players: List[Player] = []
        for current in self._roster:
            if current.id == player.id:
                current = current.with_partner(partner.id if partner else None)
            elif partner is not None and current.id == partner.id:
                current = current.with_partner(player.id)
            elif current.id in freed or current.partner_id in linked:
                current = current.without_partner()
            players.append(current)
        return players

    # ========== Bulk operations ==========

    def set_players_from_import(self, records: ImportRecords) -> PlayerRoster:
        """Replace the whole roster with an imported player list.

        Every imported player gets a new id and no partner. Gender defaults
        to unspecified when missing or unrecognized. Names are trimmed but
        not checked against each other.

        Args:
            records: Mappings with a ``name`` and an optional ``gender``

        Returns:
            The new roster

        Raises:
            MissingNameError: If a record has no name; the roster is unchanged
        """
        imported: List[Player] = []
        for position, record in enumerate(records):
            name = str(record.get("name") or "").strip()
            if not name:
                logger.warning("Import record %s has no player name", position)
                raise MissingNameError(f"Imported player #{position + 1} has no name")
            imported.append(
                Player(
                    id=generate_id(Player.__name__),
                    name=name,
                    gender=to_gender(record.get("gender")),
                )
            )

        roster = self._commit(imported)
        logger.info("Imported %s players", len(roster))
        return roster

    def clear_players(self) -> None:
        self._commit(())
        logger.info("Cleared roster")
