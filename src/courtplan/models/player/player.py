"""Player record held in a session roster."""

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

from dataclasses import dataclass, replace
from typing import Any, Dict

from courtplan.exceptions import InvalidConfigurationException
from courtplan.models.enums import Gender, coerce_enum
from courtplan.type_hints import MaybePlayerId, PlayerId


@dataclass(frozen=True)
class Player:
    """A player on a session roster.

    Players are immutable values. The roster manager edits a roster by
    building new ``Player`` instances with :meth:`with_partner`,
    :meth:`with_gender` and friends and swapping in a new roster snapshot.

    Attributes
    ----------
    id : str
        Opaque unique identifier, assigned by the roster manager.
    name : str
        Display name. Unique across a roster under case-insensitive comparison.
    gender : Gender
        Player's gender, used by the mixed format and mixed matchup rules.
    partner_id : str or None
        Id of the player this one is partnered with, if any. The relation is
        always mutual within a roster.
    """

    id: PlayerId
    name: str
    gender: Gender = Gender.UNSPECIFIED
    partner_id: MaybePlayerId = None

    def __post_init__(self):
        object.__setattr__(self, "gender", coerce_enum(Gender, self.gender, "gender"))

    @property
    def has_partner(self) -> bool:
        return self.partner_id is not None

    @property
    def name_key(self) -> str:
        """Name normalized for case-insensitive comparison."""
        return self.name.lower()

    def with_partner(self, partner_id: MaybePlayerId) -> "Player":
        return replace(self, partner_id=partner_id)

    def without_partner(self) -> "Player":
        return replace(self, partner_id=None)

    def with_gender(self, gender: Gender) -> "Player":
        return replace(self, gender=gender)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize player to dictionary."""
        data: Dict[str, Any] = {
            "id": self.id,
            "name": self.name,
            "gender": self.gender.value,
        }
        if self.partner_id is not None:
            data["partner_id"] = self.partner_id
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Player":
        """Deserialize player from dictionary.

        Raises
        ------
        InvalidConfigurationException
            If ``data`` is not a mapping, ``id`` or ``name`` is missing or not
            text, or ``gender`` is unknown.
        """
        if not isinstance(data, dict):
            raise InvalidConfigurationException(
                f"Player data must be an object, not {type(data).__name__}"
            )
        try:
            player_id = data["id"]
            name = data["name"]
        except KeyError as exc:
            raise InvalidConfigurationException(
                f"Player data is missing required key {exc.args[0]!r}"
            ) from None
        if not isinstance(player_id, str) or not isinstance(name, str):
            raise InvalidConfigurationException(
                f"Player id and name must be text, got {player_id!r} and {name!r}"
            )
        partner_id = data.get("partner_id") or None
        if partner_id is not None and not isinstance(partner_id, str):
            raise InvalidConfigurationException(f"Invalid partner_id: {partner_id!r}")
        return cls(
            id=player_id,
            name=name,
            gender=data.get("gender") or Gender.UNSPECIFIED,
            partner_id=partner_id,
        )

    def __str__(self) -> str:
        return self.name
