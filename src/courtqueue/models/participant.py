"""Participant data class."""

# Court Queue
# Copyright (C) 2025  Court Queue developers
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
from typing import Any, Dict

from courtqueue.exceptions import InvalidParticipantDataException


@dataclass(frozen=True)
class Participant:
    """A player who can be placed in the queue.

    Attributes
    ----------
    id : str
        Unique identifier of the participant.
    name : str
        Display name.
    lifetime_matches_played : int
        Total matches played across all sessions. Owned by the storage
        layer; read-only here.
    """

    id: str
    name: str = ""
    lifetime_matches_played: int = 0

    def __post_init__(self) -> None:
        if self.id is None or self.id == "":
            raise InvalidParticipantDataException("Participant id must not be empty")
        # match records store ids as strings; keep both sides comparable
        object.__setattr__(self, "id", str(self.id))
        if self.lifetime_matches_played < 0:
            raise InvalidParticipantDataException(
                f"Participant {self.id!r} has a negative match count "
                f"({self.lifetime_matches_played})"
            )

    @property
    def display_name(self) -> str:
        """Name for display, falling back to the id."""
        return self.name or self.id

    def to_dict(self) -> Dict[str, Any]:
        """Serialize participant to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "lifetime_matches_played": self.lifetime_matches_played,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Participant":
        """Deserialize participant from dictionary.

        Accepts ``total_games_played`` as an alias for the lifetime count.
        """
        played = data.get("lifetime_matches_played", data.get("total_games_played"))
        return cls(
            id=str(data["id"]),
            name=data.get("name", ""),
            lifetime_matches_played=int(played or 0),
        )
