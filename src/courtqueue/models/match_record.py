"""Match record data class."""

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
from enum import Enum
from typing import Any, Dict, Optional, Sequence, Tuple

from courtqueue.constants import (
    PLAYERS_PER_MATCH,
    PLAYERS_PER_TEAM,
    STATUS_COMPLETED,
    STATUS_PLAYING,
    STATUS_QUEUED,
    TEAM_A,
    TEAM_B,
)
from courtqueue.exceptions import InvalidMatchRecordException
from courtqueue.type_hints import MaybeTeam, ParticipantId, TeamPair


class MatchStatus(Enum):
    """Lifecycle of a match."""

    QUEUED = STATUS_QUEUED
    PLAYING = STATUS_PLAYING
    COMPLETED = STATUS_COMPLETED


def _as_team(members: Sequence[Any]) -> TeamPair:
    team = tuple(str(member) for member in members)
    if len(team) != PLAYERS_PER_TEAM:
        raise InvalidMatchRecordException(
            f"A team needs exactly {PLAYERS_PER_TEAM} players, got {len(team)}"
        )
    return team  # type: ignore[return-value]


def check_distinct(team_a: TeamPair, team_b: TeamPair) -> bool:
    """Return True if the four ids are pairwise distinct."""
    return len(set(team_a) | set(team_b)) == PLAYERS_PER_MATCH


@dataclass(frozen=True)
class MatchRecord:
    """A queued, playing or completed doubles match.

    Attributes
    ----------
    team_a : tuple of str
        Ids of the two Team A players.
    team_b : tuple of str
        Ids of the two Team B players.
    status : MatchStatus
        Lifecycle tag.
    game_number : int or None
        Sequential number within the session, assigned by the session layer.
    is_custom : bool
        True for hand-made matches inserted by an organiser.
    """

    team_a: TeamPair
    team_b: TeamPair
    status: MatchStatus = MatchStatus.COMPLETED
    game_number: Optional[int] = None
    is_custom: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "team_a", _as_team(self.team_a))
        object.__setattr__(self, "team_b", _as_team(self.team_b))
        if not check_distinct(self.team_a, self.team_b):
            raise InvalidMatchRecordException(
                f"Match {self.team_a} vs {self.team_b} repeats a player"
            )

    @property
    def participant_ids(self) -> Tuple[ParticipantId, ...]:
        """All four ids, Team A first."""
        return self.team_a + self.team_b

    def involves(self, participant_id: ParticipantId) -> bool:
        """Check whether a participant plays in this match."""
        return participant_id in self.team_a or participant_id in self.team_b

    def team_of(self, participant_id: ParticipantId) -> MaybeTeam:
        """Return the team label of a participant, or None if absent."""
        if participant_id in self.team_a:
            return TEAM_A
        if participant_id in self.team_b:
            return TEAM_B
        return None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize match record to dictionary."""
        return {
            "team_a": list(self.team_a),
            "team_b": list(self.team_b),
            "status": self.status.value,
            "game_number": self.game_number,
            "is_custom": self.is_custom,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MatchRecord":
        """Deserialize match record from dictionary.

        Both the ``team_a``/``team_b`` layout and the flat
        ``team1_player1_id`` ... ``team2_player2_id`` column layout are
        accepted.
        """
        if "team_a" in data:
            team_a, team_b = data["team_a"], data["team_b"]
        else:
            try:
                team_a = (data["team1_player1_id"], data["team1_player2_id"])
                team_b = (data["team2_player1_id"], data["team2_player2_id"])
            except KeyError as e:
                raise InvalidMatchRecordException(f"Match record is missing {e}")
        try:
            status = MatchStatus(data.get("status", STATUS_COMPLETED))
        except ValueError:
            raise InvalidMatchRecordException(
                f"Unknown match status {data.get('status')!r}"
            )
        return cls(
            team_a=_as_team(team_a),
            team_b=_as_team(team_b),
            status=status,
            game_number=data.get("game_number"),
            is_custom=bool(data.get("is_custom", False)),
        )
