"""Candidate and ScoredCandidate data classes."""

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
from typing import Any, Dict, List, Optional, Tuple

from courtqueue.exceptions import InvalidPairingException
from courtqueue.models.match_record import MatchRecord, MatchStatus, check_distinct
from courtqueue.type_hints import CanonicalKey, GroupKey, ParticipantId, TeamPair


@dataclass(frozen=True)
class Candidate:
    """A proposed match: four participants and one 2v2 team split.

    Candidates only live while a round is being scored; the winners form
    the generated queue.
    """

    team_a: TeamPair
    team_b: TeamPair

    def __post_init__(self) -> None:
        object.__setattr__(self, "team_a", tuple(str(pid) for pid in self.team_a))
        object.__setattr__(self, "team_b", tuple(str(pid) for pid in self.team_b))
        if (
            len(self.team_a) != 2
            or len(self.team_b) != 2
            or not check_distinct(self.team_a, self.team_b)
        ):
            raise InvalidPairingException(
                f"Invalid candidate {self.team_a} vs {self.team_b}"
            )

    @property
    def participant_ids(self) -> Tuple[ParticipantId, ...]:
        """All four ids, Team A first."""
        return self.team_a + self.team_b

    @property
    def group_key(self) -> GroupKey:
        """The four ids sorted, identical for all three splits of a group."""
        return tuple(sorted(self.participant_ids))  # type: ignore[return-value]

    @property
    def canonical_key(self) -> CanonicalKey:
        """Teams sorted internally, then ordered against each other."""
        team_a = tuple(sorted(self.team_a))
        team_b = tuple(sorted(self.team_b))
        return tuple(sorted([team_a, team_b]))  # type: ignore[return-value]

    @property
    def tie_break_key(self) -> Tuple[GroupKey, CanonicalKey]:
        """Ordering used when two candidates have the same score."""
        return (self.group_key, self.canonical_key)

    def cross_pairs(self) -> List[Tuple[ParticipantId, ParticipantId]]:
        """The four (Team A, Team B) opponent pairs."""
        return [(a, b) for a in self.team_a for b in self.team_b]

    def to_match_record(
        self,
        status: MatchStatus = MatchStatus.QUEUED,
        game_number: Optional[int] = None,
    ) -> MatchRecord:
        """Turn the candidate into a match record for the session layer."""
        return MatchRecord(
            team_a=self.team_a,
            team_b=self.team_b,
            status=status,
            game_number=game_number,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize candidate to dictionary."""
        return {"team_a": list(self.team_a), "team_b": list(self.team_b)}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Candidate":
        """Deserialize candidate from dictionary."""
        return cls(
            team_a=tuple(str(p) for p in data["team_a"]),
            team_b=tuple(str(p) for p in data["team_b"]),
        )


@dataclass(frozen=True)
class ScoredCandidate:
    """A candidate together with its composite score (lower is better)."""

    candidate: Candidate
    score: int

    @property
    def sort_key(self) -> Tuple[int, Tuple[GroupKey, CanonicalKey]]:
        """Score first, then the deterministic tie-break."""
        return (self.score, self.candidate.tie_break_key)

    def __lt__(self, other: "ScoredCandidate") -> bool:
        return self.sort_key < other.sort_key


#  LocalWords:  ScoredCandidate
