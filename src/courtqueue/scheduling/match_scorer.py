"""Composite scoring of candidate matches.

A candidate's score is a weighted sum of fairness and variety terms; lower
is better. The weights are ordered so that each term only matters when all
higher priority terms are equal (see :class:`ScoringWeights`).
"""

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
from itertools import combinations
from typing import Dict, Iterable, Mapping, Optional, Sequence

from courtqueue.constants import DEFAULT_RECENCY_WINDOW
from courtqueue.models.candidate import Candidate, ScoredCandidate
from courtqueue.models.match_record import MatchRecord
from courtqueue.models.participant import Participant
from courtqueue.models.queue_config import ScoringWeights
from courtqueue.scheduling.pairing_history import PairingIndex
from courtqueue.type_hints import ParticipantId, UsageMap


@dataclass(frozen=True)
class ScoringContext:
    """Read-only state shared by every candidate of one round.

    Attributes
    ----------
    usage : dict of str to int
        Queue usage counters of the active participants.
    min_usage : int
        Minimum usage over all active participants.
    participants : dict of str to Participant
        Active participants by id.
    index : PairingIndex
        Pair statistics over the match universe plus the matches already
        committed in this call.
    """

    usage: Mapping[ParticipantId, int]
    min_usage: int
    participants: Mapping[ParticipantId, Participant]
    index: PairingIndex

    @classmethod
    def build(
        cls,
        participants: Sequence[Participant],
        usage: UsageMap,
        matches: Sequence[MatchRecord],
        window: int = DEFAULT_RECENCY_WINDOW,
    ) -> "ScoringContext":
        """Snapshot the round state. ``matches`` is ordered oldest to newest."""
        return cls(
            usage=dict(usage),
            min_usage=min(usage[p.id] for p in participants) if participants else 0,
            participants={p.id: p for p in participants},
            index=PairingIndex.from_matches(matches, window),
        )

    def min_usage_members(self, candidate: Candidate) -> int:
        """How many candidate members sit at the minimum usage."""
        return sum(
            1 for pid in candidate.participant_ids if self.usage[pid] == self.min_usage
        )


@dataclass(frozen=True)
class ScoreBreakdown:
    """Raw (unweighted) term values of one candidate and their weighted total."""

    min_usage_members: int
    usage_spread: int
    total_usage: int
    teammate_repeats: int
    opponent_repeats: int
    lifetime_matches: int
    recent_interaction: int
    total: int

    def to_dict(self) -> Dict[str, int]:
        return {
            "min_usage_members": self.min_usage_members,
            "usage_spread": self.usage_spread,
            "total_usage": self.total_usage,
            "teammate_repeats": self.teammate_repeats,
            "opponent_repeats": self.opponent_repeats,
            "lifetime_matches": self.lifetime_matches,
            "recent_interaction": self.recent_interaction,
            "total": self.total,
        }


class MatchScorer:
    """Scores candidates against a :class:`ScoringContext`.

    The scorer holds no per-round state, so one instance can score any
    number of rounds and candidates in any order.
    """

    def __init__(self, weights: Optional[ScoringWeights] = None):
        self.weights = weights or ScoringWeights()

    def breakdown(self, candidate: Candidate, context: ScoringContext) -> ScoreBreakdown:
        """Compute every score term of ``candidate``."""
        ids = candidate.participant_ids
        usages = [context.usage[pid] for pid in ids]
        index = context.index

        min_members = context.min_usage_members(candidate)
        spread = max(usages) - min(usages)
        total_usage = sum(usages)
        teammate_repeats = (
            index.pairing(*candidate.team_a).teammates
            + index.pairing(*candidate.team_b).teammates
        )
        opponent_repeats = sum(
            index.pairing(a, b).opponents for a, b in candidate.cross_pairs()
        )
        lifetime = sum(
            context.participants[pid].lifetime_matches_played for pid in ids
        )
        recent = sum(index.interaction(a, b) for a, b in combinations(ids, 2))

        w = self.weights
        total = (
            -min_members * w.underused_bonus
            + spread * w.usage_spread
            + total_usage * w.total_usage
            + teammate_repeats * w.teammate_repeat
            + opponent_repeats * w.opponent_repeat
            + lifetime * w.lifetime_matches
            + recent * w.recent_interaction
        )
        return ScoreBreakdown(
            min_usage_members=min_members,
            usage_spread=spread,
            total_usage=total_usage,
            teammate_repeats=teammate_repeats,
            opponent_repeats=opponent_repeats,
            lifetime_matches=lifetime,
            recent_interaction=recent,
            total=total,
        )

    def score(self, candidate: Candidate, context: ScoringContext) -> int:
        """Composite score of ``candidate``, lower is better."""
        return self.breakdown(candidate, context).total

    def best(
        self, candidates: Iterable[Candidate], context: ScoringContext
    ) -> Optional[ScoredCandidate]:
        """Return the lowest scoring candidate, or None if there are none.

        Equal scores are resolved by :attr:`Candidate.tie_break_key`, which
        does not depend on the order candidates arrive in.
        """
        best: Optional[ScoredCandidate] = None
        for candidate in candidates:
            scored = ScoredCandidate(candidate, self.score(candidate, context))
            if best is None or scored < best:
                best = scored
        return best


#  LocalWords:  ScoringContext
