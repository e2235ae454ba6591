"""Teammate/opponent history and recency scoring between two participants."""

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

from collections import Counter
from dataclasses import dataclass, field
from itertools import combinations
from typing import Iterable, NamedTuple, Sequence

from courtqueue.constants import DEFAULT_RECENCY_WINDOW, RECENCY_STEP_POINTS
from courtqueue.models.match_record import MatchRecord
from courtqueue.type_hints import ParticipantId


class PairingCounts(NamedTuple):
    """How often two participants shared a match, by relation."""

    teammates: int = 0
    opponents: int = 0


def pairing_history(
    p1: ParticipantId, p2: ParticipantId, matches: Iterable[MatchRecord]
) -> PairingCounts:
    """
    Count the matches in which two participants were teammates or opponents.

    Matches missing either participant do not contribute. A participant
    cannot pair with themself, so ``p1 == p2`` yields zero counts.
    """
    if p1 == p2:
        return PairingCounts()

    teammates = 0
    opponents = 0
    for match in matches:
        team1 = match.team_of(p1)
        if team1 is None:
            continue
        team2 = match.team_of(p2)
        if team2 is None:
            continue
        if team1 == team2:
            teammates += 1
        else:
            opponents += 1
    return PairingCounts(teammates, opponents)


def recency_points(distance_from_end: int, window: int) -> int:
    """Points for a shared match ``distance_from_end`` matches ago (1 = latest)."""
    if distance_from_end < 1 or distance_from_end > window:
        return 0
    return (window - distance_from_end + 1) * RECENCY_STEP_POINTS


def interaction_score(
    p1: ParticipantId,
    p2: ParticipantId,
    recent_matches: Sequence[MatchRecord],
    window: int = DEFAULT_RECENCY_WINDOW,
) -> int:
    """
    Decayed co-occurrence score of two participants over the latest matches.

    Only the last ``window`` matches of the oldest-to-newest sequence are
    considered. Each one containing both participants, on either side, adds
    ``(window - distance_from_end + 1) * 2`` where the latest match has
    distance 1.
    """
    if p1 == p2 or window < 1:
        return 0

    score = 0
    considered = list(recent_matches)[-window:]
    for distance, match in enumerate(reversed(considered), start=1):
        if match.involves(p1) and match.involves(p2):
            score += recency_points(distance, window)
    return score


def _pair(p1: ParticipantId, p2: ParticipantId) -> frozenset:
    return frozenset({p1, p2})


@dataclass
class PairingIndex:
    """
    Pre-computed pair statistics for a fixed match universe.

    Scoring every candidate of a round against the raw match list repeats the
    same scans thousands of times; the index walks the universe once and then
    answers :func:`pairing_history` and :func:`interaction_score` queries in
    constant time. Pairs are keyed by ``frozenset({p1, p2})``.

    Attributes
    ----------
    teammates : Counter
        Teammate occurrences per pair.
    opponents : Counter
        Opponent occurrences per pair.
    interactions : Counter
        Recency interaction score per pair.
    window : int
        Recency window the interaction scores were computed with.
    """

    teammates: Counter = field(default_factory=Counter)
    opponents: Counter = field(default_factory=Counter)
    interactions: Counter = field(default_factory=Counter)
    window: int = DEFAULT_RECENCY_WINDOW

    @classmethod
    def from_matches(
        cls, matches: Sequence[MatchRecord], window: int = DEFAULT_RECENCY_WINDOW
    ) -> "PairingIndex":
        """Build the index from an oldest-to-newest match sequence."""
        matches = list(matches)
        index = cls(window=window)
        for match in matches:
            index.teammates[_pair(*match.team_a)] += 1
            index.teammates[_pair(*match.team_b)] += 1
            for a in match.team_a:
                for b in match.team_b:
                    index.opponents[_pair(a, b)] += 1

        recent = matches[-window:]
        for distance, match in enumerate(reversed(recent), start=1):
            points = recency_points(distance, window)
            for a, b in combinations(match.participant_ids, 2):
                index.interactions[_pair(a, b)] += points
        return index

    def pairing(self, p1: ParticipantId, p2: ParticipantId) -> PairingCounts:
        """Same result as :func:`pairing_history` over the indexed universe."""
        if p1 == p2:
            return PairingCounts()
        key = _pair(p1, p2)
        return PairingCounts(self.teammates[key], self.opponents[key])

    def interaction(self, p1: ParticipantId, p2: ParticipantId) -> int:
        """Same result as :func:`interaction_score` over the indexed universe."""
        if p1 == p2:
            return 0
        return self.interactions[_pair(p1, p2)]


#  LocalWords:  PairingIndex
