"""Queue scheduling engine for Court Queue.

The package is layered from leaf to root: pair statistics
(:mod:`pairing_history`), candidate enumeration (:mod:`enumerator`), the
composite scorer (:mod:`match_scorer`) and the greedy round loop
(:mod:`queue_builder`).
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

from courtqueue.scheduling.enumerator import (
    candidate_count,
    iter_candidates,
    iter_groups,
    team_splits,
)
from courtqueue.scheduling.match_scorer import MatchScorer, ScoreBreakdown, ScoringContext
from courtqueue.scheduling.pairing_history import (
    PairingCounts,
    PairingIndex,
    interaction_score,
    pairing_history,
)
from courtqueue.scheduling.queue_builder import (
    BuilderState,
    QueueBuilder,
    QueueResult,
    RoundOutcome,
    UsageCounter,
    generate_queue,
)

__all__ = [
    "candidate_count",
    "iter_candidates",
    "iter_groups",
    "team_splits",
    "MatchScorer",
    "ScoreBreakdown",
    "ScoringContext",
    "PairingCounts",
    "PairingIndex",
    "interaction_score",
    "pairing_history",
    "BuilderState",
    "QueueBuilder",
    "QueueResult",
    "RoundOutcome",
    "UsageCounter",
    "generate_queue",
]
