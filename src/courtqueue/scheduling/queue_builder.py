"""Greedy queue generation.

Each round scores every candidate match of the active pool, keeps only the
fair ones, commits the best one and updates the usage counters that the
next round depends on. Rounds are therefore strictly sequential.
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

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Dict, Iterable, Iterator, List, Optional, Sequence, Set

from courtqueue.constants import (
    FAIRNESS_FILTER_THRESHOLD,
    MIN_USAGE_MEMBERS_REQUIRED,
    PLAYERS_PER_MATCH,
)
from courtqueue.models.candidate import Candidate, ScoredCandidate
from courtqueue.models.match_record import MatchRecord, MatchStatus
from courtqueue.models.participant import Participant
from courtqueue.models.queue_config import QueueConfig
from courtqueue.scheduling.enumerator import candidate_count, iter_candidates
from courtqueue.scheduling.match_scorer import MatchScorer, ScoringContext
from courtqueue.type_hints import GroupKey, ParticipantId, UsageMap
from courtqueue.utils import setup_logger
from courtqueue.utils.validation import ensure_valid_pool

logger = setup_logger(__name__)


class BuilderState(Enum):
    """States of one queue generation call."""

    IDLE = "idle"
    SCORING_ROUND = "scoring_round"
    COMMITTED = "committed"
    EXHAUSTED = "exhausted"


class UsageCounter:
    """Per-call count of how often each participant was queued.

    Counters start at zero for every active participant and can only be
    incremented. An instance belongs to exactly one :meth:`QueueBuilder.build`
    call.
    """

    def __init__(self, participant_ids: Iterable[ParticipantId]):
        self._counts: Dict[ParticipantId, int] = {pid: 0 for pid in participant_ids}

    def __getitem__(self, participant_id: ParticipantId) -> int:
        return self._counts[participant_id]

    def __len__(self) -> int:
        return len(self._counts)

    @property
    def minimum(self) -> int:
        return min(self._counts.values()) if self._counts else 0

    @property
    def spread(self) -> int:
        """Difference between the most and least used participant."""
        if not self._counts:
            return 0
        return max(self._counts.values()) - self.minimum

    def at_minimum(self) -> Set[ParticipantId]:
        """Ids of the participants sitting at the minimum usage."""
        low = self.minimum
        return {pid for pid, count in self._counts.items() if count == low}

    def increment(self, participant_ids: Iterable[ParticipantId]) -> None:
        for pid in participant_ids:
            self._counts[pid] += 1

    def snapshot(self) -> UsageMap:
        """Copy of the current counters."""
        return dict(self._counts)


@dataclass(frozen=True)
class RoundOutcome:
    """What happened in one scoring round.

    Attributes
    ----------
    round_number : int
        1-based round number within the call.
    winner : ScoredCandidate or None
        The committed candidate, or None if the round exhausted.
    candidates_considered : int
        Candidates left after removing already used groups.
    candidates_scored : int
        Candidates that survived the fairness pre-filter and were scored.
    fairness_filter_applied : bool
        Whether the hard fairness pre-filter was active this round.
    usage : dict of str to int
        Usage counters at the end of the round.
    """

    round_number: int
    winner: Optional[ScoredCandidate]
    candidates_considered: int
    candidates_scored: int
    fairness_filter_applied: bool
    usage: UsageMap = field(default_factory=dict)


@dataclass
class QueueResult:
    """Output of one queue generation call."""

    matches: List[Candidate] = field(default_factory=list)
    usage: UsageMap = field(default_factory=dict)
    state: BuilderState = BuilderState.IDLE
    rounds: List[RoundOutcome] = field(default_factory=list)
    max_rounds: int = 0

    @property
    def is_partial(self) -> bool:
        """True if the call stopped before reaching the round limit."""
        return len(self.matches) < self.max_rounds

    def to_dict(self) -> Dict[str, object]:
        return {
            "matches": [m.to_dict() for m in self.matches],
            "usage": dict(self.usage),
            "state": self.state.value,
        }


def passes_fairness_filter(
    candidate: Candidate, at_minimum: Set[ParticipantId]
) -> bool:
    """Hard fairness constraint applied before scoring.

    With at least four participants at the minimum usage, a candidate must
    contain at least three of them.
    """
    if len(at_minimum) < FAIRNESS_FILTER_THRESHOLD:
        return True
    members = sum(1 for pid in candidate.participant_ids if pid in at_minimum)
    return members >= MIN_USAGE_MEMBERS_REQUIRED


class QueueBuilder:
    """Builds a short queue of upcoming matches.

    The builder itself is stateless between calls: all per-call state (usage
    counters, committed matches) lives inside :meth:`build`, so one instance
    can serve concurrent callers.
    """

    def __init__(
        self, config: Optional[QueueConfig] = None, scorer: Optional[MatchScorer] = None
    ):
        self.config = config or QueueConfig()
        self.scorer = scorer or MatchScorer(self.config.weights)

    def build(
        self,
        active_participants: Sequence[Participant],
        match_universe: Sequence[MatchRecord] = (),
    ) -> QueueResult:
        """Generate the queue for the active pool.

        Args:
            active_participants: Participants eligible for this call, unique ids
            match_universe: Completed, playing and queued matches of the
                session, oldest to newest

        Returns:
            QueueResult holding at most ``config.max_queue_rounds`` matches;
            empty when fewer than four participants are active

        Raises:
            DuplicateParticipantException: If an id appears more than once
            InvalidParticipantDataException: If a match count is negative
            TooManyParticipantsException: If the pool exceeds the configured cap
        """
        participants = list(active_participants)
        ensure_valid_pool(participants, self.config.max_participants)

        max_rounds = self.config.max_queue_rounds
        usage = UsageCounter(p.id for p in participants)
        result = QueueResult(max_rounds=max_rounds)

        if len(participants) < PLAYERS_PER_MATCH:
            logger.info(
                f"Not enough players to build a queue: {len(participants)} active, "
                f"{PLAYERS_PER_MATCH} needed"
            )
            result.usage = usage.snapshot()
            return result

        logger.debug(
            f"Building queue of up to {max_rounds} matches from "
            f"{len(participants)} players "
            f"({candidate_count(len(participants))} candidates per round)"
        )

        history = list(match_universe)
        # Only a pool of exactly four runs out of groups: its one group is
        # played once per call. Larger pools may repeat a group when usage
        # requires it.
        single_group = len(participants) == PLAYERS_PER_MATCH
        used_groups: Set[GroupKey] = set()
        state = BuilderState.SCORING_ROUND

        for round_number in range(1, max_rounds + 1):
            outcome = self._run_round(
                round_number, participants, usage, history, used_groups
            )
            if outcome.winner is None:
                result.rounds.append(replace(outcome, usage=usage.snapshot()))
                state = BuilderState.EXHAUSTED
                logger.info(
                    f"No valid match left in round {round_number}; "
                    f"returning {len(result.matches)} matches"
                )
                break

            winner = outcome.winner.candidate
            result.matches.append(winner)
            usage.increment(winner.participant_ids)
            result.rounds.append(replace(outcome, usage=usage.snapshot()))
            if single_group:
                used_groups.add(winner.group_key)
            history.append(winner.to_match_record(MatchStatus.QUEUED))
            state = BuilderState.COMMITTED

        result.state = state
        result.usage = usage.snapshot()
        logger.info(
            f"Queued {len(result.matches)} matches (state={state.value}, "
            f"usage spread={usage.spread})"
        )
        return result

    def _run_round(
        self,
        round_number: int,
        participants: Sequence[Participant],
        usage: UsageCounter,
        history: Sequence[MatchRecord],
        used_groups: Set[GroupKey],
    ) -> RoundOutcome:
        """Score one round and pick its winner (without committing it)."""
        at_minimum = usage.at_minimum()
        filter_applied = len(at_minimum) >= FAIRNESS_FILTER_THRESHOLD
        context = ScoringContext.build(
            participants, usage.snapshot(), history, self.config.recency_window
        )

        counts = {"considered": 0, "scored": 0}

        def survivors() -> Iterator[Candidate]:
            for candidate in iter_candidates(participants):
                if candidate.group_key in used_groups:
                    continue
                counts["considered"] += 1
                if not passes_fairness_filter(candidate, at_minimum):
                    continue
                counts["scored"] += 1
                yield candidate

        winner = self.scorer.best(survivors(), context)

        if winner is not None:
            logger.debug(
                f"Round {round_number}: {winner.candidate.team_a} vs "
                f"{winner.candidate.team_b} scored {winner.score} "
                f"({counts['scored']}/{counts['considered']} candidates scored)"
            )
        return RoundOutcome(
            round_number=round_number,
            winner=winner,
            candidates_considered=counts["considered"],
            candidates_scored=counts["scored"],
            fairness_filter_applied=filter_applied,
        )


def generate_queue(
    active_participants: Sequence[Participant],
    match_universe: Sequence[MatchRecord] = (),
    max_queue_rounds: Optional[int] = None,
    config: Optional[QueueConfig] = None,
) -> List[Candidate]:
    """Functional entry point: return only the generated matches.

    ``max_queue_rounds`` overrides the value of ``config`` when given.
    """
    config = config or QueueConfig()
    if max_queue_rounds is not None:
        config = replace(config, max_queue_rounds=max_queue_rounds)
    return QueueBuilder(config).build(active_participants, match_universe).matches


#  LocalWords:  QueueBuilder UsageCounter
