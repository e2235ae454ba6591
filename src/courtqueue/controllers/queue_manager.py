"""Queue management for a session.

This module keeps the in-memory match lists of one session and turns
generated candidates into numbered queued matches. Storage is left to the
caller.
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

from collections import Counter
from dataclasses import replace
from typing import Dict, Iterable, List, Optional, Sequence

from courtqueue.exceptions import InvalidMatchRecordException
from courtqueue.models import MatchRecord, MatchStatus, Participant, QueueConfig
from courtqueue.scheduling import QueueBuilder, QueueResult
from courtqueue.type_hints import ParticipantId, TeamPair
from courtqueue.utils import setup_logger

logger = setup_logger(__name__)


class QueueManager:
    """Manages the match lists of one session.

    This class is responsible for:
    - Ordering the match universe handed to the queue builder
    - Numbering generated matches and appending them to the queue
    - Inserting, editing and deleting queued matches
    - Dropping the queued matches of players who left
    - Counting matches per participant
    """

    def __init__(
        self,
        config: Optional[QueueConfig] = None,
        completed: Optional[Sequence[MatchRecord]] = None,
        playing: Optional[Sequence[MatchRecord]] = None,
        queued: Optional[Sequence[MatchRecord]] = None,
    ):
        """Initialize the queue manager.

        Args:
            config: Queue generation settings
            completed: Completed matches, oldest first
            playing: Matches currently on court
            queued: Matches waiting in the queue, in play order
        """
        self.config = config or QueueConfig()
        self.builder = QueueBuilder(self.config)
        self.completed: List[MatchRecord] = list(completed or [])
        self.playing: List[MatchRecord] = list(playing or [])
        self.queued: List[MatchRecord] = list(queued or [])
        self.last_result: Optional[QueueResult] = None

    @classmethod
    def from_records(
        cls, records: Iterable[MatchRecord], config: Optional[QueueConfig] = None
    ) -> "QueueManager":
        """Split a flat list of records by status.

        Records keep their relative order; queued records are sorted by game
        number when one is set.
        """
        by_status: Dict[MatchStatus, List[MatchRecord]] = {s: [] for s in MatchStatus}
        for record in records:
            by_status[record.status].append(record)
        queued = sorted(
            by_status[MatchStatus.QUEUED],
            key=lambda r: r.game_number if r.game_number is not None else 0,
        )
        return cls(
            config=config,
            completed=by_status[MatchStatus.COMPLETED],
            playing=by_status[MatchStatus.PLAYING],
            queued=queued,
        )

    @property
    def all_matches(self) -> List[MatchRecord]:
        return self.completed + self.playing + self.queued

    def match_universe(self) -> List[MatchRecord]:
        """Matches used for history scoring, oldest to newest.

        Returns:
            Completed and playing matches followed by the queued ones.
        """
        return self.all_matches

    def next_game_number(self) -> int:
        """Number the next generated match would receive."""
        return len(self.completed) + len(self.playing) + len(self.queued) + 1

    def generate(self, active_participants: Sequence[Participant]) -> List[MatchRecord]:
        """Generate matches and append them to the queue.

        Args:
            active_participants: Players present and not marked as left

        Returns:
            The new queued matches, numbered sequentially. Empty when there
            are not enough players or no further match is possible.
        """
        result = self.builder.build(active_participants, self.match_universe())
        self.last_result = result

        if not result.matches:
            reason = "not enough players" if not result.rounds else "no valid match left"
            logger.warning(
                f"Could not generate queue from {len(active_participants)} "
                f"active players: {reason}"
            )
            return []

        first_number = self.next_game_number()
        new_records = [
            candidate.to_match_record(MatchStatus.QUEUED, first_number + offset)
            for offset, candidate in enumerate(result.matches)
        ]
        self.queued.extend(new_records)
        logger.info(
            f"Generated {len(new_records)} matches "
            f"(games {first_number}-{first_number + len(new_records) - 1})"
        )
        return new_records

    def insert_custom_match(
        self, team_a: TeamPair, team_b: TeamPair, position: int = 1
    ) -> MatchRecord:
        """Insert a hand-made match into the queue.

        Args:
            team_a: Ids of the first team
            team_b: Ids of the second team
            position: 1-based position in the queue; clamped to the queue end

        Returns:
            The inserted record, with its game number

        Raises:
            InvalidMatchRecordException: If a player appears twice or the
                position is not positive
        """
        if position < 1:
            raise InvalidMatchRecordException(
                f"Queue position must be at least 1, got {position}"
            )
        record = MatchRecord(
            team_a=team_a, team_b=team_b, status=MatchStatus.QUEUED, is_custom=True
        )
        index = min(position, len(self.queued) + 1) - 1
        self.queued.insert(index, record)
        self._renumber_queue()
        logger.info(f"Inserted custom match at queue position {index + 1}")
        return self.queued[index]

    def edit_queued_match(
        self, game_number: int, team_a: TeamPair, team_b: TeamPair
    ) -> MatchRecord:
        """Replace the teams of a queued match, keeping its queue position.

        Raises:
            InvalidMatchRecordException: If no queued match has that number
                or a player appears twice
        """
        index = self._queued_index(game_number)
        edited = replace(self.queued[index], team_a=team_a, team_b=team_b)
        self.queued[index] = edited
        self._renumber_queue()
        logger.info(f"Edited queued game {game_number}")
        return self.queued[index]

    def delete_queued_match(self, game_number: int) -> MatchRecord:
        """Remove one queued match and close the gap in the numbering.

        Raises:
            InvalidMatchRecordException: If no queued match has that number
        """
        removed = self.queued.pop(self._queued_index(game_number))
        self._renumber_queue()
        logger.info(f"Deleted queued game {game_number}")
        return removed

    def remove_participant(self, participant_id: ParticipantId) -> List[MatchRecord]:
        """Drop every queued match involving a participant who left.

        Returns:
            The removed matches
        """
        removed = [r for r in self.queued if r.involves(participant_id)]
        if removed:
            self.queued = [r for r in self.queued if not r.involves(participant_id)]
            self._renumber_queue()
            logger.info(
                f"Removed {len(removed)} queued matches of player {participant_id}"
            )
        return removed

    def start_next(self) -> Optional[MatchRecord]:
        """Move the head of the queue on court."""
        if not self.queued:
            return None
        record = replace(self.queued.pop(0), status=MatchStatus.PLAYING)
        self.playing.append(record)
        return record

    def complete(self, game_number: int) -> MatchRecord:
        """Mark a playing match as completed.

        Raises:
            InvalidMatchRecordException: If no playing match has that number
        """
        for i, record in enumerate(self.playing):
            if record.game_number == game_number:
                done = replace(self.playing.pop(i), status=MatchStatus.COMPLETED)
                self.completed.append(done)
                return done
        raise InvalidMatchRecordException(f"Game {game_number} is not being played")

    def games_played(
        self, statuses: Iterable[MatchStatus] = (MatchStatus.COMPLETED,)
    ) -> Dict[ParticipantId, int]:
        """Count matches per participant among the given statuses."""
        wanted = set(statuses)
        counts: Counter = Counter()
        for record in self.all_matches:
            if record.status in wanted:
                counts.update(record.participant_ids)
        return dict(counts)

    def _queued_index(self, game_number: int) -> int:
        for i, record in enumerate(self.queued):
            if record.game_number == game_number:
                return i
        raise InvalidMatchRecordException(f"Game {game_number} is not queued")

    def _renumber_queue(self) -> None:
        first = len(self.completed) + len(self.playing) + 1
        self.queued = [
            replace(record, game_number=first + offset)
            for offset, record in enumerate(self.queued)
        ]


#  LocalWords:  QueueManager
