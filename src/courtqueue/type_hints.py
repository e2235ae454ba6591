"""Type hints used in Court Queue."""

from typing import Dict, Literal, Optional, Tuple

# Team labels
TeamLabel = Literal["A", "B"]

# Participant identifiers are opaque strings (database ids, usernames, ...)
ParticipantId = str
# Two participant ids forming one side of a match
TeamPair = Tuple[ParticipantId, ParticipantId]
# Four participant ids, sorted, identifying a group regardless of team split
GroupKey = Tuple[ParticipantId, ParticipantId, ParticipantId, ParticipantId]
# Teams sorted internally and against each other
CanonicalKey = Tuple[TeamPair, TeamPair]
# How many times each participant was placed in the queue being built
UsageMap = Dict[ParticipantId, int]
MaybeTeam = Optional[TeamLabel]

#  LocalWords:  TeamPair GroupKey
