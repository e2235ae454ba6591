from courtqueue.models.candidate import Candidate, ScoredCandidate
from courtqueue.models.match_record import MatchRecord, MatchStatus
from courtqueue.models.participant import Participant
from courtqueue.models.queue_config import QueueConfig, ScoringWeights

__all__ = [
    "Candidate",
    "ScoredCandidate",
    "MatchRecord",
    "MatchStatus",
    "Participant",
    "QueueConfig",
    "ScoringWeights",
]
