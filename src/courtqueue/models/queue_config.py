"""QueueConfig and ScoringWeights data classes."""

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

from dataclasses import dataclass, field, fields
from typing import Any, Dict, Optional

from courtqueue.constants import (
    DEFAULT_MAX_QUEUE_ROUNDS,
    DEFAULT_RECENCY_WINDOW,
    PLAYERS_PER_MATCH,
    WEIGHT_LIFETIME_MATCHES,
    WEIGHT_OPPONENT_REPEAT,
    WEIGHT_RECENT_INTERACTION,
    WEIGHT_TEAMMATE_REPEAT,
    WEIGHT_TOTAL_USAGE,
    WEIGHT_UNDERUSED_BONUS,
    WEIGHT_USAGE_SPREAD,
)
from courtqueue.exceptions import InvalidConfigurationException


@dataclass(frozen=True)
class ScoringWeights:
    """Weights of the composite match score.

    The fields are declared in priority order. Tuning is allowed as long as
    every weight stays positive and strictly greater than the next one.

    Attributes
    ----------
    underused_bonus : int
        Subtracted once per candidate member at the minimum queue usage.
    usage_spread : int
        Times (max - min) queue usage inside the candidate.
    total_usage : int
        Times the summed queue usage of the candidate.
    teammate_repeat : int
        Per earlier match in which a team pair were teammates.
    opponent_repeat : int
        Per earlier match in which a cross-team pair were opponents.
    lifetime_matches : int
        Times the summed lifetime match count of the candidate.
    recent_interaction : int
        Times the summed recency interaction score of all six pairs.
    """

    underused_bonus: int = WEIGHT_UNDERUSED_BONUS
    usage_spread: int = WEIGHT_USAGE_SPREAD
    total_usage: int = WEIGHT_TOTAL_USAGE
    teammate_repeat: int = WEIGHT_TEAMMATE_REPEAT
    opponent_repeat: int = WEIGHT_OPPONENT_REPEAT
    lifetime_matches: int = WEIGHT_LIFETIME_MATCHES
    recent_interaction: int = WEIGHT_RECENT_INTERACTION

    def __post_init__(self) -> None:
        ordered = [(f.name, getattr(self, f.name)) for f in fields(self)]
        for name, value in ordered:
            if value <= 0:
                raise InvalidConfigurationException(
                    f"Weight {name!r} must be positive, got {value}"
                )
        for (high_name, high), (low_name, low) in zip(ordered, ordered[1:]):
            if high <= low:
                raise InvalidConfigurationException(
                    f"Weight {high_name!r} ({high}) must exceed {low_name!r} ({low})"
                )

    def to_dict(self) -> Dict[str, int]:
        """Serialize weights to dictionary."""
        return {f.name: getattr(self, f.name) for f in fields(self)}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ScoringWeights":
        """Deserialize weights, keeping defaults for missing keys."""
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise InvalidConfigurationException(
                f"Unknown scoring weights: {', '.join(sorted(unknown))}"
            )
        return cls(**{k: int(v) for k, v in data.items()})


@dataclass(frozen=True)
class QueueConfig:
    """Queue generation settings.

    Attributes
    ----------
    max_queue_rounds : int
        Maximum number of matches generated per call.
    recency_window : int
        Number of most recent matches considered by the recency penalty.
    max_participants : int or None
        Hard cap on the active pool. Cost grows as O(n^4) per round.
    weights : ScoringWeights
        Composite score weights.
    """

    max_queue_rounds: int = DEFAULT_MAX_QUEUE_ROUNDS
    recency_window: int = DEFAULT_RECENCY_WINDOW
    max_participants: Optional[int] = None
    weights: ScoringWeights = field(default_factory=ScoringWeights)

    def __post_init__(self) -> None:
        if self.max_queue_rounds < 1:
            raise InvalidConfigurationException(
                f"max_queue_rounds must be at least 1, got {self.max_queue_rounds}"
            )
        if self.recency_window < 1:
            raise InvalidConfigurationException(
                f"recency_window must be at least 1, got {self.recency_window}"
            )
        if self.max_participants is not None and self.max_participants < PLAYERS_PER_MATCH:
            raise InvalidConfigurationException(
                f"max_participants must be at least {PLAYERS_PER_MATCH}, "
                f"got {self.max_participants}"
            )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize configuration to dictionary."""
        return {
            "max_queue_rounds": self.max_queue_rounds,
            "recency_window": self.recency_window,
            "max_participants": self.max_participants,
            "weights": self.weights.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "QueueConfig":
        """Deserialize configuration from dictionary."""
        max_participants = data.get("max_participants")
        return cls(
            max_queue_rounds=int(
                data.get("max_queue_rounds", DEFAULT_MAX_QUEUE_ROUNDS)
            ),
            recency_window=int(data.get("recency_window", DEFAULT_RECENCY_WINDOW)),
            max_participants=(
                int(max_participants) if max_participants is not None else None
            ),
            weights=ScoringWeights.from_dict(data.get("weights", {})),
        )
