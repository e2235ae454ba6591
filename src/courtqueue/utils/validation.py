"""Validation utilities for Court Queue.

This module checks the caller-side contracts of queue generation with
consistent error handling.
"""

from collections import Counter
from typing import Optional, Sequence

from courtqueue.exceptions import (
    DuplicateParticipantException,
    InvalidParticipantDataException,
    TooManyParticipantsException,
)
from courtqueue.models.participant import Participant


class ValidationResult:
    """Result of a validation operation.

    Attributes:
        is_valid: Whether the validation passed
        error_message: Human-readable error message if invalid
    """

    def __init__(self, is_valid: bool, error_message: Optional[str] = None):
        self.is_valid = is_valid
        self.error_message = error_message

    def __bool__(self) -> bool:
        """Allow using result in boolean context: if result: ..."""
        return self.is_valid

    def __repr__(self) -> str:
        if self.is_valid:
            return "ValidationResult(VALID)"
        return f"ValidationResult(INVALID, {self.error_message!r})"


# ========== Participant Validation ==========


def validate_unique_ids(participants: Sequence[Participant]) -> ValidationResult:
    """Check that no participant id appears twice.

    Example:
        >>> validate_unique_ids([Participant("a"), Participant("b")]).is_valid
        True
    """
    counts = Counter(p.id for p in participants)
    duplicates = sorted(str(pid) for pid, count in counts.items() if count > 1)
    if duplicates:
        return ValidationResult(
            is_valid=False,
            error_message=f"Duplicate participant ids: {', '.join(duplicates)}",
        )
    return ValidationResult(is_valid=True)


def validate_match_counts(participants: Sequence[Participant]) -> ValidationResult:
    """Check that lifetime match counts are non-negative integers."""
    for p in participants:
        if not isinstance(p.lifetime_matches_played, int) or p.lifetime_matches_played < 0:
            return ValidationResult(
                is_valid=False,
                error_message=(
                    f"Participant {p.id!r} has an invalid match count "
                    f"({p.lifetime_matches_played!r})"
                ),
            )
    return ValidationResult(is_valid=True)


def validate_pool_size(
    participants: Sequence[Participant], max_participants: Optional[int]
) -> ValidationResult:
    """Check the active pool against an optional hard cap."""
    if max_participants is not None and len(participants) > max_participants:
        return ValidationResult(
            is_valid=False,
            error_message=(
                f"{len(participants)} active participants exceed the limit "
                f"of {max_participants}"
            ),
        )
    return ValidationResult(is_valid=True)


def ensure_valid_pool(
    participants: Sequence[Participant], max_participants: Optional[int] = None
) -> None:
    """Raise if the active pool breaks a caller-side contract.

    Raises:
        DuplicateParticipantException: If an id appears more than once
        InvalidParticipantDataException: If a match count is negative
        TooManyParticipantsException: If the pool exceeds ``max_participants``
    """
    result = validate_unique_ids(participants)
    if not result:
        raise DuplicateParticipantException(result.error_message)

    result = validate_match_counts(participants)
    if not result:
        raise InvalidParticipantDataException(result.error_message)

    result = validate_pool_size(participants, max_participants)
    if not result:
        raise TooManyParticipantsException(result.error_message)
