"""Exceptions for use in Court Queue"""

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


# ========== Base Application Exception ==========


class CourtQueueException(Exception):
    """Base exception for all Court Queue errors.

    All custom exceptions in the application should inherit from this class.
    This enables catching all application-specific errors with a single except clause.
    """

    pass


# ========== Pairing Exceptions ==========


class PairingException(CourtQueueException):
    """Base exception for pairing-related errors."""

    pass


class InvalidPairingException(PairingException):
    """Raised when a proposed match (candidate) has overlapping or repeated players."""

    pass


# ========== Participant Exceptions ==========


class ParticipantException(CourtQueueException):
    """Base exception for participant-related errors."""

    pass


class DuplicateParticipantException(ParticipantException):
    """Raised when the same participant id is supplied more than once."""

    pass


class InvalidParticipantDataException(ParticipantException):
    """Raised when participant data is invalid (e.g., negative match count)."""

    pass


# ========== Match Record Exceptions ==========


class MatchRecordException(CourtQueueException):
    """Base exception for match record errors."""

    pass


class InvalidMatchRecordException(MatchRecordException):
    """Raised when a match record does not hold four distinct players in two teams."""

    pass


# ========== Validation Exceptions ==========


class ValidationException(CourtQueueException):
    """Base exception for validation errors."""

    pass


class TooManyParticipantsException(ValidationException):
    """Raised when the active pool exceeds the configured participant cap."""

    pass


# ========== File/Resource Exceptions ==========


class ResourceException(CourtQueueException):
    """Base exception for resource-related errors."""

    pass


class FileLoadException(ResourceException):
    """Raised when a session file cannot be loaded."""

    pass


# ========== Configuration Exceptions ==========


class ConfigurationException(CourtQueueException):
    """Base exception for configuration errors."""

    pass


class InvalidConfigurationException(ConfigurationException):
    """Raised when configuration data is invalid."""

    pass
