"""Exceptions for use in Guide Pairing"""

# Guide Pairing
# Copyright (C) 2025  Guide Pairing developers
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


class GuidePairingException(Exception):
    """Base exception for all Guide Pairing errors.

    All custom exceptions in the application should inherit from this class.
    This enables catching all application-specific errors with a single except clause.
    """

    pass


# ========== Pairing Exceptions ==========


class PairingException(GuidePairingException):
    """Base exception for pairing-related errors.

    Rejected pairing attempts are reported as values, not raised; these are
    for broken assignment state only.
    """

    pass


class InvariantViolationException(PairingException):
    """Raised when an assignment fails its structural invariants."""

    pass


# ========== Roster Exceptions ==========


class RosterException(GuidePairingException):
    """Base exception for roster-related errors."""

    pass


class DuplicateSignUpException(RosterException):
    """Raised when a roster receives two sign-ups for the same user."""

    pass


# ========== Persistence Exceptions ==========


class PersistenceException(GuidePairingException):
    """Base exception for loading and saving event data."""

    pass


class EventNotFoundException(PersistenceException):
    """Raised when the requested event does not exist in storage."""

    pass


class LoadFailedException(PersistenceException):
    """Raised when event data cannot be read."""

    pass


class SaveFailedException(PersistenceException):
    """Raised when an assignment cannot be written.

    The in-memory assignment is left untouched so the save can be retried.
    """

    pass


class InvalidEventDataException(PersistenceException):
    """Raised when stored event data has the wrong shape."""

    pass


# ========== Validation Exceptions ==========


class ValidationException(GuidePairingException):
    """Base exception for validation errors."""

    pass


class PaceValidationException(ValidationException):
    """Raised when a pace value is invalid."""

    pass


# ========== Configuration Exceptions ==========


class ConfigurationException(GuidePairingException):
    """Base exception for configuration errors."""

    pass


class InvalidConfigurationException(ConfigurationException):
    """Raised when configuration data is invalid."""

    pass


class MissingConfigurationException(ConfigurationException):
    """Raised when required configuration is missing."""

    pass
