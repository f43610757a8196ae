"""Exceptions for use in Americano Pairing"""

# Americano Pairing
# Copyright (C) 2025  Americano Pairing developers
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


class AmericanoPairingException(Exception):
    """Base exception for all Americano Pairing errors.

    All custom exceptions in the package inherit from this class, so callers
    can catch every library-specific error with a single except clause.
    """

    pass


# ========== Validation Exceptions ==========


class ValidationException(AmericanoPairingException):
    """Base exception for validation errors."""

    pass


class ScoreValidationException(ValidationException):
    """Raised when a score value is not a non-negative integer."""

    pass


# ========== Schedule Exceptions ==========


class ScheduleException(AmericanoPairingException):
    """Base exception for schedule generation errors."""

    pass


class InvalidRosterException(ScheduleException, ValidationException):
    """Raised when the roster is too small to form a single match."""

    pass


class InvalidCourtCountException(ScheduleException, ValidationException):
    """Raised when the court count is not a positive integer."""

    pass


# ========== Tournament Exceptions ==========


class TournamentException(AmericanoPairingException):
    """Base exception for tournament-related errors."""

    pass


class TournamentStateException(TournamentException):
    """Raised when tournament is in an invalid state for the requested operation."""

    pass


class RoundNotFoundException(TournamentException):
    """Raised when a requested round does not exist."""

    pass


# ========== Result Exceptions ==========


class ResultException(AmericanoPairingException):
    """Base exception for result recording errors."""

    pass


class InvalidResultException(ResultException):
    """Raised when submitted scores do not fit the round they are for."""

    pass


# ========== Configuration Exceptions ==========


class ConfigurationException(AmericanoPairingException):
    """Base exception for configuration errors."""

    pass


class InvalidConfigurationException(ConfigurationException):
    """Raised when configuration data is invalid."""

    pass
