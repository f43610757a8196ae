"""Validation utilities for Americano Pairing.

This module provides reusable validation functions with consistent error handling.
Each ``validate_*`` function returns a :class:`ValidationResult`; the ``*_strict``
variants raise the matching exception instead.
"""

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

from typing import Any, Iterable, List, Optional, Sequence

from americanopairing.constants import MIN_COURTS, MIN_PLAYERS
from americanopairing.exceptions import (
    InvalidCourtCountException,
    InvalidRosterException,
    ScoreValidationException,
)
from americanopairing.utils import setup_logger

logger = setup_logger(__name__)


class ValidationResult:
    """Result of a validation operation.

    Attributes:
        is_valid: Whether the validation passed
        error_message: Human-readable error message if invalid
        sanitized_value: Cleaned/normalized value if valid
    """

    def __init__(
        self,
        is_valid: bool,
        error_message: Optional[str] = None,
        sanitized_value: Any = None,
    ):
        self.is_valid = is_valid
        self.error_message = error_message
        self.sanitized_value = sanitized_value

    def __bool__(self) -> bool:
        """Allow using result in boolean context: if result: ..."""
        return self.is_valid

    def __repr__(self) -> str:
        if self.is_valid:
            return f"ValidationResult(VALID, {self.sanitized_value!r})"
        return f"ValidationResult(INVALID, {self.error_message!r})"


def _as_int(value: Any) -> Optional[int]:
    """Coerce ints, integral floats and digit strings; everything else is None."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str):
        text = value.strip()
        if text.lstrip("-").isdigit():
            return int(text)
    return None


# ========== Player Name Validation ==========


def validate_player_name(
    name: Optional[str], existing: Iterable[str] = ()
) -> ValidationResult:
    """Validate a player name before it joins a roster.

    Names are trimmed. Blank names and names already in ``existing`` are
    rejected; any other characters are allowed.

    Args:
        name: Name to validate
        existing: Names already on the roster

    Returns:
        ValidationResult with the trimmed name

    Example:
        >>> result = validate_player_name("  Ana ")
        >>> result.sanitized_value
        'Ana'
    """
    if name is None or not str(name).strip():
        return ValidationResult(
            is_valid=False,
            error_message="Player name cannot be empty",
        )

    name = str(name).strip()
    if name in set(existing):
        return ValidationResult(
            is_valid=False,
            error_message=f"Duplicate player name: {name}",
        )

    return ValidationResult(is_valid=True, sanitized_value=name)


def clean_player_names(names: Iterable[Optional[str]]) -> List[str]:
    """Trim names and drop blanks and repeats, keeping first-seen order.

    Args:
        names: Raw names as typed in

    Returns:
        A roster with unique, non-empty names
    """
    roster: List[str] = []
    for raw in names:
        result = validate_player_name(raw, roster)
        if result:
            roster.append(result.sanitized_value)
        else:
            logger.debug(f"Skipping player entry {raw!r}: {result.error_message}")
    return roster


# ========== Roster Validation ==========


def validate_roster(players: Optional[Sequence[str]]) -> ValidationResult:
    """Validate that a roster is large enough to play at least one match.

    Args:
        players: Player names in schedule order

    Returns:
        ValidationResult with the roster as a list
    """
    if not players or len(players) < MIN_PLAYERS:
        count = len(players) if players else 0
        return ValidationResult(
            is_valid=False,
            error_message=f"At least {MIN_PLAYERS} players required, got {count}",
        )
    return ValidationResult(is_valid=True, sanitized_value=list(players))


def validate_roster_strict(players: Optional[Sequence[str]]) -> List[str]:
    """Validate a roster and return it as a list, or raise.

    Raises:
        InvalidRosterException: If fewer than four players are given
    """
    result = validate_roster(players)
    if not result.is_valid:
        raise InvalidRosterException(result.error_message)
    return result.sanitized_value


# ========== Court Validation ==========


def validate_courts(courts: Any) -> ValidationResult:
    """Validate a court count (a positive integer).

    Args:
        courts: Number of courts available

    Returns:
        ValidationResult with the count as an int
    """
    if courts is None:
        return ValidationResult(
            is_valid=False,
            error_message="Number of courts is required",
        )

    court_count = _as_int(courts)
    if court_count is None:
        return ValidationResult(
            is_valid=False,
            error_message=f"Number of courts must be a whole number: {courts!r}",
        )
    if court_count < MIN_COURTS:
        return ValidationResult(
            is_valid=False,
            error_message=f"At least {MIN_COURTS} court required, got {court_count}",
        )
    return ValidationResult(is_valid=True, sanitized_value=court_count)


def validate_courts_strict(courts: Any) -> int:
    """Validate a court count and return it as an int, or raise.

    Raises:
        InvalidCourtCountException: If the count is missing or not positive
    """
    result = validate_courts(courts)
    if not result.is_valid:
        raise InvalidCourtCountException(result.error_message)
    return result.sanitized_value


# ========== Score Validation ==========


def validate_score(score: Any) -> ValidationResult:
    """Validate a games score for one team (a non-negative integer).

    Args:
        score: Score to validate

    Returns:
        ValidationResult with the score as an int
    """
    score_int = _as_int(score)
    if score_int is None:
        return ValidationResult(
            is_valid=False,
            error_message=f"Score must be a whole number: {score!r}",
        )
    if score_int < 0:
        return ValidationResult(
            is_valid=False,
            error_message=f"Score cannot be negative: {score_int}",
        )
    return ValidationResult(is_valid=True, sanitized_value=score_int)


def validate_score_strict(score: Any) -> int:
    """Validate a score and return it as an int, or raise.

    Raises:
        ScoreValidationException: If the score is not a non-negative integer
    """
    result = validate_score(score)
    if not result.is_valid:
        raise ScoreValidationException(result.error_message)
    return result.sanitized_value


# ========== Generic Validation ==========


def validate_positive_integer(
    value: Any, field_name: str = "Value"
) -> ValidationResult:
    """Validate that a value is a positive integer.

    Args:
        value: Value to validate
        field_name: Name of the field for error messages

    Returns:
        ValidationResult with the value as an int
    """
    if value is None:
        return ValidationResult(
            is_valid=False,
            error_message=f"{field_name} is required",
        )

    int_value = _as_int(value)
    if int_value is None:
        return ValidationResult(
            is_valid=False,
            error_message=f"{field_name} must be a number",
        )
    if int_value <= 0:
        return ValidationResult(
            is_valid=False,
            error_message=f"{field_name} must be positive",
        )
    return ValidationResult(is_valid=True, sanitized_value=int_value)
