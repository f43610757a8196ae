"""TournamentConfig data class."""

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

from dataclasses import dataclass, field
from typing import Any, Dict, List

from americanopairing.constants import (
    DEFAULT_COURTS,
    DEFAULT_MATCH_DURATION_MINUTES,
    DEFAULT_RANKING_ORDER,
    DEFAULT_TOURNAMENT_NAME,
    RANKING_NAMES,
)
from americanopairing.exceptions import InvalidConfigurationException
from americanopairing.utils.validation import validate_courts, validate_positive_integer


@dataclass
class TournamentConfig:
    """Tournament configuration settings.

    Attributes
    ----------
    name : str
        Tournament name.
    courts : int
        Number of courts matches can be played on at the same time.
    match_duration_minutes : int
        Planned length of one round, for display and timers.
    ranking_order : list of str
        Ordered leaderboard criteria, see ``RANKING_NAMES``.
    """

    name: str = DEFAULT_TOURNAMENT_NAME
    courts: int = DEFAULT_COURTS
    match_duration_minutes: int = DEFAULT_MATCH_DURATION_MINUTES
    ranking_order: List[str] = field(
        default_factory=lambda: list(DEFAULT_RANKING_ORDER)
    )

    def __post_init__(self):
        courts = validate_courts(self.courts)
        if not courts:
            raise InvalidConfigurationException(courts.error_message)
        self.courts = courts.sanitized_value

        duration = validate_positive_integer(
            self.match_duration_minutes, "Match duration"
        )
        if not duration:
            raise InvalidConfigurationException(duration.error_message)
        self.match_duration_minutes = duration.sanitized_value

        unknown = [key for key in self.ranking_order if key not in RANKING_NAMES]
        if unknown:
            raise InvalidConfigurationException(
                f"Unknown ranking criteria: {', '.join(unknown)}"
            )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize configuration to dictionary."""
        return {
            "name": self.name,
            "courts": self.courts,
            "matchDuration": self.match_duration_minutes,
            "rankingOrder": list(self.ranking_order),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TournamentConfig":
        """Deserialize configuration from dictionary."""
        return cls(
            name=data.get("name", DEFAULT_TOURNAMENT_NAME),
            courts=data.get("courts", DEFAULT_COURTS),
            match_duration_minutes=data.get(
                "matchDuration", DEFAULT_MATCH_DURATION_MINUTES
            ),
            ranking_order=data.get("rankingOrder", list(DEFAULT_RANKING_ORDER)),
        )
