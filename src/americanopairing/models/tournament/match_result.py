"""Match result data class."""

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

from dataclasses import dataclass
from typing import Any, Dict

from americanopairing.type_hints import Team


@dataclass
class MatchResult:
    """One entry of the match history: the recorded score of one court.

    Attributes
    ----------
    round_number : int
        Round the match was played in (1-indexed).
    court : int
        Court number within the round (1-indexed).
    team1 : tuple of str
        First team as it was scheduled.
    team2 : tuple of str
        Second team as it was scheduled.
    score1 : int
        Games won by ``team1``.
    score2 : int
        Games won by ``team2``.
    """

    round_number: int
    court: int
    team1: Team
    team2: Team
    score1: int
    score2: int

    @property
    def is_draw(self) -> bool:
        """Both teams won the same number of games."""
        return self.score1 == self.score2

    def to_dict(self) -> Dict[str, Any]:
        """Serialize match result to dictionary."""
        return {
            "roundNumber": self.round_number,
            "court": self.court,
            "team1": list(self.team1),
            "team2": list(self.team2),
            "score1": self.score1,
            "score2": self.score2,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MatchResult":
        """Deserialize match result from dictionary."""
        return cls(
            round_number=data["roundNumber"],
            court=data["court"],
            team1=tuple(data["team1"]),
            team2=tuple(data["team2"]),
            score1=data["score1"],
            score2=data["score2"],
        )
