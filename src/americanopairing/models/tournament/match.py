"""Scheduled match data class."""

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
from typing import Any, Dict, Tuple

from americanopairing.type_hints import PlayerName, Team


@dataclass
class Match:
    """A match on one court: two teams of two and their score.

    Attributes
    ----------
    court : int
        Court number, unique within the round and starting at 1.
    team1 : tuple of str
        First team.
    team2 : tuple of str
        Second team.
    score1 : int
        Games won by ``team1``; 0 until a result is recorded.
    score2 : int
        Games won by ``team2``; 0 until a result is recorded.
    submitted : bool
        False while the match is only scheduled, True once a result exists.
    """

    court: int
    team1: Team
    team2: Team
    score1: int = 0
    score2: int = 0
    submitted: bool = False

    @property
    def players(self) -> Tuple[PlayerName, ...]:
        """All four players, team1 first."""
        return tuple(self.team1) + tuple(self.team2)

    def record_score(self, score1: int, score2: int) -> None:
        """Store a result and mark the match as submitted."""
        self.score1 = score1
        self.score2 = score2
        self.submitted = True

    def to_dict(self) -> Dict[str, Any]:
        """Serialize match to dictionary."""
        return {
            "court": self.court,
            "team1": list(self.team1),
            "team2": list(self.team2),
            "score1": self.score1,
            "score2": self.score2,
            "submitted": self.submitted,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Match":
        """Deserialize match from dictionary."""
        return cls(
            court=data["court"],
            team1=tuple(data["team1"]),
            team2=tuple(data["team2"]),
            score1=data.get("score1", 0),
            score2=data.get("score2", 0),
            submitted=data.get("submitted", False),
        )
