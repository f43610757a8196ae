"""Data model for tournament round."""

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
from typing import Any, Dict, List, Optional

from americanopairing.type_hints import PlayerName, Team

from .match import Match


@dataclass
class Round:
    """Container for all data related to a single tournament round.

    Attributes
    ----------
    round_number : int
        Round number (1-indexed).
    matches : list of Match
        Matches ordered by court number, ascending.
    bye : str or None
        Name of the player resting this round, or None if nobody rests.
    """

    round_number: int
    matches: List[Match] = field(default_factory=list)
    bye: Optional[PlayerName] = None

    @property
    def players(self) -> List[PlayerName]:
        """Every player placed in a match this round, in court order."""
        return [name for match in self.matches for name in match.players]

    @property
    def teams(self) -> List[Team]:
        """Teammate pairs in court order, team1 before team2."""
        teams: List[Team] = []
        for match in self.matches:
            teams.append(match.team1)
            teams.append(match.team2)
        return teams

    @property
    def is_submitted(self) -> bool:
        """True once every match in the round has a recorded result."""
        return bool(self.matches) and all(m.submitted for m in self.matches)

    def get_match(self, court: int) -> Optional[Match]:
        """Return the match on ``court``, or None."""
        for match in self.matches:
            if match.court == court:
                return match
        return None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize round data to dictionary."""
        return {
            "roundNumber": self.round_number,
            "matches": [m.to_dict() for m in self.matches],
            "bye": self.bye,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Round":
        """Deserialize round data from dictionary."""
        return cls(
            round_number=data["roundNumber"],
            matches=[Match.from_dict(m) for m in data.get("matches", [])],
            bye=data.get("bye"),
        )
