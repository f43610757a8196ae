"""Player standings record."""

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


@dataclass
class Player:
    """One roster entry with aggregate match statistics.

    The statistics are derived data: they are always rebuilt from the full
    match history by :func:`americanopairing.tournament.recalculate_stats` and
    are never edited by hand.

    Attributes
    ----------
    name : str
        Unique player name; the player's identity within a tournament.
    wins : int
        Matches won.
    losses : int
        Matches lost. Drawn matches count as neither a win nor a loss.
    games_for : int
        Games scored by the player's teams.
    games_against : int
        Games conceded by the player's teams.
    """

    name: str
    wins: int = 0
    losses: int = 0
    games_for: int = 0
    games_against: int = 0

    @property
    def game_difference(self) -> int:
        """Games won minus games lost."""
        return self.games_for - self.games_against

    def to_dict(self) -> Dict[str, Any]:
        """Serialize player to dictionary."""
        return {
            "name": self.name,
            "wins": self.wins,
            "losses": self.losses,
            "gamesFor": self.games_for,
            "gamesAgainst": self.games_against,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Player":
        """Deserialize player from dictionary."""
        return cls(
            name=data["name"],
            wins=data.get("wins", 0),
            losses=data.get("losses", 0),
            games_for=data.get("gamesFor", 0),
            games_against=data.get("gamesAgainst", 0),
        )
