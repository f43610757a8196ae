"""Teammate history across a schedule."""

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

from collections import Counter
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable

from americanopairing.type_hints import Team

from .round_data import Round


@dataclass
class PartnerHistory:
    """
    Counts how often each unordered pair of players has been teammates.

    Attributes
    ----------
    partnerships : Counter of frozenset of str
        Number of rounds each unordered teammate pair has been together.
    """

    partnerships: Counter = field(default_factory=Counter)

    def add_team(self, team: Team) -> None:
        """Record that two players have been teammates."""
        first, second = team
        self.partnerships[frozenset({first, second})] += 1

    def repeated(self) -> Dict[frozenset, int]:
        """Pairs that were teammates more than once."""
        return {pair: n for pair, n in self.partnerships.items() if n > 1}

    def __len__(self) -> int:
        return len(self.partnerships)

    @classmethod
    def from_rounds(cls, rounds: Iterable[Round]) -> "PartnerHistory":
        """Build the history of every team placed in ``rounds``."""
        history = cls()
        for round_data in rounds:
            for team in round_data.teams:
                history.add_team(team)
        return history

    def to_dict(self) -> Dict[str, Any]:
        """Serialize partner history to dictionary."""
        return {
            "partnerships": [
                {"players": sorted(pair), "count": count}
                for pair, count in self.partnerships.items()
            ]
        }
