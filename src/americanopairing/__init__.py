"""Americano Pairing - Individual Americano scheduling and standings.

The two core operations are pure functions:

- :func:`generate_schedule` builds every round of an event up front
- :func:`recalculate_stats` folds the full match history into player statistics

:class:`Tournament` keeps the state an application persists between calls.
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

__version__ = "0.1.0"

from americanopairing.exceptions import AmericanoPairingException
from americanopairing.models import (
    Match,
    MatchResult,
    PartnerHistory,
    Player,
    Round,
    TournamentConfig,
)
from americanopairing.pairing import (
    expected_round_count,
    fold_pairings,
    generate_schedule,
)
from americanopairing.tournament import (
    Tournament,
    rank_players,
    recalculate_stats,
    replace_round_results,
    results_for_round,
)

__all__ = [
    "__version__",
    "AmericanoPairingException",
    "Match",
    "MatchResult",
    "PartnerHistory",
    "Player",
    "Round",
    "Tournament",
    "TournamentConfig",
    "expected_round_count",
    "fold_pairings",
    "generate_schedule",
    "rank_players",
    "recalculate_stats",
    "replace_round_results",
    "results_for_round",
]
