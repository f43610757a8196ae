"""Tournament management for Americano Pairing.

This package holds the standings engine, result recording helpers and the
Tournament record that ties the schedule and the match history together.
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

from americanopairing.tournament.result_recorder import (
    ResultRecorder,
    group_history_by_round,
    replace_round_results,
    results_for_round,
)
from americanopairing.tournament.standings import rank_players, recalculate_stats
from americanopairing.tournament.tournament import Tournament

__all__ = [
    "Tournament",
    "ResultRecorder",
    "group_history_by_round",
    "rank_players",
    "recalculate_stats",
    "replace_round_results",
    "results_for_round",
]
