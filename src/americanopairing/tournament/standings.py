"""Standings calculation for Americano tournaments.

Player statistics are a pure fold of the match history: every call starts
from a zeroed copy of the roster and replays the full history. Editing a
round means replacing its history entries and calling
:func:`recalculate_stats` again; nothing is ever patched incrementally.
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

from dataclasses import replace
from typing import Callable, Dict, Iterable, List, Optional, Sequence

from americanopairing.constants import (
    DEFAULT_RANKING_ORDER,
    RANK_FEWEST_LOSSES,
    RANK_GAME_DIFFERENCE,
    RANK_GAMES_FOR,
    RANK_WINS,
)
from americanopairing.exceptions import InvalidConfigurationException
from americanopairing.models.player import Player
from americanopairing.models.tournament import MatchResult
from americanopairing.type_hints import Team
from americanopairing.utils import setup_logger

logger = setup_logger(__name__)

_RANKING_KEYS: Dict[str, Callable[[Player], int]] = {
    RANK_WINS: lambda p: p.wins,
    RANK_GAME_DIFFERENCE: lambda p: p.game_difference,
    RANK_GAMES_FOR: lambda p: p.games_for,
    RANK_FEWEST_LOSSES: lambda p: -p.losses,
}


def _credit_team(
    by_name: Dict[str, Player],
    team: Team,
    scored: int,
    conceded: int,
    won: Optional[bool],
) -> None:
    for name in team:
        player = by_name.get(name)
        if player is None:
            # unknown names contribute nothing
            logger.debug(f"Ignoring result for unknown player {name!r}")
            continue
        player.games_for += scored
        player.games_against += conceded
        if won is True:
            player.wins += 1
        elif won is False:
            player.losses += 1


def recalculate_stats(
    history: Iterable[MatchResult], roster: Sequence[Player]
) -> List[Player]:
    """Recompute every player's statistics from the full match history.

    A draw adds games to both sides but no win or loss to anyone. History
    entries are not deduplicated; callers replace a round's stale entries
    before recomputing.

    Args:
        history: Every recorded result, in any order
        roster: Players to compute statistics for; their current numbers
            are ignored and the objects are left untouched

    Returns:
        New Player objects in roster order, names preserved
    """
    updated = [
        replace(p, wins=0, losses=0, games_for=0, games_against=0) for p in roster
    ]
    by_name: Dict[str, Player] = {}
    for player in updated:
        # the first player with a name takes that name's results
        by_name.setdefault(player.name, player)

    for entry in history:
        if entry.is_draw:
            team1_won = None
        else:
            team1_won = entry.score1 > entry.score2
        _credit_team(by_name, entry.team1, entry.score1, entry.score2, team1_won)
        _credit_team(
            by_name,
            entry.team2,
            entry.score2,
            entry.score1,
            None if team1_won is None else not team1_won,
        )

    return updated


def rank_players(
    players: Iterable[Player], order: Optional[Sequence[str]] = None
) -> List[Player]:
    """Sort players into leaderboard order, best first.

    Players equal on every criterion keep their relative roster order.

    Args:
        players: Players with up-to-date statistics
        order: Ranking criteria in priority order; defaults to wins, then
            game difference, then games won

    Returns:
        A new list of the same Player objects

    Raises:
        InvalidConfigurationException: If ``order`` names an unknown criterion
    """
    order = list(DEFAULT_RANKING_ORDER if order is None else order)
    unknown = [key for key in order if key not in _RANKING_KEYS]
    if unknown:
        raise InvalidConfigurationException(
            f"Unknown ranking criteria: {', '.join(unknown)}"
        )

    key_funcs = [_RANKING_KEYS[key] for key in order]
    return sorted(
        players,
        key=lambda p: tuple(func(p) for func in key_funcs),
        reverse=True,
    )
