"""Individual Americano schedule generation.

Every round splits the roster into two-person teams and puts two teams on
each available court. Teams come from the circle method: the first player
stays fixed while everyone else sits on a ribbon that rotates one place per
round, and the current ordering is folded so that position ``i`` partners
position ``size - 1 - i``. Over ``size - 1`` rounds every pair of players
shares a team exactly once.

With an odd roster a phantom slot is appended; whoever is folded onto it
rests that round.
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


from typing import Any, List, Optional, Sequence

from americanopairing.models.tournament import Match, Round
from americanopairing.type_hints import FoldedRound, PlayerName, Team
from americanopairing.utils import setup_logger
from americanopairing.utils.validation import (
    validate_courts_strict,
    validate_roster_strict,
)

logger = setup_logger(__name__)

# Phantom roster entry for odd player counts. A private object, so it can
# never compare equal to a real player name.
_BYE_SLOT = object()


def expected_round_count(num_players: int) -> int:
    """Number of rounds a full schedule has for ``num_players``.

    ``N - 1`` for an even roster, ``N`` for an odd one.
    """
    return num_players - 1 if num_players % 2 == 0 else num_players


def _fold(current: Sequence[Any]) -> List[tuple]:
    size = len(current)
    return [(current[i], current[size - 1 - i]) for i in range(size // 2)]


def fold_pairings(players: Sequence[PlayerName]) -> List[FoldedRound]:
    """
    Produce the teammate pairs of every round of the circle method.

    This is the 1-factorization the schedule is built from. Pairs are in fold
    order; the pair holding the phantom slot is removed and its real player
    reported as that round's rest.

    Parameters
    ----------
        players: Unique player names; the first one is the fixed anchor.

    Returns
    -------
        One ``(pairs, bye)`` tuple per round. ``bye`` is None for even rosters.
    """
    slots: List[Any] = list(players)
    if len(slots) % 2:
        slots.append(_BYE_SLOT)
    if not slots:
        return []

    size = len(slots)
    anchor = slots[0]
    ribbon = slots[1:]

    rounds: List[FoldedRound] = []
    for _ in range(size - 1):
        bye: Optional[PlayerName] = None
        pairs: List[Team] = []
        for first, second in _fold([anchor] + ribbon):
            if first is _BYE_SLOT:
                bye = second
            elif second is _BYE_SLOT:
                bye = first
            else:
                pairs.append((first, second))
        rounds.append((pairs, bye))

        # rotate right: last ribbon entry moves to the front
        ribbon.insert(0, ribbon.pop())

    return rounds


def _matches_for_round(pairs: List[Team], courts: int) -> List[Match]:
    match_count = min(courts, len(pairs) // 2)
    return [
        Match(court=m + 1, team1=pairs[2 * m], team2=pairs[2 * m + 1])
        for m in range(match_count)
    ]


def generate_schedule(players: Sequence[PlayerName], courts: int) -> List[Round]:
    """
    Generate the full Individual Americano schedule.

    Teams are grouped two at a time in fold order: pair ``2m`` plays pair
    ``2m + 1`` on court ``m + 1``. When a round has more teams than the courts
    can host, or an odd number of teams, the extra teams get no match that
    round. Every match starts at 0-0 and unsubmitted.

    Parameters
    ----------
        players: Unique player names, at least four. Uniqueness is the
            caller's job.
        courts: Number of courts, at least one.

    Returns
    -------
        ``N - 1`` rounds for an even roster, ``N`` rounds for an odd one.

    Raises
    ------
        InvalidRosterException: If fewer than four players are given.
        InvalidCourtCountException: If ``courts`` is not a positive integer.
    """
    roster = validate_roster_strict(players)
    court_count = validate_courts_strict(courts)

    schedule: List[Round] = []
    for index, (pairs, bye) in enumerate(fold_pairings(roster)):
        matches = _matches_for_round(pairs, court_count)
        dropped = len(pairs) - 2 * len(matches)
        if dropped:
            logger.info(
                f"Round {index + 1}: {dropped} team(s) without a court this round"
            )
        schedule.append(Round(round_number=index + 1, matches=matches, bye=bye))

    logger.debug(
        f"Generated {len(schedule)} rounds for {len(roster)} players "
        f"on {court_count} court(s)"
    )
    return schedule
