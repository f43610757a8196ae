"""Result recording for Americano tournaments.

This module turns the scores entered for a round into match history entries
and keeps the history free of stale entries when a round is re-submitted.
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

from typing import Dict, Iterable, List, Sequence

from americanopairing.exceptions import InvalidResultException
from americanopairing.models.tournament import MatchResult, Round
from americanopairing.type_hints import Scores
from americanopairing.utils import setup_logger
from americanopairing.utils.validation import validate_score

logger = setup_logger(__name__)


def _checked_scores(round_data: Round, scores: Sequence[Scores]) -> List[Scores]:
    if len(scores) != len(round_data.matches):
        raise InvalidResultException(
            f"Round {round_data.round_number} has {len(round_data.matches)} "
            f"match(es) but {len(scores)} score(s) were given"
        )

    checked: List[Scores] = []
    for match, pair in zip(round_data.matches, scores):
        if not isinstance(pair, (list, tuple)) or len(pair) != 2:
            raise InvalidResultException(
                f"Court {match.court}: expected two scores, got {pair!r}"
            )
        values = []
        for value in pair:
            result = validate_score(value)
            if not result:
                raise InvalidResultException(
                    f"Round {round_data.round_number}, court {match.court}: "
                    f"{result.error_message}"
                )
            values.append(result.sanitized_value)
        checked.append((values[0], values[1]))
    return checked


def results_for_round(round_data: Round, scores: Sequence[Scores]) -> List[MatchResult]:
    """Build history entries for a round from the entered scores.

    Args:
        round_data: The scheduled round
        scores: One ``(score1, score2)`` per match, in court order

    Returns:
        One MatchResult per match, carrying the scheduled teams

    Raises:
        InvalidResultException: If the number of scores does not match the
            number of matches, or a score is not a non-negative integer
    """
    checked = _checked_scores(round_data, scores)
    return [
        MatchResult(
            round_number=round_data.round_number,
            court=match.court,
            team1=match.team1,
            team2=match.team2,
            score1=score1,
            score2=score2,
        )
        for match, (score1, score2) in zip(round_data.matches, checked)
    ]


def replace_round_results(
    history: Iterable[MatchResult],
    round_number: int,
    new_entries: Iterable[MatchResult],
) -> List[MatchResult]:
    """Return a new history with one round's entries swapped for ``new_entries``.

    Entries of other rounds keep their order; the new ones go at the end.
    The input history is not modified.
    """
    kept = [entry for entry in history if entry.round_number != round_number]
    return kept + list(new_entries)


def group_history_by_round(
    history: Iterable[MatchResult],
) -> Dict[int, List[MatchResult]]:
    """Group history entries by round, most recent round first."""
    groups: Dict[int, List[MatchResult]] = {}
    for entry in history:
        groups.setdefault(entry.round_number, []).append(entry)
    return {number: groups[number] for number in sorted(groups, reverse=True)}


class ResultRecorder:
    """Records round scores onto the schedule and into the match history.

    This class is responsible for:
    - Validating entered scores against the round's matches
    - Marking the round's matches as submitted
    - Replacing any earlier entries for the same round in the history
    """

    def record_round(
        self,
        round_data: Round,
        scores: Sequence[Scores],
        history: Iterable[MatchResult],
    ) -> List[MatchResult]:
        """Record scores for every match of a round.

        Args:
            round_data: The round to record; its matches are updated in place
            scores: One ``(score1, score2)`` per match, in court order
            history: The current full match history

        Returns:
            The corrected full history
        """
        if round_data.is_submitted:
            logger.info(
                f"Round {round_data.round_number} already has results, replacing them"
            )

        entries = results_for_round(round_data, scores)
        for match, entry in zip(round_data.matches, entries):
            match.record_score(entry.score1, entry.score2)

        logger.debug(
            f"Recorded {len(entries)} result(s) for round {round_data.round_number}"
        )
        return replace_round_results(history, round_data.round_number, entries)
