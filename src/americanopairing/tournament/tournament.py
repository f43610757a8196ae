"""Tournament state for an Individual Americano event.

:class:`Tournament` is the record an application persists between requests:
configuration, roster, the full schedule, the current round and the match
history. Player statistics are always rebuilt from the full history.
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

import time
from typing import Any, Dict, Iterable, List, Optional, Sequence

from americanopairing.constants import (
    DEFAULT_MATCH_DURATION_MINUTES,
    DEFAULT_TOURNAMENT_NAME,
    NOT_STARTED_ROUND,
)
from americanopairing.exceptions import (
    RoundNotFoundException,
    TournamentStateException,
)
from americanopairing.models.player import Player
from americanopairing.models.tournament import (
    MatchResult,
    PartnerHistory,
    Round,
    TournamentConfig,
)
from americanopairing.pairing import generate_schedule
from americanopairing.tournament.result_recorder import ResultRecorder
from americanopairing.tournament.standings import rank_players, recalculate_stats
from americanopairing.type_hints import Scores
from americanopairing.utils import setup_logger
from americanopairing.utils.validation import (
    clean_player_names,
    validate_courts_strict,
    validate_roster_strict,
)

logger = setup_logger(__name__)


class Tournament:
    """Main tournament management class.

    The schedule is generated once, when the tournament is created. After
    that, each submitted or corrected round replaces that round's entries
    in the match history and the roster statistics are recomputed from the
    whole history.
    """

    def __init__(
        self,
        config: TournamentConfig,
        players: List[Player],
        rounds: List[Round],
        current_round: int = NOT_STARTED_ROUND,
        match_history: Optional[List[MatchResult]] = None,
        created_at: Optional[int] = None,
    ) -> None:
        """Initialize a tournament from existing state.

        Use :meth:`create` to start a new one.

        Args
        ----
        config: Tournament configuration
        players: Roster with statistics
        rounds: Full schedule
        current_round: Round in play, 0 if not started
        match_history: Every recorded result
        created_at: Creation time in epoch milliseconds
        """
        self.config = config
        self.players = players
        self.rounds = rounds
        self.current_round = current_round
        self.match_history: List[MatchResult] = list(match_history or [])
        self.created_at = (
            created_at if created_at is not None else int(time.time() * 1000)
        )
        self.result_recorder = ResultRecorder()

    @classmethod
    def create(
        cls,
        player_names: Iterable[str],
        courts: int,
        name: str = DEFAULT_TOURNAMENT_NAME,
        match_duration_minutes: int = DEFAULT_MATCH_DURATION_MINUTES,
        ranking_order: Optional[List[str]] = None,
    ) -> "Tournament":
        """Create a tournament and generate its whole schedule.

        Names are trimmed; blank and repeated names are dropped before the
        roster size is checked.

        Raises:
            InvalidRosterException: If fewer than four distinct players remain
            InvalidCourtCountException: If ``courts`` is not a positive integer
        """
        roster = validate_roster_strict(clean_player_names(player_names))
        court_count = validate_courts_strict(courts)

        config_kwargs: Dict[str, Any] = {}
        if ranking_order is not None:
            config_kwargs["ranking_order"] = list(ranking_order)
        config = TournamentConfig(
            name=name,
            courts=court_count,
            match_duration_minutes=match_duration_minutes,
            **config_kwargs,
        )

        tournament = cls(
            config=config,
            players=[Player(name=player_name) for player_name in roster],
            rounds=generate_schedule(roster, court_count),
        )
        logger.info(
            f"Created tournament {config.name!r}: {len(roster)} players, "
            f"{court_count} court(s), {tournament.total_rounds} rounds"
        )
        return tournament

    # ========== Properties ==========

    @property
    def name(self) -> str:
        """Get tournament name."""
        return self.config.name

    @property
    def courts(self) -> int:
        """Get number of courts."""
        return self.config.courts

    @property
    def total_rounds(self) -> int:
        """Number of rounds in the schedule."""
        return len(self.rounds)

    @property
    def is_started(self) -> bool:
        return self.current_round != NOT_STARTED_ROUND

    @property
    def is_finished(self) -> bool:
        """True once the last round is in play and fully submitted."""
        return (
            bool(self.rounds)
            and self.current_round == self.total_rounds
            and self.rounds[-1].is_submitted
        )

    @property
    def player_names(self) -> List[str]:
        return [p.name for p in self.players]

    # ========== Round Management ==========

    def get_round(self, round_number: int) -> Round:
        """Get data for a specific round.

        Args:
            round_number: The round number (1-indexed)

        Raises:
            RoundNotFoundException: If the round is not in the schedule
        """
        if 1 <= round_number <= len(self.rounds):
            return self.rounds[round_number - 1]
        raise RoundNotFoundException(
            f"Round {round_number} does not exist "
            f"(schedule has {len(self.rounds)} rounds)"
        )

    def get_current_round(self) -> Optional[Round]:
        """The round in play, or None before the tournament starts."""
        if not self.is_started:
            return None
        return self.get_round(self.current_round)

    def start(self) -> Round:
        """Move to round 1."""
        if self.is_started:
            raise TournamentStateException("Tournament has already started")
        self.current_round = 1
        logger.info(f"Tournament {self.name!r} started")
        return self.rounds[0]

    def advance_round(self) -> Round:
        """Move to the next round.

        Raises:
            TournamentStateException: Before the start or after the last round
        """
        if not self.is_started:
            raise TournamentStateException("Tournament has not started yet")
        if self.current_round >= self.total_rounds:
            raise TournamentStateException(
                f"Round {self.current_round} is the last round"
            )
        self.current_round += 1
        logger.info(f"Advanced to round {self.current_round}")
        return self.rounds[self.current_round - 1]

    # ========== Results ==========

    def submit_round_scores(
        self, scores: Sequence[Scores], round_number: Optional[int] = None
    ) -> List[Player]:
        """Record scores for a round and recompute the standings.

        Used both for the first submission of a round and for corrections:
        earlier entries for the round are replaced, never added to.

        Args:
            scores: One ``(score1, score2)`` per match, in court order
            round_number: Round to record; defaults to the current round

        Returns:
            The recomputed roster

        Raises:
            TournamentStateException: Before the start, or for a round that
                has not been reached yet
            RoundNotFoundException: If the round does not exist
            InvalidResultException: If the scores do not fit the round
        """
        if not self.is_started:
            raise TournamentStateException("Tournament has not started yet")
        if round_number is None:
            round_number = self.current_round
        round_data = self.get_round(round_number)
        if round_number > self.current_round:
            raise TournamentStateException(
                f"Round {round_number} has not been reached "
                f"(current round is {self.current_round})"
            )

        self.match_history = self.result_recorder.record_round(
            round_data, scores, self.match_history
        )
        return self.recalculate()

    def replace_history(self, history: Iterable[MatchResult]) -> List[Player]:
        """Replace the whole match history and recompute the standings.

        Match scores in the schedule are brought in line with the new history.
        """
        self.match_history = list(history)
        self._sync_rounds_with_history()
        return self.recalculate()

    def _sync_rounds_with_history(self) -> None:
        for round_data in self.rounds:
            for match in round_data.matches:
                match.score1 = 0
                match.score2 = 0
                match.submitted = False

        for entry in self.match_history:
            if not 1 <= entry.round_number <= len(self.rounds):
                logger.warning(
                    f"History entry for unknown round {entry.round_number} "
                    "kept in history but not shown in the schedule"
                )
                continue
            match = self.rounds[entry.round_number - 1].get_match(entry.court)
            if match is None:
                logger.warning(
                    f"History entry for unknown court {entry.court} in round "
                    f"{entry.round_number} kept in history but not shown "
                    "in the schedule"
                )
                continue
            match.record_score(entry.score1, entry.score2)

    def recalculate(self) -> List[Player]:
        """Rebuild player statistics from the full match history."""
        self.players = recalculate_stats(self.match_history, self.players)
        return self.players

    def standings(self) -> List[Player]:
        """Players in leaderboard order, best first."""
        return rank_players(self.players, self.config.ranking_order)

    def partner_history(self) -> PartnerHistory:
        """Teammate counts over every scheduled match."""
        return PartnerHistory.from_rounds(self.rounds)

    # ========== Serialization ==========

    def to_dict(self) -> Dict[str, Any]:
        """Serialize tournament to dictionary."""
        return {
            "config": self.config.to_dict(),
            "players": [p.to_dict() for p in self.players],
            "rounds": [r.to_dict() for r in self.rounds],
            "currentRound": self.current_round,
            "matchHistory": [entry.to_dict() for entry in self.match_history],
            "createdAt": self.created_at,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Tournament":
        """Deserialize tournament from dictionary."""
        return cls(
            config=TournamentConfig.from_dict(data.get("config", {})),
            players=[Player.from_dict(p) for p in data.get("players", [])],
            rounds=[Round.from_dict(r) for r in data.get("rounds", [])],
            current_round=data.get("currentRound", NOT_STARTED_ROUND),
            match_history=[
                MatchResult.from_dict(entry) for entry in data.get("matchHistory", [])
            ],
            created_at=data.get("createdAt"),
        )
