"""Random Tournament Generator (RTG) - Internal testing system for Americano schedules.

This module plays out complete random tournaments: it creates a roster,
generates the schedule, submits random scores round by round (optionally
correcting earlier rounds) and checks the schedule with the schedule checker.
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

import json
import random
from collections import Counter
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Tuple

from americanopairing.constants import DEFAULT_COURTS
from americanopairing.models.tournament import Round
from americanopairing.tournament import Tournament
from americanopairing.type_hints import Scores
from americanopairing.utils import setup_logger
from americanopairing.validation import create_schedule_validator

logger = setup_logger(__name__)


class ScorePattern(Enum):
    """Score generation patterns for simulated matches."""

    FIXED_TOTAL = "fixed_total"  # both scores add up to points_per_match
    RANDOM = "random"  # each side independently 0..points_per_match
    BLOWOUT = "blowout"  # one side takes nearly everything


@dataclass
class RTGConfig:
    """Configuration for Random Tournament Generator."""

    num_players: int
    courts: int = DEFAULT_COURTS
    score_pattern: ScorePattern = ScorePattern.FIXED_TOTAL
    points_per_match: int = 24
    draw_percentage: int = 10
    edit_rate: float = 0.0
    seed: Optional[int] = None
    name_prefix: str = "Player"
    validate_schedule: bool = True


class PlayerNameFactory:
    """Factory for roster names."""

    def __init__(self, config: RTGConfig):
        self.config = config

    def create_names(self) -> List[str]:
        """Create ``num_players`` unique names in roster order."""
        names = [
            f"{self.config.name_prefix}-{number:03d}"
            for number in range(1, self.config.num_players + 1)
        ]
        logger.info("Created %s player names", len(names))
        return names


class ScoreSimulator:
    """Simulates match scores."""

    def __init__(self, config: RTGConfig, rng: random.Random):
        self.config = config
        self.random = rng

    def simulate_round(self, round_data: Round) -> List[Scores]:
        """One ``(score1, score2)`` per match of the round."""
        return [self.simulate_match() for _ in round_data.matches]

    def simulate_match(self) -> Scores:
        total = self.config.points_per_match
        if (
            total % 2 == 0
            and self.config.score_pattern != ScorePattern.BLOWOUT
            and self.random.randint(1, 100) <= self.config.draw_percentage
        ):
            return total // 2, total // 2

        if self.config.score_pattern == ScorePattern.FIXED_TOTAL:
            score1 = self.random.randint(0, total)
            return score1, total - score1
        if self.config.score_pattern == ScorePattern.BLOWOUT:
            loser = self.random.randint(0, max(0, total // 6))
            if self.random.random() < 0.5:
                return total - loser, loser
            return loser, total - loser
        return self.random.randint(0, total), self.random.randint(0, total)


class RandomTournamentGenerator:
    """Main tournament generator orchestrating roster, schedule and results."""

    def __init__(self, config: RTGConfig):
        self.config = config
        self.random = (
            random.Random(config.seed) if config.seed is not None else random.Random()
        )
        self.name_factory = PlayerNameFactory(config)
        self.score_simulator = ScoreSimulator(config, self.random)

    def generate_complete_tournament(self) -> Dict:
        """Play a complete tournament and return it with its checks."""
        logger.info(
            "Generating tournament: %s players, %s court(s)",
            self.config.num_players,
            self.config.courts,
        )

        tournament = Tournament.create(
            self.name_factory.create_names(),
            self.config.courts,
            name=f"RTG {self.config.num_players}p/{self.config.courts}c",
        )
        edits: List[Tuple[int, int]] = []

        tournament.start()
        while True:
            round_data = tournament.get_current_round()
            tournament.submit_round_scores(
                self.score_simulator.simulate_round(round_data)
            )
            edited = self._maybe_edit_round(tournament)
            if edited is not None:
                edits.append((tournament.current_round, edited))
            if tournament.current_round == tournament.total_rounds:
                break
            tournament.advance_round()

        tournament_data = {
            "config": self.config,
            "tournament": tournament,
            "edits": edits,
        }

        if self.config.validate_schedule:
            report = create_schedule_validator().validate_schedule(
                tournament.rounds, tournament.player_names, tournament.courts
            )
            tournament_data["schedule_report"] = {
                "summary": report.summary,
                "compliance_percentage": report.compliance_percentage,
                "warnings": summarize_schedule_warnings(report),
                "absolute_violations": [v.criterion for v in report.violations],
            }

        logger.info("Tournament generation complete")
        return tournament_data

    def _maybe_edit_round(self, tournament: Tournament) -> Optional[int]:
        """Correct the scores of a random round already played."""
        if self.random.random() >= self.config.edit_rate:
            return None
        round_number = self.random.randint(1, tournament.current_round)
        round_data = tournament.get_round(round_number)
        tournament.submit_round_scores(
            self.score_simulator.simulate_round(round_data), round_number
        )
        logger.debug("Corrected scores of round %s", round_number)
        return round_number

    def export_json_format(self, tournament_data: Dict) -> str:
        """Export generated tournament as JSON."""
        payload = tournament_data["tournament"].to_dict()
        payload["standings"] = [
            p.to_dict() for p in tournament_data["tournament"].standings()
        ]
        payload["partnerHistory"] = (
            tournament_data["tournament"].partner_history().to_dict()
        )
        if "schedule_report" in tournament_data:
            payload["scheduleReport"] = tournament_data["schedule_report"]
        return json.dumps(payload, indent=2)


def summarize_schedule_warnings(report) -> Dict[str, int]:
    """Summarize schedule quality warnings by criterion."""
    return dict(Counter([warning.criterion for warning in report.quality_warnings]))


def create_rtg_generator(config: RTGConfig) -> RandomTournamentGenerator:
    """Create RTG tournament generator with given configuration."""
    return RandomTournamentGenerator(config)


def create_small_tournament(
    num_players: int = 8, seed: Optional[int] = None
) -> RandomTournamentGenerator:
    """Create small tournament for testing: one court per four players."""
    config = RTGConfig(
        num_players=num_players,
        courts=max(1, num_players // 4),
        seed=seed,
    )
    return create_rtg_generator(config)


def create_club_night_tournament(
    num_players: int = 13, seed: Optional[int] = None
) -> RandomTournamentGenerator:
    """Create an odd-sized evening with too few courts and score corrections."""
    config = RTGConfig(
        num_players=num_players,
        courts=2,
        score_pattern=ScorePattern.RANDOM,
        points_per_match=11,
        edit_rate=0.3,
        seed=seed,
    )
    return create_rtg_generator(config)
