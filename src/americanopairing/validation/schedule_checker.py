"""Schedule checker - structural validation of Americano schedules.

This module checks a generated schedule against the properties an Individual
Americano event relies on:

- S1: no player appears twice in a round, and the resting player plays no match
- S2: court numbers run 1, 2, ... and never exceed the available courts
- S3: no two players are teammates more than once
- S4: odd rosters rest every player exactly once, even rosters rest nobody
- S5: every player is placed each round (quality; fails when courts are scarce)
- S6: the schedule has the expected number of rounds, numbered from 1
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


from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Sequence

from americanopairing.models.tournament import PartnerHistory, Round
from americanopairing.pairing import expected_round_count
from americanopairing.utils import setup_logger

logger = setup_logger(__name__)


class CriterionStatus(Enum):
    """Status of a schedule criterion check."""

    COMPLIANT = "COMPLIANT"
    VIOLATION = "VIOLATION"
    NOT_APPLICABLE = "NOT_APPLICABLE"


class ViolationType(Enum):
    """Types of schedule criterion violations."""

    ABSOLUTE = "ABSOLUTE"  # S1-S4, S6: the schedule is broken
    QUALITY = "QUALITY"  # S5: allowed, but someone sits out


@dataclass
class CriterionResult:
    """Result of validating a single schedule criterion."""

    criterion: str
    status: CriterionStatus
    violation_type: Optional[ViolationType] = None
    description: str = ""
    details: Dict[str, object] = field(default_factory=dict)

    @property
    def criterion_id(self) -> str:
        """Extract criterion ID from criterion string."""
        return self.criterion.split(":")[0].strip()

    @property
    def message(self) -> str:
        """Get the violation message."""
        return self.description


@dataclass
class ValidationReport:
    """Complete validation report for a schedule."""

    total_criteria: int
    compliant_count: int
    violations: List[CriterionResult]
    overall_status: CriterionStatus
    summary: str
    quality_warnings: List[CriterionResult] = field(default_factory=list)
    criteria_results: List[CriterionResult] = field(default_factory=list)

    @property
    def compliance_percentage(self) -> float:
        """Calculate compliance percentage."""
        if self.total_criteria == 0:
            return 100.0
        return (self.compliant_count / self.total_criteria) * 100.0

    @property
    def is_valid(self) -> bool:
        return self.overall_status == CriterionStatus.COMPLIANT


def _compliant(criterion: str, description: str) -> CriterionResult:
    return CriterionResult(
        criterion=criterion,
        status=CriterionStatus.COMPLIANT,
        description=description,
    )


class RoundChecker:
    """Validates the criteria that apply to a single round (S1, S2, S5)."""

    def check_s1_disjoint_players(
        self, round_data: Round, roster: Sequence[str]
    ) -> CriterionResult:
        """S1: Each player is in at most one match, and the bye plays none."""
        placed = list(round_data.players)
        if round_data.bye is not None:
            placed.append(round_data.bye)

        duplicates = sorted(name for name, n in Counter(placed).items() if n > 1)
        unknown = sorted(set(placed) - set(roster))
        if duplicates or unknown:
            problems = []
            if duplicates:
                problems.append(f"placed twice: {', '.join(duplicates)}")
            if unknown:
                problems.append(f"not on the roster: {', '.join(unknown)}")
            return CriterionResult(
                criterion="S1",
                status=CriterionStatus.VIOLATION,
                violation_type=ViolationType.ABSOLUTE,
                description=f"Round {round_data.round_number}: {'; '.join(problems)}",
                details={
                    "round": round_data.round_number,
                    "duplicates": duplicates,
                    "unknown": unknown,
                },
            )
        return _compliant(
            "S1", f"Round {round_data.round_number}: players are disjoint"
        )

    def check_s2_courts(self, round_data: Round, courts: int) -> CriterionResult:
        """S2: Courts are numbered 1..M in order, with M <= available courts."""
        numbers = [match.court for match in round_data.matches]
        expected = list(range(1, len(numbers) + 1))
        if numbers != expected or len(numbers) > courts:
            return CriterionResult(
                criterion="S2",
                status=CriterionStatus.VIOLATION,
                violation_type=ViolationType.ABSOLUTE,
                description=(
                    f"Round {round_data.round_number}: courts {numbers} "
                    f"(expected {expected}, at most {courts})"
                ),
                details={"round": round_data.round_number, "courts": numbers},
            )
        return _compliant(
            "S2", f"Round {round_data.round_number}: {len(numbers)} court(s) in use"
        )

    def check_s5_everyone_placed(
        self, round_data: Round, roster: Sequence[str]
    ) -> CriterionResult:
        """S5: Every roster player plays or rests this round."""
        seen = set(round_data.players)
        if round_data.bye is not None:
            seen.add(round_data.bye)
        idle = [name for name in roster if name not in seen]
        if idle:
            return CriterionResult(
                criterion="S5",
                status=CriterionStatus.VIOLATION,
                violation_type=ViolationType.QUALITY,
                description=(
                    f"Round {round_data.round_number}: no court for "
                    f"{', '.join(idle)}"
                ),
                details={"round": round_data.round_number, "idle": idle},
            )
        return _compliant(
            "S5", f"Round {round_data.round_number}: every player placed"
        )


class ScheduleChecker:
    """Validates the criteria that span the whole schedule (S3, S4, S6)."""

    def check_s3_no_repeat_partners(self, rounds: Sequence[Round]) -> CriterionResult:
        """S3: No two players are teammates more than once."""
        repeated = PartnerHistory.from_rounds(rounds).repeated()
        if repeated:
            pairs = sorted(" & ".join(sorted(pair)) for pair in repeated)
            return CriterionResult(
                criterion="S3",
                status=CriterionStatus.VIOLATION,
                violation_type=ViolationType.ABSOLUTE,
                description=f"Repeat partners: {', '.join(pairs)}",
                details={"pairs": pairs},
            )
        return _compliant("S3", "No repeat partners")

    def check_s4_byes(
        self, rounds: Sequence[Round], roster: Sequence[str]
    ) -> CriterionResult:
        """S4: Odd rosters rest everyone once, one per round; even ones never."""
        byes = [r.bye for r in rounds if r.bye is not None]

        if len(roster) % 2 == 0:
            if byes:
                return CriterionResult(
                    criterion="S4",
                    status=CriterionStatus.VIOLATION,
                    violation_type=ViolationType.ABSOLUTE,
                    description=f"Even roster with byes: {', '.join(byes)}",
                    details={"byes": byes},
                )
            return CriterionResult(
                criterion="S4",
                status=CriterionStatus.NOT_APPLICABLE,
                description="Even roster, no byes needed",
            )

        counts = Counter(byes)
        missing_rounds = [r.round_number for r in rounds if r.bye is None]
        wrong = sorted(name for name in roster if counts.get(name, 0) != 1)
        if missing_rounds or wrong:
            return CriterionResult(
                criterion="S4",
                status=CriterionStatus.VIOLATION,
                violation_type=ViolationType.ABSOLUTE,
                description=(
                    f"Bye rotation broken: rounds without bye {missing_rounds}, "
                    f"players not resting exactly once {wrong}"
                ),
                details={"rounds_without_bye": missing_rounds, "players": wrong},
            )
        return _compliant("S4", "Every player rests exactly once")

    def check_s6_round_count(
        self, rounds: Sequence[Round], roster: Sequence[str]
    ) -> CriterionResult:
        """S6: The schedule has N-1 (even) or N (odd) rounds numbered from 1."""
        expected = expected_round_count(len(roster))
        numbers = [r.round_number for r in rounds]
        if numbers != list(range(1, expected + 1)):
            return CriterionResult(
                criterion="S6",
                status=CriterionStatus.VIOLATION,
                violation_type=ViolationType.ABSOLUTE,
                description=(
                    f"Expected rounds 1..{expected}, got {len(numbers)} round(s)"
                ),
                details={"expected": expected, "rounds": numbers},
            )
        return _compliant("S6", f"{expected} rounds, numbered in order")


class ScheduleValidator:
    """Main schedule validator."""

    def __init__(self):
        self.round_checker = RoundChecker()
        self.schedule_checker = ScheduleChecker()

    def validate_round(
        self, round_data: Round, roster: Sequence[str], courts: int
    ) -> List[CriterionResult]:
        """Run the per-round criteria for one round."""
        return [
            self.round_checker.check_s1_disjoint_players(round_data, roster),
            self.round_checker.check_s2_courts(round_data, courts),
            self.round_checker.check_s5_everyone_placed(round_data, roster),
        ]

    def validate_schedule(
        self, rounds: Sequence[Round], roster: Sequence[str], courts: int
    ) -> ValidationReport:
        """Validate an entire schedule."""
        logger.info(
            "Starting schedule validation: %s rounds, %s players, %s court(s)",
            len(rounds),
            len(roster),
            courts,
        )

        all_results: List[CriterionResult] = []
        for round_data in rounds:
            all_results.extend(self.validate_round(round_data, roster, courts))
        all_results.extend(
            [
                self.schedule_checker.check_s3_no_repeat_partners(rounds),
                self.schedule_checker.check_s4_byes(rounds, roster),
                self.schedule_checker.check_s6_round_count(rounds, roster),
            ]
        )

        applicable = [
            r for r in all_results if r.status != CriterionStatus.NOT_APPLICABLE
        ]
        compliant_count = sum(
            1 for r in applicable if r.status == CriterionStatus.COMPLIANT
        )
        violations = [
            r
            for r in applicable
            if r.status == CriterionStatus.VIOLATION
            and r.violation_type == ViolationType.ABSOLUTE
        ]
        quality_warnings = [
            r
            for r in applicable
            if r.status == CriterionStatus.VIOLATION
            and r.violation_type == ViolationType.QUALITY
        ]

        overall_status = (
            CriterionStatus.VIOLATION if violations else CriterionStatus.COMPLIANT
        )
        if violations or quality_warnings:
            ids = sorted({r.criterion_id for r in violations + quality_warnings})
            summary = (
                f"Schedule validation complete - {len(violations)} "
                f"absolute violations, {len(quality_warnings)} quality warnings "
                f"({' '.join(ids)})"
            )
        else:
            summary = "Schedule validation complete"

        logger.info("Schedule validation complete: %s", summary)

        return ValidationReport(
            total_criteria=len(applicable),
            compliant_count=compliant_count,
            violations=violations,
            quality_warnings=quality_warnings,
            overall_status=overall_status,
            summary=summary,
            criteria_results=all_results,
        )


def create_schedule_validator() -> ScheduleValidator:
    """Create and configure schedule validator instance."""
    return ScheduleValidator()


def validate_schedule(
    rounds: Sequence[Round], roster: Sequence[str], courts: int
) -> ValidationReport:
    """Quick validation function for a generated schedule."""
    return create_schedule_validator().validate_schedule(rounds, roster, courts)
