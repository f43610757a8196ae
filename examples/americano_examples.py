"""Example script running an Americano evening with Americano Pairing.

This script shows how to build a schedule, enter scores, correct a round
and read the leaderboard programmatically, and how to drive the testing CLI.
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

import sys
from pathlib import Path

# Add src to path for development
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from americanopairing.pairing import generate_schedule
from americanopairing.tournament import Tournament
from americanopairing.validation import validate_schedule


def print_round(round_data):
    print(f"Round {round_data.round_number}:")
    for match in round_data.matches:
        print(
            f"  Court {match.court}: {' & '.join(match.team1)} "
            f"vs {' & '.join(match.team2)}"
        )
    if round_data.bye:
        print(f"  Resting: {round_data.bye}")


def example_schedule_only():
    """Example: Print a schedule and check it."""

    print("\n" + "=" * 70)
    print("EXAMPLE 1: Schedule for 9 players on 2 courts")
    print("=" * 70 + "\n")

    roster = ["Ana", "Bo", "Cy", "Dee", "Eli", "Fay", "Gus", "Hal", "Ivy"]
    rounds = generate_schedule(roster, 2)
    for round_data in rounds:
        print_round(round_data)

    report = validate_schedule(rounds, roster, 2)
    print(f"\n{report.summary} ({report.compliance_percentage:.1f}% compliant)")


def example_club_evening():
    """Example: Play a short evening, including a score correction."""

    print("\n" + "=" * 70)
    print("EXAMPLE 2: Scores, a correction and the leaderboard")
    print("=" * 70 + "\n")

    tournament = Tournament.create(
        ["Ana", "Bo", "Cy", "Dee", "Eli"], courts=1, name="Thursday Padel"
    )
    tournament.start()
    print_round(tournament.get_current_round())
    tournament.submit_round_scores([(16, 8)])

    tournament.advance_round()
    print_round(tournament.get_current_round())
    tournament.submit_round_scores([(11, 13)])

    # Round 1 was entered the wrong way round
    tournament.submit_round_scores([(8, 16)], round_number=1)

    print("\nLeaderboard:")
    for rank, player in enumerate(tournament.standings(), start=1):
        print(
            f"  {rank}. {player.name:<5} W{player.wins} L{player.losses} "
            f"{player.games_for}-{player.games_against} ({player.game_difference:+d})"
        )


def example_cli_usage():
    """Example: Show CLI usage examples."""

    print("\n" + "=" * 70)
    print("EXAMPLE 3: Command-Line Interface Usage")
    print("=" * 70 + "\n")

    print("After installing the package with pip install -e ., you can use:")
    print("\n1. Simulate a 12 player evening on 3 courts:")
    print("   $ americano-test generate --players 12 --courts 3")

    print("\n2. Too few courts, with random corrections of earlier rounds:")
    print("   $ americano-test generate --players 13 --courts 2 --edit-rate 0.3")

    print("\n3. Save and re-check a tournament:")
    print("   $ americano-test generate --players 9 --seed 42 --output evening")
    print("   $ americano-test validate --file evening.json --detailed")

    print("\n" + "=" * 70 + "\n")


def main():
    """Run all examples."""
    example_schedule_only()
    example_club_evening()
    example_cli_usage()


if __name__ == "__main__":
    main()
