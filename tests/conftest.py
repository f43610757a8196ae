import pytest

from americanopairing.models import MatchResult, Player


@pytest.fixture
def four_players():
    return ["A", "B", "C", "D"]


@pytest.fixture
def roster(four_players):
    return [Player(name=name) for name in four_players]


@pytest.fixture
def first_round_result():
    return MatchResult(
        round_number=1,
        court=1,
        team1=("A", "D"),
        team2=("B", "C"),
        score1=6,
        score2=4,
    )
