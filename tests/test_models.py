import pytest

from americanopairing.exceptions import InvalidConfigurationException
from americanopairing.models import (
    Match,
    MatchResult,
    PartnerHistory,
    Player,
    Round,
    TournamentConfig,
)


def test_player_game_difference():
    player = Player("A", wins=2, losses=1, games_for=15, games_against=19)
    assert player.game_difference == -4


def test_player_from_dict_defaults_missing_stats():
    assert Player.from_dict({"name": "A"}) == Player("A")


def test_match_record_score():
    match = Match(2, ("A", "B"), ("C", "D"))
    assert match.players == ("A", "B", "C", "D")
    assert not match.submitted

    match.record_score(3, 6)

    assert match.submitted
    assert (match.score1, match.score2) == (3, 6)


def test_match_from_dict_restores_tuples():
    match = Match(1, ("A", "B"), ("C", "D"), 6, 4, True)
    restored = Match.from_dict(match.to_dict())
    assert restored == match
    assert isinstance(restored.team1, tuple)


def test_match_result_draw():
    assert MatchResult(1, 1, ("A", "B"), ("C", "D"), 5, 5).is_draw
    assert not MatchResult(1, 1, ("A", "B"), ("C", "D"), 6, 4).is_draw


def test_round_views():
    round_data = Round(
        3,
        [Match(1, ("A", "B"), ("C", "D")), Match(2, ("E", "F"), ("G", "H"))],
        bye="I",
    )

    assert round_data.players == ["A", "B", "C", "D", "E", "F", "G", "H"]
    assert round_data.teams == [("A", "B"), ("C", "D"), ("E", "F"), ("G", "H")]
    assert round_data.get_match(2).team1 == ("E", "F")
    assert round_data.get_match(3) is None
    assert not round_data.is_submitted

    for match in round_data.matches:
        match.record_score(1, 0)
    assert round_data.is_submitted
    assert Round.from_dict(round_data.to_dict()) == round_data


def test_empty_round_is_never_submitted():
    assert not Round(1).is_submitted


def test_partner_history_counts_unordered_pairs():
    history = PartnerHistory()
    history.add_team(("A", "B"))
    history.add_team(("B", "A"))
    history.add_team(("C", "D"))

    assert history.repeated() == {frozenset({"A", "B"}): 2}
    assert len(history) == 2


def test_partner_history_from_rounds_and_dict():
    rounds = [
        Round(1, [Match(1, ("A", "D"), ("B", "C"))]),
        Round(2, [Match(1, ("A", "C"), ("D", "B"))]),
    ]
    history = PartnerHistory.from_rounds(rounds)

    assert len(history) == 4
    assert {"players": ["A", "D"], "count": 1} in history.to_dict()["partnerships"]


def test_config_defaults():
    config = TournamentConfig()
    assert config.courts == 1
    assert config.ranking_order == ["wins", "game_difference", "games_for"]
    assert TournamentConfig.from_dict(config.to_dict()) == config


def test_config_normalises_numbers():
    config = TournamentConfig(courts="3", match_duration_minutes=12.0)
    assert config.courts == 3
    assert config.match_duration_minutes == 12


@pytest.mark.parametrize(
    "kwargs",
    [
        {"courts": 0},
        {"courts": "two"},
        {"match_duration_minutes": 0},
        {"ranking_order": ["wins", "elo"]},
    ],
)
def test_config_rejects_invalid_values(kwargs):
    with pytest.raises(InvalidConfigurationException):
        TournamentConfig(**kwargs)
