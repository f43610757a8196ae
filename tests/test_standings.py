import random

import pytest

from americanopairing.constants import RANK_FEWEST_LOSSES, RANK_GAMES_FOR, RANK_WINS
from americanopairing.exceptions import InvalidConfigurationException
from americanopairing.models import MatchResult, Player
from americanopairing.tournament import rank_players, recalculate_stats


def _result(round_number, court, team1, team2, score1, score2):
    return MatchResult(
        round_number=round_number,
        court=court,
        team1=team1,
        team2=team2,
        score1=score1,
        score2=score2,
    )


def _stats(players):
    return {
        p.name: (p.wins, p.losses, p.games_for, p.games_against) for p in players
    }


def _full_history():
    return [
        _result(1, 1, ("A", "D"), ("B", "C"), 6, 4),
        _result(2, 1, ("A", "C"), ("D", "B"), 2, 6),
        _result(3, 1, ("A", "B"), ("C", "D"), 5, 5),
    ]


def test_single_result_credits_both_teams(roster, first_round_result):
    players = recalculate_stats([first_round_result], roster)

    assert _stats(players) == {
        "A": (1, 0, 6, 4),
        "B": (0, 1, 4, 6),
        "C": (0, 1, 4, 6),
        "D": (1, 0, 6, 4),
    }


def test_empty_history_zeroes_everyone():
    roster = [Player("A", wins=3, losses=1, games_for=20, games_against=9)]
    players = recalculate_stats([], roster)

    assert _stats(players) == {"A": (0, 0, 0, 0)}


def test_draw_counts_games_but_no_result(roster):
    players = recalculate_stats([_result(1, 1, ("A", "D"), ("B", "C"), 5, 5)], roster)

    for player in players:
        assert (player.wins, player.losses) == (0, 0)
        assert (player.games_for, player.games_against) == (5, 5)


def test_team2_win(roster):
    players = recalculate_stats([_result(1, 1, ("A", "D"), ("B", "C"), 1, 6)], roster)

    assert _stats(players)["B"] == (1, 0, 6, 1)
    assert _stats(players)["A"] == (0, 1, 1, 6)


def test_output_keeps_roster_order_and_names(roster):
    players = recalculate_stats(_full_history(), list(reversed(roster)))
    assert [p.name for p in players] == ["D", "C", "B", "A"]


def test_input_roster_is_not_modified(first_round_result):
    roster = [Player(name, wins=9) for name in "ABCD"]
    recalculate_stats([first_round_result], roster)

    assert all(p.wins == 9 and p.games_for == 0 for p in roster)


def test_recalculate_is_idempotent(roster):
    first = recalculate_stats(_full_history(), roster)
    second = recalculate_stats(_full_history(), roster)
    again = recalculate_stats(_full_history(), first)

    assert first == second == again


def test_history_order_does_not_matter(roster):
    history = _full_history() * 3
    shuffled = list(history)
    random.Random(7).shuffle(shuffled)

    assert recalculate_stats(history, roster) == recalculate_stats(shuffled, roster)


def test_replaced_round_leaves_no_trace(roster):
    original = _full_history()
    replacement = _result(2, 1, ("A", "C"), ("D", "B"), 6, 0)
    corrected = original[:1] + [replacement] + original[2:]
    as_if_always = recalculate_stats(corrected, roster)

    stale = recalculate_stats(original, roster)
    recomputed = recalculate_stats(corrected, stale)

    assert recomputed == as_if_always
    assert _stats(recomputed)["A"] == (2, 0, 17, 9)


def test_unknown_players_in_history_are_ignored(roster):
    history = [_result(1, 1, ("A", "Zed"), ("B", "C"), 6, 2)]
    players = recalculate_stats(history, roster)

    assert _stats(players)["A"] == (1, 0, 6, 2)
    assert _stats(players)["D"] == (0, 0, 0, 0)
    assert "Zed" not in {p.name for p in players}


def test_repeated_name_credits_first_roster_entry():
    roster = [Player("A"), Player("A"), Player("B"), Player("C")]
    history = [_result(1, 1, ("A", "D"), ("B", "C"), 6, 4)]

    players = recalculate_stats(history, roster)

    assert (players[0].wins, players[0].games_for) == (1, 6)
    assert (players[1].wins, players[1].games_for) == (0, 0)


def test_game_totals_balance(roster):
    players = recalculate_stats(_full_history(), roster)

    assert sum(p.wins for p in players) == sum(p.losses for p in players)
    assert sum(p.games_for for p in players) == sum(p.games_against for p in players)


def test_rank_players_default_order():
    players = [
        Player("low", wins=1, games_for=10, games_against=12),
        Player("diff", wins=2, games_for=12, games_against=6),
        Player("most_for", wins=2, games_for=15, games_against=9),
        Player("top", wins=3, games_for=8, games_against=8),
    ]

    ranked = rank_players(players)

    assert [p.name for p in ranked] == ["top", "most_for", "diff", "low"]


def test_rank_players_ties_keep_roster_order():
    players = [Player("first", wins=1), Player("second", wins=1), Player("third")]
    assert [p.name for p in rank_players(players)] == ["first", "second", "third"]


def test_rank_players_custom_order():
    players = [
        Player("many_losses", wins=2, losses=3, games_for=30),
        Player("few_losses", wins=2, losses=0, games_for=10),
    ]

    by_losses = rank_players(players, [RANK_WINS, RANK_FEWEST_LOSSES])
    by_games = rank_players(players, [RANK_GAMES_FOR])

    assert [p.name for p in by_losses] == ["few_losses", "many_losses"]
    assert [p.name for p in by_games] == ["many_losses", "few_losses"]


def test_rank_players_rejects_unknown_criteria():
    with pytest.raises(InvalidConfigurationException, match="buchholz"):
        rank_players([Player("A")], ["wins", "buchholz"])
