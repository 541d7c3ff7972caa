import itertools

import pytest

from league_table.aggregation.aggregator import aggregate, merge_scores, total_points
from league_table.models.enums import GameOutcome, RankingStrategy
from league_table.models.standing import TeamScore
from league_table.parsing.parser import parse_games


@pytest.fixture
def games(sample_lines):
    return parse_games(sample_lines)


def test_aggregate_points(games):
    scores = aggregate(games)
    assert {name: s.league_points for name, s in scores.items()} == {
        "A": 3,
        "B": 6,
        "C": 4,
        "D": 1,
        "E": 0,
    }


def test_points_strategy_leaves_goal_diff_alone(games):
    scores = aggregate(games, RankingStrategy.POINTS)
    assert all(score.goal_diff == 0 for score in scores.values())


def test_goal_diff_strategy(games):
    scores = aggregate(games, RankingStrategy.GOAL_DIFF)
    assert {name: s.goal_diff for name, s in scores.items()} == {
        "A": 0,
        "B": 20,
        "C": 0,
        "D": -10,
        "E": -10,
    }
    assert scores["B"].league_points == 6


def test_team_that_only_loses_is_present():
    scores = aggregate(parse_games(["Winners 2, Losers 0", "Losers 1, Winners 4"]))
    assert scores["Losers"] == TeamScore(played=2, losses=2)
    assert scores["Winners"].league_points == 6


def test_draws_do_not_change_goal_diff():
    scores = aggregate(parse_games(["A 3, B 3"]), RankingStrategy.GOAL_DIFF)
    assert scores["A"] == scores["B"] == TeamScore(league_points=1, played=1, draws=1)


def test_record_tallies(games):
    scores = aggregate(games)
    c = scores["C"]
    assert (c.played, c.wins, c.draws, c.losses) == (3, 1, 1, 1)


def test_empty_input():
    assert aggregate([]) == {}


def test_points_total_matches_outcomes(games):
    decisive = sum(1 for g in games if g.outcome is not GameOutcome.DRAW)
    drawn = len(games) - decisive
    assert total_points(aggregate(games)) == 3 * decisive + 2 * drawn


def test_order_does_not_matter(games):
    expected = aggregate(games, RankingStrategy.GOAL_DIFF)
    for permutation in itertools.permutations(games):
        assert aggregate(permutation, RankingStrategy.GOAL_DIFF) == expected


def test_merge_matches_single_pass(games):
    expected = aggregate(games, RankingStrategy.GOAL_DIFF)
    first = aggregate(games[:2], RankingStrategy.GOAL_DIFF)
    second = aggregate(games[2:], RankingStrategy.GOAL_DIFF)
    assert merge_scores([first, second]) == expected
    assert merge_scores([second, first]) == expected


def test_merge_does_not_mutate_inputs(games):
    first = aggregate(games[:2])
    snapshot = {name: score.model_copy() for name, score in first.items()}
    merge_scores([first, aggregate(games[2:])])
    assert first == snapshot
