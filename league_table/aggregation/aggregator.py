from typing import Dict, Iterable, Mapping

from loguru import logger

from league_table.models.enums import GameOutcome, RankingStrategy
from league_table.models.game import Game
from league_table.models.standing import TeamScore

WIN_POINTS = 3
DRAW_POINTS = 1
LOSS_POINTS = 0


def _record_win(winner: TeamScore, loser: TeamScore, margin: int, track_goal_diff: bool) -> None:
    winner.league_points += WIN_POINTS
    winner.wins += 1
    loser.league_points += LOSS_POINTS
    loser.losses += 1
    if track_goal_diff:
        winner.goal_diff += margin
        loser.goal_diff -= margin


def aggregate(
    games: Iterable[Game], strategy: RankingStrategy = RankingStrategy.POINTS
) -> Dict[str, TeamScore]:
    """Folds games into per-team scores.

    Both participants of every game get an entry, so a team that never
    scores a point still shows up with a zero baseline. Goal differential is
    only accumulated when the strategy ranks by it.
    """
    scores: Dict[str, TeamScore] = {}
    track_goal_diff = strategy.tracks_goal_diff
    game_count = 0

    for game in games:
        # Insert both teams before looking at the result
        team1 = scores.setdefault(game.team1, TeamScore())
        team2 = scores.setdefault(game.team2, TeamScore())
        team1.played += 1
        team2.played += 1

        if game.outcome is GameOutcome.TEAM1_WIN:
            _record_win(team1, team2, game.margin, track_goal_diff)
        elif game.outcome is GameOutcome.TEAM2_WIN:
            _record_win(team2, team1, game.margin, track_goal_diff)
        else:
            team1.league_points += DRAW_POINTS
            team2.league_points += DRAW_POINTS
            team1.draws += 1
            team2.draws += 1
        game_count += 1

    logger.debug(
        f"Aggregated {game_count} games into {len(scores)} teams using '{strategy.value}' strategy."
    )
    return scores


def merge_scores(partials: Iterable[Mapping[str, TeamScore]]) -> Dict[str, TeamScore]:
    """Combines partial aggregations by adding scores team by team.

    Inputs are left untouched. Merging is associative and commutative, so
    the result matches aggregating all the underlying games at once.
    """
    merged: Dict[str, TeamScore] = {}
    for partial in partials:
        for name, score in partial.items():
            merged[name] = merged[name] + score if name in merged else score.model_copy()
    return merged


def total_points(scores: Mapping[str, TeamScore]) -> int:
    return sum(score.league_points for score in scores.values())
