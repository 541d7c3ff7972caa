from typing import List, Mapping, Optional, Tuple

from loguru import logger

from league_table.models.enums import RankingStrategy
from league_table.models.standing import TeamRank, TeamScore


def rank(
    scores: Mapping[str, TeamScore],
    strategy: RankingStrategy = RankingStrategy.POINTS,
) -> List[TeamRank]:
    """Orders teams and assigns competition ranks.

    Teams are sorted by league points (and goal differential for the
    goal-diff strategy), highest first, then by name. Teams with the same
    points/goal differential share a rank, and the next team's rank counts
    everyone ahead of it, e.g. 1, 1, 3.

    Args:
        scores: Aggregated scores keyed by team name.
        strategy: Decides the tie-break key and whether goal_diff is reported.

    Returns:
        One TeamRank per team, in final order.
    """
    ordered = sorted(scores.items(), key=lambda item: strategy.sort_key(*item))

    ranking: List[TeamRank] = []
    previous_key: Optional[Tuple[int, int]] = None
    current_rank = 0

    for position, (name, score) in enumerate(ordered, start=1):
        key = strategy.tie_key(score)
        if key != previous_key:
            current_rank = position
            previous_key = key
        ranking.append(
            TeamRank(
                rank=current_rank,
                name=name,
                score=score.league_points,
                goal_diff=score.goal_diff if strategy.tracks_goal_diff else None,
            )
        )

    logger.debug(f"Ranked {len(ranking)} teams using '{strategy.value}' strategy.")
    return ranking
