from enum import Enum
from typing import Tuple, TYPE_CHECKING

if TYPE_CHECKING:
    from .standing import TeamScore


class GameOutcome(str, Enum):
    TEAM1_WIN = "TEAM1_WIN"
    TEAM2_WIN = "TEAM2_WIN"
    DRAW = "DRAW"


class RankingStrategy(str, Enum):
    """How teams are ordered, and which fields decide a shared rank."""

    POINTS = "points"  # League points only
    GOAL_DIFF = "goal_diff"  # League points, then goal differential

    @property
    def tracks_goal_diff(self) -> bool:
        return self is RankingStrategy.GOAL_DIFF

    def tie_key(self, score: "TeamScore") -> Tuple[int, int]:
        """Key that decides whether two teams share a rank (smaller sorts first)."""
        secondary = -score.goal_diff if self.tracks_goal_diff else 0
        return (-score.league_points, secondary)

    def sort_key(self, name: str, score: "TeamScore") -> Tuple[int, int, str]:
        # Name breaks the remaining ties so the order never depends on dict order
        return self.tie_key(score) + (name,)
