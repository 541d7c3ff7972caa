from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class TeamScore(BaseModel):
    """Accumulated standing for one team, built up game by game."""

    league_points: int = Field(0, ge=0)
    # Only changed when the ranking strategy uses goal differential
    goal_diff: int = 0

    # Record tallies, kept by every strategy but never used for ordering
    played: int = Field(0, ge=0)
    wins: int = Field(0, ge=0)
    draws: int = Field(0, ge=0)
    losses: int = Field(0, ge=0)

    def __add__(self, other: "TeamScore") -> "TeamScore":
        if not isinstance(other, TeamScore):
            return NotImplemented
        return TeamScore(
            league_points=self.league_points + other.league_points,
            goal_diff=self.goal_diff + other.goal_diff,
            played=self.played + other.played,
            wins=self.wins + other.wins,
            draws=self.draws + other.draws,
            losses=self.losses + other.losses,
        )


class TeamRank(BaseModel):
    """One row of the final standings."""

    model_config = ConfigDict(frozen=True)

    rank: int = Field(..., ge=1)
    name: str
    score: int = Field(..., ge=0)
    goal_diff: Optional[int] = None  # Set only when ranked by goal differential
