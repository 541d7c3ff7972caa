from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field

from .enums import GameOutcome


class Game(BaseModel):
    """Represents a single played match between two teams."""

    model_config = ConfigDict(frozen=True)  # Make instances immutable

    team1: str = Field(..., min_length=1, description="Name of the first team.")
    team1_score: int = Field(..., ge=0, description="Final score of the first team.")
    team2: str = Field(..., min_length=1, description="Name of the second team.")
    team2_score: int = Field(..., ge=0, description="Final score of the second team.")

    @computed_field  # type: ignore[misc]
    @property
    def outcome(self) -> GameOutcome:
        if self.team1_score > self.team2_score:
            return GameOutcome.TEAM1_WIN
        if self.team1_score < self.team2_score:
            return GameOutcome.TEAM2_WIN
        return GameOutcome.DRAW

    @property
    def winner(self) -> Optional[str]:
        if self.outcome is GameOutcome.TEAM1_WIN:
            return self.team1
        if self.outcome is GameOutcome.TEAM2_WIN:
            return self.team2
        return None

    @property
    def loser(self) -> Optional[str]:
        if self.outcome is GameOutcome.TEAM1_WIN:
            return self.team2
        if self.outcome is GameOutcome.TEAM2_WIN:
            return self.team1
        return None

    @property
    def margin(self) -> int:
        """Winning margin; zero for a draw."""
        return abs(self.team1_score - self.team2_score)

    @property
    def description(self) -> str:
        """The game in its input line form."""
        return f"{self.team1} {self.team1_score}, {self.team2} {self.team2_score}"
