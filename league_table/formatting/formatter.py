from typing import Iterable, List

from league_table.models.standing import TeamRank

DEFAULT_SINGULAR_UNIT = "pt"
DEFAULT_PLURAL_UNIT = "pts"


def display(
    team: TeamRank,
    singular: str = DEFAULT_SINGULAR_UNIT,
    plural: str = DEFAULT_PLURAL_UNIT,
) -> str:
    """Renders a row as '<rank>. <name>, <score> <unit>[, gd: <goal_diff>]'."""
    unit = singular if team.score == 1 else plural
    row = f"{team.rank}. {team.name}, {team.score} {unit}"
    if team.goal_diff is not None:
        row += f", gd: {team.goal_diff}"
    return row


def display_table(
    ranking: Iterable[TeamRank],
    singular: str = DEFAULT_SINGULAR_UNIT,
    plural: str = DEFAULT_PLURAL_UNIT,
) -> List[str]:
    return [display(team, singular, plural) for team in ranking]
