import sys
from pathlib import Path
from typing import List, Optional

# --- Settings/Logging ---
from league_table.logging.setup import setup_logging
from league_table.config.settings import settings

setup_logging()

from loguru import logger

# --- End Settings/Logging ---

from league_table.models.enums import RankingStrategy
from league_table.models.standing import TeamRank
from league_table.parsing.parser import ParseError, parse_games
from league_table.aggregation.aggregator import aggregate, total_points
from league_table.ranking.ranker import rank
from league_table.formatting.formatter import display_table

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

USAGE = "Usage: python main.py <input_file> [points|goal_diff]"


def build_table(
    text: str,
    strategy: RankingStrategy = RankingStrategy.POINTS,
    skip_invalid: bool = False,
) -> List[TeamRank]:
    """Parses, aggregates and ranks every game in ``text``.

    Raises ParseError before any scores are computed if a line is malformed
    (unless skip_invalid is set).
    """
    games = parse_games(text.splitlines(), skip_invalid=skip_invalid)
    scores = aggregate(games, strategy)
    logger.info(
        f"Aggregated {len(games)} games for {len(scores)} teams "
        f"({total_points(scores)} league points awarded)."
    )
    return rank(scores, strategy)


def _parse_strategy(value: Optional[str]) -> RankingStrategy:
    if value is None:
        return settings.ranking_strategy
    return RankingStrategy(value.lower())


def run(argv: List[str]) -> int:
    """Runs the league table for the given argv and returns the exit status."""
    err_console = Console(stderr=True, highlight=False)

    if len(argv) not in (2, 3):
        err_console.print("No input file provided", markup=False)
        err_console.print(USAGE, markup=False)
        return 1

    try:
        strategy = _parse_strategy(argv[2] if len(argv) == 3 else None)
    except ValueError:
        err_console.print(f"Unknown ranking strategy: {argv[2]}", markup=False)
        err_console.print(USAGE, markup=False)
        return 1

    input_path = Path(argv[1])
    try:
        content = input_path.read_text(encoding="utf-8")
    except OSError as e:
        logger.error(f"Could not read input file {input_path}: {e}")
        return 1

    logger.info(f"Building league table from {input_path} ('{strategy.value}' strategy)")
    try:
        ranking = build_table(
            content, strategy, skip_invalid=settings.skip_invalid_lines
        )
    except ParseError as e:
        logger.error(f"Aborting, no standings produced: {e}")
        err_console.print(
            Panel(Text(str(e)), title="Malformed game record", border_style="red"),
        )
        return 1

    out_console = Console(highlight=False, markup=False, emoji=False, soft_wrap=True)
    for row in display_table(
        ranking, settings.point_unit_singular, settings.point_unit_plural
    ):
        out_console.print(row)

    logger.success(f"Printed standings for {len(ranking)} teams.")
    return 0


def main() -> None:
    sys.exit(run(sys.argv))


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        logger.info("Execution interrupted by user (KeyboardInterrupt).")
        sys.exit(0)
