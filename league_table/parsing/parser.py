from typing import Iterable, List, Optional, Tuple

from loguru import logger

from league_table.models.game import Game

SEGMENT_SEPARATOR = ", "


class ParseError(ValueError):
    """Raised when a line is not a valid game record."""

    def __init__(self, line: str, reason: str, line_number: Optional[int] = None):
        self.line = line
        self.reason = reason
        self.line_number = line_number
        super().__init__(str(self))

    def __str__(self) -> str:
        location = f" (line {self.line_number})" if self.line_number is not None else ""
        return f"Invalid game record {self.line!r}{location}: {self.reason}"


def parse_team(segment: str) -> Tuple[str, int]:
    """Splits '<team name> <score>' at the rightmost space.

    Team names may contain spaces; the score is whatever follows the last one.
    """
    name, sep, raw_score = segment.rpartition(" ")
    if not sep:
        raise ParseError(segment, "missing space between team name and score")
    if not name:
        raise ParseError(segment, "missing team name")
    # isdigit() would also accept things like superscripts, which int() rejects
    if not raw_score.isascii() or not raw_score.isdigit():
        raise ParseError(segment, f"score {raw_score!r} is not a non-negative integer")
    return name, int(raw_score)


def parse_game(line: str) -> Game:
    """Parses one '<team1> <score1>, <team2> <score2>' line into a Game."""
    text = line.rstrip("\r\n")
    segments = text.split(SEGMENT_SEPARATOR)
    if len(segments) != 2:
        raise ParseError(
            text,
            f"expected 2 segments separated by {SEGMENT_SEPARATOR!r}, got {len(segments)}",
        )

    try:
        team1, team1_score = parse_team(segments[0])
        team2, team2_score = parse_team(segments[1])
    except ParseError as e:
        # Report the whole line rather than the segment that failed
        raise ParseError(text, e.reason) from e

    return Game(
        team1=team1, team1_score=team1_score, team2=team2, team2_score=team2_score
    )


def parse_games(lines: Iterable[str], skip_invalid: bool = False) -> List[Game]:
    """Parses every non-blank line, in order.

    Args:
        lines: Raw input lines, with or without trailing newlines.
        skip_invalid: Log and drop malformed lines instead of raising.

    Returns:
        The parsed games.

    Raises:
        ParseError: On the first malformed line, unless skip_invalid is set.
            The error's line_number is the 1-based position in ``lines``.
    """
    games: List[Game] = []
    skipped = 0

    for line_number, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        try:
            games.append(parse_game(line))
        except ParseError as e:
            e.line_number = line_number
            if not skip_invalid:
                raise
            skipped += 1
            logger.warning(f"Skipping malformed line: {e}")

    logger.debug(f"Parsed {len(games)} games ({skipped} lines skipped).")
    return games
