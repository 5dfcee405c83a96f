"""Text form of a single match result, e.g. ``"3 - 2"``."""

from ..exceptions import ValidationError
from ..models import MatchResult


def format_score(result: MatchResult) -> str:
    return f"{result.score_a} - {result.score_b}"


def parse_score(text: str) -> MatchResult:
    """
    Parse ``"<score_a> - <score_b>"`` into a MatchResult.

    Whitespace around either score is ignored.

    Raises:
        ValidationError: if the text is not two non-negative integers
            separated by a single hyphen
    """
    parts = [part.strip() for part in text.split("-")]
    if len(parts) != 2 or not all(part.isdecimal() for part in parts):
        raise ValidationError(f"invalid score text: {text!r}")
    return MatchResult(int(parts[0]), int(parts[1]))
