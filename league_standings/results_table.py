"""
Editing and display of a results table.

Every function returns a new table; the input mapping is never modified.
Recording a result writes both directions, so a table built here holds each
match twice and the points ranker scores it twice.
"""

from collections.abc import Sequence

from prettytable import PrettyTable

from .codec.score_text import format_score, parse_score
from .exceptions import ValidationError
from .logging_config import get_logger
from .models import MatchResult, ResultsTable

# Module-level logger
logger = get_logger("results_table")

EditableTable = dict[str, dict[str, MatchResult]]

SELF_CELL = "\\"
EMPTY_CELL = "-"


def _copy(results: ResultsTable) -> EditableTable:
    return {player: dict(matches) for player, matches in results.items()}


def participants(results: ResultsTable) -> list[str]:
    """List every participant named at either level, in first-seen order."""
    seen = dict[str, None]()
    for player_a, matches in results.items():
        seen[player_a] = None
        for player_b in matches:
            seen[player_b] = None
    return list(seen)


def record_result(
    results: ResultsTable, player_a: str, player_b: str, result: MatchResult | str
) -> EditableTable:
    """
    Record a match and its mirrored reverse entry.

    Args:
        results: Current table
        player_a: First-listed participant
        player_b: Second-listed participant
        result: A MatchResult, or score text such as ``"3 - 2"``; blank text
            clears the match instead

    Returns:
        New table with ``a -> b`` set to the result and ``b -> a`` to its mirror

    Raises:
        ValidationError: if both sides are the same participant or the score
            text cannot be parsed
    """
    if isinstance(result, str):
        if not result.strip():
            return clear_result(results, player_a, player_b)
        result = parse_score(result)
    if player_a == player_b:
        raise ValidationError(f"{player_a} cannot play against themselves")

    table = _copy(results)
    table.setdefault(player_a, {})[player_b] = result
    table.setdefault(player_b, {})[player_a] = MatchResult(result.score_b, result.score_a)

    logger.debug(f"Recorded {player_a} vs {player_b}: {format_score(result)}")
    return table


def clear_result(results: ResultsTable, player_a: str, player_b: str) -> EditableTable:
    """Remove the match between two participants in both directions."""
    table = _copy(results)
    table.get(player_a, {}).pop(player_b, None)
    table.get(player_b, {}).pop(player_a, None)

    logger.debug(f"Cleared {player_a} vs {player_b}")
    return table


def rename_participant(results: ResultsTable, old_name: str, new_name: str) -> EditableTable:
    """
    Rename a participant as both a row key and an opponent key.

    Raises:
        ValidationError: if ``new_name`` is already in the table
    """
    if old_name == new_name:
        return _copy(results)
    if new_name in participants(results):
        raise ValidationError(f"participant already exists: {new_name}")

    table = EditableTable()
    for player_a, matches in results.items():
        table[new_name if player_a == old_name else player_a] = {
            (new_name if player_b == old_name else player_b): result
            for player_b, result in matches.items()
        }

    logger.debug(f"Renamed {old_name} to {new_name}")
    return table


def remove_participant(results: ResultsTable, name: str) -> EditableTable:
    """Drop a participant together with every match it appears in."""
    table = {
        player_a: {player_b: r for player_b, r in matches.items() if player_b != name}
        for player_a, matches in results.items()
        if player_a != name
    }

    logger.debug(f"Removed {name}")
    return table


def render_match_grid(results: ResultsTable, players: Sequence[str] | None = None) -> str:
    """
    Render the N x N cross-table.

    Row ``a``, column ``b`` shows ``results[a][b]`` as ``"3 - 2"``. Self cells
    show a backslash and missing results a hyphen.

    Args:
        results: Table to render
        players: Row and column order (defaults to first-seen order)
    """
    order = list(players) if players is not None else participants(results)

    table = PrettyTable()
    table.field_names = [""] + order
    table.align[""] = "l"

    for player_a in order:
        row = [player_a]
        for player_b in order:
            if player_a == player_b:
                row.append(SELF_CELL)
                continue
            result = results.get(player_a, {}).get(player_b)
            row.append(format_score(result) if result is not None else EMPTY_CELL)
        table.add_row(row)

    return table.get_string()
