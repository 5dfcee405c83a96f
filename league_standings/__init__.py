"""
League Standings - points table for round-robin results

Computes win/draw/loss point totals from a table of directed pairwise match
results and orders participants by descending points.
"""

from .models import MatchResult, StandingsEntry, ScoringRule, ResultsTable, Standings
from .interfaces import Ranker
from .rankers import PointsRanker, compute_standings
from .codec import calculate_rankings, decode_results, encode_standings, greet
from .results_table import (
    clear_result,
    record_result,
    remove_participant,
    rename_participant,
    render_match_grid,
)

__version__ = "0.1.0"
__all__ = [
    "MatchResult",
    "StandingsEntry",
    "ScoringRule",
    "ResultsTable",
    "Standings",
    "Ranker",
    "PointsRanker",
    "compute_standings",
    "calculate_rankings",
    "decode_results",
    "encode_standings",
    "greet",
    "record_result",
    "clear_result",
    "rename_participant",
    "remove_participant",
    "render_match_grid",
]
