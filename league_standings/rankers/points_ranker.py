"""
Points-table ranker.

Scores every directed match entry once and sorts participants by points.
"""

from typing import TYPE_CHECKING
from typing_extensions import override

if TYPE_CHECKING:
    from loguru._logger import Logger

from ..interfaces import Ranker
from ..logging_config import get_logger
from ..models import DEFAULT_SCORING, ResultsTable, ScoringRule, Standings, StandingsEntry


class PointsRanker(Ranker):
    """
    Win/draw/loss points ranker.

    Each entry ``results[a][b]`` is scored on its own; a reverse entry
    ``results[b][a]`` is never inferred and, when present, is scored again.
    Participants that end with zero points are left out.

    Ties keep first-seen order: the order in which participants first
    received points while walking the table in mapping order.
    """

    def __init__(self, rule: ScoringRule = DEFAULT_SCORING, logger: "Logger | None" = None):
        """
        Initialize points ranker.

        Args:
            rule: Points awarded for a win, draw and loss
            logger: Optional loguru-style logger (defaults to package logger)
        """
        self.rule: ScoringRule = rule
        self.logger: Logger = logger if logger is not None else get_logger("points_ranker")

    @override
    def compute_standings(self, results: ResultsTable) -> Standings:
        points = dict[str, int]()
        entry_count = 0

        for player_a, matches in results.items():
            for player_b, result in matches.items():
                entry_count += 1
                points_a, points_b = self.rule.points(result.score_a, result.score_b)
                self._award(points, player_a, points_a)
                self._award(points, player_b, points_b)

        # sorted() is stable, so equal totals keep insertion order
        standings = [
            StandingsEntry(participant_id, total)
            for participant_id, total in sorted(
                points.items(), key=lambda item: item[1], reverse=True
            )
        ]

        self.logger.debug(
            f"Computed standings: {entry_count} entries, {len(standings)} participants"
        )
        return standings

    @staticmethod
    def _award(points: dict[str, int], participant_id: str, amount: int) -> None:
        if amount > 0:
            points[participant_id] = points.get(participant_id, 0) + amount


def compute_standings(
    results: ResultsTable, rule: ScoringRule | None = None
) -> Standings:
    """Compute standings with a one-off ranker."""
    return PointsRanker(rule or DEFAULT_SCORING).compute_standings(results)
