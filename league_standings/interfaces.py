"""
Abstract base classes defining the interfaces for league standings.

All interfaces are synchronous; rankers hold no per-call state.
"""

from abc import ABC, abstractmethod

from .models import ResultsTable, Standings


class Ranker(ABC):
    """Interface for turning a results table into standings."""

    @abstractmethod
    def compute_standings(self, results: ResultsTable) -> Standings:
        """
        Compute standings from directed match entries.

        Args:
            results: Mapping of participant -> opponent -> MatchResult

        Returns:
            Standings ordered by descending points
        """
        pass
