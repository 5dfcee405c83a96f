"""
Ranker implementations.

Available implementations:
- PointsRanker: awards win/draw/loss points per recorded match entry and
  orders participants by total points
"""

from .points_ranker import PointsRanker, compute_standings

__all__ = ["PointsRanker", "compute_standings"]
