"""
Core dataclasses for league standings.

Defines MatchResult, StandingsEntry and ScoringRule with validation.
"""

from collections.abc import Mapping
from dataclasses import dataclass

from .exceptions import ConfigurationError, ValidationError


def _check_score(name: str, value: object) -> None:
    # bool is an int subclass but never a valid score
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"{name} must be an integer, got {value!r}")
    if value < 0:
        raise ValidationError(f"{name} cannot be negative, got {value}")


@dataclass(frozen=True)
class MatchResult:
    """Score of a first-listed participant against a second-listed one."""

    score_a: int
    score_b: int

    def __post_init__(self) -> None:
        """Validate scores."""
        _check_score("score_a", self.score_a)
        _check_score("score_b", self.score_b)

    @classmethod
    def from_pair(cls, pair: tuple[int, int] | list[int]) -> "MatchResult":
        """Build from a two-element sequence such as ``[3, 1]``."""
        if len(pair) != 2:
            raise ValidationError(f"expected two scores, got {len(pair)}")
        return cls(pair[0], pair[1])

    def to_pair(self) -> list[int]:
        return [self.score_a, self.score_b]


@dataclass(frozen=True)
class StandingsEntry:
    """A participant and their accumulated points."""

    participant_id: str
    total_points: int

    def to_pair(self) -> list[str | int]:
        return [self.participant_id, self.total_points]


@dataclass(frozen=True)
class ScoringRule:
    """Points awarded per match outcome."""

    win_points: int = 3
    draw_points: int = 1
    loss_points: int = 0

    def __post_init__(self) -> None:
        """Validate point values."""
        for name in ("win_points", "draw_points", "loss_points"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigurationError(f"{name} must be an integer, got {value!r}")
            if value < 0:
                raise ConfigurationError(f"{name} cannot be negative, got {value}")

    def points(self, score_a: int, score_b: int) -> tuple[int, int]:
        """
        Determine points for both sides of a match.

        Args:
            score_a: Score of the first-listed participant
            score_b: Score of the second-listed participant

        Returns:
            Tuple of (first_participant_points, second_participant_points)
        """
        if score_a > score_b:
            return (self.win_points, self.loss_points)
        elif score_a < score_b:
            return (self.loss_points, self.win_points)
        else:
            return (self.draw_points, self.draw_points)


DEFAULT_SCORING = ScoringRule()

ResultsTable = Mapping[str, Mapping[str, MatchResult]]
Standings = list[StandingsEntry]
