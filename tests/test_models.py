"""
Tests for model dataclasses.

Focus on score validation and the scoring rule.
"""

import pytest

from league_standings.exceptions import ConfigurationError, ValidationError
from league_standings.models import MatchResult, ScoringRule, StandingsEntry


class TestMatchResult:
    """Test MatchResult construction and validation."""

    def test_accepts_non_negative_integers(self) -> None:
        result = MatchResult(3, 0)

        assert result.score_a == 3
        assert result.score_b == 0

    def test_large_scores_are_valid(self) -> None:
        result = MatchResult(10**12, 7)

        assert result.score_a == 10**12

    @pytest.mark.parametrize("score_a, score_b", [(-1, 0), (0, -5)])
    def test_negative_score_rejected(self, score_a: int, score_b: int) -> None:
        with pytest.raises(ValidationError):
            _ = MatchResult(score_a, score_b)

    @pytest.mark.parametrize("bad", [1.5, "3", None, True])
    def test_non_integer_score_rejected(self, bad: object) -> None:
        with pytest.raises(ValidationError):
            _ = MatchResult(bad, 0)  # type: ignore[arg-type]

    def test_is_immutable(self) -> None:
        result = MatchResult(1, 2)

        with pytest.raises(AttributeError):
            result.score_a = 5  # type: ignore[misc]

    def test_from_pair_requires_two_scores(self) -> None:
        assert MatchResult.from_pair([2, 1]) == MatchResult(2, 1)
        with pytest.raises(ValidationError):
            _ = MatchResult.from_pair([2])


class TestStandingsEntry:
    """Test StandingsEntry serialisation shape."""

    def test_to_pair(self) -> None:
        assert StandingsEntry("Alice", 3).to_pair() == ["Alice", 3]


class TestScoringRule:
    """Test ScoringRule outcome points."""

    def test_default_rule_is_three_one_zero(self) -> None:
        rule = ScoringRule()

        assert rule.points(3, 1) == (3, 0)
        assert rule.points(2, 2) == (1, 1)
        assert rule.points(1, 3) == (0, 3)

    def test_custom_rule(self) -> None:
        rule = ScoringRule(win_points=2, draw_points=1, loss_points=0)

        assert rule.points(1, 0) == (2, 0)

    def test_negative_points_rejected(self) -> None:
        with pytest.raises(ConfigurationError):
            _ = ScoringRule(win_points=-3)
