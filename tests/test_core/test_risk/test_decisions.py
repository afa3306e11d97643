"""Tests for risk decision classification, resolution and volatility."""

import pytest

from hardwood.core.enums import PlayoffResult, RiskLevel
from hardwood.core.models.team_context import StrategyType
from hardwood.core.risk.decisions import (
    classify_draft_risk,
    classify_signing_risk,
    classify_strategy_risk,
    resolve_decision,
    resolve_season_decisions,
    season_risk_rating,
)
from hardwood.core.risk.records import DecisionOutcome, DecisionType, RiskDecision, RiskRating
from hardwood.core.risk.volatility import (
    VolatilityRating,
    build_volatility_metrics,
    calculate_win_std_dev,
    classify_volatility,
)


def _decision(n: int, season: int = 1, level: RiskLevel = RiskLevel.LOW) -> RiskDecision:
    return RiskDecision(
        id=f"decision-{n}",
        season=season,
        decision_type=DecisionType.SIGNING,
        risk_level=level,
        description=f"Move {n}",
    )


class TestClassification:
    """Tests for risk classifiers."""

    @pytest.mark.parametrize("salary,level", [
        (5.0, RiskLevel.LOW),
        (14.9, RiskLevel.LOW),
        (15.0, RiskLevel.MEDIUM),
        (25.0, RiskLevel.MEDIUM),
        (25.1, RiskLevel.HIGH),
    ])
    def test_signing_risk(self, salary, level):
        """Contract size drives signing risk."""
        assert classify_signing_risk(salary) is level

    @pytest.mark.parametrize("variance,level", [
        (11, RiskLevel.LOW),
        (12, RiskLevel.MEDIUM),
        (18, RiskLevel.MEDIUM),
        (19, RiskLevel.HIGH),
    ])
    def test_draft_risk(self, variance, level):
        """Prospect variance drives draft risk."""
        assert classify_draft_risk(variance) is level

    def test_strategy_risk(self):
        """Each strategy maps to its own level."""
        assert classify_strategy_risk(StrategyType.STABILITY_FIRST) is RiskLevel.LOW
        assert classify_strategy_risk(StrategyType.AGGRESSIVE_PUSH) is RiskLevel.MEDIUM
        assert classify_strategy_risk(StrategyType.BOOM_BUST_SWING) is RiskLevel.HIGH


class TestResolution:
    """Tests for season-end resolution."""

    def test_success_on_playoffs(self):
        """Reaching the playoffs resolves pending decisions as successes."""
        resolved = resolve_season_decisions([_decision(1)], 1, 38, PlayoffResult.FIRST_ROUND)
        assert resolved[0].outcome is DecisionOutcome.SUCCESS

    def test_success_on_wins(self):
        """45 wins is a success even without the playoffs."""
        resolved = resolve_season_decisions([_decision(1)], 1, 45, PlayoffResult.MISSED)
        assert resolved[0].outcome is DecisionOutcome.SUCCESS

    def test_never_failure(self):
        """A bad season is neutral, never an automatic failure."""
        resolved = resolve_season_decisions([_decision(1)], 1, 12, PlayoffResult.MISSED)
        assert resolved[0].outcome is DecisionOutcome.NEUTRAL

    def test_only_pending_in_season(self):
        """Other seasons and already-resolved decisions are untouched."""
        old = _decision(1, season=1)
        done = _decision(2, season=2)
        done.outcome = DecisionOutcome.FAILURE
        pending = _decision(3, season=2)

        resolved = resolve_season_decisions([old, done, pending], 2, 60, PlayoffResult.CHAMPION)
        assert resolved[0].outcome is DecisionOutcome.PENDING
        assert resolved[1].outcome is DecisionOutcome.FAILURE
        assert resolved[2].outcome is DecisionOutcome.SUCCESS

    def test_explicit_failure(self):
        """FAILURE is only set explicitly."""
        resolved = resolve_decision([_decision(1), _decision(2)], "decision-2", DecisionOutcome.FAILURE)
        assert resolved[1].outcome is DecisionOutcome.FAILURE
        assert resolved[0].outcome is DecisionOutcome.PENDING

    def test_inputs_not_mutated(self):
        """Resolution returns new decisions."""
        decisions = [_decision(1)]
        resolve_season_decisions(decisions, 1, 60, PlayoffResult.CHAMPION)
        assert decisions[0].outcome is DecisionOutcome.PENDING


class TestSeasonRiskRating:
    """Tests for the per-season rating."""

    def test_ratings(self):
        """0 high-risk moves conservative, 1-2 balanced, 3+ aggressive."""
        assert season_risk_rating([_decision(1)], 1) is RiskRating.CONSERVATIVE
        assert season_risk_rating([_decision(1, level=RiskLevel.HIGH)], 1) is RiskRating.BALANCED
        many = [_decision(i, level=RiskLevel.HIGH) for i in range(3)]
        assert season_risk_rating(many, 1) is RiskRating.AGGRESSIVE
        assert season_risk_rating(many, 2) is RiskRating.CONSERVATIVE


class TestVolatility:
    """Tests for win volatility."""

    def test_flat_record_is_stable(self):
        """Identical seasons have zero spread."""
        assert calculate_win_std_dev([45, 45, 45]) == 0.0
        assert classify_volatility(0.0) is VolatilityRating.STABLE

    def test_swings_are_volatile(self):
        """A collapse and rebound is volatile."""
        std = calculate_win_std_dev([60, 28, 55])
        assert std == pytest.approx(14.06, abs=0.01)
        assert classify_volatility(std) is VolatilityRating.VOLATILE

    def test_empty_history(self):
        """No seasons, no volatility."""
        assert calculate_win_std_dev([]) == 0.0

    def test_metrics(self):
        """Metrics count decisions and big swings."""
        decisions = [_decision(1), _decision(2, level=RiskLevel.HIGH)]
        metrics = build_volatility_metrics([40, 50], decisions)
        assert metrics.win_std_dev == 5.0
        assert metrics.rating is VolatilityRating.MODERATE
        assert metrics.risk_decision_count == 2
        assert metrics.big_swing_count == 1
