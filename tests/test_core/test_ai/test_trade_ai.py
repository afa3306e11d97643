"""Tests for AI trade decisions and proposal generation."""

import random

import pytest

from hardwood.core.ai.trade_ai import (
    AIPersonality,
    TradeAI,
    acceptance_threshold,
    generate_ai_personality,
    get_ai_strategy,
    would_ai_accept_trade,
)
from hardwood.core.enums import Difficulty, RiskLevel
from hardwood.core.models.team_context import StrategyType, TeamContextType
from hardwood.core.trades.evaluation import TradeEvaluation, TradeRiskAssessment


def _neutral() -> AIPersonality:
    return AIPersonality(
        trade_aggression=0.5,
        star_loyalty=0.5,
        risk_tolerance=0.5,
        analytics_reliance=0.5,
        market_sensitivity=0.5,
    )


def _evaluation(fairness: int, valid: bool = True) -> TradeEvaluation:
    return TradeEvaluation(
        fairness_score=fairness,
        from_value=100.0,
        to_value=100.0,
        analysis="Test analysis.",
        risk_assessment=TradeRiskAssessment(score=0, level=RiskLevel.LOW),
        valid=valid,
    )


class TestAcceptanceThresholds:
    """Tests for difficulty-driven acceptance."""

    @pytest.mark.parametrize("difficulty,threshold", [
        (Difficulty.EASY, -25),
        (Difficulty.MEDIUM, -10),
        (Difficulty.HARD, 0),
    ])
    def test_thresholds(self, difficulty, threshold):
        """Neutral personalities use the difficulty threshold as-is."""
        assert acceptance_threshold(difficulty, _neutral()) == threshold
        assert would_ai_accept_trade(threshold, difficulty, _neutral())
        assert not would_ai_accept_trade(threshold - 1, difficulty, _neutral())

    def test_harder_is_stricter(self):
        """A score accepted on hard is accepted everywhere."""
        assert would_ai_accept_trade(-20, Difficulty.EASY)
        assert not would_ai_accept_trade(-20, Difficulty.MEDIUM)
        assert not would_ai_accept_trade(-5, Difficulty.HARD)

    def test_eager_personality_lowers_threshold(self):
        """Aggressive traders accept slightly worse deals."""
        eager = _neutral()
        eager.trade_aggression = 1.0
        assert acceptance_threshold(Difficulty.MEDIUM, eager) < -10


class TestEvaluateOffer:
    """Tests for TradeAI verdicts."""

    def test_accepts_good_offer(self, make_team):
        """A fair offer is accepted with a message naming the team."""
        ai = TradeAI(make_team("away"), Difficulty.MEDIUM, _neutral(), random.Random(1))
        accepted, reason = ai.evaluate_offer(_evaluation(5), [])
        assert accepted
        assert "accept" in reason

    def test_rejects_bad_offer(self, make_team):
        """A lowball is rejected with the analysis attached."""
        ai = TradeAI(make_team("away"), Difficulty.MEDIUM, _neutral(), random.Random(1))
        accepted, reason = ai.evaluate_offer(_evaluation(-30), [])
        assert not accepted
        assert "Test analysis." in reason

    def test_invalid_evaluation_rejected(self, make_team):
        """Invalid proposals are never accepted."""
        ai = TradeAI(make_team("away"), Difficulty.EASY, _neutral(), random.Random(1))
        accepted, _ = ai.evaluate_offer(_evaluation(100, valid=False), [])
        assert not accepted

    def test_star_loyalty_raises_bar(self, make_team, star_player):
        """Losing a star needs more than the base threshold."""
        ai = TradeAI(make_team("away"), Difficulty.MEDIUM, _neutral(), random.Random(1))
        accepted, reason = ai.evaluate_offer(_evaluation(-8), [star_player])
        assert not accepted
        assert "star" in reason


class TestStrategyAndPersonality:
    """Tests for AI strategy selection."""

    def test_context_default_before_games(self, make_team):
        """Without games the context's default strategy applies."""
        team = make_team(context_type=TeamContextType.STAR_DEPENDENT)
        assert get_ai_strategy(team, 0, 0) is StrategyType.BOOM_BUST_SWING

    def test_strategy_by_record(self, make_team):
        """Winning teams push harder."""
        team = make_team()
        assert get_ai_strategy(team, 60, 22) is StrategyType.BOOM_BUST_SWING
        assert get_ai_strategy(team, 45, 37) is StrategyType.AGGRESSIVE_PUSH
        assert get_ai_strategy(team, 30, 52) is StrategyType.STABILITY_FIRST

    def test_personality_deterministic_for_seed(self, make_team):
        """The same seed rolls the same personality."""
        team = make_team()
        assert generate_ai_personality(team, random.Random(3)) == generate_ai_personality(team, random.Random(3))

    def test_star_dependent_teams_are_loyal(self, make_team):
        """Star-dependent franchises protect their stars."""
        team = make_team(context_type=TeamContextType.STAR_DEPENDENT)
        assert TradeAI(team, rng=random.Random(0)).protects_stars


class TestProposalGeneration:
    """Tests for AI-built offers."""

    def test_targets_best_non_star(self, make_team, make_player):
        """The AI asks for the most valuable attainable player."""
        ai_team = make_team("home", roster=[
            make_player(f"h{i}", overall=78, salary=8.0) for i in range(4)
        ])
        target = make_team("away", roster=[
            make_player("good", overall=80, salary=10.0),
            make_player("meh", overall=70, salary=3.0),
        ])
        proposal = TradeAI(ai_team, rng=random.Random(0)).generate_trade_proposal(target, "ai-1")

        assert proposal is not None
        assert proposal.players_requested == ["good"]
        assert 1 <= len(proposal.players_offered) <= 3
        assert set(proposal.players_offered) <= {p.id for p in ai_team.roster}

    def test_no_package_for_empty_roster(self, make_team, make_player):
        """Nothing to offer means no proposal."""
        ai_team = make_team("home", roster=[])
        target = make_team("away", roster=[make_player("good", overall=80)])
        assert TradeAI(ai_team, rng=random.Random(0)).generate_trade_proposal(target, "ai-1") is None
