"""Tests for end-of-run franchise evaluation."""

from hardwood.core.economics import FinancialState
from hardwood.core.enums import PlayoffResult, RiskLevel
from hardwood.core.models.team_context import TeamContextType
from hardwood.core.risk.evaluation import (
    EvaluationConfig,
    evaluate_franchise,
    get_gm_title,
    score_context_alignment,
    score_financials,
)
from hardwood.core.risk.records import DecisionType, RiskDecision, RiskRating, SeasonResult


def _financials(profit: float) -> FinancialState:
    return FinancialState(
        salary_cap=140.0,
        luxury_tax_threshold=170.0,
        salary_floor=110.0,
        payroll=130.0,
        luxury_tax=0.0,
        floor_penalty=0.0,
        revenue=180.0 + profit,
        expenses=180.0,
        consecutive_tax_years=0,
    )


def _season(season: int, wins: int, result: PlayoffResult, profit: float = 5.0) -> SeasonResult:
    return SeasonResult(
        season=season,
        wins=wins,
        losses=82 - wins,
        playoff_result=result,
        financials=_financials(profit),
        risk_rating=RiskRating.CONSERVATIVE,
        volatility_score=0.0,
    )


def _high_risk(n: int) -> list[RiskDecision]:
    return [
        RiskDecision(
            id=f"decision-{i}", season=1, decision_type=DecisionType.TRADE,
            risk_level=RiskLevel.HIGH, description="Big swing",
        )
        for i in range(1, n + 1)
    ]


class TestComponentScores:
    """Tests for the individual buckets."""

    def test_alignment(self):
        """Matching the expected level scores highest; overshooting costs most."""
        config = EvaluationConfig()
        assert score_context_alignment(RiskLevel.MEDIUM, RiskLevel.MEDIUM, config) == 80
        assert score_context_alignment(RiskLevel.MEDIUM, RiskLevel.LOW, config) == 40
        assert score_context_alignment(RiskLevel.MEDIUM, RiskLevel.HIGH, config) == 30
        assert score_context_alignment(RiskLevel.LOW, RiskLevel.HIGH, config) == 20

    def test_financial_buckets(self):
        """Average profit maps to fixed buckets."""
        config = EvaluationConfig()
        assert score_financials(15.0, config) == 90
        assert score_financials(5.0, config) == 70
        assert score_financials(-10.0, config) == 50
        assert score_financials(-40.0, config) == 30

    def test_titles(self):
        """Titles step down with the overall score."""
        assert get_gm_title(90)[0] == "Master Strategist"
        assert get_gm_title(60)[0] == "Developing GM"
        assert get_gm_title(0)[0] == "Learning Experience"


class TestEvaluateFranchise:
    """Tests for the full evaluation."""

    def test_no_seasons(self):
        """An empty run evaluates without dividing by zero."""
        evaluation = evaluate_franchise(TeamContextType.LEGACY_POWER, [], [])
        assert evaluation.total_wins == 0
        assert evaluation.average_profit == 0.0
        assert evaluation.lessons

    def test_aligned_conservative_run(self):
        """A revenue-sensitive team playing it safe is well aligned."""
        seasons = [_season(1, 44, PlayoffResult.FIRST_ROUND), _season(2, 46, PlayoffResult.SECOND_ROUND)]
        evaluation = evaluate_franchise(TeamContextType.REVENUE_SENSITIVE, seasons, [])

        assert evaluation.expected_risk_level is RiskLevel.LOW
        assert evaluation.actual_risk_level is RiskLevel.LOW
        assert evaluation.context_score == 80
        assert evaluation.financial_score == 70
        assert evaluation.playoff_appearances == 2
        assert evaluation.performance_score == 20 + 90 // 3

    def test_reckless_run_gets_lesson(self):
        """Too much risk for the context shows up in the lessons."""
        seasons = [_season(1, 30, PlayoffResult.MISSED, profit=-30.0)]
        evaluation = evaluate_franchise(TeamContextType.REVENUE_SENSITIVE, seasons, _high_risk(3))

        assert evaluation.actual_risk_level is RiskLevel.HIGH
        assert evaluation.context_score == 20
        assert evaluation.high_risk_moves == 3
        assert any("context" in lesson for lesson in evaluation.lessons)
        assert any("Financial" in lesson for lesson in evaluation.lessons)

    def test_championship_lesson(self):
        """Titles are celebrated."""
        seasons = [_season(1, 60, PlayoffResult.CHAMPION)]
        evaluation = evaluate_franchise(TeamContextType.LEGACY_POWER, seasons, [])
        assert evaluation.championships == 1
        assert any("Championship" in lesson for lesson in evaluation.lessons)

    def test_custom_config(self):
        """Weights come from the config."""
        config = EvaluationConfig(context_weight=1.0, financial_weight=0.0, performance_weight=0.0)
        evaluation = evaluate_franchise(TeamContextType.REVENUE_SENSITIVE, [], [], config)
        assert evaluation.understanding_score == evaluation.context_score

    def test_to_dict(self):
        """Serialized evaluations carry enums by value."""
        data = evaluate_franchise(TeamContextType.LEGACY_POWER, [], []).to_dict()
        assert data["expected_risk_level"] == "medium"
        assert "volatility" in data
