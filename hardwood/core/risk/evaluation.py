"""
End-of-run franchise evaluation.

Combines three independently bucketed components:
- Risk-context alignment: did the front office take the level of risk
  its context archetype can absorb
- Financial sustainability: average season profit
- On-court performance: titles, playoff appearances and wins
"""

import logging
from dataclasses import dataclass, field
from typing import Optional

from hardwood.core.enums import RiskLevel
from hardwood.core.models.team_context import TeamContextType, get_context_profile
from hardwood.core.risk.decisions import count_by_level
from hardwood.core.risk.records import DecisionOutcome, RiskDecision, SeasonResult
from hardwood.core.risk.volatility import VolatilityMetrics, build_volatility_metrics


logger = logging.getLogger(__name__)


@dataclass
class EvaluationConfig:
    """Bucket boundaries and weights for the final evaluation."""

    # Component weights
    context_weight: float = 0.4
    financial_weight: float = 0.3
    performance_weight: float = 0.3

    # Risk-context alignment
    context_base_score: int = 50
    aligned_bonus: int = 30
    too_conservative_penalty: int = 10
    too_risky_penalty: int = 20
    per_extra_level_penalty: int = 10
    aggressive_high_risk_moves: int = 2      # More than this -> high actual risk
    balanced_medium_risk_moves: int = 2      # At least this -> medium actual risk

    # Financial buckets: (average profit above, score)
    financial_buckets: tuple = ((10.0, 90), (0.0, 70), (-20.0, 50))
    financial_floor_score: int = 30

    # Performance
    championship_points: int = 30
    playoff_appearance_points: int = 10
    wins_per_point: int = 3

    # Lessons
    high_volatility_std: float = 12.0
    failed_swing_moves: int = 4
    failed_swing_successes: int = 2


GM_TITLES = (
    (85, "Master Strategist", "You demonstrated excellent understanding of rational aggression."),
    (70, "Savvy Executive", "You showed a strong grasp of risk management."),
    (55, "Developing GM", "You are learning to balance risk and reward."),
    (40, "Rookie Manager", "There is room to better align risk with context."),
    (0, "Learning Experience", "Review how risk and volatility interact with context."),
)


@dataclass
class FranchiseEvaluation:
    context_score: int
    financial_score: int
    performance_score: int
    understanding_score: int
    expected_risk_level: RiskLevel
    actual_risk_level: RiskLevel
    gm_title: str
    gm_description: str
    volatility: VolatilityMetrics
    championships: int = 0
    playoff_appearances: int = 0
    total_wins: int = 0
    average_profit: float = 0.0
    high_risk_moves: int = 0
    successful_high_risk_moves: int = 0
    lessons: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "context_score": self.context_score,
            "financial_score": self.financial_score,
            "performance_score": self.performance_score,
            "understanding_score": self.understanding_score,
            "expected_risk_level": self.expected_risk_level.value,
            "actual_risk_level": self.actual_risk_level.value,
            "gm_title": self.gm_title,
            "gm_description": self.gm_description,
            "volatility": self.volatility.to_dict(),
            "championships": self.championships,
            "playoff_appearances": self.playoff_appearances,
            "total_wins": self.total_wins,
            "average_profit": self.average_profit,
            "high_risk_moves": self.high_risk_moves,
            "successful_high_risk_moves": self.successful_high_risk_moves,
            "lessons": list(self.lessons),
        }


def actual_risk_level(decisions: list[RiskDecision], config: EvaluationConfig) -> RiskLevel:
    """Risk level the front office actually played at."""
    high = count_by_level(decisions, RiskLevel.HIGH)
    medium = count_by_level(decisions, RiskLevel.MEDIUM)
    if high > config.aggressive_high_risk_moves:
        return RiskLevel.HIGH
    if high >= 1 or medium >= config.balanced_medium_risk_moves:
        return RiskLevel.MEDIUM
    return RiskLevel.LOW


def score_context_alignment(
    expected: RiskLevel,
    actual: RiskLevel,
    config: EvaluationConfig,
) -> int:
    """Reward matching the context's expected risk, penalize either miss."""
    score = config.context_base_score
    gap = actual.rank - expected.rank
    if gap == 0:
        score += config.aligned_bonus
    elif gap < 0:
        score -= config.too_conservative_penalty + (abs(gap) - 1) * config.per_extra_level_penalty
    else:
        score -= config.too_risky_penalty + (gap - 1) * config.per_extra_level_penalty
    return max(0, min(100, score))


def score_financials(average_profit: float, config: EvaluationConfig) -> int:
    for minimum, score in config.financial_buckets:
        if average_profit > minimum:
            return score
    return config.financial_floor_score


def score_performance(
    championships: int,
    playoff_appearances: int,
    total_wins: int,
    config: EvaluationConfig,
) -> int:
    return min(
        100,
        championships * config.championship_points
        + playoff_appearances * config.playoff_appearance_points
        + total_wins // config.wins_per_point,
    )


def get_gm_title(understanding_score: int) -> tuple[str, str]:
    for minimum, title, description in GM_TITLES:
        if understanding_score >= minimum:
            return title, description
    return GM_TITLES[-1][1], GM_TITLES[-1][2]


def _key_lessons(evaluation: FranchiseEvaluation, config: EvaluationConfig) -> list[str]:
    lessons = []
    if evaluation.volatility.win_std_dev > config.high_volatility_std:
        lessons.append(
            "Your team experienced high volatility. Same average, very different experience."
        )
    if evaluation.context_score < config.context_base_score:
        lessons.append(
            "Your risk-taking did not match your team's context. Different situations "
            "can absorb different levels of risk."
        )
    if (
        evaluation.high_risk_moves > config.failed_swing_moves
        and evaluation.successful_high_risk_moves < config.failed_swing_successes
    ):
        lessons.append(
            "High-risk moves did not pay off. Bold is only smart when failure is survivable."
        )
    if evaluation.championships > 0:
        lessons.append("Championship achieved! Sometimes the aggressive path is the right one.")
    if evaluation.financial_score < 50:
        lessons.append(
            "Financial struggles show that sustainability matters. Risk must account "
            "for economic consequences."
        )
    if not lessons:
        lessons.append(
            "You demonstrated balanced decision-making that weighed opportunity against consequence."
        )
    return lessons


def evaluate_franchise(
    context_type: TeamContextType,
    season_results: list[SeasonResult],
    decisions: list[RiskDecision],
    config: Optional[EvaluationConfig] = None,
) -> FranchiseEvaluation:
    """
    Score a completed run.

    Args:
        context_type: The user's team context archetype
        season_results: Every completed season, in order
        decisions: The full risk decision log
        config: Bucket boundaries and weights

    Returns:
        FranchiseEvaluation with component scores, title and lessons
    """
    config = config or EvaluationConfig()
    expected = get_context_profile(context_type).expected_risk_level
    actual = actual_risk_level(decisions, config)

    championships = sum(1 for s in season_results if s.won_title)
    playoff_appearances = sum(1 for s in season_results if s.made_playoffs)
    total_wins = sum(s.wins for s in season_results)
    average_profit = (
        sum(s.financials.profit for s in season_results) / len(season_results)
        if season_results else 0.0
    )

    context_score = score_context_alignment(expected, actual, config)
    financial_score = score_financials(average_profit, config)
    performance_score = score_performance(championships, playoff_appearances, total_wins, config)
    understanding = round(
        context_score * config.context_weight
        + financial_score * config.financial_weight
        + performance_score * config.performance_weight
    )
    title, description = get_gm_title(understanding)

    high_risk = [d for d in decisions if d.risk_level is RiskLevel.HIGH]
    evaluation = FranchiseEvaluation(
        context_score=context_score,
        financial_score=financial_score,
        performance_score=performance_score,
        understanding_score=understanding,
        expected_risk_level=expected,
        actual_risk_level=actual,
        gm_title=title,
        gm_description=description,
        volatility=build_volatility_metrics([s.wins for s in season_results], decisions),
        championships=championships,
        playoff_appearances=playoff_appearances,
        total_wins=total_wins,
        average_profit=round(average_profit, 2),
        high_risk_moves=len(high_risk),
        successful_high_risk_moves=sum(1 for d in high_risk if d.outcome is DecisionOutcome.SUCCESS),
    )
    evaluation.lessons = _key_lessons(evaluation, config)

    logger.info(
        "Evaluation: context=%d financial=%d performance=%d overall=%d (%s)",
        context_score, financial_score, performance_score, understanding, title,
    )
    return evaluation
