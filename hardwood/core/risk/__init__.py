"""
Risk and volatility aggregation.

Decision log, season records, win volatility and end-of-run evaluation.
"""

from hardwood.core.risk.decisions import (
    classify_draft_risk,
    classify_signing_risk,
    classify_strategy_risk,
    resolve_decision,
    resolve_season_decisions,
    season_risk_rating,
)
from hardwood.core.risk.evaluation import EvaluationConfig, FranchiseEvaluation, evaluate_franchise
from hardwood.core.risk.records import (
    DecisionOutcome,
    DecisionType,
    RiskDecision,
    RiskRating,
    SeasonResult,
)
from hardwood.core.risk.volatility import (
    VolatilityMetrics,
    VolatilityRating,
    build_volatility_metrics,
    classify_volatility,
)

__all__ = [
    "DecisionOutcome",
    "DecisionType",
    "EvaluationConfig",
    "FranchiseEvaluation",
    "RiskDecision",
    "RiskRating",
    "SeasonResult",
    "VolatilityMetrics",
    "VolatilityRating",
    "build_volatility_metrics",
    "classify_draft_risk",
    "classify_signing_risk",
    "classify_strategy_risk",
    "classify_volatility",
    "evaluate_franchise",
    "resolve_decision",
    "resolve_season_decisions",
    "season_risk_rating",
]
