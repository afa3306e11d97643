"""
Trade engine.

Valuation primitives, fairness and risk evaluation, salary legality
and pure trade execution.
"""

from hardwood.core.trades.evaluation import (
    TradeEvaluation,
    TradeRiskAssessment,
    assess_trade_risk,
    calculate_fairness,
    evaluate_trade,
)
from hardwood.core.trades.execution import TradeExecution, TradeProposal, execute_trade
from hardwood.core.trades.salary import SalaryCheck, validate_trade_salary
from hardwood.core.trades.valuation import (
    PlayerTier,
    calculate_package_value,
    calculate_player_value,
    classify_player_tier,
)

__all__ = [
    "PlayerTier",
    "SalaryCheck",
    "TradeEvaluation",
    "TradeExecution",
    "TradeProposal",
    "TradeRiskAssessment",
    "assess_trade_risk",
    "calculate_fairness",
    "calculate_package_value",
    "calculate_player_value",
    "classify_player_tier",
    "evaluate_trade",
    "execute_trade",
    "validate_trade_salary",
]
