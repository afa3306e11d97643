"""Season-to-season win volatility."""

from dataclasses import dataclass
from enum import Enum

import numpy as np

from hardwood.core.enums import RiskLevel
from hardwood.core.risk.decisions import count_by_level
from hardwood.core.risk.records import RiskDecision


class VolatilityRating(Enum):
    STABLE = "stable"
    MODERATE = "moderate"
    VOLATILE = "volatile"
    EXTREME = "extreme"


# Upper bounds (exclusive) on win standard deviation
STABLE_MAX_STD = 5.0
MODERATE_MAX_STD = 10.0
VOLATILE_MAX_STD = 15.0


@dataclass
class VolatilityMetrics:
    win_variance: float
    win_std_dev: float
    risk_decision_count: int
    big_swing_count: int
    rating: VolatilityRating

    def to_dict(self) -> dict:
        return {
            "win_variance": self.win_variance,
            "win_std_dev": self.win_std_dev,
            "risk_decision_count": self.risk_decision_count,
            "big_swing_count": self.big_swing_count,
            "rating": self.rating.value,
        }


def calculate_win_variance(season_wins: list[int]) -> float:
    """Population variance (divide by N) of season win totals."""
    if not season_wins:
        return 0.0
    return float(np.var(season_wins))


def calculate_win_std_dev(season_wins: list[int]) -> float:
    if not season_wins:
        return 0.0
    return float(np.std(season_wins))


def classify_volatility(std_dev: float) -> VolatilityRating:
    if std_dev < STABLE_MAX_STD:
        return VolatilityRating.STABLE
    if std_dev < MODERATE_MAX_STD:
        return VolatilityRating.MODERATE
    if std_dev < VOLATILE_MAX_STD:
        return VolatilityRating.VOLATILE
    return VolatilityRating.EXTREME


def build_volatility_metrics(
    season_wins: list[int],
    decisions: list[RiskDecision],
) -> VolatilityMetrics:
    """Running volatility picture across every completed season."""
    std_dev = calculate_win_std_dev(season_wins)
    return VolatilityMetrics(
        win_variance=round(calculate_win_variance(season_wins), 2),
        win_std_dev=round(std_dev, 2),
        risk_decision_count=len(decisions),
        big_swing_count=count_by_level(decisions, RiskLevel.HIGH),
        rating=classify_volatility(std_dev),
    )
