"""Game enumerations."""

from hardwood.core.enums.league import (
    Conference,
    Difficulty,
    Division,
    MarketSize,
    PlayoffResult,
    RiskLevel,
    SeasonPhase,
    TradeStatus,
)
from hardwood.core.enums.positions import Position

__all__ = [
    "Conference",
    "Difficulty",
    "Division",
    "MarketSize",
    "PlayoffResult",
    "Position",
    "RiskLevel",
    "SeasonPhase",
    "TradeStatus",
]
