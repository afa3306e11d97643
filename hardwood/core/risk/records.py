"""Risk decision log and per-season result records."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from hardwood.core.economics import FinancialState
from hardwood.core.enums import PlayoffResult, RiskLevel


class DecisionType(Enum):
    TRADE = "trade"
    SIGNING = "signing"
    DRAFT = "draft"
    STRATEGY_CHANGE = "strategy_change"


class DecisionOutcome(Enum):
    PENDING = "pending"
    SUCCESS = "success"
    NEUTRAL = "neutral"
    FAILURE = "failure"


class RiskRating(Enum):
    AGGRESSIVE = "aggressive"
    BALANCED = "balanced"
    CONSERVATIVE = "conservative"


@dataclass
class RiskDecision:
    """One consequential front-office move. The log is append-only."""
    id: str
    season: int
    decision_type: DecisionType
    risk_level: RiskLevel
    description: str
    outcome: DecisionOutcome = DecisionOutcome.PENDING

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "season": self.season,
            "decision_type": self.decision_type.value,
            "risk_level": self.risk_level.value,
            "description": self.description,
            "outcome": self.outcome.value,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "RiskDecision":
        return cls(
            id=data["id"],
            season=data.get("season", 1),
            decision_type=DecisionType(data["decision_type"]),
            risk_level=RiskLevel(data["risk_level"]),
            description=data.get("description", ""),
            outcome=DecisionOutcome(data.get("outcome", "pending")),
        )


@dataclass
class SeasonResult:
    """Snapshot of one completed season for the user's franchise."""
    season: int
    wins: int
    losses: int
    playoff_result: PlayoffResult
    financials: FinancialState
    risk_rating: RiskRating
    volatility_score: float      # Win standard deviation through this season
    mvp_name: Optional[str] = None
    champion_team_id: Optional[str] = None
    fan_approval: int = 50
    owner_confidence: int = 50

    @property
    def made_playoffs(self) -> bool:
        return self.playoff_result.made_playoffs

    @property
    def won_title(self) -> bool:
        return self.playoff_result is PlayoffResult.CHAMPION

    def to_dict(self) -> dict:
        return {
            "season": self.season,
            "wins": self.wins,
            "losses": self.losses,
            "playoff_result": self.playoff_result.value,
            "financials": self.financials.to_dict(),
            "risk_rating": self.risk_rating.value,
            "volatility_score": self.volatility_score,
            "mvp_name": self.mvp_name,
            "champion_team_id": self.champion_team_id,
            "fan_approval": self.fan_approval,
            "owner_confidence": self.owner_confidence,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "SeasonResult":
        return cls(
            season=data["season"],
            wins=data.get("wins", 0),
            losses=data.get("losses", 0),
            playoff_result=PlayoffResult(data.get("playoff_result", "missed")),
            financials=FinancialState.from_dict(data.get("financials", {})),
            risk_rating=RiskRating(data.get("risk_rating", "balanced")),
            volatility_score=data.get("volatility_score", 0.0),
            mvp_name=data.get("mvp_name"),
            champion_team_id=data.get("champion_team_id"),
            fan_approval=data.get("fan_approval", 50),
            owner_confidence=data.get("owner_confidence", 50),
        )
