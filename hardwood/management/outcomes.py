"""Structured results returned by session actions."""

from dataclasses import dataclass, field
from typing import Optional

from hardwood.core.draft.order import DraftSlot
from hardwood.core.models.player import Player
from hardwood.core.models.team_context import Compatibility
from hardwood.core.risk.records import SeasonResult
from hardwood.core.trades.evaluation import TradeEvaluation
from hardwood.core.trades.execution import TradeProposal
from hardwood.core.trades.salary import SalaryCheck
from hardwood.simulation.playoffs import PlayoffBracket
from hardwood.simulation.season import Injury, TeamRecord


class PhaseError(ValueError):
    """An action was attempted in a season phase that does not allow it."""


@dataclass
class TradeOutcome:
    accepted: bool
    message: str
    proposal: Optional[TradeProposal] = None
    evaluation: Optional[TradeEvaluation] = None
    salary_check: Optional[SalaryCheck] = None

    def to_dict(self) -> dict:
        return {
            "accepted": self.accepted,
            "message": self.message,
            "proposal": self.proposal.to_dict() if self.proposal else None,
            "evaluation": self.evaluation.to_dict() if self.evaluation else None,
            "salary_check": self.salary_check.to_dict() if self.salary_check else None,
        }


@dataclass
class SigningOutcome:
    success: bool
    message: str
    player: Optional[Player] = None
    interest: Optional[int] = None

    def to_dict(self) -> dict:
        return {
            "success": self.success,
            "message": self.message,
            "player": self.player.to_dict() if self.player else None,
            "interest": self.interest,
        }


@dataclass
class DraftOutcome:
    success: bool
    message: str
    player: Optional[Player] = None
    slot: Optional[DraftSlot] = None
    team_id: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "success": self.success,
            "message": self.message,
            "player": self.player.to_dict() if self.player else None,
            "slot": self.slot.to_dict() if self.slot else None,
            "team_id": self.team_id,
        }


@dataclass
class StrategyOutcome:
    changed: bool
    compatibility: Compatibility
    message: str


@dataclass
class SeasonReport:
    """Everything a simulated season produced, for display and reports."""
    result: SeasonResult
    bracket: PlayoffBracket
    standings: dict[str, TeamRecord]
    mvp_team_id: Optional[str] = None
    injuries: list[Injury] = field(default_factory=list)
