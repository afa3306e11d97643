"""
Game State - the single source of truth for a franchise run.

A GameState is never edited in place by the session: every committed
action builds a new state with `dataclasses.replace` and swaps it in.
"""

from dataclasses import dataclass, field
from typing import Optional

from hardwood.core.contracts.free_agency import FreeAgent
from hardwood.core.draft.order import DraftSlot
from hardwood.core.draft.prospects import DraftProspect
from hardwood.core.enums import Difficulty, PlayoffResult, SeasonPhase
from hardwood.core.models.news import NewsItem
from hardwood.core.models.player import Player
from hardwood.core.models.team import Team, find_team
from hardwood.core.models.team_context import StrategyType
from hardwood.core.risk.records import RiskDecision, SeasonResult
from hardwood.core.trades.execution import TradeProposal


DEFAULT_TOTAL_SEASONS = 3
DEFAULT_OWNER_CONFIDENCE = 70


@dataclass
class GameState:
    """Everything needed to resume a run."""

    session_id: str
    user_team_id: str
    difficulty: Difficulty = Difficulty.MEDIUM
    strategy: StrategyType = StrategyType.STABILITY_FIRST

    season: int = 1
    week: int = 0
    phase: SeasonPhase = SeasonPhase.PRESEASON
    total_seasons: int = DEFAULT_TOTAL_SEASONS
    seed: Optional[int] = None

    fan_approval: int = 50
    owner_confidence: int = DEFAULT_OWNER_CONFIDENCE

    teams: list[Team] = field(default_factory=list)
    free_agents: list[FreeAgent] = field(default_factory=list)
    draft_prospects: list[DraftProspect] = field(default_factory=list)
    draft_order: list[DraftSlot] = field(default_factory=list)
    draft_cursor: int = 0

    trade_history: list[TradeProposal] = field(default_factory=list)
    season_results: list[SeasonResult] = field(default_factory=list)
    risk_decisions: list[RiskDecision] = field(default_factory=list)
    consecutive_tax_years: dict[str, int] = field(default_factory=dict)
    news: list[NewsItem] = field(default_factory=list)
    last_playoff_results: dict[str, PlayoffResult] = field(default_factory=dict)

    @property
    def user_team(self) -> Team:
        team = find_team(self.teams, self.user_team_id)
        if team is None:
            raise ValueError(f"User team {self.user_team_id} is missing from the league")
        return team

    @property
    def all_players(self) -> list[Player]:
        return [p for team in self.teams for p in team.roster]

    @property
    def is_complete(self) -> bool:
        """True once every season of the run has been played."""
        return len(self.season_results) >= self.total_seasons

    @property
    def current_season_played(self) -> bool:
        return any(r.season == self.season for r in self.season_results)

    @property
    def draft_complete(self) -> bool:
        return self.draft_cursor >= len(self.draft_order)

    @property
    def current_draft_slot(self) -> Optional[DraftSlot]:
        if self.draft_complete:
            return None
        return self.draft_order[self.draft_cursor]

    def get_free_agent(self, free_agent_id: str) -> Optional[FreeAgent]:
        for free_agent in self.free_agents:
            if free_agent.id == free_agent_id:
                return free_agent
        return None

    def get_prospect(self, prospect_id: str) -> Optional[DraftProspect]:
        for prospect in self.draft_prospects:
            if prospect.id == prospect_id:
                return prospect
        return None

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "session_id": self.session_id,
            "user_team_id": self.user_team_id,
            "difficulty": self.difficulty.value,
            "strategy": self.strategy.value,
            "season": self.season,
            "week": self.week,
            "phase": self.phase.value,
            "total_seasons": self.total_seasons,
            "seed": self.seed,
            "fan_approval": self.fan_approval,
            "owner_confidence": self.owner_confidence,
            "teams": [t.to_dict() for t in self.teams],
            "free_agents": [fa.to_dict() for fa in self.free_agents],
            "draft_prospects": [p.to_dict() for p in self.draft_prospects],
            "draft_order": [s.to_dict() for s in self.draft_order],
            "draft_cursor": self.draft_cursor,
            "trade_history": [t.to_dict() for t in self.trade_history],
            "season_results": [r.to_dict() for r in self.season_results],
            "risk_decisions": [d.to_dict() for d in self.risk_decisions],
            "consecutive_tax_years": dict(self.consecutive_tax_years),
            "news": [n.to_dict() for n in self.news],
            "last_playoff_results": {k: v.value for k, v in self.last_playoff_results.items()},
        }

    @classmethod
    def from_dict(cls, data: dict) -> "GameState":
        """Create from dictionary."""
        return cls(
            session_id=data["session_id"],
            user_team_id=data["user_team_id"],
            difficulty=Difficulty(data.get("difficulty", "medium")),
            strategy=StrategyType(data.get("strategy", "stability_first")),
            season=data.get("season", 1),
            week=data.get("week", 0),
            phase=SeasonPhase(data.get("phase", "preseason")),
            total_seasons=data.get("total_seasons", DEFAULT_TOTAL_SEASONS),
            seed=data.get("seed"),
            fan_approval=data.get("fan_approval", 50),
            owner_confidence=data.get("owner_confidence", DEFAULT_OWNER_CONFIDENCE),
            teams=[Team.from_dict(t) for t in data.get("teams", [])],
            free_agents=[FreeAgent.from_dict(fa) for fa in data.get("free_agents", [])],
            draft_prospects=[DraftProspect.from_dict(p) for p in data.get("draft_prospects", [])],
            draft_order=[DraftSlot.from_dict(s) for s in data.get("draft_order", [])],
            draft_cursor=data.get("draft_cursor", 0),
            trade_history=[TradeProposal.from_dict(t) for t in data.get("trade_history", [])],
            season_results=[SeasonResult.from_dict(r) for r in data.get("season_results", [])],
            risk_decisions=[RiskDecision.from_dict(d) for d in data.get("risk_decisions", [])],
            consecutive_tax_years=dict(data.get("consecutive_tax_years", {})),
            news=[NewsItem.from_dict(n) for n in data.get("news", [])],
            last_playoff_results={
                k: PlayoffResult(v) for k, v in data.get("last_playoff_results", {}).items()
            },
        )
