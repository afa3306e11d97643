"""Pydantic schemas for the franchise API."""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field


# === Enums (mirroring the core enums) ===

class DifficultySchema(str, Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


class StrategySchema(str, Enum):
    STABILITY_FIRST = "stability_first"
    AGGRESSIVE_PUSH = "aggressive_push"
    BOOM_BUST_SWING = "boom_bust_swing"


# === Requests ===

class CreateFranchiseRequest(BaseModel):
    """Request to start a new franchise run."""
    team_id: str
    difficulty: DifficultySchema = DifficultySchema.MEDIUM
    strategy: StrategySchema = StrategySchema.STABILITY_FIRST
    seed: Optional[int] = None
    total_seasons: int = Field(default=3, ge=1, le=20)


class TradeRequest(BaseModel):
    """Trade offer from the user's team; ids refer to players and pick_ids."""
    to_team_id: str
    players_offered: list[str] = Field(default_factory=list)
    players_requested: list[str] = Field(default_factory=list)
    picks_offered: list[str] = Field(default_factory=list)
    picks_requested: list[str] = Field(default_factory=list)


class SignRequest(BaseModel):
    free_agent_id: str
    salary: float = Field(gt=0)
    years: int = Field(ge=1, le=5)


class DraftPickRequest(BaseModel):
    prospect_id: str


class AutoDraftRequest(BaseModel):
    stop_at_user: bool = True


class StrategyRequest(BaseModel):
    strategy: StrategySchema


# === Responses ===

class PlayerResponse(BaseModel):
    id: str
    name: str
    position: str
    age: int
    overall_rating: int
    potential: int
    salary: float
    contract_years: int
    team_id: Optional[str] = None
    is_starter: bool = False
    is_star: bool = False


class DraftPickResponse(BaseModel):
    pick_id: str
    year: int
    round: int
    original_team_id: str
    current_team_id: str
    projected_position: Optional[int] = None


class TeamSummaryResponse(BaseModel):
    """Team without roster detail, for standings and listings."""
    id: str
    city: str
    name: str
    abbreviation: str
    conference: str
    division: str
    context_type: str
    market_size: str
    total_salary: float
    wins: int
    losses: int


class TeamDetailResponse(TeamSummaryResponse):
    fanbase: int
    prestige: int
    salary_cap: float
    roster: list[PlayerResponse]
    draft_picks: list[DraftPickResponse]


class NewsItemResponse(BaseModel):
    id: str
    season: int
    week: int
    news_type: str
    headline: str
    team_ids: list[str] = Field(default_factory=list)


class FranchiseCreatedResponse(BaseModel):
    franchise_id: str
    team_id: str
    team_name: str
    season: int
    phase: str


class FranchiseSummaryResponse(BaseModel):
    """Current state of a franchise run."""
    franchise_id: str
    season: int
    week: int
    phase: str
    total_seasons: int
    difficulty: str
    strategy: str
    fan_approval: int
    owner_confidence: int
    is_complete: bool
    user_team: TeamSummaryResponse
    standings: list[TeamSummaryResponse]
    season_results: list[dict[str, Any]] = Field(default_factory=list)
    news: list[NewsItemResponse] = Field(default_factory=list)


class PhaseResponse(BaseModel):
    previous_phase: str
    phase: str
    season: int


class StrategyResponse(BaseModel):
    changed: bool
    compatibility: str
    message: str


class TradeResponse(BaseModel):
    accepted: bool
    message: str
    proposal: Optional[dict[str, Any]] = None
    evaluation: Optional[dict[str, Any]] = None
    salary_check: Optional[dict[str, Any]] = None


class FreeAgentResponse(BaseModel):
    id: str
    player: PlayerResponse
    asking_price: float
    years_wanted: int


class SigningResponse(BaseModel):
    success: bool
    message: str
    player: Optional[PlayerResponse] = None
    interest: Optional[int] = None


class ProspectResponse(BaseModel):
    id: str
    name: str
    position: str
    age: int
    overall_rating: int
    potential: int
    floor: int
    ceiling: int
    variance: int
    rank: int


class DraftSlotResponse(BaseModel):
    overall_pick: int
    round: int
    pick_in_round: int
    team_id: str
    original_team_id: str


class DraftStateResponse(BaseModel):
    season: int
    complete: bool
    user_on_clock: bool
    current_slot: Optional[DraftSlotResponse] = None
    user_slots: list[DraftSlotResponse] = Field(default_factory=list)
    prospects: list[ProspectResponse] = Field(default_factory=list)


class DraftResponse(BaseModel):
    success: bool
    message: str
    player: Optional[PlayerResponse] = None
    slot: Optional[DraftSlotResponse] = None
    team_id: Optional[str] = None


class SeasonSimResponse(BaseModel):
    """Summary of a simulated season for the user's team."""
    season: int
    wins: int
    losses: int
    playoff_result: str
    champion_team_id: Optional[str] = None
    mvp_name: Optional[str] = None
    fan_approval: int
    owner_confidence: int
    risk_rating: str
    volatility_score: float
    financials: Optional[dict[str, Any]] = None
    bracket: dict[str, Any]


class EvaluationResponse(BaseModel):
    context_score: int
    financial_score: int
    performance_score: int
    understanding_score: int
    expected_risk_level: str
    actual_risk_level: str
    gm_title: str
    gm_description: str
    volatility: dict[str, Any]
    championships: int
    playoff_appearances: int
    total_wins: int
    average_profit: float
    high_risk_moves: int
    successful_high_risk_moves: int
    lessons: list[str] = Field(default_factory=list)
