"""API schemas."""

from hardwood.api.schemas.franchise import (
    AutoDraftRequest,
    CreateFranchiseRequest,
    DifficultySchema,
    DraftPickRequest,
    DraftResponse,
    DraftStateResponse,
    EvaluationResponse,
    FranchiseCreatedResponse,
    FranchiseSummaryResponse,
    FreeAgentResponse,
    PhaseResponse,
    SeasonSimResponse,
    SignRequest,
    SigningResponse,
    StrategyRequest,
    StrategyResponse,
    StrategySchema,
    TeamDetailResponse,
    TradeRequest,
    TradeResponse,
)

__all__ = [
    "AutoDraftRequest",
    "CreateFranchiseRequest",
    "DifficultySchema",
    "DraftPickRequest",
    "DraftResponse",
    "DraftStateResponse",
    "EvaluationResponse",
    "FranchiseCreatedResponse",
    "FranchiseSummaryResponse",
    "FreeAgentResponse",
    "PhaseResponse",
    "SeasonSimResponse",
    "SignRequest",
    "SigningResponse",
    "StrategyRequest",
    "StrategyResponse",
    "StrategySchema",
    "TeamDetailResponse",
    "TradeRequest",
    "TradeResponse",
]
