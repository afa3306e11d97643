"""
Franchise router.

Handles core franchise operations:
- Create/get/delete franchise runs
- Team detail
- Phase advancement and season simulation
- Strategy changes and end-of-run evaluation
"""

from fastapi import APIRouter, HTTPException

from hardwood.api.schemas.franchise import (
    CreateFranchiseRequest,
    EvaluationResponse,
    FranchiseCreatedResponse,
    FranchiseSummaryResponse,
    NewsItemResponse,
    PhaseResponse,
    SeasonSimResponse,
    StrategyRequest,
    StrategyResponse,
    TeamDetailResponse,
)
from hardwood.api.services.session_manager import session_manager
from hardwood.core.enums import Difficulty
from hardwood.core.models.team import find_team
from hardwood.core.models.team_context import StrategyType

from .deps import get_session, phase_guard, team_to_detail, team_to_summary

router = APIRouter(tags=["franchise"])

RECENT_NEWS_COUNT = 20


@router.post("/franchise", response_model=FranchiseCreatedResponse)
async def create_franchise(request: CreateFranchiseRequest) -> FranchiseCreatedResponse:
    """Start a new franchise run with a freshly generated league."""
    try:
        session = session_manager.create_session(
            team_id=request.team_id,
            difficulty=Difficulty(request.difficulty.value),
            strategy=StrategyType(request.strategy.value),
            seed=request.seed,
            total_seasons=request.total_seasons,
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e

    state = session.state
    return FranchiseCreatedResponse(
        franchise_id=state.session_id,
        team_id=state.user_team_id,
        team_name=state.user_team.full_name,
        season=state.season,
        phase=state.phase.value,
    )


@router.get("/franchise/{franchise_id}", response_model=FranchiseSummaryResponse)
async def get_franchise(franchise_id: str) -> FranchiseSummaryResponse:
    """Current state of a franchise run."""
    state = get_session(franchise_id).state
    standings = sorted(state.teams, key=lambda t: (-t.wins, t.losses))
    return FranchiseSummaryResponse(
        franchise_id=state.session_id,
        season=state.season,
        week=state.week,
        phase=state.phase.value,
        total_seasons=state.total_seasons,
        difficulty=state.difficulty.value,
        strategy=state.strategy.value,
        fan_approval=state.fan_approval,
        owner_confidence=state.owner_confidence,
        is_complete=state.is_complete,
        user_team=team_to_summary(state.user_team),
        standings=[team_to_summary(t) for t in standings],
        season_results=[r.to_dict() for r in state.season_results],
        news=[NewsItemResponse.model_validate(n.to_dict()) for n in state.news[-RECENT_NEWS_COUNT:]],
    )


@router.delete("/franchise/{franchise_id}")
async def delete_franchise(franchise_id: str) -> dict:
    """End a franchise run."""
    if not session_manager.remove_session(franchise_id):
        raise HTTPException(status_code=404, detail="Franchise not found")
    return {"deleted": franchise_id}


@router.get("/franchise/{franchise_id}/teams/{team_id}", response_model=TeamDetailResponse)
async def get_team(franchise_id: str, team_id: str) -> TeamDetailResponse:
    """Roster, payroll and pick inventory for one team."""
    team = find_team(get_session(franchise_id).state.teams, team_id)
    if team is None:
        raise HTTPException(status_code=404, detail="Team not found")
    return team_to_detail(team)


@router.post("/franchise/{franchise_id}/phase/advance", response_model=PhaseResponse)
async def advance_phase(franchise_id: str) -> PhaseResponse:
    """Move to the next phase of the franchise year."""
    session = get_session(franchise_id)
    previous = session.state.phase
    with phase_guard():
        phase = session.advance_phase()
    return PhaseResponse(
        previous_phase=previous.value,
        phase=phase.value,
        season=session.state.season,
    )


@router.post("/franchise/{franchise_id}/strategy", response_model=StrategyResponse)
async def set_strategy(franchise_id: str, request: StrategyRequest) -> StrategyResponse:
    outcome = get_session(franchise_id).set_strategy(StrategyType(request.strategy.value))
    return StrategyResponse(
        changed=outcome.changed,
        compatibility=outcome.compatibility.value,
        message=outcome.message,
    )


@router.post("/franchise/{franchise_id}/season/simulate", response_model=SeasonSimResponse)
async def simulate_season(franchise_id: str) -> SeasonSimResponse:
    """Play the regular season and playoffs."""
    session = get_session(franchise_id)
    with phase_guard():
        report = session.simulate_season()

    result = report.result
    return SeasonSimResponse(
        season=result.season,
        wins=result.wins,
        losses=result.losses,
        playoff_result=result.playoff_result.value,
        champion_team_id=result.champion_team_id,
        mvp_name=result.mvp_name,
        fan_approval=result.fan_approval,
        owner_confidence=result.owner_confidence,
        risk_rating=result.risk_rating.value,
        volatility_score=result.volatility_score,
        financials=result.financials.to_dict() if result.financials else None,
        bracket=report.bracket.to_dict(),
    )


@router.get("/franchise/{franchise_id}/evaluation", response_model=EvaluationResponse)
async def get_evaluation(franchise_id: str) -> EvaluationResponse:
    """Evaluation over every season played so far."""
    evaluation = get_session(franchise_id).evaluate()
    return EvaluationResponse.model_validate(evaluation.to_dict())
