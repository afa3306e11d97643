"""
Free agency router.

Handles the free agent pool listing and contract offers.
"""

from fastapi import APIRouter

from hardwood.api.schemas.franchise import FreeAgentResponse, SigningResponse, SignRequest

from .deps import get_session, phase_guard, player_to_response

router = APIRouter(tags=["free_agency"])


@router.get("/franchise/{franchise_id}/free-agents", response_model=list[FreeAgentResponse])
async def list_free_agents(franchise_id: str) -> list[FreeAgentResponse]:
    """Free agent pool, best first."""
    pool = sorted(
        get_session(franchise_id).state.free_agents,
        key=lambda fa: fa.player.overall_rating,
        reverse=True,
    )
    return [
        FreeAgentResponse(
            id=fa.id,
            player=player_to_response(fa.player),
            asking_price=fa.asking_price,
            years_wanted=fa.years_wanted,
        )
        for fa in pool
    ]


@router.post("/franchise/{franchise_id}/free-agents/sign", response_model=SigningResponse)
async def sign_free_agent(franchise_id: str, request: SignRequest) -> SigningResponse:
    session = get_session(franchise_id)
    with phase_guard():
        outcome = session.sign_player(request.free_agent_id, request.salary, request.years)
    return SigningResponse(
        success=outcome.success,
        message=outcome.message,
        player=player_to_response(outcome.player) if outcome.player else None,
        interest=outcome.interest,
    )
