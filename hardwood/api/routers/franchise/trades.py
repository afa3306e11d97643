"""
Trade router.

Handles trade previews and proposals from the user's team.
"""

from fastapi import APIRouter

from hardwood.api.schemas.franchise import TradeRequest, TradeResponse
from hardwood.management.outcomes import TradeOutcome

from .deps import get_session, phase_guard

router = APIRouter(tags=["trades"])


def _to_response(outcome: TradeOutcome) -> TradeResponse:
    return TradeResponse.model_validate(outcome.to_dict())


@router.post("/franchise/{franchise_id}/trades/evaluate", response_model=TradeResponse)
async def evaluate_trade(franchise_id: str, request: TradeRequest) -> TradeResponse:
    """Evaluate a trade and predict the AI verdict without executing it."""
    outcome = get_session(franchise_id).preview_trade(
        request.to_team_id,
        request.players_offered,
        request.players_requested,
        request.picks_offered,
        request.picks_requested,
    )
    return _to_response(outcome)


@router.post("/franchise/{franchise_id}/trades/propose", response_model=TradeResponse)
async def propose_trade(franchise_id: str, request: TradeRequest) -> TradeResponse:
    """Offer a trade; accepted trades are executed immediately."""
    session = get_session(franchise_id)
    with phase_guard():
        outcome = session.propose_trade(
            request.to_team_id,
            request.players_offered,
            request.players_requested,
            request.picks_offered,
            request.picks_requested,
        )
    return _to_response(outcome)
