"""
Draft router.

Handles the draft board, user selections and AI auto-drafting.
"""

from fastapi import APIRouter

from hardwood.api.schemas.franchise import (
    AutoDraftRequest,
    DraftPickRequest,
    DraftResponse,
    DraftStateResponse,
    ProspectResponse,
)
from hardwood.management.outcomes import DraftOutcome

from .deps import get_session, phase_guard, player_to_response, slot_to_response

router = APIRouter(tags=["draft"])


def _to_response(outcome: DraftOutcome) -> DraftResponse:
    return DraftResponse(
        success=outcome.success,
        message=outcome.message,
        player=player_to_response(outcome.player) if outcome.player else None,
        slot=slot_to_response(outcome.slot) if outcome.slot else None,
        team_id=outcome.team_id,
    )


@router.get("/franchise/{franchise_id}/draft", response_model=DraftStateResponse)
async def get_draft(franchise_id: str) -> DraftStateResponse:
    """Draft board: available prospects, the slot on the clock and the user's picks."""
    state = get_session(franchise_id).state
    current = state.current_draft_slot
    remaining = state.draft_order[state.draft_cursor:]
    return DraftStateResponse(
        season=state.season,
        complete=state.draft_complete,
        user_on_clock=current is not None and current.team_id == state.user_team_id,
        current_slot=slot_to_response(current) if current else None,
        user_slots=[slot_to_response(s) for s in remaining if s.team_id == state.user_team_id],
        prospects=[ProspectResponse.model_validate(p.to_dict()) for p in state.draft_prospects],
    )


@router.post("/franchise/{franchise_id}/draft/pick", response_model=DraftResponse)
async def draft_pick(franchise_id: str, request: DraftPickRequest) -> DraftResponse:
    """Make the user's next pick; AI teams ahead of the user pick first."""
    session = get_session(franchise_id)
    with phase_guard():
        outcome = session.draft_player(request.prospect_id)
    return _to_response(outcome)


@router.post("/franchise/{franchise_id}/draft/auto", response_model=list[DraftResponse])
async def auto_draft(franchise_id: str, request: AutoDraftRequest) -> list[DraftResponse]:
    session = get_session(franchise_id)
    with phase_guard():
        outcomes = session.auto_draft(stop_at_user=request.stop_at_user)
    return [_to_response(o) for o in outcomes]
