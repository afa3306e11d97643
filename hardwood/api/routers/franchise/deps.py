"""
Shared dependencies for franchise sub-routers.

Contains session lookup, error translation and response converters.
"""

from contextlib import contextmanager
from typing import Iterator

from fastapi import HTTPException

from hardwood.api.schemas.franchise import (
    DraftSlotResponse,
    PlayerResponse,
    TeamDetailResponse,
    TeamSummaryResponse,
)
from hardwood.api.services.session_manager import session_manager
from hardwood.core.draft.order import DraftSlot
from hardwood.core.models.player import Player
from hardwood.core.models.team import Team
from hardwood.management.outcomes import PhaseError
from hardwood.management.session import GameSession


def get_session(franchise_id: str) -> GameSession:
    """
    Get a franchise session by ID.

    Raises HTTPException 404 if not found.
    """
    session = session_manager.get_session(franchise_id)
    if not session:
        raise HTTPException(status_code=404, detail="Franchise not found")
    return session


@contextmanager
def phase_guard() -> Iterator[None]:
    """Translate wrong-phase actions into 409 Conflict."""
    try:
        yield
    except PhaseError as e:
        raise HTTPException(status_code=409, detail=str(e)) from e


def player_to_response(player: Player) -> PlayerResponse:
    return PlayerResponse.model_validate(player.to_dict())


def slot_to_response(slot: DraftSlot) -> DraftSlotResponse:
    return DraftSlotResponse.model_validate(slot.to_dict())


def team_to_summary(team: Team) -> TeamSummaryResponse:
    return TeamSummaryResponse.model_validate(team.to_dict())


def team_to_detail(team: Team) -> TeamDetailResponse:
    return TeamDetailResponse.model_validate(team.to_dict())
