"""Event system for franchise sessions."""

from hardwood.events.bus import EventBus
from hardwood.events.types import (
    FranchiseEvent,
    PhaseChangedEvent,
    PlayerDraftedEvent,
    PlayerSignedEvent,
    SeasonCompletedEvent,
    TradeCompletedEvent,
)

__all__ = [
    "EventBus",
    "FranchiseEvent",
    "PhaseChangedEvent",
    "PlayerDraftedEvent",
    "PlayerSignedEvent",
    "SeasonCompletedEvent",
    "TradeCompletedEvent",
]
