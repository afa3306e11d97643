"""
Franchise management layer.

A GameSession owns one run's GameState and drives it through the
franchise year: trades, signings, the draft and season simulation.
"""

from hardwood.management.outcomes import (
    DraftOutcome,
    PhaseError,
    SeasonReport,
    SigningOutcome,
    StrategyOutcome,
    TradeOutcome,
)
from hardwood.management.persistence import load_game, save_game
from hardwood.management.session import GameSession, fan_approval_change, owner_confidence_change
from hardwood.management.state import GameState

__all__ = [
    "DraftOutcome",
    "GameSession",
    "GameState",
    "PhaseError",
    "SeasonReport",
    "SigningOutcome",
    "StrategyOutcome",
    "TradeOutcome",
    "fan_approval_change",
    "load_game",
    "owner_confidence_change",
    "save_game",
]
