"""
Contracts module for free agency.

This module provides:
- Free-agent pool generation and asking prices
- Player interest and acceptance rules
- Signing and AI signing choices
"""

from hardwood.core.contracts.free_agency import (
    FreeAgent,
    ai_choose_free_agent,
    calculate_player_interest,
    generate_free_agents,
    make_free_agent,
    sign_free_agent,
    will_accept_offer,
)

__all__ = [
    "FreeAgent",
    "ai_choose_free_agent",
    "calculate_player_interest",
    "generate_free_agents",
    "make_free_agent",
    "sign_free_agent",
    "will_accept_offer",
]
