"""Content generators."""

from hardwood.generators.league import (
    FRANCHISES,
    FRANCHISES_BY_ID,
    FranchiseSeed,
    generate_league,
    generate_team,
)
from hardwood.generators.names import generate_name
from hardwood.generators.player import generate_player, generate_roster, market_salary

__all__ = [
    # League generation
    "FRANCHISES",
    "FRANCHISES_BY_ID",
    "FranchiseSeed",
    "generate_league",
    "generate_team",
    # Player generation
    "generate_name",
    "generate_player",
    "generate_roster",
    "market_salary",
]
