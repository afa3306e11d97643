"""Core data models."""

from hardwood.core.models.news import NewsItem, NewsType
from hardwood.core.models.player import Player
from hardwood.core.models.team import Team, find_team, replace_teams, roster_salary
from hardwood.core.models.team_context import (
    CONTEXT_PROFILES,
    STRATEGY_PROFILES,
    Compatibility,
    StrategyProfile,
    StrategyType,
    TeamContextProfile,
    TeamContextType,
    get_context_compatibility,
    get_context_profile,
    get_strategy_profile,
)

__all__ = [
    "CONTEXT_PROFILES",
    "Compatibility",
    "NewsItem",
    "NewsType",
    "Player",
    "STRATEGY_PROFILES",
    "StrategyProfile",
    "StrategyType",
    "Team",
    "TeamContextProfile",
    "TeamContextType",
    "find_team",
    "get_context_compatibility",
    "get_context_profile",
    "get_strategy_profile",
    "replace_teams",
    "roster_salary",
]
