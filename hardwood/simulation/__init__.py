"""Game, season and playoff simulation."""

from hardwood.simulation.game import GameResult, calculate_team_strength, simulate_game
from hardwood.simulation.playoffs import (
    PlayoffBracket,
    PlayoffRound,
    SeriesResult,
    simulate_playoffs,
    simulate_series,
)
from hardwood.simulation.season import (
    SEASON_GAMES,
    SEASON_WEEKS,
    Injury,
    RegularSeasonResult,
    TeamRecord,
    WeekResult,
    apply_standings,
    generate_schedule,
    get_season_mvp,
    simulate_regular_season,
)

__all__ = [
    "SEASON_GAMES",
    "SEASON_WEEKS",
    "GameResult",
    "Injury",
    "PlayoffBracket",
    "PlayoffRound",
    "RegularSeasonResult",
    "SeriesResult",
    "TeamRecord",
    "WeekResult",
    "apply_standings",
    "calculate_team_strength",
    "generate_schedule",
    "get_season_mvp",
    "simulate_game",
    "simulate_playoffs",
    "simulate_regular_season",
    "simulate_series",
]
