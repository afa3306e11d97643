"""
League Generation.

This module builds a complete 30-team league: fifteen franchises per
conference, five per division, each with a context archetype, market
profile, a generated 13-man roster and its two seasons of draft picks.
"""

import logging
import random
from dataclasses import dataclass
from typing import Optional

from hardwood.core.draft.picks import create_team_picks
from hardwood.core.enums import Division, MarketSize
from hardwood.core.models.player import Player
from hardwood.core.models.team import Team, roster_salary
from hardwood.core.models.team_context import TeamContextType
from hardwood.generators.player import MIN_SALARY, generate_roster


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FranchiseSeed:
    """Static data for one franchise."""
    id: str
    city: str
    name: str
    abbreviation: str
    division: Division
    context_type: TeamContextType
    market_size: MarketSize
    fanbase: int
    prestige: int
    base_wins: int   # Rough expected win total, drives roster strength


_LEGACY = TeamContextType.LEGACY_POWER
_SMALL = TeamContextType.SMALL_MARKET_RESET
_REVENUE = TeamContextType.REVENUE_SENSITIVE
_CASH = TeamContextType.CASH_RICH_EXPANSION
_STAR = TeamContextType.STAR_DEPENDENT

_L, _M, _S = MarketSize.LARGE, MarketSize.MEDIUM, MarketSize.SMALL


FRANCHISES: tuple[FranchiseSeed, ...] = (
    # Eastern - Atlantic
    FranchiseSeed("bos", "Boston", "Shamrocks", "BOS", Division.ATLANTIC, _LEGACY, _L, 90, 95, 55),
    FranchiseSeed("bkn", "Brooklyn", "Bridges", "BKN", Division.ATLANTIC, _CASH, _L, 60, 55, 32),
    FranchiseSeed("nyc", "New York", "Empire", "NYC", Division.ATLANTIC, _LEGACY, _L, 92, 80, 48),
    FranchiseSeed("phi", "Philadelphia", "Liberty", "PHI", Division.ATLANTIC, _STAR, _L, 75, 70, 42),
    FranchiseSeed("tor", "Toronto", "Huskies", "TOR", Division.ATLANTIC, _SMALL, _M, 70, 65, 30),
    # Eastern - Central
    FranchiseSeed("chi", "Chicago", "Wind", "CHI", Division.CENTRAL, _LEGACY, _L, 85, 85, 38),
    FranchiseSeed("cle", "Cleveland", "Rockers", "CLE", Division.CENTRAL, _SMALL, _S, 60, 60, 48),
    FranchiseSeed("det", "Detroit", "Motors", "DET", Division.CENTRAL, _REVENUE, _M, 50, 55, 25),
    FranchiseSeed("ind", "Indiana", "Racers", "IND", Division.CENTRAL, _SMALL, _S, 55, 55, 45),
    FranchiseSeed("mil", "Milwaukee", "Stags", "MIL", Division.CENTRAL, _STAR, _S, 65, 75, 49),
    # Eastern - Southeast
    FranchiseSeed("atl", "Atlanta", "Firebirds", "ATL", Division.SOUTHEAST, _REVENUE, _M, 50, 50, 36),
    FranchiseSeed("cha", "Charlotte", "Stingers", "CHA", Division.SOUTHEAST, _REVENUE, _S, 40, 35, 24),
    FranchiseSeed("mia", "Miami", "Tides", "MIA", Division.SOUTHEAST, _LEGACY, _L, 80, 85, 44),
    FranchiseSeed("orl", "Orlando", "Comets", "ORL", Division.SOUTHEAST, _SMALL, _S, 45, 45, 42),
    FranchiseSeed("was", "Washington", "Senators", "WAS", Division.SOUTHEAST, _REVENUE, _M, 45, 40, 22),
    # Western - Northwest
    FranchiseSeed("den", "Denver", "Peaks", "DEN", Division.NORTHWEST, _STAR, _M, 60, 75, 50),
    FranchiseSeed("min", "Minnesota", "Loons", "MIN", Division.NORTHWEST, _SMALL, _S, 50, 45, 46),
    FranchiseSeed("okc", "Oklahoma City", "Storm", "OKC", Division.NORTHWEST, _SMALL, _S, 65, 70, 57),
    FranchiseSeed("por", "Portland", "Pioneers", "POR", Division.NORTHWEST, _REVENUE, _S, 55, 50, 24),
    FranchiseSeed("slc", "Salt Lake", "Summit", "SLC", Division.NORTHWEST, _SMALL, _S, 50, 50, 28),
    # Western - Pacific
    FranchiseSeed("sfo", "San Francisco", "Fog", "SFO", Division.PACIFIC, _LEGACY, _L, 90, 92, 42),
    FranchiseSeed("lab", "Los Angeles", "Breakers", "LAB", Division.PACIFIC, _CASH, _L, 50, 55, 38),
    FranchiseSeed("las", "Los Angeles", "Stars", "LAS", Division.PACIFIC, _LEGACY, _L, 95, 98, 42),
    FranchiseSeed("phx", "Phoenix", "Scorch", "PHX", Division.PACIFIC, _STAR, _M, 60, 60, 40),
    FranchiseSeed("sac", "Sacramento", "Monarchs", "SAC", Division.PACIFIC, _REVENUE, _S, 50, 40, 40),
    # Western - Southwest
    FranchiseSeed("dal", "Dallas", "Outlaws", "DAL", Division.SOUTHWEST, _STAR, _L, 70, 70, 48),
    FranchiseSeed("hou", "Houston", "Orbit", "HOU", Division.SOUTHWEST, _SMALL, _L, 60, 60, 38),
    FranchiseSeed("mem", "Memphis", "Blues", "MEM", Division.SOUTHWEST, _SMALL, _S, 55, 55, 44),
    FranchiseSeed("nol", "New Orleans", "Brass", "NOL", Division.SOUTHWEST, _REVENUE, _S, 40, 40, 30),
    FranchiseSeed("sat", "San Antonio", "Missions", "SAT", Division.SOUTHWEST, _SMALL, _S, 65, 80, 35),
)

FRANCHISES_BY_ID: dict[str, FranchiseSeed] = {f.id: f for f in FRANCHISES}


# Roster strength from expected wins
MIN_BASE_WINS = 22
BASE_RATING = 66
RATING_PER_WIN = 0.35

# Opening payroll target, scaled by roster strength
PAYROLL_MIN_TARGET = 112.0
PAYROLL_STRENGTH_RANGE = 48.0
PAYROLL_NOISE = 8.0
BASE_WINS_SPAN = 35


def base_rating_for(seed: FranchiseSeed) -> int:
    return BASE_RATING + round(max(0, seed.base_wins - MIN_BASE_WINS) * RATING_PER_WIN)


def fit_payroll(roster: list[Player], target: float) -> list[Player]:
    """
    Scale salaries proportionally so the roster pays about `target`.

    Relative pay between players is kept; nobody drops below the minimum.
    """
    current = roster_salary(roster)
    if current <= 0:
        return roster
    factor = target / current
    for player in roster:
        player.salary = round(max(MIN_SALARY, player.salary * factor), 1)
    return roster


def generate_team(seed: FranchiseSeed, rng: Optional[random.Random] = None) -> Team:
    """
    Generate one franchise from its seed.

    Args:
        seed: Static franchise data
        rng: Random source

    Returns:
        Team with a 13-man roster, payroll in a realistic band and
        draft picks for the next two seasons
    """
    rng = rng or random.Random()
    roster = generate_roster(seed.id, base_rating_for(seed), rng)

    strength = min(1.0, max(0, seed.base_wins - MIN_BASE_WINS) / BASE_WINS_SPAN)
    target = (
        PAYROLL_MIN_TARGET
        + strength * PAYROLL_STRENGTH_RANGE
        + rng.uniform(-PAYROLL_NOISE, PAYROLL_NOISE)
    )
    roster = fit_payroll(roster, target)

    team = Team(
        id=seed.id,
        city=seed.city,
        name=seed.name,
        abbreviation=seed.abbreviation,
        conference=seed.division.conference,
        division=seed.division,
        context_type=seed.context_type,
        market_size=seed.market_size,
        fanbase=seed.fanbase,
        prestige=seed.prestige,
        draft_picks=create_team_picks(seed.id, 1),
    )
    return team.with_roster(roster)


def generate_league(rng: Optional[random.Random] = None) -> list[Team]:
    """
    Generate every franchise in the league.

    Returns:
        30 teams in conference/division order
    """
    rng = rng or random.Random()
    teams = [generate_team(seed, rng) for seed in FRANCHISES]
    logger.info(
        "Generated league: %d teams, %d players",
        len(teams), sum(len(t.roster) for t in teams),
    )
    return teams
