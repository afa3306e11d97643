"""
Free agency.

Handles:
- Free-agent pool generation with asking prices
- Player interest in a team's offer
- Difficulty-based acceptance
- Signing (player side) and AI signing choices
"""

import logging
import random
from dataclasses import dataclass, replace
from typing import Optional

from hardwood.core.enums import Difficulty, MarketSize, Position
from hardwood.core.models.player import Player
from hardwood.core.models.team import Team
from hardwood.generators.names import generate_name


logger = logging.getLogger(__name__)


FREE_AGENT_POOL_SIZE = 30
STARTER_RATING = 75
STAR_RATING = 85

# Interest model
BASE_INTEREST = 50
SALARY_RATIO_INTEREST = (      # (minimum offer/asking ratio, interest change)
    (1.2, 25),
    (1.0, 15),
    (0.8, 5),
)
LOWBALL_INTEREST = -15
WINNING_TEAM_PCT = 0.6
ABOVE_AVERAGE_PCT = 0.5
MARKET_INTEREST = {
    MarketSize.LARGE: 10,
    MarketSize.MEDIUM: 3,
    MarketSize.SMALL: -5,
}
PLAYING_TIME_DEPTH = 2
PLAYING_TIME_BONUS = 10
PRESTIGE_INTEREST_DIVISOR = 20

ACCEPT_INTEREST_THRESHOLDS = {
    Difficulty.EASY: 40,
    Difficulty.MEDIUM: 55,
    Difficulty.HARD: 65,
}


@dataclass
class FreeAgent:
    """An unsigned player with contract demands."""
    player: Player
    asking_price: float
    years_wanted: int

    @property
    def id(self) -> str:
        return self.player.id

    def to_dict(self) -> dict:
        return {
            "player": self.player.to_dict(),
            "asking_price": self.asking_price,
            "years_wanted": self.years_wanted,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "FreeAgent":
        return cls(
            player=Player.from_dict(data["player"]),
            asking_price=data.get("asking_price", 1.0),
            years_wanted=data.get("years_wanted", 1),
        )


def asking_price_for(overall_rating: int, potential: int) -> float:
    """Annual ask ($M) from current rating and remaining upside."""
    return float(max(2, round((overall_rating - 60) * 0.8 + (potential - overall_rating) * 0.3)))


def years_wanted_for(age: int) -> int:
    if age > 32:
        return 1
    if age > 28:
        return 2
    return 3


def make_free_agent(player: Player) -> FreeAgent:
    """Wrap a released player with demands derived from their profile."""
    unsigned = replace(player, team_id=None, is_starter=False, contract_years=0)
    return FreeAgent(
        player=unsigned,
        asking_price=asking_price_for(player.overall_rating, player.potential),
        years_wanted=years_wanted_for(player.age),
    )


def generate_free_agents(
    count: int = FREE_AGENT_POOL_SIZE,
    rng: Optional[random.Random] = None,
    season: int = 1,
) -> list[FreeAgent]:
    """Generate a pool of veterans and journeymen, best first."""
    rng = rng or random.Random()
    pool = []

    for i in range(count):
        age = rng.randint(22, 35)
        overall = rng.randint(62, 83)
        potential = min(99, overall + rng.randint(0, 12 if age < 26 else 5))

        player = Player(
            id=f"fa-{season}-{i + 1}",
            name=generate_name(rng),
            position=rng.choice(list(Position)),
            age=age,
            overall_rating=overall,
            potential=potential,
            offense=max(40, min(99, overall + rng.randint(-6, 6))),
            defense=max(40, min(99, overall + rng.randint(-6, 6))),
            athleticism=max(40, min(99, overall + rng.randint(-8, 4) - max(0, age - 30))),
            basketball_iq=max(40, min(99, overall + rng.randint(-4, 8))),
            durability=rng.randint(60, 94),
            salary=0.0,
            contract_years=0,
            team_id=None,
            is_starter=overall >= STARTER_RATING,
            is_star=overall >= STAR_RATING,
            morale=70,
            experience=max(0, age - 20),
        )
        pool.append(FreeAgent(
            player=player,
            asking_price=asking_price_for(overall, potential),
            years_wanted=years_wanted_for(age),
        ))

    pool.sort(key=lambda fa: fa.player.overall_rating, reverse=True)
    return pool


def calculate_player_interest(
    player: Player,
    team: Team,
    offer_salary: float,
    asking_price: float,
) -> int:
    """
    How interested a free agent is in a team's offer, 0-100.

    Money matters most, then winning, market, playing time and prestige.
    """
    interest = BASE_INTEREST

    ratio = offer_salary / asking_price if asking_price > 0 else float("inf")
    for minimum, change in SALARY_RATIO_INTEREST:
        if ratio >= minimum:
            interest += change
            break
    else:
        interest += LOWBALL_INTEREST

    if team.win_pct > WINNING_TEAM_PCT:
        interest += 15
    elif team.win_pct > ABOVE_AVERAGE_PCT:
        interest += 5
    else:
        interest -= 10

    interest += MARKET_INTEREST[team.market_size]

    same_position = team.players_at(player.position)
    if len(same_position) < PLAYING_TIME_DEPTH:
        interest += PLAYING_TIME_BONUS
    if all(p.overall_rating < player.overall_rating for p in same_position):
        interest += PLAYING_TIME_BONUS

    interest += team.prestige // PRESTIGE_INTEREST_DIVISOR

    return max(0, min(100, interest))


def will_accept_offer(interest: int, difficulty: Difficulty) -> bool:
    return interest >= ACCEPT_INTEREST_THRESHOLDS[difficulty]


def sign_free_agent(free_agent: FreeAgent, team: Team, salary: float, years: int) -> Player:
    """The signed player on their new contract."""
    player = free_agent.player
    return replace(
        player,
        team_id=team.id,
        salary=salary,
        contract_years=years,
        is_starter=player.overall_rating > STARTER_RATING,
    )


def ai_choose_free_agent(team: Team, pool: list[FreeAgent], roster_limit: int) -> Optional[FreeAgent]:
    """
    Best affordable free agent for an AI team, or None.

    AI teams pay the asking price, stay under the cap and never exceed
    the roster limit.
    """
    if len(team.roster) >= roster_limit:
        return None
    affordable = [fa for fa in pool if fa.asking_price <= team.cap_space]
    if not affordable:
        return None

    def score(fa: FreeAgent) -> float:
        need = 5.0 if len(team.players_at(fa.player.position)) < PLAYING_TIME_DEPTH else 0.0
        return fa.player.overall_rating + need

    return max(affordable, key=score)
