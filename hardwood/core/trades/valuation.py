"""
Trade valuation primitives.

Handles:
- Tier classification (superstar / star / quality starter / role player / filler)
- Individual player value
- Multi-player package value with diminishing returns and tier ceilings

Tier base values are separated by large multiplicative gaps and every
tier's combined contribution is capped below the next tier's base value,
so no quantity of lesser players adds up to one better player.
"""

import logging
from enum import Enum
from typing import Iterable, Optional

from hardwood.core.models.player import Player


logger = logging.getLogger(__name__)


class PlayerTier(Enum):
    """Quality brackets, best first."""

    SUPERSTAR = "superstar"
    STAR = "star"
    QUALITY_STARTER = "quality_starter"
    ROLE_PLAYER = "role_player"
    FILLER = "filler"

    @property
    def rank(self) -> int:
        """0 for superstar up to 4 for filler."""
        return list(PlayerTier).index(self)


# =============================================================================
# Tier parameters
# =============================================================================

SUPERSTAR_MIN_RATING = 90
STAR_MIN_RATING = 85
QUALITY_STARTER_MIN_RATING = 78
ROLE_PLAYER_MIN_RATING = 70

TIER_MIN_RATINGS = {
    PlayerTier.SUPERSTAR: SUPERSTAR_MIN_RATING,
    PlayerTier.STAR: STAR_MIN_RATING,
    PlayerTier.QUALITY_STARTER: QUALITY_STARTER_MIN_RATING,
    PlayerTier.ROLE_PLAYER: ROLE_PLAYER_MIN_RATING,
    PlayerTier.FILLER: 40,
}

TIER_BASE_VALUES = {
    PlayerTier.SUPERSTAR: 500.0,
    PlayerTier.STAR: 250.0,
    PlayerTier.QUALITY_STARTER: 80.0,
    PlayerTier.ROLE_PLAYER: 25.0,
    PlayerTier.FILLER: 5.0,
}

# Combined value cap per tier in a package; each sits below the next tier's base
TIER_CEILINGS = {
    PlayerTier.SUPERSTAR: 1500.0,
    PlayerTier.STAR: 450.0,
    PlayerTier.QUALITY_STARTER: 200.0,
    PlayerTier.ROLE_PLAYER: 60.0,
    PlayerTier.FILLER: 15.0,
}

# Value per rating point above the tier's minimum
TIER_RATING_BONUS = {
    PlayerTier.SUPERSTAR: 20.0,
    PlayerTier.STAR: 10.0,
    PlayerTier.QUALITY_STARTER: 4.0,
    PlayerTier.ROLE_PLAYER: 2.0,
    PlayerTier.FILLER: 0.5,
}

# Multiplier for the 1st, 2nd, ... best player of one tier in a package
DIMINISHING_RETURNS = (1.0, 0.6, 0.35, 0.2, 0.1)
DIMINISHING_RETURNS_FLOOR = 0.05

ROSTER_DUMP_THRESHOLD = 3
ROSTER_DUMP_PENALTY = 10.0  # Per player beyond the threshold

# Individual value modifiers
POTENTIAL_BONUS_PER_POINT = 1.5
EXPECTED_SALARY_BASE_RATING = 60
EXPECTED_SALARY_PER_POINT = 1.2     # $M per rating point above the base
MIN_EXPECTED_SALARY = 1.0
SALARY_BURDEN_PER_MILLION = 1.5
AGING_CONTRACT_AGE = 31
AGING_CONTRACT_FREE_YEARS = 2
AGING_CONTRACT_PENALTY_RATE = 0.08  # Fraction of base value per extra year


def classify_player_tier(overall_rating: int, is_star: bool = False) -> PlayerTier:
    """Map a rating (and the star flag) to its tier."""
    if overall_rating >= SUPERSTAR_MIN_RATING:
        return PlayerTier.SUPERSTAR
    if overall_rating >= STAR_MIN_RATING or is_star:
        return PlayerTier.STAR
    if overall_rating >= QUALITY_STARTER_MIN_RATING:
        return PlayerTier.QUALITY_STARTER
    if overall_rating >= ROLE_PLAYER_MIN_RATING:
        return PlayerTier.ROLE_PLAYER
    return PlayerTier.FILLER


def player_tier(player: Player) -> PlayerTier:
    return classify_player_tier(player.overall_rating, player.is_star)


def get_age_factor(age: int) -> float:
    """Youth premium up to 23, sharp decline past 30."""
    if age <= 23:
        return 1.3
    if age <= 26:
        return 1.15
    if age <= 29:
        return 1.0
    if age <= 30:
        return 0.9
    if age <= 32:
        return 0.75
    if age <= 34:
        return 0.6
    return 0.45


def get_contract_factor(contract_years: int, age: int) -> float:
    """Two or three years of control is ideal."""
    if contract_years <= 1:
        return 0.8  # Flight risk
    if contract_years <= 3:
        return 1.1
    if age >= 30:
        return 0.85
    return 1.0


def get_potential_multiplier(age: int) -> float:
    if age <= 23:
        return 1.5
    if age <= 26:
        return 1.0
    return 0.5


def expected_salary(overall_rating: int) -> float:
    """Salary ($M) a player of this rating is fairly paid."""
    return max(
        MIN_EXPECTED_SALARY,
        (overall_rating - EXPECTED_SALARY_BASE_RATING) * EXPECTED_SALARY_PER_POINT,
    )


def calculate_player_value(player: Player) -> float:
    """
    Calculate an individual player's trade value.

    Deterministic for a given player; never negative.
    """
    tier = player_tier(player)
    base = TIER_BASE_VALUES[tier]

    rating_bonus = max(0, player.overall_rating - TIER_MIN_RATINGS[tier]) * TIER_RATING_BONUS[tier]
    potential_bonus = (
        player.potential_gap * POTENTIAL_BONUS_PER_POINT * get_potential_multiplier(player.age)
    )

    overpay = player.salary - expected_salary(player.overall_rating)
    salary_penalty = overpay * SALARY_BURDEN_PER_MILLION if overpay > 0 else 0.0

    aging_penalty = 0.0
    if player.age >= AGING_CONTRACT_AGE and player.contract_years > AGING_CONTRACT_FREE_YEARS:
        extra_years = player.contract_years - AGING_CONTRACT_FREE_YEARS
        aging_penalty = base * AGING_CONTRACT_PENALTY_RATE * extra_years

    raw = base + rating_bonus + potential_bonus - salary_penalty - aging_penalty
    value = raw * get_age_factor(player.age) * get_contract_factor(player.contract_years, player.age)
    return round(max(0.0, value), 1)


def _rank_multiplier(rank: int) -> float:
    if rank < len(DIMINISHING_RETURNS):
        return DIMINISHING_RETURNS[rank]
    return DIMINISHING_RETURNS_FLOOR


def calculate_tier_value(tier: PlayerTier, values: Iterable[float]) -> float:
    """
    Combined value of same-tier players.

    Sorted best first, weighted by DIMINISHING_RETURNS, then capped at
    the tier ceiling.
    """
    ordered = sorted(values, reverse=True)
    total = sum(v * _rank_multiplier(i) for i, v in enumerate(ordered))
    return min(total, TIER_CEILINGS[tier])


def calculate_package_value(players: list[Player]) -> float:
    """Value of a group of players traded together."""
    if not players:
        return 0.0

    by_tier: dict[PlayerTier, list[float]] = {}
    for player in players:
        by_tier.setdefault(player_tier(player), []).append(calculate_player_value(player))

    total = sum(calculate_tier_value(tier, values) for tier, values in by_tier.items())

    if len(players) > ROSTER_DUMP_THRESHOLD:
        total -= (len(players) - ROSTER_DUMP_THRESHOLD) * ROSTER_DUMP_PENALTY

    logger.debug("Package of %d players valued at %.1f", len(players), total)
    return round(max(0.0, total), 1)


def best_tier(players: list[Player]) -> Optional[PlayerTier]:
    """Highest tier present in a group, or None for no players."""
    if not players:
        return None
    return min((player_tier(p) for p in players), key=lambda t: t.rank)
