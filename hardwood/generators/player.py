"""Player and roster generation."""

import random
from typing import Optional

from hardwood.core.enums import Position
from hardwood.core.models.player import Player
from hardwood.generators.names import generate_name


MIN_RATING = 40
MAX_RATING = 99
STAR_RATING = 85

# Salary curve: MIN_SALARY + SALARY_SCALE * (rating - SALARY_BASE_RATING) ** SALARY_EXPONENT
MIN_SALARY = 1.5
MAX_SALARY = 50.0
SALARY_BASE_RATING = 65
SALARY_SCALE = 0.2
SALARY_EXPONENT = 1.6
SALARY_NOISE = 1.5

# Starting lineup is one of each position; the bench fills out the rest
LINEUP = (Position.PG, Position.SG, Position.SF, Position.PF, Position.C)
BENCH_POSITIONS = (
    Position.PG, Position.SG, Position.SF, Position.PF,
    Position.C, Position.SG, Position.PF, Position.SF,
)
STARTER_RATING_SPREAD = (-3, 6)
BENCH_RATING_SPREAD = (-10, -2)


def _clamp(value: int) -> int:
    return max(MIN_RATING, min(MAX_RATING, value))


def market_salary(overall_rating: int, rng: Optional[random.Random] = None) -> float:
    """Annual salary ($M) a player of this rating is signed for at league bootstrap."""
    rng = rng or random.Random()
    above = max(0, overall_rating - SALARY_BASE_RATING)
    salary = MIN_SALARY + SALARY_SCALE * above ** SALARY_EXPONENT
    salary += rng.uniform(-SALARY_NOISE, SALARY_NOISE)
    return round(max(MIN_SALARY, min(MAX_SALARY, salary)), 1)


def generate_player(
    position: Position,
    overall_range: tuple[int, int] = (60, 80),
    age_range: tuple[int, int] = (21, 34),
    rng: Optional[random.Random] = None,
    player_id: Optional[str] = None,
    team_id: Optional[str] = None,
) -> Player:
    """
    Generate a contracted veteran player.

    Args:
        position: Player position
        overall_range: Inclusive bounds for the overall rating
        age_range: Inclusive bounds for age
        rng: Random source
        player_id: Explicit id (random otherwise)
        team_id: Owning team, None for an unsigned player

    Returns:
        Player with sub-ratings scattered around the overall and a salary
        from the market curve
    """
    rng = rng or random.Random()
    overall = _clamp(rng.randint(*overall_range))
    age = rng.randint(*age_range)
    # Younger players have more room to grow
    upside = rng.randint(0, 10) if age <= 24 else rng.randint(0, 3)

    return Player(
        id=player_id or f"player-{rng.getrandbits(32):08x}",
        name=generate_name(rng),
        position=position,
        age=age,
        overall_rating=overall,
        potential=_clamp(overall + upside),
        offense=_clamp(overall + rng.randint(-5, 5)),
        defense=_clamp(overall + rng.randint(-5, 5)),
        athleticism=_clamp(overall + rng.randint(-7, 7)),
        basketball_iq=_clamp(overall + rng.randint(-3, 6)),
        durability=rng.randint(60, 94),
        salary=market_salary(overall, rng),
        contract_years=rng.randint(1, 4),
        team_id=team_id,
        is_star=overall >= STAR_RATING,
        morale=rng.randint(70, 89),
        experience=max(1, age - 19),
    )


def generate_roster(
    team_id: str,
    base_rating: int,
    rng: Optional[random.Random] = None,
) -> list[Player]:
    """
    A 13-man roster built around a team's base rating.

    Five starters (one per position) sit slightly above the base, eight
    reserves below it. Ids are `{team_id}-{n}`.
    """
    rng = rng or random.Random()
    roster = []

    for i, position in enumerate(LINEUP):
        low, high = STARTER_RATING_SPREAD
        player = generate_player(
            position,
            overall_range=(base_rating + low, base_rating + high),
            rng=rng,
            player_id=f"{team_id}-{i + 1}",
            team_id=team_id,
        )
        player.is_starter = True
        roster.append(player)

    for i, position in enumerate(BENCH_POSITIONS, start=len(LINEUP)):
        low, high = BENCH_RATING_SPREAD
        roster.append(
            generate_player(
                position,
                overall_range=(base_rating + low, base_rating + high),
                rng=rng,
                player_id=f"{team_id}-{i + 1}",
                team_id=team_id,
            )
        )

    return roster
