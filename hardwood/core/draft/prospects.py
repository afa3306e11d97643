"""
Draft prospects.

Handles:
- Draft class generation in talent tiers
- Converting a selected prospect into a player (stochastic outcome)
- AI selection by value and positional need
"""

import logging
import math
import random
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from hardwood.core.enums import Position
from hardwood.core.models.player import Player
from hardwood.generators.names import generate_name

if TYPE_CHECKING:
    from hardwood.core.models.team import Team


logger = logging.getLogger(__name__)


DRAFT_CLASS_SIZE = 60

# (picks in tier, base range, potential range, variance range)
PROSPECT_TIERS = (
    (5, (72, 79), (85, 95), (5, 14)),
    (14, (66, 73), (78, 89), (8, 17)),
    (30, (60, 67), (70, 83), (10, 19)),
    (DRAFT_CLASS_SIZE, (52, 61), (62, 77), (12, 24)),
)
PROSPECT_MIN_FLOOR = 45
PROSPECT_MAX_CEILING = 99
SUB_RATING_NOISE = 8

# Fraction of [floor, ceiling] a drafted player's rating can land in
PROSPECT_REALIZATION_SPAN = 1.0

ROOKIE_BASE_SALARY = 5.0
ROOKIE_SCALE_SLOTS = 60
ROOKIE_SCALE_RATE = 0.15
ROOKIE_CONTRACT_YEARS = 4
ROOKIE_MORALE = 80

OVERALL_WEIGHT = 0.4
POTENTIAL_WEIGHT = 0.6
POSITION_NEED_COUNT = 2
POSITION_NEED_BONUS = 5.0


@dataclass
class DraftProspect:
    """
    An eligible player during one draft.

    floor and ceiling bound the rating the prospect can turn into;
    variance is the scouting uncertainty behind that spread.
    """
    id: str
    name: str
    position: Position
    age: int
    overall_rating: int
    potential: int
    floor: int
    ceiling: int
    variance: int
    offense: int = 60
    defense: int = 60
    athleticism: int = 60
    basketball_iq: int = 60
    rank: int = 0   # 1-based big-board rank

    @property
    def draft_value(self) -> float:
        return self.overall_rating * OVERALL_WEIGHT + self.potential * POTENTIAL_WEIGHT

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "position": self.position.value,
            "age": self.age,
            "overall_rating": self.overall_rating,
            "potential": self.potential,
            "floor": self.floor,
            "ceiling": self.ceiling,
            "variance": self.variance,
            "offense": self.offense,
            "defense": self.defense,
            "athleticism": self.athleticism,
            "basketball_iq": self.basketball_iq,
            "rank": self.rank,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "DraftProspect":
        return cls(
            id=data["id"],
            name=data.get("name", ""),
            position=Position(data.get("position", "SF")),
            age=data.get("age", 20),
            overall_rating=data.get("overall_rating", 60),
            potential=data.get("potential", 70),
            floor=data.get("floor", 50),
            ceiling=data.get("ceiling", 80),
            variance=data.get("variance", 10),
            offense=data.get("offense", 60),
            defense=data.get("defense", 60),
            athleticism=data.get("athleticism", 60),
            basketball_iq=data.get("basketball_iq", 60),
            rank=data.get("rank", 0),
        )


def _clamp_rating(value: int) -> int:
    return max(40, min(99, value))


def _tier_for_index(index: int):
    for limit, base, potential, variance in PROSPECT_TIERS:
        if index < limit:
            return base, potential, variance
    return PROSPECT_TIERS[-1][1:]


def generate_draft_class(
    size: int = DRAFT_CLASS_SIZE,
    rng: Optional[random.Random] = None,
    season: int = 1,
) -> list[DraftProspect]:
    """
    Generate a draft class ordered by draft value, best first.

    Talent comes in tiers: a handful of franchise-level prospects, a
    lottery tier, the rest of round one, then second-round fliers.
    """
    rng = rng or random.Random()
    prospects = []

    for i in range(size):
        base_range, potential_range, variance_range = _tier_for_index(i)
        base = rng.randint(*base_range)
        potential = rng.randint(*potential_range)
        variance = rng.randint(*variance_range)

        floor = max(PROSPECT_MIN_FLOOR, base - variance)
        ceiling = min(PROSPECT_MAX_CEILING, potential + math.floor(variance * 0.5))

        prospects.append(DraftProspect(
            id=f"prospect-{season}-{i + 1}",
            name=generate_name(rng),
            position=rng.choice(list(Position)),
            age=rng.randint(19, 22),
            overall_rating=base,
            potential=potential,
            floor=floor,
            ceiling=ceiling,
            variance=variance,
            offense=_clamp_rating(base + rng.randint(-SUB_RATING_NOISE, SUB_RATING_NOISE)),
            defense=_clamp_rating(base + rng.randint(-SUB_RATING_NOISE, SUB_RATING_NOISE)),
            athleticism=_clamp_rating(base + rng.randint(-SUB_RATING_NOISE // 2, SUB_RATING_NOISE * 3 // 2)),
            basketball_iq=_clamp_rating(base + rng.randint(-SUB_RATING_NOISE * 3 // 2, SUB_RATING_NOISE // 2)),
        ))

    prospects.sort(key=lambda p: p.draft_value, reverse=True)
    for rank, prospect in enumerate(prospects, start=1):
        prospect.rank = rank
    return prospects


def rookie_salary(draft_slot: int) -> float:
    """Rookie scale: earlier picks earn more."""
    return ROOKIE_BASE_SALARY + math.floor(
        (ROOKIE_SCALE_SLOTS - min(ROOKIE_SCALE_SLOTS, draft_slot)) * ROOKIE_SCALE_RATE
    )


def realize_rating(
    prospect: DraftProspect,
    rng: random.Random,
    span: float = PROSPECT_REALIZATION_SPAN,
) -> int:
    """
    Sample the rating a prospect actually turns into.

    Uniform over the lowest `span` fraction of [floor, ceiling]; the
    default covers the whole range.
    """
    spread = (prospect.ceiling - prospect.floor) * span
    rating = round(prospect.floor + rng.random() * spread)
    return max(prospect.floor, min(prospect.ceiling, rating))


def draft_prospect_to_player(
    prospect: DraftProspect,
    team_id: str,
    rng: Optional[random.Random] = None,
    draft_slot: Optional[int] = None,
    span: float = PROSPECT_REALIZATION_SPAN,
) -> Player:
    """
    Turn a drafted prospect into a rostered player on a rookie deal.

    Args:
        prospect: The selected prospect
        team_id: Drafting team
        rng: Random source for the realized rating and durability
        draft_slot: Overall pick number; defaults to the prospect's board rank
        span: Reachable fraction of the floor-to-ceiling range

    Returns:
        The new Player
    """
    rng = rng or random.Random()
    slot = draft_slot if draft_slot is not None else (prospect.rank or ROOKIE_SCALE_SLOTS)
    rating = realize_rating(prospect, rng, span)

    return Player(
        id=f"drafted-{prospect.id}",
        name=prospect.name,
        position=prospect.position,
        age=prospect.age,
        overall_rating=rating,
        potential=max(rating, prospect.potential),
        offense=prospect.offense,
        defense=prospect.defense,
        athleticism=prospect.athleticism,
        basketball_iq=prospect.basketball_iq,
        durability=rng.randint(60, 89),
        salary=rookie_salary(slot),
        contract_years=ROOKIE_CONTRACT_YEARS,
        team_id=team_id,
        is_starter=False,
        is_star=False,
        morale=ROOKIE_MORALE,
        experience=0,
    )


def ai_draft_pick(team: "Team", available: list[DraftProspect]) -> Optional[DraftProspect]:
    """Best prospect by draft value, nudged toward thin positions."""
    if not available:
        return None

    def score(prospect: DraftProspect) -> float:
        value = prospect.draft_value
        if len(team.players_at(prospect.position)) < POSITION_NEED_COUNT:
            value += POSITION_NEED_BONUS
        return value

    return max(available, key=score)
