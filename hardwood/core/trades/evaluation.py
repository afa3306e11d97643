"""
Trade evaluation.

Handles:
- Fairness score (signed percentage between the two sides' values)
- Position-fit adjustment for the receiving team
- Graded analysis text from fairness bands
- Independent risk assessment of the offering side's move
"""

import logging
from dataclasses import dataclass, field
from typing import Optional

from hardwood.core.draft.picks import DraftPick, calculate_pick_value
from hardwood.core.enums import RiskLevel
from hardwood.core.models.player import Player
from hardwood.core.models.team import Team
from hardwood.core.trades.valuation import (
    PlayerTier,
    QUALITY_STARTER_MIN_RATING,
    best_tier,
    calculate_package_value,
    calculate_player_value,
    player_tier,
)


logger = logging.getLogger(__name__)


# Fairness bands (absolute fairness score)
FAIR_BAND = 12
MODERATE_BAND = 25
HEAVY_BAND = 40

# Position fit
THIN_POSITION_COUNT = 2       # Fewer than this at the position -> bonus
CROWDED_POSITION_COUNT = 4    # This many or more -> penalty
POSITION_FIT_RATE = 0.1       # Fraction of the player's value

# Risk scoring
RISK_SUPERSTAR_TRADED = 40
RISK_STAR_TRADED = 30
RISK_YOUNG_UNPROVEN = 10
RISK_FIRST_ROUND_PICK = 15
RISK_PICKS_OVER_PLAYERS = 15
YOUNG_UNPROVEN_MAX_AGE = 23
HIGH_RISK_SCORE = 60
MEDIUM_RISK_SCORE = 30


@dataclass
class TradeRiskAssessment:
    score: int
    level: RiskLevel
    reasons: list[str] = field(default_factory=list)

    @property
    def explanation(self) -> str:
        if not self.reasons:
            return "Low-risk move: no core assets at stake."
        return "; ".join(self.reasons) + "."

    def to_dict(self) -> dict:
        return {
            "score": self.score,
            "level": self.level.value,
            "reasons": list(self.reasons),
            "explanation": self.explanation,
        }


@dataclass
class TradeEvaluation:
    """
    Result of evaluating a proposed trade.

    fairness_score > 0 means the offering side gives up more value.
    valid is False only for malformed proposals; analysis then holds
    the reason.
    """
    fairness_score: int
    from_value: float
    to_value: float
    analysis: str
    risk_assessment: TradeRiskAssessment
    tier_mismatch: bool = False
    valid: bool = True

    @property
    def is_fair(self) -> bool:
        return self.valid and abs(self.fairness_score) <= FAIR_BAND

    def to_dict(self) -> dict:
        return {
            "fairness_score": self.fairness_score,
            "from_value": self.from_value,
            "to_value": self.to_value,
            "analysis": self.analysis,
            "risk_assessment": self.risk_assessment.to_dict(),
            "tier_mismatch": self.tier_mismatch,
            "valid": self.valid,
        }


def calculate_position_fit(players: list[Player], receiving_team: Team) -> float:
    """
    Value adjustment for how well incoming players fit the receiver.

    A thin position earns a bonus, a crowded one a penalty, each a
    fraction of the incoming player's own value.
    """
    adjustment = 0.0
    for player in players:
        depth = len(receiving_team.players_at(player.position))
        if depth < THIN_POSITION_COUNT:
            adjustment += calculate_player_value(player) * POSITION_FIT_RATE
        elif depth >= CROWDED_POSITION_COUNT:
            adjustment -= calculate_player_value(player) * POSITION_FIT_RATE
    return adjustment


def calculate_picks_value(picks: list[DraftPick], current_season: int = 1) -> float:
    return sum(calculate_pick_value(p, current_season) for p in picks)


def calculate_fairness(from_value: float, to_value: float) -> int:
    """Signed percentage difference relative to the average of both sides."""
    average = (from_value + to_value) / 2 or 1
    return round((from_value - to_value) / average * 100)


def describe_fairness(fairness_score: int, from_team: Team, to_team: Team) -> str:
    """Graded, symmetric analysis text for a fairness score."""
    if abs(fairness_score) <= FAIR_BAND:
        return "This is a fair trade for both sides."
    if fairness_score > HEAVY_BAND:
        return f"This trade heavily favors the {to_team.full_name}."
    if fairness_score > MODERATE_BAND:
        return (
            f"The {from_team.full_name} are overpaying significantly. "
            f"The {to_team.full_name} should be eager to accept."
        )
    if fairness_score > FAIR_BAND:
        return f"The {from_team.full_name} are overpaying slightly."
    if fairness_score < -HEAVY_BAND:
        return (
            f"This trade heavily favors the {from_team.full_name}. "
            f"The {to_team.full_name} are very unlikely to accept."
        )
    if fairness_score < -MODERATE_BAND:
        return f"The {to_team.full_name} would need substantially more value."
    return f"The {to_team.full_name} would need a little more to make this work."


def assess_trade_risk(
    offered_players: list[Player],
    requested_players: list[Player],
    offered_picks: list[DraftPick],
    requested_picks: list[DraftPick],
) -> TradeRiskAssessment:
    """
    Score the risk the offering team takes on.

    Independent of fairness: a fair trade can still be a big swing.
    """
    score = 0
    reasons = []

    for player in offered_players:
        tier = player_tier(player)
        if tier is PlayerTier.SUPERSTAR:
            score += RISK_SUPERSTAR_TRADED
            reasons.append(f"Trading away superstar {player.name}")
        elif tier is PlayerTier.STAR:
            score += RISK_STAR_TRADED
            reasons.append(f"Trading away star {player.name}")

    for player in requested_players:
        if player.age <= YOUNG_UNPROVEN_MAX_AGE and player.overall_rating < QUALITY_STARTER_MIN_RATING:
            score += RISK_YOUNG_UNPROVEN
            reasons.append(f"Betting on unproven {player.name} (age {player.age})")

    first_rounders = [p for p in offered_picks if p.round == 1]
    if first_rounders:
        score += RISK_FIRST_ROUND_PICK * len(first_rounders)
        reasons.append(f"Giving up {len(first_rounders)} first-round pick(s)")

    if len(requested_picks) > len(requested_players):
        score += RISK_PICKS_OVER_PLAYERS
        reasons.append("Receiving more picks than players")

    if score >= HIGH_RISK_SCORE:
        level = RiskLevel.HIGH
    elif score >= MEDIUM_RISK_SCORE:
        level = RiskLevel.MEDIUM
    else:
        level = RiskLevel.LOW

    return TradeRiskAssessment(score=score, level=level, reasons=reasons)


def _has_tier_mismatch(offered: list[Player], requested: list[Player]) -> bool:
    """True when one side offers more bodies to pry loose a better tier."""
    offered_best = best_tier(offered)
    requested_best = best_tier(requested)
    if offered_best is None or requested_best is None:
        return False
    if requested_best.rank < offered_best.rank and len(offered) > len(requested):
        return True
    if offered_best.rank < requested_best.rank and len(requested) > len(offered):
        return True
    return False


def evaluate_trade(
    from_team: Team,
    to_team: Team,
    offered_players: list[Player],
    requested_players: list[Player],
    offered_picks: Optional[list[DraftPick]] = None,
    requested_picks: Optional[list[DraftPick]] = None,
    current_season: int = 1,
) -> TradeEvaluation:
    """
    Evaluate a trade from the offering team's perspective.

    Malformed proposals (a side with no assets at all) come back with
    valid=False and the reason in analysis rather than raising.

    Args:
        from_team: Team making the offer
        to_team: Team receiving the offer
        offered_players: Players from_team sends
        requested_players: Players from_team asks for
        offered_picks: Picks from_team sends
        requested_picks: Picks from_team asks for
        current_season: Season of the next draft, for pick discounting

    Returns:
        TradeEvaluation with fairness, values, analysis and risk
    """
    offered_picks = offered_picks or []
    requested_picks = requested_picks or []

    risk = assess_trade_risk(offered_players, requested_players, offered_picks, requested_picks)

    if not offered_players and not offered_picks:
        return TradeEvaluation(
            fairness_score=0, from_value=0.0, to_value=0.0,
            analysis="Invalid trade: nothing is being offered.",
            risk_assessment=risk, valid=False,
        )
    if not requested_players and not requested_picks:
        return TradeEvaluation(
            fairness_score=0, from_value=0.0, to_value=0.0,
            analysis="Invalid trade: nothing is being requested in return.",
            risk_assessment=risk, valid=False,
        )

    from_value = (
        calculate_package_value(offered_players)
        + calculate_picks_value(offered_picks, current_season)
        + calculate_position_fit(offered_players, to_team)
    )
    to_value = (
        calculate_package_value(requested_players)
        + calculate_picks_value(requested_picks, current_season)
    )
    from_value = round(max(0.0, from_value), 1)
    to_value = round(to_value, 1)

    fairness = calculate_fairness(from_value, to_value)
    analysis = describe_fairness(fairness, from_team, to_team)

    mismatch = _has_tier_mismatch(offered_players, requested_players)
    if mismatch:
        analysis += " Quantity cannot replace quality: the packages are in different tiers."

    logger.debug(
        "Trade %s -> %s: from=%.1f to=%.1f fairness=%d risk=%s",
        from_team.abbreviation, to_team.abbreviation, from_value, to_value,
        fairness, risk.level.value,
    )

    return TradeEvaluation(
        fairness_score=fairness,
        from_value=from_value,
        to_value=to_value,
        analysis=analysis,
        risk_assessment=risk,
        tier_mismatch=mismatch,
    )
