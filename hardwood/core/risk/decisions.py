"""
Risk decision classification and resolution.

Handles:
- Risk level for signings (contract size), draft picks (prospect variance)
  and strategy changes (per-strategy mapping)
- Season-end resolution of pending decisions
- Per-season risk rating from the high-risk decision count

Automatic resolution only ever produces success or neutral. FAILURE is
set explicitly through resolve_decision.
"""

import logging
from dataclasses import replace
from typing import Iterable

from hardwood.core.enums import PlayoffResult, RiskLevel
from hardwood.core.models.team_context import StrategyType, get_strategy_profile
from hardwood.core.risk.records import DecisionOutcome, RiskDecision, RiskRating


logger = logging.getLogger(__name__)


SIGNING_MEDIUM_SALARY = 15.0
SIGNING_HIGH_SALARY = 25.0
DRAFT_MEDIUM_VARIANCE = 12
DRAFT_HIGH_VARIANCE = 18

SUCCESS_WINS = 45
AGGRESSIVE_HIGH_RISK_COUNT = 3
BALANCED_HIGH_RISK_COUNT = 1


def classify_signing_risk(salary: float) -> RiskLevel:
    """Low under $15M, medium up to $25M, high above."""
    if salary > SIGNING_HIGH_SALARY:
        return RiskLevel.HIGH
    if salary >= SIGNING_MEDIUM_SALARY:
        return RiskLevel.MEDIUM
    return RiskLevel.LOW


def classify_draft_risk(variance: int) -> RiskLevel:
    """Riskier the wider a prospect's outcome range."""
    if variance > DRAFT_HIGH_VARIANCE:
        return RiskLevel.HIGH
    if variance >= DRAFT_MEDIUM_VARIANCE:
        return RiskLevel.MEDIUM
    return RiskLevel.LOW


def classify_strategy_risk(strategy: StrategyType) -> RiskLevel:
    return get_strategy_profile(strategy).decision_risk_level


def season_succeeded(wins: int, playoff_result: PlayoffResult) -> bool:
    return wins >= SUCCESS_WINS or playoff_result.made_playoffs


def resolve_season_decisions(
    decisions: list[RiskDecision],
    season: int,
    wins: int,
    playoff_result: PlayoffResult,
) -> list[RiskDecision]:
    """
    Resolve the season's pending decisions.

    Success if the team won enough or reached the playoffs, neutral
    otherwise. Returns a new list.
    """
    outcome = DecisionOutcome.SUCCESS if season_succeeded(wins, playoff_result) else DecisionOutcome.NEUTRAL
    resolved = [
        replace(d, outcome=outcome)
        if d.season == season and d.outcome is DecisionOutcome.PENDING else d
        for d in decisions
    ]
    logger.debug("Resolved season %d decisions as %s", season, outcome.value)
    return resolved


def resolve_decision(
    decisions: list[RiskDecision],
    decision_id: str,
    outcome: DecisionOutcome,
) -> list[RiskDecision]:
    """Set one decision's outcome explicitly (the only path to FAILURE)."""
    return [replace(d, outcome=outcome) if d.id == decision_id else d for d in decisions]


def count_by_level(decisions: Iterable[RiskDecision], level: RiskLevel) -> int:
    return sum(1 for d in decisions if d.risk_level is level)


def season_risk_rating(decisions: list[RiskDecision], season: int) -> RiskRating:
    high = count_by_level((d for d in decisions if d.season == season), RiskLevel.HIGH)
    if high >= AGGRESSIVE_HIGH_RISK_COUNT:
        return RiskRating.AGGRESSIVE
    if high >= BALANCED_HIGH_RISK_COUNT:
        return RiskRating.BALANCED
    return RiskRating.CONSERVATIVE
