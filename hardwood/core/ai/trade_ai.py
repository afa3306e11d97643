"""
Trade AI System.

Trade decision-making for AI-controlled teams.

Handles:
- Accept/reject verdicts on offers (difficulty threshold plus personality)
- AI personalities derived from team context
- Strategy selection from context and record
- Trade generation (identifying a target and building a package)
"""

import logging
import random
from dataclasses import dataclass
from typing import Optional

from hardwood.core.enums import Difficulty
from hardwood.core.models.player import Player
from hardwood.core.models.team import Team
from hardwood.core.models.team_context import StrategyType, TeamContextType
from hardwood.core.trades.evaluation import TradeEvaluation
from hardwood.core.trades.execution import TradeProposal
from hardwood.core.trades.valuation import calculate_player_value


logger = logging.getLogger(__name__)


# Minimum fairness score (from the offering side's view) the AI accepts
DIFFICULTY_ACCEPT_THRESHOLDS = {
    Difficulty.EASY: -25,
    Difficulty.MEDIUM: -10,
    Difficulty.HARD: 0,
}
PERSONALITY_THRESHOLD_SWING = 10  # Fairness points between the most and least eager AI
STAR_LOYALTY_PENALTY = 10         # Extra fairness demanded per unit of loyalty when losing a star

CONTENDER_WIN_PCT = 0.65
COMPETITIVE_WIN_PCT = 0.5

# Package building
TARGET_MATCH_RATE = 0.85       # Stop adding players once this share of target value is met
MIN_MATCH_RATE = 0.5           # Give up below this share
MAX_PACKAGE_PLAYERS = 3
STAR_TARGET_CHANCE = 0.1       # Chance an AI even asks about a star


@dataclass
class AIPersonality:
    """Front-office tendencies, each 0-1."""
    trade_aggression: float
    star_loyalty: float
    risk_tolerance: float
    analytics_reliance: float
    market_sensitivity: float


def generate_ai_personality(team: Team, rng: Optional[random.Random] = None) -> AIPersonality:
    """Roll a personality, anchored on the team's context."""
    rng = rng or random.Random()
    context = team.context
    return AIPersonality(
        trade_aggression=0.3 + rng.random() * 0.5,
        star_loyalty=(
            0.9 if team.context_type == TeamContextType.STAR_DEPENDENT
            else 0.5 + rng.random() * 0.3
        ),
        risk_tolerance=context.ownership_risk_tolerance,
        analytics_reliance=0.3 + rng.random() * 0.6,
        market_sensitivity=(
            0.9 if team.context_type == TeamContextType.REVENUE_SENSITIVE
            else 0.3 + rng.random() * 0.4
        ),
    )


def get_ai_strategy(team: Team, wins: int, losses: int) -> StrategyType:
    """Context default before any games, then by winning percentage."""
    games = wins + losses
    if games == 0:
        return team.context.default_ai_strategy

    win_pct = wins / games
    if win_pct > CONTENDER_WIN_PCT:
        return StrategyType.BOOM_BUST_SWING
    if win_pct > COMPETITIVE_WIN_PCT:
        return StrategyType.AGGRESSIVE_PUSH
    return StrategyType.STABILITY_FIRST


def acceptance_threshold(
    difficulty: Difficulty,
    personality: Optional[AIPersonality] = None,
) -> float:
    threshold = float(DIFFICULTY_ACCEPT_THRESHOLDS[difficulty])
    if personality is not None:
        threshold += (0.5 - personality.trade_aggression) * PERSONALITY_THRESHOLD_SWING
    return threshold


def would_ai_accept_trade(
    fairness_score: int,
    difficulty: Difficulty,
    personality: Optional[AIPersonality] = None,
) -> bool:
    """
    Decide whether the receiving AI accepts.

    fairness_score is from the offering side's view, so positive scores
    favor the AI. Deterministic given the personality.
    """
    return fairness_score >= acceptance_threshold(difficulty, personality)


class TradeAI:
    """
    AI system for trade decisions.

    Handles evaluating offers and generating proposals for one team.
    """

    def __init__(
        self,
        team: Team,
        difficulty: Difficulty = Difficulty.MEDIUM,
        personality: Optional[AIPersonality] = None,
        rng: Optional[random.Random] = None,
    ):
        self.team = team
        self.difficulty = difficulty
        self.rng = rng or random.Random()
        self.personality = personality or generate_ai_personality(team, self.rng)

        self._configure_behavior()

    def _configure_behavior(self):
        """Set trade behavior parameters."""
        self.trade_frequency = self.personality.trade_aggression * 0.3
        self.protects_stars = self.personality.star_loyalty >= 0.8
        self.strategy = get_ai_strategy(self.team, self.team.wins, self.team.losses)

    def evaluate_offer(
        self,
        evaluation: TradeEvaluation,
        requested_players: list[Player],
    ) -> tuple[bool, str]:
        """
        Verdict on an offer sent to this team.

        Returns:
            (accepted, reasoning)
        """
        if not evaluation.valid:
            return False, evaluation.analysis

        threshold = acceptance_threshold(self.difficulty, self.personality)
        losing_star = any(p.is_star for p in requested_players)
        if losing_star:
            threshold += self.personality.star_loyalty * STAR_LOYALTY_PENALTY

        if evaluation.fairness_score >= threshold:
            return True, f"The {self.team.full_name} accept the trade."

        if losing_star and evaluation.fairness_score >= threshold - STAR_LOYALTY_PENALTY:
            return False, f"The {self.team.full_name} are not ready to move their star."
        return False, f"The {self.team.full_name} reject the offer. {evaluation.analysis}"

    def wants_to_trade(self) -> bool:
        return self.rng.random() < self.trade_frequency

    def generate_trade_proposal(
        self,
        target_team: Team,
        proposal_id: str,
        season: int = 1,
    ) -> Optional[TradeProposal]:
        """
        Generate a proposal for the most valuable player on target_team.

        Stars are usually off the table. The package is built from our
        best non-star players until it covers most of the target's value,
        with a second-round pick added when it falls short.

        Returns:
            TradeProposal or None if no reasonable package exists
        """
        candidates = [
            p for p in target_team.roster
            if not p.is_star or self.rng.random() < STAR_TARGET_CHANCE
        ]
        if not candidates:
            return None

        wanted = max(candidates, key=calculate_player_value)
        wanted_value = calculate_player_value(wanted)

        tradeable = sorted(
            (p for p in self.team.roster if not p.is_star),
            key=calculate_player_value,
            reverse=True,
        )

        offered: list[Player] = []
        offered_value = 0.0
        for player in tradeable:
            if offered_value >= wanted_value * TARGET_MATCH_RATE:
                break
            offered.append(player)
            offered_value += calculate_player_value(player)
            if len(offered) >= MAX_PACKAGE_PLAYERS:
                break

        if not offered or offered_value < wanted_value * MIN_MATCH_RATE:
            return None

        picks_offered = []
        if offered_value < wanted_value * TARGET_MATCH_RATE and len(self.team.draft_picks) > 2:
            second_rounders = [p for p in self.team.draft_picks if p.round == 2]
            pick = second_rounders[0] if second_rounders else self.team.draft_picks[0]
            picks_offered.append(pick.pick_id)

        logger.debug(
            "%s targets %s from %s with %d player(s)",
            self.team.abbreviation, wanted.name, target_team.abbreviation, len(offered),
        )

        return TradeProposal(
            id=proposal_id,
            from_team_id=self.team.id,
            to_team_id=target_team.id,
            players_offered=[p.id for p in offered],
            players_requested=[wanted.id],
            picks_offered=picks_offered,
            season=season,
        )


def generate_ai_trade_proposal(
    ai_team: Team,
    target_team: Team,
    rng: Optional[random.Random] = None,
    proposal_id: str = "ai-trade",
    season: int = 1,
) -> Optional[TradeProposal]:
    """Proposal from ai_team for target_team's most valuable attainable player."""
    return TradeAI(ai_team, rng=rng).generate_trade_proposal(target_team, proposal_id, season)
