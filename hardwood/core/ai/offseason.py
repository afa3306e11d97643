"""
AI offseason activity.

Handles:
- AI-to-AI trades (proposal, evaluation, salary legality, execution)
- AI free-agent signings
"""

import logging
import random
from dataclasses import dataclass, field
from typing import Optional

from hardwood.core.ai.trade_ai import TradeAI
from hardwood.core.contracts.free_agency import FreeAgent, ai_choose_free_agent, sign_free_agent
from hardwood.core.enums import Difficulty
from hardwood.core.models.team import Team, find_team, replace_teams
from hardwood.core.trades.evaluation import evaluate_trade
from hardwood.core.trades.execution import execute_trade
from hardwood.core.trades.salary import validate_trade_salary


logger = logging.getLogger(__name__)


ROSTER_LIMIT = 15
AI_SIGNING_ROUNDS = 2


@dataclass
class OffseasonResult:
    teams: list[Team]
    free_agents: list[FreeAgent] = field(default_factory=list)
    trades: list[str] = field(default_factory=list)
    signings: list[str] = field(default_factory=list)


def process_ai_trades(
    teams: list[Team],
    user_team_id: str,
    rng: Optional[random.Random] = None,
    season: int = 1,
) -> OffseasonResult:
    """
    Let each AI team consider one trade with another AI team.

    Accepted, salary-legal trades are executed; the user's team is never
    involved.
    """
    rng = rng or random.Random()
    result = OffseasonResult(teams=list(teams))
    ai_ids = [t.id for t in teams if t.id != user_team_id]
    if len(ai_ids) < 2:
        return result

    for team_id in ai_ids:
        ai_team = find_team(result.teams, team_id)
        trade_ai = TradeAI(ai_team, Difficulty.MEDIUM, rng=rng)
        if not trade_ai.wants_to_trade():
            continue

        target_id = rng.choice([i for i in ai_ids if i != team_id])
        target = find_team(result.teams, target_id)
        proposal = trade_ai.generate_trade_proposal(
            target, proposal_id=f"ai-trade-{season}-{len(result.trades) + 1}", season=season,
        )
        if proposal is None:
            continue

        offered = [p for p in ai_team.roster if p.id in proposal.players_offered]
        requested = [p for p in target.roster if p.id in proposal.players_requested]
        picks = [p for p in ai_team.draft_picks if p.pick_id in proposal.picks_offered]

        if not validate_trade_salary(ai_team, target, offered, requested).valid:
            continue

        evaluation = evaluate_trade(ai_team, target, offered, requested, picks, [], season)
        accepted, _ = TradeAI(target, Difficulty.MEDIUM, rng=rng).evaluate_offer(evaluation, requested)
        if not accepted:
            continue

        all_players = [p for t in result.teams for p in t.roster]
        execution = execute_trade(result.teams, proposal, all_players)
        if not execution.success:
            continue
        result.teams = execution.updated_teams
        result.trades.append(
            f"The {ai_team.full_name} traded {', '.join(p.name for p in offered)} "
            f"to the {target.full_name} for {', '.join(p.name for p in requested)}."
        )

    logger.info("AI trade window closed with %d trade(s)", len(result.trades))
    return result


def process_ai_free_agency(
    teams: list[Team],
    free_agents: list[FreeAgent],
    user_team_id: str,
    rounds: int = AI_SIGNING_ROUNDS,
) -> OffseasonResult:
    """
    AI teams sign the best affordable free agents, one per team per round.

    Teams pick in order of fewest rostered players first.
    """
    result = OffseasonResult(teams=list(teams), free_agents=list(free_agents))

    for _ in range(rounds):
        ai_teams = sorted(
            (t for t in result.teams if t.id != user_team_id),
            key=lambda t: len(t.roster),
        )
        for team in ai_teams:
            team = find_team(result.teams, team.id)
            choice = ai_choose_free_agent(team, result.free_agents, ROSTER_LIMIT)
            if choice is None:
                continue
            signed = sign_free_agent(choice, team, choice.asking_price, choice.years_wanted)
            result.teams = replace_teams(result.teams, [team.with_roster(team.roster + [signed])])
            result.free_agents = [fa for fa in result.free_agents if fa.id != choice.id]
            result.signings.append(
                f"The {team.full_name} signed {signed.name} "
                f"({choice.years_wanted} yr, ${choice.asking_price:.1f}M)."
            )

    logger.info("AI free agency completed with %d signing(s)", len(result.signings))
    return result


def process_ai_offseason(
    teams: list[Team],
    free_agents: list[FreeAgent],
    user_team_id: str,
    rng: Optional[random.Random] = None,
    season: int = 1,
) -> OffseasonResult:
    """
    Run the AI trade window, then AI free agency.

    Returns:
        OffseasonResult with updated teams, the remaining pool and one
        news line per trade and signing
    """
    rng = rng or random.Random()
    traded = process_ai_trades(teams, user_team_id, rng, season)
    signed = process_ai_free_agency(traded.teams, free_agents, user_team_id)
    return OffseasonResult(
        teams=signed.teams,
        free_agents=signed.free_agents,
        trades=traded.trades,
        signings=signed.signings,
    )
