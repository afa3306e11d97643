"""
Season rollover.

Handles:
- Aging players and running down contracts
- Releasing expiring contracts to the free-agent pool
- Topping up draft pick inventories
- Resetting records and re-setting starting lineups
- Building the next season's draft class and free-agent pool
"""

import logging
import random
from dataclasses import dataclass, field, replace
from typing import Optional

from hardwood.core.ai.offseason import process_ai_free_agency
from hardwood.core.contracts.free_agency import (
    FREE_AGENT_POOL_SIZE,
    FreeAgent,
    generate_free_agents,
    make_free_agent,
)
from hardwood.core.draft.picks import PICK_SEASONS_AHEAD, create_team_picks
from hardwood.core.draft.prospects import DRAFT_CLASS_SIZE, generate_draft_class
from hardwood.core.enums import SeasonPhase
from hardwood.core.models.player import Player
from hardwood.core.models.team import Team
from hardwood.management.state import GameState


logger = logging.getLogger(__name__)


LINEUP_SIZE = 5


@dataclass
class RolloverResult:
    state: GameState
    released: list[Player] = field(default_factory=list)
    signings: list[str] = field(default_factory=list)


def set_starting_lineup(team: Team) -> Team:
    """The five highest-rated players start; ties keep roster order."""
    ranked = sorted(team.roster, key=lambda p: p.overall_rating, reverse=True)
    starter_ids = {p.id for p in ranked[:LINEUP_SIZE]}
    roster = [replace(p, is_starter=p.id in starter_ids) for p in team.roster]
    return team.with_roster(roster)


def advance_contracts(teams: list[Team]) -> tuple[list[Team], list[Player]]:
    """
    Age every rostered player a year and release expired deals.

    Returns:
        (updated teams, released players)
    """
    updated = []
    released = []
    for team in teams:
        aged = [p.advance_year() for p in team.roster]
        released.extend(p for p in aged if p.is_expiring)
        updated.append(team.with_roster([p for p in aged if not p.is_expiring]))
    return updated, released


def top_up_picks(teams: list[Team], season: int) -> list[Team]:
    """
    Drop stale picks and add each team's own picks for the newest season.

    A pick that already exists anywhere in the league (traded ahead of
    time) is not created again.
    """
    newest = season + PICK_SEASONS_AHEAD - 1
    existing = {
        (p.original_team_id, p.year, p.round)
        for team in teams for p in team.draft_picks
    }

    updated = []
    for team in teams:
        picks = [p for p in team.draft_picks if p.year >= season]
        for pick in create_team_picks(team.id, newest, 1):
            if (pick.original_team_id, pick.year, pick.round) not in existing:
                picks.append(pick)
        updated.append(replace(team, draft_picks=picks))
    return updated


def start_new_season(
    state: GameState,
    rng: Optional[random.Random] = None,
) -> RolloverResult:
    """
    Roll a finished offseason into the next preseason.

    AI teams refill their rosters from the new pool (fresh veterans plus
    everyone just released) before the user gets to shop in preseason.
    """
    rng = rng or random.Random()
    season = state.season + 1

    teams, released = advance_contracts(state.teams)
    teams = [t.with_record(0, 0) for t in teams]
    teams = top_up_picks(teams, season)

    pool: list[FreeAgent] = generate_free_agents(FREE_AGENT_POOL_SIZE, rng, season)
    pool += [make_free_agent(p) for p in released]
    pool.sort(key=lambda fa: fa.player.overall_rating, reverse=True)

    ai = process_ai_free_agency(teams, pool, state.user_team_id)
    teams = [set_starting_lineup(t) for t in ai.teams]

    new_state = replace(
        state,
        season=season,
        week=0,
        phase=SeasonPhase.PRESEASON,
        teams=teams,
        free_agents=ai.free_agents,
        draft_prospects=generate_draft_class(DRAFT_CLASS_SIZE, rng, season),
        draft_order=[],
        draft_cursor=0,
        last_playoff_results={},
    )
    logger.info(
        "Season %d begins: %d contracts expired, %d AI signings",
        season, len(released), len(ai.signings),
    )
    return RolloverResult(state=new_state, released=released, signings=ai.signings)
