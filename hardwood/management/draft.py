"""Applying draft selections to the league."""

import random
from typing import Optional

from hardwood.core.draft.order import DraftSlot, consume_pick
from hardwood.core.draft.prospects import DraftProspect, draft_prospect_to_player
from hardwood.core.models.player import Player
from hardwood.core.models.team import Team, find_team, replace_teams


def apply_pick(
    teams: list[Team],
    slot: DraftSlot,
    prospect: DraftProspect,
    season: int,
    rng: Optional[random.Random] = None,
) -> tuple[list[Team], Player]:
    """
    Sign the selected prospect to the team holding the slot.

    The used pick leaves the owner's inventory and payroll is
    recomputed with the rookie deal.

    Raises:
        ValueError: If the slot's team is not in the league
    """
    team = find_team(teams, slot.team_id)
    if team is None:
        raise ValueError(f"Draft slot {slot.overall_pick} belongs to unknown team {slot.team_id}")

    player = draft_prospect_to_player(prospect, team.id, rng, draft_slot=slot.overall_pick)
    owner = consume_pick(team, season, slot.original_team_id, slot.round)
    return replace_teams(teams, [owner.with_roster(owner.roster + [player])]), player
