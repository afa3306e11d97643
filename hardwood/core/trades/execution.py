"""Trade proposals and their execution."""

import logging
from dataclasses import dataclass, field, replace
from typing import Optional

from hardwood.core.draft.picks import DraftPick
from hardwood.core.enums import TradeStatus
from hardwood.core.models.player import Player
from hardwood.core.models.team import Team, find_team


logger = logging.getLogger(__name__)


@dataclass
class TradeProposal:
    """
    A proposed exchange of players and picks between two teams.

    Evaluated once, then either executed or discarded.
    """
    id: str
    from_team_id: str
    to_team_id: str
    players_offered: list[str] = field(default_factory=list)
    players_requested: list[str] = field(default_factory=list)
    picks_offered: list[str] = field(default_factory=list)
    picks_requested: list[str] = field(default_factory=list)
    status: TradeStatus = TradeStatus.PENDING
    fairness_score: Optional[int] = None
    season: int = 1

    @property
    def player_ids(self) -> set[str]:
        return set(self.players_offered) | set(self.players_requested)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "from_team_id": self.from_team_id,
            "to_team_id": self.to_team_id,
            "players_offered": list(self.players_offered),
            "players_requested": list(self.players_requested),
            "picks_offered": list(self.picks_offered),
            "picks_requested": list(self.picks_requested),
            "status": self.status.value,
            "fairness_score": self.fairness_score,
            "season": self.season,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "TradeProposal":
        return cls(
            id=data["id"],
            from_team_id=data["from_team_id"],
            to_team_id=data["to_team_id"],
            players_offered=list(data.get("players_offered", [])),
            players_requested=list(data.get("players_requested", [])),
            picks_offered=list(data.get("picks_offered", [])),
            picks_requested=list(data.get("picks_requested", [])),
            status=TradeStatus(data.get("status", "pending")),
            fairness_score=data.get("fairness_score"),
            season=data.get("season", 1),
        )


@dataclass
class TradeExecution:
    """Result of applying a proposal; unchanged collections when it failed."""
    updated_teams: list[Team]
    updated_players: list[Player]
    success: bool = True
    message: str = ""


def _swap_assets(
    team: Team,
    outgoing_players: set[str],
    incoming_players: list[Player],
    outgoing_picks: set[str],
    incoming_picks: list[DraftPick],
) -> Team:
    roster = [p for p in team.roster if p.id not in outgoing_players]
    roster += [p.with_team(team.id) for p in incoming_players]
    picks = [p for p in team.draft_picks if p.pick_id not in outgoing_picks]
    picks += [replace(p, current_team_id=team.id) for p in incoming_picks]
    return team.with_roster(roster, draft_picks=picks)


def execute_trade(
    teams: list[Team],
    proposal: TradeProposal,
    all_players: list[Player],
) -> TradeExecution:
    """
    Apply an accepted proposal.

    Pure: returns new team and player collections with ownership,
    picks and payrolls updated. Inputs are never mutated. Unknown player
    and pick ids in the proposal are ignored; an unknown team fails the
    execution and leaves both collections as they were.
    """
    from_team = find_team(teams, proposal.from_team_id)
    to_team = find_team(teams, proposal.to_team_id)
    if from_team is None or to_team is None:
        missing = proposal.from_team_id if from_team is None else proposal.to_team_id
        message = f"Unknown team: {missing}"
        logger.info("Trade %s not executed: %s", proposal.id, message)
        return TradeExecution(
            updated_teams=list(teams),
            updated_players=list(all_players),
            success=False,
            message=message,
        )

    offered_ids = set(proposal.players_offered)
    requested_ids = set(proposal.players_requested)
    offered = [p for p in from_team.roster if p.id in offered_ids]
    requested = [p for p in to_team.roster if p.id in requested_ids]

    offered_pick_ids = set(proposal.picks_offered)
    requested_pick_ids = set(proposal.picks_requested)
    offered_picks = [p for p in from_team.draft_picks if p.pick_id in offered_pick_ids]
    requested_picks = [p for p in to_team.draft_picks if p.pick_id in requested_pick_ids]

    new_from = _swap_assets(from_team, offered_ids, requested, offered_pick_ids, requested_picks)
    new_to = _swap_assets(to_team, requested_ids, offered, requested_pick_ids, offered_picks)

    updated_teams = []
    for team in teams:
        if team.id == new_from.id:
            updated_teams.append(new_from)
        elif team.id == new_to.id:
            updated_teams.append(new_to)
        else:
            updated_teams.append(team)

    moved_to = {p.id: to_team.id for p in offered}
    moved_to.update({p.id: from_team.id for p in requested})
    updated_players = [
        p.with_team(moved_to[p.id]) if p.id in moved_to else p
        for p in all_players
    ]

    logger.info(
        "Trade %s executed: %s sent %d player(s)/%d pick(s), %s sent %d player(s)/%d pick(s)",
        proposal.id, from_team.abbreviation, len(offered), len(offered_picks),
        to_team.abbreviation, len(requested), len(requested_picks),
    )
    return TradeExecution(updated_teams=updated_teams, updated_players=updated_players)
