"""Draft order from final standings and pick ownership."""

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from hardwood.core.draft.picks import DRAFT_ROUNDS
from hardwood.core.enums import PlayoffResult

if TYPE_CHECKING:
    from hardwood.core.models.team import Team


@dataclass
class DraftSlot:
    overall_pick: int
    round: int
    pick_in_round: int
    team_id: str            # Team that selects (current pick owner)
    original_team_id: str

    def to_dict(self) -> dict:
        return {
            "overall_pick": self.overall_pick,
            "round": self.round,
            "pick_in_round": self.pick_in_round,
            "team_id": self.team_id,
            "original_team_id": self.original_team_id,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "DraftSlot":
        return cls(
            overall_pick=data["overall_pick"],
            round=data["round"],
            pick_in_round=data["pick_in_round"],
            team_id=data["team_id"],
            original_team_id=data["original_team_id"],
        )


def round_order(
    teams: list["Team"],
    playoff_results: dict[str, PlayoffResult],
) -> list[str]:
    """
    Order of original pick holders within a round.

    Non-playoff teams go first, worst record first; playoff teams follow
    by how far they went, then by record.
    """
    def result_of(team: "Team") -> PlayoffResult:
        return playoff_results.get(team.id, PlayoffResult.MISSED)

    lottery = sorted(
        (t for t in teams if not result_of(t).made_playoffs),
        key=lambda t: t.wins,
    )
    playoff_teams = sorted(
        (t for t in teams if result_of(t).made_playoffs),
        key=lambda t: (result_of(t).rank, t.wins),
    )
    return [t.id for t in lottery + playoff_teams]


def _pick_owners(teams: list["Team"], season: int) -> dict[tuple[str, int], str]:
    """(original team, round) -> current holder of that team's pick for `season`."""
    owner_of: dict[tuple[str, int], str] = {}
    for team in teams:
        for pick in team.draft_picks:
            if pick.year == season:
                owner_of[(pick.original_team_id, pick.round)] = team.id
    return owner_of


def refresh_slot_owners(
    order: list[DraftSlot],
    teams: list["Team"],
    season: int,
    start: int = 0,
) -> list[DraftSlot]:
    """
    Reassign slots from `start` on to whoever now holds each pick.

    Picks change hands after the order is set; slots before `start` have
    already been used and their picks consumed, so they stay as they are.
    """
    owner_of = _pick_owners(teams, season)
    return [
        replace(slot, team_id=owner_of.get((slot.original_team_id, slot.round), slot.team_id))
        if index >= start else slot
        for index, slot in enumerate(order)
    ]


def build_draft_order(
    teams: list["Team"],
    playoff_results: dict[str, PlayoffResult],
    season: int,
) -> list[DraftSlot]:
    """
    Full draft order for `season`.

    Every round repeats the same original-holder order; each slot goes to
    whoever currently owns that team's pick for this season and round.
    """
    original_order = round_order(teams, playoff_results)
    owner_of = _pick_owners(teams, season)

    slots = []
    overall = 1
    for round_number in range(1, DRAFT_ROUNDS + 1):
        for position, original_id in enumerate(original_order, start=1):
            slots.append(DraftSlot(
                overall_pick=overall,
                round=round_number,
                pick_in_round=position,
                team_id=owner_of.get((original_id, round_number), original_id),
                original_team_id=original_id,
            ))
            overall += 1
    return slots


def project_pick_positions(teams: list["Team"], order: list[DraftSlot], season: int) -> list["Team"]:
    """Return teams whose picks for `season` carry their projected slot."""
    slot_of = {(s.original_team_id, s.round): s.pick_in_round for s in order}
    updated = []
    for team in teams:
        picks = [
            replace(p, projected_position=slot_of.get((p.original_team_id, p.round)))
            if p.year == season else p
            for p in team.draft_picks
        ]
        updated.append(replace(team, draft_picks=picks))
    return updated


def consume_pick(team: "Team", season: int, original_team_id: str, round_number: int) -> "Team":
    """Remove a used pick from its owner's inventory."""
    picks = [
        p for p in team.draft_picks
        if not (p.year == season and p.original_team_id == original_team_id and p.round == round_number)
    ]
    return replace(team, draft_picks=picks)
