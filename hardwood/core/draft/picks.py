"""
Draft Pick Tracking System.

Tracks:
- Pick ownership (original team, current team)
- Pick value for trade evaluation
- Pick inventories created at league bootstrap and each new season
"""

from dataclasses import dataclass
from typing import Optional


DRAFT_ROUNDS = 2
PICK_SEASONS_AHEAD = 2  # Each team holds its own picks this many drafts out

# Pick value curve
TOP_PICK_COUNT = 3
TOP_PICK_BASE_VALUE = 180.0
TOP_PICK_CONVEXITY = 15.0      # (TOP_PICK_COUNT + 1 - pos)^2 * this on top of the base
FIRST_ROUND_START_VALUE = 150.0
FIRST_ROUND_DECAY_PER_PICK = 4.0
FIRST_ROUND_MIN_VALUE = 20.0
SECOND_ROUND_FRACTION = 0.3
FUTURE_YEAR_DISCOUNT = 0.85    # Per season beyond the current draft
DEFAULT_PROJECTED_POSITION = 15


@dataclass
class DraftPick:
    """
    A draft pick that can be owned and traded.

    Tracks original ownership, current ownership and, once the
    standings are known, the projected slot within its round.
    """
    pick_id: str
    year: int = 1                  # Season whose draft uses this pick
    round: int = 1                 # 1 or 2
    original_team_id: str = ""     # Team that originally held pick
    current_team_id: str = ""      # Current owner
    projected_position: Optional[int] = None  # Slot within the round (1-30)

    @property
    def is_traded(self) -> bool:
        return self.original_team_id != self.current_team_id

    @property
    def label(self) -> str:
        return f"Season {self.year} Round {self.round}"

    def to_dict(self) -> dict:
        return {
            "pick_id": self.pick_id,
            "year": self.year,
            "round": self.round,
            "original_team_id": self.original_team_id,
            "current_team_id": self.current_team_id,
            "projected_position": self.projected_position,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "DraftPick":
        return cls(
            pick_id=data["pick_id"],
            year=data.get("year", 1),
            round=data.get("round", 1),
            original_team_id=data.get("original_team_id", ""),
            current_team_id=data.get("current_team_id", ""),
            projected_position=data.get("projected_position"),
        )


def calculate_pick_value(pick: DraftPick, current_season: int = 1) -> float:
    """
    Get trade value for a pick.

    First-round value is convex near the top: picks 1-3 sit on a
    quadratic bonus over a linear slide for the rest of the round.
    Second-round picks are a small fraction of that curve, and picks
    for later drafts are discounted per season of wait.

    Args:
        pick: The pick to value
        current_season: Season of the next draft to be held

    Returns:
        Trade value on the same scale as player values
    """
    position = pick.projected_position or DEFAULT_PROJECTED_POSITION
    position = max(1, position)

    if position <= TOP_PICK_COUNT:
        value = TOP_PICK_BASE_VALUE + (TOP_PICK_COUNT + 1 - position) ** 2 * TOP_PICK_CONVEXITY
    else:
        value = max(
            FIRST_ROUND_MIN_VALUE,
            FIRST_ROUND_START_VALUE - position * FIRST_ROUND_DECAY_PER_PICK,
        )

    if pick.round != 1:
        value *= SECOND_ROUND_FRACTION

    seasons_out = max(0, pick.year - current_season)
    value *= FUTURE_YEAR_DISCOUNT ** seasons_out

    return round(value, 1)


def make_pick_id(team_id: str, year: int, round_number: int) -> str:
    return f"{team_id}-s{year}-r{round_number}"


def create_team_picks(team_id: str, first_year: int, seasons: int = PICK_SEASONS_AHEAD) -> list[DraftPick]:
    """Create a team's own picks for `seasons` drafts starting at first_year."""
    picks = []
    for year in range(first_year, first_year + seasons):
        for round_number in range(1, DRAFT_ROUNDS + 1):
            picks.append(DraftPick(
                pick_id=make_pick_id(team_id, year, round_number),
                year=year,
                round=round_number,
                original_team_id=team_id,
                current_team_id=team_id,
            ))
    return picks
