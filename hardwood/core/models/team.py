"""Team and roster models."""

from dataclasses import dataclass, field, replace
from typing import Optional

from hardwood.core.draft.picks import DraftPick
from hardwood.core.enums import Conference, Division, MarketSize, Position
from hardwood.core.models.player import Player
from hardwood.core.models.team_context import (
    TeamContextProfile,
    TeamContextType,
    get_context_profile,
)


DEFAULT_SALARY_CAP = 140.0


def roster_salary(roster: list[Player]) -> float:
    """Exact payroll of a roster, rounded away from float drift."""
    return round(sum(p.salary for p in roster), 2)


@dataclass
class Team:
    """
    A franchise.

    `total_salary` is stored (it is persisted and displayed) but must
    always equal the roster sum; build modified teams through
    `with_roster` so the two never drift.
    """

    id: str
    city: str
    name: str
    abbreviation: str
    conference: Conference
    division: Division
    context_type: TeamContextType
    market_size: MarketSize = MarketSize.MEDIUM
    fanbase: int = 50     # 0-100
    prestige: int = 50    # 0-100

    salary_cap: float = DEFAULT_SALARY_CAP
    total_salary: float = 0.0
    wins: int = 0
    losses: int = 0

    roster: list[Player] = field(default_factory=list)
    draft_picks: list[DraftPick] = field(default_factory=list)

    @property
    def full_name(self) -> str:
        return f"{self.city} {self.name}"

    @property
    def cap_space(self) -> float:
        return round(self.salary_cap - self.total_salary, 2)

    @property
    def context(self) -> TeamContextProfile:
        return get_context_profile(self.context_type)

    @property
    def win_pct(self) -> float:
        games = self.wins + self.losses
        return self.wins / games if games else 0.0

    @property
    def starters(self) -> list[Player]:
        return [p for p in self.roster if p.is_starter]

    @property
    def stars(self) -> list[Player]:
        return [p for p in self.roster if p.is_star]

    def get_player(self, player_id: str) -> Optional[Player]:
        for player in self.roster:
            if player.id == player_id:
                return player
        return None

    def get_pick(self, pick_id: str) -> Optional[DraftPick]:
        for pick in self.draft_picks:
            if pick.pick_id == pick_id:
                return pick
        return None

    def players_at(self, position: Position) -> list[Player]:
        return [p for p in self.roster if p.position == position]

    def with_roster(self, roster: list[Player], **changes) -> "Team":
        """Return a copy with a new roster and a recomputed payroll."""
        return replace(self, roster=list(roster), total_salary=roster_salary(roster), **changes)

    def with_record(self, wins: int, losses: int) -> "Team":
        return replace(self, wins=wins, losses=losses)

    def __str__(self) -> str:
        return f"{self.full_name} ({self.wins}-{self.losses})"

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "id": self.id,
            "city": self.city,
            "name": self.name,
            "abbreviation": self.abbreviation,
            "conference": self.conference.value,
            "division": self.division.value,
            "context_type": self.context_type.value,
            "market_size": self.market_size.value,
            "fanbase": self.fanbase,
            "prestige": self.prestige,
            "salary_cap": self.salary_cap,
            "total_salary": self.total_salary,
            "wins": self.wins,
            "losses": self.losses,
            "roster": [p.to_dict() for p in self.roster],
            "draft_picks": [p.to_dict() for p in self.draft_picks],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Team":
        """Create from dictionary."""
        return cls(
            id=data["id"],
            city=data.get("city", ""),
            name=data.get("name", ""),
            abbreviation=data.get("abbreviation", ""),
            conference=Conference(data["conference"]),
            division=Division(data["division"]),
            context_type=TeamContextType(data["context_type"]),
            market_size=MarketSize(data.get("market_size", "medium")),
            fanbase=data.get("fanbase", 50),
            prestige=data.get("prestige", 50),
            salary_cap=data.get("salary_cap", DEFAULT_SALARY_CAP),
            total_salary=data.get("total_salary", 0.0),
            wins=data.get("wins", 0),
            losses=data.get("losses", 0),
            roster=[Player.from_dict(p) for p in data.get("roster", [])],
            draft_picks=[DraftPick.from_dict(p) for p in data.get("draft_picks", [])],
        )


def replace_teams(teams: list[Team], updated: list[Team]) -> list[Team]:
    """Return `teams` with any team whose id appears in `updated` swapped in."""
    by_id = {t.id: t for t in updated}
    return [by_id.get(t.id, t) for t in teams]


def find_team(teams: list[Team], team_id: str) -> Optional[Team]:
    for team in teams:
        if team.id == team_id:
            return team
    return None
