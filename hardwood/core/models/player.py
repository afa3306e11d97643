"""Player model."""

from dataclasses import dataclass, replace
from typing import Optional

from hardwood.core.enums import Position


@dataclass
class Player:
    """
    A basketball player.

    Ratings run 40-99. Salary is the annual amount in millions and
    contract_years counts the seasons still remaining on the deal.
    A player with no team_id is unsigned (free agent pool).
    """

    id: str
    name: str
    position: Position
    age: int = 25
    overall_rating: int = 60
    potential: int = 65

    # Sub-ratings
    offense: int = 60
    defense: int = 60
    athleticism: int = 60
    basketball_iq: int = 60

    durability: int = 80
    salary: float = 1.0
    contract_years: int = 1
    team_id: Optional[str] = None

    is_starter: bool = False
    is_star: bool = False
    morale: int = 70
    experience: int = 0

    @property
    def potential_gap(self) -> int:
        return max(0, self.potential - self.overall_rating)

    @property
    def is_expiring(self) -> bool:
        return self.contract_years <= 0

    def with_team(self, team_id: Optional[str]) -> "Player":
        """Return a copy owned by another team."""
        return replace(self, team_id=team_id)

    def advance_year(self) -> "Player":
        """Return a copy aged by one season with one less contract year."""
        return replace(
            self,
            age=self.age + 1,
            experience=self.experience + 1,
            contract_years=max(0, self.contract_years - 1),
        )

    def __str__(self) -> str:
        return f"{self.name} ({self.position.value}, {self.overall_rating} OVR)"

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "id": self.id,
            "name": self.name,
            "position": self.position.value,
            "age": self.age,
            "overall_rating": self.overall_rating,
            "potential": self.potential,
            "offense": self.offense,
            "defense": self.defense,
            "athleticism": self.athleticism,
            "basketball_iq": self.basketball_iq,
            "durability": self.durability,
            "salary": self.salary,
            "contract_years": self.contract_years,
            "team_id": self.team_id,
            "is_starter": self.is_starter,
            "is_star": self.is_star,
            "morale": self.morale,
            "experience": self.experience,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Player":
        """Create from dictionary."""
        return cls(
            id=data["id"],
            name=data.get("name", ""),
            position=Position(data.get("position", "SF")),
            age=data.get("age", 25),
            overall_rating=data.get("overall_rating", 60),
            potential=data.get("potential", 65),
            offense=data.get("offense", 60),
            defense=data.get("defense", 60),
            athleticism=data.get("athleticism", 60),
            basketball_iq=data.get("basketball_iq", 60),
            durability=data.get("durability", 80),
            salary=data.get("salary", 1.0),
            contract_years=data.get("contract_years", 1),
            team_id=data.get("team_id"),
            is_starter=data.get("is_starter", False),
            is_star=data.get("is_star", False),
            morale=data.get("morale", 70),
            experience=data.get("experience", 0),
        )
