"""League news feed items."""

from dataclasses import dataclass, field
from enum import Enum


class NewsType(Enum):
    TRADE = "trade"
    SIGNING = "signing"
    DRAFT = "draft"
    INJURY = "injury"
    SEASON = "season"
    PLAYOFFS = "playoffs"
    AWARD = "award"
    FRONT_OFFICE = "front_office"


@dataclass
class NewsItem:
    """A single headline in the league news log."""

    id: str
    season: int
    week: int
    news_type: NewsType
    headline: str
    team_ids: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "season": self.season,
            "week": self.week,
            "news_type": self.news_type.value,
            "headline": self.headline,
            "team_ids": list(self.team_ids),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "NewsItem":
        return cls(
            id=data["id"],
            season=data.get("season", 1),
            week=data.get("week", 0),
            news_type=NewsType(data.get("news_type", "season")),
            headline=data.get("headline", ""),
            team_ids=list(data.get("team_ids", [])),
        )
