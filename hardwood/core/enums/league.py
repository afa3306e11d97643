"""
League-level enumerations.

Handles:
- Conference and division alignment
- Market size and difficulty settings
- Risk levels shared by trades, economics and evaluation
- Playoff outcomes and season phases
"""

from enum import Enum


class Conference(Enum):
    EASTERN = "Eastern"
    WESTERN = "Western"


class Division(Enum):
    ATLANTIC = "Atlantic"
    CENTRAL = "Central"
    SOUTHEAST = "Southeast"
    NORTHWEST = "Northwest"
    PACIFIC = "Pacific"
    SOUTHWEST = "Southwest"

    @property
    def conference(self) -> Conference:
        if self in (Division.ATLANTIC, Division.CENTRAL, Division.SOUTHEAST):
            return Conference.EASTERN
        return Conference.WESTERN


class MarketSize(Enum):
    LARGE = "large"
    MEDIUM = "medium"
    SMALL = "small"


class Difficulty(Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


class RiskLevel(Enum):
    """Ordered risk buckets; compare with `rank`."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @property
    def rank(self) -> int:
        return _RISK_RANKS[self]


_RISK_RANKS = {RiskLevel.LOW: 0, RiskLevel.MEDIUM: 1, RiskLevel.HIGH: 2}


class PlayoffResult(Enum):
    """Furthest point a team reached in a postseason, ordered worst to best."""

    MISSED = "missed"
    FIRST_ROUND = "first_round"
    SECOND_ROUND = "second_round"
    CONFERENCE_FINALS = "conference_finals"
    FINALS = "finals"
    CHAMPION = "champion"

    @property
    def rank(self) -> int:
        return list(PlayoffResult).index(self)

    @property
    def made_playoffs(self) -> bool:
        return self is not PlayoffResult.MISSED

    @property
    def display_name(self) -> str:
        return _PLAYOFF_DISPLAY[self]


_PLAYOFF_DISPLAY = {
    PlayoffResult.MISSED: "Missed Playoffs",
    PlayoffResult.FIRST_ROUND: "First Round Exit",
    PlayoffResult.SECOND_ROUND: "Conference Semifinals",
    PlayoffResult.CONFERENCE_FINALS: "Conference Finals",
    PlayoffResult.FINALS: "Lost in Finals",
    PlayoffResult.CHAMPION: "Champion",
}


class SeasonPhase(Enum):
    """Phases of a franchise year, in the order they are played."""

    PRESEASON = "preseason"
    REGULAR_SEASON = "regular_season"
    PLAYOFFS = "playoffs"
    SEASON_END = "season_end"
    OFFSEASON_DRAFT = "offseason_draft"
    OFFSEASON_FREE_AGENCY = "offseason_free_agency"

    @property
    def next_phase(self) -> "SeasonPhase":
        phases = list(SeasonPhase)
        return phases[(phases.index(self) + 1) % len(phases)]


class TradeStatus(Enum):
    PENDING = "pending"
    ACCEPTED = "accepted"
    REJECTED = "rejected"
