"""Event types emitted by a franchise session."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional


@dataclass
class FranchiseEvent:
    """Base class for all franchise events."""

    timestamp: datetime = field(default_factory=datetime.now)
    session_id: Optional[str] = None
    season: int = 1


@dataclass
class TradeCompletedEvent(FranchiseEvent):
    """Fired after a trade has been executed."""

    trade_id: str = ""
    from_team_id: str = ""
    to_team_id: str = ""
    players_sent: list[str] = field(default_factory=list)
    players_received: list[str] = field(default_factory=list)
    picks_sent: list[str] = field(default_factory=list)
    picks_received: list[str] = field(default_factory=list)
    fairness_score: float = 0.0
    ai_initiated: bool = False


@dataclass
class PlayerSignedEvent(FranchiseEvent):
    """Fired when a free agent joins a team."""

    team_id: str = ""
    player_id: str = ""
    player_name: str = ""
    salary: float = 0.0
    years: int = 0


@dataclass
class PlayerDraftedEvent(FranchiseEvent):
    """Fired for every pick made in the draft."""

    team_id: str = ""
    player_id: str = ""
    player_name: str = ""
    overall_pick: int = 0
    round: int = 1


@dataclass
class SeasonCompletedEvent(FranchiseEvent):
    """Fired once the regular season and playoffs have been played."""

    team_id: str = ""
    wins: int = 0
    losses: int = 0
    playoff_result: str = "missed"
    champion_team_id: Optional[str] = None
    profit: float = 0.0


@dataclass
class PhaseChangedEvent(FranchiseEvent):
    """Fired whenever the session moves to another season phase."""

    previous_phase: str = ""
    new_phase: str = ""
