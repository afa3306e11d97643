"""Shared pytest fixtures for Hardwood tests."""

import random
from dataclasses import replace

import pytest

from hardwood.config import reset_config
from hardwood.core.draft.picks import create_team_picks
from hardwood.core.enums import Conference, Division, MarketSize, Position
from hardwood.core.models.player import Player
from hardwood.core.models.team import Team
from hardwood.core.models.team_context import TeamContextType
from hardwood.generators.league import generate_league
from hardwood.management.session import GameSession


# =============================================================================
# Player Fixtures
# =============================================================================


@pytest.fixture
def make_player():
    """Factory for players with sensible contract defaults."""
    def _make(
        player_id: str = "p1",
        overall: int = 72,
        position: Position = Position.SF,
        age: int = 27,
        salary: float = 5.0,
        contract_years: int = 2,
        team_id: str = "home",
        potential=None,
        is_star=None,
        is_starter: bool = False,
    ) -> Player:
        return Player(
            id=player_id,
            name=f"Player {player_id}",
            position=position,
            age=age,
            overall_rating=overall,
            potential=overall if potential is None else potential,
            salary=salary,
            contract_years=contract_years,
            team_id=team_id,
            is_star=overall >= 85 if is_star is None else is_star,
            is_starter=is_starter,
        )
    return _make


@pytest.fixture
def star_player(make_player) -> Player:
    """An 88-rated center on a fair three-year deal."""
    return make_player("star", overall=88, position=Position.C, salary=20.0,
                       contract_years=3, team_id="away")


@pytest.fixture
def role_players(make_player) -> list[Player]:
    """Five interchangeable 72-rated forwards."""
    return [make_player(f"role-{i}", overall=72) for i in range(5)]


# =============================================================================
# Team Fixtures
# =============================================================================


@pytest.fixture
def make_team():
    """Factory for teams; payroll is always derived from the roster."""
    def _make(
        team_id: str = "home",
        roster=None,
        conference: Conference = Conference.EASTERN,
        division: Division = Division.ATLANTIC,
        context_type: TeamContextType = TeamContextType.LEGACY_POWER,
        market_size: MarketSize = MarketSize.LARGE,
        fanbase: int = 60,
        prestige: int = 60,
        wins: int = 0,
        losses: int = 0,
        with_picks: bool = True,
    ) -> Team:
        team = Team(
            id=team_id,
            city=team_id.title(),
            name="Testers",
            abbreviation=team_id[:3].upper(),
            conference=conference,
            division=division,
            context_type=context_type,
            market_size=market_size,
            fanbase=fanbase,
            prestige=prestige,
            wins=wins,
            losses=losses,
            draft_picks=create_team_picks(team_id, 1) if with_picks else [],
        )
        players = [replace(p, team_id=team_id) for p in (roster or [])]
        return team.with_roster(players)
    return _make


@pytest.fixture
def rng() -> random.Random:
    """Seeded random source."""
    return random.Random(42)


@pytest.fixture
def league(rng):
    """A full generated 30-team league."""
    return generate_league(rng)


# =============================================================================
# Session Fixtures
# =============================================================================


@pytest.fixture
def session() -> GameSession:
    """A fresh seeded run managing Boston."""
    return GameSession.new("bos", seed=7)


@pytest.fixture(autouse=True)
def _fresh_config():
    """Every test reads configuration from a clean slate."""
    reset_config()
    yield
    reset_config()
