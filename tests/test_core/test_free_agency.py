"""Tests for the free-agent pool and player interest."""

import random

import pytest

from hardwood.core.contracts.free_agency import (
    FREE_AGENT_POOL_SIZE,
    FreeAgent,
    ai_choose_free_agent,
    asking_price_for,
    calculate_player_interest,
    generate_free_agents,
    make_free_agent,
    sign_free_agent,
    will_accept_offer,
)
from hardwood.core.enums import Difficulty, MarketSize, Position


class TestFreeAgentPool:
    """Tests for pool generation."""

    def test_pool_size_and_order(self):
        """The pool is sorted best first with season-scoped ids."""
        pool = generate_free_agents(rng=random.Random(2), season=3)
        assert len(pool) == FREE_AGENT_POOL_SIZE
        ratings = [fa.player.overall_rating for fa in pool]
        assert ratings == sorted(ratings, reverse=True)
        assert all(fa.id.startswith("fa-3-") for fa in pool)
        assert all(fa.player.team_id is None for fa in pool)

    def test_asking_price_floor(self):
        """Nobody asks for less than $2M."""
        assert asking_price_for(55, 55) == 2.0
        assert asking_price_for(80, 80) == 16.0

    def test_make_free_agent_clears_contract(self, make_player):
        """Released players lose their team and contract."""
        fa = make_free_agent(make_player(overall=78, age=33, is_starter=True))
        assert fa.player.team_id is None
        assert fa.player.contract_years == 0
        assert not fa.player.is_starter
        assert fa.years_wanted == 1

    def test_round_trip(self, make_player):
        """Free agents survive serialization."""
        fa = make_free_agent(make_player(team_id=None))
        assert FreeAgent.from_dict(fa.to_dict()) == fa


class TestPlayerInterest:
    """Tests for the interest model."""

    @pytest.fixture
    def free_agent(self, make_player):
        return make_free_agent(make_player("fa", overall=80, position=Position.PG, team_id=None))

    def test_overpaying_helps(self, make_team, free_agent):
        """A bigger offer never lowers interest."""
        team = make_team()
        ask = free_agent.asking_price
        low = calculate_player_interest(free_agent.player, team, ask * 0.5, ask)
        fair = calculate_player_interest(free_agent.player, team, ask, ask)
        rich = calculate_player_interest(free_agent.player, team, ask * 1.2, ask)
        assert low < fair < rich

    def test_known_components(self, make_team, free_agent):
        """Base 50, +25 money, -10 record, +10 market, +20 playing time, +3 prestige."""
        team = make_team(market_size=MarketSize.LARGE, prestige=60)
        interest = calculate_player_interest(
            free_agent.player, team, free_agent.asking_price * 1.2, free_agent.asking_price,
        )
        assert interest == 98

    def test_interest_clamped(self, make_team, free_agent):
        """Interest stays within 0-100."""
        team = make_team(wins=70, losses=12, prestige=100)
        interest = calculate_player_interest(free_agent.player, team, 100.0, free_agent.asking_price)
        assert interest == 100

    @pytest.mark.parametrize("difficulty,needed", [
        (Difficulty.EASY, 40),
        (Difficulty.MEDIUM, 55),
        (Difficulty.HARD, 65),
    ])
    def test_accept_thresholds(self, difficulty, needed):
        """Harder settings need more interest."""
        assert will_accept_offer(needed, difficulty)
        assert not will_accept_offer(needed - 1, difficulty)


class TestSigning:
    """Tests for contract signing."""

    def test_sign_sets_contract(self, make_team, make_player):
        """The signed player carries the agreed terms."""
        team = make_team()
        fa = make_free_agent(make_player("fa", overall=80, team_id=None))
        player = sign_free_agent(fa, team, 18.0, 3)
        assert player.team_id == team.id
        assert player.salary == 18.0
        assert player.contract_years == 3
        assert player.is_starter

    def test_ai_choice_respects_cap_and_limit(self, make_team, make_player):
        """AI teams only consider what they can afford and roster."""
        pool = [
            make_free_agent(make_player("pricey", overall=83, team_id=None)),
            make_free_agent(make_player("cheap", overall=70, team_id=None)),
        ]
        tight = make_team(roster=[make_player("x", salary=130.0)])
        assert ai_choose_free_agent(tight, pool, 15).id == "cheap"
        assert ai_choose_free_agent(tight, pool, 1) is None
        broke = make_team(roster=[make_player("x", salary=140.0)])
        assert ai_choose_free_agent(broke, pool, 15) is None
