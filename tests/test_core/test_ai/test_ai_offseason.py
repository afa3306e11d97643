"""Tests for AI offseason activity."""

import random

from hardwood.core.ai.offseason import ROSTER_LIMIT, process_ai_free_agency, process_ai_trades
from hardwood.core.contracts.free_agency import make_free_agent
from hardwood.core.models.team import find_team, roster_salary


class TestAIFreeAgency:
    """Tests for AI signings."""

    def test_ai_signs_and_user_does_not(self, make_team, make_player):
        """Only AI teams sign; the pool shrinks by each signing."""
        user = make_team("home", roster=[make_player("u1", salary=10.0)])
        ai = make_team("away", roster=[make_player("a1", salary=10.0)])
        pool = [make_free_agent(make_player(f"fa{i}", overall=80 - i, team_id=None)) for i in range(4)]

        result = process_ai_free_agency([user, ai], pool, "home", rounds=2)

        assert len(find_team(result.teams, "home").roster) == 1
        away = find_team(result.teams, "away")
        assert len(away.roster) == 3
        assert len(result.free_agents) == 2
        assert len(result.signings) == 2
        assert away.total_salary == roster_salary(away.roster)

    def test_ai_pays_asking_price_within_cap(self, make_team, make_player):
        """Signings never push an AI team over the cap."""
        ai = make_team("away", roster=[make_player("a1", salary=135.0)])
        pool = [make_free_agent(make_player("fa", overall=80, team_id=None))]

        result = process_ai_free_agency([ai], pool, "home")
        assert len(find_team(result.teams, "away").roster) == 1
        assert not result.signings

    def test_roster_limit_respected(self, make_team, make_player):
        """Full rosters sign nobody."""
        roster = [make_player(f"a{i}", salary=1.0) for i in range(ROSTER_LIMIT)]
        ai = make_team("away", roster=roster)
        pool = [make_free_agent(make_player("fa", overall=80, team_id=None))]

        result = process_ai_free_agency([ai], pool, "home")
        assert len(find_team(result.teams, "away").roster) == ROSTER_LIMIT


class TestAITrades:
    """Tests for the AI-to-AI trade window."""

    def test_user_team_never_involved(self, league):
        """The user's roster is untouched by AI trades."""
        user = league[0]
        result = process_ai_trades(league, user.id, random.Random(5), season=1)
        assert find_team(result.teams, user.id) == user

    def test_payrolls_stay_consistent(self, league):
        """Every team's payroll still matches its roster."""
        result = process_ai_trades(league, league[0].id, random.Random(11), season=1)
        for team in result.teams:
            assert team.total_salary == roster_salary(team.roster)
        assert sum(len(t.roster) for t in result.teams) == sum(len(t.roster) for t in league)
