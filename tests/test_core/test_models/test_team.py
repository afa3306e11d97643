"""Tests for the Team model and league helpers."""

from hardwood.core.enums import Position
from hardwood.core.models.team import Team, find_team, replace_teams, roster_salary
from hardwood.core.models.team_context import (
    Compatibility,
    StrategyType,
    TeamContextType,
    get_context_compatibility,
)


class TestTeamPayroll:
    """Tests for the payroll invariant."""

    def test_with_roster_recomputes_salary(self, make_team, make_player):
        """total_salary always equals the roster sum."""
        team = make_team(roster=[make_player("a", salary=10.0), make_player("b", salary=7.5)])
        assert team.total_salary == 17.5

        bigger = team.with_roster(team.roster + [make_player("c", salary=2.5)])
        assert bigger.total_salary == roster_salary(bigger.roster) == 20.0

    def test_cap_space(self, make_team, make_player):
        """Cap space is the cap minus payroll."""
        team = make_team(roster=[make_player(salary=100.0)])
        assert team.cap_space == 40.0

    def test_roster_salary_rounds_float_drift(self, make_player):
        """Summing tenths does not leave float noise behind."""
        roster = [make_player(str(i), salary=0.1) for i in range(3)]
        assert roster_salary(roster) == 0.3


class TestTeamQueries:
    """Tests for lookups on a team."""

    def test_get_player_and_pick(self, make_team, make_player):
        """Players and picks are found by id."""
        team = make_team(roster=[make_player("x")])
        assert team.get_player("x") is not None
        assert team.get_player("missing") is None
        assert team.get_pick("home-s1-r1") is not None
        assert team.get_pick("home-s9-r1") is None

    def test_players_at(self, make_team, make_player):
        """players_at filters by position."""
        team = make_team(roster=[
            make_player("g", position=Position.PG),
            make_player("c1", position=Position.C),
            make_player("c2", position=Position.C),
        ])
        assert len(team.players_at(Position.C)) == 2

    def test_win_pct_without_games(self, make_team):
        """No games played reads as zero."""
        assert make_team().win_pct == 0.0
        assert make_team(wins=30, losses=10).win_pct == 0.75

    def test_round_trip(self, make_team, make_player):
        """Teams survive serialization."""
        team = make_team(roster=[make_player("a")], wins=3, losses=1)
        assert Team.from_dict(team.to_dict()) == team


class TestLeagueHelpers:
    """Tests for list-of-teams helpers."""

    def test_replace_and_find(self, make_team):
        """replace_teams swaps by id and keeps order."""
        teams = [make_team("aaa"), make_team("bbb")]
        updated = replace_teams(teams, [make_team("bbb", wins=5)])
        assert [t.id for t in updated] == ["aaa", "bbb"]
        assert find_team(updated, "bbb").wins == 5
        assert find_team(updated, "zzz") is None


class TestContextCompatibility:
    """Tests for context and strategy fit."""

    def test_every_pair_is_defined(self):
        """Each context has a verdict for each strategy."""
        for context in TeamContextType:
            for strategy in StrategyType:
                compatibility, text = get_context_compatibility(context, strategy)
                assert isinstance(compatibility, Compatibility)
                assert text

    def test_small_market_reset_favors_swings(self):
        """A rebuilding small market has nothing to lose."""
        compatibility, _ = get_context_compatibility(
            TeamContextType.SMALL_MARKET_RESET, StrategyType.BOOM_BUST_SWING,
        )
        assert compatibility is Compatibility.GOOD
