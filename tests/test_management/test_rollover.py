"""Tests for season rollover."""

import random

from hardwood.core.draft.picks import DraftPick, make_pick_id
from hardwood.core.enums import SeasonPhase
from hardwood.management.offseason import (
    advance_contracts,
    set_starting_lineup,
    start_new_season,
    top_up_picks,
)


class TestLineupAndContracts:
    """Tests for per-team rollover steps."""

    def test_top_five_start(self, make_team, make_player):
        """The five best players start, regardless of previous role."""
        roster = [make_player(f"p{i}", overall=60 + i, is_starter=i < 5) for i in range(8)]
        team = set_starting_lineup(make_team(roster=roster))
        assert {p.id for p in team.starters} == {"p3", "p4", "p5", "p6", "p7"}

    def test_contracts_run_down(self, make_team, make_player):
        """Everyone ages; deals reaching zero years are released."""
        team = make_team(roster=[
            make_player("expiring", contract_years=1, salary=10.0),
            make_player("staying", contract_years=3, salary=4.0, age=30),
        ])
        teams, released = advance_contracts([team])

        assert [p.id for p in released] == ["expiring"]
        staying = teams[0].get_player("staying")
        assert staying.age == 31
        assert staying.contract_years == 2
        assert teams[0].total_salary == 4.0


class TestTopUpPicks:
    """Tests for draft pick inventory rollover."""

    def test_rolls_forward(self, make_team):
        """Last season's picks drop and the newest season is added."""
        teams = top_up_picks([make_team("aaa")], 2)
        years = sorted({p.year for p in teams[0].draft_picks})
        assert years == [2, 3]
        assert len(teams[0].draft_picks) == 4

    def test_traded_future_pick_not_duplicated(self, make_team):
        """A pick already held elsewhere is not recreated for its original team."""
        future = DraftPick(
            pick_id=make_pick_id("bbb", 3, 1), year=3, round=1,
            original_team_id="bbb", current_team_id="aaa",
        )
        aaa = make_team("aaa")
        aaa = aaa.with_roster(aaa.roster, draft_picks=aaa.draft_picks + [future])
        teams = top_up_picks([aaa, make_team("bbb")], 2)

        assert teams[0].get_pick("bbb-s3-r1") is not None
        assert teams[1].get_pick("bbb-s3-r1") is None
        assert teams[1].get_pick("bbb-s3-r2") is not None


class TestStartNewSeason:
    """Tests for the full rollover."""

    def test_next_preseason(self, session):
        """The league moves to a clean preseason one season later."""
        before = session.state
        result = start_new_season(before, random.Random(3))
        state = result.state

        assert state.season == 2
        assert state.phase is SeasonPhase.PRESEASON
        assert state.week == 0
        assert all(t.wins == 0 and t.losses == 0 for t in state.teams)
        assert all(p.id.startswith("prospect-2-") for p in state.draft_prospects)
        assert state.draft_order == []
        assert before.season == 1

    def test_expired_players_leave(self, session):
        """Released players are off their old rosters."""
        result = start_new_season(session.state, random.Random(3))
        user_ids = {p.id for p in result.state.user_team.roster}
        for player in result.released:
            if player.team_id == session.state.user_team_id:
                assert player.id not in user_ids

    def test_one_lineup_per_team(self, session):
        """Every team fields five starters after rollover."""
        result = start_new_season(session.state, random.Random(4))
        assert all(len(t.starters) == 5 for t in result.state.teams)
