"""Tests for draft picks, prospects and draft order."""

import random

import pytest

from hardwood.core.draft.order import (
    build_draft_order,
    consume_pick,
    project_pick_positions,
    refresh_slot_owners,
    round_order,
)
from hardwood.core.draft.picks import (
    DRAFT_ROUNDS,
    DraftPick,
    calculate_pick_value,
    create_team_picks,
    make_pick_id,
)
from hardwood.core.draft.prospects import (
    DRAFT_CLASS_SIZE,
    ROOKIE_CONTRACT_YEARS,
    ai_draft_pick,
    draft_prospect_to_player,
    generate_draft_class,
    realize_rating,
    rookie_salary,
)
from hardwood.core.enums import PlayoffResult, Position


# =============================================================================
# Picks
# =============================================================================


class TestDraftPicks:
    """Tests for pick inventory and value."""

    def test_create_team_picks(self):
        """Two rounds for each season ahead."""
        picks = create_team_picks("bos", 1)
        assert len(picks) == 2 * DRAFT_ROUNDS
        assert picks[0].pick_id == make_pick_id("bos", 1, 1) == "bos-s1-r1"
        assert all(not p.is_traded for p in picks)

    def test_top_pick_worth_most(self):
        """Value falls with draft position."""
        values = [
            calculate_pick_value(DraftPick("p", 1, 1, "a", "a", projected_position=pos))
            for pos in (1, 2, 3, 10, 25)
        ]
        assert values == sorted(values, reverse=True)

    def test_top_three_convex(self):
        """The drop from 1 to 2 is bigger than from 3 to 4."""
        value = {
            pos: calculate_pick_value(DraftPick("p", 1, 1, "a", "a", projected_position=pos))
            for pos in (1, 2, 3, 4)
        }
        assert value[1] - value[2] > value[3] - value[4]

    def test_second_round_and_future_discount(self):
        """Second-rounders and later drafts are worth less."""
        first = calculate_pick_value(DraftPick("p", 1, 1, "a", "a", projected_position=10))
        second = calculate_pick_value(DraftPick("p", 1, 2, "a", "a", projected_position=10))
        future = calculate_pick_value(DraftPick("p", 2, 1, "a", "a", projected_position=10))
        assert second < first
        assert future < first


# =============================================================================
# Prospects
# =============================================================================


class TestDraftClass:
    """Tests for draft class generation."""

    def test_size_and_ranking(self):
        """The class is ranked 1..N by draft value."""
        prospects = generate_draft_class(rng=random.Random(1), season=2)
        assert len(prospects) == DRAFT_CLASS_SIZE
        assert [p.rank for p in prospects] == list(range(1, DRAFT_CLASS_SIZE + 1))
        values = [p.draft_value for p in prospects]
        assert values == sorted(values, reverse=True)
        assert prospects[0].id.startswith("prospect-2-")

    def test_floor_and_ceiling_bracket_ratings(self):
        """Every prospect's range contains its rating and potential."""
        for prospect in generate_draft_class(rng=random.Random(3)):
            assert prospect.floor <= prospect.overall_rating <= prospect.potential <= prospect.ceiling

    def test_deterministic_for_seed(self):
        """Same seed, same class."""
        first = generate_draft_class(rng=random.Random(9))
        second = generate_draft_class(rng=random.Random(9))
        assert [p.to_dict() for p in first] == [p.to_dict() for p in second]


class TestRookies:
    """Tests for turning prospects into players."""

    @pytest.mark.parametrize("slot,salary", [(1, 13.0), (30, 9.0), (60, 5.0), (75, 5.0)])
    def test_rookie_scale(self, slot, salary):
        """Earlier picks earn more; the scale bottoms out at the base."""
        assert rookie_salary(slot) == salary

    def test_realized_rating_within_range(self):
        """Realized ratings never leave [floor, ceiling]."""
        rng = random.Random(4)
        for prospect in generate_draft_class(rng=random.Random(5)):
            for _ in range(20):
                assert prospect.floor <= realize_rating(prospect, rng) <= prospect.ceiling

    def test_drafted_player_contract(self):
        """Drafted players join on a four-year rookie deal."""
        prospect = generate_draft_class(rng=random.Random(6))[0]
        player = draft_prospect_to_player(prospect, "bos", random.Random(1), draft_slot=1)

        assert player.id == f"drafted-{prospect.id}"
        assert player.team_id == "bos"
        assert player.salary == 13.0
        assert player.contract_years == ROOKIE_CONTRACT_YEARS
        assert player.potential >= player.overall_rating

    def test_ai_prefers_need(self, make_team, make_player):
        """A thin position nudges the AI toward an otherwise similar prospect."""
        prospects = generate_draft_class(rng=random.Random(8))
        team = make_team(roster=[make_player(f"c{i}", position=Position.C) for i in range(3)])
        choice = ai_draft_pick(team, prospects)
        assert choice is not None
        assert choice.draft_value >= max(p.draft_value for p in prospects) - 5.0

    def test_ai_pick_empty_pool(self, make_team):
        """No prospects left, no pick."""
        assert ai_draft_pick(make_team(), []) is None


# =============================================================================
# Order
# =============================================================================


class TestDraftOrder:
    """Tests for building the draft order."""

    @pytest.fixture
    def teams(self, make_team):
        return [
            make_team("aaa", wins=60, losses=22),
            make_team("bbb", wins=20, losses=62),
            make_team("ccc", wins=45, losses=37),
            make_team("ddd", wins=30, losses=52),
        ]

    @pytest.fixture
    def results(self):
        return {
            "aaa": PlayoffResult.CHAMPION,
            "bbb": PlayoffResult.MISSED,
            "ccc": PlayoffResult.FIRST_ROUND,
            "ddd": PlayoffResult.MISSED,
        }

    def test_lottery_teams_first(self, teams, results):
        """Non-playoff teams pick first, worst record first; champion last."""
        assert round_order(teams, results) == ["bbb", "ddd", "ccc", "aaa"]

    def test_every_round_repeats(self, teams, results):
        """Two rounds, numbered overall."""
        order = build_draft_order(teams, results, 1)
        assert len(order) == len(teams) * DRAFT_ROUNDS
        assert [s.overall_pick for s in order] == list(range(1, len(order) + 1))
        assert order[4].round == 2
        assert order[4].original_team_id == "bbb"

    def test_traded_pick_goes_to_owner(self, teams, results):
        """A pick's current owner makes the selection."""
        bbb = teams[1]
        traded = [p for p in bbb.draft_picks if p.pick_id == "bbb-s1-r1"][0]
        teams[1] = bbb.with_roster(bbb.roster, draft_picks=[p for p in bbb.draft_picks if p is not traded])
        aaa = teams[0]
        teams[0] = aaa.with_roster(aaa.roster, draft_picks=aaa.draft_picks + [traded])

        slot = build_draft_order(teams, results, 1)[0]
        assert slot.team_id == "aaa"
        assert slot.original_team_id == "bbb"

    def test_project_positions(self, teams, results):
        """This season's picks learn their slot."""
        order = build_draft_order(teams, results, 1)
        projected = project_pick_positions(teams, order, 1)
        pick = projected[1].get_pick("bbb-s1-r1")
        assert pick.projected_position == 1
        assert projected[1].get_pick("bbb-s2-r1").projected_position is None

    def test_consume_pick(self, teams):
        """A used pick leaves the inventory."""
        team = consume_pick(teams[0], 1, "aaa", 1)
        assert team.get_pick("aaa-s1-r1") is None
        assert team.get_pick("aaa-s1-r2") is not None

    def test_refresh_follows_later_trades(self, teams, results):
        """Slots set before a pick changes hands move to the new holder."""
        order = build_draft_order(teams, results, 1)
        ddd = teams[3]
        traded = ddd.get_pick("ddd-s1-r2")
        teams[3] = ddd.with_roster(ddd.roster, draft_picks=[p for p in ddd.draft_picks if p is not traded])
        teams[0] = teams[0].with_roster(teams[0].roster, draft_picks=teams[0].draft_picks + [traded])

        refreshed = refresh_slot_owners(order, teams, 1)

        assert refreshed[5].original_team_id == "ddd"
        assert refreshed[5].team_id == "aaa"
        assert [s.team_id for s in refreshed[:5]] == [s.team_id for s in order[:5]]

    def test_refresh_leaves_used_slots(self, teams, results):
        """Slots before the cursor keep their selecting team once picks are consumed."""
        order = build_draft_order(teams, results, 1)
        teams[1] = consume_pick(teams[1], 1, "bbb", 1)

        refreshed = refresh_slot_owners(order, teams, 1, start=1)

        assert refreshed[0] == order[0]
        assert refreshed[0].team_id == "bbb"
