"""Tests for the Player model."""

from hardwood.core.enums import Position
from hardwood.core.models.player import Player


class TestPlayerContract:
    """Tests for contract and aging helpers."""

    def test_advance_year_ages_and_runs_down_contract(self, make_player):
        """A season passing adds a year of age and removes a contract year."""
        player = make_player(age=25, contract_years=2)
        older = player.advance_year()

        assert older.age == 26
        assert older.contract_years == 1
        assert older.experience == player.experience + 1

    def test_advance_year_does_not_mutate(self, make_player):
        """The original player is untouched."""
        player = make_player(age=25)
        player.advance_year()
        assert player.age == 25

    def test_contract_years_never_negative(self, make_player):
        """Advancing an expired deal stays at zero."""
        player = make_player(contract_years=0).advance_year()
        assert player.contract_years == 0
        assert player.is_expiring

    def test_with_team(self, make_player):
        """with_team returns a copy owned by the new team."""
        player = make_player(team_id="home")
        moved = player.with_team("away")
        assert moved.team_id == "away"
        assert player.team_id == "home"

    def test_potential_gap(self, make_player):
        """Potential gap is never negative."""
        assert make_player(overall=70, potential=78).potential_gap == 8
        assert make_player(overall=80, potential=75).potential_gap == 0


class TestPlayerSerialization:
    """Tests for dictionary conversion."""

    def test_round_trip(self, make_player):
        """from_dict(to_dict()) restores an equal player."""
        player = make_player("abc", overall=81, position=Position.PG, salary=12.5)
        assert Player.from_dict(player.to_dict()) == player

    def test_position_serialized_by_value(self, make_player):
        """Enums are written as their values."""
        data = make_player(position=Position.C).to_dict()
        assert data["position"] == "C"
