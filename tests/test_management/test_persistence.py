"""Tests for saving and loading runs."""

import json

from hardwood.core.enums import SeasonPhase
from hardwood.management.persistence import load_game, save_game
from hardwood.management.session import GameSession


class TestPersistence:
    """Tests for the JSON save format."""

    def test_round_trip_new_run(self, session, tmp_path):
        """A fresh run saves and loads unchanged."""
        path = save_game(session.state, tmp_path / "saves" / "run.json")

        assert path.exists()
        loaded = load_game(path)
        assert loaded.to_dict() == session.state.to_dict()

    def test_saved_file_is_plain_json(self, session, tmp_path):
        """Enums are stored by value."""
        path = save_game(session.state, tmp_path / "run.json")
        data = json.loads(path.read_text())
        assert data["phase"] == "preseason"
        assert data["user_team_id"] == "bos"

    def test_resume_after_season(self, tmp_path):
        """A run saved at season end resumes where it left off."""
        run = GameSession.new("mia", seed=13)
        run.simulate_season()
        path = save_game(run.state, tmp_path / "run.json")

        loaded = load_game(path)
        assert loaded.to_dict() == run.state.to_dict()

        resumed = GameSession(loaded)
        assert resumed.advance_phase() is SeasonPhase.OFFSEASON_DRAFT
        assert resumed.state.season_results[0].wins == run.state.season_results[0].wins
