"""Tests for single-game simulation."""

import random

from hardwood.simulation.game import (
    MIN_SCORE,
    MOMENTUM_LIMIT,
    NEUTRAL_STRENGTH,
    GameResult,
    calculate_team_strength,
    simulate_game,
    update_momentum,
)


class TestTeamStrength:
    """Tests for the strength blend."""

    def test_empty_roster_is_neutral(self, make_team):
        """A team with nobody on it plays at neutral strength."""
        assert calculate_team_strength(make_team()) == NEUTRAL_STRENGTH

    def test_better_roster_is_stronger(self, make_team, make_player):
        """Higher ratings mean higher strength."""
        good = make_team("good", roster=[
            make_player(f"g{i}", overall=82, is_starter=i < 5) for i in range(10)
        ])
        bad = make_team("bad", roster=[
            make_player(f"b{i}", overall=62, is_starter=i < 5) for i in range(10)
        ])
        assert calculate_team_strength(good) > calculate_team_strength(bad)


class TestSimulateGame:
    """Tests for game results."""

    def test_no_ties_and_score_floor(self, league):
        """Every game has a winner and nobody scores below the floor."""
        home, away = league[0], league[1]
        for seed in range(200):
            result = simulate_game(home, away, rng=random.Random(seed))
            assert result.home_score != result.away_score
            assert min(result.home_score, result.away_score) >= MIN_SCORE
            assert {result.winner_id, result.loser_id} == {home.id, away.id}

    def test_deterministic_for_seed(self, league):
        """Same seed, same score."""
        first = simulate_game(league[2], league[3], rng=random.Random(5))
        second = simulate_game(league[2], league[3], rng=random.Random(5))
        assert first == second

    def test_strength_gap_shows(self, make_team, make_player):
        """A much stronger team wins the large majority of games."""
        strong = make_team("strong", roster=[
            make_player(f"s{i}", overall=90, is_starter=i < 5) for i in range(10)
        ])
        weak = make_team("weak", roster=[
            make_player(f"w{i}", overall=60, is_starter=i < 5) for i in range(10)
        ])
        rng = random.Random(11)
        strong_wins = sum(
            1 for _ in range(200) if simulate_game(weak, strong, rng=rng).winner_id == "strong"
        )
        assert strong_wins > 150

    def test_result_dict(self):
        """Serialized results name the winner."""
        result = GameResult("a", "b", 101, 99)
        assert result.to_dict()["winner_id"] == "a"
        assert result.margin == 2
        assert str(result) == "b 99 @ a 101"


class TestMomentum:
    """Tests for momentum tracking."""

    def test_winner_up_loser_down(self):
        """Momentum moves one step per game."""
        momentum = update_momentum({}, GameResult("a", "b", 100, 90))
        assert momentum == {"a": 1, "b": -1}

    def test_clamped(self):
        """Streaks stop counting at the limit."""
        momentum = {"a": MOMENTUM_LIMIT, "b": -MOMENTUM_LIMIT}
        momentum = update_momentum(momentum, GameResult("a", "b", 100, 90))
        assert momentum == {"a": MOMENTUM_LIMIT, "b": -MOMENTUM_LIMIT}

    def test_input_not_mutated(self):
        """A new mapping is returned."""
        original = {"a": 0}
        update_momentum(original, GameResult("a", "b", 100, 90))
        assert original == {"a": 0}
