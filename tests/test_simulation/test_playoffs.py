"""Tests for playoff series and bracket simulation."""

import random
from collections import Counter

import pytest

from hardwood.core.enums import Conference, PlayoffResult
from hardwood.simulation.playoffs import (
    PLAYOFF_TEAMS_PER_CONFERENCE,
    WINS_TO_CLINCH,
    seed_conference,
    simulate_playoffs,
    simulate_series,
)
from hardwood.simulation.season import simulate_regular_season


@pytest.fixture
def standings(league):
    return simulate_regular_season(league, rng=random.Random(8)).standings


class TestSeries:
    """Tests for best-of-seven series."""

    @pytest.mark.parametrize("seed", range(20))
    def test_series_ends_at_four(self, league, seed):
        """The winner has exactly four wins; the loser at most three."""
        series = simulate_series(league[0], league[1], rng=random.Random(seed))
        winner_wins = max(series.team1_wins, series.team2_wins)
        loser_wins = min(series.team1_wins, series.team2_wins)

        assert winner_wins == WINS_TO_CLINCH
        assert loser_wins <= WINS_TO_CLINCH - 1
        assert len(series.games) == winner_wins + loser_wins
        assert 4 <= len(series.games) <= 7

    def test_summary(self, league):
        """The summary names the winner first."""
        series = simulate_series(league[0], league[1], rng=random.Random(1))
        assert series.summary.startswith(f"{series.winner_id} def. {series.loser_id} 4-")


class TestSeeding:
    """Tests for conference seeding."""

    def test_eight_per_conference_by_wins(self, league, standings):
        """Seeds are the top eight by wins."""
        for conference in Conference:
            seeds = seed_conference(league, standings, conference)
            assert len(seeds) == PLAYOFF_TEAMS_PER_CONFERENCE
            wins = [standings[t.id].wins for t in seeds]
            assert wins == sorted(wins, reverse=True)
            assert all(t.conference is conference for t in seeds)

    def test_too_few_teams(self, league, standings):
        """A short conference cannot hold playoffs."""
        eastern = [t for t in league if t.conference is Conference.EASTERN]
        trimmed = [t for t in league if t not in eastern[:8]]
        with pytest.raises(ValueError, match="required for the playoffs"):
            simulate_playoffs(trimmed, standings, rng=random.Random(1))


class TestBracket:
    """Tests for the full postseason."""

    def test_every_team_has_a_result(self, league, standings):
        """Every team is accounted for with the right counts per outcome."""
        bracket = simulate_playoffs(league, standings, rng=random.Random(3))
        counts = Counter(bracket.team_results.values())

        assert set(bracket.team_results) == {t.id for t in league}
        assert counts[PlayoffResult.CHAMPION] == 1
        assert counts[PlayoffResult.FINALS] == 1
        assert counts[PlayoffResult.CONFERENCE_FINALS] == 2
        assert counts[PlayoffResult.SECOND_ROUND] == 4
        assert counts[PlayoffResult.FIRST_ROUND] == 8
        assert counts[PlayoffResult.MISSED] == len(league) - 16

    def test_champion_matches_results(self, league, standings):
        """The bracket champion is the one CHAMPION result."""
        bracket = simulate_playoffs(league, standings, rng=random.Random(4))
        assert bracket.result_for(bracket.champion_team_id) is PlayoffResult.CHAMPION
        assert len(bracket.rounds) == 7
        assert bracket.rounds[-1].name == "Finals"

    def test_first_round_pairings(self, league, standings):
        """1v8, 4v5, 2v7, 3v6 in bracket order."""
        bracket = simulate_playoffs(league, standings, rng=random.Random(5))
        seeds = bracket.seeds[Conference.EASTERN]
        first_round = bracket.rounds[0]
        pairs = [(s.team1_id, s.team2_id) for s in first_round.series]
        assert pairs == [
            (seeds[0], seeds[7]), (seeds[3], seeds[4]), (seeds[1], seeds[6]), (seeds[2], seeds[5]),
        ]

    def test_non_qualifiers_missed(self, league, standings):
        """Teams outside the seeds missed the playoffs."""
        bracket = simulate_playoffs(league, standings, rng=random.Random(6))
        seeded = {tid for ids in bracket.seeds.values() for tid in ids}
        for team in league:
            if team.id not in seeded:
                assert bracket.result_for(team.id) is PlayoffResult.MISSED

    def test_to_dict(self, league, standings):
        """Serialized brackets carry enum values."""
        data = simulate_playoffs(league, standings, rng=random.Random(7)).to_dict()
        assert data["team_results"][data["champion_team_id"]] == "champion"
        assert set(data["seeds"]) == {c.value for c in Conference}
