"""
Single-game simulation.

Team strength is a blend of starter and bench ratings; a game adds
home court, momentum and noise to each side, then turns the strength
gap into a plausible final score.
"""

import random
from dataclasses import dataclass
from typing import Optional

from hardwood.core.models.team import Team


NEUTRAL_STRENGTH = 50.0
DEFAULT_STARTER_AVERAGE = 60.0
DEFAULT_BENCH_AVERAGE = 55.0
STARTER_WEIGHT = 0.7
BENCH_WEIGHT = 0.3
STAR_BONUS = 2.0
DEPTH_BONUS = 0.5
DEPTH_LIMIT = 12

HOME_COURT_ADVANTAGE = 3.0
MOMENTUM_WEIGHT = 0.5
MOMENTUM_LIMIT = 10
STRENGTH_NOISE = 10.0      # Uniform +/- on each side's strength
BASE_SCORE = 95
REFERENCE_STRENGTH = 70.0
SCORE_SCALE = 0.5
SCORE_NOISE = 7.5          # Uniform +/- on each side's score
MIN_SCORE = 80


@dataclass
class GameResult:
    """Result of a single game."""
    home_team_id: str
    away_team_id: str
    home_score: int
    away_score: int

    @property
    def winner_id(self) -> str:
        return self.home_team_id if self.home_score > self.away_score else self.away_team_id

    @property
    def loser_id(self) -> str:
        return self.away_team_id if self.home_score > self.away_score else self.home_team_id

    @property
    def margin(self) -> int:
        return abs(self.home_score - self.away_score)

    def __str__(self) -> str:
        return f"{self.away_team_id} {self.away_score} @ {self.home_team_id} {self.home_score}"

    def to_dict(self) -> dict:
        return {
            "home_team_id": self.home_team_id,
            "away_team_id": self.away_team_id,
            "home_score": self.home_score,
            "away_score": self.away_score,
            "winner_id": self.winner_id,
        }


def calculate_team_strength(team: Team) -> float:
    """Starter/bench blend plus small star and depth bonuses."""
    if not team.roster:
        return NEUTRAL_STRENGTH

    starters = [p.overall_rating for p in team.roster if p.is_starter]
    bench = [p.overall_rating for p in team.roster if not p.is_starter]
    starter_avg = sum(starters) / len(starters) if starters else DEFAULT_STARTER_AVERAGE
    bench_avg = sum(bench) / len(bench) if bench else DEFAULT_BENCH_AVERAGE

    return (
        starter_avg * STARTER_WEIGHT
        + bench_avg * BENCH_WEIGHT
        + len(team.stars) * STAR_BONUS
        + min(len(team.roster), DEPTH_LIMIT) * DEPTH_BONUS
    )


def _score_for(strength: float, rng: random.Random) -> int:
    score = round(
        BASE_SCORE
        + (strength - REFERENCE_STRENGTH) * SCORE_SCALE
        + rng.uniform(-SCORE_NOISE, SCORE_NOISE)
    )
    return max(MIN_SCORE, score)


def simulate_game(
    home: Team,
    away: Team,
    momentum: Optional[dict[str, int]] = None,
    rng: Optional[random.Random] = None,
) -> GameResult:
    """
    Simulate one game.

    Ties are broken by adding a point to one side at random, so the
    minimum score is never violated and no game ends level.
    """
    rng = rng or random.Random()
    momentum = momentum or {}

    home_strength = (
        calculate_team_strength(home)
        + HOME_COURT_ADVANTAGE
        + momentum.get(home.id, 0) * MOMENTUM_WEIGHT
        + rng.uniform(-STRENGTH_NOISE, STRENGTH_NOISE)
    )
    away_strength = (
        calculate_team_strength(away)
        + momentum.get(away.id, 0) * MOMENTUM_WEIGHT
        + rng.uniform(-STRENGTH_NOISE, STRENGTH_NOISE)
    )

    home_score = _score_for(home_strength, rng)
    away_score = _score_for(away_strength, rng)

    if home_score == away_score:
        if rng.random() < 0.5:
            home_score += 1
        else:
            away_score += 1

    return GameResult(
        home_team_id=home.id,
        away_team_id=away.id,
        home_score=home_score,
        away_score=away_score,
    )


def update_momentum(momentum: dict[str, int], result: GameResult) -> dict[str, int]:
    """Winner +1 and loser -1, each clamped to +/- MOMENTUM_LIMIT."""
    updated = dict(momentum)
    updated[result.winner_id] = min(MOMENTUM_LIMIT, updated.get(result.winner_id, 0) + 1)
    updated[result.loser_id] = max(-MOMENTUM_LIMIT, updated.get(result.loser_id, 0) - 1)
    return updated
