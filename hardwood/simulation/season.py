"""
Regular season simulation.

Handles:
- Weekly schedule (shuffled pairing rounds, 82 games per team over 24 weeks)
- Standings and momentum tracking
- Weekly injury checks (informational, reported as news)
- MVP selection
"""

import logging
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Optional

from hardwood.core.models.player import Player
from hardwood.core.models.team import Team
from hardwood.simulation.game import GameResult, simulate_game, update_momentum


logger = logging.getLogger(__name__)


SEASON_WEEKS = 24
SEASON_GAMES = 82            # Per team, spread over the weeks in pairing rounds
INJURY_RATE_DIVISOR = 5000   # Weekly chance = (100 - durability) / this
MVP_RATING_WEIGHT = 1.2
MVP_STAR_BONUS = 10.0


class InjurySeverity(Enum):
    MINOR = "minor"
    MODERATE = "moderate"
    MAJOR = "major"
    SEASON_ENDING = "season_ending"


@dataclass
class Injury:
    player_id: str
    player_name: str
    team_id: str
    week: int
    severity: InjurySeverity
    weeks_out: int

    def __str__(self) -> str:
        return (
            f"{self.player_name} suffered a {self.severity.value.replace('_', '-')} injury "
            f"(out {self.weeks_out} week{'s' if self.weeks_out != 1 else ''})"
        )


@dataclass
class TeamRecord:
    wins: int = 0
    losses: int = 0

    @property
    def games(self) -> int:
        return self.wins + self.losses

    def to_dict(self) -> dict:
        return {"wins": self.wins, "losses": self.losses}


@dataclass
class WeekResult:
    """Results from a single week."""
    week: int
    games: list[GameResult] = field(default_factory=list)
    injuries: list[Injury] = field(default_factory=list)

    def __str__(self) -> str:
        return f"Week {self.week}: {len(self.games)} games, {len(self.injuries)} injuries"


@dataclass
class RegularSeasonResult:
    weekly_results: list[WeekResult]
    standings: dict[str, TeamRecord]
    momentum: dict[str, int]

    @property
    def injuries(self) -> list[Injury]:
        return [i for week in self.weekly_results for i in week.injuries]

    def record(self, team_id: str) -> TeamRecord:
        return self.standings.get(team_id, TeamRecord())


def generate_week_pairings(team_ids: list[str], rng: random.Random) -> list[tuple[str, str]]:
    """Shuffle and pair sequentially; with an odd count the last team sits out."""
    shuffled = list(team_ids)
    rng.shuffle(shuffled)
    return [(shuffled[i], shuffled[i + 1]) for i in range(0, len(shuffled) - 1, 2)]


def rounds_in_week(week: int, weeks: int, games_per_team: int) -> int:
    """Pairing rounds played in a 1-based week; the rounds sum to games_per_team."""
    return round(games_per_team * week / weeks) - round(games_per_team * (week - 1) / weeks)


def default_games_per_team(weeks: int) -> int:
    return round(weeks * SEASON_GAMES / SEASON_WEEKS)


def generate_schedule(
    team_ids: list[str],
    weeks: int = SEASON_WEEKS,
    rng: Optional[random.Random] = None,
    games_per_team: Optional[int] = None,
) -> list[list[tuple[str, str]]]:
    """
    One list of (home, away) pairings per week.

    Each week holds one or more freshly shuffled pairing rounds, so with
    an even team count every team plays games_per_team games in total.
    """
    rng = rng or random.Random()
    games_per_team = games_per_team or default_games_per_team(weeks)
    schedule = []
    for week in range(1, weeks + 1):
        pairings = []
        for _ in range(rounds_in_week(week, weeks, games_per_team)):
            pairings.extend(generate_week_pairings(team_ids, rng))
        schedule.append(pairings)
    return schedule


def _injury_for(player: Player, team_id: str, week: int, rng: random.Random) -> Optional[Injury]:
    chance = (100 - player.durability) / INJURY_RATE_DIVISOR
    if rng.random() >= chance:
        return None

    roll = rng.random()
    if roll < 0.5:
        severity, weeks_out = InjurySeverity.MINOR, 1
    elif roll < 0.8:
        severity, weeks_out = InjurySeverity.MODERATE, rng.randint(2, 4)
    elif roll < 0.95:
        severity, weeks_out = InjurySeverity.MAJOR, rng.randint(6, 11)
    else:
        severity, weeks_out = InjurySeverity.SEASON_ENDING, SEASON_WEEKS

    return Injury(
        player_id=player.id,
        player_name=player.name,
        team_id=team_id,
        week=week,
        severity=severity,
        weeks_out=weeks_out,
    )


def check_injuries(teams: list[Team], week: int, rng: Optional[random.Random] = None) -> list[Injury]:
    """One injury roll per rostered player."""
    rng = rng or random.Random()
    injuries = []
    for team in teams:
        for player in team.roster:
            injury = _injury_for(player, team.id, week, rng)
            if injury is not None:
                injuries.append(injury)
    return injuries


def simulate_regular_season(
    teams: list[Team],
    rng: Optional[random.Random] = None,
    weeks: int = SEASON_WEEKS,
    on_week_complete: Optional[Callable[[WeekResult], None]] = None,
    games_per_team: Optional[int] = None,
) -> RegularSeasonResult:
    """
    Simulate a full regular season.

    Args:
        teams: All league teams
        rng: Random source for schedule, games and injuries
        weeks: Number of weeks to play
        on_week_complete: Called after each week (progress reporting)
        games_per_team: Season length; defaults to SEASON_GAMES scaled to `weeks`

    Returns:
        RegularSeasonResult with weekly results, standings and momentum
    """
    rng = rng or random.Random()
    by_id = {t.id: t for t in teams}
    standings = {t.id: TeamRecord() for t in teams}
    momentum = {t.id: 0 for t in teams}
    weekly_results = []
    schedule = generate_schedule(list(by_id), weeks, rng, games_per_team)

    for week, pairings in enumerate(schedule, start=1):
        week_result = WeekResult(week=week)

        for home_id, away_id in pairings:
            result = simulate_game(by_id[home_id], by_id[away_id], momentum, rng)
            standings[result.winner_id].wins += 1
            standings[result.loser_id].losses += 1
            momentum = update_momentum(momentum, result)
            week_result.games.append(result)

        week_result.injuries = check_injuries(teams, week, rng)
        weekly_results.append(week_result)

        if on_week_complete:
            on_week_complete(week_result)

    logger.info("Regular season complete: %d weeks, %d teams", weeks, len(teams))
    return RegularSeasonResult(weekly_results=weekly_results, standings=standings, momentum=momentum)


def apply_standings(teams: list[Team], standings: dict[str, TeamRecord]) -> list[Team]:
    """Teams carrying their final regular-season records."""
    return [
        t.with_record(standings[t.id].wins, standings[t.id].losses) if t.id in standings else t
        for t in teams
    ]


def mvp_score(player: Player) -> float:
    return player.overall_rating * MVP_RATING_WEIGHT + (MVP_STAR_BONUS if player.is_star else 0.0)


def get_season_mvp(teams: list[Team]) -> Optional[Player]:
    """
    Best starter league-wide by MVP score.

    Ties go to the first player found, in team then roster order.
    """
    starters = [p for team in teams for p in team.roster if p.is_starter]
    if not starters:
        return None
    return max(starters, key=mvp_score)
