"""
Playoff bracket simulation.

Top eight teams per conference by wins are seeded 1-8. Every round is a
best-of-seven series played game by game, through the conference
semifinals and finals into a cross-conference championship series.
"""

import logging
import random
from dataclasses import dataclass, field
from typing import Optional

from hardwood.core.enums import Conference, PlayoffResult
from hardwood.core.models.team import Team
from hardwood.simulation.game import GameResult, simulate_game, update_momentum
from hardwood.simulation.season import TeamRecord


logger = logging.getLogger(__name__)


PLAYOFF_TEAMS_PER_CONFERENCE = 8
WINS_TO_CLINCH = 4
# Higher seed hosts games 1, 2, 5 and 7
HOME_COURT_PATTERN = (True, True, False, False, True, False, True)

ROUND_NAMES = ("First Round", "Conference Semifinals", "Conference Finals", "Finals")

# Result for a team eliminated in each round
ELIMINATION_RESULTS = (
    PlayoffResult.FIRST_ROUND,
    PlayoffResult.SECOND_ROUND,
    PlayoffResult.CONFERENCE_FINALS,
    PlayoffResult.FINALS,
)


@dataclass
class SeriesResult:
    """A best-of-seven series; team1 is the higher seed."""
    team1_id: str
    team2_id: str
    team1_wins: int = 0
    team2_wins: int = 0
    games: list[GameResult] = field(default_factory=list)

    @property
    def winner_id(self) -> str:
        return self.team1_id if self.team1_wins > self.team2_wins else self.team2_id

    @property
    def loser_id(self) -> str:
        return self.team2_id if self.team1_wins > self.team2_wins else self.team1_id

    @property
    def summary(self) -> str:
        high, low = max(self.team1_wins, self.team2_wins), min(self.team1_wins, self.team2_wins)
        return f"{self.winner_id} def. {self.loser_id} {high}-{low}"

    def to_dict(self) -> dict:
        return {
            "team1_id": self.team1_id,
            "team2_id": self.team2_id,
            "team1_wins": self.team1_wins,
            "team2_wins": self.team2_wins,
            "winner_id": self.winner_id,
        }


@dataclass
class PlayoffRound:
    name: str
    series: list[SeriesResult] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {"name": self.name, "series": [s.to_dict() for s in self.series]}


@dataclass
class PlayoffBracket:
    rounds: list[PlayoffRound]
    champion_team_id: str
    team_results: dict[str, PlayoffResult]
    seeds: dict[Conference, list[str]]

    def result_for(self, team_id: str) -> PlayoffResult:
        return self.team_results.get(team_id, PlayoffResult.MISSED)

    def to_dict(self) -> dict:
        return {
            "rounds": [r.to_dict() for r in self.rounds],
            "champion_team_id": self.champion_team_id,
            "team_results": {k: v.value for k, v in self.team_results.items()},
            "seeds": {c.value: list(ids) for c, ids in self.seeds.items()},
        }


def simulate_series(
    higher_seed: Team,
    lower_seed: Team,
    rng: Optional[random.Random] = None,
) -> SeriesResult:
    """Play games until one side has four wins."""
    rng = rng or random.Random()
    series = SeriesResult(team1_id=higher_seed.id, team2_id=lower_seed.id)
    momentum = {higher_seed.id: 0, lower_seed.id: 0}

    game_number = 0
    while series.team1_wins < WINS_TO_CLINCH and series.team2_wins < WINS_TO_CLINCH:
        if HOME_COURT_PATTERN[game_number % len(HOME_COURT_PATTERN)]:
            result = simulate_game(higher_seed, lower_seed, momentum, rng)
        else:
            result = simulate_game(lower_seed, higher_seed, momentum, rng)

        if result.winner_id == higher_seed.id:
            series.team1_wins += 1
        else:
            series.team2_wins += 1
        momentum = update_momentum(momentum, result)
        series.games.append(result)
        game_number += 1

    return series


def seed_conference(
    teams: list[Team],
    standings: dict[str, TeamRecord],
    conference: Conference,
) -> list[Team]:
    """
    Top eight of a conference, best record first.

    Ties on wins fall back to fewer losses, then to input order.
    """
    members = [t for t in teams if t.conference == conference]
    if len(members) < PLAYOFF_TEAMS_PER_CONFERENCE:
        raise ValueError(
            f"{conference.value} conference has {len(members)} teams; "
            f"{PLAYOFF_TEAMS_PER_CONFERENCE} are required for the playoffs"
        )

    def record(team: Team) -> TeamRecord:
        return standings.get(team.id, TeamRecord(team.wins, team.losses))

    ranked = sorted(members, key=lambda t: (-record(t).wins, record(t).losses))
    return ranked[:PLAYOFF_TEAMS_PER_CONFERENCE]


def _play_round(
    name: str,
    matchups: list[tuple[Team, Team]],
    rng: random.Random,
) -> PlayoffRound:
    playoff_round = PlayoffRound(name=name)
    for higher, lower in matchups:
        series = simulate_series(higher, lower, rng)
        playoff_round.series.append(series)
        logger.debug("%s: %s", name, series.summary)
    return playoff_round


def _first_round_matchups(seeds: list[Team]) -> list[tuple[Team, Team]]:
    # Bracket order keeps 1/8 and 4/5 winners on the same side
    return [(seeds[0], seeds[7]), (seeds[3], seeds[4]), (seeds[1], seeds[6]), (seeds[2], seeds[5])]


def _next_matchups(
    previous: PlayoffRound,
    by_id: dict[str, Team],
    seed_order: dict[str, int],
) -> list[tuple[Team, Team]]:
    winners = [s.winner_id for s in previous.series]
    matchups = []
    for i in range(0, len(winners), 2):
        a, b = by_id[winners[i]], by_id[winners[i + 1]]
        if seed_order[b.id] < seed_order[a.id]:
            a, b = b, a
        matchups.append((a, b))
    return matchups


def simulate_playoffs(
    teams: list[Team],
    standings: dict[str, TeamRecord],
    rng: Optional[random.Random] = None,
) -> PlayoffBracket:
    """
    Run the full postseason.

    Every team in `teams` gets a result: MISSED for non-qualifiers, the
    round of elimination for the rest, CHAMPION for exactly one team.

    Raises:
        ValueError: If a conference has fewer than eight teams
    """
    rng = rng or random.Random()
    by_id = {t.id: t for t in teams}
    team_results = {t.id: PlayoffResult.MISSED for t in teams}

    seeds = {conf: seed_conference(teams, standings, conf) for conf in Conference}
    # 0 is the top seed
    seed_order = {}
    for conf_seeds in seeds.values():
        for position, team in enumerate(conf_seeds):
            seed_order[team.id] = position

    rounds: list[PlayoffRound] = []
    conference_champions = []

    for conference in Conference:
        matchups = _first_round_matchups(seeds[conference])
        for round_index in range(3):
            name = f"{conference.value} {ROUND_NAMES[round_index]}"
            playoff_round = _play_round(name, matchups, rng)
            rounds.append(playoff_round)
            for series in playoff_round.series:
                team_results[series.loser_id] = ELIMINATION_RESULTS[round_index]
            if round_index < 2:
                matchups = _next_matchups(playoff_round, by_id, seed_order)
            else:
                conference_champions.append(by_id[playoff_round.series[0].winner_id])

    east_champ, west_champ = conference_champions
    east_record = standings.get(east_champ.id, TeamRecord(east_champ.wins, east_champ.losses))
    west_record = standings.get(west_champ.id, TeamRecord(west_champ.wins, west_champ.losses))
    if west_record.wins > east_record.wins:
        finals_matchup = (west_champ, east_champ)
    else:
        finals_matchup = (east_champ, west_champ)

    finals = _play_round(ROUND_NAMES[3], [finals_matchup], rng)
    rounds.append(finals)
    final_series = finals.series[0]
    team_results[final_series.loser_id] = PlayoffResult.FINALS
    team_results[final_series.winner_id] = PlayoffResult.CHAMPION

    logger.info("Playoffs complete: %s are champions", by_id[final_series.winner_id].full_name)
    return PlayoffBracket(
        rounds=rounds,
        champion_team_id=final_series.winner_id,
        team_results=team_results,
        seeds={conf: [t.id for t in s] for conf, s in seeds.items()},
    )
