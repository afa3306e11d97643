"""Markdown franchise report writer."""

from datetime import datetime
from pathlib import Path
from typing import Optional, TextIO, Union

from hardwood.core.models.team import Team, find_team
from hardwood.core.risk.evaluation import FranchiseEvaluation
from hardwood.management.outcomes import SeasonReport
from hardwood.management.state import GameState


MAX_NEWS_ITEMS = 15


class MarkdownSeasonWriter:
    """Generates markdown summaries of a franchise run."""

    def write_report(
        self,
        state: GameState,
        reports: list[SeasonReport],
        output_path: Union[str, Path],
        evaluation: Optional[FranchiseEvaluation] = None,
    ) -> None:
        """
        Write the full run report to a markdown file.

        Args:
            state: Final game state
            reports: One SeasonReport per simulated season
            output_path: Path to write markdown file
            evaluation: End-of-run evaluation, if the run was evaluated
        """
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, "w") as f:
            f.write(self.generate_report_string(state, reports, evaluation))

    def generate_report_string(
        self,
        state: GameState,
        reports: list[SeasonReport],
        evaluation: Optional[FranchiseEvaluation] = None,
    ) -> str:
        """Generate the run report as a string."""
        lines: list[str] = []
        team = state.user_team

        lines.append(f"# {team.full_name} Franchise Report")
        lines.append("")
        lines.append(f"**Difficulty:** {state.difficulty.value} | "
                     f"**Strategy:** {state.strategy.value} | "
                     f"**Seasons:** {len(state.season_results)}/{state.total_seasons}")
        lines.append("")

        for report in reports:
            lines.extend(self.season_lines(report, state.teams))

        lines.extend(self._news_lines(state))
        if evaluation is not None:
            lines.extend(self.evaluation_lines(evaluation))

        lines.append("---")
        lines.append(f"*Generated by Hardwood - {datetime.now().strftime('%Y-%m-%d %H:%M')}*")
        return "\n".join(lines)

    def season_lines(self, report: SeasonReport, teams: list[Team]) -> list[str]:
        result = report.result
        lines = [f"## Season {result.season}", ""]
        lines.append(f"**Record:** {result.wins}-{result.losses} | "
                     f"**Playoffs:** {result.playoff_result.display_name} | "
                     f"**Risk:** {result.risk_rating.value}")
        lines.append("")
        lines.append(f"- Fan approval: {result.fan_approval}")
        lines.append(f"- Owner confidence: {result.owner_confidence}")
        lines.append(f"- Win volatility: {result.volatility_score}")
        if result.mvp_name:
            lines.append(f"- MVP: {result.mvp_name}")
        lines.append("")

        lines.extend(self._standings_lines(report, teams))
        lines.extend(self._playoff_lines(report, teams))
        lines.extend(self._finance_lines(report))
        return lines

    def _standings_lines(self, report: SeasonReport, teams: list[Team]) -> list[str]:
        lines = ["### Standings", "", "| Team | W | L |", "|------|:-:|:-:|"]
        ranked = sorted(report.standings.items(), key=lambda item: (-item[1].wins, item[1].losses))
        for team_id, record in ranked:
            lines.append(f"| {_abbreviation(teams, team_id)} | {record.wins} | {record.losses} |")
        lines.append("")
        return lines

    def _playoff_lines(self, report: SeasonReport, teams: list[Team]) -> list[str]:
        lines = ["### Playoffs", ""]
        for playoff_round in report.bracket.rounds:
            lines.append(f"**{playoff_round.name}**")
            lines.append("")
            for series in playoff_round.series:
                high = max(series.team1_wins, series.team2_wins)
                low = min(series.team1_wins, series.team2_wins)
                lines.append(f"- {_abbreviation(teams, series.winner_id)} def. "
                             f"{_abbreviation(teams, series.loser_id)} {high}-{low}")
            lines.append("")
        champion = _abbreviation(teams, report.bracket.champion_team_id)
        lines.append(f"**Champion:** {champion}")
        lines.append("")
        return lines

    def _finance_lines(self, report: SeasonReport) -> list[str]:
        books = report.result.financials
        if books is None:
            return []
        return [
            "### Finances",
            "",
            "| Item | $M |",
            "|------|---:|",
            f"| Payroll | {books.payroll:.1f} |",
            f"| Luxury tax | {books.luxury_tax:.2f} |",
            f"| Floor penalty | {books.floor_penalty:.1f} |",
            f"| Revenue | {books.revenue:.1f} |",
            f"| Expenses | {books.expenses:.1f} |",
            f"| **Profit** | **{books.profit:.1f}** |",
            "",
        ]

    def _news_lines(self, state: GameState) -> list[str]:
        if not state.news:
            return []
        lines = ["## Headlines", ""]
        for item in state.news[-MAX_NEWS_ITEMS:]:
            lines.append(f"- *S{item.season} W{item.week}* {item.headline}")
        lines.append("")
        return lines

    def evaluation_lines(self, evaluation: FranchiseEvaluation) -> list[str]:
        lines = [f"## Evaluation: {evaluation.gm_title}", "", evaluation.gm_description, ""]
        lines.append("| Score | Value |")
        lines.append("|-------|:-----:|")
        lines.append(f"| Context alignment | {evaluation.context_score} |")
        lines.append(f"| Financial | {evaluation.financial_score} |")
        lines.append(f"| Performance | {evaluation.performance_score} |")
        lines.append(f"| Risk understanding | {evaluation.understanding_score} |")
        lines.append("")
        lines.append(f"Expected risk **{evaluation.expected_risk_level.value}**, "
                     f"played **{evaluation.actual_risk_level.value}**; "
                     f"volatility {evaluation.volatility.rating.value}.")
        lines.append("")
        for lesson in evaluation.lessons:
            lines.append(f"- {lesson}")
        if evaluation.lessons:
            lines.append("")
        return lines

    def write_season(self, f: TextIO, report: SeasonReport, teams: list[Team]) -> None:
        """Append a single season section to an open file."""
        f.write("\n".join(self.season_lines(report, teams)))
        f.write("\n")


def _abbreviation(teams: list[Team], team_id: Optional[str]) -> str:
    team = find_team(teams, team_id) if team_id else None
    return team.abbreviation if team else (team_id or "-")
