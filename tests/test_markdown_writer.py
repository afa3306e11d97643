"""Tests for the markdown run report."""

import io

import pytest

from hardwood.logging import MarkdownSeasonWriter
from hardwood.management.session import GameSession


@pytest.fixture(scope="module")
def played():
    """A one-season run and its report."""
    session = GameSession.new("den", seed=17, total_seasons=1)
    report = session.simulate_season()
    return session, report


class TestMarkdownSeasonWriter:
    """Tests for report sections."""

    def test_report_sections(self, played):
        """The report has a header, the season and headlines."""
        session, report = played
        text = MarkdownSeasonWriter().generate_report_string(session.state, [report])

        assert text.startswith(f"# {session.state.user_team.full_name} Franchise Report")
        assert "## Season 1" in text
        assert "### Standings" in text
        assert "### Playoffs" in text
        assert "### Finances" in text
        assert "## Headlines" in text
        assert "## Evaluation" not in text

    def test_standings_list_every_team(self, played):
        """All thirty teams appear in the standings table."""
        session, report = played
        lines = MarkdownSeasonWriter()._standings_lines(report, session.state.teams)
        assert len([line for line in lines if line.startswith("| ") and "W |" not in line]) == 30

    def test_champion_named(self, played):
        """The playoff section names the champion by abbreviation."""
        session, report = played
        champion = next(t for t in session.state.teams if t.id == report.bracket.champion_team_id)
        text = MarkdownSeasonWriter().generate_report_string(session.state, [report])
        assert f"**Champion:** {champion.abbreviation}" in text

    def test_evaluation_section(self, played):
        """Evaluations add their scores and lessons."""
        session, report = played
        evaluation = session.evaluate()
        text = MarkdownSeasonWriter().generate_report_string(session.state, [report], evaluation)
        assert f"## Evaluation: {evaluation.gm_title}" in text
        assert f"| Risk understanding | {evaluation.understanding_score} |" in text

    def test_write_report(self, played, tmp_path):
        """Reports are written to disk, creating directories."""
        session, report = played
        path = tmp_path / "out" / "report.md"
        MarkdownSeasonWriter().write_report(session.state, [report], path)
        assert path.read_text().startswith("# ")

    def test_write_season(self, played):
        """A single season can be appended to an open file."""
        session, report = played
        buffer = io.StringIO()
        MarkdownSeasonWriter().write_season(buffer, report, session.state.teams)
        assert buffer.getvalue().startswith("## Season 1")
