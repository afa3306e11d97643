"""Entry point for hardwood package."""

import argparse
import logging
from typing import Optional

from hardwood.config import get_config
from hardwood.core.ai.offseason import ROSTER_LIMIT
from hardwood.core.contracts.free_agency import ai_choose_free_agent
from hardwood.core.enums import Difficulty, SeasonPhase
from hardwood.core.models.team_context import StrategyType
from hardwood.generators.league import FRANCHISES_BY_ID
from hardwood.logging.markdown_writer import MarkdownSeasonWriter
from hardwood.management.outcomes import SeasonReport
from hardwood.management.persistence import save_game
from hardwood.management.session import GameSession


DEFAULT_TEAM = "bos"
USER_SIGNINGS_PER_OFFSEASON = 2


def build_parser() -> argparse.ArgumentParser:
    config = get_config()
    parser = argparse.ArgumentParser(
        description="Hardwood - Basketball Franchise Simulator (headless run)",
        prog="hardwood",
    )
    parser.add_argument(
        "--seasons",
        type=int,
        default=config.seasons,
        help=f"Seasons to play (default: {config.seasons})",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=config.seed,
        help="Random seed for a reproducible run",
    )
    parser.add_argument(
        "--team",
        type=str,
        default=DEFAULT_TEAM,
        choices=sorted(FRANCHISES_BY_ID),
        help=f"Franchise to manage (default: {DEFAULT_TEAM})",
    )
    parser.add_argument(
        "--difficulty",
        type=str,
        default=config.difficulty,
        choices=[d.value for d in Difficulty],
        help=f"Difficulty (default: {config.difficulty})",
    )
    parser.add_argument(
        "--strategy",
        type=str,
        default=StrategyType.STABILITY_FIRST.value,
        choices=[s.value for s in StrategyType],
        help="Front-office strategy (default: stability_first)",
    )
    parser.add_argument(
        "--report",
        type=str,
        default=None,
        help="Write a markdown report to this path",
    )
    parser.add_argument(
        "--save",
        type=str,
        default=None,
        help="Write the final JSON save to this path",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=config.log_level,
        help=f"Logging level (default: {config.log_level})",
    )
    return parser


def run_user_free_agency(session: GameSession) -> None:
    """Sign the best affordable free agents for the user at their asking price."""
    for _ in range(USER_SIGNINGS_PER_OFFSEASON):
        state = session.state
        choice = ai_choose_free_agent(state.user_team, state.free_agents, ROSTER_LIMIT)
        if choice is None:
            return
        outcome = session.sign_player(choice.id, choice.asking_price, choice.years_wanted)
        print(f"  Free agency: {outcome.message}")
        if not outcome.success:
            return


def print_season(report: SeasonReport, session: GameSession) -> None:
    result = report.result
    champion = next(t for t in session.state.teams if t.id == result.champion_team_id)
    print(f"Season {result.season}: {result.wins}-{result.losses}, "
          f"{result.playoff_result.display_name}")
    print(f"  Champion: {champion.full_name}" + (f" | MVP: {result.mvp_name}" if result.mvp_name else ""))
    if result.financials is not None:
        print(f"  Payroll ${result.financials.payroll:.1f}M | "
              f"Tax ${result.financials.luxury_tax:.2f}M | "
              f"Profit ${result.financials.profit:.1f}M")
    print(f"  Fans {result.fan_approval} | Owner {result.owner_confidence} | "
          f"Risk {result.risk_rating.value}")


def play_run(session: GameSession) -> list[SeasonReport]:
    """Play every remaining season headlessly; the AI makes the user's picks."""
    reports = []
    while not session.state.is_complete:
        report = session.simulate_season()
        reports.append(report)
        print_season(report, session)
        if session.state.is_complete:
            break

        session.advance_phase()  # -> draft
        session.advance_phase()  # draft completed -> free agency
        if session.state.phase is SeasonPhase.OFFSEASON_FREE_AGENCY:
            run_user_free_agency(session)
        session.advance_phase()  # -> next preseason
    return reports


def main(argv: Optional[list[str]] = None) -> None:
    """Main entry point for the Hardwood application."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    session = GameSession.new(
        args.team,
        difficulty=Difficulty(args.difficulty),
        strategy=StrategyType(args.strategy),
        seed=args.seed,
        total_seasons=args.seasons,
    )
    team = session.state.user_team
    print(f"Hardwood - {team.full_name} ({args.difficulty}, {args.strategy})")
    print("=" * 50)

    reports = play_run(session)
    evaluation = session.evaluate()

    print()
    print(f"Evaluation: {evaluation.gm_title}")
    print(f"  {evaluation.gm_description}")
    print(f"  Context {evaluation.context_score} | Financial {evaluation.financial_score} | "
          f"Performance {evaluation.performance_score} | "
          f"Understanding {evaluation.understanding_score}")
    for lesson in evaluation.lessons:
        print(f"  - {lesson}")

    if args.report:
        MarkdownSeasonWriter().write_report(session.state, reports, args.report, evaluation)
        print(f"Report written to {args.report}")
    if args.save:
        save_game(session.state, args.save)
        print(f"Save written to {args.save}")


if __name__ == "__main__":
    main()
