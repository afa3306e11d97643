"""
Game Session - the franchise-run controller.

This module ties the core systems together for one user franchise:
- Trades (salary legality, evaluation, AI verdict, execution)
- Free agency and the draft
- Season simulation, finances and risk resolution
- Phase progression and season rollover

Every action takes the session lock, builds a new GameState and swaps
it in whole. Events are emitted after the swap, outside the lock.
"""

import logging
import math
import random
import threading
import uuid
from dataclasses import replace
from typing import Optional

from hardwood.core.ai.offseason import ROSTER_LIMIT, process_ai_trades
from hardwood.core.ai.trade_ai import AIPersonality, TradeAI, generate_ai_personality
from hardwood.core.contracts.free_agency import (
    FREE_AGENT_POOL_SIZE,
    calculate_player_interest,
    generate_free_agents,
    sign_free_agent,
    will_accept_offer,
)
from hardwood.core.draft.order import (
    build_draft_order,
    project_pick_positions,
    refresh_slot_owners,
)
from hardwood.core.draft.prospects import DRAFT_CLASS_SIZE, ai_draft_pick, generate_draft_class
from hardwood.core.economics import generate_financial_report, playoff_round_from_result
from hardwood.core.enums import Difficulty, PlayoffResult, SeasonPhase, TradeStatus
from hardwood.core.models.news import NewsItem, NewsType
from hardwood.core.models.team import Team, find_team, replace_teams
from hardwood.core.models.team_context import (
    StrategyType,
    get_context_compatibility,
    get_strategy_profile,
)
from hardwood.core.risk.decisions import (
    classify_draft_risk,
    classify_signing_risk,
    classify_strategy_risk,
    resolve_decision,
    resolve_season_decisions,
    season_risk_rating,
)
from hardwood.core.risk.evaluation import EvaluationConfig, FranchiseEvaluation, evaluate_franchise
from hardwood.core.risk.records import DecisionOutcome, DecisionType, RiskDecision, SeasonResult
from hardwood.core.risk.volatility import calculate_win_std_dev
from hardwood.core.trades.evaluation import TradeEvaluation, evaluate_trade
from hardwood.core.trades.execution import TradeProposal, execute_trade
from hardwood.core.trades.salary import SalaryCheck, validate_trade_salary
from hardwood.events.bus import EventBus
from hardwood.events.types import (
    FranchiseEvent,
    PhaseChangedEvent,
    PlayerDraftedEvent,
    PlayerSignedEvent,
    SeasonCompletedEvent,
    TradeCompletedEvent,
)
from hardwood.generators.league import generate_league
from hardwood.management.draft import apply_pick
from hardwood.management.offseason import start_new_season
from hardwood.management.outcomes import (
    DraftOutcome,
    PhaseError,
    SeasonReport,
    SigningOutcome,
    StrategyOutcome,
    TradeOutcome,
)
from hardwood.management.state import DEFAULT_OWNER_CONFIDENCE, DEFAULT_TOTAL_SEASONS, GameState
from hardwood.simulation.playoffs import simulate_playoffs
from hardwood.simulation.season import (
    SEASON_WEEKS,
    InjurySeverity,
    apply_standings,
    get_season_mvp,
    simulate_regular_season,
)


logger = logging.getLogger(__name__)


# =============================================================================
# Fan and owner reaction
# =============================================================================

# (minimum wins, approval change), best first
FAN_APPROVAL_STEPS = ((50, 15), (42, 5), (35, -5))
FAN_APPROVAL_FLOOR_CHANGE = -15
PLAYOFF_APPROVAL_BONUS = {
    PlayoffResult.CHAMPION: 30,
    PlayoffResult.FINALS: 15,
    PlayoffResult.CONFERENCE_FINALS: 8,
}
OWNER_CONFIDENCE_RATE = 0.7

TRADE_PHASES = frozenset({
    SeasonPhase.PRESEASON,
    SeasonPhase.REGULAR_SEASON,
    SeasonPhase.SEASON_END,
    SeasonPhase.OFFSEASON_DRAFT,
    SeasonPhase.OFFSEASON_FREE_AGENCY,
})
SIGNING_PHASES = frozenset({SeasonPhase.PRESEASON, SeasonPhase.OFFSEASON_FREE_AGENCY})
SEASON_START_PHASES = frozenset({SeasonPhase.PRESEASON, SeasonPhase.REGULAR_SEASON})


def fan_approval_change(wins: int, playoff_result: PlayoffResult) -> int:
    """Approval swing from the regular season record plus a deep-run bonus."""
    change = FAN_APPROVAL_FLOOR_CHANGE
    for minimum, step in FAN_APPROVAL_STEPS:
        if wins >= minimum:
            change = step
            break
    return change + PLAYOFF_APPROVAL_BONUS.get(playoff_result, 0)


def owner_confidence_change(approval_change: int) -> int:
    return math.floor(approval_change * OWNER_CONFIDENCE_RATE)


def _clamp_percent(value: int) -> int:
    return max(0, min(100, value))


def _add_news(
    news: list[NewsItem],
    state: GameState,
    news_type: NewsType,
    headline: str,
    team_ids: list[str],
    week: Optional[int] = None,
) -> list[NewsItem]:
    item = NewsItem(
        id=f"news-{len(news) + 1}",
        season=state.season,
        week=state.week if week is None else week,
        news_type=news_type,
        headline=headline,
        team_ids=list(team_ids),
    )
    return news + [item]


def _add_decision(
    decisions: list[RiskDecision],
    season: int,
    decision_type: DecisionType,
    risk_level,
    description: str,
) -> list[RiskDecision]:
    decision = RiskDecision(
        id=f"decision-{len(decisions) + 1}",
        season=season,
        decision_type=decision_type,
        risk_level=risk_level,
        description=description,
    )
    logger.debug("Risk decision logged: %s (%s)", description, risk_level.value)
    return decisions + [decision]


class GameSession:
    """
    One user franchise run.

    Owns the GameState, a single seeded random source threaded through
    every stochastic call, and an optional EventBus.
    """

    def __init__(
        self,
        state: GameState,
        rng: Optional[random.Random] = None,
        bus: Optional[EventBus] = None,
    ):
        self._state = state
        self._rng = rng or random.Random(state.seed)
        self.bus = bus or EventBus()
        self._lock = threading.Lock()
        self._personalities: dict[str, AIPersonality] = {}

    # =========================================================================
    # Creation
    # =========================================================================

    @classmethod
    def new(
        cls,
        user_team_id: str,
        difficulty: Difficulty = Difficulty.MEDIUM,
        strategy: StrategyType = StrategyType.STABILITY_FIRST,
        seed: Optional[int] = None,
        total_seasons: int = DEFAULT_TOTAL_SEASONS,
        bus: Optional[EventBus] = None,
    ) -> "GameSession":
        """
        Start a new run with a freshly generated league.

        Raises:
            ValueError: If user_team_id is not a league franchise
        """
        rng = random.Random(seed)
        teams = generate_league(rng)
        user_team = find_team(teams, user_team_id)
        if user_team is None:
            raise ValueError(f"Unknown team: {user_team_id}")

        state = GameState(
            session_id=str(uuid.uuid4()),
            user_team_id=user_team_id,
            difficulty=difficulty,
            strategy=strategy,
            total_seasons=total_seasons,
            seed=seed,
            fan_approval=user_team.fanbase,
            owner_confidence=DEFAULT_OWNER_CONFIDENCE,
            teams=teams,
            free_agents=generate_free_agents(FREE_AGENT_POOL_SIZE, rng, 1),
            draft_prospects=generate_draft_class(DRAFT_CLASS_SIZE, rng, 1),
            consecutive_tax_years={t.id: 0 for t in teams},
        )
        state.news = _add_news(
            [], state, NewsType.FRONT_OFFICE,
            f"Welcome to {user_team.city}! You are the new GM of the {user_team.full_name}.",
            [user_team_id],
        )
        logger.info(
            "New franchise run %s: %s (%s, %s)",
            state.session_id, user_team.full_name, difficulty.value, strategy.value,
        )
        return cls(state, rng=rng, bus=bus)

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def session_id(self) -> str:
        return self._state.session_id

    # =========================================================================
    # Internals
    # =========================================================================

    def _emit(self, events: list[FranchiseEvent]) -> None:
        for event in events:
            self.bus.emit(event)

    def _require_phase(self, allowed: frozenset, action: str) -> None:
        if self._state.phase not in allowed:
            raise PhaseError(f"Cannot {action} during {self._state.phase.value}")

    def _personality_for(self, team: Team) -> AIPersonality:
        if team.id not in self._personalities:
            self._personalities[team.id] = generate_ai_personality(team, self._rng)
        return self._personalities[team.id]

    def _event_base(self) -> dict:
        return {"session_id": self._state.session_id, "season": self._state.season}

    # =========================================================================
    # Trades
    # =========================================================================

    def _trade_assets(
        self,
        to_team_id: str,
        players_offered: list[str],
        players_requested: list[str],
        picks_offered: list[str],
        picks_requested: list[str],
    ):
        """Resolve ids to objects; returns (assets, None) or (None, error message)."""
        state = self._state
        user = state.user_team
        if to_team_id == user.id:
            return None, "You cannot trade with yourself."
        target = find_team(state.teams, to_team_id)
        if target is None:
            return None, f"Unknown team: {to_team_id}"

        offered, requested, offered_picks, requested_picks = [], [], [], []
        for player_id in players_offered:
            player = user.get_player(player_id)
            if player is None:
                return None, f"Player {player_id} is not on your roster."
            offered.append(player)
        for player_id in players_requested:
            player = target.get_player(player_id)
            if player is None:
                return None, f"Player {player_id} is not on the {target.full_name} roster."
            requested.append(player)
        for pick_id in picks_offered:
            pick = user.get_pick(pick_id)
            if pick is None:
                return None, f"You do not own pick {pick_id}."
            offered_picks.append(pick)
        for pick_id in picks_requested:
            pick = target.get_pick(pick_id)
            if pick is None:
                return None, f"The {target.full_name} do not own pick {pick_id}."
            requested_picks.append(pick)

        net = len(requested) - len(offered)
        if len(user.roster) + net > ROSTER_LIMIT:
            return None, f"This trade would put your roster over the {ROSTER_LIMIT}-player limit."
        if len(target.roster) - net > ROSTER_LIMIT:
            return None, (
                f"This trade would put the {target.full_name} roster over the "
                f"{ROSTER_LIMIT}-player limit."
            )

        return (user, target, offered, requested, offered_picks, requested_picks), None

    def _judge_trade(self, assets) -> tuple[SalaryCheck, TradeEvaluation, bool, str]:
        user, target, offered, requested, offered_picks, requested_picks = assets
        salary_check = validate_trade_salary(user, target, offered, requested)
        evaluation = evaluate_trade(
            user, target, offered, requested, offered_picks, requested_picks, self._state.season,
        )
        if not salary_check.valid:
            return salary_check, evaluation, False, salary_check.reason
        trade_ai = TradeAI(
            target, self._state.difficulty, self._personality_for(target), self._rng,
        )
        accepted, reason = trade_ai.evaluate_offer(evaluation, requested)
        return salary_check, evaluation, accepted, reason

    def preview_trade(
        self,
        to_team_id: str,
        players_offered: list[str],
        players_requested: list[str],
        picks_offered: Optional[list[str]] = None,
        picks_requested: Optional[list[str]] = None,
    ) -> TradeOutcome:
        """Evaluate a trade and predict the AI verdict without executing anything."""
        with self._lock:
            assets, error = self._trade_assets(
                to_team_id, players_offered, players_requested,
                picks_offered or [], picks_requested or [],
            )
            if error:
                return TradeOutcome(accepted=False, message=error)
            salary_check, evaluation, accepted, reason = self._judge_trade(assets)
            return TradeOutcome(
                accepted=accepted,
                message=f"{evaluation.analysis} {reason}" if accepted else reason,
                evaluation=evaluation,
                salary_check=salary_check,
            )

    def propose_trade(
        self,
        to_team_id: str,
        players_offered: list[str],
        players_requested: list[str],
        picks_offered: Optional[list[str]] = None,
        picks_requested: Optional[list[str]] = None,
    ) -> TradeOutcome:
        """
        Offer a trade to an AI team.

        Salary legality is checked first, then the trade is evaluated and
        the AI decides. Accepted trades are executed and logged as a risk
        decision at the trade's assessed risk level.

        Raises:
            PhaseError: During the playoffs
        """
        events: list[FranchiseEvent] = []
        with self._lock:
            self._require_phase(TRADE_PHASES, "trade")
            picks_offered = picks_offered or []
            picks_requested = picks_requested or []

            assets, error = self._trade_assets(
                to_team_id, players_offered, players_requested, picks_offered, picks_requested,
            )
            if error:
                logger.info("Trade rejected before evaluation: %s", error)
                return TradeOutcome(accepted=False, message=error)

            salary_check, evaluation, accepted, reason = self._judge_trade(assets)
            state = self._state
            user, target, offered, requested, _, _ = assets
            proposal = TradeProposal(
                id=f"trade-{state.season}-{len(state.trade_history) + 1}",
                from_team_id=user.id,
                to_team_id=target.id,
                players_offered=list(players_offered),
                players_requested=list(players_requested),
                picks_offered=list(picks_offered),
                picks_requested=list(picks_requested),
                status=TradeStatus.ACCEPTED if accepted else TradeStatus.REJECTED,
                fairness_score=evaluation.fairness_score,
                season=state.season,
            )

            if not accepted:
                self._state = replace(state, trade_history=state.trade_history + [proposal])
                logger.info("Trade %s rejected by %s: %s", proposal.id, target.abbreviation, reason)
                return TradeOutcome(
                    accepted=False, message=reason, proposal=proposal,
                    evaluation=evaluation, salary_check=salary_check,
                )

            execution = execute_trade(state.teams, proposal, state.all_players)
            if not execution.success:
                return TradeOutcome(
                    accepted=False, message=execution.message, proposal=proposal,
                    evaluation=evaluation, salary_check=salary_check,
                )
            draft_order = state.draft_order
            if draft_order and (picks_offered or picks_requested):
                draft_order = refresh_slot_owners(
                    draft_order, execution.updated_teams, state.season, start=state.draft_cursor,
                )
            sent = ", ".join(p.name for p in offered) or "draft picks"
            received = ", ".join(p.name for p in requested) or "draft picks"
            news = _add_news(
                state.news, state, NewsType.TRADE,
                f"Trade completed: the {user.full_name} send {sent} to the "
                f"{target.full_name} for {received}.",
                [user.id, target.id],
            )
            decisions = _add_decision(
                state.risk_decisions, state.season, DecisionType.TRADE,
                evaluation.risk_assessment.level,
                f"Traded {sent} for {received}",
            )
            self._state = replace(
                state,
                teams=execution.updated_teams,
                draft_order=draft_order,
                trade_history=state.trade_history + [proposal],
                news=news,
                risk_decisions=decisions,
            )
            logger.info("Trade %s accepted by %s", proposal.id, target.abbreviation)
            events.append(TradeCompletedEvent(
                **self._event_base(),
                trade_id=proposal.id,
                from_team_id=user.id,
                to_team_id=target.id,
                players_sent=list(players_offered),
                players_received=list(players_requested),
                picks_sent=list(picks_offered),
                picks_received=list(picks_requested),
                fairness_score=evaluation.fairness_score,
            ))
            outcome = TradeOutcome(
                accepted=True, message=f"{evaluation.analysis} {reason}", proposal=proposal,
                evaluation=evaluation, salary_check=salary_check,
            )

        self._emit(events)
        return outcome

    # =========================================================================
    # Free agency
    # =========================================================================

    def sign_player(self, free_agent_id: str, salary: float, years: int) -> SigningOutcome:
        """
        Offer a contract to a free agent.

        Raises:
            PhaseError: Outside preseason and offseason free agency
        """
        events: list[FranchiseEvent] = []
        with self._lock:
            self._require_phase(SIGNING_PHASES, "sign free agents")
            state = self._state
            free_agent = state.get_free_agent(free_agent_id)
            if free_agent is None:
                return SigningOutcome(success=False, message="Player not found.")

            user = state.user_team
            if salary > user.cap_space:
                shortfall = salary - user.cap_space
                message = (
                    f"Not enough cap space: the ${salary:.1f}M offer exceeds your "
                    f"${user.cap_space:.1f}M of room by ${shortfall:.1f}M."
                )
                logger.info("Signing blocked: %s", message)
                return SigningOutcome(success=False, message=message)
            if len(user.roster) >= ROSTER_LIMIT:
                return SigningOutcome(
                    success=False, message=f"Your roster is full ({ROSTER_LIMIT} players).",
                )

            name = free_agent.player.name
            interest = calculate_player_interest(
                free_agent.player, user, salary, free_agent.asking_price,
            )
            if not will_accept_offer(interest, state.difficulty):
                message = f"{name} is not interested in your offer (Interest: {interest}%)."
                logger.info("Signing declined: %s", message)
                return SigningOutcome(success=False, message=message, interest=interest)

            player = sign_free_agent(free_agent, user, salary, years)
            news = _add_news(
                state.news, state, NewsType.SIGNING,
                f"{name} signs a {years}-year, ${salary:.1f}M deal with the {user.full_name}.",
                [user.id],
            )
            decisions = _add_decision(
                state.risk_decisions, state.season, DecisionType.SIGNING,
                classify_signing_risk(salary),
                f"Signed {name} for ${salary:.1f}M x {years}",
            )
            self._state = replace(
                state,
                teams=replace_teams(state.teams, [user.with_roster(user.roster + [player])]),
                free_agents=[fa for fa in state.free_agents if fa.id != free_agent_id],
                news=news,
                risk_decisions=decisions,
            )
            logger.info("%s signed %s for $%.1fM x %d", user.abbreviation, name, salary, years)
            events.append(PlayerSignedEvent(
                **self._event_base(), team_id=user.id, player_id=player.id,
                player_name=name, salary=salary, years=years,
            ))
            outcome = SigningOutcome(
                success=True, message=f"{name} has signed!", player=player, interest=interest,
            )

        self._emit(events)
        return outcome

    # =========================================================================
    # Draft
    # =========================================================================

    def _make_pick(self, state: GameState, prospect, events: list) -> tuple[GameState, DraftOutcome]:
        slot = state.current_draft_slot
        teams, player = apply_pick(state.teams, slot, prospect, state.season, self._rng)
        team = find_team(teams, slot.team_id)

        news = _add_news(
            state.news, state, NewsType.DRAFT,
            f"Pick #{slot.overall_pick}: the {team.full_name} select {prospect.name} "
            f"({prospect.position.value}).",
            [team.id],
        )
        decisions = state.risk_decisions
        if team.id == state.user_team_id:
            decisions = _add_decision(
                decisions, state.season, DecisionType.DRAFT,
                classify_draft_risk(prospect.variance),
                f"Drafted {prospect.name} at #{slot.overall_pick} (variance {prospect.variance})",
            )

        state = replace(
            state,
            teams=teams,
            draft_prospects=[p for p in state.draft_prospects if p.id != prospect.id],
            draft_cursor=state.draft_cursor + 1,
            news=news,
            risk_decisions=decisions,
        )
        events.append(PlayerDraftedEvent(
            session_id=state.session_id, season=state.season, team_id=team.id,
            player_id=player.id, player_name=player.name,
            overall_pick=slot.overall_pick, round=slot.round,
        ))
        outcome = DraftOutcome(
            success=True,
            message=f"The {team.full_name} select {player.name} with pick #{slot.overall_pick}.",
            player=player, slot=slot, team_id=team.id,
        )
        return state, outcome

    def _run_ai_picks(
        self,
        state: GameState,
        stop_at_user: bool,
        events: list,
    ) -> tuple[GameState, list[DraftOutcome]]:
        outcomes = []
        while not state.draft_complete:
            slot = state.current_draft_slot
            if stop_at_user and slot.team_id == state.user_team_id:
                break
            team = find_team(state.teams, slot.team_id)
            choice = ai_draft_pick(team, state.draft_prospects)
            if choice is None:
                state = replace(state, draft_cursor=len(state.draft_order))
                break
            state, outcome = self._make_pick(state, choice, events)
            outcomes.append(outcome)
        return state, outcomes

    def draft_player(self, prospect_id: str) -> DraftOutcome:
        """
        Make the user's next selection.

        AI teams picking ahead of the user select first.

        Raises:
            PhaseError: Outside the offseason draft
        """
        events: list[FranchiseEvent] = []
        with self._lock:
            self._require_phase(frozenset({SeasonPhase.OFFSEASON_DRAFT}), "draft")
            state, _ = self._run_ai_picks(self._state, True, events)
            self._state = state

            if state.draft_complete:
                outcome = DraftOutcome(
                    success=False, message="You have no remaining picks in this draft.",
                )
            else:
                prospect = state.get_prospect(prospect_id)
                if prospect is None:
                    outcome = DraftOutcome(
                        success=False, message="That prospect is not available.",
                        slot=state.current_draft_slot, team_id=state.user_team_id,
                    )
                else:
                    self._state, outcome = self._make_pick(state, prospect, events)
                    logger.info("User drafted %s at #%d", prospect.name, outcome.slot.overall_pick)

        self._emit(events)
        return outcome

    def auto_draft(self, stop_at_user: bool = False) -> list[DraftOutcome]:
        """
        Let the AI make picks.

        Args:
            stop_at_user: Stop when the user is on the clock; otherwise
                the user's picks are made by the AI too

        Raises:
            PhaseError: Outside the offseason draft
        """
        events: list[FranchiseEvent] = []
        with self._lock:
            self._require_phase(frozenset({SeasonPhase.OFFSEASON_DRAFT}), "draft")
            self._state, outcomes = self._run_ai_picks(self._state, stop_at_user, events)
        self._emit(events)
        return outcomes

    # =========================================================================
    # Strategy and decisions
    # =========================================================================

    def set_strategy(self, strategy: StrategyType) -> StrategyOutcome:
        """Change the front-office strategy; every change is a risk decision."""
        with self._lock:
            state = self._state
            compatibility, text = get_context_compatibility(state.user_team.context_type, strategy)
            if strategy == state.strategy:
                return StrategyOutcome(changed=False, compatibility=compatibility, message=text)

            label = get_strategy_profile(strategy).label
            decisions = _add_decision(
                state.risk_decisions, state.season, DecisionType.STRATEGY_CHANGE,
                classify_strategy_risk(strategy), f"Switched strategy to {label}",
            )
            news = _add_news(
                state.news, state, NewsType.FRONT_OFFICE,
                f"The {state.user_team.full_name} front office shifts to a {label} approach.",
                [state.user_team_id],
            )
            self._state = replace(state, strategy=strategy, risk_decisions=decisions, news=news)
            logger.info("Strategy changed to %s (%s fit)", strategy.value, compatibility.value)
            return StrategyOutcome(changed=True, compatibility=compatibility, message=text)

    def resolve_decision(self, decision_id: str, outcome: DecisionOutcome) -> bool:
        """Set a logged decision's outcome explicitly. False if the id is unknown."""
        with self._lock:
            state = self._state
            if not any(d.id == decision_id for d in state.risk_decisions):
                return False
            self._state = replace(
                state, risk_decisions=resolve_decision(state.risk_decisions, decision_id, outcome),
            )
            return True

    def evaluate(self, config: Optional[EvaluationConfig] = None) -> FranchiseEvaluation:
        """End-of-run evaluation over every season played so far."""
        with self._lock:
            state = self._state
        return evaluate_franchise(
            state.user_team.context_type, state.season_results, state.risk_decisions, config,
        )

    # =========================================================================
    # Season
    # =========================================================================

    def _set_phase(self, state: GameState, phase: SeasonPhase, events: list) -> GameState:
        if state.phase != phase:
            events.append(PhaseChangedEvent(
                session_id=state.session_id, season=state.season,
                previous_phase=state.phase.value, new_phase=phase.value,
            ))
            logger.info("Season %d: %s -> %s", state.season, state.phase.value, phase.value)
        return replace(state, phase=phase)

    def simulate_season(self) -> SeasonReport:
        """
        Play the regular season and playoffs and close the books.

        Leaves the session at SEASON_END with the draft order set.

        Raises:
            PhaseError: If not in preseason/regular season, or the run is over
        """
        events: list[FranchiseEvent] = []
        with self._lock:
            self._require_phase(SEASON_START_PHASES, "simulate the season")
            if self._state.is_complete:
                raise PhaseError("The run is complete; no seasons remain")

            state = self._set_phase(self._state, SeasonPhase.REGULAR_SEASON, events)
            season = state.season
            user_id = state.user_team_id

            regular = simulate_regular_season(state.teams, self._rng)
            teams = apply_standings(state.teams, regular.standings)
            state = replace(state, teams=teams, week=SEASON_WEEKS)

            state = self._set_phase(state, SeasonPhase.PLAYOFFS, events)
            bracket = simulate_playoffs(teams, regular.standings, self._rng)
            mvp = get_season_mvp(teams)

            tax_years = dict(state.consecutive_tax_years)
            user_financials = None
            for team in teams:
                result = bracket.result_for(team.id)
                report = generate_financial_report(
                    team,
                    regular.record(team.id).wins,
                    playoff_round_from_result(result),
                    result is PlayoffResult.CHAMPION,
                    tax_years.get(team.id, 0),
                )
                tax_years[team.id] = report.consecutive_tax_years
                if team.id == user_id:
                    user_financials = report

            record = regular.record(user_id)
            playoff_result = bracket.result_for(user_id)
            decisions = resolve_season_decisions(
                state.risk_decisions, season, record.wins, playoff_result,
            )

            approval = fan_approval_change(record.wins, playoff_result)
            fan_approval = _clamp_percent(state.fan_approval + approval)
            owner_confidence = _clamp_percent(
                state.owner_confidence + owner_confidence_change(approval)
            )
            win_history = [r.wins for r in state.season_results] + [record.wins]

            season_result = SeasonResult(
                season=season,
                wins=record.wins,
                losses=record.losses,
                playoff_result=playoff_result,
                financials=user_financials,
                risk_rating=season_risk_rating(decisions, season),
                volatility_score=round(calculate_win_std_dev(win_history), 2),
                mvp_name=mvp.name if mvp else None,
                champion_team_id=bracket.champion_team_id,
                fan_approval=fan_approval,
                owner_confidence=owner_confidence,
            )

            order = build_draft_order(teams, bracket.team_results, season)
            teams = project_pick_positions(teams, order, season)

            news = state.news
            user = find_team(teams, user_id)
            for injury in regular.injuries:
                if injury.team_id == user_id or injury.severity is InjurySeverity.SEASON_ENDING:
                    news = _add_news(
                        news, state, NewsType.INJURY, str(injury), [injury.team_id], week=injury.week,
                    )
            news = _add_news(
                news, state, NewsType.SEASON,
                f"Season {season} complete: the {user.full_name} finish {record.wins}-{record.losses}.",
                [user_id],
            )
            champion = find_team(teams, bracket.champion_team_id)
            news = _add_news(
                news, state, NewsType.PLAYOFFS,
                f"The {champion.full_name} win the championship!", [champion.id],
            )
            if mvp is not None:
                news = _add_news(
                    news, state, NewsType.AWARD, f"{mvp.name} is named MVP.", [mvp.team_id or ""],
                )

            state = replace(
                state,
                teams=teams,
                season_results=state.season_results + [season_result],
                risk_decisions=decisions,
                consecutive_tax_years=tax_years,
                fan_approval=fan_approval,
                owner_confidence=owner_confidence,
                draft_order=order,
                draft_cursor=0,
                news=news,
                last_playoff_results=dict(bracket.team_results),
            )
            self._state = self._set_phase(state, SeasonPhase.SEASON_END, events)

            logger.info(
                "Season %d: %s went %d-%d (%s), champion %s",
                season, user.abbreviation, record.wins, record.losses,
                playoff_result.value, champion.abbreviation,
            )
            events.append(SeasonCompletedEvent(
                session_id=state.session_id, season=season, team_id=user_id,
                wins=record.wins, losses=record.losses, playoff_result=playoff_result.value,
                champion_team_id=bracket.champion_team_id, profit=user_financials.profit,
            ))
            report = SeasonReport(
                result=season_result,
                bracket=bracket,
                standings=regular.standings,
                mvp_team_id=mvp.team_id if mvp else None,
                injuries=regular.injuries,
            )

        self._emit(events)
        return report

    def advance_phase(self) -> SeasonPhase:
        """
        Move to the next phase of the franchise year.

        Leaving the draft completes any remaining picks (AI picks for the
        user too) and opens the AI trade window. Leaving free agency rolls
        the league into the next season.

        Raises:
            PhaseError: If the season has not been simulated yet, or the
                run is complete
        """
        events: list[FranchiseEvent] = []
        with self._lock:
            state = self._state
            phase = state.phase

            if phase in (SeasonPhase.REGULAR_SEASON, SeasonPhase.PLAYOFFS) and not state.current_season_played:
                raise PhaseError("Simulate the season before advancing")
            if phase is SeasonPhase.SEASON_END and state.is_complete:
                raise PhaseError("The run is complete; no seasons remain")

            if phase is SeasonPhase.OFFSEASON_DRAFT:
                state, _ = self._run_ai_picks(state, False, events)
                ai = process_ai_trades(state.teams, state.user_team_id, self._rng, state.season)
                news = state.news
                for line in ai.trades:
                    news = _add_news(news, state, NewsType.TRADE, line, [])
                state = replace(state, teams=ai.teams, news=news)

            if phase is SeasonPhase.OFFSEASON_FREE_AGENCY:
                previous = state.phase
                rollover = start_new_season(state, self._rng)
                state = rollover.state
                news = state.news
                for player in rollover.released:
                    if player.team_id == state.user_team_id:
                        news = _add_news(
                            news, state, NewsType.SIGNING,
                            f"{player.name} hits free agency after an expiring contract.",
                            [state.user_team_id],
                        )
                for line in rollover.signings:
                    news = _add_news(news, state, NewsType.SIGNING, line, [])
                self._state = replace(state, news=news)
                events.append(PhaseChangedEvent(
                    session_id=state.session_id, season=state.season,
                    previous_phase=previous.value, new_phase=state.phase.value,
                ))
                logger.info("Season %d: %s -> %s", state.season, previous.value, state.phase.value)
            else:
                self._state = self._set_phase(state, phase.next_phase, events)
            new_phase = self._state.phase

        self._emit(events)
        return new_phase
