"""
Franchise economics.

Handles:
- Progressive luxury tax with a repeater multiplier
- Salary floor penalty
- Additive revenue model (market, wins, playoffs, fans, prestige)
- Season financial reports and health analysis
- Rational-aggression classification per team context

All amounts are in millions.
"""

import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from hardwood.core.enums import MarketSize, PlayoffResult, RiskLevel
from hardwood.core.models.team import Team


logger = logging.getLogger(__name__)


SALARY_CAP = 140.0
LUXURY_TAX_THRESHOLD = 170.0
SALARY_FLOOR = 110.0

REPEATER_TAX_YEARS = 3
REPEATER_TAX_MULTIPLIER = 1.5


@dataclass(frozen=True)
class TaxBracket:
    width: float   # Size of the band of excess payroll
    rate: float    # Tax per dollar inside the band


LUXURY_TAX_BRACKETS = (
    TaxBracket(width=5.0, rate=1.50),
    TaxBracket(width=5.0, rate=1.75),
    TaxBracket(width=5.0, rate=2.50),
    TaxBracket(width=5.0, rate=3.25),
    TaxBracket(width=math.inf, rate=4.25),
)

# Revenue model
BASE_REVENUE = 80.0
MARKET_REVENUE_BONUS = {
    MarketSize.LARGE: 40.0,
    MarketSize.MEDIUM: 20.0,
    MarketSize.SMALL: 5.0,
}
REVENUE_PER_WIN = 0.5
PLAYOFF_ROUND_REVENUE = (0.0, 5.0, 10.0, 20.0, 35.0)
CHAMPIONSHIP_REVENUE = 25.0
FANBASE_REVENUE_RATE = 0.3
PRESTIGE_REVENUE_RATE = 0.2
BASE_OPERATING_COSTS = 50.0

# Rational aggression
MARKET_RISK_BUFFER = {
    MarketSize.LARGE: 30.0,
    MarketSize.MEDIUM: 15.0,
    MarketSize.SMALL: 0.0,
}
PRESTIGE_BUFFER_RATE = 0.2
LOYAL_FANBASE = 70
FICKLE_FANBASE = 40
FANBASE_BUFFER_SWING = 10.0
AGGRESSION_BASE_THRESHOLD = 20.0
HIGH_RISK_COST_RATIO = 1.5
WINNING_TEAM_WINS = 45


# =============================================================================
# Tax and floor
# =============================================================================

def calculate_luxury_tax(payroll: float, consecutive_tax_years: int = 0) -> float:
    """
    Luxury tax owed on payroll above the threshold.

    The excess is taxed band by band at strictly increasing rates; teams
    that have paid tax REPEATER_TAX_YEARS or more seasons running pay the
    repeater multiplier on the whole bill.

    Args:
        payroll: Team payroll
        consecutive_tax_years: Consecutive prior seasons in which tax was owed

    Returns:
        Tax owed (0.0 at or below the threshold)
    """
    excess = payroll - LUXURY_TAX_THRESHOLD
    if excess <= 0:
        return 0.0

    tax = 0.0
    remaining = excess
    for bracket in LUXURY_TAX_BRACKETS:
        taxed = min(remaining, bracket.width)
        tax += taxed * bracket.rate
        remaining -= taxed
        if remaining <= 0:
            break

    if consecutive_tax_years >= REPEATER_TAX_YEARS:
        tax *= REPEATER_TAX_MULTIPLIER

    return tax


def next_consecutive_tax_years(tax_owed: float, consecutive_tax_years: int) -> int:
    """Counter value after a season: grows while tax is owed, else resets."""
    return consecutive_tax_years + 1 if tax_owed > 0 else 0


def calculate_floor_penalty(payroll: float) -> float:
    """Shortfall below the salary floor, paid as a penalty."""
    return max(0.0, SALARY_FLOOR - payroll)


# =============================================================================
# Revenue and reports
# =============================================================================

def playoff_round_from_result(result: PlayoffResult) -> int:
    """Revenue round depth, 0 (missed) to 4 (finals or champion)."""
    return min(result.rank, 4)


def calculate_revenue(
    team: Team,
    wins: int,
    playoff_round: int,
    is_champion: bool,
) -> float:
    """Season revenue from market, results, fan base and prestige."""
    revenue = BASE_REVENUE
    revenue += MARKET_REVENUE_BONUS[team.market_size]
    revenue += wins * REVENUE_PER_WIN
    revenue += PLAYOFF_ROUND_REVENUE[max(0, min(playoff_round, len(PLAYOFF_ROUND_REVENUE) - 1))]
    if is_champion:
        revenue += CHAMPIONSHIP_REVENUE
    revenue += team.fanbase * FANBASE_REVENUE_RATE
    revenue += team.prestige * PRESTIGE_REVENUE_RATE
    return round(revenue, 1)


def calculate_expenses(payroll: float, luxury_tax: float, floor_penalty: float) -> float:
    return round(payroll + luxury_tax + floor_penalty + BASE_OPERATING_COSTS, 2)


@dataclass
class FinancialState:
    """One team's books for one season."""
    salary_cap: float
    luxury_tax_threshold: float
    salary_floor: float
    payroll: float
    luxury_tax: float
    floor_penalty: float
    revenue: float
    expenses: float
    consecutive_tax_years: int

    @property
    def profit(self) -> float:
        return round(self.revenue - self.expenses, 2)

    @property
    def pays_tax(self) -> bool:
        return self.luxury_tax > 0

    def to_dict(self) -> dict:
        return {
            "salary_cap": self.salary_cap,
            "luxury_tax_threshold": self.luxury_tax_threshold,
            "salary_floor": self.salary_floor,
            "payroll": self.payroll,
            "luxury_tax": self.luxury_tax,
            "floor_penalty": self.floor_penalty,
            "revenue": self.revenue,
            "expenses": self.expenses,
            "profit": self.profit,
            "consecutive_tax_years": self.consecutive_tax_years,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "FinancialState":
        return cls(
            salary_cap=data.get("salary_cap", SALARY_CAP),
            luxury_tax_threshold=data.get("luxury_tax_threshold", LUXURY_TAX_THRESHOLD),
            salary_floor=data.get("salary_floor", SALARY_FLOOR),
            payroll=data.get("payroll", 0.0),
            luxury_tax=data.get("luxury_tax", 0.0),
            floor_penalty=data.get("floor_penalty", 0.0),
            revenue=data.get("revenue", 0.0),
            expenses=data.get("expenses", 0.0),
            consecutive_tax_years=data.get("consecutive_tax_years", 0),
        )


def generate_financial_report(
    team: Team,
    wins: int,
    playoff_round: int,
    is_champion: bool,
    consecutive_tax_years: int,
) -> FinancialState:
    """
    Build a team's season financials.

    consecutive_tax_years is the count before this season; the report
    carries the updated count forward.
    """
    payroll = team.total_salary
    tax = calculate_luxury_tax(payroll, consecutive_tax_years)
    floor_penalty = calculate_floor_penalty(payroll)
    revenue = calculate_revenue(team, wins, playoff_round, is_champion)
    expenses = calculate_expenses(payroll, tax, floor_penalty)

    report = FinancialState(
        salary_cap=team.salary_cap,
        luxury_tax_threshold=LUXURY_TAX_THRESHOLD,
        salary_floor=SALARY_FLOOR,
        payroll=payroll,
        luxury_tax=round(tax, 2),
        floor_penalty=floor_penalty,
        revenue=revenue,
        expenses=expenses,
        consecutive_tax_years=next_consecutive_tax_years(tax, consecutive_tax_years),
    )
    logger.debug(
        "%s financials: payroll=%.1f tax=%.2f revenue=%.1f profit=%.1f",
        team.abbreviation, payroll, tax, revenue, report.profit,
    )
    return report


class FinancialStatus(Enum):
    HEALTHY = "healthy"
    STRAINED = "strained"
    CRITICAL = "critical"


@dataclass
class FinancialHealth:
    status: FinancialStatus
    message: str


def analyze_financial_health(financials: FinancialState) -> FinancialHealth:
    profit = financials.profit
    if profit > 20:
        return FinancialHealth(FinancialStatus.HEALTHY, "Strong profits. Ownership is pleased.")
    if profit > 0:
        return FinancialHealth(FinancialStatus.HEALTHY, "Modest profit. Finances are stable.")
    if profit > -20:
        return FinancialHealth(
            FinancialStatus.STRAINED,
            "Operating at a loss. Ownership is watching spending closely.",
        )
    return FinancialHealth(
        FinancialStatus.CRITICAL,
        "Heavy losses. Ownership demands immediate cost cutting.",
    )


# =============================================================================
# Rational aggression
# =============================================================================

class AggressionAction(Enum):
    LUXURY_TAX_SPEND = "luxury_tax_spend"
    BIG_CONTRACT = "big_contract"
    TRADE_ASSETS = "trade_assets"

    @property
    def label(self) -> str:
        return self.value.replace("_", " ")


@dataclass
class AggressionVerdict:
    rational: bool
    reason: str
    risk_level: RiskLevel

    def to_dict(self) -> dict:
        return {"rational": self.rational, "reason": self.reason, "risk_level": self.risk_level.value}


def calculate_risk_buffer(team: Team) -> float:
    """How much downside a team can absorb before context is applied."""
    buffer = MARKET_RISK_BUFFER[team.market_size]
    buffer += team.prestige * PRESTIGE_BUFFER_RATE
    if team.fanbase > LOYAL_FANBASE:
        buffer += FANBASE_BUFFER_SWING
    elif team.fanbase < FICKLE_FANBASE:
        buffer -= FANBASE_BUFFER_SWING
    return buffer


def is_rational_aggression(
    team: Team,
    action_type: AggressionAction,
    action_cost: float,
    wins: Optional[int] = None,
) -> AggressionVerdict:
    """
    Judge whether an aggressive move fits the team's situation.

    The same cost is rational for one context and reckless for another:
    the risk buffer is scaled by the context's multiplier before the cost
    is compared with it.

    Args:
        team: Team considering the move
        action_type: What kind of aggressive move it is
        action_cost: Cost of the move
        wins: Current win total (defaults to the team's record)

    Returns:
        AggressionVerdict with the rational flag, reason and risk level
    """
    context = team.context
    threshold = calculate_risk_buffer(team) * context.risk_multiplier + AGGRESSION_BASE_THRESHOLD
    wins = team.wins if wins is None else wins

    if action_cost > threshold * HIGH_RISK_COST_RATIO:
        risk_level = RiskLevel.HIGH
    elif action_cost > threshold:
        risk_level = RiskLevel.MEDIUM
    else:
        risk_level = RiskLevel.LOW

    rational = (
        action_cost <= threshold
        or (risk_level is RiskLevel.MEDIUM and wins > WINNING_TEAM_WINS)
        or context.always_rational_aggression
    )

    verdict = "Rational" if rational else "Irrational"
    reason = (
        f"{verdict} {action_type.label} (${action_cost:.1f}M against a "
        f"${threshold:.1f}M threshold): {context.aggression_reason}"
    )
    return AggressionVerdict(rational=rational, reason=reason, risk_level=risk_level)
