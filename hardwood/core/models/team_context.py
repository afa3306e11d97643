"""
Team context archetypes and management strategies.

Every per-context parameter in the game lives in CONTEXT_PROFILES:
fan patience, ownership tolerance, the rational-aggression multiplier,
the risk level a well-run front office in that situation should show,
AI defaults and the guidance text shown to the player. Economics, AI
and end-of-run evaluation all read from this one table.
"""

from dataclasses import dataclass
from enum import Enum

from hardwood.core.enums import RiskLevel


class TeamContextType(Enum):
    LEGACY_POWER = "legacy_power"
    SMALL_MARKET_RESET = "small_market_reset"
    REVENUE_SENSITIVE = "revenue_sensitive"
    CASH_RICH_EXPANSION = "cash_rich_expansion"
    STAR_DEPENDENT = "star_dependent"


class StrategyType(Enum):
    STABILITY_FIRST = "stability_first"
    AGGRESSIVE_PUSH = "aggressive_push"
    BOOM_BUST_SWING = "boom_bust_swing"


class Compatibility(Enum):
    GOOD = "good"
    NEUTRAL = "neutral"
    POOR = "poor"


@dataclass(frozen=True)
class TeamContextProfile:
    """All parameters for one context archetype."""

    context_type: TeamContextType
    label: str
    description: str

    fan_patience: int                 # Seasons fans tolerate losing (1-10)
    media_pressure: float             # 0.5 - 1.5
    revenue_volatility: float         # 0-1
    ownership_risk_tolerance: float   # 0-1
    brand_value_at_risk: float        # 0-1

    # Rational aggression
    risk_multiplier: float
    aggression_reason: str
    always_rational_aggression: bool

    expected_risk_level: RiskLevel
    default_ai_strategy: StrategyType
    difficulty_rating: int            # 1 (forgiving) - 5 (punishing)

    key_message: str
    guidance: tuple[str, ...]


CONTEXT_PROFILES: dict[TeamContextType, TeamContextProfile] = {
    TeamContextType.LEGACY_POWER: TeamContextProfile(
        context_type=TeamContextType.LEGACY_POWER,
        label="Legacy Power",
        description=(
            "A storied franchise in a major market. Fans expect contention every "
            "year and the brand can absorb expensive mistakes."
        ),
        fan_patience=3,
        media_pressure=1.5,
        revenue_volatility=0.3,
        ownership_risk_tolerance=0.7,
        brand_value_at_risk=0.9,
        risk_multiplier=1.2,
        aggression_reason="Legacy brand and market revenue can absorb luxury spending.",
        always_rational_aggression=False,
        expected_risk_level=RiskLevel.MEDIUM,
        default_ai_strategy=StrategyType.AGGRESSIVE_PUSH,
        difficulty_rating=3,
        key_message="Your market can afford aggression, but the spotlight punishes failure.",
        guidance=(
            "Spending into the tax is defensible when it buys contention.",
            "Media pressure magnifies every losing streak.",
            "Protect the brand: avoid long rebuilds.",
        ),
    ),
    TeamContextType.SMALL_MARKET_RESET: TeamContextProfile(
        context_type=TeamContextType.SMALL_MARKET_RESET,
        label="Small Market Reset",
        description=(
            "A small-market team starting over. Patient fans and low expectations "
            "make bold, asset-building swings the rational path."
        ),
        fan_patience=7,
        media_pressure=0.6,
        revenue_volatility=0.7,
        ownership_risk_tolerance=0.4,
        brand_value_at_risk=0.3,
        risk_multiplier=0.7,
        aggression_reason="Small market limits spending; aggression must target cheap upside.",
        always_rational_aggression=False,
        expected_risk_level=RiskLevel.HIGH,
        default_ai_strategy=StrategyType.STABILITY_FIRST,
        difficulty_rating=2,
        key_message="You have nothing to protect. Swing for upside through picks and youth.",
        guidance=(
            "Young players and draft picks are your currency.",
            "Payroll past the tax line is almost never affordable.",
            "Fans will wait if they can see a plan.",
        ),
    ),
    TeamContextType.REVENUE_SENSITIVE: TeamContextProfile(
        context_type=TeamContextType.REVENUE_SENSITIVE,
        label="Revenue Sensitive",
        description=(
            "Ownership watches every dollar. Revenue swings hurt, so the "
            "franchise must stay profitable while staying relevant."
        ),
        fan_patience=5,
        media_pressure=0.8,
        revenue_volatility=0.9,
        ownership_risk_tolerance=0.3,
        brand_value_at_risk=0.5,
        risk_multiplier=0.5,
        aggression_reason="Revenue sensitivity makes expensive moves very risky.",
        always_rational_aggression=False,
        expected_risk_level=RiskLevel.LOW,
        default_ai_strategy=StrategyType.STABILITY_FIRST,
        difficulty_rating=4,
        key_message="Sustainability is the win condition. Avoid the tax and protect the margin.",
        guidance=(
            "Every luxury-tax dollar comes straight out of a thin margin.",
            "Value contracts matter more than star power.",
            "A steady winner beats a boom-and-bust cycle here.",
        ),
    ),
    TeamContextType.CASH_RICH_EXPANSION: TeamContextProfile(
        context_type=TeamContextType.CASH_RICH_EXPANSION,
        label="Cash Rich Expansion",
        description=(
            "A new franchise with deep-pocketed ownership eager to buy relevance "
            "quickly. Money is not the constraint; time is."
        ),
        fan_patience=6,
        media_pressure=0.7,
        revenue_volatility=0.4,
        ownership_risk_tolerance=0.8,
        brand_value_at_risk=0.2,
        risk_multiplier=1.5,
        aggression_reason="Cash-rich ownership can absorb significant spending.",
        always_rational_aggression=True,
        expected_risk_level=RiskLevel.HIGH,
        default_ai_strategy=StrategyType.AGGRESSIVE_PUSH,
        difficulty_rating=1,
        key_message="Ownership will fund bold moves. Use the checkbook to accelerate.",
        guidance=(
            "Taking on salary in trades is an advantage, not a burden.",
            "Overpaying free agents is acceptable if it builds a winner.",
            "There is little brand to lose yet.",
        ),
    ),
    TeamContextType.STAR_DEPENDENT: TeamContextProfile(
        context_type=TeamContextType.STAR_DEPENDENT,
        label="Star Dependent",
        description=(
            "The franchise revolves around one star. Build around them in time "
            "or risk losing everything when they leave."
        ),
        fan_patience=4,
        media_pressure=1.2,
        revenue_volatility=0.6,
        ownership_risk_tolerance=0.6,
        brand_value_at_risk=0.7,
        risk_multiplier=1.1,
        aggression_reason="Star window justifies moderate aggression.",
        always_rational_aggression=False,
        expected_risk_level=RiskLevel.MEDIUM,
        default_ai_strategy=StrategyType.BOOM_BUST_SWING,
        difficulty_rating=3,
        key_message="The star's window is open now. Support them without mortgaging the future.",
        guidance=(
            "Trading the star is the highest-risk move you can make.",
            "Complementary role players stretch the window.",
            "Revenue follows the star; so does the pressure.",
        ),
    ),
}


def get_context_profile(context_type: TeamContextType) -> TeamContextProfile:
    return CONTEXT_PROFILES[context_type]


@dataclass(frozen=True)
class StrategyProfile:
    """Front-office posture chosen by the player (or assigned to an AI team)."""

    strategy_type: StrategyType
    label: str
    description: str
    trade_risk: float          # Appetite for risky trades, 0-1
    cap_flexibility: float     # Willingness to preserve cap room, 0-1
    development_focus: float   # Weight on youth, 0-1
    win_now_weight: float      # Weight on immediate results, 0-1
    decision_risk_level: RiskLevel


STRATEGY_PROFILES: dict[StrategyType, StrategyProfile] = {
    StrategyType.STABILITY_FIRST: StrategyProfile(
        strategy_type=StrategyType.STABILITY_FIRST,
        label="Stability First",
        description="Protect the balance sheet, develop from within, avoid big swings.",
        trade_risk=0.3,
        cap_flexibility=0.8,
        development_focus=0.8,
        win_now_weight=0.3,
        decision_risk_level=RiskLevel.LOW,
    ),
    StrategyType.AGGRESSIVE_PUSH: StrategyProfile(
        strategy_type=StrategyType.AGGRESSIVE_PUSH,
        label="Aggressive Push",
        description="Spend and trade to contend now while keeping some flexibility.",
        trade_risk=0.6,
        cap_flexibility=0.4,
        development_focus=0.4,
        win_now_weight=0.8,
        decision_risk_level=RiskLevel.MEDIUM,
    ),
    StrategyType.BOOM_BUST_SWING: StrategyProfile(
        strategy_type=StrategyType.BOOM_BUST_SWING,
        label="Boom or Bust",
        description="All-in moves with high variance: a title or a teardown.",
        trade_risk=1.0,
        cap_flexibility=0.1,
        development_focus=0.2,
        win_now_weight=1.0,
        decision_risk_level=RiskLevel.HIGH,
    ),
}


def get_strategy_profile(strategy_type: StrategyType) -> StrategyProfile:
    return STRATEGY_PROFILES[strategy_type]


_COMPATIBILITY: dict[tuple[TeamContextType, StrategyType], tuple[Compatibility, str]] = {
    (TeamContextType.LEGACY_POWER, StrategyType.STABILITY_FIRST):
        (Compatibility.POOR, "Fans and media will not accept a quiet year."),
    (TeamContextType.LEGACY_POWER, StrategyType.AGGRESSIVE_PUSH):
        (Compatibility.GOOD, "Market revenue supports a sustained push."),
    (TeamContextType.LEGACY_POWER, StrategyType.BOOM_BUST_SWING):
        (Compatibility.NEUTRAL, "Affordable, but a bust is very public."),
    (TeamContextType.SMALL_MARKET_RESET, StrategyType.STABILITY_FIRST):
        (Compatibility.NEUTRAL, "Safe, but it may lock in mediocrity."),
    (TeamContextType.SMALL_MARKET_RESET, StrategyType.AGGRESSIVE_PUSH):
        (Compatibility.POOR, "Spending to contend outruns a small market's revenue."),
    (TeamContextType.SMALL_MARKET_RESET, StrategyType.BOOM_BUST_SWING):
        (Compatibility.GOOD, "Nothing to lose: cheap high-variance bets fit a reset."),
    (TeamContextType.REVENUE_SENSITIVE, StrategyType.STABILITY_FIRST):
        (Compatibility.GOOD, "Protects the margin ownership depends on."),
    (TeamContextType.REVENUE_SENSITIVE, StrategyType.AGGRESSIVE_PUSH):
        (Compatibility.NEUTRAL, "Possible only with disciplined contracts."),
    (TeamContextType.REVENUE_SENSITIVE, StrategyType.BOOM_BUST_SWING):
        (Compatibility.POOR, "A bust could put the franchise underwater."),
    (TeamContextType.CASH_RICH_EXPANSION, StrategyType.STABILITY_FIRST):
        (Compatibility.POOR, "Wastes ownership's willingness to spend."),
    (TeamContextType.CASH_RICH_EXPANSION, StrategyType.AGGRESSIVE_PUSH):
        (Compatibility.GOOD, "Money buys time; use it."),
    (TeamContextType.CASH_RICH_EXPANSION, StrategyType.BOOM_BUST_SWING):
        (Compatibility.GOOD, "Ownership can absorb a miss."),
    (TeamContextType.STAR_DEPENDENT, StrategyType.STABILITY_FIRST):
        (Compatibility.POOR, "The star's window closes while you wait."),
    (TeamContextType.STAR_DEPENDENT, StrategyType.AGGRESSIVE_PUSH):
        (Compatibility.GOOD, "Surrounds the star with help during the window."),
    (TeamContextType.STAR_DEPENDENT, StrategyType.BOOM_BUST_SWING):
        (Compatibility.NEUTRAL, "High ceiling, but a bust may drive the star away."),
}


def get_context_compatibility(
    context_type: TeamContextType, strategy_type: StrategyType
) -> tuple[Compatibility, str]:
    """How well a strategy suits a context, with a one-line explanation."""
    return _COMPATIBILITY[(context_type, strategy_type)]
