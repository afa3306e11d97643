"""AI front offices for non-user teams."""

from hardwood.core.ai.offseason import (
    OffseasonResult,
    process_ai_free_agency,
    process_ai_offseason,
    process_ai_trades,
)
from hardwood.core.ai.trade_ai import (
    AIPersonality,
    TradeAI,
    generate_ai_personality,
    generate_ai_trade_proposal,
    get_ai_strategy,
    would_ai_accept_trade,
)

__all__ = [
    "AIPersonality",
    "OffseasonResult",
    "TradeAI",
    "generate_ai_personality",
    "generate_ai_trade_proposal",
    "get_ai_strategy",
    "process_ai_free_agency",
    "process_ai_offseason",
    "process_ai_trades",
    "would_ai_accept_trade",
]
