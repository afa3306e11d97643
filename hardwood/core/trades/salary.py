"""Salary-cap legality for trades."""

from dataclasses import dataclass
from typing import Optional

from hardwood.core.models.player import Player
from hardwood.core.models.team import Team


OVER_CAP_MATCH_RATE = 1.25   # Over-cap teams take back at most 125% of outgoing
OVER_CAP_MATCH_BUFFER = 0.1  # Plus this flat amount ($M)


@dataclass
class SalaryCheck:
    valid: bool
    reason: Optional[str] = None

    def to_dict(self) -> dict:
        return {"valid": self.valid, "reason": self.reason}


def _check_side(team: Team, outgoing: float, incoming: float, cap: float) -> Optional[str]:
    """Return a rejection reason for one team, or None if the deal is legal for it."""
    if incoming <= outgoing:
        return None

    if team.total_salary > cap:
        allowed = outgoing * OVER_CAP_MATCH_RATE + OVER_CAP_MATCH_BUFFER
        if incoming > allowed:
            return (
                f"{team.full_name} are over the cap and can take back at most "
                f"${allowed:.1f}M (125% of ${outgoing:.1f}M outgoing plus "
                f"${OVER_CAP_MATCH_BUFFER:.1f}M); incoming salary is ${incoming:.1f}M, "
                f"${incoming - allowed:.1f}M too much."
            )
        return None

    cap_space = cap - team.total_salary
    allowed = outgoing + cap_space
    if incoming > allowed:
        return (
            f"{team.full_name} need ${incoming - allowed:.1f}M more cap space to absorb "
            f"${incoming:.1f}M incoming (${outgoing:.1f}M outgoing, "
            f"${cap_space:.1f}M cap space)."
        )
    return None


def validate_trade_salary(
    from_team: Team,
    to_team: Team,
    offered_players: list[Player],
    requested_players: list[Player],
    cap: Optional[float] = None,
) -> SalaryCheck:
    """
    Validate that both teams can legally absorb the incoming salary.

    Args:
        from_team: Team making the offer
        to_team: Team receiving the offer
        offered_players: Players leaving from_team
        requested_players: Players leaving to_team
        cap: Salary cap; defaults to each team's own cap

    Returns:
        SalaryCheck with the first violation's reason
    """
    offered_salary = sum(p.salary for p in offered_players)
    requested_salary = sum(p.salary for p in requested_players)

    reason = _check_side(
        from_team, offered_salary, requested_salary,
        cap if cap is not None else from_team.salary_cap,
    )
    if reason is None:
        reason = _check_side(
            to_team, requested_salary, offered_salary,
            cap if cap is not None else to_team.salary_cap,
        )

    return SalaryCheck(valid=reason is None, reason=reason)
