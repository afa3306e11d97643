"""Position definitions for basketball players."""

from enum import Enum


class Position(Enum):
    """Individual player positions."""

    PG = "PG"  # Point Guard
    SG = "SG"  # Shooting Guard
    SF = "SF"  # Small Forward
    PF = "PF"  # Power Forward
    C = "C"  # Center

    @property
    def is_guard(self) -> bool:
        return self in (Position.PG, Position.SG)

    @property
    def is_big(self) -> bool:
        return self in (Position.PF, Position.C)
