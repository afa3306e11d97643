"""
Runtime configuration.

Defaults for new franchise runs, logging and save location.
All settings can be overridden via environment variables.
"""

import os
from dataclasses import dataclass, field
from typing import Optional

from hardwood.core.enums import Difficulty


def _env_int(name: str) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    try:
        return int(raw)
    except ValueError:
        return None


@dataclass
class GameConfig:
    """Configuration for franchise runs."""

    # Absent seed means every run is different
    seed: Optional[int] = field(default_factory=lambda: _env_int("HARDWOOD_SEED"))
    difficulty: str = field(
        default_factory=lambda: os.getenv("HARDWOOD_DIFFICULTY", "medium").lower()
    )
    seasons: int = field(default_factory=lambda: _env_int("HARDWOOD_SEASONS") or 3)

    log_level: str = field(default_factory=lambda: os.getenv("HARDWOOD_LOG_LEVEL", "INFO").upper())
    save_dir: str = field(default_factory=lambda: os.getenv("HARDWOOD_SAVE_DIR", "saves"))

    @classmethod
    def from_env(cls) -> "GameConfig":
        """Create config from environment variables."""
        return cls()

    @property
    def difficulty_level(self) -> Difficulty:
        """Parsed difficulty; raises ValueError for an unknown name."""
        return Difficulty(self.difficulty)

    def validate(self) -> list[str]:
        """Validate configuration, return list of errors."""
        errors = []
        if self.difficulty not in {d.value for d in Difficulty}:
            errors.append(
                f"HARDWOOD_DIFFICULTY must be one of easy, medium, hard (got {self.difficulty!r})"
            )
        if self.seasons < 1:
            errors.append("HARDWOOD_SEASONS must be at least 1")
        if self.log_level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            errors.append(f"HARDWOOD_LOG_LEVEL is not a logging level: {self.log_level}")
        if not self.save_dir:
            errors.append("HARDWOOD_SAVE_DIR is required")
        return errors


# Singleton config instance
_config: Optional[GameConfig] = None


def get_config() -> GameConfig:
    """Get the global game configuration."""
    global _config
    if _config is None:
        _config = GameConfig.from_env()
    return _config


def reset_config() -> None:
    """
    Drop the cached configuration so the next `get_config` re-reads the
    environment.

    Useful for testing.
    """
    global _config
    _config = None
