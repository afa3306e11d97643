"""
Session manager for franchise runs.

Keeps active GameSessions in memory, keyed by session id.
"""

import logging
import threading
from typing import Optional

from hardwood.core.enums import Difficulty
from hardwood.core.models.team_context import StrategyType
from hardwood.management.session import GameSession


logger = logging.getLogger(__name__)


class GameSessionManager:
    """Manages active franchise sessions."""

    def __init__(self) -> None:
        self._sessions: dict[str, GameSession] = {}
        self._lock = threading.Lock()

    def create_session(
        self,
        team_id: str,
        difficulty: Difficulty = Difficulty.MEDIUM,
        strategy: StrategyType = StrategyType.STABILITY_FIRST,
        seed: Optional[int] = None,
        total_seasons: int = 3,
    ) -> GameSession:
        """
        Start a new run and register it.

        Raises:
            ValueError: If team_id is not a league franchise
        """
        session = GameSession.new(
            team_id,
            difficulty=difficulty,
            strategy=strategy,
            seed=seed,
            total_seasons=total_seasons,
        )
        with self._lock:
            self._sessions[session.session_id] = session
        logger.info("Session %s created for %s", session.session_id, team_id)
        return session

    def get_session(self, session_id: str) -> Optional[GameSession]:
        """Get a session by ID."""
        return self._sessions.get(session_id)

    def remove_session(self, session_id: str) -> bool:
        """Remove a session; False if it did not exist."""
        with self._lock:
            removed = self._sessions.pop(session_id, None)
        if removed is not None:
            logger.info("Session %s removed", session_id)
        return removed is not None

    def clear(self) -> None:
        with self._lock:
            self._sessions.clear()

    @property
    def active_sessions(self) -> list[str]:
        """List of active session IDs."""
        return list(self._sessions.keys())


# Global session manager instance
session_manager = GameSessionManager()
