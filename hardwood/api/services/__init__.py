"""API services."""

from hardwood.api.services.session_manager import GameSessionManager, session_manager

__all__ = ["GameSessionManager", "session_manager"]
