"""Protocol repository (in-memory for now, a persistent store could implement the same methods later)"""

from typing import Protocol
from uuid import UUID

from src.othello.session import GameSession


class SessionRepository(Protocol):
    """Registry of live game sessions keyed by ID"""

    def get_session(self, session_id: UUID) -> GameSession | None:
        """Get session by ID, if it exists."""
        ...

    def create_session(self, session: GameSession) -> UUID:
        """Register a new session and return its newly created ID."""
        ...

    def delete_session(self, session_id: UUID) -> GameSession | None:
        """Remove a session from the registry."""
        ...

    def list_sessions(self) -> list[UUID]:
        """IDs of all registered sessions, most recently used first."""
        ...
