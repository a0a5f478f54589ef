"""Implementation of (Session)Repository keeping everything in process memory"""

import logging
import threading
from collections import OrderedDict
from uuid import UUID, uuid4

from src.core.config import MAX_SESSIONS
from src.othello.session import GameSession

logger = logging.getLogger(__name__)


class InMemorySessionRepository:
    """Sessions stored in a dictionary. Least recently used sessions get evicted once there are more than max_sessions."""

    def __init__(self, max_sessions: int = MAX_SESSIONS) -> None:
        self.max_sessions = max_sessions
        self._sessions: OrderedDict[UUID, GameSession] = OrderedDict()
        self._lock = threading.Lock()

    def get_session(self, session_id: UUID) -> GameSession | None:
        """Get session by ID, if it exists."""
        with self._lock:
            session = self._sessions.get(session_id)
            if session is not None:
                self._touch(session_id)
            return session

    def create_session(self, session: GameSession) -> UUID:
        """Register a new session and return its newly created ID."""
        new_id = uuid4()
        with self._lock:
            self._sessions[new_id] = session
            self._enforce_cap()
        return new_id

    def delete_session(self, session_id: UUID) -> GameSession | None:
        """Remove a session from the registry."""
        with self._lock:
            return self._sessions.pop(session_id, None)

    def list_sessions(self) -> list[UUID]:
        """IDs of all registered sessions, most recently used first."""
        with self._lock:
            return list(reversed(self._sessions.keys()))

    def _touch(self, session_id: UUID) -> None:
        # mark as most recently used
        self._sessions.move_to_end(session_id)

    def _enforce_cap(self) -> None:
        while len(self._sessions) > self.max_sessions:
            evicted_id, _ = self._sessions.popitem(last=False)
            logger.info("Evicted session %s (limit of %d reached)", evicted_id, self.max_sessions)
