import logging
import secrets
import threading
import time

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from webcontext.server.session.session_manager import Session, SessionManager


if TYPE_CHECKING:
    from webcontext.server.exchange import HttpExchange
    from webcontext.types import SessionConfig


logger = logging.getLogger(__name__)


def generate_session_id() -> str:
    return secrets.token_urlsafe(32)


class InMemorySession(Session):
    """A session whose attributes live in process memory."""

    def __init__(
        self,
        manager: 'InMemorySessionManager',
        session_id: str,
        config: 'SessionConfig',
        now: float,
    ):
        self._manager = manager
        self._id = session_id
        self._attributes: dict[str, Any] = {}
        self.config = config
        self.creation_time = now
        self.last_accessed_time = now
        self.max_inactive_interval = config.max_inactive_interval

    @property
    def id(self) -> str:
        return self._id

    def is_expired(self, now: float) -> bool:
        return now - self.last_accessed_time > self.max_inactive_interval

    def get_attribute(self, name: str) -> Any:
        return self._attributes.get(name)

    def set_attribute(self, name: str, value: Any) -> Any:
        previous = self._attributes.get(name)
        self._attributes[name] = value
        return previous

    def remove_attribute(self, name: str) -> Any:
        return self._attributes.pop(name, None)

    def get_attribute_names(self) -> set[str]:
        return set(self._attributes)

    def invalidate(self, exchange: 'HttpExchange | None' = None) -> None:
        self._manager.invalidate(self._id)
        if exchange is not None:
            self.config.clear_session(exchange, self._id)


class InMemorySessionManager(SessionManager):
    """In-memory implementation of the SessionManager interface.

    Sessions expire after `max_inactive_interval` seconds without access.
    Expired sessions are dropped when looked up, or in bulk by
    `cleanup_expired_sessions`.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self._sessions: dict[str, InMemorySession] = {}
        self._lock = threading.Lock()
        self._clock = clock

    @property
    def session_count(self) -> int:
        with self._lock:
            return len(self._sessions)

    def create_session(
        self, exchange: 'HttpExchange', config: 'SessionConfig'
    ) -> InMemorySession:
        session_id = generate_session_id()
        session = InMemorySession(self, session_id, config, self._clock())
        with self._lock:
            self._sessions[session_id] = session
        config.set_session_id(exchange, session_id)
        logger.debug('Created session %s', session_id)
        return session

    def get_session(
        self, exchange: 'HttpExchange', config: 'SessionConfig'
    ) -> InMemorySession | None:
        session_id = config.find_session_id(exchange)
        if session_id is None:
            return None
        return self.get_session_by_id(session_id)

    def get_session_by_id(self, session_id: str) -> InMemorySession | None:
        now = self._clock()
        with self._lock:
            session = self._sessions.get(session_id)
            if session is None:
                return None
            if session.is_expired(now):
                logger.debug('Session %s expired', session_id)
                del self._sessions[session_id]
                return None
            session.last_accessed_time = now
            return session

    def invalidate(self, session_id: str) -> None:
        with self._lock:
            self._sessions.pop(session_id, None)

    def cleanup_expired_sessions(self) -> int:
        """Removes expired sessions and returns how many were removed."""
        now = self._clock()
        with self._lock:
            expired = [
                session_id
                for session_id, session in self._sessions.items()
                if session.is_expired(now)
            ]
            for session_id in expired:
                del self._sessions[session_id]
        if expired:
            logger.info('Removed %d expired session(s)', len(expired))
        return len(expired)
