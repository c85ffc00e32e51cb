"""Session management for the web context."""

import logging

from webcontext.server.session.inmemory_session_manager import (
    InMemorySession,
    InMemorySessionManager,
)
from webcontext.server.session.session_manager import Session, SessionManager
from webcontext.server.session.session_store import StarletteSessionStore


log = logging.getLogger(__name__)

try:
    from webcontext.server.session.redis_session_manager import (
        RedisSession,
        RedisSessionManager,
    )
except ImportError as e:
    # The in-memory manager stays usable without the redis extra.
    log.debug(
        'RedisSessionManager not loaded. This is expected if redis is not installed. Error: %s',
        e,
    )
    RedisSession = None  # type: ignore[assignment,misc]
    RedisSessionManager = None  # type: ignore[assignment,misc]

__all__ = [
    'InMemorySession',
    'InMemorySessionManager',
    'RedisSession',
    'RedisSessionManager',
    'Session',
    'SessionManager',
    'StarletteSessionStore',
]
