import logging

from typing import TYPE_CHECKING, Any

from webcontext.server.session.session_manager import Session, SessionManager
from webcontext.types import SessionConfig
from webcontext.utils.errors import SessionUnavailableError


if TYPE_CHECKING:
    from webcontext.server.starlette_context import StarletteWebContext


logger = logging.getLogger(__name__)


class StarletteSessionStore:
    """Session attribute access for a `StarletteWebContext`.

    Built from the session manager and session config attached to the
    exchange. Reads never create a session; writes and identifier lookups
    create one on demand.
    """

    def __init__(
        self,
        session_manager: SessionManager | None,
        session_config: SessionConfig | None = None,
    ):
        self._session_manager = session_manager
        self._session_config = session_config or SessionConfig()

    @property
    def session_manager(self) -> SessionManager | None:
        return self._session_manager

    @property
    def session_config(self) -> SessionConfig:
        return self._session_config

    def _get_session(self, context: 'StarletteWebContext') -> Session | None:
        if self._session_manager is None:
            return None
        return self._session_manager.get_session(
            context.exchange, self._session_config
        )

    def _get_or_create_session(self, context: 'StarletteWebContext') -> Session:
        if self._session_manager is None:
            raise SessionUnavailableError()
        session = self._get_session(context)
        if session is None:
            session = self._session_manager.create_session(
                context.exchange, self._session_config
            )
        return session

    def get(self, context: 'StarletteWebContext', key: str) -> Any:
        session = self._get_session(context)
        if session is None:
            return None
        return session.get_attribute(key)

    def set(self, context: 'StarletteWebContext', key: str, value: Any) -> None:
        session = self._get_or_create_session(context)
        if value is None:
            session.remove_attribute(key)
        else:
            session.set_attribute(key, value)

    def get_or_create_session_id(self, context: 'StarletteWebContext') -> str:
        return self._get_or_create_session(context).id
