import logging

from abc import ABC, abstractmethod

from starlette.requests import Request

from webcontext.context import WebContext
from webcontext.server.exchange import HttpExchange
from webcontext.server.session.session_manager import SessionManager
from webcontext.server.starlette_context import StarletteWebContext
from webcontext.types import SessionConfig
from webcontext.utils.constants import (
    SESSION_CONFIG_ATTACHMENT_KEY,
    SESSION_MANAGER_ATTACHMENT_KEY,
)


logger = logging.getLogger(__name__)


class WebContextBuilder(ABC):
    """A class for building WebContexts from Starlette Requests."""

    @abstractmethod
    async def build(self, request: Request) -> WebContext:
        """Builds a WebContext from a Starlette Request."""


class DefaultWebContextBuilder(WebContextBuilder):
    """A default implementation of WebContextBuilder.

    Wraps the request in an `HttpExchange`, attaches the configured session
    manager and session config, parses form bodies so that form parameters
    are visible to the context, and returns a `StarletteWebContext`.
    """

    def __init__(
        self,
        session_manager: SessionManager | None = None,
        session_config: SessionConfig | None = None,
        parse_form: bool = True,
    ):
        """Initializes the DefaultWebContextBuilder.

        Args:
            session_manager: The manager backing session attributes. If None,
              session reads return None and session writes raise
              `SessionUnavailableError`.
            session_config: How the session id is carried on the exchange.
              Defaults to `SessionConfig()`.
            parse_form: Whether to read urlencoded and multipart bodies
              before the context is returned.
        """
        self.session_manager = session_manager
        self.session_config = session_config or SessionConfig()
        self.parse_form = parse_form

    async def build(self, request: Request) -> StarletteWebContext:
        exchange = HttpExchange(request)
        if self.session_manager is not None:
            exchange.attachments[SESSION_MANAGER_ATTACHMENT_KEY] = (
                self.session_manager
            )
        exchange.attachments[SESSION_CONFIG_ATTACHMENT_KEY] = (
            self.session_config
        )
        if self.parse_form:
            await exchange.parse_form()
        return StarletteWebContext(exchange)
