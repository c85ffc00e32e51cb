from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any


if TYPE_CHECKING:
    from webcontext.server.exchange import HttpExchange
    from webcontext.types import SessionConfig


class Session(ABC):
    """A server-side session holding arbitrary named attributes."""

    @property
    @abstractmethod
    def id(self) -> str:
        """Returns the session identifier."""

    @abstractmethod
    def get_attribute(self, name: str) -> Any:
        """Returns the attribute value, or None if it is not set."""

    @abstractmethod
    def set_attribute(self, name: str, value: Any) -> Any:
        """Sets an attribute and returns the previous value, if any."""

    @abstractmethod
    def remove_attribute(self, name: str) -> Any:
        """Removes an attribute and returns its value, if any."""

    @abstractmethod
    def get_attribute_names(self) -> set[str]:
        """Returns the names of all attributes stored in the session."""

    @abstractmethod
    def invalidate(self, exchange: 'HttpExchange | None' = None) -> None:
        """Destroys the session and, given an exchange, expires its cookie."""


class SessionManager(ABC):
    """Interface for creating and looking up sessions bound to exchanges."""

    @abstractmethod
    def create_session(
        self, exchange: 'HttpExchange', config: 'SessionConfig'
    ) -> Session:
        """Creates a new session and binds it to the exchange."""

    @abstractmethod
    def get_session(
        self, exchange: 'HttpExchange', config: 'SessionConfig'
    ) -> Session | None:
        """Returns the session bound to the exchange, if it is still alive."""

    @abstractmethod
    def get_session_by_id(self, session_id: str) -> Session | None:
        """Returns a live session by its identifier."""

    @abstractmethod
    def invalidate(self, session_id: str) -> None:
        """Destroys the session with the given identifier, if it exists."""
