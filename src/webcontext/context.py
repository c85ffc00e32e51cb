"""Defines the WebContext interface."""

from abc import ABC, abstractmethod
from typing import Any

from webcontext.types import Cookie


class WebContext(ABC):
    """A framework-agnostic view over one HTTP request/response exchange.

    Authentication code talks to this interface instead of a specific web
    framework. Accessors return None (or an empty collection) when the
    requested data is absent rather than raising.
    """

    @abstractmethod
    def get_request_parameter(self, name: str) -> str | None:
        """Returns the first value of a query or form parameter."""

    @abstractmethod
    def get_request_parameters(self) -> dict[str, list[str]]:
        """Returns all query and form parameters, form values taking precedence."""

    @abstractmethod
    def get_request_header(self, name: str) -> str | None:
        """Returns the first value of a request header."""

    @abstractmethod
    def set_session_attribute(self, name: str, value: Any) -> None:
        """Stores a value in the session, creating the session if needed."""

    @abstractmethod
    def get_session_attribute(self, name: str) -> Any:
        """Returns a value from the session, or None."""

    @abstractmethod
    def get_request_method(self) -> str:
        """Returns the HTTP method of the request."""

    @abstractmethod
    def write_response_content(self, content: str) -> None:
        """Sends the given text as the full response body."""

    @abstractmethod
    def set_response_status(self, code: int) -> None:
        """Sets the response status code."""

    @abstractmethod
    def set_response_header(self, name: str, value: str) -> None:
        """Sets a response header, replacing existing values."""

    @abstractmethod
    def get_server_name(self) -> str:
        """Returns the host name the request was sent to."""

    @abstractmethod
    def get_server_port(self) -> int:
        """Returns the port the request was sent to."""

    @abstractmethod
    def get_scheme(self) -> str:
        """Returns the request scheme, e.g. `http`."""

    @abstractmethod
    def get_full_request_url(self) -> str:
        """Returns the request URL including the query string, if any."""

    @abstractmethod
    def get_remote_addr(self) -> str | None:
        """Returns the IP address of the client."""

    @abstractmethod
    def add_response_cookie(self, cookie: Cookie) -> None:
        """Adds a cookie to the response."""

    @abstractmethod
    def set_request_attribute(self, name: str, value: Any) -> None:
        """Stores a value visible for the rest of this exchange."""

    @abstractmethod
    def get_request_attribute(self, name: str) -> Any:
        """Returns a value stored with `set_request_attribute`, or None."""

    @abstractmethod
    def get_path(self) -> str:
        """Returns the request path without the query string."""

    @abstractmethod
    def set_response_content_type(self, content: str) -> None:
        """Adds a Content-Type header to the response."""

    @abstractmethod
    def get_request_cookies(self) -> list[Cookie]:
        """Returns the cookies sent with the request."""

    @abstractmethod
    def get_session_identifier(self) -> Any:
        """Returns the session identifier, creating a session if needed."""

    @abstractmethod
    def is_secure(self) -> bool:
        """Returns whether the request was made over HTTPS."""
