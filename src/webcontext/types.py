import logging

from http.cookies import SimpleCookie
from typing import TYPE_CHECKING

from pydantic import Field

from webcontext._base import WebContextBaseModel
from webcontext.utils.constants import (
    DEFAULT_MAX_INACTIVE_INTERVAL,
    DEFAULT_SESSION_COOKIE_NAME,
    SESSION_ID_ATTACHMENT_KEY,
)


if TYPE_CHECKING:
    from webcontext.server.exchange import HttpExchange


logger = logging.getLogger(__name__)

# Only used for `value_encode`, which quotes values the way browsers expect.
_VALUE_CODEC = SimpleCookie()


def _encode_value(value: str) -> str:
    if not value:
        return value
    return _VALUE_CODEC.value_encode(value)[1]


class Cookie(WebContextBaseModel):
    """A framework-agnostic HTTP cookie.

    `max_age` of -1 means the cookie carries no Max-Age attribute and lives
    for the browser session. Attributes set to None are left out of the
    `Set-Cookie` header; an empty string is written as an empty attribute.
    """

    name: str
    value: str
    comment: str | None = None
    domain: str | None = None
    path: str | None = None
    max_age: int = -1
    secure: bool = False
    http_only: bool = False

    def to_header(self) -> str:
        """Renders the cookie as a `Set-Cookie` header value."""
        parts = [f'{self.name}={_encode_value(self.value)}']
        if self.comment is not None:
            parts.append(f'Comment={_encode_value(self.comment)}')
        if self.domain is not None:
            parts.append(f'Domain={self.domain}')
        if self.path is not None:
            parts.append(f'Path={self.path}')
        if self.max_age != -1:
            parts.append(f'Max-Age={self.max_age}')
        if self.secure:
            parts.append('Secure')
        if self.http_only:
            parts.append('HttpOnly')
        return '; '.join(parts)


class SessionConfig(WebContextBaseModel):
    """Describes how a session identifier travels on an exchange.

    The identifier is carried in a cookie. Once a session is created or
    looked up during an exchange, the identifier is also remembered on the
    exchange so later lookups within the same request see it before the
    response cookie reaches the browser.
    """

    cookie_name: str = DEFAULT_SESSION_COOKIE_NAME
    path: str | None = '/'
    domain: str | None = None
    comment: str | None = None
    max_age: int = -1
    secure: bool = False
    http_only: bool = True
    max_inactive_interval: int = Field(
        default=DEFAULT_MAX_INACTIVE_INTERVAL, gt=0
    )

    def find_session_id(self, exchange: 'HttpExchange') -> str | None:
        """Returns the session id carried by the exchange, if any."""
        if SESSION_ID_ATTACHMENT_KEY in exchange.attachments:
            return exchange.attachments[SESSION_ID_ATTACHMENT_KEY]
        cookie = exchange.request_cookies.get(self.cookie_name)
        if cookie is None or not cookie.value:
            return None
        return cookie.value

    def set_session_id(self, exchange: 'HttpExchange', session_id: str) -> None:
        """Binds the session id to the exchange and sets the session cookie."""
        exchange.attachments[SESSION_ID_ATTACHMENT_KEY] = session_id
        exchange.set_response_cookie(
            self._session_cookie(session_id, self.max_age)
        )

    def clear_session(self, exchange: 'HttpExchange', session_id: str) -> None:
        """Expires the session cookie and forgets the bound session id."""
        logger.debug('Clearing session cookie for session %s', session_id)
        exchange.attachments[SESSION_ID_ATTACHMENT_KEY] = None
        exchange.set_response_cookie(self._session_cookie('', 0))

    def _session_cookie(self, value: str, max_age: int) -> Cookie:
        return Cookie(
            name=self.cookie_name,
            value=value,
            comment=self.comment,
            domain=self.domain,
            path=self.path,
            max_age=max_age,
            secure=self.secure,
            http_only=self.http_only,
        )
