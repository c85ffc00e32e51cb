"""Defines the HttpExchange class."""

import logging

from typing import Any

from starlette.datastructures import FormData, MutableHeaders
from starlette.requests import Request
from starlette.responses import Response

from webcontext.types import Cookie
from webcontext.utils.constants import (
    DEFAULT_PORTS,
    FORM_CONTENT_TYPES,
    SET_COOKIE_HEADER,
)


logger = logging.getLogger(__name__)


class HttpExchange:
    """One in-flight HTTP request together with the response being built.

    Starlette keeps requests and responses apart: a handler reads a
    `Request` and returns a `Response`. The exchange joins the two so that
    code written against a mutable request/response pair can record status,
    headers, cookies and body as it goes, and `to_response` renders the
    result once handling is done.

    The wrapped request is borrowed from the hosting application and is only
    valid for the duration of the call being processed.
    """

    def __init__(self, request: Request):
        self._request = request
        self.attachments: dict[str, Any] = {}
        self.form_data: FormData | None = None
        self.request_cookies: dict[str, Cookie] = {
            name: Cookie(name=name, value=value)
            for name, value in request.cookies.items()
        }
        # Text-encoded per-request values, keyed by name.
        self.request_attributes: dict[str, str | None] = {}
        self.response_status = 200
        self.response_headers = MutableHeaders()
        self.response_cookies: dict[str, Cookie] = {}
        self.response_body: str | None = None
        self.is_response_committed = False

    @property
    def request(self) -> Request:
        """The Starlette request this exchange wraps."""
        return self._request

    @property
    def query_parameters(self) -> dict[str, list[str]]:
        """Query parameters as name to values, in order of appearance."""
        params: dict[str, list[str]] = {}
        for name, value in self._request.query_params.multi_items():
            params.setdefault(name, []).append(value)
        return params

    @property
    def query_string(self) -> str:
        return self._request.url.query

    @property
    def request_headers(self):
        return self._request.headers

    @property
    def request_method(self) -> str:
        return self._request.method

    @property
    def request_path(self) -> str:
        return self._request.url.path

    @property
    def request_scheme(self) -> str:
        """The scheme as reported by the server, with its original casing."""
        return self._request.scope.get('scheme', 'http')

    @property
    def host_name(self) -> str:
        return self._request.url.hostname or ''

    @property
    def host_port(self) -> int:
        """The port from the Host header, else the scheme's default port."""
        port = self._request.url.port
        if port is not None:
            return port
        return DEFAULT_PORTS.get(self.request_scheme.lower(), -1)

    @property
    def request_url(self) -> str:
        """The absolute request URL without its query string."""
        return str(self._request.url.replace(query='', fragment=''))

    @property
    def source_address(self) -> str | None:
        client = self._request.client
        if client is None:
            return None
        return client.host

    def has_form_body(self) -> bool:
        content_type = self._request.headers.get('content-type', '')
        media_type = content_type.split(';', 1)[0].strip().lower()
        return media_type in FORM_CONTENT_TYPES

    async def parse_form(self) -> FormData | None:
        """Parses a form body and attaches the result to the exchange.

        Requests without a form content type are left untouched and keep
        `form_data` set to None.
        """
        if self.form_data is None and self.has_form_body():
            self.form_data = await self._request.form()
            logger.debug(
                'Parsed %d form field(s) for %s',
                len(self.form_data),
                self.request_path,
            )
        return self.form_data

    def set_response_cookie(self, cookie: Cookie) -> None:
        """Adds a cookie to the response, replacing one with the same name."""
        self.response_cookies[cookie.name] = cookie

    def send(self, content: str) -> None:
        """Sets the full response body and marks the response committed."""
        if self.is_response_committed:
            logger.warning(
                'Response body for %s was already sent; replacing it',
                self.request_path,
            )
        self.response_body = content
        self.is_response_committed = True

    def to_response(self) -> Response:
        """Renders the accumulated response state as a Starlette response."""
        response = Response(
            content=self.response_body, status_code=self.response_status
        )
        response.raw_headers.extend(self.response_headers.raw)
        for cookie in self.response_cookies.values():
            response.raw_headers.append(
                (
                    SET_COOKIE_HEADER.encode('latin-1'),
                    cookie.to_header().encode('latin-1'),
                )
            )
        return response
