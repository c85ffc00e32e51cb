import logging

from typing import Any

from starlette.datastructures import UploadFile

from webcontext.context import WebContext
from webcontext.server.exchange import HttpExchange
from webcontext.server.session.session_store import StarletteSessionStore
from webcontext.types import Cookie
from webcontext.utils.constants import (
    CONTENT_TYPE_HEADER,
    HTTPS_SCHEME,
    SESSION_CONFIG_ATTACHMENT_KEY,
    SESSION_MANAGER_ATTACHMENT_KEY,
)
from webcontext.utils.helpers import is_not_blank
from webcontext.utils.serialization import SerializationHelper


logger = logging.getLogger(__name__)

_SERIALIZATION_HELPER = SerializationHelper()


def _form_value(value: str | UploadFile) -> str:
    if isinstance(value, UploadFile):
        return value.filename or ''
    return value


class StarletteWebContext(WebContext):
    """The web context implementation for Starlette.

    Every operation is forwarded to the wrapped `HttpExchange`. Session
    operations go through a `StarletteSessionStore` built from the session
    manager and session config attached to the exchange.
    """

    def __init__(self, exchange: HttpExchange):
        self._exchange = exchange
        self._session_store = StarletteSessionStore(
            exchange.attachments.get(SESSION_MANAGER_ATTACHMENT_KEY),
            exchange.attachments.get(SESSION_CONFIG_ATTACHMENT_KEY),
        )

    @property
    def exchange(self) -> HttpExchange:
        return self._exchange

    @property
    def session_store(self) -> StarletteSessionStore:
        return self._session_store

    def get_request_parameter(self, name: str) -> str | None:
        values = self._exchange.query_parameters.get(name)
        if values:
            return values[0]
        data = self._exchange.form_data
        if data is not None and name in data:
            return _form_value(data.getlist(name)[0])
        return None

    def get_request_parameters(self) -> dict[str, list[str]]:
        params = dict(self._exchange.query_parameters)
        data = self._exchange.form_data
        if data is not None:
            for key in data.keys():
                params[key] = [_form_value(v) for v in data.getlist(key)]
        return params

    def get_request_header(self, name: str) -> str | None:
        return self._exchange.request_headers.get(name)

    def set_session_attribute(self, name: str, value: Any) -> None:
        self._session_store.set(self, name, value)

    def get_session_attribute(self, name: str) -> Any:
        return self._session_store.get(self, name)

    def get_request_method(self) -> str:
        return self._exchange.request_method

    def write_response_content(self, content: str) -> None:
        self._exchange.send(content)

    def set_response_status(self, code: int) -> None:
        self._exchange.response_status = code

    def set_response_header(self, name: str, value: str) -> None:
        self._exchange.response_headers[name] = value

    def get_server_name(self) -> str:
        return self._exchange.host_name

    def get_server_port(self) -> int:
        return self._exchange.host_port

    def get_scheme(self) -> str:
        return self._exchange.request_scheme

    def get_full_request_url(self) -> str:
        full = self._exchange.request_url
        query_string = self._exchange.query_string
        if is_not_blank(query_string):
            full = full + '?' + query_string
        return full

    def get_remote_addr(self) -> str | None:
        return self._exchange.source_address

    def add_response_cookie(self, cookie: Cookie) -> None:
        self._exchange.set_response_cookie(cookie.model_copy())

    def set_request_attribute(self, name: str, value: Any) -> None:
        result = None
        if value is not None:
            result = _SERIALIZATION_HELPER.serialize_to_base64(value)
        # Attributes never outlive the exchange.
        self._exchange.request_attributes[name] = result

    def get_request_attribute(self, name: str) -> Any:
        serialized = self._exchange.request_attributes.get(name)
        if serialized is not None:
            return _SERIALIZATION_HELPER.deserialize_from_base64(serialized)
        return None

    def get_path(self) -> str:
        return self._exchange.request_path

    def set_response_content_type(self, content: str) -> None:
        self._exchange.response_headers.append(CONTENT_TYPE_HEADER, content)

    def get_request_cookies(self) -> list[Cookie]:
        return [
            cookie.model_copy()
            for cookie in self._exchange.request_cookies.values()
        ]

    def get_session_identifier(self) -> Any:
        return self._session_store.get_or_create_session_id(self)

    def is_secure(self) -> bool:
        return self._exchange.request_scheme.lower() == HTTPS_SCHEME
