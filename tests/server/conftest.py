from collections.abc import Callable
from typing import Any

import pytest

from starlette.requests import Request


def build_request(
    method: str = 'GET',
    path: str = '/',
    query_string: str = '',
    headers: dict[str, str] | None = None,
    scheme: str = 'http',
    server: tuple[str, int] = ('example.com', 80),
    client: tuple[str, int] | None = ('10.0.0.1', 54321),
    body: bytes = b'',
) -> Request:
    scope: dict[str, Any] = {
        'type': 'http',
        'http_version': '1.1',
        'method': method,
        'scheme': scheme,
        'path': path,
        'raw_path': path.encode('latin-1'),
        'root_path': '',
        'query_string': query_string.encode('latin-1'),
        'headers': [
            (name.lower().encode('latin-1'), value.encode('latin-1'))
            for name, value in (headers or {}).items()
        ],
        'server': server,
        'client': client,
    }
    sent = False

    async def receive() -> dict[str, Any]:
        nonlocal sent
        if sent:
            return {'type': 'http.disconnect'}
        sent = True
        return {'type': 'http.request', 'body': body, 'more_body': False}

    return Request(scope, receive)


@pytest.fixture
def make_request() -> Callable[..., Request]:
    return build_request
