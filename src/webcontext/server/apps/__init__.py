"""Integration of the web context with Starlette and FastAPI applications."""

from webcontext.server.apps.builder import (
    DefaultWebContextBuilder,
    WebContextBuilder,
)


__all__ = [
    'DefaultWebContextBuilder',
    'WebContextBuilder',
]
