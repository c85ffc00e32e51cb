"""A framework-agnostic web context for authentication code, backed by Starlette."""

from webcontext.context import WebContext
from webcontext.types import Cookie, SessionConfig


__all__ = ['Cookie', 'SessionConfig', 'WebContext']
