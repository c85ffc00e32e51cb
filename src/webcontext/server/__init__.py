"""Server-side components binding the web context to Starlette."""

from webcontext.server.exchange import HttpExchange
from webcontext.server.starlette_context import StarletteWebContext


__all__ = ['HttpExchange', 'StarletteWebContext']
