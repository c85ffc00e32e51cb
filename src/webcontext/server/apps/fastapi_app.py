import logging

from collections.abc import Awaitable, Callable
from typing import Any

from webcontext.context import WebContext
from webcontext.server.apps.builder import (
    DefaultWebContextBuilder,
    WebContextBuilder,
)
from webcontext.server.apps.fastapi_import_helpers import Depends, Request


logger = logging.getLogger(__name__)


def web_context_dependency(
    builder: WebContextBuilder | None = None,
) -> Callable[[Request], Awaitable[WebContext]]:
    """Returns a FastAPI dependency that builds a WebContext per request.

    FastAPI caches dependency results per request, so every dependant of the
    returned callable within one request shares the same context and the
    same response state.

    Args:
        builder: The builder used to construct the context. Defaults to a
          `DefaultWebContextBuilder` without a session manager.
    """
    context_builder = builder or DefaultWebContextBuilder()

    async def get_web_context(request: Request) -> WebContext:
        context = await context_builder.build(request)
        logger.debug(
            'Built %s for %s %s',
            type(context).__name__,
            request.method,
            request.url.path,
        )
        return context

    return get_web_context


def WebContextDepends(builder: WebContextBuilder | None = None) -> Any:  # noqa: N802
    """Shorthand for `Depends(web_context_dependency(builder))`."""
    return Depends(web_context_dependency(builder))
