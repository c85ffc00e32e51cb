"""Exceptions raised by the web context package."""


class WebContextError(Exception):
    """Base exception for web context errors."""


class SessionUnavailableError(WebContextError):
    """Raised when a session is required but no session manager is attached."""

    def __init__(self, message: str | None = None):
        super().__init__(
            message
            or 'No session manager is attached to the exchange; '
            'configure one on the web context builder.'
        )


class DeserializationError(WebContextError):
    """Raised when a base64 payload cannot be turned back into an object."""
