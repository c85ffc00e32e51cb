"""Utility functions for the web context package."""

from webcontext.utils.constants import (
    CONTENT_TYPE_HEADER,
    DEFAULT_SESSION_COOKIE_NAME,
    HTTPS_SCHEME,
)
from webcontext.utils.helpers import is_blank, is_not_blank
from webcontext.utils.serialization import SerializationHelper


__all__ = [
    'CONTENT_TYPE_HEADER',
    'DEFAULT_SESSION_COOKIE_NAME',
    'HTTPS_SCHEME',
    'SerializationHelper',
    'is_blank',
    'is_not_blank',
]
