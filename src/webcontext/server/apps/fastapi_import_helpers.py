"""Helper functions for handling optional FastAPI package imports."""

try:
    from fastapi import Depends, Request
except ImportError as e:
    raise ImportError(
        'The webcontext FastAPI helpers require the FastAPI package, which '
        'is an optional dependency. Install it with '
        "'pip install webcontext[fastapi]'"
    ) from e


__all__ = ['Depends', 'Request']
