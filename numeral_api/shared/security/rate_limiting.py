"""
Rate limiting configuration and setup.

Uses slowapi to enforce a per-client rate limit on the conversion
routes. Routes opt in with @limiter.limit(default_rate_limit), which
reads settings.rate_limit_default on every request.
"""

from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from starlette.requests import Request
from starlette.responses import JSONResponse

from numeral_api.core.config import settings

limiter = Limiter(key_func=get_remote_address)


def default_rate_limit() -> str:
    """Return the limit string applied to conversion routes, e.g. "120/minute"."""
    return settings.rate_limit_default


def rate_limit_exceeded_handler(
    _request: Request, exc: RateLimitExceeded
) -> JSONResponse:
    """Handle rate limit exceeded errors with the error envelope.

    Args:
        _request: The incoming HTTP request.
        exc: The rate limit exceeded exception.

    Returns:
        A 429 JSON response with a clear error message.
    """
    return JSONResponse(
        status_code=429,
        content={"status": "error", "message": f"Rate limit exceeded: {exc.detail}"},
    )
