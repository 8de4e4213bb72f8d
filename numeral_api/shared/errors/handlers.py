"""
Centralized error handlers for FastAPI.

Maps conversion domain errors and framework errors to HTTP responses.
No stack traces or internal details are exposed to clients.
Every error response uses the {"status": "error", "message": ...} envelope.
"""

import logging
from collections.abc import Sequence
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from numeral_api.domain.conversion.errors import (
    MissingFieldError,
    NumeralDomainError,
)

logger = logging.getLogger(__name__)

HTTP_400 = 400
HTTP_404 = 404
HTTP_405 = 405
HTTP_500 = 500


def _error_response(
    status_code: int,
    message: str,
    headers: dict[str, str] | None = None,
    **extra: Any,
) -> JSONResponse:
    """Build a consistent JSON error response."""
    body: dict[str, Any] = {"status": "error", "message": message}
    body.update(extra)
    return JSONResponse(status_code=status_code, content=body, headers=headers)


def _allowed_methods(exc: StarletteHTTPException) -> list[str]:
    allow = (exc.headers or {}).get("Allow", "")
    methods = {method.strip() for method in allow.split(",") if method.strip()}
    methods.discard("HEAD")
    return sorted(methods)


def register_error_handlers(
    app: FastAPI, available_endpoints: Sequence[str] = ()
) -> None:
    """Register all error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
        available_endpoints: Paths advertised in 404 responses.
    """

    @app.exception_handler(MissingFieldError)
    async def handle_missing_field(
        _request: Request, exc: MissingFieldError
    ) -> JSONResponse:
        """Handle absent request fields, pointing at a valid example."""
        logger.warning("Missing field: %s", exc.field)
        return _error_response(HTTP_400, exc.message, example=exc.example)

    @app.exception_handler(NumeralDomainError)
    async def handle_numeral_domain(
        _request: Request, exc: NumeralDomainError
    ) -> JSONResponse:
        """Handle every conversion failure, echoing the offending input."""
        logger.warning("%s: %s", type(exc).__name__, exc.message)
        return _error_response(HTTP_400, exc.message, input=exc.value)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(
        _request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Handle malformed request bodies."""
        errors = exc.errors()
        detail = errors[0].get("msg", "invalid request") if errors else "invalid request"
        logger.warning("Request validation failed: %s", detail)
        return _error_response(HTTP_400, f"Invalid request: {detail}")

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        """Handle unknown routes and unsupported methods."""
        if exc.status_code == HTTP_404:
            return _error_response(
                HTTP_404,
                "Endpoint not found",
                path=request.url.path,
                availableEndpoints=list(available_endpoints),
            )
        if exc.status_code == HTTP_405:
            methods = _allowed_methods(exc)
            message = "Method not allowed"
            if methods:
                message = f"{message}. Use {', '.join(methods)}"
            return _error_response(HTTP_405, message, headers=exc.headers)
        return _error_response(exc.status_code, str(exc.detail), headers=exc.headers)

    @app.exception_handler(Exception)
    async def handle_unexpected(
        _request: Request, exc: Exception
    ) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return _error_response(HTTP_500, "Internal server error")
