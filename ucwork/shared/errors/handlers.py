"""
Centralized exception handlers for FastAPI.

Fallible handlers answer their own failures through the dispatch
adapter. These handlers cover everything that never reaches a
fallible handler (unrouted paths, wrong verbs, rate limits) and any
exception a handler failed to turn into an envelope.
All responses are plain text. No stack traces or internal details
are exposed to clients.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException

from ucwork.shared.errors.envelope import HTTP_500

logger = logging.getLogger(__name__)

HTTP_429 = 429


def register_error_handlers(app: FastAPI) -> None:
    """Register the application-wide exception handlers.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(
        _request: Request, exc: StarletteHTTPException
    ) -> PlainTextResponse:
        """Answer routing errors (404, 405) in plain text."""
        logger.debug("HTTP %d: %s", exc.status_code, exc.detail)
        return PlainTextResponse(
            str(exc.detail), status_code=exc.status_code, headers=exc.headers
        )

    @app.exception_handler(RateLimitExceeded)
    async def handle_rate_limit(
        request: Request, exc: RateLimitExceeded
    ) -> PlainTextResponse:
        """Answer requests over the configured rate limit."""
        logger.warning("Rate limit exceeded for %s: %s", request.url.path, exc.detail)
        return PlainTextResponse(
            f"Rate limit exceeded: {exc.detail}", status_code=HTTP_429
        )

    @app.exception_handler(Exception)
    async def handle_unexpected(
        _request: Request, exc: Exception
    ) -> PlainTextResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return PlainTextResponse("Internal server error", status_code=HTTP_500)
