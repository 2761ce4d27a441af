"""
Secure HTTP headers middleware.

Adds security-related headers to every response, error responses
included. Headers a handler already set are left alone.
"""

from typing import Mapping, Optional

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

SECURE_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "no-referrer",
    "Content-Security-Policy": "default-src 'none'; frame-ancestors 'none'",
    "Cache-Control": "no-store",
}


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Middleware that adds secure HTTP headers to every response."""

    def __init__(
        self, app: ASGIApp, headers: Optional[Mapping[str, str]] = None
    ) -> None:
        super().__init__(app)
        self._headers = dict(SECURE_HEADERS if headers is None else headers)

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        response = await call_next(request)
        for header_name, header_value in self._headers.items():
            response.headers.setdefault(header_name, header_value)
        return response
