"""
Rate limiting setup.

Uses slowapi's per-endpoint ``limit`` decorator rather than its
middleware: the check runs inside the decorated endpoint, so it does not
depend on the middleware resolving routes mounted through
``include_router``. A limiter is built per application so that test apps
and the served app never share counters.
"""

from typing import Awaitable, Callable

from slowapi import Limiter
from slowapi.util import get_remote_address
from starlette.requests import Request
from starlette.responses import Response

from ucwork.core.config import Settings

Endpoint = Callable[[Request], Awaitable[Response]]


def build_limiter(settings: Settings) -> Limiter:
    """Create the limiter for one application instance.

    Args:
        settings: Application settings holding the on/off switch.

    Returns:
        A slowapi Limiter keyed on the client address.
    """
    return Limiter(key_func=get_remote_address, enabled=settings.rate_limit_enabled)


def rate_limited(limiter: Limiter, limit_value: str, endpoint: Endpoint) -> Endpoint:
    """Apply ``limit_value`` per client to ``endpoint``.

    Over the limit, the endpoint raises RateLimitExceeded, answered by the
    application's exception handler. A disabled limiter passes every
    call through.
    """
    return limiter.limit(limit_value)(endpoint)
