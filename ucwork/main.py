"""
Application entry point.

Creates the FastAPI application and wires together:
- Store handles (built once here, injected into the router)
- Resource and health routers
- Error handlers (plain-text error responses)
- Security headers middleware and per-route rate limiting
- Logging configuration

The app is built through a factory so that importing this module never
opens store clients. Serve it with::

    uvicorn ucwork.main:create_app --factory

or through the ``ucwork`` console script, which honours ``PORT``.
No business logic belongs here.
"""

import logging
from typing import Optional

import uvicorn
from fastapi import FastAPI

from ucwork.core.config import DEFAULT_PORT, Settings
from ucwork.domain.resources.ports import MemberStore, OrderStore
from ucwork.interfaces.health import router as health_router
from ucwork.interfaces.resources.dependencies import (
    configure_cloud_sql,
    configure_datastore,
)
from ucwork.interfaces.resources.router import build_router
from ucwork.shared.errors.handlers import register_error_handlers
from ucwork.shared.logging import configure_logging
from ucwork.shared.security.headers import SecurityHeadersMiddleware
from ucwork.shared.security.rate_limiting import build_limiter

logger = logging.getLogger(__name__)


def create_app(
    member_store: Optional[MemberStore] = None,
    order_store: Optional[OrderStore] = None,
    settings: Optional[Settings] = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    This is the composition root of the application. Stores that are not
    passed in are built from settings.

    Args:
        member_store: Store for /members; defaults to Cloud Datastore.
        order_store: Store for /orders; defaults to Cloud SQL.
        settings: Application settings; read from the environment if omitted.

    Returns:
        A fully configured FastAPI application instance.
    """
    settings = settings or Settings()
    configure_logging(level=settings.log_level)

    if member_store is None:
        member_store = configure_datastore(settings)
    if order_store is None:
        order_store = configure_cloud_sql(settings)

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
    )

    # --- Rate Limiting (applied per resource route, see build_router) ---
    limiter = build_limiter(settings)
    app.state.limiter = limiter

    # --- Security Middleware ---
    app.add_middleware(SecurityHeadersMiddleware)

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers ---
    app.include_router(health_router)
    app.include_router(
        build_router(
            member_store,
            order_store,
            limiter=limiter,
            rate_limit=settings.rate_limit_default,
        )
    )

    return app


def run() -> None:
    """Serve the application on ``PORT`` (default 8080)."""
    settings = Settings()
    configure_logging(level=settings.log_level)

    if settings.port is None:
        logger.info("Defaulting to port %d", DEFAULT_PORT)
    port = settings.get_port()
    logger.info("Listening on port %d", port)

    uvicorn.run(create_app(settings=settings), host="0.0.0.0", port=port, log_config=None)


if __name__ == "__main__":
    run()
