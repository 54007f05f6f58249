"""Application factory for creating FastAPI instances.

This module provides the create_app factory function that:
- Configures the FastAPI application from settings
- Registers exception handlers and the middleware stack
- Mounts the JSON API, health probes and web pages
- Configures metrics and tracing
"""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import ORJSONResponse
from fastapi.staticfiles import StaticFiles

from recipe_finder.api.v1.endpoints import health
from recipe_finder.api.v1.router import router as api_router
from recipe_finder.core.config import Settings, get_settings
from recipe_finder.core.events import lifespan
from recipe_finder.core.exceptions import setup_exception_handlers
from recipe_finder.core.middleware import (
    LoggingMiddleware,
    RequestIDMiddleware,
    SecurityHeadersMiddleware,
    TimingMiddleware,
)
from recipe_finder.observability.metrics import setup_metrics
from recipe_finder.observability.tracing import setup_tracing
from recipe_finder.web import routes as web


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure a FastAPI application instance.

    Args:
        settings: Optional settings override. If not provided, uses get_settings().

    Returns:
        Configured FastAPI application instance.
    """
    if settings is None:
        settings = get_settings()

    app = FastAPI(
        title=settings.app.name,
        version=settings.app.version,
        description="Search recipes by ingredients and dietary restrictions",
        lifespan=lifespan,
        default_response_class=ORJSONResponse,
        docs_url="/docs" if settings.is_development else None,
        redoc_url="/redoc" if settings.is_development else None,
        openapi_url="/openapi.json" if settings.is_development else None,
        debug=settings.app.debug,
    )

    # Read by the lifespan, dependencies and exception handlers
    app.state.settings = settings

    setup_exception_handlers(app)
    _setup_middleware(app, settings)
    _setup_routers(app, settings)

    # After routes are mounted
    setup_tracing(app, settings)
    setup_metrics(app, settings)

    return app


def _setup_middleware(app: FastAPI, settings: Settings) -> None:
    """Configure middleware stack.

    Middleware is executed in reverse order of addition. Order from the
    request perspective:
    1. SecurityHeadersMiddleware
    2. RequestIDMiddleware
    3. TimingMiddleware
    4. LoggingMiddleware
    5. GZipMiddleware
    6. CORSMiddleware
    """
    if settings.api.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.api.cors_origins,
            allow_methods=["GET"],
            allow_headers=["*"],
            expose_headers=["X-Request-ID", "X-Process-Time"],
        )

    app.add_middleware(GZipMiddleware, minimum_size=1000)
    app.add_middleware(LoggingMiddleware)
    app.add_middleware(TimingMiddleware)
    app.add_middleware(RequestIDMiddleware)
    app.add_middleware(
        SecurityHeadersMiddleware,
        no_store_prefix=settings.api.prefix,
    )


def _setup_routers(app: FastAPI, settings: Settings) -> None:
    """Mount the JSON API, health probes, web pages and static files.

    Args:
        app: FastAPI application instance.
        settings: Application settings.
    """
    app.include_router(api_router, prefix=settings.api.prefix)

    # Probes live at the root for load balancers
    app.include_router(health.router)

    app.include_router(web.router)
    app.mount("/static", StaticFiles(directory=web.STATIC_DIR), name="static")
