"""Application lifespan event handlers.

Startup configures logging and creates the Spoonacular client and the
recipe service, stored on ``app.state``. Shutdown closes the client and
flushes pending spans.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from recipe_finder.clients.spoonacular import SpoonacularClient, SpoonacularConfig
from recipe_finder.core.config import Settings, get_settings
from recipe_finder.observability.logging import get_logger, setup_logging
from recipe_finder.observability.tracing import shutdown_tracing
from recipe_finder.services.recipes import RecipeService


if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    from fastapi import FastAPI


logger = get_logger(__name__)


def _get_app_settings(app: FastAPI) -> Settings:
    settings = getattr(app.state, "settings", None)
    return settings if settings is not None else get_settings()


async def _startup(app: FastAPI, settings: Settings) -> None:
    """Initialize application services.

    Args:
        app: The FastAPI application instance.
        settings: Application settings.
    """
    setup_logging(
        log_level=settings.logging.level,
        log_format=settings.logging.format,
        is_development=settings.is_development,
    )

    logger.info(
        "Starting application",
        app_name=settings.app.name,
        environment=settings.APP_ENV,
        debug=settings.app.debug,
    )

    if not settings.has_spoonacular_api_key:
        logger.warning(
            "SPOONACULAR_API_KEY is not set - upstream calls will be rejected"
        )

    await _init_recipe_service(app, settings)

    logger.info("Application startup complete")


async def _init_recipe_service(app: FastAPI, settings: Settings) -> None:
    """Create the upstream client and the service built on it."""
    client = SpoonacularClient(SpoonacularConfig.from_settings(settings))
    await client.initialize()

    app.state.spoonacular_client = client
    app.state.recipe_service = RecipeService(client)
    logger.info("RecipeService initialized")


async def _shutdown(app: FastAPI) -> None:
    """Shutdown application services.

    Args:
        app: The FastAPI application instance.
    """
    logger.info("Shutting down application")

    client: SpoonacularClient | None = getattr(app.state, "spoonacular_client", None)
    if client is not None:
        await client.shutdown()
    app.state.spoonacular_client = None
    app.state.recipe_service = None

    shutdown_tracing()

    logger.info("Application shutdown complete")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Manage application lifespan events.

    Args:
        app: The FastAPI application instance.

    Yields:
        None - control returns to the application to handle requests.
    """
    await _startup(app, _get_app_settings(app))
    yield
    await _shutdown(app)
