"""FastAPI dependencies for service access.

Services are created during application startup and stored in app.state.
"""

from __future__ import annotations

from fastapi import Request

from recipe_finder.core.config import Settings, get_settings
from recipe_finder.core.exceptions import ServiceUnavailableException
from recipe_finder.services.recipes import RecipeService


async def get_app_settings(request: Request) -> Settings:
    """Get the settings the application was created with."""
    settings: Settings | None = getattr(request.app.state, "settings", None)
    return settings if settings is not None else get_settings()


async def get_recipe_service(request: Request) -> RecipeService:
    """Get the recipe service from app state.

    Args:
        request: The incoming request.

    Returns:
        Initialized RecipeService.

    Raises:
        ServiceUnavailableException: If the service is not initialized.
    """
    service: RecipeService | None = getattr(request.app.state, "recipe_service", None)
    if service is None:
        raise ServiceUnavailableException("Recipe service not available")
    return service
