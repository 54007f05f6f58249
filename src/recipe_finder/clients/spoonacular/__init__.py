"""Spoonacular recipe API client package."""

from recipe_finder.clients.spoonacular.client import (
    SpoonacularClient,
    SpoonacularConfig,
)
from recipe_finder.clients.spoonacular.exceptions import (
    SpoonacularError,
    SpoonacularInvalidResponseError,
    SpoonacularNotFoundError,
    SpoonacularResponseError,
    SpoonacularTimeoutError,
    SpoonacularUnavailableError,
)


__all__ = [
    "SpoonacularClient",
    "SpoonacularConfig",
    "SpoonacularError",
    "SpoonacularInvalidResponseError",
    "SpoonacularNotFoundError",
    "SpoonacularResponseError",
    "SpoonacularTimeoutError",
    "SpoonacularUnavailableError",
]
