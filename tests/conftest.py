"""Shared test fixtures for the Recipe Finder tests.

Provides sample upstream payloads, settings factories, a mocked recipe
service and an application wired to it.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING, Any
from unittest.mock import AsyncMock, MagicMock

import pytest


# Select the test YAML overlay before any settings are loaded
os.environ.setdefault("APP_ENV", "test")

from recipe_finder.core.config import Settings  # noqa: E402
from recipe_finder.core.config.settings import (  # noqa: E402
    MetricsSettings,
    ObservabilitySettings,
    TracingSettings,
)
from recipe_finder.factory import create_app  # noqa: E402
from recipe_finder.schemas.envelope import ResponseEnvelope  # noqa: E402
from recipe_finder.services.recipes import RecipeService  # noqa: E402


if TYPE_CHECKING:
    from collections.abc import Callable

    from fastapi import FastAPI


SPOONACULAR_BASE_URL = "https://api.spoonacular.com"
TEST_API_KEY = "test-api-key"


@pytest.fixture
def make_settings() -> Callable[..., Settings]:
    """Build settings for a given environment with observability switched off."""

    def _make(app_env: str = "test", **overrides: Any) -> Settings:
        values: dict[str, Any] = {
            "APP_ENV": app_env,
            "SPOONACULAR_API_KEY": TEST_API_KEY,
            "observability": ObservabilitySettings(
                tracing=TracingSettings(enabled=False),
                metrics=MetricsSettings(enabled=False),
            ),
        }
        values.update(overrides)
        return Settings(**values)

    return _make


@pytest.fixture
def test_settings(make_settings: Callable[..., Settings]) -> Settings:
    """Settings for the test environment."""
    return make_settings("test")


@pytest.fixture
def sample_search_payload() -> dict[str, Any]:
    """Upstream complex search response with two recipes."""
    return {
        "results": [
            {
                "id": 715538,
                "title": "Bruschetta Style Pork & Pasta",
                "image": "https://img.spoonacular.com/recipes/715538-312x231.jpg",
                "imageType": "jpg",
                "vegetarian": False,
                "vegan": False,
                "glutenFree": False,
                "dairyFree": True,
                "readyInMinutes": 35,
                "servings": 5,
            },
            {
                "id": 716429,
                "title": "Pasta with Garlic, Scallions & Cauliflower",
                "image": None,
                "vegetarian": True,
                "vegan": False,
                "glutenFree": False,
                "dairyFree": False,
                "readyInMinutes": 45,
            },
        ],
        "offset": 0,
        "number": 2,
        "totalResults": 86,
    }


@pytest.fixture
def sample_recipe_payload() -> dict[str, Any]:
    """Upstream recipe information response."""
    return {
        "id": 716429,
        "title": "Pasta with Garlic, Scallions & Cauliflower",
        "image": "https://img.spoonacular.com/recipes/716429-556x370.jpg",
        "servings": 2,
        "readyInMinutes": 45,
        "vegetarian": True,
        "vegan": False,
        "glutenFree": False,
        "dairyFree": False,
        "diets": ["lacto ovo vegetarian"],
        "sourceUrl": "https://fullbellysisters.blogspot.com/2012/06/pasta.html",
        "extendedIngredients": [
            {"id": 1001, "name": "butter", "original": "1 tbsp butter"},
            {"id": 10011135, "name": "cauliflower", "original": "2 cups cauliflower florets"},
            {"id": 11291, "name": "scallions", "original": "6 scallions, chopped"},
        ],
        "instructions": "<ol><li>Cook the pasta.</li><li>Toss with garlic.</li></ol>",
        "analyzedInstructions": [
            {
                "name": "",
                "steps": [
                    {"number": 1, "step": "Cook the pasta."},
                    {"number": 2, "step": "Toss with garlic."},
                ],
            }
        ],
        "nutrition": {"nutrients": [{"name": "Calories", "amount": 584.0}]},
    }


@pytest.fixture
def mock_recipe_service(
    sample_search_payload: dict[str, Any],
    sample_recipe_payload: dict[str, Any],
) -> MagicMock:
    """RecipeService double returning sample payloads."""
    service = MagicMock(spec=RecipeService)
    service.search_recipes = AsyncMock(
        return_value=ResponseEnvelope.ok(sample_search_payload)
    )
    service.get_recipe_suggestions = AsyncMock(
        return_value=ResponseEnvelope.ok(sample_search_payload)
    )
    service.get_recipe_by_id = AsyncMock(
        return_value=ResponseEnvelope.ok(sample_recipe_payload)
    )
    return service


@pytest.fixture
def make_app(mock_recipe_service: MagicMock) -> Callable[[Settings], FastAPI]:
    """Build an app whose recipe service is the mocked one.

    The lifespan is not run; app state is populated directly.
    """

    def _make(settings: Settings) -> FastAPI:
        app = create_app(settings)
        client = MagicMock()
        client.is_initialized = True
        app.state.spoonacular_client = client
        app.state.recipe_service = mock_recipe_service
        return app

    return _make


@pytest.fixture
def app(make_app: Callable[[Settings], FastAPI], test_settings: Settings) -> FastAPI:
    """Application in the test environment with a mocked recipe service."""
    return make_app(test_settings)
