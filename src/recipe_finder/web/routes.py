"""Server-rendered HTML pages.

The pages reuse ``RecipeService`` and read the upstream payloads through
the read-only recipe schemas. Failures are shown inline instead of being
rendered as JSON envelopes.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Annotated

from fastapi import APIRouter, Depends, Query, Request, status
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates
from pydantic import ValidationError

from recipe_finder.api.dependencies import get_recipe_service
from recipe_finder.clients.spoonacular.client import DEFAULT_RESULT_COUNT
from recipe_finder.clients.spoonacular.exceptions import SpoonacularError
from recipe_finder.core.exceptions import (
    UPSTREAM_ERROR_MESSAGE,
    AppException,
    NotFoundException,
)
from recipe_finder.observability.logging import get_logger
from recipe_finder.schemas.recipe import RecipeDetail, RecipeSearchResults, RecipeSummary
from recipe_finder.services.recipes import RecipeService


if TYPE_CHECKING:
    from starlette.responses import Response


logger = get_logger(__name__)

WEB_DIR = Path(__file__).resolve().parent
TEMPLATES_DIR = WEB_DIR / "templates"
STATIC_DIR = WEB_DIR / "static"

PLACEHOLDER_IMAGE = "https://via.placeholder.com/300x200?text=No+Image+Available"
NO_INSTRUCTIONS_MESSAGE = (
    "No instructions available. You can visit the original recipe for more details."
)

# Spoonacular diet names and their labels
DIET_OPTIONS: tuple[tuple[str, str], ...] = (
    ("vegetarian", "Vegetarian"),
    ("vegan", "Vegan"),
    ("gluten free", "Gluten Free"),
    ("ketogenic", "Ketogenic"),
    ("paleo", "Paleo"),
    ("pescetarian", "Pescetarian"),
)
RESULT_COUNT_OPTIONS: tuple[int, ...] = (5, 10, 15, 20)

templates = Jinja2Templates(directory=TEMPLATES_DIR)
templates.env.globals.update(
    placeholder_image=PLACEHOLDER_IMAGE,
    no_instructions_message=NO_INSTRUCTIONS_MESSAGE,
    diet_options=DIET_OPTIONS,
    result_count_options=RESULT_COUNT_OPTIONS,
)

router = APIRouter(include_in_schema=False)


def _failure(exc: AppException | SpoonacularError) -> tuple[int, str]:
    """Status code and user-facing message for a failed service call."""
    if isinstance(exc, AppException):
        return exc.status_code, exc.message
    return exc.status_code or status.HTTP_500_INTERNAL_SERVER_ERROR, UPSTREAM_ERROR_MESSAGE


async def _load_suggestions(service: RecipeService) -> list[RecipeSummary]:
    """Popular recipes for the landing page, empty when unavailable."""
    try:
        envelope = await service.get_recipe_suggestions()
        return RecipeSearchResults.model_validate(envelope.data).results
    except (AppException, SpoonacularError, ValidationError) as e:
        logger.warning("Suggestions unavailable", error=str(e))
        return []


@router.get("/", response_class=HTMLResponse)
async def index(
    request: Request,
    service: Annotated[RecipeService, Depends(get_recipe_service)],
) -> Response:
    """Search form and popular suggestions."""
    suggestions = await _load_suggestions(service)
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "suggestions": suggestions,
            "ingredients": "",
            "selected_diets": [],
            "number": DEFAULT_RESULT_COUNT,
        },
    )


@router.get("/search", response_class=HTMLResponse)
async def search_page(
    request: Request,
    service: Annotated[RecipeService, Depends(get_recipe_service)],
    ingredients: str | None = None,
    diet: Annotated[list[str] | None, Query()] = None,
    number: str | None = None,
) -> Response:
    """Search results as recipe cards."""
    selected_diets = [d for d in (diet or []) if d]
    context: dict[str, object] = {
        "ingredients": ingredients or "",
        "selected_diets": selected_diets,
        "number": number or DEFAULT_RESULT_COUNT,
        "results": [],
        "error_message": None,
    }
    status_code = status.HTTP_200_OK

    try:
        envelope = await service.search_recipes(
            ingredients,
            ",".join(selected_diets),
            number,
        )
        context["results"] = RecipeSearchResults.model_validate(envelope.data).results
    except (AppException, SpoonacularError) as e:
        status_code, context["error_message"] = _failure(e)
    except ValidationError as e:
        logger.warning("Unexpected search payload", error=str(e))
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
        context["error_message"] = UPSTREAM_ERROR_MESSAGE

    return templates.TemplateResponse(
        request,
        "results.html",
        context,
        status_code=status_code,
    )


@router.get("/recipes/{recipe_id}", response_class=HTMLResponse)
async def recipe_page(
    request: Request,
    recipe_id: str,
    service: Annotated[RecipeService, Depends(get_recipe_service)],
) -> Response:
    """Full recipe details."""
    try:
        envelope = await service.get_recipe_by_id(recipe_id)
        recipe = RecipeDetail.model_validate(envelope.data)
    except NotFoundException as e:
        return templates.TemplateResponse(
            request,
            "not_found.html",
            {"message": e.message},
            status_code=status.HTTP_404_NOT_FOUND,
        )
    except (AppException, SpoonacularError) as e:
        status_code, message = _failure(e)
        return templates.TemplateResponse(
            request,
            "error.html",
            {"message": message},
            status_code=status_code,
        )
    except ValidationError as e:
        logger.warning("Unexpected recipe payload", recipe_id=recipe_id, error=str(e))
        return templates.TemplateResponse(
            request,
            "error.html",
            {"message": UPSTREAM_ERROR_MESSAGE},
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    return templates.TemplateResponse(request, "recipe_detail.html", {"recipe": recipe})
