"""Recipe search endpoints.

Query and path values are handed to the service as raw strings; parsing and
validation happen there. The literal routes are declared before the
``/{recipe_id}`` catch-all so they are matched first.
"""

from __future__ import annotations

from typing import Annotated, Any

from fastapi import APIRouter, Depends, Query
from fastapi.responses import ORJSONResponse

from recipe_finder.api.dependencies import get_recipe_service
from recipe_finder.schemas.envelope import ResponseEnvelope
from recipe_finder.services.recipes import RecipeService


router = APIRouter(tags=["Recipes"])

_ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    400: {"model": ResponseEnvelope, "description": "Invalid query parameters"},
    500: {"model": ResponseEnvelope, "description": "Upstream API failure"},
}


@router.get(
    "/search",
    response_model=ResponseEnvelope,
    summary="Search recipes by ingredients",
    responses=_ERROR_RESPONSES,
)
async def search_recipes(
    service: Annotated[RecipeService, Depends(get_recipe_service)],
    ingredients: Annotated[
        str | None,
        Query(description="Comma-separated ingredients, e.g. chicken,rice"),
    ] = None,
    diets: Annotated[
        str | None,
        Query(description="Comma-separated diets, e.g. vegetarian,gluten free"),
    ] = None,
    number: Annotated[
        str | None,
        Query(description="Maximum number of results (default 10)"),
    ] = None,
) -> ORJSONResponse:
    """Search recipes containing the given ingredients.

    The upstream search payload is returned unchanged under ``data``.
    """
    envelope = await service.search_recipes(ingredients, diets, number)
    return ORJSONResponse(content=envelope.to_content())


@router.get(
    "/suggestions",
    response_model=ResponseEnvelope,
    summary="Popular recipe suggestions",
    responses=_ERROR_RESPONSES,
)
async def get_recipe_suggestions(
    service: Annotated[RecipeService, Depends(get_recipe_service)],
    diets: Annotated[
        str | None,
        Query(description="Comma-separated diets to filter by"),
    ] = None,
    number: Annotated[
        str | None,
        Query(description="Maximum number of results (default 10)"),
    ] = None,
) -> ORJSONResponse:
    """Return the most popular recipes, optionally filtered by diet."""
    envelope = await service.get_recipe_suggestions(diets, number)
    return ORJSONResponse(content=envelope.to_content())


@router.get(
    "/{recipe_id}",
    response_model=ResponseEnvelope,
    summary="Get recipe details",
    responses={
        **_ERROR_RESPONSES,
        404: {"model": ResponseEnvelope, "description": "Recipe not found"},
    },
)
async def get_recipe_by_id(
    recipe_id: str,
    service: Annotated[RecipeService, Depends(get_recipe_service)],
) -> ORJSONResponse:
    """Return full information, including nutrition, for one recipe."""
    envelope = await service.get_recipe_by_id(recipe_id)
    return ORJSONResponse(content=envelope.to_content())
