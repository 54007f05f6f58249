"""Recipe search service.

Turns raw query-string values into upstream calls and wraps the upstream
JSON, unchanged, into a success envelope. Validation failures and unknown
recipes are resolved here; every other upstream failure propagates to the
application's exception handlers.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from recipe_finder.clients.spoonacular.exceptions import SpoonacularNotFoundError
from recipe_finder.core.exceptions import BadRequestException, NotFoundException
from recipe_finder.observability.logging import get_logger
from recipe_finder.observability.tracing import add_span_attributes
from recipe_finder.schemas.envelope import ResponseEnvelope
from recipe_finder.services.recipes.models import SearchQuery, SuggestionQuery
from recipe_finder.services.recipes.parsing import is_blank, parse_number, split_csv


if TYPE_CHECKING:
    from recipe_finder.clients.spoonacular.client import SpoonacularClient


logger = get_logger(__name__)

INGREDIENTS_REQUIRED_MESSAGE = "Ingredients are required for recipe search"
RECIPE_ID_REQUIRED_MESSAGE = "Recipe ID is required"
RECIPE_NOT_FOUND_MESSAGE = "Recipe not found"


def _result_count(data: object) -> int | None:
    if isinstance(data, dict) and isinstance(data.get("results"), list):
        return len(data["results"])
    return None


class RecipeService:
    """Translate simple recipe queries into Spoonacular calls."""

    def __init__(self, client: SpoonacularClient) -> None:
        """Initialize the service.

        Args:
            client: Initialized Spoonacular client.
        """
        self._client = client

    @property
    def client(self) -> SpoonacularClient:
        return self._client

    async def search_recipes(
        self,
        ingredients_raw: str | None,
        diets_raw: str | None = None,
        number_raw: str | None = None,
    ) -> ResponseEnvelope:
        """Search recipes by a comma-separated ingredient list.

        Args:
            ingredients_raw: Comma-separated ingredients. Required.
            diets_raw: Comma-separated diet tags.
            number_raw: Maximum number of results, 10 when absent.

        Returns:
            Success envelope carrying the upstream search payload.

        Raises:
            BadRequestException: If ingredients are missing or the count is
                not a positive integer.
            SpoonacularError: If the upstream call fails.
        """
        if is_blank(ingredients_raw):
            logger.info("Recipe search rejected: no ingredients")
            raise BadRequestException(INGREDIENTS_REQUIRED_MESSAGE)

        query = SearchQuery(
            ingredients=split_csv(ingredients_raw),
            diets=split_csv(diets_raw),
            number=parse_number(number_raw),
        )
        add_span_attributes(
            **{
                "recipes.ingredient_count": len(query.ingredients),
                "recipes.number": query.number,
            }
        )
        logger.info(
            "Searching recipes",
            ingredients=query.ingredients,
            diets=query.diets,
            number=query.number,
        )

        data = await self._client.search_by_ingredients(
            query.ingredients,
            query.diets,
            query.number,
        )

        logger.info("Recipe search succeeded", result_count=_result_count(data))
        return ResponseEnvelope.ok(data)

    async def get_recipe_by_id(self, recipe_id: str | None) -> ResponseEnvelope:
        """Fetch one recipe's full information.

        Raises:
            BadRequestException: If the id is missing.
            NotFoundException: If the upstream API does not know the id.
            SpoonacularError: If the upstream call fails otherwise.
        """
        if is_blank(recipe_id):
            raise BadRequestException(RECIPE_ID_REQUIRED_MESSAGE)

        add_span_attributes(**{"recipes.id": str(recipe_id)})
        logger.info("Fetching recipe", recipe_id=recipe_id)
        try:
            data = await self._client.get_by_id(recipe_id)
        except SpoonacularNotFoundError as e:
            logger.info("Recipe not found upstream", recipe_id=recipe_id)
            raise NotFoundException(RECIPE_NOT_FOUND_MESSAGE) from e

        return ResponseEnvelope.ok(data)

    async def get_recipe_suggestions(
        self,
        diets_raw: str | None = None,
        number_raw: str | None = None,
    ) -> ResponseEnvelope:
        """Fetch popular recipes, optionally restricted to some diets.

        Raises:
            BadRequestException: If the count is not a positive integer.
            SpoonacularError: If the upstream call fails.
        """
        query = SuggestionQuery(
            diets=split_csv(diets_raw),
            number=parse_number(number_raw),
        )
        logger.info(
            "Fetching recipe suggestions",
            diets=query.diets,
            number=query.number,
        )

        data = await self._client.get_suggestions(query.diets, query.number)

        logger.info(
            "Recipe suggestions succeeded",
            result_count=_result_count(data),
        )
        return ResponseEnvelope.ok(data)
