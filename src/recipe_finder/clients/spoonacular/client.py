"""Spoonacular recipe API client.

Each public method issues exactly one GET request with the API key
attached and returns the decoded JSON body untouched. Failures are raised
as ``SpoonacularError`` subclasses.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Final, NoReturn
from urllib.parse import quote

import httpx
import orjson

from recipe_finder.clients.spoonacular.exceptions import (
    SpoonacularInvalidResponseError,
    SpoonacularNotFoundError,
    SpoonacularResponseError,
    SpoonacularTimeoutError,
    SpoonacularUnavailableError,
)
from recipe_finder.observability.logging import get_logger


if TYPE_CHECKING:
    from collections.abc import Sequence

    from recipe_finder.core.config import Settings

logger = get_logger(__name__)

DEFAULT_BASE_URL: Final[str] = "https://api.spoonacular.com"
DEFAULT_TIMEOUT: Final[float] = 10.0
DEFAULT_RESULT_COUNT: Final[int] = 10


@dataclass(frozen=True, slots=True)
class SpoonacularConfig:
    """Connection settings for the upstream API, fixed at startup."""

    api_key: str
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT

    @classmethod
    def from_settings(cls, settings: Settings) -> SpoonacularConfig:
        return cls(
            api_key=settings.SPOONACULAR_API_KEY,
            base_url=settings.spoonacular.base_url.rstrip("/"),
            timeout=settings.spoonacular.timeout,
        )


class SpoonacularClient:
    """HTTP client for the Spoonacular recipe API.

    Example:
        ```python
        client = SpoonacularClient(SpoonacularConfig(api_key="..."))
        await client.initialize()

        results = await client.search_by_ingredients(["chicken", "rice"])

        await client.shutdown()
        ```
    """

    COMPLEX_SEARCH_ENDPOINT: Final[str] = "/recipes/complexSearch"
    RECIPE_INFORMATION_ENDPOINT: Final[str] = "/recipes/{recipe_id}/information"

    def __init__(
        self,
        config: SpoonacularConfig,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            config: Upstream connection settings.
            http_client: Optional shared HTTP client. A client passed in here
                is not closed by ``shutdown``. Redirects are only followed
                when it is configured to follow them.
        """
        self._config = config
        self._http_client = http_client
        self._owns_http_client = http_client is None

    @property
    def config(self) -> SpoonacularConfig:
        return self._config

    @property
    def is_initialized(self) -> bool:
        return self._http_client is not None

    async def initialize(self) -> None:
        """Create the HTTP client if one was not provided."""
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(
                timeout=httpx.Timeout(self._config.timeout),
                follow_redirects=True,
                headers={"Accept": "application/json"},
            )
        logger.info("SpoonacularClient initialized", base_url=self._config.base_url)

    async def shutdown(self) -> None:
        """Close the HTTP client if we own it."""
        if self._owns_http_client and self._http_client is not None:
            await self._http_client.aclose()
            self._http_client = None
        logger.debug("SpoonacularClient shutdown")

    async def search_by_ingredients(
        self,
        ingredients: Sequence[str],
        diets: Sequence[str] = (),
        number: int = DEFAULT_RESULT_COUNT,
    ) -> Any:
        """Search recipes that use the given ingredients.

        Full recipe information, filled ingredient lists and instructions
        are always requested.

        Args:
            ingredients: Ingredient names, in order.
            diets: Diet tags to filter by, in order.
            number: Maximum number of results.

        Returns:
            Upstream complex search JSON.

        Raises:
            SpoonacularError: If the upstream call fails.
        """
        params: dict[str, Any] = {
            "number": number,
            "addRecipeInformation": True,
            "fillIngredients": True,
            "instructionsRequired": True,
        }
        include_ingredients = ",".join(ingredients)
        if include_ingredients:
            params["includeIngredients"] = include_ingredients
        diet = ",".join(diets)
        if diet:
            params["diet"] = diet

        logger.debug(
            "Searching recipes by ingredients",
            ingredients=include_ingredients,
            diets=diet,
            number=number,
        )
        data = await self._get(self.COMPLEX_SEARCH_ENDPOINT, params)
        logger.info("Recipe search completed", results=_count_results(data))
        return data

    async def get_by_id(self, recipe_id: str | int) -> Any:
        """Get full information, including nutrition, for one recipe.

        Raises:
            SpoonacularNotFoundError: If the recipe does not exist.
            SpoonacularError: If the upstream call fails otherwise.
        """
        path = self.RECIPE_INFORMATION_ENDPOINT.format(
            recipe_id=quote(str(recipe_id), safe="")
        )
        logger.debug("Fetching recipe information", recipe_id=recipe_id)
        return await self._get(path, {"includeNutrition": True})

    async def get_suggestions(
        self,
        diets: Sequence[str] = (),
        number: int = DEFAULT_RESULT_COUNT,
    ) -> Any:
        """Get the most popular recipes, optionally filtered by diet.

        Raises:
            SpoonacularError: If the upstream call fails.
        """
        params: dict[str, Any] = {
            "number": number,
            "addRecipeInformation": True,
            "sort": "popularity",
            "sortDirection": "desc",
        }
        diet = ",".join(diets)
        if diet:
            params["diet"] = diet

        logger.debug("Fetching recipe suggestions", diets=diet, number=number)
        data = await self._get(self.COMPLEX_SEARCH_ENDPOINT, params)
        logger.info("Recipe suggestions fetched", results=_count_results(data))
        return data

    async def _get(self, path: str, params: dict[str, Any]) -> Any:
        """Issue one authenticated GET and decode the JSON body."""
        if self._http_client is None:
            msg = "Client not initialized. Call initialize() first."
            raise RuntimeError(msg)

        url = f"{self._config.base_url}{path}"

        try:
            response = await self._http_client.get(
                url,
                params={**params, "apiKey": self._config.api_key},
            )
        except httpx.TimeoutException as e:
            logger.warning("Request to Spoonacular API timed out", path=path)
            msg = f"Request to Spoonacular API timed out: {path}"
            raise SpoonacularTimeoutError(msg) from e
        except httpx.RequestError as e:
            logger.warning(
                "Failed to connect to Spoonacular API",
                path=path,
                error=str(e),
            )
            msg = f"Failed to connect to Spoonacular API: {e}"
            raise SpoonacularUnavailableError(msg) from e

        if not response.is_success:
            if response.status_code < 400:
                logger.warning(
                    "Spoonacular API returned unexpected status",
                    path=path,
                    status_code=response.status_code,
                )
                msg = f"Spoonacular API returned unexpected HTTP {response.status_code}"
                raise SpoonacularInvalidResponseError(msg)
            self._handle_error_response(response, path)

        try:
            return orjson.loads(response.content)
        except orjson.JSONDecodeError as e:
            logger.warning("Spoonacular API returned invalid JSON", path=path)
            msg = "Spoonacular API returned a response that is not valid JSON"
            raise SpoonacularInvalidResponseError(msg) from e

    def _handle_error_response(self, response: httpx.Response, path: str) -> NoReturn:
        """Raise the exception matching an upstream error response.

        Raises:
            SpoonacularNotFoundError: For 404 responses.
            SpoonacularResponseError: For every other error status.
        """
        status_code = response.status_code

        body: Any
        try:
            body = orjson.loads(response.content)
        except orjson.JSONDecodeError:
            body = response.text

        message = f"Spoonacular API returned HTTP {status_code}"
        if isinstance(body, dict) and body.get("message"):
            message = str(body["message"])

        logger.warning(
            "Spoonacular API returned error",
            path=path,
            status_code=status_code,
            message=message,
        )

        if status_code == 404:
            raise SpoonacularNotFoundError(message, body)
        raise SpoonacularResponseError(status_code, message, body)


def _count_results(data: Any) -> int:
    if isinstance(data, dict) and isinstance(data.get("results"), list):
        return len(data["results"])
    return 0
