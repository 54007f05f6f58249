"""Parsed query models handed from the service to the upstream client."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from recipe_finder.clients.spoonacular.client import DEFAULT_RESULT_COUNT


class SuggestionQuery(BaseModel):
    """Popular-recipe query: optional diet filter and a result count."""

    model_config = ConfigDict(frozen=True)

    diets: list[str] = Field(default_factory=list)
    number: int = Field(default=DEFAULT_RESULT_COUNT, gt=0)


class SearchQuery(SuggestionQuery):
    """Search-by-ingredients query.

    Ingredient and diet order is preserved as given by the caller.
    """

    ingredients: list[str] = Field(..., min_length=1)
