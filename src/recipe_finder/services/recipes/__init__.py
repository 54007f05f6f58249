"""Recipe search service module."""

from recipe_finder.services.recipes.models import SearchQuery, SuggestionQuery
from recipe_finder.services.recipes.service import RecipeService


__all__ = [
    "RecipeService",
    "SearchQuery",
    "SuggestionQuery",
]
