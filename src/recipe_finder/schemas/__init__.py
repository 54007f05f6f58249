"""Pydantic schemas for responses and upstream payloads."""

from recipe_finder.schemas.base import APIResponse, DownstreamResponse
from recipe_finder.schemas.envelope import ResponseEnvelope
from recipe_finder.schemas.health import HealthResponse, ReadinessResponse
from recipe_finder.schemas.recipe import (
    AnalyzedInstruction,
    InstructionStep,
    RecipeDetail,
    RecipeIngredient,
    RecipeSearchResults,
    RecipeSummary,
)


__all__ = [
    "APIResponse",
    "AnalyzedInstruction",
    "DownstreamResponse",
    "HealthResponse",
    "InstructionStep",
    "ReadinessResponse",
    "RecipeDetail",
    "RecipeIngredient",
    "RecipeSearchResults",
    "RecipeSummary",
    "ResponseEnvelope",
]
