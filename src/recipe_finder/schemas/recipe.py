"""Read-only views over upstream recipe payloads.

The JSON API passes upstream data through untouched; these models are
only used where the service itself needs to read recipe fields, such as
the HTML pages.
"""

from __future__ import annotations

from pydantic import Field

from recipe_finder.schemas.base import DownstreamResponse


class RecipeIngredient(DownstreamResponse):
    """Ingredient entry of a recipe (upstream ``extendedIngredients``)."""

    id: int | None = None
    name: str | None = None
    original: str = Field(default="", description="Ingredient line as written")


class InstructionStep(DownstreamResponse):
    """Single step of an analysed instruction block."""

    number: int | None = None
    step: str = ""


class AnalyzedInstruction(DownstreamResponse):
    """Named block of instruction steps."""

    name: str = ""
    steps: list[InstructionStep] = []


class RecipeSummary(DownstreamResponse):
    """Recipe as it appears in search results and suggestions."""

    id: int | str
    title: str = ""
    image: str | None = None
    vegetarian: bool = False
    vegan: bool = False
    gluten_free: bool = False
    dairy_free: bool = False
    ready_in_minutes: int | None = Field(
        default=None,
        description="Preparation time in minutes",
    )

    @property
    def dietary_labels(self) -> list[str]:
        """Labels for the dietary flags that are set."""
        flags = (
            (self.vegetarian, "Vegetarian"),
            (self.vegan, "Vegan"),
            (self.gluten_free, "Gluten Free"),
            (self.dairy_free, "Dairy Free"),
        )
        return [label for enabled, label in flags if enabled]


class RecipeSearchResults(DownstreamResponse):
    """Upstream complex search response."""

    results: list[RecipeSummary] = []
    offset: int | None = None
    number: int | None = None
    total_results: int | None = None


class RecipeDetail(RecipeSummary):
    """Full recipe information for a single recipe."""

    servings: int | None = None
    diets: list[str] = []
    extended_ingredients: list[RecipeIngredient] = []
    instructions: str | None = None
    analyzed_instructions: list[AnalyzedInstruction] = []
    source_url: str | None = None

    @property
    def ingredient_lines(self) -> list[str]:
        """The ``original`` description of every ingredient, in order."""
        return [ingredient.original for ingredient in self.extended_ingredients]

    @property
    def instruction_steps(self) -> list[str]:
        """Analysed instruction steps flattened across blocks."""
        return [
            step.step
            for block in self.analyzed_instructions
            for step in block.steps
            if step.step
        ]
