"""Conversion of raw query-string values into typed query members."""

from __future__ import annotations

from recipe_finder.clients.spoonacular.client import DEFAULT_RESULT_COUNT
from recipe_finder.core.exceptions import BadRequestException


INVALID_NUMBER_MESSAGE = "Number of results must be a positive integer"


def is_blank(value: str | None) -> bool:
    """Check whether a raw parameter is absent or only whitespace."""
    return value is None or not value.strip()


def split_csv(value: str | None) -> list[str]:
    """Split a comma-separated value into trimmed elements.

    Order is kept and nothing is dropped, so ``"a,,b"`` yields
    ``["a", "", "b"]``. A blank value yields an empty list.
    """
    if is_blank(value):
        return []
    return [item.strip() for item in value.split(",")]


def parse_number(value: str | None, default: int = DEFAULT_RESULT_COUNT) -> int:
    """Parse the result count.

    Raises:
        BadRequestException: If the value is not a positive base-10 integer.
    """
    if is_blank(value):
        return default

    text = value.strip()
    if not (text.isascii() and text.isdigit()):
        raise BadRequestException(INVALID_NUMBER_MESSAGE)

    number = int(text, 10)
    if number <= 0:
        raise BadRequestException(INVALID_NUMBER_MESSAGE)
    return number
