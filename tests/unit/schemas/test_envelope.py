"""Unit tests for ResponseEnvelope."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from recipe_finder.schemas.envelope import ResponseEnvelope


pytestmark = pytest.mark.unit


class TestResponseEnvelope:
    """Tests for ResponseEnvelope."""

    def test_ok_omits_failure_members(self) -> None:
        """Should render only success and data."""
        assert ResponseEnvelope.ok({"results": []}).to_content() == {
            "success": True,
            "data": {"results": []},
        }

    def test_ok_keeps_falsy_data(self) -> None:
        """Should keep data even when it is empty."""
        assert ResponseEnvelope.ok([]).to_content() == {"success": True, "data": []}

    def test_failure_without_error(self) -> None:
        """Should omit error when there is no detail."""
        assert ResponseEnvelope.failure("Recipe not found").to_content() == {
            "success": False,
            "message": "Recipe not found",
        }

    def test_failure_with_error(self) -> None:
        """Should include detail when given."""
        content = ResponseEnvelope.failure("boom", {"message": "x"}).to_content()

        assert content == {"success": False, "message": "boom", "error": {"message": "x"}}

    def test_data_is_not_reshaped(self) -> None:
        """Should keep upstream camelCase keys as-is."""
        data = {"readyInMinutes": 20, "nested": {"glutenFree": True}}

        assert ResponseEnvelope.ok(data).to_content()["data"] == data

    def test_rejects_unknown_fields(self) -> None:
        """Should forbid extra members."""
        with pytest.raises(ValidationError):
            ResponseEnvelope(success=True, extra_field=1)  # type: ignore[call-arg]
