"""Uniform response envelope returned by every JSON endpoint.

Success:  {"success": true, "data": <upstream payload>}
Failure:  {"success": false, "message": "...", "error": <diagnostic>?}
"""

from __future__ import annotations

from typing import Any

from pydantic import Field

from recipe_finder.schemas.base import APIResponse


class ResponseEnvelope(APIResponse):
    """Success/data/message/error wrapper.

    Members that were never set are left out of the JSON body, so build
    instances through ``ok`` and ``failure`` rather than passing ``None``.
    """

    success: bool = Field(..., description="Whether the request succeeded")
    data: Any = Field(
        default=None,
        description="Upstream payload, passed through unchanged",
    )
    message: str | None = Field(
        default=None,
        description="Human-readable failure message",
    )
    error: Any = Field(
        default=None,
        description="Diagnostic detail, only present in development mode",
    )

    @classmethod
    def ok(cls, data: Any) -> ResponseEnvelope:
        """Wrap a successful payload."""
        return cls(success=True, data=data)

    @classmethod
    def failure(cls, message: str, error: Any = None) -> ResponseEnvelope:
        """Wrap a failure message, with optional diagnostic detail."""
        if error is None:
            return cls(success=False, message=message)
        return cls(success=False, message=message, error=error)

    def to_content(self) -> dict[str, Any]:
        """Render the JSON body, omitting members that were never set."""
        return self.model_dump(exclude_unset=True)
