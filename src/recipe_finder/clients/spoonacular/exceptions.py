"""Spoonacular client exceptions.

Two families matter to callers: the upstream answered with an error
status (``SpoonacularResponseError``, status and body preserved), or no
usable answer came back at all (``status_code`` is None). Both are mapped
to HTTP responses by the application's exception handlers.
"""

from __future__ import annotations

from typing import Any


class SpoonacularError(Exception):
    """Base exception for Spoonacular client errors."""

    status_code: int | None = None

    @property
    def detail(self) -> Any:
        """Diagnostic payload describing the failure."""
        return {"message": str(self)}


class SpoonacularUnavailableError(SpoonacularError):
    """Raised when the Spoonacular API cannot be reached."""


class SpoonacularTimeoutError(SpoonacularUnavailableError):
    """Raised when a request to the Spoonacular API times out."""


class SpoonacularInvalidResponseError(SpoonacularError):
    """Raised when a response is neither a JSON success nor an error status."""


class SpoonacularResponseError(SpoonacularError):
    """Raised when the Spoonacular API returns a non-2xx status.

    ``body`` is the decoded JSON error body when there is one, else the
    raw response text.
    """

    def __init__(self, status_code: int, message: str, body: Any = None) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(message)

    @property
    def detail(self) -> Any:
        if self.body in (None, ""):
            return {"message": str(self)}
        return self.body


class SpoonacularNotFoundError(SpoonacularResponseError):
    """Raised when the requested recipe does not exist upstream (404)."""

    def __init__(self, message: str, body: Any = None) -> None:
        super().__init__(status_code=404, message=message, body=body)
