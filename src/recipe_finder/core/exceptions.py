"""Custom exceptions and exception handlers.

Every error leaving the API is rendered as a ``ResponseEnvelope`` with
``success`` set to false. Upstream failure details are only attached to
the envelope when the application runs in development.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from fastapi import FastAPI, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import ORJSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from recipe_finder.clients.spoonacular.exceptions import SpoonacularError
from recipe_finder.core.config import get_settings
from recipe_finder.observability.logging import get_logger
from recipe_finder.schemas.envelope import ResponseEnvelope


if TYPE_CHECKING:
    from fastapi import Request

    from recipe_finder.core.config import Settings


logger = get_logger(__name__)

UPSTREAM_ERROR_MESSAGE = "An error occurred while processing your request"


class AppException(Exception):
    """Base application exception.

    Carries the HTTP status and the user-facing message of the envelope.
    """

    def __init__(self, status_code: int, message: str) -> None:
        self.status_code = status_code
        self.message = message
        super().__init__(message)


class BadRequestException(AppException):
    """Bad request exception."""

    def __init__(self, message: str) -> None:
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, message=message)


class NotFoundException(AppException):
    """Resource not found exception."""

    def __init__(self, message: str = "Resource not found") -> None:
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, message=message)


class ServiceUnavailableException(AppException):
    """Service unavailable exception."""

    def __init__(self, message: str = "Service temporarily unavailable") -> None:
        super().__init__(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            message=message,
        )


def _get_settings(request: Request) -> Settings:
    settings = getattr(request.app.state, "settings", None)
    return settings if settings is not None else get_settings()


def _failure_response(
    status_code: int,
    message: str,
    error: Any = None,
) -> ORJSONResponse:
    return ORJSONResponse(
        status_code=status_code,
        content=ResponseEnvelope.failure(message, error).to_content(),
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """Register exception handlers with the FastAPI application."""

    @app.exception_handler(AppException)
    async def app_exception_handler(
        request: Request,
        exc: AppException,
    ) -> ORJSONResponse:
        """Handle custom application exceptions."""
        return _failure_response(exc.status_code, exc.message)

    @app.exception_handler(SpoonacularError)
    async def spoonacular_exception_handler(
        request: Request,
        exc: SpoonacularError,
    ) -> ORJSONResponse:
        """Handle upstream failures, mirroring the upstream status."""
        status_code = exc.status_code or status.HTTP_500_INTERNAL_SERVER_ERROR
        logger.error(
            "Spoonacular request failed",
            error_type=type(exc).__name__,
            status_code=status_code,
            error=str(exc),
        )
        error = exc.detail if _get_settings(request).is_development else None
        return _failure_response(status_code, UPSTREAM_ERROR_MESSAGE, error)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request,
        exc: StarletteHTTPException,
    ) -> ORJSONResponse:
        """Handle Starlette HTTP exceptions."""
        return _failure_response(exc.status_code, str(exc.detail))

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> ORJSONResponse:
        """Handle request validation errors."""
        error = None
        if _get_settings(request).is_development:
            error = [
                {
                    "field": ".".join(str(loc) for loc in err["loc"]),
                    "message": err["msg"],
                }
                for err in exc.errors()
            ]
        return _failure_response(
            status.HTTP_422_UNPROCESSABLE_ENTITY,
            "Request validation failed",
            error,
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request,
        exc: Exception,
    ) -> ORJSONResponse:
        """Handle unexpected exceptions."""
        logger.opt(exception=exc).error("Unhandled exception")

        error = {"message": str(exc)} if _get_settings(request).is_development else None
        return _failure_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            UPSTREAM_ERROR_MESSAGE,
            error,
        )
