"""Health check endpoints.

Provides liveness and readiness probes for container orchestrators and
load balancers.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from recipe_finder.api.dependencies import get_app_settings
from recipe_finder.core.config import Settings
from recipe_finder.schemas.health import HealthResponse, ReadinessResponse


router = APIRouter(tags=["Health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Liveness probe",
)
async def health_check(
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> HealthResponse:
    """Check if the service is alive. External dependencies are not checked."""
    return HealthResponse(
        status="healthy",
        version=settings.app.version,
        environment=settings.APP_ENV,
    )


@router.get(
    "/ready",
    response_model=ReadinessResponse,
    summary="Readiness probe",
)
async def readiness_check(
    request: Request,
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> ReadinessResponse:
    """Check if the service can handle recipe requests.

    The upstream API itself is not called; only the local client state and
    the presence of an API key are reported.
    """
    client = getattr(request.app.state, "spoonacular_client", None)
    if client is None or not client.is_initialized:
        spoonacular = "not_initialized"
    elif not settings.has_spoonacular_api_key:
        spoonacular = "missing_api_key"
    else:
        spoonacular = "configured"

    return ReadinessResponse(
        status="ready" if spoonacular == "configured" else "degraded",
        version=settings.app.version,
        environment=settings.APP_ENV,
        dependencies={"spoonacular": spoonacular},
    )
