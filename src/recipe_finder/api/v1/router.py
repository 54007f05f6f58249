"""API v1 router aggregating the JSON endpoint routers.

Recipe routes are mounted under ``api.prefix`` (default ``/api/recipes``);
health probes are mounted at the root by the application factory.
"""

from __future__ import annotations

from fastapi import APIRouter

from recipe_finder.api.v1.endpoints import recipes


router = APIRouter()

router.include_router(recipes.router)
