"""Integration test fixtures.

Runs the full application, lifespan included, against a Spoonacular API
mocked at the HTTP layer with respx.
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from unittest.mock import patch

import pytest
import respx
from httpx import ASGITransport, AsyncClient

from recipe_finder.factory import create_app


if TYPE_CHECKING:
    from collections.abc import AsyncGenerator, Callable, Iterator

    from fastapi import FastAPI

    from recipe_finder.core.config import Settings


pytestmark = pytest.mark.integration

SPOONACULAR_BASE_URL = "https://api.spoonacular.com"


@pytest.fixture
def spoonacular_mock() -> Iterator[respx.MockRouter]:
    """Mock the Spoonacular API; unmatched requests fail the test."""
    with respx.mock(base_url=SPOONACULAR_BASE_URL, assert_all_called=False) as mock:
        yield mock


@pytest.fixture
def make_client(
    spoonacular_mock: respx.MockRouter,
) -> Callable[[Settings], AsyncGenerator[AsyncClient]]:
    """Build a client for a fully started application."""

    async def _make(settings: Settings) -> AsyncGenerator[AsyncClient]:
        app: FastAPI = create_app(settings)
        with patch("recipe_finder.core.events.lifespan.setup_logging"):
            async with app.router.lifespan_context(app):
                transport = ASGITransport(app=app)
                async with AsyncClient(
                    transport=transport, base_url="http://test"
                ) as client:
                    yield client

    return _make


@pytest.fixture
async def client(
    make_client: Callable[[Settings], AsyncGenerator[AsyncClient]],
    test_settings: Settings,
) -> AsyncGenerator[AsyncClient]:
    """Client for the test-environment application."""
    async for client in make_client(test_settings):
        yield client


@pytest.fixture
async def dev_client(
    make_client: Callable[[Settings], AsyncGenerator[AsyncClient]],
    make_settings: Callable[..., Settings],
) -> AsyncGenerator[AsyncClient]:
    """Client for the application running in development."""
    async for client in make_client(make_settings("development")):
        yield client
