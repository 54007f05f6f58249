"""Unit tests for tracing setup."""

from __future__ import annotations

from typing import TYPE_CHECKING
from unittest.mock import MagicMock, patch

import pytest
from fastapi import FastAPI

from recipe_finder.core.config.settings import (
    MetricsSettings,
    ObservabilitySettings,
    TracingSettings,
)
from recipe_finder.observability.tracing import (
    add_span_attributes,
    setup_tracing,
    shutdown_tracing,
)


if TYPE_CHECKING:
    from collections.abc import Callable

    from recipe_finder.core.config import Settings


pytestmark = pytest.mark.unit

MODULE = "recipe_finder.observability.tracing"


class TestSetupTracing:
    """Tests for setup_tracing."""

    def test_disabled(self, test_settings: Settings) -> None:
        """Should not instrument when tracing is disabled."""
        with patch(f"{MODULE}.FastAPIInstrumentor") as mock_instrumentor:
            setup_tracing(FastAPI(), test_settings)

        mock_instrumentor.instrument_app.assert_not_called()

    def test_enabled_with_otlp(self, make_settings: Callable[..., Settings]) -> None:
        """Should export to the OTLP endpoint and instrument the app."""
        settings = make_settings(
            "production",
            observability=ObservabilitySettings(
                tracing=TracingSettings(enabled=True, otlp_endpoint="http://otel:4317"),
                metrics=MetricsSettings(enabled=False),
            ),
        )
        app = FastAPI()

        with (
            patch(f"{MODULE}.trace") as mock_trace,
            patch(f"{MODULE}.OTLPSpanExporter") as mock_exporter,
            patch(f"{MODULE}.BatchSpanProcessor"),
            patch(f"{MODULE}.FastAPIInstrumentor") as mock_instrumentor,
        ):
            setup_tracing(app, settings)

        mock_exporter.assert_called_once_with(endpoint="http://otel:4317", insecure=True)
        mock_trace.set_tracer_provider.assert_called_once()
        mock_instrumentor.instrument_app.assert_called_once()
        assert mock_instrumentor.instrument_app.call_args.args[0] is app


class TestSpanHelpers:
    """Tests for span helpers."""

    def test_add_span_attributes_when_recording(self) -> None:
        """Should set attributes on a recording span."""
        span = MagicMock()
        span.is_recording.return_value = True

        with patch(f"{MODULE}.trace.get_current_span", return_value=span):
            add_span_attributes(recipe_id="1", number=3)

        span.set_attribute.assert_any_call("recipe_id", "1")
        span.set_attribute.assert_any_call("number", 3)

    def test_add_span_attributes_when_not_recording(self) -> None:
        """Should skip spans that are not recording."""
        span = MagicMock()
        span.is_recording.return_value = False

        with patch(f"{MODULE}.trace.get_current_span", return_value=span):
            add_span_attributes(recipe_id="1")

        span.set_attribute.assert_not_called()

    def test_shutdown_without_sdk_provider(self) -> None:
        """Should be a no-op when no SDK provider is installed."""
        with patch(f"{MODULE}.trace.get_tracer_provider", return_value=MagicMock()):
            shutdown_tracing()
