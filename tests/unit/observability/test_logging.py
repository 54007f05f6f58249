"""Unit tests for logging module.

Tests cover:
- Context variable management
- Log formatting (JSON and dev)
- InterceptHandler
- setup_logging configuration
"""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from unittest.mock import MagicMock, patch

import orjson
import pytest

from recipe_finder.observability.logging import (
    NOISY_LOGGERS,
    InterceptHandler,
    _format_record,
    _format_record_dev,
    bind_context,
    clear_context,
    get_context,
    get_logger,
    setup_logging,
    unbind_context,
)


pytestmark = pytest.mark.unit


def _record(message: str = "hello", **extra: object) -> dict[str, object]:
    level = MagicMock()
    level.name = "INFO"
    return {
        "time": datetime(2024, 1, 1, tzinfo=UTC),
        "level": level,
        "message": message,
        "name": "recipe_finder.test",
        "function": "test_fn",
        "line": 42,
        "extra": dict(extra),
        "exception": None,
    }


@pytest.fixture(autouse=True)
def _clean_context() -> None:
    clear_context()


class TestContextManagement:
    """Tests for logging context management."""

    def test_bind_context_merges(self) -> None:
        """Should merge new values into the context."""
        bind_context(request_id="req-1")
        bind_context(path="/api/recipes/search")

        assert get_context() == {"request_id": "req-1", "path": "/api/recipes/search"}

    def test_unbind_context(self) -> None:
        """Should remove only the given keys."""
        bind_context(request_id="req-1", path="/")

        unbind_context("path", "missing")

        assert get_context() == {"request_id": "req-1"}

    def test_clear_context(self) -> None:
        """Should remove everything."""
        bind_context(request_id="req-1")

        clear_context()

        assert get_context() == {}

    def test_get_context_returns_copy(self) -> None:
        """Should not expose the stored dict."""
        bind_context(request_id="req-1")

        get_context()["request_id"] = "changed"

        assert get_context()["request_id"] == "req-1"


class TestFormatRecord:
    """Tests for JSON formatting."""

    def test_serializes_record_with_context(self) -> None:
        """Should serialize fields, extras and bound context as JSON."""
        bind_context(request_id="req-1")
        record = _record("Recipe search succeeded", result_count=3)

        template = _format_record(record)

        assert template == "{extra[serialized]}\n"
        payload = orjson.loads(record["extra"]["serialized"])
        assert payload["message"] == "Recipe search succeeded"
        assert payload["level"] == "INFO"
        assert payload["result_count"] == 3
        assert payload["request_id"] == "req-1"

    def test_keeps_braces_out_of_template(self) -> None:
        """Should not put message text into the format template."""
        record = _record("payload {'a': 1}")

        template = _format_record(record)

        assert "{'a'" not in template

    def test_summarizes_exception(self) -> None:
        """Should include the exception type and value."""
        record = _record("Unhandled exception")
        error = ValueError("bad number")
        record["exception"] = (ValueError, error, None)

        _format_record(record)

        payload = orjson.loads(record["extra"]["serialized"])
        assert payload["exception"] == {"type": "ValueError", "value": "bad number"}


class TestFormatRecordDev:
    """Tests for development formatting."""

    def test_includes_context(self) -> None:
        """Should append bound context to the line."""
        bind_context(request_id="req-1")

        fmt = _format_record_dev(_record())

        assert "request_id=req-1" in fmt

    def test_escapes_braces_in_context(self) -> None:
        """Should escape braces so loguru does not format them."""
        bind_context(query="{x}")

        fmt = _format_record_dev(_record())

        assert "query={{x}}" in fmt


class TestInterceptHandler:
    """Tests for InterceptHandler."""

    def test_forwards_to_loguru(self) -> None:
        """Should forward stdlib records to loguru."""
        handler = InterceptHandler()
        record = logging.LogRecord(
            "httpx", logging.WARNING, __file__, 1, "msg", None, None
        )

        with patch("recipe_finder.observability.logging.logger") as mock_logger:
            mock_logger.level.return_value.name = "WARNING"
            handler.emit(record)

        mock_logger.opt.return_value.log.assert_called_once_with("WARNING", "msg")


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_quiets_noisy_loggers(self) -> None:
        """Should raise third-party loggers to WARNING."""
        setup_logging("DEBUG", "text", is_development=True)

        for name in NOISY_LOGGERS:
            assert logging.getLogger(name).level == logging.WARNING

    def test_json_sink_outside_development(self) -> None:
        """Should use the JSON formatter for json format."""
        with patch("recipe_finder.observability.logging.logger") as mock_logger:
            setup_logging("info", "json", is_development=False)

        kwargs = mock_logger.add.call_args.kwargs
        assert kwargs["format"] is _format_record
        assert kwargs["level"] == "INFO"

    def test_dev_sink_in_development(self) -> None:
        """Should use the readable formatter in development."""
        with patch("recipe_finder.observability.logging.logger") as mock_logger:
            setup_logging("INFO", "json", is_development=True)

        assert mock_logger.add.call_args.kwargs["format"] is _format_record_dev


class TestGetLogger:
    """Tests for get_logger."""

    def test_binds_name(self) -> None:
        """Should bind the module name."""
        with patch("recipe_finder.observability.logging.logger") as mock_logger:
            get_logger("recipe_finder.x")

        mock_logger.bind.assert_called_once_with(name="recipe_finder.x")
