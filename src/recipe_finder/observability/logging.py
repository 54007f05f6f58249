"""Loguru setup for Recipe Finder.

Records go to stdout, as one JSON object per line, or as a coloured line in
development. Request metadata bound with ``bind_context`` travels with
every record emitted while the request is handled, and records from
libraries that use ``logging`` (uvicorn, httpx) are routed through Loguru.
"""

from __future__ import annotations

import logging
import sys
from contextvars import ContextVar
from typing import TYPE_CHECKING

import orjson
from loguru import logger


if TYPE_CHECKING:
    from typing import Any


_log_context: ContextVar[dict[str, Any]] = ContextVar("log_context", default={})

# Only their warnings are worth keeping
NOISY_LOGGERS = (
    "uvicorn",
    "uvicorn.access",
    "uvicorn.error",
    "httpx",
    "httpcore",
    "asyncio",
)

_DEV_FORMAT = (
    "<green>{{time:YYYY-MM-DD HH:mm:ss.SSS}}</green> | "
    "<level>{{level: <8}}</level> | "
    "<cyan>{{name}}</cyan>:<cyan>{{function}}</cyan>:<cyan>{{line}}</cyan>"
    "{context} - <level>{{message}}</level>\n"
)


class InterceptHandler(logging.Handler):
    """``logging`` handler that re-emits records through Loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Skip logging's own frames so the record points at the real caller
        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage()
        )


def _exception_summary(record: dict[str, Any]) -> dict[str, str | None]:
    exc_type, exc_value, _ = record["exception"]
    return {
        "type": exc_type.__name__ if exc_type else None,
        "value": str(exc_value) if exc_value else None,
    }


def _format_record(record: dict[str, Any]) -> str:
    """JSON line formatter.

    The serialized line is stashed in ``extra`` and referenced from the
    returned template, so message text never reaches Loguru's formatter.
    """
    record["extra"].update(_log_context.get())

    fields: dict[str, Any] = {
        "timestamp": record["time"].isoformat(),
        "level": record["level"].name,
        "message": record["message"],
        "logger": record["name"],
        "function": record["function"],
        "line": record["line"],
        **record["extra"],
    }
    if record["exception"]:
        fields["exception"] = _exception_summary(record)

    record["extra"]["serialized"] = orjson.dumps(fields, default=str).decode()
    return "{extra[serialized]}\n"


def _format_record_dev(record: dict[str, Any]) -> str:
    """Readable formatter that appends the bound context as key=value pairs."""
    context = _log_context.get()
    suffix = ""
    if context:
        pairs = " ".join(f"{key}={value}" for key, value in context.items())
        suffix = " | " + pairs.replace("{", "{{").replace("}", "}}")

    fmt = _DEV_FORMAT.format(context=suffix)
    if record["exception"]:
        fmt += "{exception}\n"
    return fmt


def setup_logging(
    log_level: str = "INFO",
    log_format: str = "json",
    *,
    is_development: bool = False,
) -> None:
    """Replace Loguru's default sink and capture stdlib logging.

    Args:
        log_level: Minimum level name, case-insensitive.
        log_format: ``"json"`` or ``"text"``. Development always uses text.
        is_development: Use the readable format and show locals in tracebacks.
    """
    readable = is_development or log_format != "json"

    logger.remove()
    logger.add(
        sys.stdout,
        format=_format_record_dev if readable else _format_record,
        level=log_level.upper(),
        colorize=readable,
        backtrace=True,
        diagnose=readable,
    )

    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> "logger":  # type: ignore[valid-type]
    """Loguru logger carrying ``name`` (pass ``__name__``)."""
    return logger.bind(name=name)


def bind_context(**kwargs: Any) -> None:
    """Attach fields to every record logged in the current context.

    Example:
        bind_context(request_id="abc-123", path="/api/recipes/search")
    """
    _log_context.set({**_log_context.get(), **kwargs})


def clear_context() -> None:
    """Drop all bound fields; called when a request starts."""
    _log_context.set({})


def unbind_context(*keys: str) -> None:
    current = _log_context.get().copy()
    for key in keys:
        current.pop(key, None)
    _log_context.set(current)


def get_context() -> dict[str, Any]:
    """Copy of the fields bound in the current context."""
    return _log_context.get().copy()


__all__ = [
    "bind_context",
    "clear_context",
    "get_context",
    "get_logger",
    "logger",
    "setup_logging",
    "unbind_context",
]
