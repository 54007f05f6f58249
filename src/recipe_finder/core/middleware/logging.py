"""Request logging middleware.

Binds method, path and client address to the logging context, then logs
one line when a request starts and one when it completes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from recipe_finder.observability.logging import bind_context, get_logger


if TYPE_CHECKING:
    from starlette.requests import Request
    from starlette.responses import Response
    from starlette.types import ASGIApp

logger = get_logger(__name__)

DEFAULT_EXCLUDE_PATHS = frozenset({"/health", "/ready", "/metrics", "/favicon.ico"})
DEFAULT_EXCLUDE_PREFIXES = ("/static/",)


class LoggingMiddleware(BaseHTTPMiddleware):
    """Middleware for structured request/response logging."""

    def __init__(
        self,
        app: ASGIApp,
        *,
        exclude_paths: set[str] | frozenset[str] | None = None,
        exclude_prefixes: tuple[str, ...] = DEFAULT_EXCLUDE_PREFIXES,
    ) -> None:
        super().__init__(app)
        self.exclude_paths = (
            DEFAULT_EXCLUDE_PATHS if exclude_paths is None else frozenset(exclude_paths)
        )
        self.exclude_prefixes = exclude_prefixes

    def is_excluded(self, path: str) -> bool:
        return path in self.exclude_paths or path.startswith(self.exclude_prefixes)

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        """Log request and response."""
        if self.is_excluded(request.url.path):
            return await call_next(request)

        bind_context(
            method=request.method,
            path=request.url.path,
            client_ip=get_client_ip(request),
        )

        logger.info(
            "Request started",
            query_params=str(request.query_params) if request.query_params else None,
        )

        response = await call_next(request)

        log = logger.warning if response.status_code >= 500 else logger.info
        log("Request completed", status_code=response.status_code)

        return response


def get_client_ip(request: Request) -> str:
    """Extract the client address, honouring reverse proxy headers."""
    forwarded_for = request.headers.get("x-forwarded-for")
    if forwarded_for:
        return forwarded_for.split(",")[0].strip()

    real_ip = request.headers.get("x-real-ip")
    if real_ip:
        return real_ip

    if request.client:
        return request.client.host

    return "unknown"
