"""
Request observability middleware.

CorrelationMiddleware binds a correlation ID for the request and echoes it
in the response. RequestLoggingMiddleware writes one completion line per
request with status, latency and the session the request targets.

Dependencies: starlette, lecturelens.observability
System role: Request/response observability injection
"""

import logging
import re
import time

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from lecturelens.observability.correlation import (
    CORRELATION_HEADER,
    clear_correlation_id,
    set_correlation_id,
)
from lecturelens.observability.log_utils import log_exception_with_context, log_with_context

logger = logging.getLogger(__name__)

_SESSION_PATH = re.compile(r"/sessions/(?!upload\b)([^/]+)")


def session_id_from_path(path: str) -> str | None:
    """Return the session id segment of a /sessions/{id}/... path."""
    match = _SESSION_PATH.search(path)
    return match.group(1) if match else None


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log each request once it completes, or its failure."""

    async def dispatch(self, request: Request, call_next) -> Response:
        started = time.perf_counter()
        method, path = request.method, request.url.path
        context = {"method": method, "path": path, "session_id": session_id_from_path(path)}

        try:
            response: Response = await call_next(request)
        except Exception as e:
            elapsed_ms = round((time.perf_counter() - started) * 1000, 2)
            log_exception_with_context(
                logger,
                f"{__name__}:dispatch - {method} {path} failed after {elapsed_ms}ms",
                e,
                elapsed_ms=elapsed_ms,
                **context,
            )
            raise

        elapsed_ms = round((time.perf_counter() - started) * 1000, 2)
        level = logging.WARNING if response.status_code >= 500 else logging.INFO
        log_with_context(
            logger,
            level,
            f"{__name__}:dispatch - {method} {path} -> {response.status_code} in {elapsed_ms}ms",
            status_code=response.status_code,
            elapsed_ms=elapsed_ms,
            **context,
        )
        return response


class CorrelationMiddleware(BaseHTTPMiddleware):
    """Bind a correlation ID for the request and return it as a header."""

    async def dispatch(self, request: Request, call_next) -> Response:
        correlation_id = set_correlation_id(request.headers.get(CORRELATION_HEADER))
        try:
            response: Response = await call_next(request)
        finally:
            clear_correlation_id()
        response.headers[CORRELATION_HEADER] = correlation_id
        return response
