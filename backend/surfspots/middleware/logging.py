"""
Surf Spots Backend - Access Logging Middleware
================================================

What:  One access log line per spot request: verb, path, status, duration,
       the spot id the request targeted and the response size.
How:   Times the downstream call and picks the level from the outcome.
       Reads are frequent and uninteresting, so a successful read is DEBUG
       while every mutation of the document is INFO.
When:  Runs inside RequestIDMiddleware so the id is already set.

Example lines:
    2024-01-15T12:00:00 [INFO] surfspots.access: PUT /api/spots/42 -> 200 (3.1ms, 0B) spot=42 [a1b2c3d4]
    2024-01-15T12:00:01 [WARNING] surfspots.access: GET /api/spots/99 -> 404 (1.0ms, 14B) spot=99 [e5f6a7b8]

Request bodies are never logged.
"""

import logging
import time
from typing import Optional

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from surfspots.middleware.request_id import request_id_var

logger = logging.getLogger("surfspots.access")

SPOTS_PREFIX = "/api/spots/"

# Polled every few seconds by container runtimes
SKIPPED_PATHS = {"/health"}

MUTATING_METHODS = {"POST", "PUT", "DELETE"}


def spot_id_from_path(path: str) -> Optional[str]:
    """The `{id}` segment of /api/spots/{id}, or None for collection paths."""
    if not path.startswith(SPOTS_PREFIX):
        return None
    spot_id = path[len(SPOTS_PREFIX):]
    return spot_id or None


def access_level(method: str, status: int) -> int:
    """
    Level by outcome:
        5xx                       → ERROR
        4xx                       → WARNING
        2xx/3xx POST, PUT, DELETE → INFO
        2xx/3xx reads             → DEBUG
    """
    if status >= 500:
        return logging.ERROR
    if status >= 400:
        return logging.WARNING
    if method in MUTATING_METHODS:
        return logging.INFO
    return logging.DEBUG


class RequestLoggingMiddleware(BaseHTTPMiddleware):

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        path = request.url.path
        if path in SKIPPED_PATHS:
            return await call_next(request)

        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000

        level = access_level(request.method, response.status_code)
        if not logger.isEnabledFor(level):
            return response

        spot_id = spot_id_from_path(path)
        size = response.headers.get("content-length", "?")
        logger.log(
            level,
            "%s %s -> %d (%.1fms, %sB) spot=%s [%s]",
            request.method,
            path,
            response.status_code,
            elapsed_ms,
            size,
            spot_id or "-",
            request_id_var.get(""),
            extra={
                "spot_id": spot_id,
                "status": response.status_code,
                "elapsed_ms": round(elapsed_ms, 2),
            },
        )
        return response
