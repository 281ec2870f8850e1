"""Middleware: request timing and access logging."""

from __future__ import annotations

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger("pivotorder.api")

DURATION_HEADER = "X-Sort-Duration-Ms"


class SortTimingMiddleware(BaseHTTPMiddleware):
    """Report how long each request took, as a header and a log line."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        start = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - start) * 1000
        response.headers[DURATION_HEADER] = f"{duration_ms:.1f}"
        logger.info(
            "%s %s -> %d in %.1f ms",
            request.method, request.url.path, response.status_code, duration_ms,
        )
        return response
