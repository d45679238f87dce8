"""
Campus API Backend: Request Logging Middleware
================================================

What:  One access-log line per request: method, path, status, duration, request ID.
Why:   Gives a per-request audit trail (who got a 403, what 404ed, what was slow)
       without logging payloads.
How:   Times the downstream call and logs at a level chosen by status code
       (5xx → ERROR, 4xx → WARNING, otherwise INFO). Structured fields go in
       `extra` for log shippers that index record attributes.

Not logged: request bodies, query strings (may carry personal data such as
emails), Authorization headers.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from campus_api.middleware.request_id import request_id_var

logger = logging.getLogger("campus_api.access")

# Polled every few seconds by probes
QUIET_PATHS = {"/health"}


def level_for_status(status: int) -> int:
    if status >= 500:
        return logging.ERROR
    if status >= 400:
        return logging.WARNING
    return logging.INFO


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Access logging with request-ID correlation."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.url.path in QUIET_PATHS:
            return await call_next(request)

        start = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - start) * 1000

        rid = request_id_var.get("")
        client_ip = request.client.host if request.client else "unknown"
        logger.log(
            level_for_status(response.status_code),
            "%s %s %d %.1fms [%s]",
            request.method,
            request.url.path,
            response.status_code,
            duration_ms,
            rid,
            extra={
                "request_id": rid,
                "method": request.method,
                "path": request.url.path,
                "status": response.status_code,
                "duration_ms": round(duration_ms, 2),
                "client_ip": client_ip,
            },
        )
        return response
