"""
ClassHub Backend - Access Log Middleware
=========================================

What:  Writes one line per request to the `classhub.access` logger:

           POST /api/tasks -> 200 in 4.2ms (rid=1a2b3c4d, ip=10.0.0.7)

       The same values go into `extra` for handlers that emit JSON.

Severity follows the response: 5xx logs at ERROR, 4xx at WARNING, the rest
at INFO. Bodies and query strings are never logged, since /register and
/login carry plaintext passwords.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from classhub.middleware.request_id import request_id_var

logger = logging.getLogger("classhub.access")

# Polled by monitors
QUIET_PATHS = frozenset({"/health"})


def level_for_status(status: int) -> int:
    if status >= 500:
        return logging.ERROR
    if status >= 400:
        return logging.WARNING
    return logging.INFO


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Times every non-quiet request and logs its outcome."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.url.path in QUIET_PATHS:
            return await call_next(request)

        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = round((time.perf_counter() - started) * 1000, 2)

        entry = {
            "request_id": request_id_var.get(""),
            "method": request.method,
            "path": request.url.path,
            "status": response.status_code,
            "duration_ms": elapsed_ms,
            "client_ip": request.client.host if request.client else "unknown",
        }
        logger.log(
            level_for_status(entry["status"]),
            "%(method)s %(path)s -> %(status)d in %(duration_ms).1fms "
            "(rid=%(request_id)s, ip=%(client_ip)s)",
            entry,
            extra=entry,
        )
        return response
