"""
Notes API: Request Logging Middleware
=======================================

What:  One access-log line per HTTP request with status and duration.
How:   Times the downstream call and logs on the "notes_api.access" logger.
       Level follows the status code: 5xx ERROR, 4xx WARNING, else INFO.
Who:   Applied to every request via Starlette middleware.
When:  After RequestIDMiddleware, so the request ID is already set.

Logged:     method, path, status, duration, client IP, request ID
Not logged: request bodies (note content is user data)
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from notes_api.middleware.request_id import request_id_var

logger = logging.getLogger("notes_api.access")

# Probed every few seconds by orchestrators
_UNLOGGED_PATHS = frozenset({"/health"})


class RequestLoggingMiddleware(BaseHTTPMiddleware):

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        path = request.url.path
        if path in _UNLOGGED_PATHS:
            return await call_next(request)

        start_time = time.perf_counter()
        client_ip = request.client.host if request.client else "unknown"
        method = request.method
        rid = request_id_var.get("")

        try:
            response = await call_next(request)
        except Exception:
            # The 500 handler answers outside this middleware; log the line here
            _log_access(method, path, 500, start_time, rid, client_ip)
            raise

        _log_access(method, path, response.status_code, start_time, rid, client_ip)
        return response


def _log_access(method, path, status, start_time, rid, client_ip) -> None:
    duration_ms = (time.perf_counter() - start_time) * 1000
    if status >= 500:
        log_level = logging.ERROR
    elif status >= 400:
        log_level = logging.WARNING
    else:
        log_level = logging.INFO

    logger.log(
        log_level,
        "%s %s %d %.1fms [%s] from %s",
        method,
        path,
        status,
        duration_ms,
        rid,
        client_ip,
        extra={
            "request_id": rid,
            "method": method,
            "path": path,
            "status": status,
            "duration_ms": round(duration_ms, 2),
            "client_ip": client_ip,
        },
    )
