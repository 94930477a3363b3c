"""
Violet API Backend - Request Logging Middleware
================================================

What:  One access log line per request: method, path, status, duration,
       request id and client address.
Why:   Access logs carry the request id so a request can be followed from the
       access log into the error log.

Level by status class:
    5xx → ERROR · 4xx → WARNING · otherwise INFO

Liveness probes ("/", the base path, the base path of each version) are
not logged; they are hit every few seconds by load balancers.
"""

import logging
import re
import time
from typing import Optional

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from violet.config import Settings, settings as default_settings
from violet.middleware.request_id import request_id_var

logger = logging.getLogger("violet.access")


def is_liveness_path(path: str, base_path: str) -> bool:
    if path in ("/", base_path):
        return True
    return re.fullmatch(rf"{re.escape(base_path)}/v\d", path) is not None


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    def __init__(self, app, app_settings: Optional[Settings] = None, **kwargs):
        super().__init__(app, **kwargs)
        self.settings = app_settings or default_settings

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        path = request.url.path
        if is_liveness_path(path, self.settings.api_base_path):
            return await call_next(request)

        start_time = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - start_time) * 1000

        client_ip = request.client.host if request.client else "unknown"
        rid = request_id_var.get("")
        status = response.status_code
        if status >= 500:
            log_level = logging.ERROR
        elif status >= 400:
            log_level = logging.WARNING
        else:
            log_level = logging.INFO

        logger.log(
            log_level,
            "%s %s %d %.1fms [%s] from %s",
            request.method,
            path,
            status,
            duration_ms,
            rid,
            client_ip,
            extra={
                "request_id": rid,
                "method": request.method,
                "path": path,
                "status": status,
                "duration_ms": round(duration_ms, 2),
                "client_ip": client_ip,
            },
        )
        return response
