"""
Violet API Backend - Rate Limiting Middleware
==============================================

What:  Per-IP sliding window rate limiter.
How:   Keeps the request timestamps of each client IP in memory; once the
       count inside the window reaches the limit, answers 429 with a
       Retry-After header until the oldest timestamp leaves the window.

Single-process only: the counters live in this worker's memory.
Liveness probes are never limited.
"""

import logging
import time
from collections import defaultdict
from typing import Dict, List, Optional

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

from violet.config import Settings, settings as default_settings
from violet.exceptions import RateLimitExceededError
from violet.middleware.logging import is_liveness_path
from violet.middleware.request_id import request_id_var
from violet.schemas.error import ErrorResponse

logger = logging.getLogger(__name__)

# Prune idle IPs every N recorded requests
CLEANUP_INTERVAL = 1000


class RateLimitMiddleware(BaseHTTPMiddleware):
    def __init__(self, app, app_settings: Optional[Settings] = None, **kwargs):
        super().__init__(app, **kwargs)
        self.settings = app_settings or default_settings
        self._requests: Dict[str, List[float]] = defaultdict(list)
        self._recorded = 0

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if is_liveness_path(request.url.path, self.settings.api_base_path):
            return await call_next(request)

        client_ip = request.client.host if request.client else "unknown"
        limit = self.settings.rate_limit_requests
        window = self.settings.rate_limit_window

        now = time.time()
        window_start = now - window
        timestamps = [ts for ts in self._requests[client_ip] if ts > window_start]
        self._requests[client_ip] = timestamps

        if len(timestamps) >= limit:
            retry_after = int(timestamps[0] + window - now) + 1
            logger.warning(
                "Rate limit exceeded for IP %s: %d requests in %ds window",
                client_ip,
                len(timestamps),
                window,
            )
            error = RateLimitExceededError(retry_after=retry_after)
            return JSONResponse(
                status_code=error.status_code,
                content=ErrorResponse.from_error(error, request_id_var.get("")).body(),
                headers={"Retry-After": str(retry_after)},
            )

        timestamps.append(now)
        self._recorded += 1
        if self._recorded % CLEANUP_INTERVAL == 0:
            self._cleanup_inactive_ips(window_start)

        return await call_next(request)

    def _cleanup_inactive_ips(self, window_start: float) -> None:
        inactive_ips = [
            ip for ip, timestamps in self._requests.items()
            if not timestamps or timestamps[-1] < window_start
        ]
        for ip in inactive_ips:
            del self._requests[ip]

        if inactive_ips:
            logger.debug("Cleaned up %d inactive IP entries", len(inactive_ips))
