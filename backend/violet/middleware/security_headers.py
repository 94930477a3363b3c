"""
Violet API Backend - Security Headers Middleware
=================================================

What:  Adds the usual hardening headers to every response: clickjacking,
       MIME sniffing and referrer leakage protection, plus HSTS when configured.
"""

from dataclasses import dataclass
from typing import Optional

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response


@dataclass(frozen=True)
class SecurityHeadersConfig:
    x_frame_options: str = "DENY"
    x_content_type_options: str = "nosniff"
    referrer_policy: str = "no-referrer"
    cross_origin_resource_policy: str = "same-origin"
    strict_transport_security: Optional[str] = None


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    def __init__(self, app, config: Optional[SecurityHeadersConfig] = None, **kwargs):
        super().__init__(app, **kwargs)
        self.config = config or SecurityHeadersConfig()

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        response = await call_next(request)

        # setdefault: a handler that set its own value wins
        headers = response.headers
        headers.setdefault("X-Frame-Options", self.config.x_frame_options)
        headers.setdefault("X-Content-Type-Options", self.config.x_content_type_options)
        headers.setdefault("Referrer-Policy", self.config.referrer_policy)
        headers.setdefault("Cross-Origin-Resource-Policy", self.config.cross_origin_resource_policy)
        if self.config.strict_transport_security:
            headers.setdefault("Strict-Transport-Security", self.config.strict_transport_security)
        return response
