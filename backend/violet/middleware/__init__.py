"""
Violet API Backend - Middleware Package
========================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain (order matters!):
    Request → [Request ID] → [Rate Limit] → [Logging] → [Security Headers]
            → [CORS] → Route

    Request ID runs first so a rejected (429) request still carries an id.
"""

from violet.middleware.logging import RequestLoggingMiddleware
from violet.middleware.rate_limit import RateLimitMiddleware
from violet.middleware.request_id import RequestIDMiddleware, request_id_var
from violet.middleware.security_headers import SecurityHeadersConfig, SecurityHeadersMiddleware

__all__ = [
    "RateLimitMiddleware",
    "RequestIDMiddleware",
    "RequestLoggingMiddleware",
    "SecurityHeadersConfig",
    "SecurityHeadersMiddleware",
    "request_id_var",
]
