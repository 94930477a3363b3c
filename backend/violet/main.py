"""
Violet API Backend - FastAPI Application Factory
=================================================

What:  Creates and configures the FastAPI application instance.
Why:   Centralizes app configuration, middleware registration, route
       registration and lifecycle management in one place.
How:   Factory pattern: create_app() returns a configured FastAPI instance.
Who:   Called by uvicorn to start the server (uvicorn violet.main:app).
When:  Once at server startup; the returned app handles all subsequent requests.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  Req ID → Rate Limit → Logging → Security → CORS    │
    │                                                     │
    │  Routes (ApiRouter, activated at creation):         │
    │  /  /api  /api/v1  /api/v1/debug-monitoring         │
    │  /api/v1/clients/...  /api/v2/clients/...           │
    │                                                     │
    │  Exception Handlers:                                │
    │  VioletError → its status │ Exception → 500         │
    └─────────────────────────────────────────────────────┘

Startup order:
    1. Logging is configured once at import, before the module-level app
       registers its routes, so duplicate registration warnings and the route
       listing reach the log. create_app() itself leaves logging alone.
    2. Routes are registered and activated inside create_app(), before the
       server accepts its first connection.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from violet import __version__
from violet.api import register_routes
from violet.config import Settings, settings as default_settings
from violet.exceptions import RateLimitExceededError, VioletError
from violet.logger import get_logger, setup_logging
from violet.middleware.logging import RequestLoggingMiddleware
from violet.middleware.rate_limit import RateLimitMiddleware
from violet.middleware.request_id import RequestIDMiddleware, request_id_var
from violet.middleware.security_headers import SecurityHeadersMiddleware
from violet.routing.errors import MonitoringFalsePositiveError
from violet.schemas.error import ErrorResponse

logger = get_logger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Map exceptions that escape a route to structured JSON responses.

    Endpoint handlers registered through the ApiRouter never let exceptions
    escape (the route proxy converts them), so these handlers mostly serve
    the monitoring probe and anything mounted outside the registry.

    Handler hierarchy:
        RateLimitExceededError       → 429 + Retry-After
        MonitoringFalsePositiveError → 500, logged as intentional
        VioletError (base)           → error.status_code
        Exception (fallback)         → 500, generic message

    Security: responses never carry stack traces or the underlying cause.
    """

    @app.exception_handler(RateLimitExceededError)
    async def handle_rate_limit(request: Request, exc: RateLimitExceededError):
        rid = request_id_var.get("")
        return JSONResponse(
            status_code=exc.status_code,
            content=ErrorResponse.from_error(exc, rid).body(),
            headers={"Retry-After": str(exc.retry_after)},
        )

    @app.exception_handler(VioletError)
    async def handle_violet_error(request: Request, exc: VioletError):
        rid = request_id_var.get("")
        if isinstance(exc, MonitoringFalsePositiveError):
            logger.warning("[%s] Monitoring probe triggered: %s", rid, exc)
        elif exc.status_code >= 500:
            logger.error("[%s] %s | Context: %s", rid, exc, exc.context)
        else:
            logger.warning("[%s] %s", rid, exc)
        return JSONResponse(
            status_code=exc.status_code,
            content=ErrorResponse.from_error(exc, rid).body(),
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        rid = request_id_var.get("")
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        return JSONResponse(
            status_code=500,
            content={
                "error": "internal_server_error",
                "message": "An unexpected error occurred. Please try again or contact support.",
                "request_id": rid,
            },
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns: Fully configured FastAPI instance with every route mounted.

    Passing `app_settings` builds an isolated app (tests, alternative base
    paths) without touching the module-level settings singleton.
    """
    app_settings = app_settings or default_settings

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        logger.notice("Violet API %s starting (%s)", __version__, app_settings.server_environment)
        if app_settings.log_environment:
            logger.notice("Environment: %s", app_settings.model_dump_json())
        logger.notice(
            "Running at http://%s:%d%s",
            app_settings.backend_host,
            app_settings.backend_port,
            app_settings.api_base_path,
        )

        yield

        logger.notice("Violet API shutting down")

    app = FastAPI(
        title="Violet API",
        description="Versioned REST API whose routes are declared through the Violet route registry.",
        version=__version__,
        lifespan=lifespan,
    )

    # ── Register Middleware ───────────────────────────────────────────────
    # Last added = first to execute: RequestID → RateLimit → Logging →
    # SecurityHeaders → CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID", "X-Total-Count", "Retry-After"],
    )
    if app_settings.security_headers_enabled:
        app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(RequestLoggingMiddleware, app_settings=app_settings)
    app.add_middleware(RateLimitMiddleware, app_settings=app_settings)
    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.state.api_router = register_routes(app, app_settings)

    return app


# Root logging is process-wide: configured once here, never per app
setup_logging(default_settings.log_level)
app = create_app()
