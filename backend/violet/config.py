"""
Violet API Backend - Application Configuration
===============================================

What:  Centralized configuration management using Pydantic Settings.
Why:   Type-safe environment variable loading with validation on startup.
How:   Pydantic Settings reads from environment variables (or .env file),
       validates types/ranges, and provides a singleton `settings` object.
Who:   Read by the app factory, the route registry and the middleware.
When:  Loaded once at module import time; consumed read-only afterwards.
"""

from typing import List, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

from violet.logger import LEVEL_NAMES


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings have sensible defaults for development.
    """

    # ── Routing ───────────────────────────────────────────────────────────
    # What: Prefix prepended to every registered path (/api/v1/clients, ...)
    # Format: leading slash, no trailing slash; empty string mounts at root
    api_base_path: str = Field(default="/api")

    # What: Emit the sorted table of registered endpoints after activation
    log_routing_tree: bool = Field(default=True)

    @field_validator("api_base_path")
    @classmethod
    def normalize_base_path(cls, v: str) -> str:
        """'api/' and '/api' both become '/api'; '/' becomes ''."""
        stripped = v.strip().strip("/")
        return f"/{stripped}" if stripped else ""

    # ── Environment ───────────────────────────────────────────────────────
    # What: Deployment target, reported by the liveness endpoints
    server_environment: Literal[
        "development", "local", "production", "testing", "automation"
    ] = Field(default="development")

    # What: Log the effective settings once at startup
    log_environment: bool = Field(default=False)

    # ── Server ────────────────────────────────────────────────────────────
    backend_host: str = Field(default="0.0.0.0")
    backend_port: int = Field(default=8000, ge=1024, le=65535)

    # Valid: DEBUG, INFO, NOTICE, WARNING, ERROR, CRITICAL, ALERT, EMERGENCY
    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensures log level is a known severity name."""
        upper = v.upper()
        if upper not in LEVEL_NAMES:
            raise ValueError(f"Invalid log_level '{v}'. Must be one of: {sorted(LEVEL_NAMES)}")
        return upper

    # ── CORS ──────────────────────────────────────────────────────────────
    # Format: Comma-separated URLs
    cors_origins: str = Field(default="http://localhost:3000")

    @property
    def cors_origins_list(self) -> List[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    # ── Rate Limiting ─────────────────────────────────────────────────────
    # What: Per-IP sliding window rate limit
    rate_limit_requests: int = Field(default=100, ge=10, le=10000)
    rate_limit_window: int = Field(default=900, ge=60, le=86400)  # seconds

    # ── Security Headers ──────────────────────────────────────────────────
    security_headers_enabled: bool = Field(default=True)

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
    }


# Singleton instance, imported throughout the application
settings = Settings()
