"""
Violet API Backend - Test Configuration (conftest.py)
======================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy:
    ├── test_settings: Settings isolated from the environment singleton
    ├── fastapi_app: Bare FastAPI app (no middleware, no routes)
    ├── api_router: ApiRouter bound to fastapi_app
    ├── client_for: Builds an HTTPX AsyncClient for any ASGI app
    └── test_client: HTTPX AsyncClient on the fully assembled application
"""

import os

# Override settings for testing BEFORE any violet imports
os.environ["API_BASE_PATH"] = "/api"
os.environ["SERVER_ENVIRONMENT"] = "testing"
os.environ["LOG_LEVEL"] = "WARNING"  # Reduce noise during tests

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from violet.config import Settings
from violet.routing import ApiRouter


@pytest.fixture
def test_settings():
    """
    Settings built explicitly, so tests don't depend on a developer's .env.
    """
    return Settings(
        _env_file=None,
        api_base_path="/api",
        server_environment="testing",
        log_routing_tree=True,
        log_level="WARNING",
        rate_limit_requests=10,
        rate_limit_window=60,
    )


@pytest.fixture
def fastapi_app():
    return FastAPI()


@pytest.fixture
def api_router(fastapi_app, test_settings):
    """A fresh registry on a bare app. Call activate() to mount routes."""
    return ApiRouter(fastapi_app, app_settings=test_settings)


@pytest.fixture
def client_for():
    """
    Returns a function building an AsyncClient for an ASGI app.

    Usage:
        async with client_for(app) as client:
            response = await client.get("/api")
    """

    def _client(app):
        transport = ASGITransport(app=app)
        return AsyncClient(transport=transport, base_url="http://test")

    return _client


@pytest_asyncio.fixture
async def test_client(test_settings):
    """
    HTTPX AsyncClient talking to the complete application (middleware,
    exception handlers, v1 and v2 routes).
    """
    from violet.main import create_app

    app = create_app(test_settings)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
