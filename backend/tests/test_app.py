"""
Violet API Backend - Application Integration Tests
===================================================

What:  The fully assembled app: middleware, exception handlers and the v1/v2
       routes registered through the ApiRouter.
How:   HTTPX AsyncClient against create_app(test_settings), one app per test.

What we test:
    ✅ Liveness probes and the monitoring probe
    ✅ v1 / v2 client endpoints (found, not found, create, validation)
    ✅ Endpoints without a handler answer 501
    ✅ X-Request-ID and security headers on every response
    ✅ Rate limit answers 429 with Retry-After
    ✅ Building an app leaves root logging handlers in place
"""

import logging
from unittest.mock import AsyncMock, MagicMock

import pytest

from violet.api.v1 import clients as v1_clients
from violet.logger import NOTICE
from violet.main import create_app

PING = "[API Online] Target: testing"


class TestLiveness:

    @pytest.mark.asyncio
    @pytest.mark.parametrize("path", ["/", "/api", "/api/v1", "/api/v2"])
    async def test_ping(self, test_client, path):
        response = await test_client.get(path)

        assert response.status_code == 200
        assert response.text == PING

    @pytest.mark.asyncio
    async def test_monitoring_endpoint_fails_on_purpose(self, test_client):
        response = await test_client.get("/api/v1/debug-monitoring")

        assert response.status_code == 500
        body = response.json()
        assert body["error"] == "MonitoringFalsePositiveError"
        assert body["request_id"] == response.headers["X-Request-ID"]

    @pytest.mark.asyncio
    async def test_unknown_path_is_404(self, test_client):
        response = await test_client.get("/api/v3/clients/")

        assert response.status_code == 404


class TestV1Clients:

    @pytest.mark.asyncio
    async def test_list(self, test_client):
        response = await test_client.get("/api/v1/clients/")

        assert response.status_code == 200
        names = [client["name"] for client in response.json()]
        assert "Acme Corp" in names
        assert response.headers["X-Total-Count"] == str(len(names))

    @pytest.mark.asyncio
    async def test_get_existing(self, test_client):
        response = await test_client.get("/api/v1/clients/1")

        assert response.status_code == 200
        assert response.json()["name"] == "Acme Corp"

    @pytest.mark.asyncio
    async def test_get_missing_is_404(self, test_client):
        response = await test_client.get("/api/v1/clients/999")

        assert response.status_code == 404
        assert response.json()["error"] == "NotFoundError"

    @pytest.mark.asyncio
    async def test_create(self, test_client):
        response = await test_client.post(
            "/api/v1/clients/", json={"name": "Initech", "email": "hello@initech.test"}
        )

        assert response.status_code == 201
        created = response.json()
        assert created["name"] == "Initech"

        fetched = await test_client.get(f"/api/v1/clients/{created['id']}")
        assert fetched.json() == created

    @pytest.mark.asyncio
    async def test_create_requires_name_and_email(self, test_client):
        response = await test_client.post("/api/v1/clients/", json={"name": "No Mail"})

        assert response.status_code == 400
        assert response.json()["error"] == "ValidationError"
        assert response.json()["message"] == "'email' is required"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "payload, missing",
        [
            ({"email": "a@b.test"}, "name"),
            ({"name": "No Mail"}, "email"),
            ({"name": "", "email": "a@b.test"}, "name"),
        ],
    )
    async def test_validation_error_names_the_missing_field(self, payload, missing):
        request = MagicMock()
        request.json = AsyncMock(return_value=payload)

        outcome = await v1_clients.create_client(request, MagicMock())

        assert outcome.status_code == 400
        assert outcome.error.field == missing

    @pytest.mark.asyncio
    async def test_create_rejects_non_json_body(self, test_client):
        response = await test_client.post(
            "/api/v1/clients/", content=b"not json", headers={"Content-Type": "text/plain"}
        )

        assert response.status_code == 400


class TestV2Clients:

    @pytest.mark.asyncio
    async def test_list_is_wrapped_with_count(self, test_client):
        response = await test_client.get("/api/v2/clients/")

        assert response.status_code == 200
        body = response.json()
        assert body["count"] == len(body["items"])

    @pytest.mark.asyncio
    async def test_get_is_wrapped(self, test_client):
        response = await test_client.get("/api/v2/clients/2")

        assert response.json() == {
            "item": {"id": "2", "name": "Globex", "email": "it@globex.test"}
        }

    @pytest.mark.asyncio
    async def test_create_not_routed_in_v2(self, test_client):
        response = await test_client.post("/api/v2/clients/", json={"name": "x", "email": "y"})

        assert response.status_code == 405


class TestManagement:

    @pytest.mark.asyncio
    async def test_v1_info(self, test_client):
        response = await test_client.get("/api/v1/management/")

        assert response.status_code == 200
        assert response.json()["service"] == "violet-api"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "path", ["/api/v1/management/7", "/api/v2/management/", "/api/v2/management/7"]
    )
    async def test_unimplemented_endpoints_answer_501(self, test_client, path):
        response = await test_client.get(path)

        assert response.status_code == 501
        assert response.content == b""


class TestMiddleware:

    @pytest.mark.asyncio
    async def test_request_id_generated(self, test_client):
        response = await test_client.get("/api/v1/clients/")

        assert len(response.headers["X-Request-ID"]) == 8

    @pytest.mark.asyncio
    async def test_request_id_echoed(self, test_client):
        response = await test_client.get("/api", headers={"X-Request-ID": "trace-123"})

        assert response.headers["X-Request-ID"] == "trace-123"

    @pytest.mark.asyncio
    async def test_security_headers(self, test_client):
        response = await test_client.get("/api/v1/clients/")

        assert response.headers["X-Frame-Options"] == "DENY"
        assert response.headers["X-Content-Type-Options"] == "nosniff"
        assert response.headers["Referrer-Policy"] == "no-referrer"

    @pytest.mark.asyncio
    async def test_rate_limit(self, test_client, test_settings):
        for _ in range(test_settings.rate_limit_requests):
            response = await test_client.get("/api/v1/management/")
            assert response.status_code == 200

        limited = await test_client.get("/api/v1/management/")

        assert limited.status_code == 429
        assert limited.json()["error"] == "RateLimitExceededError"
        assert int(limited.headers["Retry-After"]) > 0
        assert "X-Request-ID" in limited.headers

    @pytest.mark.asyncio
    async def test_liveness_not_rate_limited(self, test_client, test_settings):
        for _ in range(test_settings.rate_limit_requests + 5):
            response = await test_client.get("/api")

        assert response.status_code == 200


class TestLoggingSetup:

    def test_create_app_keeps_root_handlers(self, test_settings):
        root = logging.getLogger()
        handler = logging.NullHandler()
        root.addHandler(handler)
        try:
            create_app(test_settings)

            assert handler in root.handlers
        finally:
            root.removeHandler(handler)

    def test_route_listing_captured_from_create_app(self, test_settings, caplog):
        caplog.set_level(logging.DEBUG, logger="violet.routing")

        create_app(test_settings)

        notices = [r for r in caplog.records if r.levelno == NOTICE]
        assert len(notices) == 1
        assert "/api/v2/clients/:clientId" in notices[0].getMessage()
