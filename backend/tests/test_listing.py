"""
Violet API Backend - Route Listing Tests
=========================================

What we test:
    ✅ Composite ordering: version, then domain, then verb, then path
    ✅ Listing is identical on every call
    ✅ Base endpoints listed under "base" with "--" for no version
    ✅ Columns padded to the longest value
    ✅ log_route_tree: NOTICE when there is something to show, ALERT on failure
"""

import logging
from types import SimpleNamespace

from violet.logger import ALERT, NOTICE, get_logger
from violet.routing import Endpoint
from violet.routing.listing import (
    HEADER,
    ListedEndpoint,
    collect_endpoints,
    log_route_tree,
    render_listing,
    sort_endpoints,
)


def fake_gateway(version, nodes):
    return SimpleNamespace(version=version, nodes=nodes)


def fake_node(domain, endpoints, version=None):
    return SimpleNamespace(domain=domain, version=version, endpoints=endpoints)


class BrokenGateway:
    version = "v1"

    @property
    def nodes(self):
        raise RuntimeError("listing exploded")


class TestSortEndpoints:

    def test_composite_order(self):
        entries = [
            ListedEndpoint("v2", "b", "get", "/z"),
            ListedEndpoint("v1", "a", "post", "/x"),
            ListedEndpoint("v1", "b", "get", "/w"),
            ListedEndpoint("v1", "a", "get", "/y"),
        ]

        assert sort_endpoints(entries) == [
            ListedEndpoint("v1", "a", "get", "/y"),
            ListedEndpoint("v1", "a", "post", "/x"),
            ListedEndpoint("v1", "b", "get", "/w"),
            ListedEndpoint("v2", "b", "get", "/z"),
        ]

    def test_versions_compare_as_strings(self):
        entries = [
            ListedEndpoint("v2", "a", "get", "/a"),
            ListedEndpoint("--", "base", "get", "/"),
            ListedEndpoint("v1", "a", "get", "/a"),
        ]

        assert [e.version for e in sort_endpoints(entries)] == ["--", "v1", "v2"]

    def test_input_is_not_mutated(self):
        entries = [
            ListedEndpoint("v2", "a", "get", "/a"),
            ListedEndpoint("v1", "a", "get", "/a"),
        ]
        snapshot = list(entries)

        sort_endpoints(entries)

        assert entries == snapshot


class TestCollectEndpoints:

    def test_base_nodes_listed_as_base_domain(self):
        base_root = fake_node(None, [Endpoint("get", "/"), Endpoint("get", "/api")])
        base_v1 = fake_node(None, [Endpoint("get", "/api/v1")], version="v1")

        entries = collect_endpoints([base_root, base_v1], [])

        assert entries == [
            ListedEndpoint("--", "base", "get", "/"),
            ListedEndpoint("--", "base", "get", "/api"),
            ListedEndpoint("v1", "base", "get", "/api/v1"),
        ]

    def test_gateway_nodes_carry_version_and_domain(self):
        node = fake_node("clients", [Endpoint("post", "/api/v1/clients/")], version="v1")

        entries = collect_endpoints([], [fake_gateway("v1", [node])])

        assert entries == [ListedEndpoint("v1", "clients", "post", "/api/v1/clients/")]


class TestRenderListing:

    def test_empty_listing_is_only_the_header(self):
        assert render_listing([]) == HEADER

    def test_columns_are_padded(self):
        text = render_listing([
            ListedEndpoint("--", "base", "get", "/"),
            ListedEndpoint("v1", "clients", "post", "/api/v1/clients/"),
        ])

        assert text.splitlines() == [
            "List of Endpoints routed:",
            "-- base    -> GET  /",
            "v1 clients -> POST /api/v1/clients/",
        ]


class TestRouterListing:

    def test_listing_is_stable_across_calls(self, api_router):
        gateway = api_router.register_gateway("v1")
        gateway.register_node("management").add_endpoint("get", "management/")
        gateway.register_node("clients").add_endpoint("post", "clients/")
        gateway.register_node("clients2").add_endpoint("get", "clients/")

        assert api_router.route_listing() == api_router.route_listing()

    def test_listing_order_for_real_registry(self, api_router):
        gateway = api_router.register_gateway("v1")
        gateway.register_node("management").add_endpoint("get", "management/")
        clients = gateway.register_node("clients")
        clients.add_endpoint("post", "clients/")
        clients.add_endpoint("get", "clients/")

        lines = api_router.route_listing().splitlines()

        assert lines[0] == HEADER
        assert [line.split()[:4] for line in lines[1:]] == [
            ["--", "base", "->", "GET"],
            ["--", "base", "->", "GET"],
            ["v1", "base", "->", "GET"],
            ["v1", "base", "->", "GET"],
            ["v1", "clients", "->", "GET"],
            ["v1", "clients", "->", "POST"],
            ["v1", "management", "->", "GET"],
        ]


class TestLogRouteTree:

    def test_listing_logged_at_notice(self, caplog):
        caplog.set_level(logging.DEBUG, logger="violet.test.listing")
        logger = get_logger("violet.test.listing")
        base = fake_node(None, [Endpoint("get", "/")])

        log_route_tree([base], [], logger)

        assert [r.levelno for r in caplog.records] == [NOTICE]
        assert "-- base -> GET /" in caplog.records[0].getMessage()

    def test_nothing_logged_without_endpoints(self, caplog):
        caplog.set_level(logging.DEBUG, logger="violet.test.listing")

        log_route_tree([], [], get_logger("violet.test.listing"))

        assert caplog.records == []

    def test_failure_alerted_and_swallowed(self, caplog):
        caplog.set_level(logging.DEBUG, logger="violet.test.listing")

        log_route_tree([], [BrokenGateway()], get_logger("violet.test.listing"))

        assert len(caplog.records) == 1
        record = caplog.records[0]
        assert record.levelno == ALERT
        assert "PrintEndpointsError" in record.getMessage()
        assert "listing exploded" in record.getMessage()
