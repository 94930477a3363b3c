"""
Violet API Backend - Route Registry
====================================

What:  Hierarchical registration of versioned, domain-grouped endpoints.

    ApiRouter ──┬── RouteGateway (v1) ──┬── RouteNode (clients) ── endpoints
                │                       └── RouteNode (management) ── endpoints
                ├── RouteGateway (v2) ── ...
                └── base RouteNodes (liveness, monitoring probes)

Entry points:
    ApiRouter(app).register_gateway(version).register_node(domain).add_endpoint(...)
    ApiRouter.activate()
"""

from violet.routing.gateway import RouteGateway
from violet.routing.listing import ListedEndpoint, build_listing, log_route_tree
from violet.routing.node import RouteNode
from violet.routing.router import ApiRouter
from violet.routing.types import ApiVersion, Endpoint, RegistryQueries, RestVerb

__all__ = [
    "ApiRouter",
    "ApiVersion",
    "Endpoint",
    "ListedEndpoint",
    "RegistryQueries",
    "RestVerb",
    "RouteGateway",
    "RouteNode",
    "build_listing",
    "log_route_tree",
]
