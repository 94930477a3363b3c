"""
Violet API Backend - API Router (route registry root)
======================================================

What:  Root of the route registry: owns every version gateway and the base
       (liveness / monitoring) nodes, answers every duplication question, and
       mounts the accumulated routes on the FastAPI app.
Why:   Handler code declares versioned, domain-grouped endpoints without
       worrying about collisions. The router guarantees, before the first
       request is served, that there is at most one gateway per version, one
       node per domain and version, and one endpoint per
       (version, domain, verb, path).
How:   Gateways and nodes receive the router as a RegistryQueries and consult
       it before accepting a registration. Nothing is raised during
       registration: a duplicate yields an inert (poisoned) object and a log
       entry.

Lifecycle:
    router = ApiRouter(app)
    gateway = router.register_gateway("v1")
    node = gateway.register_node("clients")
    node.add_endpoint("get", "clients/:clientId", get_client)
    router.activate()      # mount everything, log the route listing

Duplicate scope:
    The endpoint check scans every node of the version but only matches
    endpoints on nodes of the same domain, so (version, domain, verb, uri)
    is the uniqueness key.
"""

from typing import List, Optional, Union

from fastapi import APIRouter, FastAPI

from violet.config import Settings, settings as default_settings
from violet.logger import SeverityLogger, get_logger
from violet.routing.errors import (
    DomainNotFoundError,
    DuplicatedDomainError,
    DuplicatedEndpointError,
    DuplicatedVersionError,
    GatewayActivationError,
    UnsupportedVersionError,
    VersionNotFoundError,
)
from violet.routing.gateway import RouteGateway
from violet.routing.listing import build_listing, log_route_tree
from violet.routing.node import RouteNode
from violet.routing.types import ApiVersion

MONITORING_ROUTE = "debug-monitoring"


class ApiRouter:
    """
    Creates, validates and activates the API route tree.

    - Prevents declaring two equal API versions.
    - Prevents declaring two equal domains within a version.
    - Prevents declaring two endpoints whose components are identical.
    - Only allows the RestVerb verbs.
    - Logs the tree of registered endpoints after activation.
    """

    def __init__(
        self,
        app: FastAPI,
        app_settings: Optional[Settings] = None,
        logger: Optional[SeverityLogger] = None,
    ):
        self.app = app
        self.settings = app_settings or default_settings
        self.base_path = self.settings.api_base_path
        self.logger = logger or get_logger("violet.routing")
        self.ping_message = f"[API Online] Target: {self.settings.server_environment}"

        self.gateways: List[RouteGateway] = []
        self.base_nodes: List[RouteNode] = []
        self.is_active = False

        self.base_router = APIRouter()
        self._add_base_endpoints()

    # ── Registration ──────────────────────────────────────────────────────

    def register_gateway(self, version: Union[ApiVersion, str]) -> RouteGateway:
        """
        Create the gateway where the domains of `version` are registered.

        A duplicated or unsupported version still returns a gateway, poisoned
        so that nothing registered beneath it is ever routed.
        """
        try:
            version = ApiVersion(version).value
            is_supported = True
        except ValueError:
            self.logger.alert("%s", UnsupportedVersionError(version))
            version = str(version)
            is_supported = False

        is_duplicated = self.has_version_duplicity(version) or not is_supported

        gateway = RouteGateway(
            registry=self,
            router=APIRouter(),
            base_path=self.base_path,
            version=version,
            is_duplicated=is_duplicated,
            logger=self.logger,
        )
        self.gateways.append(gateway)

        if is_supported:
            self._add_gateway_base_endpoints(gateway)

        return gateway

    def _add_base_endpoints(self) -> None:
        """Liveness probes at "/" and at the bare base path."""
        node = self._base_node(self.base_router)
        node.add_base_endpoint("/")
        if self.base_path:
            node.add_base_endpoint(self.base_path)

    def _add_gateway_base_endpoints(self, gateway: RouteGateway) -> None:
        """Liveness probe and monitoring probe of one version."""
        node = self._base_node(gateway.router, version=gateway.version)
        node.add_base_endpoint(f"{self.base_path}/{gateway.version}")
        node.add_monitoring_endpoint(f"{self.base_path}/{gateway.version}/{MONITORING_ROUTE}")

    def _base_node(self, router: APIRouter, version: Optional[str] = None) -> RouteNode:
        node = RouteNode(
            registry=self,
            router=router,
            base_path=self.base_path,
            version=version,
            logger=self.logger,
            ping_message=self.ping_message,
        )
        self.base_nodes.append(node)
        return node

    # ── Activation ────────────────────────────────────────────────────────

    def activate(self) -> None:
        """
        Mount every gateway's routes on the app, then log the route listing.

        Best effort: a gateway that fails to mount is logged at EMERGENCY
        and the remaining gateways are still mounted.
        """
        if self.is_active:
            self.logger.warning("ApiRouter.activate() called twice; routes are already mounted")
            return

        for router, version in [(self.base_router, None)] + [
            (g.router, g.version) for g in self.gateways
        ]:
            try:
                self.app.include_router(router)
            except Exception as exc:
                self.logger.emergency(
                    "%s", GatewayActivationError(context={"version": version}, cause=exc)
                )

        self.is_active = True

        if self.settings.log_routing_tree:
            log_route_tree(self.base_nodes, self.gateways, self.logger)

    def route_listing(self) -> str:
        return build_listing(self.base_nodes, self.gateways)

    # ── Duplication queries ───────────────────────────────────────────────

    def _find_gateway(self, version: Optional[str]) -> Optional[RouteGateway]:
        return next((g for g in self.gateways if g.version == version), None)

    def has_version_duplicity(self, version: str) -> bool:
        """True if a gateway already exists for `version`."""
        if self._find_gateway(version) is not None:
            self.logger.warning("%s", DuplicatedVersionError(version))
            return True
        return False

    def has_domain_duplicity(self, domain: str, version: str) -> bool:
        """
        True if `domain` already has a node in `version`.

        An unknown version also answers True: nothing can be validated
        against a gateway that doesn't exist.
        """
        gateway = self._find_gateway(version)
        if gateway is None:
            self.logger.alert("%s", VersionNotFoundError(version))
            return True

        if any(node.domain == domain for node in gateway.nodes):
            self.logger.warning("%s", DuplicatedDomainError(domain, version))
            return True

        return False

    def has_uri_duplicity(
        self,
        *,
        uri: str,
        verb: str,
        domain: Optional[str] = None,
        version: Optional[str] = None,
    ) -> bool:
        """
        True if the endpoint already exists.

        Without domain or version the endpoint is a base endpoint, checked on
        (uri, verb) against every base node.
        """
        if domain is None or version is None:
            return self._has_base_endpoint_duplicity(uri, verb)
        return self._has_endpoint_duplicity(domain, uri, verb, version)

    def _has_base_endpoint_duplicity(self, uri: str, verb: str) -> bool:
        for node in self.base_nodes:
            for endpoint in node.endpoints:
                if endpoint.uri == uri and endpoint.verb == verb:
                    self.logger.warning("%s", DuplicatedEndpointError(uri, verb))
                    return True
        return False

    def _has_endpoint_duplicity(self, domain: str, uri: str, verb: str, version: str) -> bool:
        gateway = self._find_gateway(version)
        if gateway is None:
            self.logger.alert("%s", VersionNotFoundError(version))
            return True

        if not any(node.domain == domain for node in gateway.nodes):
            self.logger.alert("%s", DomainNotFoundError(domain))
            return True

        for node in gateway.nodes:
            for endpoint in node.endpoints:
                if endpoint.uri == uri and endpoint.verb == verb and node.domain == domain:
                    self.logger.warning("%s", DuplicatedEndpointError(uri, verb))
                    return True

        return False
