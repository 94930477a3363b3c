"""
Violet API Backend - Route Gateway
===================================

What:  Groups the route nodes of one API version.
How:   Creates nodes on request, asking the router whether the domain is
       already taken in this version. Nodes share the gateway's FastAPI
       APIRouter, which the router mounts on activation.

Poison propagation:
    A gateway registered for an already existing version is poisoned, and so
    is every node it creates, whatever their domain. Their endpoint
    registrations are silently dropped.
"""

from typing import List, Optional

from fastapi import APIRouter

from violet.logger import SeverityLogger, get_logger
from violet.routing.node import RouteNode
from violet.routing.types import RegistryQueries


class RouteGateway:
    """Registry entity for one API version."""

    def __init__(
        self,
        registry: RegistryQueries,
        router: APIRouter,
        base_path: str,
        version: str,
        is_duplicated: bool = False,
        logger: Optional[SeverityLogger] = None,
    ):
        self.registry = registry
        self.router = router
        self.base_path = base_path
        self.version = version
        self.is_duplicated = is_duplicated
        self.nodes: List[RouteNode] = []
        self.logger = logger or get_logger("violet.routing")

    def __repr__(self) -> str:
        return (
            f"RouteGateway(version={self.version!r}, nodes={len(self.nodes)}, "
            f"is_duplicated={self.is_duplicated})"
        )

    def register_node(self, domain: str) -> RouteNode:
        """
        Create the node for `domain` in this version.

        The node is always returned and kept in `nodes` (for the listing),
        poisoned when the gateway is or when the domain already exists.
        """
        is_domain_duplicated = self.registry.has_domain_duplicity(domain, self.version)

        node = RouteNode(
            registry=self.registry,
            router=self.router,
            base_path=self.base_path,
            is_duplicated=self.is_duplicated or is_domain_duplicated,
            domain=domain,
            version=self.version,
            logger=self.logger,
        )
        self.nodes.append(node)
        return node
