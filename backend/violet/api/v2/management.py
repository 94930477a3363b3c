"""v2 management domain, not implemented yet (501 on every endpoint)."""

from violet.routing import RouteGateway

DOMAIN = "management"


class ManagementRoutes:
    GET_MANY = "management/"
    GET = "management/:managementId"


def register(gateway: RouteGateway) -> None:
    node = gateway.register_node(DOMAIN)

    node.add_endpoint("get", ManagementRoutes.GET_MANY)
    node.add_endpoint("get", ManagementRoutes.GET)
