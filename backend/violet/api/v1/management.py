"""
v1 management domain. The single-resource endpoint has no handler yet and
answers 501 Not Implemented.
"""

from fastapi import Request, Response

from violet import __version__
from violet.core.result import Outcome, ok
from violet.routing import RouteGateway

DOMAIN = "management"


class ManagementRoutes:
    GET_MANY = "management/"
    GET = "management/:managementId"


def get_management_info(request: Request, response: Response) -> Outcome:
    return ok({"service": "violet-api", "version": __version__})


def register(gateway: RouteGateway) -> None:
    node = gateway.register_node(DOMAIN)

    node.add_endpoint("get", ManagementRoutes.GET_MANY, get_management_info)
    node.add_endpoint("get", ManagementRoutes.GET)
