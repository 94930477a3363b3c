"""
v2 clients domain: list responses are wrapped in an envelope with a count.
"""

from fastapi import Request, Response

from violet.api import catalogue
from violet.core.result import Outcome, fail, ok
from violet.exceptions import NotFoundError
from violet.routing import RouteGateway

DOMAIN = "clients"


class ClientRoutes:
    GET_MANY = "clients/"
    GET = "clients/:clientId"


async def list_clients(request: Request, response: Response) -> Outcome:
    clients = catalogue.list_clients()
    return ok({"items": clients, "count": len(clients)})


async def get_client(request: Request, response: Response) -> Outcome:
    client_id = request.path_params["clientId"]
    client = catalogue.get_client(client_id)
    if client is None:
        return fail(NotFoundError("client", client_id))
    return ok({"item": client})


def register(gateway: RouteGateway) -> None:
    node = gateway.register_node(DOMAIN)

    node.add_endpoint("get", ClientRoutes.GET_MANY, list_clients)
    node.add_endpoint("get", ClientRoutes.GET, get_client)
