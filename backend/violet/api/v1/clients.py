"""
v1 clients domain.

    GET  /api/v1/clients/            list clients
    POST /api/v1/clients/            create a client
    GET  /api/v1/clients/:clientId   one client
"""

import json

from fastapi import Request, Response

from violet.api import catalogue
from violet.core.result import Outcome, fail, ok
from violet.exceptions import NotFoundError, ValidationError
from violet.routing import RouteGateway

DOMAIN = "clients"


class ClientRoutes:
    GET_MANY = "clients/"
    CREATE = "clients/"
    GET = "clients/:clientId"


async def list_clients(request: Request, response: Response) -> Outcome:
    clients = catalogue.list_clients()
    response.headers["X-Total-Count"] = str(len(clients))
    return ok(clients)


async def get_client(request: Request, response: Response) -> Outcome:
    client_id = request.path_params["clientId"]
    client = catalogue.get_client(client_id)
    if client is None:
        return fail(NotFoundError("client", client_id))
    return ok(client)


async def create_client(request: Request, response: Response) -> Outcome:
    try:
        body = await request.json()
    except json.JSONDecodeError:
        return fail(ValidationError("Request body must be JSON"))

    if not isinstance(body, dict):
        return fail(ValidationError("Request body must be a JSON object"))

    name = body.get("name")
    email = body.get("email")
    for field, value in (("name", name), ("email", email)):
        if not value:
            return fail(ValidationError(f"'{field}' is required", field=field))

    return ok(catalogue.add_client(name, email), status_code=201)


def register(gateway: RouteGateway) -> None:
    node = gateway.register_node(DOMAIN)

    node.add_endpoint("get", ClientRoutes.GET_MANY, list_clients)
    node.add_endpoint("post", ClientRoutes.CREATE, create_client)
    node.add_endpoint("get", ClientRoutes.GET, get_client)
