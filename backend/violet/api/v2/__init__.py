"""Version 2 of the API."""

from violet.api.v2 import clients, management
from violet.routing import ApiRouter, ApiVersion


def register(api_router: ApiRouter) -> None:
    gateway = api_router.register_gateway(ApiVersion.V2)

    clients.register(gateway)
    management.register(gateway)
