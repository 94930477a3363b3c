"""Version 1 of the API: clients and management domains."""

from violet.api.v1 import clients, management
from violet.routing import ApiRouter, ApiVersion


def register(api_router: ApiRouter) -> None:
    gateway = api_router.register_gateway(ApiVersion.V1)

    clients.register(gateway)
    management.register(gateway)
