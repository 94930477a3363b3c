"""
Violet API Backend - API Routes Package
========================================

What:  Declares every version and domain of the public API.
How:   Each version package registers its gateway on the ApiRouter; each
       domain module registers its node and endpoints on the gateway.

Route Inventory:
    v1  clients      GET /clients/, POST /clients/, GET /clients/:clientId
    v1  management   GET /management/, GET /management/:managementId (501)
    v2  clients      GET /clients/, GET /clients/:clientId
    v2  management   GET /management/, GET /management/:managementId (501)
"""

from typing import Optional

from fastapi import FastAPI

from violet.config import Settings
from violet.routing import ApiRouter


def register_routes(app: FastAPI, app_settings: Optional[Settings] = None) -> ApiRouter:
    """Register every version on a fresh ApiRouter and activate it."""
    from violet.api import v1, v2

    api_router = ApiRouter(app, app_settings=app_settings)

    v1.register(api_router)
    v2.register(api_router)

    api_router.activate()
    return api_router
