"""API route registration.

Every route group is mounted under ``API_PREFIX`` and receives the same
service registry.
"""

from fastapi import APIRouter, FastAPI

from curators.api.routes.auth_routes import register_auth_routes
from curators.api.routes.lst_routes import register_lst_routes
from curators.api.routes.network_routes import register_network_routes
from curators.api.routes.swap_routes import register_swap_routes
from curators.api.routes.transaction_routes import register_transaction_routes
from curators.api.routes.user_routes import register_user_routes
from curators.services import ServiceRegistry

API_PREFIX = "/api/v1"

ROUTE_REGISTRARS = (
    register_auth_routes,
    register_user_routes,
    register_lst_routes,
    register_swap_routes,
    register_network_routes,
    register_transaction_routes,
)


def register_routes(app: FastAPI, service_registry: ServiceRegistry) -> None:
    """Register all API routes.

    Args:
        app: The FastAPI application
        service_registry: The service registry passed to every route group
    """
    api = APIRouter(prefix=API_PREFIX)
    for register in ROUTE_REGISTRARS:
        register(api, service_registry)
    app.include_router(api)


__all__ = [
    "API_PREFIX",
    "ROUTE_REGISTRARS",
    "register_routes",
]
