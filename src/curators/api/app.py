"""FastAPI application factory."""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from curators.api.routes import health, register_routes
from curators.config import get_settings
from curators.services import ServiceRegistry, create_service_registry


def create_app(services: Optional[ServiceRegistry] = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()
    services = services or create_service_registry(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan handler."""
        yield
        # Shutdown
        await services.close()

    app = FastAPI(
        title="Curators API",
        description="Solana swap quotes and unsigned swap transactions",
        version="0.1.0",
        lifespan=lifespan,
        debug=settings.debug,
    )
    app.state.services = services

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Register routes
    app.include_router(health.router, tags=["Health"])
    register_routes(app, services)

    return app
