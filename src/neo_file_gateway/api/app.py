"""File gateway FastAPI application.

Builds the app with its middleware stack, exception handlers and routers.
Shared state (settings, storage root, identity provider) is attached to
`app.state` once and handed out by the dependencies.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ..config.settings import GatewaySettings, get_settings
from ..core.value_objects import StorageRoot
from ..platform.auth import HttpIdentityProvider, IdentityProvider
from .exception_handlers import register_exception_handlers
from .middleware import RequestLoggingMiddleware
from .routers import files_router, static_router, system_router

logger = logging.getLogger(__name__)


def _build_lifespan(owns_identity_provider: bool):
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan handler."""
        settings: GatewaySettings = app.state.settings
        logger.info(f"Starting {settings.app_name} with {settings.get_service_specific_config()}")

        yield

        if owns_identity_provider:
            await app.state.identity_provider.aclose()
        logger.info(f"{settings.app_name} stopped")

    return lifespan


def create_app(
    settings: Optional[GatewaySettings] = None,
    identity_provider: Optional[IdentityProvider] = None,
) -> FastAPI:
    """Create the file gateway application.

    Args:
        settings: Settings to use, loaded from the environment when omitted
        identity_provider: Identity provider to use, the HTTP delegate when omitted

    Returns:
        Configured FastAPI application

    Raises:
        ConfigurationError: If the storage root does not exist
    """
    settings = settings or get_settings()
    storage_root = StorageRoot.from_string(settings.storage_root)

    owns_identity_provider = identity_provider is None
    if identity_provider is None:
        identity_provider = HttpIdentityProvider(
            base_url=settings.identity_service_url,
            timeout=settings.identity_timeout_seconds,
        )

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Multi-tenant file gateway with delegated authentication",
        debug=settings.debug,
        lifespan=_build_lifespan(owns_identity_provider),
    )

    app.state.settings = settings
    app.state.storage_root = storage_root
    app.state.identity_provider = identity_provider

    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app, is_production=settings.is_production)

    app.include_router(system_router)
    app.include_router(files_router)
    app.include_router(static_router)

    logger.info(f"Created {settings.app_name} serving {storage_root}")
    return app
