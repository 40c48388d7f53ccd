"""
Main entrypoint for the Record API.

This module assembles the FastAPI application: it sets up logging,
builds the stores, repositories and services, registers the error
handlers and includes the API router under ``/api``.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``, e.g.::

    uvicorn record_api.app.main:app --reload
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from .api.router import router as api_router
from .core.config import Settings, settings as default_settings
from .core.db import ConnectionPool, init_db
from .core.errors import StoreUnavailableError
from .core.logging_config import setup_logging
from .repositories.player_repository import InMemoryPlayerRepository
from .repositories.product_repository import InMemoryProductRepository
from .repositories.user_repository import SQLiteUserRepository
from .services.player_service import PlayerService
from .services.product_service import ProductService
from .services.user_service import UserService

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Settings to use instead of the ones read from the environment.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    # Initialise logging before anything else so that the setup below
    # can safely log messages.
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version)

    pool = ConnectionPool.from_settings(settings)
    app.state.settings = settings
    app.state.pool = pool
    app.state.player_service = PlayerService(InMemoryPlayerRepository.seeded(settings.player_seed_count))
    app.state.user_service = UserService(SQLiteUserRepository(pool))
    app.state.product_service = ProductService(InMemoryProductRepository())

    app.include_router(api_router, prefix="/api")

    @app.get("/health", tags=["health"])
    async def health() -> dict:
        return {"status": "ok"}

    @app.exception_handler(StoreUnavailableError)
    async def store_unavailable_handler(request: Request, exc: StoreUnavailableError) -> JSONResponse:
        logger.error("Store unavailable while handling %s %s: %s", request.method, request.url.path, exc)
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"detail": "Service temporarily unavailable, please try again later"},
        )

    @app.on_event("startup")
    async def startup_event() -> None:
        # Creates the database file if it does not exist and brings the
        # schema up to date.
        init_db(pool)
        logger.info("Database ready at %s", pool.path)
        if settings.api_key:
            logger.info("API key authentication enabled")

    @app.on_event("shutdown")
    async def shutdown_event() -> None:
        pool.close()

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
