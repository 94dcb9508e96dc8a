"""
scaffold_service.api.app

FastAPI app factory (composition root).

Responsibilities:
- Build the FastAPI application and register routers/middleware/error handlers.
- Create the database client on startup, or run without one when it is not
  configured or cannot connect.
- Build the dependency container and dispose shared resources on shutdown.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from scaffold_service import __version__
from scaffold_service.api.docs import build_docs_router
from scaffold_service.api.errors import register_exception_handlers
from scaffold_service.api.routers.health import router as health_router
from scaffold_service.api.routers.messages import router as messages_router
from scaffold_service.db.client import DatabaseClient
from scaffold_service.db.init_db import init_db
from scaffold_service.observability.logging import configure_logging, get_logger
from scaffold_service.observability.middleware import RequestContextMiddleware
from scaffold_service.settings import Settings
from scaffold_service.wiring import build_container

log = get_logger(__name__)


async def connect_database(settings: Settings) -> DatabaseClient | None:
    """Return a connected client, or None when the service must run without a database."""

    if not settings.database_url:
        log.warning("database_url_missing", detail="Database client will not be initialized.")
        return None

    database: DatabaseClient | None = None
    try:
        database = DatabaseClient.from_url(settings.database_url)
        await database.connect()
        if settings.env in ("development", "test"):
            # Dev/test convenience: create tables automatically.
            await init_db(database.engine)
    except Exception:
        # Any setup failure, a missing driver module included, means degraded mode.
        log.exception("database_connection_failed", detail="Continuing without database.")
        if database is not None:
            await database.disconnect()
        return None
    return database


def create_app(*, settings: Settings) -> FastAPI:
    configure_logging(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        log.info("startup", env=settings.env)
        database = await connect_database(settings)
        app.state.database = database
        app.state.container = build_container(database)
        try:
            yield
        finally:
            if database is not None:
                await database.disconnect()
            log.info("shutdown")

    app = FastAPI(
        title="Scaffold Service",
        version=__version__,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        lifespan=lifespan,
    )

    app.add_middleware(RequestContextMiddleware)
    register_exception_handlers(app)
    app.include_router(build_docs_router(settings))
    app.include_router(health_router, tags=["health"])
    app.include_router(messages_router)

    return app


# --- Module Notes -----------------------------------------------------------
# Docs routes are mounted manually (docs_url/openapi_url disabled above) so they can
# sit behind the optional docs password.
