"""
scaffold_service.api.routers.health

Health and readiness endpoints.

Responsibilities:
- Liveness check (`/health`) answered by the application handler.
- Readiness check (`/readyz`) with DB connectivity validation.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.responses import Response

from scaffold_service.api.deps import database_dep, resolve
from scaffold_service.db.client import DatabaseClient
from scaffold_service.errors import ServiceUnavailableError
from scaffold_service.modules.application.handler import ApplicationHandler

router = APIRouter()


@router.get("/health", response_class=PlainTextResponse)
async def health(
    request: Request,
    handler: ApplicationHandler = Depends(resolve("applicationHandler")),
) -> Response:
    return await handler.health_checker(request)


@router.get("/readyz")
async def readyz(database: DatabaseClient | None = Depends(database_dep)) -> dict[str, str]:
    # Readiness: the service is up but not ready while running without a database.
    if database is None:
        raise ServiceUnavailableError("Database service unavailable.")
    try:
        await database.connect()
    except SQLAlchemyError as e:
        raise ServiceUnavailableError(
            "Database service unavailable.", {"reason": type(e).__name__}
        ) from e
    return {"status": "ready", "database": "connected"}
