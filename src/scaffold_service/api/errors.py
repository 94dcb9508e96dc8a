"""
scaffold_service.api.errors

HTTP error boundary.

Responsibilities:
- Translate `AppError` subclasses into JSON responses with their status codes.
- Log server-side failures; client errors are returned without noise.
"""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from scaffold_service.errors import AppError
from scaffold_service.observability.logging import get_logger

log = get_logger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(AppError)
    async def handle_app_error(_request: Request, exc: AppError) -> JSONResponse:
        if exc.status_code >= 500:
            log.warning("request_failed", error=exc.code, message=exc.message, **exc.context)
        return JSONResponse(
            status_code=exc.status_code,
            content={
                "error": exc.code,
                "message": exc.message,
                "details": jsonable_encoder(exc.context),
            },
        )


# --- Module Notes -----------------------------------------------------------
# Live delegate errors that are not AppError (e.g. IntegrityError) fall through to
# Starlette's default 500 handling unchanged.
