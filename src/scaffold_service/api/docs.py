"""
scaffold_service.api.docs

OpenAPI document and Swagger UI routes, optionally behind HTTP basic auth.
"""

from __future__ import annotations

import secrets

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.openapi.docs import get_swagger_ui_html
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.security import HTTPBasic, HTTPBasicCredentials
from starlette.status import HTTP_401_UNAUTHORIZED

from scaffold_service.settings import Settings

_basic = HTTPBasic(auto_error=False)


def _docs_guard(password: str):
    def _dep(creds: HTTPBasicCredentials | None = Depends(_basic)) -> None:
        # Any username is accepted; only the password is checked.
        if creds is None or not secrets.compare_digest(
            creds.password.encode(), password.encode()
        ):
            raise HTTPException(
                status_code=HTTP_401_UNAUTHORIZED,
                detail="Invalid docs credentials",
                headers={"WWW-Authenticate": "Basic"},
            )

    return _dep


def build_docs_router(settings: Settings) -> APIRouter:
    guard = [Depends(_docs_guard(settings.docs_password))] if settings.docs_password else []
    router = APIRouter(include_in_schema=False, dependencies=guard)

    @router.get("/openapi.json")
    async def openapi(request: Request) -> JSONResponse:
        return JSONResponse(request.app.openapi())

    @router.get("/docs")
    async def swagger_ui(request: Request) -> HTMLResponse:
        return get_swagger_ui_html(openapi_url="/openapi.json", title=request.app.title)

    return router
