"""
scaffold_service.api.deps

FastAPI dependency wiring for the API layer.

Responsibilities:
- Provide dependency functions for container lookups and the database client.
- Encapsulate app.state access patterns.
"""

from __future__ import annotations

from typing import Any

from fastapi import Depends, Request

from scaffold_service.container import Container
from scaffold_service.db.client import DatabaseClient
from scaffold_service.wiring import DATABASE


def container_from_app(request: Request) -> Container:
    # The container is built during app lifespan in `scaffold_service.api.app.create_app`.
    return request.app.state.container  # type: ignore[attr-defined]


def resolve(name: str):
    def _dep(container: Container = Depends(container_from_app)) -> Any:
        return container.resolve(name)

    return _dep


def database_dep(container: Container = Depends(container_from_app)) -> DatabaseClient | None:
    return container.resolve(DATABASE)
