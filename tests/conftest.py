"""
tests.conftest

Shared fixtures.

Responsibilities:
- Build test settings pointing at a throwaway SQLite file.
- Provide a live database client with tables created.
- Provide a recording substitute client for pass-through checks.
"""

from __future__ import annotations

from collections.abc import AsyncIterator, Callable
from pathlib import Path
from typing import Any

import pytest
import pytest_asyncio

from scaffold_service.db.client import DatabaseClient
from scaffold_service.db.init_db import init_db
from scaffold_service.db.registry import MODEL_REGISTRY
from scaffold_service.db.repositories.generate import OPERATIONS
from scaffold_service.settings import Settings


def sqlite_url(path: Path) -> str:
    return f"sqlite+aiosqlite:///{path}"


@pytest.fixture
def settings_factory(tmp_path: Path) -> Callable[..., Settings]:
    def _make(**overrides: Any) -> Settings:
        values: dict[str, Any] = {
            "env": "test",
            "port": 8080,
            "application_secret": "test-secret",
            "application_url": "http://test",
            "database_url": sqlite_url(tmp_path / "app.db"),
        }
        values.update(overrides)
        return Settings(**values)

    return _make


@pytest_asyncio.fixture
async def database(tmp_path: Path) -> AsyncIterator[DatabaseClient]:
    client = DatabaseClient.from_url(sqlite_url(tmp_path / "repo.db"))
    await init_db(client.engine)
    try:
        yield client
    finally:
        await client.disconnect()


class RecordingDelegate:
    """Stands in for a model delegate: records every call and returns a fixed sentinel."""

    def __init__(self, key: str) -> None:
        self.key = key
        self.calls: list[tuple[str, tuple[Any, ...], dict[str, Any]]] = []
        self.results: dict[str, Any] = {}
        for op in OPERATIONS:
            self.results[op] = object()
            setattr(self, op, self._recorder(op))

    def _recorder(self, op: str):
        async def call(*args: Any, **kwargs: Any) -> Any:
            self.calls.append((op, args, kwargs))
            return self.results[op]

        return call


class RecordingClient:
    def __init__(self, keys: tuple[str, ...] | None = None) -> None:
        if keys is None:
            keys = tuple(d.delegate_key for d in MODEL_REGISTRY.values())
        self.delegates = {key: RecordingDelegate(key) for key in keys}
        self.requested: list[str] = []

    def delegate(self, key: str) -> RecordingDelegate | None:
        self.requested.append(key)
        return self.delegates.get(key)


@pytest.fixture
def recording_client() -> RecordingClient:
    return RecordingClient()


@pytest.fixture
def recording_client_factory() -> Callable[..., RecordingClient]:
    return RecordingClient
