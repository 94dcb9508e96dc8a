"""
scaffold_service.db.client

Process-wide database client.

Responsibilities:
- Own the async engine and session factory.
- Expose one delegate per registered model, keyed by delegate key.
- Check connectivity on startup and dispose the pool on shutdown.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine

from scaffold_service.db.delegate import ModelDelegate
from scaffold_service.db.registry import MODEL_REGISTRY
from scaffold_service.db.session import create_engine, create_sessionmaker


class DatabaseClient:
    def __init__(self, engine: AsyncEngine) -> None:
        self._engine = engine
        session_factory = create_sessionmaker(engine)
        self._delegates = MappingProxyType(
            {
                descriptor.delegate_key: ModelDelegate(descriptor, session_factory)
                for descriptor in MODEL_REGISTRY.values()
            }
        )

    @classmethod
    def from_url(cls, database_url: str) -> DatabaseClient:
        return cls(create_engine(database_url))

    @property
    def engine(self) -> AsyncEngine:
        return self._engine

    @property
    def delegates(self) -> Mapping[str, ModelDelegate]:
        return self._delegates

    def delegate(self, key: str) -> ModelDelegate | None:
        return self._delegates.get(key)

    async def connect(self) -> None:
        # Opening a connection and running a trivial query surfaces bad URLs/credentials early.
        async with self._engine.connect() as conn:
            await conn.execute(text("SELECT 1"))

    async def disconnect(self) -> None:
        await self._engine.dispose()


# --- Module Notes -----------------------------------------------------------
# The client is shared read-only state: nothing outside this module reconfigures it.
