"""
scaffold_service.db.repositories.resolver

Locate the database client's delegate for a model name.
"""

from __future__ import annotations

from typing import Any, Protocol

from scaffold_service.db.registry import ModelName, get_descriptor
from scaffold_service.errors import DelegateNotFoundError


class Delegate(Protocol):
    async def create(self, **kwargs: Any) -> Any: ...
    async def create_many(self, **kwargs: Any) -> Any: ...
    async def count(self, **kwargs: Any) -> Any: ...
    async def find_unique(self, **kwargs: Any) -> Any: ...
    async def find_first(self, **kwargs: Any) -> Any: ...
    async def find_many(self, **kwargs: Any) -> Any: ...
    async def update(self, **kwargs: Any) -> Any: ...
    async def upsert(self, **kwargs: Any) -> Any: ...
    async def update_many(self, **kwargs: Any) -> Any: ...
    async def delete(self, **kwargs: Any) -> Any: ...
    async def delete_many(self, **kwargs: Any) -> Any: ...


class SupportsDelegates(Protocol):
    def delegate(self, key: str) -> Delegate | None: ...


def resolve_delegate(client: SupportsDelegates, model: ModelName | str) -> Delegate:
    """
    Precondition: `client` is not None. Absence of the client is handled by the
    repository factory, which never calls this in degraded mode.
    """

    descriptor = get_descriptor(model)
    delegate = client.delegate(descriptor.delegate_key)
    if delegate is None:
        raise DelegateNotFoundError(descriptor.name.value, descriptor.delegate_key)
    return delegate
