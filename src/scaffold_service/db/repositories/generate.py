"""
scaffold_service.db.repositories.generate

Generic repository factory.

Responsibilities:
- Bind a model's delegate operations into an immutable `Repository`.
- Produce an inert repository when no database client is available:
  reads return empty values, writes raise `DatabaseUnavailableError`.
- Provide the single helper entity-specific repositories extend through.

Example:
    users = generate_repository(client, "User")
    user = await users.create(data={"email": "a@example.com"}, select=["id"])
    await users.delete(where={"id": user["id"]})
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass, fields
from typing import Any, TypeVar

from scaffold_service.db.registry import ModelName, get_descriptor
from scaffold_service.db.repositories.resolver import SupportsDelegates, resolve_delegate
from scaffold_service.errors import DatabaseUnavailableError

Operation = Callable[..., Awaitable[Any]]

READ_OPERATIONS = ("count", "find_unique", "find_first", "find_many")
MUTATING_OPERATIONS = (
    "create",
    "create_many",
    "update",
    "upsert",
    "update_many",
    "delete",
    "delete_many",
)
OPERATIONS = READ_OPERATIONS + MUTATING_OPERATIONS


@dataclass(frozen=True, slots=True)
class Repository:
    model: ModelName
    create: Operation
    create_many: Operation
    count: Operation
    find_unique: Operation
    find_first: Operation
    find_many: Operation
    update: Operation
    upsert: Operation
    update_many: Operation
    delete: Operation
    delete_many: Operation


@dataclass(frozen=True, slots=True)
class Live:
    client: SupportsDelegates


@dataclass(frozen=True, slots=True)
class Unavailable:
    pass


UNAVAILABLE = Unavailable()

DatabaseConnection = Live | Unavailable


def connection_of(client: SupportsDelegates | None) -> DatabaseConnection:
    return UNAVAILABLE if client is None else Live(client)


def generate_repository(
    client: SupportsDelegates | None, model: ModelName | str
) -> Repository:
    """
    Build the CRUD repository for `model`.

    With a client, every operation is the delegate's own bound method: arguments
    and results pass through untouched. Without one, construction still succeeds.
    """

    name = get_descriptor(model).name
    connection = connection_of(client)
    if isinstance(connection, Live):
        return _bind_live(connection.client, name)
    return _build_unavailable(name)


def _bind_live(client: SupportsDelegates, model: ModelName) -> Repository:
    delegate = resolve_delegate(client, model)
    return Repository(model=model, **{op: getattr(delegate, op) for op in OPERATIONS})


def _build_unavailable(model: ModelName) -> Repository:
    # Reads fail soft (display paths tolerate emptiness); writes fail loudly.

    async def find_many(*_args: Any, **_kwargs: Any) -> list[Any]:
        return []

    async def count(*_args: Any, **_kwargs: Any) -> int:
        return 0

    async def find_none(*_args: Any, **_kwargs: Any) -> None:
        return None

    async def refuse(*_args: Any, **_kwargs: Any) -> Any:
        raise DatabaseUnavailableError(model.value)

    return Repository(
        model=model,
        find_many=find_many,
        count=count,
        find_unique=find_none,
        find_first=find_none,
        **{op: refuse for op in MUTATING_OPERATIONS},
    )


R = TypeVar("R", bound=Repository)


def extend_repository(base: Repository, cls: type[R], **extra: Operation) -> R:
    """Copy every generic operation of `base` into `cls` and add `extra`."""
    return cls(**{f.name: getattr(base, f.name) for f in fields(base)}, **extra)
