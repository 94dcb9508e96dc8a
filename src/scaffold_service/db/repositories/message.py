"""
scaffold_service.db.repositories.message

Repository for `Message` entities.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from scaffold_service.db.registry import ModelName
from scaffold_service.db.repositories.generate import (
    Operation,
    Repository,
    extend_repository,
    generate_repository,
)
from scaffold_service.db.repositories.resolver import SupportsDelegates
from scaffold_service.errors import NotFoundError, ServiceUnavailableError


@dataclass(frozen=True, slots=True)
class MessageRepository(Repository):
    find_unique_or_fail: Operation


def create_message_repository(database: SupportsDelegates | None) -> MessageRepository:
    repository = generate_repository(database, ModelName.MESSAGE)

    async def find_unique_or_fail(**args: Any) -> dict[str, Any]:
        if database is None:
            raise ServiceUnavailableError("Database service unavailable.")
        message = await repository.find_unique(**args)
        if message is None:
            raise NotFoundError(ModelName.MESSAGE.value)
        return message

    return extend_repository(repository, MessageRepository, find_unique_or_fail=find_unique_or_fail)
