"""
scaffold_service.db.registry

Closed registry of persisted model names.

Responsibilities:
- Enumerate the model names repositories can be generated for.
- Map each name to its ORM class and delegate key.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass

from scaffold_service.db.base import Base
from scaffold_service.db.models import AuditEvent, Message, User


class ModelName(enum.StrEnum):
    # Values are the external (capitalised) model identifiers.
    MESSAGE = "Message"
    USER = "User"
    AUDIT_EVENT = "AuditEvent"


def to_delegate_key(name: str) -> str:
    """Lower-case the first character only, e.g. AuditEvent -> auditEvent."""
    return name[:1].lower() + name[1:]


@dataclass(frozen=True, slots=True)
class ModelDescriptor:
    name: ModelName
    model: type[Base]

    @property
    def delegate_key(self) -> str:
        return to_delegate_key(self.name.value)


MODEL_REGISTRY: dict[ModelName, ModelDescriptor] = {
    d.name: d
    for d in (
        ModelDescriptor(ModelName.MESSAGE, Message),
        ModelDescriptor(ModelName.USER, User),
        ModelDescriptor(ModelName.AUDIT_EVENT, AuditEvent),
    )
}


def get_descriptor(name: ModelName | str) -> ModelDescriptor:
    # ModelName(...) raises ValueError for names outside the closed set.
    return MODEL_REGISTRY[ModelName(name)]


# --- Module Notes -----------------------------------------------------------
# Adding a model means: ORM class in `db.models`, enum member here, descriptor entry here.
