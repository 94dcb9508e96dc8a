"""
scaffold_service.wiring

Registration table for the dependency container.

Responsibilities:
- Map each symbolic name to its factory and the names it is built from.
- Build a container with the (possibly absent) database client registered.
"""

from __future__ import annotations

from scaffold_service.container import Container, Registration
from scaffold_service.db.client import DatabaseClient
from scaffold_service.db.repositories.message import create_message_repository
from scaffold_service.modules.application.handler import create_application_handler
from scaffold_service.modules.application.service import create_application_service

DATABASE = "database"

REGISTRATIONS: dict[str, Registration] = {
    "applicationService": Registration(create_application_service),
    "applicationHandler": Registration(
        create_application_handler, inject=("applicationService",)
    ),
    "messageRepository": Registration(create_message_repository, inject=(DATABASE,)),
}


def build_container(database: DatabaseClient | None) -> Container:
    return Container(REGISTRATIONS, values={DATABASE: database})


# --- Module Notes -----------------------------------------------------------
# Names are part of the lookup contract (routers resolve by name); rename with care.
