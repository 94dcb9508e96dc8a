"""
scaffold_service.modules.application.service

Application-level service.

Responsibilities:
- Answer the liveness check used by `/health`.
"""

from __future__ import annotations


class ApplicationService:
    async def health_checker(self) -> str:
        return "pong"


def create_application_service() -> ApplicationService:
    return ApplicationService()


# --- Module Notes -----------------------------------------------------------
# Registered as "applicationService" in `scaffold_service.wiring`; the handler
# receives it through the container rather than importing it directly.
