"""
scaffold_service.modules.application.handler

HTTP-facing handler for application endpoints.
"""

from __future__ import annotations

from starlette.requests import Request
from starlette.responses import PlainTextResponse, Response

from scaffold_service.modules.application.service import ApplicationService


class ApplicationHandler:
    def __init__(self, application_service: ApplicationService) -> None:
        self._service = application_service

    async def health_checker(self, _request: Request) -> Response:
        data = await self._service.health_checker()
        return PlainTextResponse(data)


def create_application_handler(application_service: ApplicationService) -> ApplicationHandler:
    return ApplicationHandler(application_service)
