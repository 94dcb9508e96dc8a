"""
scaffold_service.api.__main__

Entrypoint for running the service via `python -m scaffold_service.api`.
"""

from __future__ import annotations

import uvicorn

from scaffold_service.api.app import create_app
from scaffold_service.settings import get_settings


def main() -> None:
    settings = get_settings()
    app = create_app(settings=settings)

    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_config=None,  # structlog
    )


if __name__ == "__main__":
    main()
