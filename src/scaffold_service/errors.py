"""
scaffold_service.errors

Named failure conditions raised by the data-access layer.

Responsibilities:
- Give every failure a stable code, HTTP status and diagnostic context.
- Stay free of HTTP types; `api.errors` translates these into responses.

Hierarchy:
    AppError
    ├── NotFoundError              -> 404
    ├── RecordNotFoundError        -> 404 (live delegate update/delete miss)
    ├── DelegateNotFoundError      -> 500
    └── ServiceUnavailableError    -> 503
        └── DatabaseUnavailableError
"""

from __future__ import annotations

from typing import Any


class AppError(Exception):
    status_code: int = 500
    code: str = "internal_error"

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        self.message = message
        self.context = context or {}
        super().__init__(message)


class NotFoundError(AppError):
    """Raised by "or-fail" reads when the lookup succeeds but matches nothing."""

    status_code = 404
    code = "not_found"

    def __init__(self, entity: str) -> None:
        self.entity = entity
        super().__init__(f"{entity} not found.", {"entity": entity})


class RecordNotFoundError(AppError):
    """Raised by a live delegate when `update`/`delete` has no row to act on."""

    status_code = 404
    code = "record_not_found"

    def __init__(self, model: str, where: dict[str, Any]) -> None:
        self.model = model
        self.where = where
        super().__init__(
            f"No {model} record matches the given filter.", {"model": model, "where": where}
        )


class DelegateNotFoundError(AppError):
    code = "delegate_not_found"

    def __init__(self, model: str, key: str) -> None:
        self.model = model
        self.key = key
        super().__init__(
            f"Database client has no delegate {key!r} for model {model}.",
            {"model": model, "key": key},
        )


class ServiceUnavailableError(AppError):
    status_code = 503
    code = "service_unavailable"

    def __init__(
        self,
        message: str = "Database service unavailable.",
        context: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, context)


class DatabaseUnavailableError(ServiceUnavailableError):
    """Raised by mutating operations of a repository built without a database client."""

    code = "database_unavailable"

    def __init__(self, model: str) -> None:
        self.model = model
        super().__init__(
            f"Database connection not available for {model} repository.", {"model": model}
        )


# --- Module Notes -----------------------------------------------------------
# DatabaseUnavailableError subclasses ServiceUnavailableError so callers can
# catch "no database" with one except clause regardless of which layer raised it.
