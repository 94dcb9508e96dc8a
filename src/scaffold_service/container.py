"""
scaffold_service.container

Name-based dependency container.

Responsibilities:
- Hold an explicit registration table: symbolic name -> factory + the names it needs.
- Resolve a name by resolving its dependencies first, then calling the factory.
- Cache singleton instances for the life of the container.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any, Literal


class ResolutionError(LookupError):
    pass


@dataclass(frozen=True, slots=True)
class Registration:
    factory: Callable[..., Any]
    inject: tuple[str, ...] = ()
    lifetime: Literal["singleton", "transient"] = "singleton"


class Container:
    def __init__(
        self,
        registrations: Mapping[str, Registration],
        *,
        values: Mapping[str, Any] | None = None,
    ) -> None:
        self._registrations = dict(registrations)
        # Pre-built values (e.g. the database client); None is a legitimate value.
        self._instances: dict[str, Any] = dict(values or {})
        self._resolving: list[str] = []

    @property
    def names(self) -> frozenset[str]:
        return frozenset(self._registrations) | frozenset(self._instances)

    def resolve(self, name: str) -> Any:
        if name in self._instances:
            return self._instances[name]
        registration = self._registrations.get(name)
        if registration is None:
            raise ResolutionError(f"No registration named {name!r}")
        if name in self._resolving:
            chain = " -> ".join([*self._resolving, name])
            raise ResolutionError(f"Circular dependency: {chain}")

        self._resolving.append(name)
        try:
            instance = registration.factory(*(self.resolve(dep) for dep in registration.inject))
        finally:
            self._resolving.pop()

        if registration.lifetime == "singleton":
            self._instances[name] = instance
        return instance


# --- Module Notes -----------------------------------------------------------
# The registration table itself lives in `scaffold_service.wiring`; this module
# knows nothing about concrete services.
