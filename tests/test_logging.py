from __future__ import annotations

from scaffold_service.observability.logging import service_context


def test_service_context_stamps_fixed_fields() -> None:
    processor = service_context(service="scaffold-service", env="test")

    event = processor(None, "info", {"event": "startup"})

    assert event == {"event": "startup", "service": "scaffold-service", "env": "test"}


def test_service_context_keeps_explicit_event_values() -> None:
    processor = service_context(service="scaffold-service", env="test")

    event = processor(None, "info", {"event": "startup", "env": "override"})

    assert event["env"] == "override"
