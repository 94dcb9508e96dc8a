from __future__ import annotations

import pytest

from scaffold_service.db.client import DatabaseClient
from scaffold_service.db.registry import MODEL_REGISTRY, ModelName, get_descriptor, to_delegate_key
from scaffold_service.db.repositories.resolver import resolve_delegate
from scaffold_service.errors import DelegateNotFoundError


@pytest.mark.parametrize(
    ("name", "key"),
    [("Message", "message"), ("User", "user"), ("AuditEvent", "auditEvent")],
)
def test_delegate_key_lowercases_only_the_first_character(name: str, key: str) -> None:
    assert to_delegate_key(name) == key
    assert get_descriptor(name).delegate_key == key


def test_registry_covers_every_model_name() -> None:
    assert set(MODEL_REGISTRY) == set(ModelName)


def test_unknown_model_name_is_rejected() -> None:
    with pytest.raises(ValueError):
        get_descriptor("message")


def test_database_client_registers_delegates_under_their_keys() -> None:
    client = DatabaseClient.from_url("sqlite+aiosqlite://")
    assert set(client.delegates) == {"message", "user", "auditEvent"}
    assert client.delegate("auditEvent").key == "auditEvent"
    assert client.delegate("AuditEvent") is None


@pytest.mark.parametrize("model", list(ModelName))
def test_resolve_delegate_looks_up_the_lowercased_key(model: ModelName, recording_client) -> None:
    client = recording_client
    delegate = resolve_delegate(client, model)
    assert client.requested == [to_delegate_key(model.value)]
    assert delegate is client.delegates[to_delegate_key(model.value)]


def test_resolve_delegate_signals_missing_delegate(recording_client_factory) -> None:
    client = recording_client_factory(keys=("user",))
    with pytest.raises(DelegateNotFoundError) as exc_info:
        resolve_delegate(client, "Message")
    assert exc_info.value.model == "Message"
    assert exc_info.value.key == "message"
