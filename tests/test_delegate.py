"""
tests.test_delegate

SQLAlchemy-backed delegate operations against a file-backed SQLite database.
"""

from __future__ import annotations

import pytest
from sqlalchemy.exc import IntegrityError

from scaffold_service.db.repositories.generate import generate_repository
from scaffold_service.errors import RecordNotFoundError


@pytest.fixture
def messages(database):
    return generate_repository(database, "Message")


@pytest.fixture
def users(database):
    return generate_repository(database, "User")


@pytest.mark.asyncio
async def test_create_returns_plain_dict_with_generated_fields(messages) -> None:
    row = await messages.create(data={"content": "hello"})

    assert set(row) == {"id", "content", "created_at", "updated_at"}
    assert row["content"] == "hello"
    assert len(row["id"]) == 36


@pytest.mark.asyncio
async def test_select_projects_fields(messages) -> None:
    row = await messages.create(data={"content": "hello"}, select=["id"])
    assert set(row) == {"id"}

    found = await messages.find_unique(where={"id": row["id"]}, select={"content": True, "id": False})
    assert found == {"content": "hello"}


@pytest.mark.asyncio
async def test_find_many_filters_orders_and_paginates(messages) -> None:
    created = await messages.create_many(
        data=[{"content": "apple"}, {"content": "banana"}, {"content": "cherry"}, {"content": "date"}]
    )
    assert created == {"count": 4}

    names = [r["content"] for r in await messages.find_many(order_by={"content": "desc"})]
    assert names == ["date", "cherry", "banana", "apple"]

    page = await messages.find_many(order_by=[{"content": "asc"}], skip=1, take=2)
    assert [r["content"] for r in page] == ["banana", "cherry"]

    matching = await messages.find_many(where={"content": {"contains": "an"}})
    assert [r["content"] for r in matching] == ["banana"]

    either = await messages.find_many(
        where={"OR": [{"content": "apple"}, {"content": {"starts_with": "d"}}]},
        order_by={"content": "asc"},
    )
    assert [r["content"] for r in either] == ["apple", "date"]

    excluded = await messages.find_many(
        where={"content": {"not": {"in": ["apple", "banana"]}}}, order_by={"content": "asc"}
    )
    assert [r["content"] for r in excluded] == ["cherry", "date"]


@pytest.mark.asyncio
async def test_count_and_find_first(messages) -> None:
    await messages.create_many(data=[{"content": "a1"}, {"content": "a2"}, {"content": "b1"}])

    assert await messages.count() == 3
    assert await messages.count(where={"content": {"starts_with": "a"}}) == 2

    first = await messages.find_first(where={"content": {"gte": "a2"}}, order_by={"content": "asc"})
    assert first["content"] == "a2"
    assert await messages.find_first(where={"content": "zzz"}) is None


@pytest.mark.asyncio
async def test_update_and_missing_update(messages) -> None:
    row = await messages.create(data={"content": "before"})

    updated = await messages.update(where={"id": row["id"]}, data={"content": "after"})
    assert updated["content"] == "after"
    assert updated["id"] == row["id"]

    with pytest.raises(RecordNotFoundError) as exc_info:
        await messages.update(where={"id": "missing"}, data={"content": "x"})
    assert exc_info.value.model == "Message"


@pytest.mark.asyncio
async def test_upsert_creates_then_updates(users) -> None:
    args = {
        "where": {"email": "a@example.com"},
        "create": {"email": "a@example.com", "name": "Ada"},
        "update": {"name": "Ada L."},
    }

    created = await users.upsert(**args)
    assert created["name"] == "Ada"

    updated = await users.upsert(**args)
    assert updated["id"] == created["id"]
    assert updated["name"] == "Ada L."
    assert await users.count() == 1


@pytest.mark.asyncio
async def test_batch_update_and_delete_report_counts(messages) -> None:
    await messages.create_many(data=[{"content": "x"}, {"content": "x"}, {"content": "y"}])

    assert await messages.update_many(where={"content": "x"}, data={"content": "z"}) == {"count": 2}
    assert await messages.count(where={"content": "z"}) == 2

    assert await messages.delete_many(where={"content": "z"}) == {"count": 2}
    assert await messages.delete_many() == {"count": 1}
    assert await messages.count() == 0


@pytest.mark.asyncio
async def test_delete_returns_deleted_record(messages) -> None:
    row = await messages.create(data={"content": "bye"})

    deleted = await messages.delete(where={"id": row["id"]})

    assert deleted["content"] == "bye"
    assert await messages.find_unique(where={"id": row["id"]}) is None
    with pytest.raises(RecordNotFoundError):
        await messages.delete(where={"id": row["id"]})


@pytest.mark.asyncio
async def test_driver_errors_pass_through_unchanged(users) -> None:
    await users.create(data={"email": "dup@example.com"})
    with pytest.raises(IntegrityError):
        await users.create(data={"email": "dup@example.com"})


@pytest.mark.asyncio
async def test_invalid_query_arguments_are_rejected(messages) -> None:
    with pytest.raises(ValueError):
        await messages.find_many(where={"nope": 1})
    with pytest.raises(ValueError):
        await messages.find_many(where={"content": {"like": "a"}})
    with pytest.raises(ValueError):
        await messages.find_many(order_by={"content": "sideways"})
    with pytest.raises(ValueError):
        await messages.find_unique(where={})


@pytest.mark.asyncio
async def test_writes_reject_unknown_fields(messages) -> None:
    row = await messages.create(data={"content": "keep"})

    with pytest.raises(ValueError, match="conten"):
        await messages.update(where={"id": row["id"]}, data={"conten": "typo"})
    with pytest.raises(ValueError, match="bogus"):
        await messages.upsert(
            where={"id": row["id"]}, create={"content": "new"}, update={"bogus": 1}
        )
    with pytest.raises(ValueError, match="bogus"):
        await messages.upsert(
            where={"id": "missing"}, create={"bogus": 1}, update={"content": "x"}
        )

    assert await messages.find_unique(where={"id": row["id"]}, select=["content"]) == {
        "content": "keep"
    }
    assert await messages.count() == 1
