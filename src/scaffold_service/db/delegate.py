"""
scaffold_service.db.delegate

Per-model delegate: the operation set the database client exposes for one model.

Responsibilities:
- Implement the eleven CRUD operations over an async session factory.
- Accept keyword query arguments (`where`, `data`, `select`, `order_by`, `skip`, `take`).
- Return plain dicts, lists of dicts, ints or `{"count": n}` batch payloads.

Each call runs in its own session and commits before returning.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from sqlalchemy import delete as sa_delete
from sqlalchemy import func, select as sa_select
from sqlalchemy import update as sa_update
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from scaffold_service.db.filters import (
    OrderBy,
    Select,
    Where,
    build_order_by,
    build_where,
    check_fields,
    selected_fields,
    to_dict,
)
from scaffold_service.db.registry import ModelDescriptor
from scaffold_service.errors import RecordNotFoundError


class ModelDelegate:
    def __init__(
        self,
        descriptor: ModelDescriptor,
        session_factory: async_sessionmaker[AsyncSession],
    ) -> None:
        self._descriptor = descriptor
        self._model = descriptor.model
        self._session_factory = session_factory

    @property
    def key(self) -> str:
        return self._descriptor.delegate_key

    async def create(self, *, data: dict[str, Any], select: Select | None = None) -> dict[str, Any]:
        fields = selected_fields(self._model, select)
        async with self._session_factory() as session:
            obj = self._model(**data)
            session.add(obj)
            await session.commit()
            await session.refresh(obj)
            return to_dict(obj, fields)

    async def create_many(self, *, data: Sequence[dict[str, Any]]) -> dict[str, int]:
        async with self._session_factory() as session:
            session.add_all([self._model(**row) for row in data])
            await session.commit()
        return {"count": len(data)}

    async def count(self, *, where: Where | None = None) -> int:
        stmt = sa_select(func.count()).select_from(self._model).where(*build_where(self._model, where))
        async with self._session_factory() as session:
            return (await session.execute(stmt)).scalar_one()

    async def find_unique(
        self, *, where: Where, select: Select | None = None
    ) -> dict[str, Any] | None:
        if not where:
            raise ValueError("find_unique requires a non-empty where filter")
        fields = selected_fields(self._model, select)
        stmt = sa_select(self._model).where(*build_where(self._model, where))
        async with self._session_factory() as session:
            # scalar_one_or_none raises MultipleResultsFound if the filter is not unique.
            obj = (await session.execute(stmt)).scalar_one_or_none()
        return None if obj is None else to_dict(obj, fields)

    async def find_first(
        self,
        *,
        where: Where | None = None,
        order_by: OrderBy | None = None,
        skip: int | None = None,
        select: Select | None = None,
    ) -> dict[str, Any] | None:
        rows = await self.find_many(where=where, order_by=order_by, skip=skip, take=1, select=select)
        return rows[0] if rows else None

    async def find_many(
        self,
        *,
        where: Where | None = None,
        order_by: OrderBy | None = None,
        skip: int | None = None,
        take: int | None = None,
        select: Select | None = None,
    ) -> list[dict[str, Any]]:
        fields = selected_fields(self._model, select)
        stmt = (
            sa_select(self._model)
            .where(*build_where(self._model, where))
            .order_by(*build_order_by(self._model, order_by))
        )
        if skip:
            stmt = stmt.offset(skip)
        if take is not None:
            stmt = stmt.limit(take)
        async with self._session_factory() as session:
            objs = (await session.execute(stmt)).scalars().all()
        return [to_dict(obj, fields) for obj in objs]

    async def update(
        self, *, where: Where, data: dict[str, Any], select: Select | None = None
    ) -> dict[str, Any]:
        fields = selected_fields(self._model, select)
        # setattr would accept any name; unknown fields must not vanish silently.
        check_fields(self._model, data)
        async with self._session_factory() as session:
            obj = await self._locked_one(session, where)
            for name, value in data.items():
                setattr(obj, name, value)
            await session.commit()
            await session.refresh(obj)
            return to_dict(obj, fields)

    async def upsert(
        self,
        *,
        where: Where,
        create: dict[str, Any],
        update: dict[str, Any],
        select: Select | None = None,
    ) -> dict[str, Any]:
        fields = selected_fields(self._model, select)
        check_fields(self._model, create)
        check_fields(self._model, update)
        stmt = sa_select(self._model).where(*build_where(self._model, where)).with_for_update()
        async with self._session_factory() as session:
            obj = (await session.execute(stmt)).scalar_one_or_none()
            if obj is None:
                obj = self._model(**create)
                session.add(obj)
            else:
                for name, value in update.items():
                    setattr(obj, name, value)
            await session.commit()
            await session.refresh(obj)
            return to_dict(obj, fields)

    async def update_many(self, *, data: dict[str, Any], where: Where | None = None) -> dict[str, int]:
        stmt = (
            sa_update(self._model)
            .where(*build_where(self._model, where))
            .values(**data)
            .execution_options(synchronize_session=False)
        )
        async with self._session_factory() as session:
            result = await session.execute(stmt)
            await session.commit()
        return {"count": result.rowcount}

    async def delete(self, *, where: Where, select: Select | None = None) -> dict[str, Any]:
        fields = selected_fields(self._model, select)
        async with self._session_factory() as session:
            obj = await self._locked_one(session, where)
            snapshot = to_dict(obj, fields)
            await session.delete(obj)
            await session.commit()
        return snapshot

    async def delete_many(self, *, where: Where | None = None) -> dict[str, int]:
        stmt = (
            sa_delete(self._model)
            .where(*build_where(self._model, where))
            .execution_options(synchronize_session=False)
        )
        async with self._session_factory() as session:
            result = await session.execute(stmt)
            await session.commit()
        return {"count": result.rowcount}

    async def _locked_one(self, session: AsyncSession, where: Where) -> Any:
        if not where:
            raise ValueError(f"{self._descriptor.name} update/delete requires a where filter")
        stmt = sa_select(self._model).where(*build_where(self._model, where)).with_for_update()
        obj = (await session.execute(stmt)).scalar_one_or_none()
        if obj is None:
            raise RecordNotFoundError(self._descriptor.name.value, dict(where))
        return obj


# --- Module Notes -----------------------------------------------------------
# Delegates never catch driver errors; integrity and connectivity failures reach
# the caller unchanged.
