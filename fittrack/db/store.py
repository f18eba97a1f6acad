"""Record store: per-table CRUD over an async session.

Each table is treated as an ordered key-value store with equality and range
filtering on one field. Every call is a single statement; nothing here spans
more than one operation, so callers that read-then-write get no isolation
beyond what the session's transaction gives them.
"""

from __future__ import annotations

import uuid
from collections.abc import Mapping
from typing import Any, Generic, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from fittrack.core.errors import RecordNotFoundError
from fittrack.db.base import Base

ModelT = TypeVar("ModelT", bound=Base)


class RecordStore(Generic[ModelT]):
    """CRUD for one model class, bound to a session."""

    def __init__(self, session: AsyncSession, model: type[ModelT]):
        self.session = session
        self.model = model

    @property
    def table(self) -> str:
        return self.model.__tablename__

    def _column(self, field: str):
        try:
            return getattr(self.model, field)
        except AttributeError:
            raise ValueError(f"{self.table} has no field '{field}'") from None

    async def insert(self, fields: Mapping[str, Any]) -> uuid.UUID:
        """Insert a row and return its generated id."""
        record = self.model(**fields)
        self.session.add(record)
        await self.session.flush()
        return record.id

    async def get(self, record_id: uuid.UUID) -> ModelT | None:
        return await self.session.get(self.model, record_id)

    async def patch(self, record_id: uuid.UUID, fields: Mapping[str, Any]) -> ModelT:
        """Overwrite only the given fields. Raises RecordNotFoundError if the row is gone."""
        record = await self.get(record_id)
        if record is None:
            raise RecordNotFoundError(self.table, record_id)
        for key, value in fields.items():
            setattr(record, key, value)
        await self.session.flush()
        return record

    async def delete(self, record_id: uuid.UUID) -> bool:
        """Remove a row. Returns False when there was nothing to remove."""
        record = await self.get(record_id)
        if record is None:
            return False
        await self.session.delete(record)
        await self.session.flush()
        return True

    async def query_by_index(self, field: str, value: Any) -> list[ModelT]:
        result = await self.session.execute(
            select(self.model).where(self._column(field) == value)
        )
        return list(result.scalars().all())

    async def first_by_index(self, field: str, value: Any) -> ModelT | None:
        result = await self.session.execute(
            select(self.model).where(self._column(field) == value).limit(1)
        )
        return result.scalars().first()

    async def query_range(
        self,
        field: str,
        low: Any,
        high: Any,
        order_by: str | None = None,
    ) -> list[ModelT]:
        """Rows with low <= field <= high. Unordered unless order_by is given."""
        column = self._column(field)
        stmt = select(self.model).where(column >= low, column <= high)
        if order_by:
            stmt = stmt.order_by(self._order(order_by))
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def query_all(self, order_by: str | None = None, limit: int | None = None) -> list[ModelT]:
        """All rows; order_by takes a field name, prefix with '-' for descending."""
        stmt = select(self.model)
        if order_by:
            stmt = stmt.order_by(self._order(order_by))
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    def _order(self, order_by: str):
        if order_by.startswith("-"):
            return self._column(order_by[1:]).desc()
        return self._column(order_by).asc()
