"""Generic async repository: get-by-id, queryable table, insert, update, delete."""

from __future__ import annotations

from typing import Generic, TypeVar

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.db.base import Base

ModelT = TypeVar("ModelT", bound=Base)


class BaseRepository(Generic[ModelT]):
    """Generic CRUD repository over one ORM model.

    Each write commits before returning, so callers act on durable rows
    only. Identity is assigned by the database on insert.
    """

    model: type[ModelT]

    def __init__(self, session: AsyncSession):
        self._session = session

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    def query(self) -> Select:
        """Return the base SELECT over the model's table."""
        return select(self.model)

    async def all(self, statement: Select | None = None) -> list[ModelT]:
        result = await self._session.execute(statement if statement is not None else self.query())
        return list(result.scalars().all())

    async def get_by_id(self, entity_id: int) -> ModelT | None:
        return await self._session.get(self.model, entity_id)

    # ------------------------------------------------------------------
    # Write
    # ------------------------------------------------------------------

    async def insert(self, entity: ModelT) -> ModelT:
        self._session.add(entity)
        await self._session.commit()  # populates id
        return entity

    async def update(self, entity: ModelT) -> ModelT:
        if entity not in self._session:
            entity = await self._session.merge(entity)
        await self._session.commit()
        return entity

    async def delete(self, entity: ModelT) -> None:
        if entity not in self._session:
            entity = await self._session.merge(entity)
        await self._session.delete(entity)
        await self._session.commit()
