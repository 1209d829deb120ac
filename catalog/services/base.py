"""Cached CRUD service shared by every catalog lookup entity.

How to add a new lookup service:
  1. Add the repository in catalog/repositories/
  2. Add an `..._ALL` key in catalog/services/cache_keys.py
  3. class MyEntityService(CachedEntityService[MyEntity]):
         repository_class = MyEntityRepository
         all_cache_key = MY_ENTITIES_ALL

Rule: No FastAPI here. Writes commit first, then invalidate, then publish.
"""

from __future__ import annotations

from typing import Generic, TypeVar

from sqlalchemy.ext.asyncio import AsyncSession

from catalog.core.caching import CacheKey, CacheManager
from catalog.core.events import EventPublisher
from catalog.core.exceptions import InvalidArgumentError
from catalog.db.base import Base
from catalog.repositories.base import BaseRepository

ModelT = TypeVar("ModelT", bound=Base)


class CachedEntityService(Generic[ModelT]):
    """Read-through cached listing plus notified writes for one entity kind."""

    repository_class: type[BaseRepository[ModelT]]
    all_cache_key: CacheKey
    # other cached lists a write to this kind makes stale
    related_cache_prefixes: tuple[str, ...] = ()

    def __init__(self, session: AsyncSession, cache: CacheManager, events: EventPublisher):
        self._repo = self.repository_class(session)
        self._cache = cache
        self._events = events

    @property
    def entity_name(self) -> str:
        return self.repository_class.model.__name__

    async def get_by_id(self, entity_id: int) -> ModelT | None:
        """Return the entity, or None when absent. Id 0 never hits storage."""
        if entity_id == 0:
            return None
        return await self._repo.get_by_id(entity_id)

    async def get_all(self) -> list[ModelT]:
        """All entities ordered by (display_order, id)."""
        model = self.repository_class.model

        async def load() -> list[ModelT]:
            return await self._repo.all(
                self._repo.query().order_by(model.display_order, model.id)
            )

        return await self._cache.get_or_create(self.all_cache_key, load)

    async def insert(self, entity: ModelT) -> None:
        if entity is None:
            raise InvalidArgumentError(self._argument_name)
        entity = await self._repo.insert(entity)
        await self._invalidate()
        await self._events.entity_inserted(entity)

    async def update(self, entity: ModelT) -> None:
        if entity is None:
            raise InvalidArgumentError(self._argument_name)
        entity = await self._repo.update(entity)
        await self._invalidate()
        await self._events.entity_updated(entity)

    async def delete(self, entity: ModelT) -> None:
        if entity is None:
            raise InvalidArgumentError(self._argument_name)
        await self._repo.delete(entity)
        await self._invalidate()
        await self._events.entity_deleted(entity)

    async def _invalidate(self) -> None:
        for prefix in (self.all_cache_key.prefix, *self.related_cache_prefixes):
            await self._cache.remove_by_prefix(prefix)

    @property
    def _argument_name(self) -> str:
        return self.repository_class.model.__tablename__.rstrip("s")
