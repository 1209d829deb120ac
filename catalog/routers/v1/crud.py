"""Router builder for cached lookup entities.

Every lookup kind exposes the same five endpoints:
  GET ""       — all, ordered by (displayOrder, id)
  POST ""      — insert, 201
  GET /{id}    — one, 404 when absent
  PUT /{id}    — full replace
  DELETE /{id} — 204
"""


from fastapi import APIRouter, Depends, status
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.core.caching import CacheManager
from catalog.core.dependencies import get_cache, get_events
from catalog.core.events import EventPublisher
from catalog.core.exceptions import NotFoundError
from catalog.core.response import DataResponse, ListResponse, listed
from catalog.db.base import get_db
from catalog.services.base import CachedEntityService


def build_crud_router(
    *,
    prefix: str,
    tag: str,
    service_class: type[CachedEntityService],
    schema_in: type[BaseModel],
    schema_out: type[BaseModel],
) -> APIRouter:
    router = APIRouter(prefix=prefix, tags=[tag])
    model = service_class.repository_class.model
    label = model.__name__

    # ------------------------------------------------------------------
    # Helper — instantiate service with session + app-scoped collaborators
    # ------------------------------------------------------------------

    def _svc(
        session: AsyncSession = Depends(get_db),
        cache: CacheManager = Depends(get_cache),
        events: EventPublisher = Depends(get_events),
    ) -> CachedEntityService:
        return service_class(session, cache, events)

    async def _get_or_404(svc: CachedEntityService, entity_id: int):
        entity = await svc.get_by_id(entity_id)
        if entity is None:
            raise NotFoundError(label, entity_id)
        return entity

    # ------------------------------------------------------------------
    # Endpoints
    # ------------------------------------------------------------------

    @router.get("", response_model=ListResponse[schema_out])
    async def list_all(svc: CachedEntityService = Depends(_svc)):
        items = await svc.get_all()
        return listed([schema_out.model_validate(i) for i in items])

    @router.post("", response_model=DataResponse[schema_out], status_code=status.HTTP_201_CREATED)
    async def create(body: schema_in, svc: CachedEntityService = Depends(_svc)):  # type: ignore[valid-type]
        entity = model(**body.model_dump())
        await svc.insert(entity)
        return {"data": schema_out.model_validate(entity)}

    @router.get("/{entity_id}", response_model=DataResponse[schema_out])
    async def get_one(entity_id: int, svc: CachedEntityService = Depends(_svc)):
        entity = await _get_or_404(svc, entity_id)
        return {"data": schema_out.model_validate(entity)}

    @router.put("/{entity_id}", response_model=DataResponse[schema_out])
    async def replace(
        entity_id: int,
        body: schema_in,  # type: ignore[valid-type]
        svc: CachedEntityService = Depends(_svc),
    ):
        entity = await _get_or_404(svc, entity_id)
        for field, value in body.model_dump().items():
            setattr(entity, field, value)
        await svc.update(entity)
        return {"data": schema_out.model_validate(entity)}

    @router.delete("/{entity_id}", status_code=status.HTTP_204_NO_CONTENT)
    async def delete(entity_id: int, svc: CachedEntityService = Depends(_svc)):
        entity = await _get_or_404(svc, entity_id)
        await svc.delete(entity)

    return router
