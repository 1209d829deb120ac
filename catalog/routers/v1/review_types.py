"""Review type router, plus read/insert endpoints for product review mappings."""

from __future__ import annotations

from fastapi import Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.core.caching import CacheManager
from catalog.core.dependencies import get_cache, get_events
from catalog.core.events import EventPublisher
from catalog.core.response import DataResponse, ListResponse, listed
from catalog.db.base import get_db
from catalog.domain.review_type import ProductReviewReviewTypeMapping
from catalog.routers.v1.crud import build_crud_router
from catalog.schemas.review_type import (
    ReviewTypeIn,
    ReviewTypeMappingIn,
    ReviewTypeMappingOut,
    ReviewTypeOut,
)
from catalog.services.review_type import ReviewTypeService

router = build_crud_router(
    prefix="/review-types",
    tag="Review types",
    service_class=ReviewTypeService,
    schema_in=ReviewTypeIn,
    schema_out=ReviewTypeOut,
)


def _svc(
    session: AsyncSession = Depends(get_db),
    cache: CacheManager = Depends(get_cache),
    events: EventPublisher = Depends(get_events),
) -> ReviewTypeService:
    return ReviewTypeService(session, cache, events)


@router.get("/mappings/{product_review_id}", response_model=ListResponse[ReviewTypeMappingOut])
async def list_mappings(product_review_id: int, svc: ReviewTypeService = Depends(_svc)):
    """Ratings recorded by one product review, oldest first."""
    items = await svc.get_mappings_by_product_review_id(product_review_id)
    return listed([ReviewTypeMappingOut.model_validate(m) for m in items])


@router.post(
    "/mappings",
    response_model=DataResponse[ReviewTypeMappingOut],
    status_code=status.HTTP_201_CREATED,
)
async def create_mapping(body: ReviewTypeMappingIn, svc: ReviewTypeService = Depends(_svc)):
    mapping = ProductReviewReviewTypeMapping(**body.model_dump())
    await svc.insert_mapping(mapping)
    return {"data": ReviewTypeMappingOut.model_validate(mapping)}
