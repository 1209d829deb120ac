"""Review type service, including product review ↔ review type mappings.

Mappings are insert/read only: a rating, once recorded, is not edited here.
"""


from sqlalchemy.ext.asyncio import AsyncSession

from catalog.core.caching import CacheManager
from catalog.core.events import EventPublisher
from catalog.core.exceptions import InvalidArgumentError
from catalog.domain.review_type import ProductReviewReviewTypeMapping, ReviewType
from catalog.repositories.review_type import (
    ProductReviewReviewTypeMappingRepository,
    ReviewTypeRepository,
)
from catalog.services.base import CachedEntityService
from catalog.services.cache_keys import PRODUCT_REVIEW_REVIEW_TYPE_MAPPINGS_ALL, REVIEW_TYPES_ALL


class ReviewTypeService(CachedEntityService[ReviewType]):
    repository_class = ReviewTypeRepository
    all_cache_key = REVIEW_TYPES_ALL
    # mapping rows cascade with their review type
    related_cache_prefixes = (PRODUCT_REVIEW_REVIEW_TYPE_MAPPINGS_ALL.prefix,)

    def __init__(self, session: AsyncSession, cache: CacheManager, events: EventPublisher):
        super().__init__(session, cache, events)
        self._mapping_repo = ProductReviewReviewTypeMappingRepository(session)

    async def get_mappings_by_product_review_id(
        self, product_review_id: int
    ) -> list[ProductReviewReviewTypeMapping]:
        key = PRODUCT_REVIEW_REVIEW_TYPE_MAPPINGS_ALL.create(product_review_id)
        return await self._cache.get_or_create(
            key, lambda: self._mapping_repo.list_by_product_review_id(product_review_id)
        )

    async def insert_mapping(self, mapping: ProductReviewReviewTypeMapping) -> None:
        if mapping is None:
            raise InvalidArgumentError("product_review_review_type_mapping")
        mapping = await self._mapping_repo.insert(mapping)
        await self._cache.remove_by_prefix(PRODUCT_REVIEW_REVIEW_TYPE_MAPPINGS_ALL.prefix)
        await self._events.entity_inserted(mapping)
