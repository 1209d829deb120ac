from catalog.domain.review_type import ProductReviewReviewTypeMapping, ReviewType
from catalog.repositories.base import BaseRepository


class ReviewTypeRepository(BaseRepository[ReviewType]):
    model = ReviewType


class ProductReviewReviewTypeMappingRepository(BaseRepository[ProductReviewReviewTypeMapping]):
    model = ProductReviewReviewTypeMapping

    async def list_by_product_review_id(
        self, product_review_id: int
    ) -> list[ProductReviewReviewTypeMapping]:
        return await self.all(
            self.query()
            .where(self.model.product_review_id == product_review_id)
            .order_by(self.model.id)
        )
