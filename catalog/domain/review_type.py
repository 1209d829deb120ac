"""SQLAlchemy ORM models for review types and their product review mappings."""

from __future__ import annotations

from sqlalchemy import Boolean, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from catalog.db.base import Base
from catalog.domain.mixins import DisplayOrderMixin, IdentityMixin


class ReviewType(Base, IdentityMixin, DisplayOrderMixin):
    """A named axis along which product reviews can be rated."""

    __tablename__ = "review_types"

    name: Mapped[str] = mapped_column(String(400), nullable=False)
    description: Mapped[str] = mapped_column(Text, default="", nullable=False)
    visible_to_all_customers: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    is_required: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)


class ProductReviewReviewTypeMapping(Base, IdentityMixin):
    """Rating given by one product review along one review type."""

    __tablename__ = "product_review_review_type_mappings"

    # product reviews live outside this module; plain reference
    product_review_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    review_type_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("review_types.id", ondelete="CASCADE"), nullable=False, index=True
    )
    rating: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
