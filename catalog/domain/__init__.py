"""Domain package — all ORM models are imported here so Alembic autogenerate detects them.

Folder intent:
  templates.py    — Category, manufacturer and product templates
  review_type.py  — Review types and product review ↔ review type mappings
  mixins.py       — Shared IdentityMixin, DisplayOrderMixin
"""

from catalog.domain.review_type import ProductReviewReviewTypeMapping, ReviewType
from catalog.domain.templates import CategoryTemplate, ManufacturerTemplate, ProductTemplate

__all__ = [
    "CategoryTemplate",
    "ManufacturerTemplate",
    "ProductReviewReviewTypeMapping",
    "ProductTemplate",
    "ReviewType",
]
