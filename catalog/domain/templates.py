"""SQLAlchemy ORM models for category, manufacturer and product templates.

A template points a catalog object to the view used to render it. The three
kinds share the same shape; product templates can also exclude product types.
"""

from __future__ import annotations

from typing import Optional

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from catalog.db.base import Base
from catalog.domain.mixins import DisplayOrderMixin, IdentityMixin


class CategoryTemplate(Base, IdentityMixin, DisplayOrderMixin):
    __tablename__ = "category_templates"

    name: Mapped[str] = mapped_column(String(400), nullable=False)
    view_path: Mapped[str] = mapped_column(String(400), nullable=False)


class ManufacturerTemplate(Base, IdentityMixin, DisplayOrderMixin):
    __tablename__ = "manufacturer_templates"

    name: Mapped[str] = mapped_column(String(400), nullable=False)
    view_path: Mapped[str] = mapped_column(String(400), nullable=False)


class ProductTemplate(Base, IdentityMixin, DisplayOrderMixin):
    __tablename__ = "product_templates"

    name: Mapped[str] = mapped_column(String(400), nullable=False)
    view_path: Mapped[str] = mapped_column(String(400), nullable=False)
    # Comma-separated product type ids this template cannot be used for
    ignored_product_types: Mapped[Optional[str]] = mapped_column(String(200), nullable=True)
