"""Reusable SQLAlchemy column mixins."""

from __future__ import annotations

from sqlalchemy import Integer
from sqlalchemy.orm import Mapped, mapped_column


class IdentityMixin:
    """Adds the integer, database-assigned primary key.

    0 is never assigned and is treated as "no entity" by services.
    """

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)


class DisplayOrderMixin:
    """Adds display_order, the primary sort key for listings."""

    display_order: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
