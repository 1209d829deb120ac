"""Shared Pydantic schema bases with camelCase aliases."""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """All API schemas inherit from this to auto-generate camelCase aliases."""

    model_config = {
        "populate_by_name": True,
        "alias_generator": to_camel,
        "from_attributes": True,
    }


class EntityOut(CamelModel):
    """Every persisted entity exposes its integer identity."""

    id: int


class DisplayOrderedIn(CamelModel):
    display_order: int = Field(default=0)


class HealthResponse(BaseModel):
    """Health-check response returned by /health."""
    status: str = "ok"
    app: str
    env: str
