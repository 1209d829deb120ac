"""Catalog API — FastAPI application factory."""


import logging
import sys
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from catalog.core.caching import CacheManager, MemoryCacheManager
from catalog.core.config import settings
from catalog.core.events import EventPublisher, log_entity_event
from catalog.core.exceptions import register_exception_handlers
from catalog.db.base import create_all
from catalog.schemas.common import HealthResponse

# v1 routers
from catalog.routers.v1.review_types import router as review_types_v1_router
from catalog.routers.v1.templates import (
    category_templates_router,
    manufacturer_templates_router,
    product_templates_router,
)


def _configure_logging() -> None:
    """Set up structured logging for the application."""
    level = logging.DEBUG if settings.is_development else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )
    # Quiet noisy libraries
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)


@asynccontextmanager
async def _lifespan(app: FastAPI) -> AsyncIterator[None]:
    if settings.is_development:
        await create_all()
    yield
    await app.state.cache.clear()


def create_app(
    cache: CacheManager | None = None,
    events: EventPublisher | None = None,
) -> FastAPI:
    _configure_logging()

    app = FastAPI(
        title=settings.app_name,
        version="1.0.0",
        docs_url="/docs" if settings.is_development else None,
        redoc_url="/redoc" if settings.is_development else None,
        lifespan=_lifespan,
    )

    # --- Shared cache + entity event publisher ---
    app.state.cache = cache or MemoryCacheManager(default_ttl=settings.cache_ttl_seconds)
    if events is None:
        events = EventPublisher()
        events.subscribe(log_entity_event)
    app.state.events = events

    # --- CORS ---
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.frontend_url],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )

    # --- Global exception handlers ---
    register_exception_handlers(app)

    # --- v1 API routes (/api/v1/*) ---
    app.include_router(category_templates_router, prefix="/api/v1")
    app.include_router(manufacturer_templates_router, prefix="/api/v1")
    app.include_router(product_templates_router, prefix="/api/v1")
    app.include_router(review_types_v1_router, prefix="/api/v1")

    # --- Health check ---
    @app.get("/health", response_model=HealthResponse, tags=["Health"])
    async def health():
        return HealthResponse(app=settings.app_name, env=settings.app_env)

    return app


app = create_app()
