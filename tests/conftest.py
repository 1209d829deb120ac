"""
Pytest configuration and fixtures for catalog tests.

Each test gets a fresh in-memory SQLite database, cache and event publisher.
"""

from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

import catalog.domain  # noqa: F401  (registers all tables on Base.metadata)
from catalog.core.caching import MemoryCacheManager
from catalog.core.events import EntityEvent, EventPublisher
from catalog.db.base import Base, enable_sqlite_foreign_keys, get_db
from catalog.main import create_app

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


class RecordingConsumer:
    """Event consumer that keeps every event it receives."""

    def __init__(self):
        self.events: list[EntityEvent] = []

    def __call__(self, event: EntityEvent) -> None:
        self.events.append(event)

    def clear(self) -> None:
        self.events.clear()


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(engine)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db_session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    async with session_factory() as session:
        yield session
        await session.rollback()


@pytest.fixture
def cache() -> MemoryCacheManager:
    return MemoryCacheManager()


@pytest.fixture
def recorder() -> RecordingConsumer:
    return RecordingConsumer()


@pytest.fixture
def events(recorder) -> EventPublisher:
    publisher = EventPublisher()
    publisher.subscribe(recorder)
    return publisher


@pytest_asyncio.fixture
async def client(session_factory, cache, events) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client against an app wired to the test database."""
    app = create_app(cache=cache, events=events)

    async def _override_get_db():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = _override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
